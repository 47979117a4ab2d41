# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""
Error classes for the magnetostatics module
"""

from coilcalc.base.error import CoilcalcError


class MagnetostaticsError(CoilcalcError):
    """
    The base class for magnetostatics errors.
    """


class EllipticIntegralError(MagnetostaticsError):
    """
    Error class for elliptic integral parameters outside of [0, 1].
    """

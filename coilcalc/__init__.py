# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""
Initialise the coilcalc package.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("coilcalc")
except PackageNotFoundError:
    # Running from a source checkout that has not been installed
    __version__ = "0.0.0"

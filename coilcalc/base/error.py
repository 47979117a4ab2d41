# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""
coilcalc base error class
"""

from textwrap import dedent, fill


class CoilcalcError(Exception):
    """
    Base exception class. Sub-class from this for module level Errors.
    """

    def __str__(self) -> str:
        """
        Prettier handling of the Exception strings
        """
        return fill(dedent(self.args[0]))


class LogsError(CoilcalcError):
    """
    Exception class for the logging system.
    """


class ConfigError(CoilcalcError):
    """
    Exceptions related to :class:`coilcalc.base.config.FieldMapConfig` objects.
    """

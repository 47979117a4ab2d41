# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""
Console output functions.
"""

from coilcalc.base.logs import logger_setup

LOGGER = logger_setup()


# =============================================================================
# Printing functions
# =============================================================================


def coilcalc_critical(string: str):
    """
    Standard template for coilcalc critical errors.
    """
    return LOGGER.critical(string)


def coilcalc_error(string: str):
    """
    Standard template for coilcalc errors.
    """
    return LOGGER.error(string)


def coilcalc_warn(string: str):
    """
    Standard template for coilcalc warnings.
    """
    return LOGGER.warning(string)


def coilcalc_print(string: str):
    """
    Standard template for coilcalc information messages.
    """
    return LOGGER.info(string)


def coilcalc_debug(string: str):
    """
    Standard template for coilcalc debugging.
    """
    return LOGGER.debug(string)


def coilcalc_print_clean(string: str):
    """
    Print to the logging info console with no modification.

    Parameters
    ----------
    string:
        The string to print
    """
    LOGGER.clean(string)

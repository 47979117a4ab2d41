# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""
Post-processing tools for sampled magnetic fields.
"""

import numpy as np

from coilcalc.magnetostatics.error import MagnetostaticsError

__all__ = ["field_magnitude", "mean_field_magnitude", "normalised_field"]


def _check_field_grid(field_grid: np.ndarray) -> np.ndarray:
    field_grid = np.asarray(field_grid, dtype=float)
    if field_grid.ndim != 3 or field_grid.shape[-1] != 3:  # noqa: PLR2004
        raise MagnetostaticsError(
            "A sampled field must have shape (z_count, x_count, 3), not: "
            f"{field_grid.shape}"
        )
    return field_grid


def field_magnitude(field_grid: np.ndarray) -> np.ndarray:
    """
    Magnitude of each vector of a sampled field.

    Parameters
    ----------
    field_grid:
        The sampled field of shape (z_count, x_count, 3)

    Returns
    -------
    :
        The field magnitudes of shape (z_count, x_count)
    """
    return np.linalg.norm(_check_field_grid(field_grid), axis=-1)


def mean_field_magnitude(field_grid: np.ndarray) -> float:
    """
    Mean magnitude over all the vectors of a sampled field. Used as the base
    length when scaling field arrows.

    Parameters
    ----------
    field_grid:
        The sampled field of shape (z_count, x_count, 3)

    Returns
    -------
    :
        The mean field magnitude
    """
    return float(np.mean(field_magnitude(field_grid)))


def normalised_field(field_grid: np.ndarray) -> np.ndarray:
    """
    Scale a sampled field by its mean magnitude.

    Parameters
    ----------
    field_grid:
        The sampled field of shape (z_count, x_count, 3)

    Returns
    -------
    :
        The scaled field, with a mean magnitude of 1. A field that is zero
        everywhere is returned unchanged.
    """
    field_grid = _check_field_grid(field_grid)
    mean = mean_field_magnitude(field_grid)
    if mean == 0.0:
        return field_grid.copy()
    return field_grid / mean

# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""
Sampling of the magnetic field of current loops on a regular x-z grid
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from coilcalc.base.look_and_feel import coilcalc_debug
from coilcalc.magnetostatics.baseclass import SourceGroup
from coilcalc.magnetostatics.error import MagnetostaticsError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from coilcalc.magnetostatics.current_loop import CurrentLoop

__all__ = ["SamplingGrid", "sample", "sample_grid"]


@dataclass(frozen=True)
class SamplingGrid:
    """
    Uniform lattice of points in the x-z plane at y = 0.

    Parameters
    ----------
    x_min:
        First x coordinate of the grid [mm]
    x_max:
        Last x coordinate of the grid [mm]
    x_count:
        Number of points along x (>= 2)
    z_min:
        First z coordinate of the grid [mm]
    z_max:
        Last z coordinate of the grid [mm]
    z_count:
        Number of points along z (>= 2)
    """

    x_min: float
    x_max: float
    x_count: int
    z_min: float
    z_max: float
    z_count: int

    def __post_init__(self):
        """
        Check the grid definition.

        Raises
        ------
        MagnetostaticsError
            If either point count is below 2 or a bound is not finite
        """
        for name in ("x", "z"):
            count = getattr(self, f"{name}_count")
            if int(count) != count or count < 2:  # noqa: PLR2004
                raise MagnetostaticsError(
                    f"SamplingGrid {name}_count must be an integer >= 2, not: {count}"
                )
            object.__setattr__(self, f"{name}_count", int(count))
            for bound in ("min", "max"):
                value = getattr(self, f"{name}_{bound}")
                if not np.isfinite(value):
                    raise MagnetostaticsError(
                        f"SamplingGrid {name}_{bound} must be finite, not: {value}"
                    )
                object.__setattr__(self, f"{name}_{bound}", float(value))

    @classmethod
    def from_ranges(
        cls,
        x_range: tuple[float, float, int],
        z_range: tuple[float, float, int],
    ) -> SamplingGrid:
        """
        Make a SamplingGrid from (min, max, count) triples.

        Returns
        -------
        :
            The sampling grid

        Raises
        ------
        MagnetostaticsError
            If a range is not a (min, max, count) triple
        """
        try:
            x_min, x_max, x_count = x_range
            z_min, z_max, z_count = z_range
        except (TypeError, ValueError):
            raise MagnetostaticsError(
                "x_range and z_range must be (min, max, count) triples, not: "
                f"{x_range}, {z_range}"
            ) from None
        return cls(x_min, x_max, x_count, z_min, z_max, z_count)

    @property
    def dx(self) -> float:
        """Grid spacing along x [mm]"""
        return (self.x_max - self.x_min) / (self.x_count - 1)

    @property
    def dz(self) -> float:
        """Grid spacing along z [mm]"""
        return (self.z_max - self.z_min) / (self.z_count - 1)

    @property
    def x(self) -> np.ndarray:
        """The x coordinates of the grid columns [mm]"""
        return self.x_min + np.arange(self.x_count) * self.dx

    @property
    def z(self) -> np.ndarray:
        """The z coordinates of the grid rows [mm]"""
        return self.z_min + np.arange(self.z_count) * self.dz

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns) of the grid, i.e. (z_count, x_count)"""
        return self.z_count, self.x_count

    def mesh(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Get the grid coordinates as 2-D arrays, z as the outer index.

        Returns
        -------
        xx:
            The x coordinates, shape (z_count, x_count)
        zz:
            The z coordinates, shape (z_count, x_count)
        """
        return np.meshgrid(self.x, self.z, indexing="xy")


def sample_grid(loops: Iterable[CurrentLoop], grid: SamplingGrid) -> np.ndarray:
    """
    Sample the magnetic field of a set of current loops on a grid.

    Parameters
    ----------
    loops:
        The current loops whose fields are superposed
    grid:
        The sampling grid in the x-z plane

    Returns
    -------
    :
        The field of shape (z_count, x_count, 3), where [i_z, i_x] holds
        {Bx, By, Bz} [mT] at (x[i_x], 0, z[i_z])

    Raises
    ------
    EllipticIntegralError
        If a loop geometry produces an elliptic parameter outside of [0, 1]
    """
    group = SourceGroup(loops)
    coilcalc_debug(
        f"Sampling the field of {len(group)} current loop(s) on a "
        f"{grid.x_count} x {grid.z_count} grid."
    )
    xx, zz = grid.mesh()
    field = group.field(xx, np.zeros_like(xx), zz)
    # (3, z_count, x_count) -> (z_count, x_count, 3)
    return np.moveaxis(field, 0, -1).copy()


def sample(
    loops: Iterable[CurrentLoop],
    x_range: tuple[float, float, int],
    z_range: tuple[float, float, int],
) -> np.ndarray:
    """
    Sample the magnetic field of a set of current loops on a regular grid in
    the x-z plane.

    Parameters
    ----------
    loops:
        The current loops whose fields are superposed
    x_range:
        (x_min, x_max, x_count) of the grid [mm]
    z_range:
        (z_min, z_max, z_count) of the grid [mm]

    Returns
    -------
    :
        The field of shape (z_count, x_count, 3) [mT]

    Notes
    -----
    Rows are ascending in z and columns ascending in x, with
    x = x_min + i_x * dx and z = z_min + i_z * dz.
    """
    return sample_grid(loops, SamplingGrid.from_ranges(x_range, z_range))

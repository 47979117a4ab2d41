# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""
Field map holding a set of current loops and their sampled field
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from coilcalc.base.look_and_feel import coilcalc_debug
from coilcalc.magnetostatics.error import MagnetostaticsError
from coilcalc.magnetostatics.grid import sample_grid
from coilcalc.magnetostatics.tools import mean_field_magnitude

if TYPE_CHECKING:
    from collections.abc import Iterable

    import numpy as np

    from coilcalc.base.config import FieldMapConfig
    from coilcalc.magnetostatics.current_loop import CurrentLoop
    from coilcalc.magnetostatics.grid import SamplingGrid

__all__ = ["FieldMap"]


class FieldMap:
    """
    A set of current loops and their field sampled on a grid.

    Every change to the loops or the grid re-samples the whole field.

    Parameters
    ----------
    loops:
        The current loops
    grid:
        The sampling grid
    """

    def __init__(self, loops: Iterable[CurrentLoop], grid: SamplingGrid):
        self._loops = list(loops)
        self._grid = grid
        self._field = sample_grid(self._loops, self._grid)

    @classmethod
    def from_config(cls, config: FieldMapConfig) -> FieldMap:
        """
        Make a FieldMap from a configuration.

        Returns
        -------
        :
            The field map
        """
        return cls(config.loops, config.grid)

    @property
    def loops(self) -> tuple[CurrentLoop, ...]:
        """The current loops"""
        return tuple(self._loops)

    @property
    def grid(self) -> SamplingGrid:
        """The sampling grid"""
        return self._grid

    @property
    def field(self) -> np.ndarray:
        """The sampled field of shape (z_count, x_count, 3) [mT]"""
        return self._field

    @property
    def mean_magnitude(self) -> float:
        """The mean magnitude of the sampled field [mT]"""
        return mean_field_magnitude(self._field)

    def move_loop(self, index: int, center: tuple[float, float, float]):
        """
        Move one of the loops and re-sample the field.

        Parameters
        ----------
        index:
            The index of the loop to move
        center:
            The new (x, y, z) position of the centre of the loop [mm]

        Raises
        ------
        MagnetostaticsError
            If there is no loop at the index
        """
        try:
            loop = self._loops[index]
        except IndexError:
            raise MagnetostaticsError(
                f"No current loop at index {index}, there are {len(self._loops)}."
            ) from None
        loops = list(self._loops)
        loops[index] = loop.moved_to(center)
        coilcalc_debug(f"Moving current loop {index} to {loops[index].center}.")
        self.set_loops(loops)

    def set_loops(self, loops: Iterable[CurrentLoop]):
        """
        Replace the current loops and re-sample the field.

        Parameters
        ----------
        loops:
            The new current loops
        """
        loops = list(loops)
        self._field = sample_grid(loops, self._grid)
        self._loops = loops

    def set_grid(self, grid: SamplingGrid):
        """
        Replace the sampling grid and re-sample the field.

        Parameters
        ----------
        grid:
            The new sampling grid
        """
        self._field = sample_grid(self._loops, grid)
        self._grid = grid

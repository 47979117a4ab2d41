# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""
Base classes for use in magnetostatics.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from copy import deepcopy
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ["CurrentSource", "SourceGroup"]


class CurrentSource(ABC):
    """
    Abstract base class for a current source.
    """

    current: float

    @abstractmethod
    def field(
        self,
        x: float | np.ndarray,
        y: float | np.ndarray,
        z: float | np.ndarray,
    ) -> np.ndarray:
        """
        Calculate the magnetic field at a set of coordinates.

        Parameters
        ----------
        x:
            The x coordinate(s) of the points at which to calculate the field [mm]
        y:
            The y coordinate(s) of the points at which to calculate the field [mm]
        z:
            The z coordinate(s) of the points at which to calculate the field [mm]

        Returns
        -------
        :
            The magnetic field vector {Bx, By, Bz} in [mT]
        """

    def copy(self):
        """
        Get a deepcopy of the CurrentSource.
        """
        return deepcopy(self)


class SourceGroup:
    """
    Superposition of multiple current sources.

    Parameters
    ----------
    sources:
        The current sources whose fields are summed. May be empty, in which
        case the field is zero everywhere.
    """

    sources: list[CurrentSource]

    def __init__(self, sources: Iterable[CurrentSource]):
        self.sources = list(sources)

    def __len__(self) -> int:
        """Number of sources in the group"""
        return len(self.sources)

    def field(
        self,
        x: float | np.ndarray,
        y: float | np.ndarray,
        z: float | np.ndarray,
    ) -> np.ndarray:
        """
        Calculate the magnetic field at a point.

        Parameters
        ----------
        x:
            The x coordinate(s) of the points at which to calculate the field [mm]
        y:
            The y coordinate(s) of the points at which to calculate the field [mm]
        z:
            The z coordinate(s) of the points at which to calculate the field [mm]

        Returns
        -------
        :
            The magnetic field vector {Bx, By, Bz} in [mT]
        """
        x, y, z = np.broadcast_arrays(
            np.asarray(x, dtype=float),
            np.asarray(y, dtype=float),
            np.asarray(z, dtype=float),
        )
        total = np.zeros((3, *x.shape))
        for source in self.sources:
            total += source.field(x, y, z)
        return total

    def copy(self):
        """
        Get a deepcopy of the SourceGroup.
        """
        return deepcopy(self)

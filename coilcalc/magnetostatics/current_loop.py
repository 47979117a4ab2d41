# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""
Analytical magnetic field of a thin circular current loop
"""

from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np

from coilcalc.base.constants import MU_0_2PI_MM
from coilcalc.base.look_and_feel import coilcalc_debug
from coilcalc.magnetostatics.baseclass import CurrentSource
from coilcalc.magnetostatics.elliptic import complete_elliptic_integrals
from coilcalc.magnetostatics.error import MagnetostaticsError

__all__ = ["CurrentLoop", "field_at"]


@dataclass(frozen=True)
class CurrentLoop(CurrentSource):
    """
    Thin circular current loop, centred on and perpendicular to an axis
    parallel to z.

    Parameters
    ----------
    center:
        The (x, y, z) position of the centre of the loop [mm]
    radius:
        The radius of the loop [mm]
    current:
        The current flowing in the loop [A]. Positive current produces a
        positive Bz at the centre of the loop.
    """

    center: tuple[float, float, float]
    radius: float
    current: float

    def __post_init__(self):
        """
        Normalise and check the loop geometry.

        Raises
        ------
        MagnetostaticsError
            If the centre is not a 3-D point, the radius is not strictly
            positive or the current is not finite
        """
        center = tuple(float(c) for c in np.ravel(self.center))
        if len(center) != 3:  # noqa: PLR2004
            raise MagnetostaticsError(
                f"CurrentLoop center must be an (x, y, z) point, not: {self.center}"
            )
        if not np.isfinite(self.radius) or self.radius <= 0:
            raise MagnetostaticsError(
                f"CurrentLoop radius must be strictly positive, not: {self.radius}"
            )
        if not np.isfinite(self.current):
            raise MagnetostaticsError(
                f"CurrentLoop current must be finite, not: {self.current}"
            )
        object.__setattr__(self, "center", center)
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "current", float(self.current))

    def moved_to(self, center: tuple[float, float, float]) -> CurrentLoop:
        """
        Get a copy of the loop at a new centre.

        Parameters
        ----------
        center:
            The new (x, y, z) position of the centre of the loop [mm]

        Returns
        -------
        :
            The repositioned loop
        """
        return replace(self, center=center)

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
        return field_at(self, x, y, z)


def field_at(
    loop: CurrentLoop,
    x: float | np.ndarray,
    y: float | np.ndarray,
    z: float | np.ndarray,
) -> np.ndarray:
    r"""
    Calculate the magnetic field of a circular current loop.

    Parameters
    ----------
    loop:
        The current loop
    x:
        The x coordinate(s) of the points at which to calculate the field [mm]
    y:
        The y coordinate(s) of the points at which to calculate the field [mm]
    z:
        The z coordinate(s) of the points at which to calculate the field [mm]

    Returns
    -------
    :
        The magnetic field vector {Bx, By, Bz} in [mT], of shape (3,) for a
        single point or (3, \*x.shape) for arrays of points

    Raises
    ------
    EllipticIntegralError
        If the loop geometry produces an elliptic parameter outside of [0, 1]

    Notes
    -----
    In cylindrical coordinates about the loop axis, with :math:`a` the loop
    radius and :math:`z` relative to the loop centre:

    .. math::

        d^2 &= (\rho + a)^2 + z^2, \quad m = \frac{4 \rho a}{d^2}

        B_\rho &= \frac{\mu_0 I}{2 \pi} \frac{z}{\rho d}
            \left(-K(m) + E(m) \frac{a^2 + \rho^2 + z^2}{(a - \rho)^2 + z^2}\right)

        B_z &= \frac{\mu_0 I}{2 \pi} \frac{1}{d}
            \left(K(m) + E(m) \frac{a^2 - \rho^2 - z^2}{(a - \rho)^2 + z^2}\right)

    :math:`B_\rho` is set to 0 on the axis. Both components are set to 0 on
    the wire itself, where the true field diverges. This is an approximation:
    points exactly on the wire see no field rather than a singularity.
    """
    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=float),
        np.asarray(y, dtype=float),
        np.asarray(z, dtype=float),
    )
    xc, yc, zc = loop.center
    x = x - xc
    y = y - yc
    z = z - zc

    # Transform x, y to rho, phi
    rho = np.sqrt(x**2 + y**2)
    phi = np.arctan2(y, x)
    radius = loop.radius
    z2 = z**2
    r2 = radius**2
    rho2 = rho**2

    denom = (radius - rho) ** 2 + z2
    # (rho + radius)^2 + z^2, written so that m <= 1 survives rounding
    four_rho_r = 4.0 * rho * radius
    d2 = denom + four_rho_r
    d = np.sqrt(d2)
    m = four_rho_r / d2
    ell_k, ell_e = complete_elliptic_integrals(m)

    on_axis = rho == 0.0
    on_wire = denom == 0.0
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        b_r = (
            MU_0_2PI_MM
            * loop.current
            * z
            / (rho * d)
            * (-ell_k + ell_e * (r2 + rho2 + z2) / denom)
        )
        b_z = MU_0_2PI_MM * loop.current / d * (ell_k + ell_e * (r2 - rho2 - z2) / denom)
    b_r = np.where(on_axis | on_wire, 0.0, b_r)
    b_z = np.where(on_wire, 0.0, b_z)

    if np.any(on_wire):
        coilcalc_debug(
            f"{np.count_nonzero(on_wire)} point(s) lie on the wire of {loop}, "
            "their field is set to 0."
        )

    return np.array([b_r * np.cos(phi), b_r * np.sin(phi), b_z])

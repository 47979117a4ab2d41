# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

import dataclasses

import numpy as np
import pytest
from scipy.special import ellipe, ellipk

from coilcalc.magnetostatics.current_loop import CurrentLoop, field_at
from coilcalc.magnetostatics.error import MagnetostaticsError


def loop_field_reference(radius, current, rho, z):
    """
    Radial and axial field of a loop at the origin, using scipy's elliptic
    integrals.
    """
    d = np.sqrt((rho + radius) ** 2 + z**2)
    m = 4 * rho * radius / d**2
    k, e = ellipk(m), ellipe(m)
    denom = (radius - rho) ** 2 + z**2
    b_r = 0.2 * current * z / (rho * d) * (-k + e * (radius**2 + rho**2 + z**2) / denom)
    b_z = 0.2 * current / d * (k + e * (radius**2 - rho**2 - z**2) / denom)
    return b_r, b_z


def on_axis_bz(radius, current, z):
    """Closed form axial field on the axis of a loop [mT]"""
    return 0.2 * np.pi * current * radius**2 / (radius**2 + z**2) ** 1.5


class TestCurrentLoop:
    def test_create(self):
        loop = CurrentLoop((1.0, 2.0, 3.0), 12.0, 1.23)
        assert loop.center == (1.0, 2.0, 3.0)
        assert loop.radius == 12.0
        assert loop.current == 1.23

    def test_center_normalised_to_float_tuple(self):
        loop = CurrentLoop(np.array([1, 2, 3]), 4, -2)
        assert loop.center == (1.0, 2.0, 3.0)
        assert all(isinstance(c, float) for c in loop.center)
        assert isinstance(loop.radius, float)
        assert isinstance(loop.current, float)

    def test_immutable(self, single_loop):
        with pytest.raises(dataclasses.FrozenInstanceError):
            single_loop.radius = 3.0

    @pytest.mark.parametrize("radius", [0.0, -1.0, np.nan, np.inf])
    def test_bad_radius(self, radius):
        with pytest.raises(MagnetostaticsError):
            CurrentLoop((0, 0, 0), radius, 1.0)

    @pytest.mark.parametrize("current", [np.nan, np.inf, -np.inf])
    def test_bad_current(self, current):
        with pytest.raises(MagnetostaticsError):
            CurrentLoop((0, 0, 0), 1.0, current)

    @pytest.mark.parametrize("center", [(0, 0), (0, 0, 0, 0)])
    def test_bad_center(self, center):
        with pytest.raises(MagnetostaticsError):
            CurrentLoop(center, 1.0, 1.0)

    def test_moved_to(self, single_loop):
        moved = single_loop.moved_to((3, 0, -1))
        assert moved.center == (3.0, 0.0, -1.0)
        assert moved.radius == single_loop.radius
        assert moved.current == single_loop.current
        assert single_loop.center == (0.0, 0.0, 0.0)

    def test_field_method_matches_function(self, single_loop):
        np.testing.assert_array_equal(
            single_loop.field(1.0, 2.0, 3.0), field_at(single_loop, 1.0, 2.0, 3.0)
        )


class TestFieldAt:
    @classmethod
    def setup_class(cls):
        cls.loop = CurrentLoop((0.0, 0.0, 0.0), 5.0, 1.0)

    def test_centre(self):
        bx, by, bz = field_at(self.loop, 0, 0, 0)
        assert bx == 0.0
        assert by == 0.0
        assert bz > 0.0
        # mu_0 I / (2 R)
        np.testing.assert_allclose(bz, 0.2 * np.pi / 5.0, rtol=1e-8)

    def test_negative_current_centre(self):
        loop = CurrentLoop((0.0, 0.0, 0.0), 5.0, -1.0)
        assert field_at(loop, 0, 0, 0)[2] < 0.0

    @pytest.mark.parametrize("z", [-50.0, -5.0, -0.1, 0.0, 0.1, 1.0, 5.0, 100.0])
    def test_on_axis(self, z):
        bx, by, bz = field_at(self.loop, 0, 0, z)
        assert bx == 0.0
        assert by == 0.0
        np.testing.assert_allclose(bz, on_axis_bz(5.0, 1.0, z), rtol=1e-7)

    @pytest.mark.parametrize("z", [-7.0, 0.0, 3.0])
    def test_on_shifted_axis(self, z):
        loop = CurrentLoop((4.0, -3.0, 2.0), 2.5, 3.0)
        bx, by, bz = field_at(loop, 4.0, -3.0, z)
        assert bx == 0.0
        assert by == 0.0
        np.testing.assert_allclose(bz, on_axis_bz(2.5, 3.0, z - 2.0), rtol=1e-7)

    @pytest.mark.parametrize(
        "point", [(5.0, 0.0, 0.0), (-5.0, 0.0, 0.0), (0.0, 5.0, 0.0), (3.0, -4.0, 0.0)]
    )
    def test_on_wire(self, point):
        np.testing.assert_array_equal(field_at(self.loop, *point), 0.0)

    def test_near_wire_large_and_finite(self):
        near = field_at(self.loop, 5.001, 0.0, 0.0)
        assert np.all(np.isfinite(near))
        assert abs(near[2]) > 100 * abs(field_at(self.loop, 0.0, 0.0, 0.0)[2])

    def test_vs_reference(self):
        rng = np.random.default_rng(846023420)
        rho = 0.1 + 20 * rng.random(500)
        z = 40 * rng.random(500) - 20
        b_r, b_z = loop_field_reference(5.0, 1.0, rho, z)
        bx, by, bz = field_at(self.loop, rho, np.zeros_like(rho), z)
        # K and E are accurate to 2e-8, bound the error carried into each
        # component where the bracketed terms nearly cancel
        err = 3e-8
        d = np.sqrt((rho + 5.0) ** 2 + z**2)
        denom = (5.0 - rho) ** 2 + z**2
        b_r_tol = (
            0.2 * np.abs(z) / (rho * d) * err * (1 + (25.0 + rho**2 + z**2) / denom)
        )
        b_z_tol = 0.2 / d * err * (1 + np.abs(25.0 - rho**2 - z**2) / denom)
        assert np.all(np.abs(bx - b_r) <= b_r_tol + 1e-12 * np.abs(b_r))
        np.testing.assert_allclose(by, 0.0, atol=1e-12)
        assert np.all(np.abs(bz - b_z) <= b_z_tol + 1e-12 * np.abs(b_z))

    def test_azimuthal_direction(self):
        # The radial field points along the (x, y) direction of the point
        x, y, z = 3.0, 4.0, 2.0
        bx, by, _ = field_at(self.loop, x, y, z)
        b_r, b_z = loop_field_reference(5.0, 1.0, 5.0, z)
        np.testing.assert_allclose(bx, b_r * 0.6, rtol=1e-6)
        np.testing.assert_allclose(by, b_r * 0.8, rtol=1e-6)
        np.testing.assert_allclose(field_at(self.loop, x, y, z)[2], b_z, rtol=1e-6)

    def test_radial_antisymmetric_in_z(self):
        above = field_at(self.loop, 3.0, 1.0, 2.0)
        below = field_at(self.loop, 3.0, 1.0, -2.0)
        np.testing.assert_allclose(above[:2], -below[:2])
        np.testing.assert_allclose(above[2], below[2])

    def test_current_reversal(self):
        reverse = CurrentLoop((0.0, 0.0, 0.0), 5.0, -1.0)
        np.testing.assert_allclose(
            field_at(reverse, 2.0, 1.0, 3.0), -field_at(self.loop, 2.0, 1.0, 3.0)
        )

    def test_linear_in_current(self):
        loop = CurrentLoop((0.0, 0.0, 0.0), 5.0, 2.5)
        np.testing.assert_allclose(
            field_at(loop, 7.0, 0.0, -1.0), 2.5 * field_at(self.loop, 7.0, 0.0, -1.0)
        )

    def test_far_field_dipole(self):
        # Bz on the midplane far away tends to -mu_0 m / (4 pi r^3)
        r = 1000.0
        bz = field_at(self.loop, r, 0.0, 0.0)[2]
        dipole = -0.1 * np.pi * 5.0**2 / r**3
        np.testing.assert_allclose(bz, dipole, rtol=1e-4)

    def test_array_shapes(self):
        x = np.linspace(-10, 10, 12).reshape(3, 4)
        b = field_at(self.loop, x, 0.0, 1.0)
        assert b.shape == (3, 3, 4)
        for i in range(3):
            for j in range(4):
                np.testing.assert_allclose(
                    b[:, i, j], field_at(self.loop, x[i, j], 0.0, 1.0)
                )

    def test_scalar_shape(self):
        assert field_at(self.loop, 1.0, 2.0, 3.0).shape == (3,)

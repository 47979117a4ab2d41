# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

import numpy as np
import pytest

from coilcalc.base.config import FieldMapConfig
from coilcalc.magnetostatics.error import EllipticIntegralError, MagnetostaticsError
from coilcalc.magnetostatics.field_map import FieldMap
from coilcalc.magnetostatics.grid import SamplingGrid, sample_grid


class TestFieldMap:
    def test_initial_field(self, helmholtz_pair, default_grid):
        field_map = FieldMap(helmholtz_pair, default_grid)
        np.testing.assert_array_equal(
            field_map.field, sample_grid(helmholtz_pair, default_grid)
        )
        assert field_map.loops == tuple(helmholtz_pair)
        assert field_map.grid == default_grid
        assert field_map.mean_magnitude > 0.0

    def test_move_loop(self, helmholtz_pair, default_grid):
        field_map = FieldMap(helmholtz_pair, default_grid)
        before = field_map.field
        field_map.move_loop(1, (10.0, 0.0, 2.5))

        assert field_map.loops[1].center == (10.0, 0.0, 2.5)
        assert field_map.loops[0] == helmholtz_pair[0]
        moved = [helmholtz_pair[0], helmholtz_pair[1].moved_to((10.0, 0.0, 2.5))]
        np.testing.assert_array_equal(field_map.field, sample_grid(moved, default_grid))
        assert not np.array_equal(before, field_map.field)

    def test_move_missing_loop(self, single_loop, default_grid):
        field_map = FieldMap([single_loop], default_grid)
        with pytest.raises(MagnetostaticsError):
            field_map.move_loop(3, (0.0, 0.0, 0.0))

    def test_elliptic_error_propagates(self, single_loop, default_grid, monkeypatch):
        field_map = FieldMap([single_loop], default_grid)

        def bad_integrals(m):
            raise EllipticIntegralError("m out of range")

        monkeypatch.setattr(
            "coilcalc.magnetostatics.current_loop.complete_elliptic_integrals",
            bad_integrals,
        )
        with pytest.raises(EllipticIntegralError):
            field_map.move_loop(0, (1.0, 0.0, 0.0))

    def test_set_grid(self, single_loop, default_grid):
        field_map = FieldMap([single_loop], default_grid)
        grid = SamplingGrid(-10, 10, 5, -10, 10, 7)
        field_map.set_grid(grid)
        assert field_map.field.shape == (7, 5, 3)
        assert field_map.grid == grid

    def test_set_loops(self, single_loop, helmholtz_pair, default_grid):
        field_map = FieldMap([single_loop], default_grid)
        field_map.set_loops(helmholtz_pair)
        np.testing.assert_array_equal(
            field_map.field, sample_grid(helmholtz_pair, default_grid)
        )

    def test_from_config(self):
        field_map = FieldMap.from_config(FieldMapConfig())
        assert field_map.field.shape == (20, 20, 3)
        assert len(field_map.loops) == 1

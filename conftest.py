# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""
Shared pytest fixtures.
"""

import pytest

from coilcalc.magnetostatics.current_loop import CurrentLoop
from coilcalc.magnetostatics.grid import SamplingGrid


@pytest.fixture
def single_loop():
    """A 5 mm loop carrying 1 A at the origin"""
    return CurrentLoop((0.0, 0.0, 0.0), 5.0, 1.0)


@pytest.fixture
def helmholtz_pair():
    """Two coaxial 5 mm loops, 5 mm apart, carrying 1 A each"""
    return [
        CurrentLoop((0.0, 0.0, -2.5), 5.0, 1.0),
        CurrentLoop((0.0, 0.0, 2.5), 5.0, 1.0),
    ]


@pytest.fixture
def default_grid():
    """20 x 20 grid spanning +/- 30 mm"""
    return SamplingGrid(-30.0, 30.0, 20, -30.0, 30.0, 20)

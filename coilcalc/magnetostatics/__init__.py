# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later
"""Public functions and classes for the magnetostatics module."""

from coilcalc.magnetostatics.baseclass import CurrentSource, SourceGroup
from coilcalc.magnetostatics.current_loop import CurrentLoop, field_at
from coilcalc.magnetostatics.elliptic import complete_elliptic_integrals
from coilcalc.magnetostatics.error import EllipticIntegralError, MagnetostaticsError
from coilcalc.magnetostatics.field_map import FieldMap
from coilcalc.magnetostatics.grid import SamplingGrid, sample, sample_grid
from coilcalc.magnetostatics.tools import (
    field_magnitude,
    mean_field_magnitude,
    normalised_field,
)

__all__ = [
    "CurrentLoop",
    "CurrentSource",
    "EllipticIntegralError",
    "FieldMap",
    "MagnetostaticsError",
    "SamplingGrid",
    "SourceGroup",
    "complete_elliptic_integrals",
    "field_at",
    "field_magnitude",
    "mean_field_magnitude",
    "normalised_field",
    "sample",
    "sample_grid",
]

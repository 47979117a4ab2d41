# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later

"""
Numerical and physical constants.
"""

import numpy as np

# =============================================================================
# Numerical constants
# =============================================================================

#: Machine epsilon of a double
EPS = np.finfo(float).eps

#: Largest finite double, used in place of a logarithmic divergence
FLOAT_MAX = np.finfo(float).max

# =============================================================================
# Physical constants in the working unit system (mm, A, mT)
# =============================================================================

#: Vacuum permeability over 2 pi [mT.mm/A]
#: mu_0 / (2 pi) = 2e-7 T.m/A = 0.2 mT.mm/A
#: This factor is sometimes quoted with the field labelled in Gauss. With
#: lengths in mm and currents in A it gives mT (1 mT = 10 G); in Gauss the
#: factor would be 2.0.
MU_0_2PI_MM = 0.2

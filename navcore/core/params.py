# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""
Numerical Parameters
====================

Default thresholds and switches for the navigation math routines.
"""

# ============================================================================
# FLOATING-POINT WIDTH
# ============================================================================
# Orientation outputs (rotation matrices, NED deltas, velocities, unit
# gravity) use this width. Geodetic/ECEF positions are always float64.
DEFAULT_REAL_DTYPE = "float64"

# Table-based single-precision trigonometry for constrained targets
FAST_MATH = False

# ============================================================================
# JACOBI EIGEN SOLVER
# ============================================================================
JACOBI_EPS = 1e-6          # Largest off-diagonal magnitude accepted as zero
JACOBI_MAX_SWEEPS = 100    # Max Givens rotations before giving up

# ============================================================================
# FAST TRIGONOMETRY
# ============================================================================
FAST_MATH_TABLE_SIZE = 512  # Sine table entries per period

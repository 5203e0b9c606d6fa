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
Table-based single-precision trigonometry.

Sine and cosine evaluated from a 512-entry sine table with linear
interpolation, the scheme used by CMSIS-DSP ``arm_sin_f32``/``arm_cos_f32``
on Cortex-M targets. Results match ``np.sin``/``np.cos`` to about 1e-5 and
are computed entirely in float32.
"""

import numpy as np
from numba import njit

from .params import FAST_MATH_TABLE_SIZE

# sin(2*pi*i/N) for i = 0..N, the extra entry closes the period
SIN_TABLE_F32 = np.sin(
    2.0 * np.pi * np.arange(FAST_MATH_TABLE_SIZE + 1) / FAST_MATH_TABLE_SIZE
).astype(np.float32)

INV_TWO_PI_F32 = np.float32(0.159154943092)
QUARTER_F32 = np.float32(0.25)
ONE_F32 = np.float32(1.0)
TABLE_SIZE_F32 = np.float32(FAST_MATH_TABLE_SIZE)


@njit(cache=True)
def _table_lookup(x):
    # x is the angle in turns
    n = np.int32(x)
    if x < 0.0:
        n -= 1
    x = x - np.float32(n)

    findex = TABLE_SIZE_F32 * x
    index = np.int32(findex)
    if index >= FAST_MATH_TABLE_SIZE:
        index = 0
        findex -= TABLE_SIZE_F32
    fract = findex - np.float32(index)

    a = SIN_TABLE_F32[index]
    b = SIN_TABLE_F32[index + 1]
    return (ONE_F32 - fract) * a + fract * b


@njit(cache=True)
def fast_sin(x):
    """
    Single-precision sine from the interpolated table.

    Parameters
    ----------
    x : float
        Angle in radians

    Returns
    -------
    float32
        Approximate sin(x)
    """
    return _table_lookup(np.float32(x) * INV_TWO_PI_F32)


@njit(cache=True)
def fast_cos(x):
    """
    Single-precision cosine from the interpolated table.

    Parameters
    ----------
    x : float
        Angle in radians

    Returns
    -------
    float32
        Approximate cos(x)
    """
    return _table_lookup(np.float32(x) * INV_TWO_PI_F32 + QUARTER_F32)

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


"""Angle difference normalization"""

import math

# Above this magnitude the remainder is taken directly
LARGE_ANGLE_DEG = 1.0e6


def angle_err_deg(angle_err: float) -> float:
    """
    Bring an angle difference into (-180, 180] degrees.

    Parameters
    ----------
    angle_err : float
        Angle difference in degrees

    Returns
    -------
    float
        Equivalent angle in (-180, 180] degrees

    Raises
    ------
    ValueError
        If the angle is NaN or infinite

    Examples
    --------
    >>> angle_err_deg(370.0)
    10.0
    >>> angle_err_deg(-190.0)
    170.0
    """
    if not math.isfinite(angle_err):
        raise ValueError(f"Angle must be finite, got {angle_err}")
    if abs(angle_err) > LARGE_ANGLE_DEG:
        # 360 is lost to rounding at this magnitude
        angle_err = math.fmod(angle_err, 360.0)

    while angle_err > 180.0:
        angle_err -= 360.0
    while angle_err <= -180.0:
        angle_err += 360.0
    return angle_err

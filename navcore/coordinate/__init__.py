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


"""Coordinate transformation utilities

This module provides the frame transformations used by the navigation
update cycle:
- ECEF <-> geodetic (LLA) conversion
- ECEF <-> NED rotation matrices (R_EinN, R_NinE)
- Relative positions in the local NED Base frame
- ECEF -> NED velocity rotation

Note that :func:`ecef2lla` returns latitude/longitude in degrees while
every other routine takes radians.
"""

# Unit gravity lives with the attitude routines it feeds
from ..attitude.gravity import unit_gravity
from .frames import (
    ecef2base,
    ecef2lla,
    lla2base,
    lla2ecef,
    lla2R_EinN,
    lla2R_NinE,
    pos_ned2ecef,
    vel_ecef2ned,
)

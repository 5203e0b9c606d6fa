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
Attitude module for orientation from reference vectors.

This module provides functions for deriving orientation from sensor reference
vectors and for handling angle differences:
- Unit gravity from accelerometer readings
- Roll/pitch from gravity, yaw from gravity or roll/pitch plus magnetic field
- Navigation-to-body direction cosine matrix from euler angles
- Angle difference normalization

All rotations assume right-hand coordinate frames with euler angles in the order
'roll-pitch-yaw' and DCMs with the order of 'ZYX'.

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

from .euler import euler2dcm
from .gravity import (
    mag_to_perp_frame,
    roll_pitch_mag2yaw,
    unit_gravity,
    unit_gravity2euler,
    unit_gravity_mag2yaw,
)
from .wrap import angle_err_deg

__all__ = [
    'euler2dcm',
    'unit_gravity', 'unit_gravity2euler', 'mag_to_perp_frame',
    'unit_gravity_mag2yaw', 'roll_pitch_mag2yaw',
    'angle_err_deg'
]

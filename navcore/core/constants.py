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


"""Earth Ellipsoid Constants and Index Conventions"""

import numpy as np

# Earth Parameters (WGS84)
E_MAJOR = 6378137.0                              # semi-major axis a (m)
E_MINOR = 6356752.3142                           # semi-minor axis b (m)
E_ECC_SQ = 6.69437999014e-3                      # first eccentricity squared e^2
E_FLATTENING = 1.0 / 298.257223563               # flattening f

# Derived ellipsoid quantities
E_MINOR_OVER_MAJOR_SQ = (E_MINOR / E_MAJOR) ** 2  # b^2/a^2 = 1 - e^2
E_MAJOR_OVER_MINOR = E_MAJOR / E_MINOR           # a/b
E_ECC_SQxE_MAJOR = E_ECC_SQ * E_MAJOR            # e^2 * a (m)
EP_SQ = (E_MAJOR ** 2 - E_MINOR ** 2) / E_MINOR  # e'^2 * b (m)

# Unit conversions
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians

# Vector axis indices (NED: North/East/Down)
X_AXIS = 0
Y_AXIS = 1
Z_AXIS = 2
NUM_AXIS = 3

# Geodetic coordinate indices
LAT = 0
LON = 1
ALT = 2

# Euler angle indices
ROLL = 0
PITCH = 1
YAW = 2

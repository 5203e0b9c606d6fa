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
navcore - Navigation Math Core for GNSS/INS

Frame transformations between ECEF, geodetic and local NED coordinates,
attitude from gravity and magnetic field vectors, a Jacobi eigen solver for
symmetric matrices, and angle difference normalization.
"""

__version__ = "1.0.0"
__author__ = "navcore Development Team"
__title__ = "navcore"
__description__ = "Navigation math core for GNSS/INS"

from .core import *
from .coordinate import *
from .attitude import *
from .linalg import *

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


"""Core Navigation Math Module.

This module provides the shared foundation for the navigation math routines:

- **Constants**: WGS84 ellipsoid parameters, derived ellipsoid quantities,
  unit conversions and axis/angle index conventions
- **Parameters**: default convergence thresholds, iteration caps and the
  default floating-point width
- **Precision**: per-call and process-wide selection of the "real" width
  (float32 or float64) used by the orientation routines
- **Fast trigonometry**: table-based single-precision sine/cosine for
  constrained targets

Example Usage:
    >>> from navcore.core import *
    >>>
    >>> # Run orientation routines in single precision
    >>> set_real_dtype('float32')
    >>> resolve_dtype(None)
    <class 'numpy.float32'>
"""

from .constants import *
from .fast_trig import fast_cos, fast_sin
from .params import *
from .precision import (
    NumericConfig,
    get_real_dtype,
    numeric_config,
    resolve_dtype,
    resolve_fast_math,
    set_real_dtype,
)

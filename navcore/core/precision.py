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


"""Configurable floating-point width for orientation routines

Position and geodetic routines always compute in double precision. The
orientation routines (rotation matrices, NED deltas, velocity rotation,
unit gravity, attitude angles) produce results in a selectable "real" width
so that callers can match integrations that run in single precision.

The width is chosen per call with ``dtype=``; when omitted, the process-wide
default held by :data:`numeric_config` is used.
"""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .params import DEFAULT_REAL_DTYPE, FAST_MATH

# Accepted spellings of the two supported widths
REAL_TYPES = {
    'float32': np.float32,
    'single': np.float32,
    'float': np.float32,
    'float64': np.float64,
    'double': np.float64,
}

DTypeLike = Union[str, type, np.dtype, None]


def resolve_dtype(dtype: DTypeLike = None) -> type:
    """Resolve a dtype specification to ``np.float32`` or ``np.float64``.

    Parameters
    ----------
    dtype : str, type, np.dtype or None
        Requested width. ``None`` selects the configured default.

    Returns
    -------
    type
        ``np.float32`` or ``np.float64``

    Raises
    ------
    ValueError
        If the dtype is not one of the supported floating-point widths
    """
    if dtype is None:
        return numeric_config.real_type
    if isinstance(dtype, str):
        try:
            return REAL_TYPES[dtype.lower()]
        except KeyError:
            raise ValueError(f"Unsupported real dtype: {dtype!r}") from None
    dt = np.dtype(dtype)
    if dt == np.float32:
        return np.float32
    if dt == np.float64:
        return np.float64
    raise ValueError(f"Unsupported real dtype: {dt}")


@dataclass
class NumericConfig:
    """Process-wide numeric defaults"""
    real_dtype: str = DEFAULT_REAL_DTYPE
    fast_math: bool = FAST_MATH

    def __post_init__(self):
        # Fail early on a bad width name
        self.real_dtype = np.dtype(resolve_dtype(self.real_dtype)).name

    @property
    def real_type(self) -> type:
        return REAL_TYPES[self.real_dtype]

    def configure_from_dict(self, config: dict):
        """Configure from dictionary

        Example config:
        {
            'real_dtype': 'float32',
            'fast_math': True
        }
        """
        if 'real_dtype' in config:
            self.real_dtype = np.dtype(resolve_dtype(config['real_dtype'])).name
        if 'fast_math' in config:
            self.fast_math = bool(config['fast_math'])

    def reset(self):
        """Restore the built-in defaults"""
        self.real_dtype = DEFAULT_REAL_DTYPE
        self.fast_math = FAST_MATH


# Global numeric configuration
numeric_config = NumericConfig()


def get_real_dtype() -> type:
    """Get the default real width"""
    return numeric_config.real_type


def set_real_dtype(dtype: DTypeLike):
    """Set the default real width (``'float32'`` or ``'float64'``)"""
    numeric_config.real_dtype = np.dtype(resolve_dtype(dtype)).name


def resolve_fast_math(fast_math: Optional[bool] = None) -> bool:
    """Resolve a per-call fast-math switch against the configured default"""
    if fast_math is None:
        return numeric_config.fast_math
    return bool(fast_math)

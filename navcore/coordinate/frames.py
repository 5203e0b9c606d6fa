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


"""ECEF, geodetic and local NED frame transformations

Naming of the rotation matrices follows the navigation convention used by
the estimator: ``R_EinN`` rotates ECEF vectors into NED, ``R_NinE`` rotates
NED vectors into ECEF. The "Base" frame is a NED frame anchored at a fixed
reference ECEF position.

Positions are computed in double precision. Rotation matrices and local
deltas/velocities are returned in the configured real width (see
:mod:`navcore.core.precision`).
"""

import numpy as np

from ..core.constants import (
    ALT,
    E_ECC_SQ,
    E_ECC_SQxE_MAJOR,
    E_MAJOR,
    E_MAJOR_OVER_MINOR,
    E_MINOR_OVER_MAJOR_SQ,
    EP_SQ,
    LAT,
    LON,
    R2D,
    X_AXIS,
    Y_AXIS,
    Z_AXIS,
)
from ..core.fast_trig import fast_cos, fast_sin
from ..core.precision import resolve_dtype, resolve_fast_math


def _rotate(R: np.ndarray, v: np.ndarray) -> np.ndarray:
    """R @ v written out per row"""
    return np.array([
        R[0, 0] * v[X_AXIS] + R[0, 1] * v[Y_AXIS] + R[0, 2] * v[Z_AXIS],
        R[1, 0] * v[X_AXIS] + R[1, 1] * v[Y_AXIS] + R[1, 2] * v[Z_AXIS],
        R[2, 0] * v[X_AXIS] + R[2, 1] * v[Y_AXIS] + R[2, 2] * v[Z_AXIS]
    ], dtype=R.dtype)


def _rotate_transposed(R: np.ndarray, v: np.ndarray) -> np.ndarray:
    """R.T @ v written out per column, no transpose is formed"""
    return np.array([
        R[0, 0] * v[X_AXIS] + R[1, 0] * v[Y_AXIS] + R[2, 0] * v[Z_AXIS],
        R[0, 1] * v[X_AXIS] + R[1, 1] * v[Y_AXIS] + R[2, 1] * v[Z_AXIS],
        R[0, 2] * v[X_AXIS] + R[1, 2] * v[Y_AXIS] + R[2, 2] * v[Z_AXIS]
    ], dtype=R.dtype)


def _R_NinE_from_trig(sin_lat, cos_lat, sin_lon, cos_lon, real) -> np.ndarray:
    return np.array([
        [-sin_lat * cos_lon, -sin_lon, -cos_lat * cos_lon],
        [-sin_lat * sin_lon, cos_lon, -cos_lat * sin_lon],
        [cos_lat, 0.0, -sin_lat]
    ], dtype=real)


def lla2R_EinN(lla: np.ndarray, dtype=None) -> np.ndarray:
    """Rotation matrix from ECEF to NED

    Parameters
    ----------
    lla : np.ndarray
        Geodetic coordinates [lat, lon, height] where:
        - lat, lon: in radians
        - height: in meters (not used for rotation)
    dtype : str or type, optional
        Real width of the result (default: configured real dtype)

    Returns
    -------
    np.ndarray
        Rotation matrix R_EinN (3x3), v_ned = R_EinN @ v_ecef

    Examples
    --------
    >>> import numpy as np
    >>> R = lla2R_EinN(np.array([0.0, 0.0, 0.0]))
    >>> north = R @ np.array([0.0, 0.0, 1.0])  # ECEF Z-axis is north at the equator
    """
    real = resolve_dtype(dtype)
    sin_lat = real(np.sin(lla[LAT]))
    cos_lat = real(np.cos(lla[LAT]))
    sin_lon = real(np.sin(lla[LON]))
    cos_lon = real(np.cos(lla[LON]))

    return np.array([
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [-sin_lon, cos_lon, 0.0],
        [-cos_lat * cos_lon, -cos_lat * sin_lon, -sin_lat]
    ], dtype=real)


def lla2R_NinE(lla: np.ndarray, dtype=None) -> np.ndarray:
    """Rotation matrix from NED to ECEF

    Built directly from the sines and cosines of latitude/longitude, which
    are evaluated in the real width.

    Parameters
    ----------
    lla : np.ndarray
        Geodetic coordinates [lat, lon, height] (rad, rad, m)
    dtype : str or type, optional
        Real width of the result (default: configured real dtype)

    Returns
    -------
    np.ndarray
        Rotation matrix R_NinE (3x3), v_ecef = R_NinE @ v_ned
    """
    real = resolve_dtype(dtype)
    lat = real(lla[LAT])
    lon = real(lla[LON])

    return _R_NinE_from_trig(real(np.sin(lat)), real(np.cos(lat)),
                             real(np.sin(lon)), real(np.cos(lon)), real)


def lla2ecef(lla: np.ndarray) -> np.ndarray:
    """Convert geodetic coordinates to ECEF coordinates

    Parameters
    ----------
    lla : np.ndarray
        Geodetic coordinates [lat, lon, height] where:
        - lat: latitude in radians
        - lon: longitude in radians
        - height: height above WGS84 ellipsoid in meters

    Returns
    -------
    np.ndarray
        ECEF coordinates [x, y, z] in meters (float64)

    Notes
    -----
    N = a / sqrt(1 - e^2 sin^2(lat)) is the radius of curvature in the
    prime vertical. Exact, no iterations.

    Examples
    --------
    >>> import numpy as np
    >>> ecef = lla2ecef(np.array([np.radians(35.3606), np.radians(138.7274), 3776.0]))
    """
    lat = np.float64(lla[LAT])
    lon = np.float64(lla[LON])
    alt = np.float64(lla[ALT])

    cos_lat = np.cos(lat)
    sin_lat = np.sin(lat)
    cos_lon = np.cos(lon)
    sin_lon = np.sin(lon)

    N = E_MAJOR / np.sqrt(1.0 - E_ECC_SQ * sin_lat * sin_lat)

    temp = (N + alt) * cos_lat
    return np.array([
        temp * cos_lon,
        temp * sin_lon,
        (E_MINOR_OVER_MAJOR_SQ * N + alt) * sin_lat
    ], dtype=np.float64)


def ecef2lla(ecef: np.ndarray) -> np.ndarray:
    """Convert ECEF coordinates to geodetic coordinates in DEGREES

    Closed-form (Bowring) solution through the auxiliary angle
    theta = atan2(z * a/b, p).

    Parameters
    ----------
    ecef : np.ndarray
        ECEF coordinates [x, y, z] in meters

    Returns
    -------
    np.ndarray
        Geodetic coordinates [lat, lon, height] where:
        - lat: latitude in degrees (-90 to 90)
        - lon: longitude in degrees (-180 to 180)
        - height: height above WGS84 ellipsoid in meters

    Notes
    -----
    Unlike every other routine in this module the angles are returned in
    degrees, not radians. Existing consumers depend on this.
    """
    x = np.float64(ecef[X_AXIS])
    y = np.float64(ecef[Y_AXIS])
    z = np.float64(ecef[Z_AXIS])

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        p = np.sqrt(x * x + y * y)
        theta = np.arctan2(z * E_MAJOR_OVER_MINOR, p)

        sin_theta = np.sin(theta)
        cos_theta = np.cos(theta)

        lat = np.arctan2(z + EP_SQ * sin_theta * sin_theta * sin_theta,
                         p - E_ECC_SQxE_MAJOR * cos_theta * cos_theta * cos_theta)
        lon = np.arctan2(y, x)

        sin_lat = np.sin(lat)
        alt = p / np.cos(lat) - E_MAJOR / np.sqrt(1.0 - E_ECC_SQ * sin_lat * sin_lat)

    return np.array([lat * R2D, lon * R2D, alt], dtype=np.float64)


def lla2base(lla: np.ndarray, ecef_init: np.ndarray, dtype=None):
    """
    Express the current position in the local NED Base frame

    Parameters:
    -----------
    lla : np.ndarray
        Current geodetic coordinates [lat, lon, height] (rad, rad, m)
    ecef_init : np.ndarray
        ECEF origin of the Base frame (m)
    dtype : str or type, optional
        Real width of R_NinE and dr_N (default: configured real dtype)

    Returns:
    --------
    R_NinE : np.ndarray
        NED->ECEF rotation at the current position (3x3)
    dr_N : np.ndarray
        Position relative to the origin in North/East/Down (m)
    ecef : np.ndarray
        Current position in ECEF (m), float64
    """
    real = resolve_dtype(dtype)

    lat = np.float64(lla[LAT])
    lon = np.float64(lla[LON])
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    # radius of curvature (m)
    N = E_MAJOR / np.sqrt(1.0 - E_ECC_SQ * sin_lat * sin_lat)

    temp = (N + np.float64(lla[ALT])) * cos_lat
    ecef = np.array([
        temp * cos_lon,
        temp * sin_lon,
        (E_MINOR_OVER_MAJOR_SQ * N + np.float64(lla[ALT])) * sin_lat
    ], dtype=np.float64)

    dr_E = (ecef - np.asarray(ecef_init, dtype=np.float64)).astype(real)

    R_NinE = _R_NinE_from_trig(real(sin_lat), real(cos_lat),
                               real(sin_lon), real(cos_lon), real)

    # dr_N = (R_NinE)^T dr_E
    dr_N = _rotate_transposed(R_NinE, dr_E)

    return R_NinE, dr_N, ecef


def ecef2base(ecef_init: np.ndarray, ecef: np.ndarray, R_NinE: np.ndarray,
              dtype=None) -> np.ndarray:
    """
    NED position of one ECEF point relative to another

    Parameters:
    -----------
    ecef_init : np.ndarray
        ECEF origin of the Base frame (m)
    ecef : np.ndarray
        Current ECEF position (m)
    R_NinE : np.ndarray
        NED->ECEF rotation matrix (3x3)
    dtype : str or type, optional
        Real width of the result (default: configured real dtype)

    Returns:
    --------
    dr_N : np.ndarray
        Relative position in North/East/Down (m)
    """
    real = resolve_dtype(dtype)

    dr_E = (np.asarray(ecef, dtype=np.float64)
            - np.asarray(ecef_init, dtype=np.float64)).astype(real)

    return _rotate_transposed(np.asarray(R_NinE, dtype=real), dr_E)


def pos_ned2ecef(r_N: np.ndarray, ecef_init: np.ndarray, R_NinE: np.ndarray) -> np.ndarray:
    """
    Add a NED offset to a reference ECEF position

    Inverse of :func:`ecef2base`.

    Parameters:
    -----------
    r_N : np.ndarray
        Offset in North/East/Down (m)
    ecef_init : np.ndarray
        Reference ECEF position (m)
    R_NinE : np.ndarray
        NED->ECEF rotation matrix (3x3)

    Returns:
    --------
    ecef : np.ndarray
        ECEF position (m), float64
    """
    R = np.asarray(R_NinE)
    dr_E = _rotate(R, np.asarray(r_N, dtype=R.dtype))

    return np.asarray(ecef_init, dtype=np.float64) + dr_E.astype(np.float64)


def vel_ecef2ned(lla: np.ndarray, vel_ecef: np.ndarray, fast_math=None,
                 dtype=None) -> np.ndarray:
    """
    Rotate an ECEF velocity into NED

    Parameters:
    -----------
    lla : np.ndarray
        Geodetic coordinates [lat, lon, height] (rad, rad, m)
    vel_ecef : np.ndarray
        Velocity in ECEF (m/s)
    fast_math : bool, optional
        Use the table-based single-precision trigonometry
        (default: configured value)
    dtype : str or type, optional
        Real width of the result (default: configured real dtype)

    Returns:
    --------
    vel_ned : np.ndarray
        Velocity in North/East/Down (m/s)
    """
    real = resolve_dtype(dtype)
    lat = real(lla[LAT])
    lon = real(lla[LON])

    if resolve_fast_math(fast_math):
        cos_lat = real(fast_cos(lat))
        sin_lat = real(fast_sin(lat))
        cos_lon = real(fast_cos(lon))
        sin_lon = real(fast_sin(lon))
    else:
        cos_lat = real(np.cos(lat))
        sin_lat = real(np.sin(lat))
        cos_lon = real(np.cos(lon))
        sin_lon = real(np.sin(lon))

    v = np.asarray(vel_ecef, dtype=real)

    return np.array([
        # North
        -sin_lat * cos_lon * v[X_AXIS] - sin_lon * sin_lat * v[Y_AXIS] + cos_lat * v[Z_AXIS],
        # East
        -sin_lon * v[X_AXIS] + cos_lon * v[Y_AXIS],
        # Down
        -cos_lat * cos_lon * v[X_AXIS] - cos_lat * sin_lon * v[Y_AXIS] - sin_lat * v[Z_AXIS]
    ], dtype=real)

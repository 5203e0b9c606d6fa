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
Attitude from gravity and magnetic field reference vectors.

The accelerometer of a body at rest measures the negative of gravity, so the
normalized and negated reading is the gravity direction expressed in the body
frame. Roll and pitch follow from that direction alone; yaw additionally needs
the magnetic field vector.

Frame convention: a vector described in the navigation (NED) frame as v_n is
described in the body frame as

    v_b = Rx(roll) * Ry(pitch) * Rz(yaw) * v_n

The perpendicular frame is the intermediate frame reached from the navigation
frame by the yaw rotation only, i.e. v_b = Rx(roll) * Ry(pitch) * v_p.

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

import logging

import numpy as np

from ..core.constants import PITCH, ROLL, X_AXIS, Y_AXIS, Z_AXIS
from ..core.precision import resolve_dtype

logger = logging.getLogger(__name__)


def unit_gravity(accel: np.ndarray, dtype=None) -> np.ndarray:
    """Unit gravity vector from an accelerometer reading

    Parameters
    ----------
    accel : np.ndarray
        Accelerometer measurement in the body frame (any consistent unit)
    dtype : str or type, optional
        Real width of the result (default: configured real dtype)

    Returns
    -------
    np.ndarray
        Unit gravity vector in the body frame

    Notes
    -----
    The accelerometer measures -gravity when there is no linear acceleration:
    a reading of [0, 0, -1] gives the unit gravity vector [0, 0, 1].
    A zero-magnitude reading is not rejected, the result is NaN.

    Examples
    --------
    >>> unit_gravity(np.array([0.0, 0.0, -9.81]))
    array([-0., -0.,  1.])
    """
    real = resolve_dtype(dtype)
    a = np.asarray(accel, dtype=real)

    with np.errstate(divide='ignore', invalid='ignore'):
        accel_mag = np.sqrt(a[X_AXIS] * a[X_AXIS] + a[Y_AXIS] * a[Y_AXIS] + a[Z_AXIS] * a[Z_AXIS])
        inv_accel_mag = real(1.0) / accel_mag
        g = np.array([-a[X_AXIS] * inv_accel_mag,
                      -a[Y_AXIS] * inv_accel_mag,
                      -a[Z_AXIS] * inv_accel_mag], dtype=real)

    if accel_mag == 0.0:
        logger.debug("Zero-magnitude accelerometer reading, unit gravity is undefined")

    return g


def unit_gravity2euler(unit_gravity_vector: np.ndarray, dtype=None) -> np.ndarray:
    """Roll and pitch from the unit gravity vector

    Parameters
    ----------
    unit_gravity_vector : np.ndarray
        Unit gravity vector in the body frame
    dtype : str or type, optional
        Real width of the result (default: configured real dtype)

    Returns
    -------
    np.ndarray
        [roll, pitch] in radians. Yaw is not observable from gravity.
    """
    real = resolve_dtype(dtype)
    g = np.asarray(unit_gravity_vector, dtype=real)

    euler = np.empty(2, dtype=real)
    with np.errstate(invalid='ignore'):
        euler[ROLL] = np.arctan2(g[Y_AXIS], g[Z_AXIS])
        euler[PITCH] = -np.arcsin(g[X_AXIS])
    return euler


def mag_to_perp_frame(mag_field_vector: np.ndarray,
                      unit_gravity_vector: np.ndarray,
                      dtype=None) -> np.ndarray:
    """
    Express the body-frame magnetic field in the perpendicular frame

    Undoes roll and pitch (taken from the gravity direction) but not yaw.

    Parameters:
    -----------
    mag_field_vector : np.ndarray
        Magnetic field vector in the body frame
    unit_gravity_vector : np.ndarray
        Unit gravity vector in the body frame
    dtype : str or type, optional
        Real width of the result (default: configured real dtype)

    Returns:
    --------
    mag_perp : np.ndarray
        Magnetic field vector in the perpendicular frame

    Notes:
    ------
    At pitch = +/-90 deg (sin(pitch) = -g_x reaching +/-1) roll and yaw cannot
    be separated. Roll is then taken as zero and the result is a fixed axis
    permutation of the input:

    - sin(pitch) >= 1:  [ m_z, m_y, -m_x]
    - sin(pitch) <= -1: [-m_z, m_y,  m_x]

    Away from the poles only the x and y components are the rotated field.
    The z component is -sin(pitch) * m_z + cos(pitch) * (sin(roll) * m_y +
    cos(roll) * m_z), the value existing firmware logs.
    """
    real = resolve_dtype(dtype)
    mag = np.asarray(mag_field_vector, dtype=real)
    g = np.asarray(unit_gravity_vector, dtype=real)

    sin_pitch = -g[X_AXIS]
    if sin_pitch >= 1.0:
        # roll and yaw undefined, assume roll = 0
        return np.array([mag[Z_AXIS], mag[Y_AXIS], -mag[X_AXIS]], dtype=real)
    if sin_pitch <= -1.0:
        # roll and yaw undefined, assume roll = 0
        return np.array([-mag[Z_AXIS], mag[Y_AXIS], mag[X_AXIS]], dtype=real)

    # pitch in (-90, 90), so cos(pitch) > 0
    cos_pitch = np.sqrt(real(1.0) - sin_pitch * sin_pitch)
    sin_roll = g[Y_AXIS] / cos_pitch
    cos_roll = g[Z_AXIS] / cos_pitch

    temp = sin_roll * mag[Y_AXIS] + cos_roll * mag[Z_AXIS]
    return np.array([
        cos_pitch * mag[X_AXIS] + sin_pitch * temp,
        cos_roll * mag[Y_AXIS] - sin_roll * mag[Z_AXIS],
        -sin_pitch * mag[Z_AXIS] + cos_pitch * temp
    ], dtype=real)


def unit_gravity_mag2yaw(unit_gravity_vector: np.ndarray,
                         mag_field_vector: np.ndarray,
                         dtype=None):
    """
    Yaw from the unit gravity vector and the magnetic field

    Parameters
    ----------
    unit_gravity_vector : np.ndarray
        Unit gravity vector in the body frame
    mag_field_vector : np.ndarray
        Magnetic field vector in the body frame
    dtype : str or type, optional
        Real width of the result (default: configured real dtype)

    Returns
    -------
    float
        Yaw in radians, (-pi, pi], relative to magnetic north
    """
    real = resolve_dtype(dtype)
    mag_perp = mag_to_perp_frame(mag_field_vector, unit_gravity_vector, dtype=real)

    # The negative of the angle the field makes with the unrotated (yaw = 0)
    # frame is the yaw of the body
    return real(-np.arctan2(mag_perp[Y_AXIS], mag_perp[X_AXIS]))


def roll_pitch_mag2yaw(roll: float, pitch: float, mag_field_vector: np.ndarray,
                       dtype=None):
    """
    Yaw from explicit roll/pitch and the magnetic field

    Same rotation as :func:`unit_gravity_mag2yaw` but driven by the angles
    instead of the gravity direction, so it has no pitch singularity branch.

    Parameters
    ----------
    roll : float
        Roll angle (rad)
    pitch : float
        Pitch angle (rad)
    mag_field_vector : np.ndarray
        Magnetic field vector in the body frame
    dtype : str or type, optional
        Real width of the result (default: configured real dtype)

    Returns
    -------
    float
        Yaw in radians, (-pi, pi]
    """
    real = resolve_dtype(dtype)
    mag = np.asarray(mag_field_vector, dtype=real)

    sin_roll = real(np.sin(roll))
    cos_roll = real(np.cos(roll))
    sin_pitch = real(np.sin(pitch))
    cos_pitch = real(np.cos(pitch))

    temp = sin_roll * mag[Y_AXIS] + cos_roll * mag[Z_AXIS]
    mag_x = cos_pitch * mag[X_AXIS] + sin_pitch * temp
    mag_y = cos_roll * mag[Y_AXIS] - sin_roll * mag[Z_AXIS]

    return real(-np.arctan2(mag_y, mag_x))

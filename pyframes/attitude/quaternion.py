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
Quaternion kernels.

Quaternions are stored scalar first, q = [w, x, y, z], and multiply with the
Hamilton convention. A unit quaternion acts on vectors as q v q*, so the
matrix returned by quat2dcm satisfies quat2dcm(p * q) = quat2dcm(p) @ quat2dcm(q).

All functions expect float64 numpy arrays; callers convert with
``np.asarray(..., dtype=np.double)`` before entering the compiled code.
"""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def quat_multiply(p, q):
    """
    Hamilton product p * q.

    Parameters
    ----------
    p, q : ndarray, shape (4,)
        Quaternions [w, x, y, z]

    Returns
    -------
    r : ndarray, shape (4,)
        Product quaternion
    """
    pw, px, py, pz = p[0], p[1], p[2], p[3]
    qw, qx, qy, qz = q[0], q[1], q[2], q[3]
    r = np.array([pw*qw - px*qx - py*qy - pz*qz,
                  pw*qx + px*qw + py*qz - pz*qy,
                  pw*qy - px*qz + py*qw + pz*qx,
                  pw*qz + px*qy - py*qx + pz*qw],
                 dtype=np.double)
    return r


@njit(cache=True)
def quat_conjugate(q):
    """Quaternion conjugate [w, -x, -y, -z], the inverse of a unit quaternion"""
    return np.array([q[0], -q[1], -q[2], -q[3]], dtype=np.double)


@njit(cache=True)
def quat_normalize(q):
    """Scale a quaternion to unit norm; returns the zero quaternion unchanged"""
    n = np.sqrt(q[0]*q[0] + q[1]*q[1] + q[2]*q[2] + q[3]*q[3])
    if n == 0.0:
        return q.copy()
    return q / n


@njit(cache=True, fastmath=True)
def quat_rotate(q, v):
    """
    Rotate a vector with a unit quaternion, q v q*.

    Parameters
    ----------
    q : ndarray, shape (4,)
        Unit quaternion [w, x, y, z]
    v : ndarray, shape (3,)
        Vector

    Returns
    -------
    r : ndarray, shape (3,)
        Rotated vector
    """
    w, x, y, z = q[0], q[1], q[2], q[3]
    # t = 2 (u x v), r = v + w t + u x t
    tx = 2.0 * (y*v[2] - z*v[1])
    ty = 2.0 * (z*v[0] - x*v[2])
    tz = 2.0 * (x*v[1] - y*v[0])
    r = np.array([v[0] + w*tx + (y*tz - z*ty),
                  v[1] + w*ty + (z*tx - x*tz),
                  v[2] + w*tz + (x*ty - y*tx)],
                 dtype=np.double)
    return r


@njit(cache=True, fastmath=True)
def quat_rotate_inverse(q, v):
    """Rotate a vector with the inverse of a unit quaternion, q* v q"""
    w, x, y, z = q[0], -q[1], -q[2], -q[3]
    tx = 2.0 * (y*v[2] - z*v[1])
    ty = 2.0 * (z*v[0] - x*v[2])
    tz = 2.0 * (x*v[1] - y*v[0])
    r = np.array([v[0] + w*tx + (y*tz - z*ty),
                  v[1] + w*ty + (z*tx - x*tz),
                  v[2] + w*tz + (x*ty - y*tx)],
                 dtype=np.double)
    return r


@njit(cache=True, fastmath=True)
def quat2dcm(q):
    """
    Convert unit quaternion to the matrix of the rotation q v q*.

    Parameters
    ----------
    q : ndarray, shape (4,)
        Quaternion [w, x, y, z]

    Returns
    -------
    C : ndarray, shape (3, 3)
        Rotation matrix
    """
    w, x, y, z = q[0], q[1], q[2], q[3]
    C = np.array([[w*w + x*x - y*y - z*z,         2*(x*y - w*z),         2*(w*y + x*z)],
                  [        2*(w*z + x*y), w*w - x*x + y*y - z*z,         2*(y*z - w*x)],
                  [        2*(x*z - w*y),         2*(y*z + w*x), w*w - x*x - y*y + z*z]],
                 dtype=np.double)
    return C


@njit(cache=True)
def dcm2quat(C):
    """
    Convert rotation matrix to unit quaternion (Shepperd's method).

    The branch is chosen on the largest of the trace and diagonal terms,
    which keeps the divisor away from zero for every rotation angle. The
    returned quaternion has a non-negative scalar part.

    Parameters
    ----------
    C : ndarray, shape (3, 3)
        Rotation matrix

    Returns
    -------
    q : ndarray, shape (4,)
        Quaternion [w, x, y, z]
    """
    trace = C[0, 0] + C[1, 1] + C[2, 2]

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (C[2, 1] - C[1, 2]) * s
        y = (C[0, 2] - C[2, 0]) * s
        z = (C[1, 0] - C[0, 1]) * s
    elif C[0, 0] > C[1, 1] and C[0, 0] > C[2, 2]:
        s = 2.0 * np.sqrt(1.0 + C[0, 0] - C[1, 1] - C[2, 2])
        w = (C[2, 1] - C[1, 2]) / s
        x = 0.25 * s
        y = (C[0, 1] + C[1, 0]) / s
        z = (C[0, 2] + C[2, 0]) / s
    elif C[1, 1] > C[2, 2]:
        s = 2.0 * np.sqrt(1.0 + C[1, 1] - C[0, 0] - C[2, 2])
        w = (C[0, 2] - C[2, 0]) / s
        x = (C[0, 1] + C[1, 0]) / s
        y = 0.25 * s
        z = (C[1, 2] + C[2, 1]) / s
    else:
        s = 2.0 * np.sqrt(1.0 + C[2, 2] - C[0, 0] - C[1, 1])
        w = (C[1, 0] - C[0, 1]) / s
        x = (C[0, 2] + C[2, 0]) / s
        y = (C[1, 2] + C[2, 1]) / s
        z = 0.25 * s

    q = np.array([w, x, y, z], dtype=np.double)
    if w < 0.0:
        q = -q
    return quat_normalize(q)

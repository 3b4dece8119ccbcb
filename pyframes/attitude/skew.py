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
Skew-symmetric cross-product matrices.

The skew symmetric matrix of v turns the cross product into a matrix
product, ``skew(v) @ w == np.cross(v, w)``. Transform jacobians and the
rotation rates extracted from differentiated rotation matrices both go
through these helpers.
"""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def skew(v):
    """
    Convert vector into its skew symmetric form.

    The skew symmetric matrix of a vector v = [v1, v2, v3] is:
    [  0  -v3   v2 ]
    [ v3    0  -v1 ]
    [-v2   v1    0 ]

    Parameters
    ----------
    v : ndarray, shape (3,)
        Input vector

    Returns
    -------
    M : ndarray, shape (3, 3)
        Skew symmetric form of input vector
    """
    M = np.array([[  0.0, -v[2],  v[1]],
                  [ v[2],   0.0, -v[0]],
                  [-v[1],  v[0],   0.0]],
                 dtype=np.double)
    return M


@njit(cache=True, fastmath=True)
def deskew(M):
    """
    Extract the vector of the antisymmetric part of a 3x3 matrix.

    For an exactly skew symmetric M this returns v with skew(v) == M. For a
    nearly skew symmetric matrix (e.g. -dR/dt R^T built from interpolated or
    differentiated data) the symmetric residual is averaged out.

    Parameters
    ----------
    M : ndarray, shape (3, 3)
        Matrix

    Returns
    -------
    v : ndarray, shape (3,)
        Output vector
    """
    v = np.array([0.5 * (M[2, 1] - M[1, 2]),
                  0.5 * (M[0, 2] - M[2, 0]),
                  0.5 * (M[1, 0] - M[0, 1])],
                 dtype=np.double)
    return v


@njit(cache=True, fastmath=True)
def skew_product(v, M):
    """
    Left-multiply a 3x3 matrix by the skew symmetric form of v.

    Parameters
    ----------
    v : ndarray, shape (3,)
        Vector
    M : ndarray, shape (3, 3)
        Matrix

    Returns
    -------
    P : ndarray, shape (3, 3)
        skew(v) @ M, column j being the cross product of v with column j of M
    """
    P = np.empty((3, 3), dtype=np.double)
    for j in range(3):
        P[0, j] = v[1] * M[2, j] - v[2] * M[1, j]
        P[1, j] = v[2] * M[0, j] - v[0] * M[2, j]
        P[2, j] = v[0] * M[1, j] - v[1] * M[0, j]
    return P

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
Attitude module: rotation kernels and the Rotation operator.

This module provides:
- Quaternion kernels (scalar first, Hamilton product, numba compiled)
- Skew symmetric matrices and their inverse
- ``Rotation``, an immutable unit quaternion operator with axis/angle,
  matrix and rotation vector constructors

All rotations are proper rotations of right-handed frames. Matrices act on
column vectors.
"""

from .quaternion import (
    dcm2quat,
    quat2dcm,
    quat_conjugate,
    quat_multiply,
    quat_normalize,
    quat_rotate,
    quat_rotate_inverse,
)
from .rotation import Rotation, RotationConvention
from .skew import deskew, skew, skew_product

__all__ = [
    'skew', 'deskew', 'skew_product',
    'quat_multiply', 'quat_conjugate', 'quat_normalize',
    'quat_rotate', 'quat_rotate_inverse', 'quat2dcm', 'dcm2quat',
    'Rotation', 'RotationConvention',
]

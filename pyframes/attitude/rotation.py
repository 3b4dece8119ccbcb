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

"""Rotation operator backed by a unit quaternion

A :class:`Rotation` acts on vectors as ``q v q*`` (scalar first quaternion,
Hamilton product). ``r1.compose(r2)`` is the rotation that applies ``r2``
first and ``r1`` second, so its matrix is ``r1.matrix @ r2.matrix``.

Axis/angle construction accepts a :class:`RotationConvention`:

- ``VECTOR_OPERATOR``: the vector is rotated by +angle about the axis
- ``FRAME_TRANSFORM``: the frame is rotated by +angle about the axis, i.e.
  the coordinates of a fixed vector are rotated by -angle
"""

from enum import Enum

import numpy as np

from ..core.errors import DegenerateGeometryError
from .quaternion import (
    dcm2quat,
    quat2dcm,
    quat_conjugate,
    quat_multiply,
    quat_normalize,
    quat_rotate,
    quat_rotate_inverse,
)


class RotationConvention(Enum):
    """Meaning of the angle in axis/angle rotations"""
    VECTOR_OPERATOR = 'vector_operator'
    FRAME_TRANSFORM = 'frame_transform'


def _vector(v) -> np.ndarray:
    return np.asarray(v, dtype=np.double).reshape(3)


class Rotation:
    """Proper rotation of 3D space.

    Parameters
    ----------
    q : array_like, shape (4,)
        Quaternion [w, x, y, z]
    normalize : bool
        If True the quaternion is scaled to unit norm; a zero quaternion
        raises ``DegenerateGeometryError``
    """

    __slots__ = ('_q',)

    IDENTITY: 'Rotation'

    def __init__(self, q, normalize: bool = True):
        q = np.array(q, dtype=np.double).reshape(4)
        if normalize:
            if not np.any(q):
                raise DegenerateGeometryError("zero norm quaternion")
            q = quat_normalize(q)
        q.flags.writeable = False
        self._q = q

    @classmethod
    def from_axis_angle(cls, axis, angle: float,
                        convention: RotationConvention = RotationConvention.VECTOR_OPERATOR) -> 'Rotation':
        """
        Build a rotation from an axis and an angle.

        Parameters
        ----------
        axis : array_like, shape (3,)
            Rotation axis, need not be normalized
        angle : float
            Rotation angle (rad)
        convention : RotationConvention
            Meaning of the angle

        Returns
        -------
        Rotation
            Rotation about the axis

        Raises
        ------
        DegenerateGeometryError
            If the axis has zero norm
        """
        axis = _vector(axis)
        norm = np.linalg.norm(axis)
        if norm == 0.0:
            raise DegenerateGeometryError("zero norm rotation axis", axis=axis.tolist())
        if convention == RotationConvention.FRAME_TRANSFORM:
            angle = -angle
        half = 0.5 * angle
        coeff = np.sin(half) / norm
        return cls([np.cos(half), coeff * axis[0], coeff * axis[1], coeff * axis[2]],
                   normalize=False)

    @classmethod
    def from_matrix(cls, matrix, threshold: float = 1e-10) -> 'Rotation':
        """
        Build a rotation from a rotation matrix.

        Parameters
        ----------
        matrix : array_like, shape (3, 3)
            Proper orthogonal matrix, acting on column vectors
        threshold : float
            Largest accepted deviation of ``M @ M.T`` from the identity

        Returns
        -------
        Rotation
            Rotation with the same action as the matrix

        Raises
        ------
        DegenerateGeometryError
            If the matrix is not orthogonal or is a reflection
        """
        m = np.asarray(matrix, dtype=np.double).reshape(3, 3)
        deviation = np.max(np.abs(m @ m.T - np.eye(3)))
        if deviation > threshold:
            raise DegenerateGeometryError(
                f"matrix is not orthogonal (deviation {deviation:.3e})", deviation=deviation)
        if np.linalg.det(m) < 0.0:
            raise DegenerateGeometryError("matrix is a reflection, not a rotation")
        return cls(dcm2quat(np.ascontiguousarray(m)), normalize=False)

    @classmethod
    def from_rotation_vector(cls, rotation_vector) -> 'Rotation':
        """Build the rotation of angle |rv| about rv (vector operator convention)"""
        rv = _vector(rotation_vector)
        angle = np.linalg.norm(rv)
        if angle == 0.0:
            return cls.IDENTITY
        return cls.from_axis_angle(rv, angle)

    @property
    def quaternion(self) -> np.ndarray:
        """Read-only quaternion [w, x, y, z]"""
        return self._q

    @property
    def matrix(self) -> np.ndarray:
        """Rotation matrix M such that apply_to(v) == M @ v"""
        return quat2dcm(self._q)

    @property
    def angle(self) -> float:
        """Rotation angle in [0, pi]"""
        return 2.0 * np.arctan2(np.linalg.norm(self._q[1:]), abs(self._q[0]))

    def axis(self, convention: RotationConvention = RotationConvention.VECTOR_OPERATOR) -> np.ndarray:
        """
        Get the unit rotation axis.

        The identity rotation has no axis; +X is returned for it.
        """
        q = self._q if self._q[0] >= 0.0 else -self._q
        norm = np.linalg.norm(q[1:])
        if norm == 0.0:
            axis = np.array([1.0, 0.0, 0.0])
        else:
            axis = q[1:] / norm
        if convention == RotationConvention.FRAME_TRANSFORM:
            axis = -axis
        return axis

    def rotation_vector(self) -> np.ndarray:
        """Axis scaled by angle, vector operator convention"""
        return self.angle * self.axis()

    def apply_to(self, vector) -> np.ndarray:
        """Rotate a vector"""
        return quat_rotate(self._q, _vector(vector))

    def apply_inverse_to(self, vector) -> np.ndarray:
        """Rotate a vector with the inverse rotation"""
        return quat_rotate_inverse(self._q, _vector(vector))

    def compose(self, other: 'Rotation') -> 'Rotation':
        """Rotation applying ``other`` first and then ``self``"""
        return Rotation(quat_multiply(self._q, other._q))

    def compose_inverse(self, other: 'Rotation') -> 'Rotation':
        """Rotation applying ``other`` first and then the inverse of ``self``"""
        return Rotation(quat_multiply(quat_conjugate(self._q), other._q))

    def revert(self) -> 'Rotation':
        """Inverse rotation"""
        return Rotation(quat_conjugate(self._q), normalize=False)

    @staticmethod
    def distance(r1: 'Rotation', r2: 'Rotation') -> float:
        """Angle of the rotation r1^-1 o r2, in [0, pi]"""
        return r1.compose_inverse(r2).angle

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rotation):
            return NotImplemented
        return bool(np.array_equal(self._q, other._q) or np.array_equal(self._q, -other._q))

    __hash__ = None

    def __repr__(self):
        w, x, y, z = self._q
        return f"Rotation([{w!r}, {x!r}, {y!r}, {z!r}])"


Rotation.IDENTITY = Rotation([1.0, 0.0, 0.0, 0.0], normalize=False)

__all__ = ['Rotation', 'RotationConvention']

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

"""Position, velocity and acceleration triples

``PVCoordinates`` bundles a 3D vector with its first two time derivatives.
Instances are immutable; their arrays are read-only. All operations
propagate the derivatives with the product and quotient rules, so a
normalized or cross-multiplied triple stays kinematically consistent.
"""

import logging
from typing import Iterable, Tuple

import numpy as np

from ..core.errors import DegenerateGeometryError
from ..core.time import AbsoluteDate
from .filters import CartesianDerivativesFilter
from .hermite import hermite_interpolate

logger = logging.getLogger(__name__)


def _frozen(v) -> np.ndarray:
    a = np.array(v, dtype=np.double).reshape(3)
    a.flags.writeable = False
    return a


_ZERO = _frozen([0.0, 0.0, 0.0])


class PVCoordinates:
    """
    Position, velocity and acceleration of a point.

    Parameters
    ----------
    position : array_like, shape (3,)
        Position (m)
    velocity : array_like, shape (3,), optional
        Velocity (m/s), zero if omitted
    acceleration : array_like, shape (3,), optional
        Acceleration (m/s^2), zero if omitted
    """

    __slots__ = ('_position', '_velocity', '_acceleration')

    ZERO: 'PVCoordinates'

    def __init__(self, position, velocity=None, acceleration=None):
        self._position = _frozen(position)
        self._velocity = _ZERO if velocity is None else _frozen(velocity)
        self._acceleration = _ZERO if acceleration is None else _frozen(acceleration)

    @property
    def position(self) -> np.ndarray:
        return self._position

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity

    @property
    def acceleration(self) -> np.ndarray:
        return self._acceleration

    def shifted_by(self, dt: float) -> 'PVCoordinates':
        """
        Extrapolate with constant acceleration.

        Parameters
        ----------
        dt : float
            Time shift (s)

        Returns
        -------
        PVCoordinates
            p + v dt + a dt^2 / 2, v + a dt, a
        """
        return PVCoordinates(self._position + dt * (self._velocity + 0.5 * dt * self._acceleration),
                             self._velocity + dt * self._acceleration,
                             self._acceleration)

    def normalize(self) -> 'PVCoordinates':
        """
        Unit vector along the position, with its first two derivatives.

        Returns
        -------
        PVCoordinates
            u, du/dt, d2u/dt2 with u = p / |p|

        Raises
        ------
        DegenerateGeometryError
            If the position is the zero vector
        """
        norm = np.linalg.norm(self._position)
        if norm == 0.0:
            raise DegenerateGeometryError("cannot normalize a zero-length position")
        inv = 1.0 / norm
        u = inv * self._position
        v = inv * self._velocity
        w = inv * self._acceleration
        uv = np.dot(u, v)
        u_dot = v - uv * u
        u_ddot = w - 2.0 * uv * v + (3.0 * uv * uv - np.dot(v, v) - np.dot(u, w)) * u
        return PVCoordinates(u, u_dot, u_ddot)

    @staticmethod
    def cross_product(a: 'PVCoordinates', b: 'PVCoordinates') -> 'PVCoordinates':
        """Cross product a x b with its first two derivatives"""
        return PVCoordinates(
            np.cross(a._position, b._position),
            np.cross(a._velocity, b._position) + np.cross(a._position, b._velocity),
            np.cross(a._acceleration, b._position)
            + 2.0 * np.cross(a._velocity, b._velocity)
            + np.cross(a._position, b._acceleration))

    def momentum(self) -> np.ndarray:
        """Specific angular momentum r x v"""
        return np.cross(self._position, self._velocity)

    @staticmethod
    def interpolate(date: AbsoluteDate,
                    cartesian_filter: CartesianDerivativesFilter,
                    sample: Iterable[Tuple[AbsoluteDate, 'PVCoordinates']]) -> 'PVCoordinates':
        """
        Hermite interpolation of dated coordinates.

        Parameters
        ----------
        date : AbsoluteDate
            Interpolation date
        cartesian_filter : CartesianDerivativesFilter
            Derivatives of the samples used as interpolation conditions
        sample : iterable of (AbsoluteDate, PVCoordinates)
            Sample points, in any order

        Returns
        -------
        PVCoordinates
            Interpolated position with its velocity and acceleration

        Raises
        ------
        TooFewPointsError
            If fewer than two samples are given
        DegenerateGeometryError
            If two samples share the same date
        """
        sample = sorted(sample, key=lambda entry: entry[0])
        order = cartesian_filter.max_order + 1
        abscissae = [d.duration_from(date) for d, _ in sample]
        conditions = np.empty((len(sample), order, 3))
        for i, (_, pv) in enumerate(sample):
            conditions[i, 0] = pv._position
            if order > 1:
                conditions[i, 1] = pv._velocity
            if order > 2:
                conditions[i, 2] = pv._acceleration
        p, v, a = hermite_interpolate(abscissae, conditions)
        return PVCoordinates(p, v, a)

    def __add__(self, other: 'PVCoordinates') -> 'PVCoordinates':
        if not isinstance(other, PVCoordinates):
            return NotImplemented
        return PVCoordinates(self._position + other._position,
                             self._velocity + other._velocity,
                             self._acceleration + other._acceleration)

    def __sub__(self, other: 'PVCoordinates') -> 'PVCoordinates':
        if not isinstance(other, PVCoordinates):
            return NotImplemented
        return PVCoordinates(self._position - other._position,
                             self._velocity - other._velocity,
                             self._acceleration - other._acceleration)

    def __neg__(self) -> 'PVCoordinates':
        return PVCoordinates(-self._position, -self._velocity, -self._acceleration)

    def __mul__(self, scale: float) -> 'PVCoordinates':
        if not isinstance(scale, (int, float, np.floating)):
            return NotImplemented
        return PVCoordinates(scale * self._position, scale * self._velocity,
                             scale * self._acceleration)

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, PVCoordinates):
            return NotImplemented
        return (np.array_equal(self._position, other._position)
                and np.array_equal(self._velocity, other._velocity)
                and np.array_equal(self._acceleration, other._acceleration))

    __hash__ = None

    def __repr__(self):
        return (f"PVCoordinates(position={self._position.tolist()}, "
                f"velocity={self._velocity.tolist()}, "
                f"acceleration={self._acceleration.tolist()})")


PVCoordinates.ZERO = PVCoordinates(_ZERO, _ZERO, _ZERO)

__all__ = ['PVCoordinates']

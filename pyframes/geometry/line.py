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

"""Infinite lines in 3D space"""

import numpy as np

from ..core.errors import DegenerateGeometryError


class Line:
    """
    Oriented infinite line.

    The line is stored as its point closest to the coordinate origin and a
    unit direction vector pointing from ``p1`` to ``p2``.

    Parameters
    ----------
    p1 : array_like, shape (3,)
        First point on the line
    p2 : array_like, shape (3,)
        Second point on the line
    tolerance : float
        Smallest accepted distance between the two points (m)

    Raises
    ------
    DegenerateGeometryError
        If the two points are closer than ``tolerance``
    """

    __slots__ = ('_origin', '_direction', '_tolerance')

    def __init__(self, p1, p2, tolerance: float = 1e-10):
        p1 = np.asarray(p1, dtype=np.double).reshape(3)
        p2 = np.asarray(p2, dtype=np.double).reshape(3)
        delta = p2 - p1
        norm = np.linalg.norm(delta)
        if norm <= tolerance:
            raise DegenerateGeometryError("line points are coincident",
                                          p1=p1.tolist(), p2=p2.tolist())
        direction = delta / norm
        origin = p1 - np.dot(p1, direction) * direction
        direction.flags.writeable = False
        origin.flags.writeable = False
        self._direction = direction
        self._origin = origin
        self._tolerance = tolerance

    @property
    def origin(self) -> np.ndarray:
        """Point of the line closest to the coordinate origin"""
        return self._origin

    @property
    def direction(self) -> np.ndarray:
        """Unit direction vector"""
        return self._direction

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def point_at(self, abscissa: float) -> np.ndarray:
        """Point at a signed distance from the origin point along the direction"""
        return self._origin + abscissa * self._direction

    def abscissa(self, point) -> float:
        """Signed distance of the projection of a point from the origin point"""
        return float(np.dot(np.asarray(point, dtype=np.double) - self._origin, self._direction))

    def distance(self, point) -> float:
        """Distance from a point to the line"""
        d = np.asarray(point, dtype=np.double) - self._origin
        return float(np.linalg.norm(d - np.dot(d, self._direction) * self._direction))

    def contains(self, point) -> bool:
        return self.distance(point) < self._tolerance

    def revert(self) -> 'Line':
        """Same line with opposite orientation"""
        return Line(self._origin, self._origin - self._direction, self._tolerance)

    def __repr__(self):
        return f"Line(origin={self._origin.tolist()}, direction={self._direction.tolist()})"


__all__ = ['Line']

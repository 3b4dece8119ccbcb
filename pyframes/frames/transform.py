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
Rigid body and kinematic transforms between frames.

A :class:`Transform` is made of exactly one translation followed by exactly
one rotation, both carrying their first two time derivatives:

    P = R (p + t)
    V = R (v + dt/dt) - w x P
    A = R (a + d2t/dt2) - 2 w x V - w x (w x P) - dw/dt x P

where (t, dt/dt, d2t/dt2) is the cartesian part and (R, w, dw/dt) the
angular part. Composition and inversion are derived from this fixed order
and keep every second order term.

Transforms are immutable. ``Transform.IDENTITY`` is the neutral element of
composition and short-circuits every operation.
"""

import logging
from typing import Iterable, Optional

import numpy as np

from ..attitude.rotation import Rotation
from ..attitude.skew import skew_product
from ..coordinate.angular_coordinates import AngularCoordinates
from ..coordinate.filters import AngularDerivativesFilter, CartesianDerivativesFilter
from ..coordinate.pv_coordinates import PVCoordinates
from ..core.time import AbsoluteDate
from ..geometry.line import Line

logger = logging.getLogger(__name__)


class Transform:
    """
    Dated translation then rotation with derivatives.

    Parameters
    ----------
    date : AbsoluteDate
        Date of the transform
    cartesian : PVCoordinates, optional
        Translation with its velocity and acceleration, zero if omitted
    angular : AngularCoordinates, optional
        Rotation with its rate and acceleration, identity if omitted
    """

    __slots__ = ('_date', '_cartesian', '_angular', '_is_identity')

    IDENTITY: 'Transform'

    def __init__(self, date: AbsoluteDate, cartesian: Optional[PVCoordinates] = None,
                 angular: Optional[AngularCoordinates] = None):
        self._date = date
        self._cartesian = PVCoordinates.ZERO if cartesian is None else cartesian
        self._angular = AngularCoordinates.IDENTITY if angular is None else angular
        self._is_identity = False

    @classmethod
    def from_translation(cls, date: AbsoluteDate, translation, velocity=None,
                         acceleration=None) -> 'Transform':
        """Pure translation, the new origin being at -translation in the old frame"""
        return cls(date, cartesian=PVCoordinates(translation, velocity, acceleration))

    @classmethod
    def from_rotation(cls, date: AbsoluteDate, rotation: Rotation, rotation_rate=None,
                      rotation_acceleration=None) -> 'Transform':
        """Pure rotation, with optional rate and acceleration in the new frame"""
        return cls(date, angular=AngularCoordinates(rotation, rotation_rate, rotation_acceleration))

    @staticmethod
    def compose(date: AbsoluteDate, first: 'Transform', second: 'Transform') -> 'Transform':
        """
        Combine two transforms, ``first`` applied before ``second``.

        The dates of the two transforms are ignored; the result is stamped
        with ``date``.

        Parameters
        ----------
        date : AbsoluteDate
            Date of the composite transform
        first : Transform
            Transform from frame A to frame B
        second : Transform
            Transform from frame B to frame C

        Returns
        -------
        Transform
            Transform from frame A to frame C, with

            - t = t1 + R1^-1 t2
            - dt/dt = dt1/dt + R1^-1 (dt2/dt + w1 x t2)
            - d2t/dt2 = d2t1/dt2 + R1^-1 (d2t2/dt2 + 2 w1 x dt2/dt
              + w1 x (w1 x t2) + dw1/dt x t2)
            - R = R2 R1, w = w2 + R2 w1,
              dw/dt = dw2/dt + R2 dw1/dt - w2 x (R2 w1)
        """
        if first._is_identity:
            return Transform(date, second._cartesian, second._angular)
        if second._is_identity:
            return Transform(date, first._cartesian, first._angular)

        # the second translation seen from the frame before the first rotation
        cartesian = first._cartesian + first._angular.revert().apply_to_pv(second._cartesian)
        angular = AngularCoordinates.compose(first._angular, second._angular)
        return Transform(date, cartesian, angular)

    @property
    def date(self) -> AbsoluteDate:
        return self._date

    @property
    def cartesian(self) -> PVCoordinates:
        return self._cartesian

    @property
    def angular(self) -> AngularCoordinates:
        return self._angular

    @property
    def translation(self) -> np.ndarray:
        return self._cartesian.position

    @property
    def velocity(self) -> np.ndarray:
        return self._cartesian.velocity

    @property
    def acceleration(self) -> np.ndarray:
        return self._cartesian.acceleration

    @property
    def rotation(self) -> Rotation:
        return self._angular.rotation

    @property
    def rotation_rate(self) -> np.ndarray:
        return self._angular.rotation_rate

    @property
    def rotation_acceleration(self) -> np.ndarray:
        return self._angular.rotation_acceleration

    def get_inverse(self) -> 'Transform':
        """
        Inverse transform, exact to second order.

        With rp = R t, rv = R dt/dt and ra = R d2t/dt2 the inverse has
        translation -rp, velocity w x rp - rv, acceleration
        -ra + 2 w x rv + dw/dt x rp - w x (w x rp) and the reverted angular
        coordinates.
        """
        if self._is_identity:
            return self
        return Transform(self._date,
                         -self._angular.apply_to_pv(self._cartesian),
                         self._angular.revert())

    def freeze(self) -> 'Transform':
        """Same translation and rotation, all derivatives set to zero"""
        if self._is_identity:
            return self
        return Transform(self._date,
                         PVCoordinates(self._cartesian.position),
                         AngularCoordinates(self._angular.rotation))

    def shifted_by(self, dt: float) -> 'Transform':
        """Extrapolate the transform ``dt`` seconds away from its date"""
        if self._is_identity:
            return self
        return Transform(self._date.shifted_by(dt),
                         self._cartesian.shifted_by(dt),
                         self._angular.shifted_by(dt))

    def transform_position(self, position) -> np.ndarray:
        """Transform a point, R (p + t)"""
        if self._is_identity:
            return position
        return self._angular.apply_to(np.asarray(position, dtype=np.double)
                                      + self._cartesian.position)

    def transform_vector(self, vector) -> np.ndarray:
        """Transform a free vector, rotation only"""
        if self._is_identity:
            return vector
        return self._angular.apply_to(vector)

    def transform_line(self, line: Line) -> Line:
        """Transform an oriented line"""
        if self._is_identity:
            return line
        p1 = self.transform_position(line.origin)
        p2 = self.transform_position(line.origin + line.direction)
        return Line(p1, p2, line.tolerance)

    def transform_pv_coordinates(self, pv: PVCoordinates) -> PVCoordinates:
        """Transform position, velocity and acceleration of a point"""
        if self._is_identity:
            return pv
        return self._angular.apply_to_pv(pv + self._cartesian)

    def get_jacobian(self, jacobian: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Jacobian of the position-velocity transform.

        Parameters
        ----------
        jacobian : ndarray, shape (m, n), optional
            Array with m, n >= 6 whose upper-left 6x6 block receives the
            jacobian; other elements are left untouched

        Returns
        -------
        ndarray
            ``jacobian`` if given, else a new 6x6 array
            [[R, 0], [skew(-w) R, R]]
        """
        if jacobian is None:
            jacobian = np.zeros((6, 6))
        if self._is_identity:
            jacobian[:6, :6] = np.eye(6)
            return jacobian

        m = self._angular.rotation.matrix
        jacobian[:3, :3] = m
        jacobian[:3, 3:6] = 0.0
        jacobian[3:6, :3] = skew_product(-self._angular.rotation_rate, m)
        jacobian[3:6, 3:6] = m
        return jacobian

    @staticmethod
    def interpolate(date: AbsoluteDate, sample: Iterable['Transform'],
                    cartesian_filter: CartesianDerivativesFilter = CartesianDerivativesFilter.USE_PVA,
                    angular_filter: AngularDerivativesFilter = AngularDerivativesFilter.USE_RRA
                    ) -> 'Transform':
        """
        Hermite interpolation of transforms.

        The cartesian and angular parts are interpolated separately. Keep
        the sample short (10 to 20 transforms). Rotation errors at the
        1e-15 rad level need ``AngularDerivativesFilter.USE_RR``; the
        default USE_RRA is about ten times less accurate on ten point
        samples.

        Parameters
        ----------
        date : AbsoluteDate
            Interpolation date
        sample : iterable of Transform
            Sample transforms, in any order
        cartesian_filter : CartesianDerivativesFilter
            Translation derivatives used
        angular_filter : AngularDerivativesFilter
            Rotation derivatives used

        Returns
        -------
        Transform
            Interpolated transform at ``date``

        Raises
        ------
        TooFewPointsError
            If fewer than two transforms are given
        DegenerateGeometryError
            If two transforms share the same date
        """
        sample = list(sample)
        cartesian = PVCoordinates.interpolate(
            date, cartesian_filter, [(t._date, t._cartesian) for t in sample])
        angular = AngularCoordinates.interpolate(
            date, angular_filter, [(t._date, t._angular) for t in sample])
        return Transform(date, cartesian, angular)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return (self._date == other._date
                and self._cartesian == other._cartesian
                and self._angular == other._angular)

    __hash__ = None

    def __repr__(self):
        if self._is_identity:
            return "Transform.IDENTITY"
        return f"Transform({self._date!r}, {self._cartesian!r}, {self._angular!r})"


Transform.IDENTITY = Transform(AbsoluteDate.J2000_EPOCH)
Transform.IDENTITY._is_identity = True

__all__ = ['Transform']

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

"""Rotation, rotation rate and rotation acceleration triples

An :class:`AngularCoordinates` instance describes a time-dependent rotation
R(t) from an old frame to a new frame together with its derivatives. The
rate vector w is expressed in the new frame and satisfies

    dR/dt = -[w x] R

so that a vector fixed in the old frame appears in the new frame with the
derivative -w x (R u). The rotation acceleration is dw/dt.
"""

import logging
from typing import Iterable, Tuple

import numpy as np

from ..attitude.rotation import Rotation, RotationConvention
from ..attitude.skew import deskew, skew_product
from ..core.time import AbsoluteDate
from .filters import AngularDerivativesFilter
from .hermite import check_abscissae, hermite_interpolate
from .pv_coordinates import PVCoordinates, _frozen, _ZERO

logger = logging.getLogger(__name__)


class AngularCoordinates:
    """
    Rotation with its first two time derivatives.

    Parameters
    ----------
    rotation : Rotation, optional
        Rotation from the old frame to the new frame, identity if omitted
    rotation_rate : array_like, shape (3,), optional
        Rotation rate w in the new frame (rad/s), zero if omitted
    rotation_acceleration : array_like, shape (3,), optional
        Rotation acceleration dw/dt (rad/s^2), zero if omitted
    """

    __slots__ = ('_rotation', '_rotation_rate', '_rotation_acceleration')

    IDENTITY: 'AngularCoordinates'

    def __init__(self, rotation: Rotation = None, rotation_rate=None, rotation_acceleration=None):
        self._rotation = Rotation.IDENTITY if rotation is None else rotation
        self._rotation_rate = _ZERO if rotation_rate is None else _frozen(rotation_rate)
        self._rotation_acceleration = (_ZERO if rotation_acceleration is None
                                       else _frozen(rotation_acceleration))

    @property
    def rotation(self) -> Rotation:
        return self._rotation

    @property
    def rotation_rate(self) -> np.ndarray:
        return self._rotation_rate

    @property
    def rotation_acceleration(self) -> np.ndarray:
        return self._rotation_acceleration

    def revert(self) -> 'AngularCoordinates':
        """
        Inverse angular coordinates.

        Returns
        -------
        AngularCoordinates
            (R^-1, -R^-1 w, -R^-1 dw/dt)
        """
        return AngularCoordinates(self._rotation.revert(),
                                  -self._rotation.apply_inverse_to(self._rotation_rate),
                                  -self._rotation.apply_inverse_to(self._rotation_acceleration))

    def apply_to(self, vector) -> np.ndarray:
        """Rotate a vector"""
        return self._rotation.apply_to(vector)

    def apply_to_pv(self, pv: PVCoordinates) -> PVCoordinates:
        """
        Express coordinates given in the old frame in the new frame.

        Parameters
        ----------
        pv : PVCoordinates
            Position, velocity and acceleration in the old frame

        Returns
        -------
        PVCoordinates
            P = R p, V = R v - w x P, A = R a - 2 w x V - w x (w x P) - dw/dt x P
        """
        w = self._rotation_rate
        w_dot = self._rotation_acceleration
        p = self._rotation.apply_to(pv.position)
        v = self._rotation.apply_to(pv.velocity) - np.cross(w, p)
        a = (self._rotation.apply_to(pv.acceleration)
             - 2.0 * np.cross(w, v)
             - np.cross(w, np.cross(w, p))
             - np.cross(w_dot, p))
        return PVCoordinates(p, v, a)

    @staticmethod
    def compose(first: 'AngularCoordinates', second: 'AngularCoordinates') -> 'AngularCoordinates':
        """
        Combine two angular coordinates, ``first`` applied before ``second``.

        Returns
        -------
        AngularCoordinates
            (R2 R1, w2 + R2 w1, dw2/dt + R2 dw1/dt - w2 x (R2 w1))
        """
        r2 = second._rotation
        r2_w1 = r2.apply_to(first._rotation_rate)
        return AngularCoordinates(
            r2.compose(first._rotation),
            second._rotation_rate + r2_w1,
            second._rotation_acceleration
            + r2.apply_to(first._rotation_acceleration)
            - np.cross(second._rotation_rate, r2_w1))

    def shifted_by(self, dt: float) -> 'AngularCoordinates':
        """
        Extrapolate the rotation over a short time span.

        The rotation is advanced about the rate vector by |w| dt, then about
        the acceleration vector by |dw/dt| dt^2 / 2; the rate becomes
        w + dw/dt dt.

        Parameters
        ----------
        dt : float
            Time shift (s)

        Returns
        -------
        AngularCoordinates
            Shifted angular coordinates
        """
        rate = np.linalg.norm(self._rotation_rate)
        if rate == 0.0:
            revolution = Rotation.IDENTITY
        else:
            revolution = Rotation.from_axis_angle(self._rotation_rate, rate * dt,
                                                  RotationConvention.FRAME_TRANSFORM)
        linear = AngularCoordinates(revolution.compose(self._rotation), self._rotation_rate)

        acc = np.linalg.norm(self._rotation_acceleration)
        if acc == 0.0:
            return linear

        quadratic = AngularCoordinates(
            Rotation.from_axis_angle(self._rotation_acceleration, 0.5 * acc * dt * dt,
                                     RotationConvention.FRAME_TRANSFORM),
            dt * self._rotation_acceleration,
            self._rotation_acceleration)
        return AngularCoordinates.compose(linear, quadratic)

    @staticmethod
    def estimate_rate(start: Rotation, end: Rotation, dt: float) -> np.ndarray:
        """
        Constant rotation rate turning ``start`` into ``end`` in ``dt`` seconds.

        Parameters
        ----------
        start : Rotation
            Rotation at the beginning of the interval
        end : Rotation
            Rotation at the end of the interval
        dt : float
            Interval length (s), non-zero

        Returns
        -------
        ndarray, shape (3,)
            Rotation rate in the new frame
        """
        evolution = end.compose(start.revert())
        return -evolution.rotation_vector() / dt

    @staticmethod
    def from_axes(x: PVCoordinates, y: PVCoordinates, z: PVCoordinates) -> 'AngularCoordinates':
        """
        Build angular coordinates from moving frame axes.

        Parameters
        ----------
        x, y, z : PVCoordinates
            Unit vectors of the new frame axes expressed in the old frame,
            with their first and second derivatives

        Returns
        -------
        AngularCoordinates
            Rotation whose matrix rows are the axes, with the matching rate
            and acceleration
        """
        m = np.array([x.position, y.position, z.position])
        m_dot = np.array([x.velocity, y.velocity, z.velocity])
        m_ddot = np.array([x.acceleration, y.acceleration, z.acceleration])
        rotation = Rotation.from_matrix(m)
        # dM/dt = -[w x] M
        w = deskew(-m_dot @ m.T)
        w_dot = deskew(-(m_ddot + skew_product(w, m_dot)) @ m.T)
        return AngularCoordinates(rotation, w, w_dot)

    @staticmethod
    def interpolate(date: AbsoluteDate,
                    angular_filter: AngularDerivativesFilter,
                    sample: Iterable[Tuple[AbsoluteDate, 'AngularCoordinates']]) -> 'AngularCoordinates':
        """
        Hermite interpolation of dated angular coordinates.

        A linear model rotating at the mean rate of the sample is removed
        first. The residual rotations, all close to identity, are turned
        into modified Rodrigues parameters with their derivatives, which
        are interpolated as ordinary vectors before being converted back
        and recombined with the linear model.

        With USE_RR, rotation errors stay at the 1e-15 rad level. USE_RRA
        adds acceleration conditions and raises the polynomial degree, so
        on samples of about ten points rounding grows to a few 1e-14 rad.

        Parameters
        ----------
        date : AbsoluteDate
            Interpolation date
        angular_filter : AngularDerivativesFilter
            Derivatives of the samples used as interpolation conditions
        sample : iterable of (AbsoluteDate, AngularCoordinates)
            Sample points, in any order; keep it short (10 to 20 points)

        Returns
        -------
        AngularCoordinates
            Interpolated rotation with its rate and acceleration

        Raises
        ------
        TooFewPointsError
            If fewer than two samples are given
        DegenerateGeometryError
            If two samples share the same date
        """
        sample = sorted(sample, key=lambda entry: entry[0])
        abscissae = check_abscissae([d.duration_from(date) for d, _ in sample])
        order = angular_filter.max_order + 1

        if order > 1:
            mean_rate = np.mean([ac._rotation_rate for _, ac in sample], axis=0)
        else:
            mean_rate = np.mean(
                [AngularCoordinates.estimate_rate(sample[i][1]._rotation, sample[i + 1][1]._rotation,
                                                  abscissae[i + 1] - abscissae[i])
                 for i in range(len(sample) - 1)], axis=0)

        i0 = int(np.argmin(np.abs(abscissae)))
        reference = AngularCoordinates(sample[i0][1]._rotation, mean_rate)

        conditions = np.empty((len(sample), order, 3))
        for i, (_, ac) in enumerate(sample):
            if order < 3:
                ac = AngularCoordinates(ac._rotation, ac._rotation_rate if order > 1 else None)
            linear = reference.shifted_by(abscissae[i] - abscissae[i0])
            residual = AngularCoordinates.compose(linear.revert(), ac)
            conditions[i] = _to_mrp(residual)[:order]

        mrp = hermite_interpolate(abscissae, conditions)
        residual = _from_mrp(mrp)
        linear = reference.shifted_by(-abscissae[i0])
        return AngularCoordinates.compose(linear, residual)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AngularCoordinates):
            return NotImplemented
        return (self._rotation == other._rotation
                and np.array_equal(self._rotation_rate, other._rotation_rate)
                and np.array_equal(self._rotation_acceleration, other._rotation_acceleration))

    __hash__ = None

    def __repr__(self):
        return (f"AngularCoordinates(rotation={self._rotation!r}, "
                f"rotation_rate={self._rotation_rate.tolist()}, "
                f"rotation_acceleration={self._rotation_acceleration.tolist()})")


def _to_mrp(ac: AngularCoordinates) -> np.ndarray:
    """Modified Rodrigues parameters of a rotation with two derivatives, shape (3, 3)"""
    q = ac.rotation.quaternion
    if q[0] < 0.0:
        q = -q
    w, x = q[0], q[1:]
    omega = ac.rotation_rate
    omega_dot = ac.rotation_acceleration

    # dq/dt = -1/2 (0, w) q
    w_dot = 0.5 * np.dot(omega, x)
    x_dot = -0.5 * (w * omega + np.cross(omega, x))
    w_ddot = 0.5 * (np.dot(omega_dot, x) + np.dot(omega, x_dot))
    x_ddot = -0.5 * (w_dot * omega + w * omega_dot + np.cross(omega_dot, x) + np.cross(omega, x_dot))

    inv = 1.0 / (1.0 + w)
    p = x * inv
    p_dot = (x_dot - p * w_dot) * inv
    p_ddot = (x_ddot - 2.0 * w_dot * p_dot - p * w_ddot) * inv
    return np.array([p, p_dot, p_ddot])


def _from_mrp(mrp: np.ndarray) -> AngularCoordinates:
    """Inverse of _to_mrp"""
    p, p_dot, p_ddot = mrp
    s = np.dot(p, p)
    s_dot = 2.0 * np.dot(p, p_dot)
    s_ddot = 2.0 * (np.dot(p_dot, p_dot) + np.dot(p, p_ddot))
    k = 1.0 / (1.0 + s)
    k_dot = -s_dot * k * k
    k_ddot = -s_ddot * k * k + 2.0 * s_dot * s_dot * k * k * k

    w = 2.0 * k - 1.0
    x = 2.0 * k * p
    w_dot = 2.0 * k_dot
    x_dot = 2.0 * (k_dot * p + k * p_dot)
    w_ddot = 2.0 * k_ddot
    x_ddot = 2.0 * (k_ddot * p + 2.0 * k_dot * p_dot + k * p_ddot)

    # w = -2 vec(dq/dt q*), dw/dt = -2 vec(d2q/dt2 q*)
    omega = -2.0 * (w * x_dot - w_dot * x - np.cross(x_dot, x))
    omega_dot = -2.0 * (w * x_ddot - w_ddot * x - np.cross(x_ddot, x))
    return AngularCoordinates(Rotation([w, x[0], x[1], x[2]]), omega, omega_dot)


AngularCoordinates.IDENTITY = AngularCoordinates()

__all__ = ['AngularCoordinates']

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

"""Earth rotation and pole motion providers

Two providers link the inertial root to the Earth-fixed frame:

- ``EarthRotationProvider``: GCRF-like inertial frame to the terrestrial
  intermediate frame (TIRF), a rotation about Z by the Greenwich mean
  sidereal time with the constant Earth rotation rate
- ``PoleMotionProvider``: TIRF to ITRF, the small pole motion rotations
  interpolated from a table of IERS-style corrections plus the slow drift
  of the terrestrial intermediate origin

Both keep their last result in a single-slot cache; ``compute_transform``
gives the cache-free reference value.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from ..attitude.rotation import Rotation, RotationConvention
from ..core.constants import AS2R, JD_J2000, JULIAN_CENTURY, OMGE, S_PRIME_RATE, SECONDS_PER_DAY
from ..core.errors import ProviderComputationError
from ..core.time import AbsoluteDate
from .providers import SingleSlotCache, TransformProvider
from .transform import Transform

logger = logging.getLogger(__name__)

_PLUS_I = np.array([1.0, 0.0, 0.0])
_PLUS_J = np.array([0.0, 1.0, 0.0])
_PLUS_K = np.array([0.0, 0.0, 1.0])


def gmst_from_j2000(dt_tt: float) -> float:
    """
    Greenwich mean sidereal time.

    IAU 1982 expression, with TT standing in for UT1 (accuracy of the order
    of one arc second, enough for frame chaining).

    Parameters
    ----------
    dt_tt : float
        TT seconds elapsed since J2000.0

    Returns
    -------
    float
        GMST in radians, in [0, 2 pi)
    """
    T = dt_tt / JULIAN_CENTURY
    # the 876600 h per century term advances one second per second, reduced
    # modulo one day first to keep the sub-day precision of dt_tt
    gmst_sec = (67310.54841
                + np.fmod(dt_tt, SECONDS_PER_DAY)
                + 8640184.812866 * T
                + 0.093104 * T**2
                - 6.2e-6 * T**3)
    return (gmst_sec / SECONDS_PER_DAY * 2.0 * np.pi) % (2.0 * np.pi)


def gmst(jd_tt: float) -> float:
    """Greenwich mean sidereal time (rad) at a TT julian date"""
    return gmst_from_j2000((jd_tt - JD_J2000) * SECONDS_PER_DAY)


class EarthRotationProvider(TransformProvider):
    """Inertial frame to terrestrial intermediate frame"""

    def __init__(self):
        self.cache = SingleSlotCache()

    def compute_transform(self, date: AbsoluteDate) -> Transform:
        theta = gmst_from_j2000(date.duration_from(AbsoluteDate.J2000_EPOCH))
        rotation = Rotation.from_axis_angle(_PLUS_K, theta, RotationConvention.FRAME_TRANSFORM)
        return Transform.from_rotation(date, rotation, np.array([0.0, 0.0, OMGE]))

    def get_transform(self, date: AbsoluteDate) -> Transform:
        return self.cache.get(date, self.compute_transform)


@dataclass(frozen=True)
class PoleCorrection:
    """Pole coordinates (rad)"""
    xp: float = 0.0
    yp: float = 0.0


PoleCorrection.NULL = PoleCorrection(0.0, 0.0)


class PoleCorrectionTable:
    """
    Pole coordinates sampled at known dates, linearly interpolated.

    Parameters
    ----------
    dates : iterable of AbsoluteDate
        Sample dates, strictly increasing
    xp, yp : array_like
        Pole coordinates at the sample dates (rad)

    Raises
    ------
    ValueError
        If the arrays have different lengths, are empty or the dates are
        not strictly increasing
    """

    def __init__(self, dates: Iterable[AbsoluteDate], xp, yp):
        self.dates = list(dates)
        self._t = np.array([d.duration_from(AbsoluteDate.J2000_EPOCH) for d in self.dates])
        self._xp = np.asarray(xp, dtype=np.double)
        self._yp = np.asarray(yp, dtype=np.double)
        if len(self._t) == 0:
            raise ValueError("empty pole correction table")
        if not (len(self._t) == len(self._xp) == len(self._yp)):
            raise ValueError("pole correction arrays have different lengths")
        if np.any(np.diff(self._t) <= 0.0):
            raise ValueError("pole correction dates must be strictly increasing")

    @classmethod
    def from_arcseconds(cls, records: Iterable[Tuple[AbsoluteDate, float, float]]) -> 'PoleCorrectionTable':
        """Build from (date, xp, yp) records with angles in arc seconds"""
        records = sorted(records, key=lambda r: r[0])
        return cls([r[0] for r in records],
                   [r[1] * AS2R for r in records],
                   [r[2] * AS2R for r in records])

    def get_pole_correction(self, date: AbsoluteDate) -> PoleCorrection:
        """
        Interpolate the pole coordinates.

        Raises
        ------
        ProviderComputationError
            If the date is outside the table
        """
        t = date.duration_from(AbsoluteDate.J2000_EPOCH)
        if t < self._t[0] or t > self._t[-1]:
            raise ProviderComputationError(
                f"no pole correction data at {date} (table covers {self.dates[0]} to {self.dates[-1]})",
                date=date)
        return PoleCorrection(float(np.interp(t, self._t, self._xp)),
                              float(np.interp(t, self._t, self._yp)))


class PoleMotionProvider(TransformProvider):
    """
    Terrestrial intermediate frame to ITRF.

    Parameters
    ----------
    table : PoleCorrectionTable, optional
        Pole coordinates; without a table the pole corrections are zero
        and only the origin drift remains
    """

    def __init__(self, table: Optional[PoleCorrectionTable] = None):
        self.table = table
        self.cache = SingleSlotCache()

    def get_pole_correction(self, date: AbsoluteDate) -> PoleCorrection:
        if self.table is None:
            return PoleCorrection.NULL
        return self.table.get_pole_correction(date)

    def compute_transform(self, date: AbsoluteDate) -> Transform:
        """Transform at ``date`` without touching the cache"""
        ttc = date.duration_from(AbsoluteDate.J2000_EPOCH) / JULIAN_CENTURY
        correction = self.get_pole_correction(date)

        r1 = Rotation.from_axis_angle(_PLUS_I, -correction.yp, RotationConvention.VECTOR_OPERATOR)
        r2 = Rotation.from_axis_angle(_PLUS_J, -correction.xp, RotationConvention.VECTOR_OPERATOR)
        r3 = Rotation.from_axis_angle(_PLUS_K, S_PRIME_RATE * ttc, RotationConvention.VECTOR_OPERATOR)

        # W = R3(-s') R2(xp) R1(yp), the IERS polar motion matrix
        w = r3.compose(r2.compose(r1))
        return Transform.from_rotation(date, w.revert())

    def get_transform(self, date: AbsoluteDate) -> Transform:
        return self.cache.get(date, self.compute_transform)


__all__ = [
    'gmst', 'gmst_from_j2000', 'EarthRotationProvider', 'PoleCorrection', 'PoleCorrectionTable',
    'PoleMotionProvider',
]

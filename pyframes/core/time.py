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

"""Absolute dates and time scales

Dates are stored as whole seconds plus a fractional part elapsed since the
J2000.0 epoch (2000-01-01T12:00:00 TT), counted in the continuous TAI scale.
Keeping the integer part separate preserves sub-nanosecond resolution for
decades around the epoch, which matters when interpolation grids are built
from date differences.
"""

import math
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Union

from .constants import (
    GPST0,
    GST0,
    J2000_TT,
    JD_J2000,
    SECONDS_PER_DAY,
    TAI_MINUS_GPS,
    TAI_MINUS_UTC_AT_GPS_EPOCH,
    TT_MINUS_TAI,
)

# Leap seconds table (most recent first), GPS - UTC increments by one at each entry
LEAPSECONDS_TABLE = [
    datetime(2017, 1, 1, 0, 0, 0),  # 18 seconds
    datetime(2015, 7, 1, 0, 0, 0),  # 17 seconds
    datetime(2012, 7, 1, 0, 0, 0),  # 16 seconds
    datetime(2009, 1, 1, 0, 0, 0),  # 15 seconds
    datetime(2006, 1, 1, 0, 0, 0),  # 14 seconds
    datetime(1999, 1, 1, 0, 0, 0),  # 13 seconds
    datetime(1997, 7, 1, 0, 0, 0),  # 12 seconds
    datetime(1996, 1, 1, 0, 0, 0),  # 11 seconds
    datetime(1994, 7, 1, 0, 0, 0),  # 10 seconds
    datetime(1993, 7, 1, 0, 0, 0),  # 9 seconds
    datetime(1992, 7, 1, 0, 0, 0),  # 8 seconds
    datetime(1991, 1, 1, 0, 0, 0),  # 7 seconds
    datetime(1990, 1, 1, 0, 0, 0),  # 6 seconds
    datetime(1988, 1, 1, 0, 0, 0),  # 5 seconds
    datetime(1985, 7, 1, 0, 0, 0),  # 4 seconds
    datetime(1983, 7, 1, 0, 0, 0),  # 3 seconds
    datetime(1982, 7, 1, 0, 0, 0),  # 2 seconds
    datetime(1981, 7, 1, 0, 0, 0),  # 1 second
    datetime(*GPST0),               # 0 seconds
]

_J2000_LABEL = datetime(*J2000_TT)


class TimeScale(Enum):
    """Time scales accepted when converting to and from calendar labels"""
    TAI = 'TAI'
    TT = 'TT'
    GPS = 'GPS'
    UTC = 'UTC'


def _naive_utc(dt: datetime) -> datetime:
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def get_leap_seconds(time_utc: datetime) -> int:
    """Get TAI - UTC at given UTC time.

    Parameters
    ----------
    time_utc : datetime.datetime
        UTC time (naive datetimes are taken as UTC)

    Returns
    -------
    int
        Number of seconds to add to UTC to get TAI

    Raises
    ------
    ValueError
        If the time is before the GPS epoch, where the table has no entries
    """
    time_utc = _naive_utc(time_utc)
    if time_utc < LEAPSECONDS_TABLE[-1]:
        raise ValueError(f"Time must be after GPS epoch {LEAPSECONDS_TABLE[-1]}")

    for i, leap_time in enumerate(LEAPSECONDS_TABLE):
        if time_utc >= leap_time:
            return int(TAI_MINUS_UTC_AT_GPS_EPOCH) + len(LEAPSECONDS_TABLE) - 1 - i

    return int(TAI_MINUS_UTC_AT_GPS_EPOCH)


def _split(seconds: float):
    whole = math.floor(seconds)
    frac = seconds - whole
    # tiny negative values round up to a full second
    if frac >= 1.0:
        return int(whole) + 1, 0.0
    return int(whole), frac


class AbsoluteDate:
    """Instant on a continuous time line.

    Instances are immutable, totally ordered and hashable. Two dates are
    equal only if they represent exactly the same instant; there is no
    tolerance in ``==``.

    Parameters
    ----------
    epoch : int
        Whole seconds since J2000.0 in the TAI scale
    offset : float
        Additional seconds, normalized into [0, 1)
    """

    __slots__ = ('_epoch', '_offset')

    J2000_EPOCH: 'AbsoluteDate'
    GPS_EPOCH: 'AbsoluteDate'
    GALILEO_EPOCH: 'AbsoluteDate'

    def __init__(self, epoch: int = 0, offset: float = 0.0):
        carry, frac = _split(offset)
        object.__setattr__(self, '_epoch', int(epoch) + carry)
        object.__setattr__(self, '_offset', frac)

    def __setattr__(self, name, value):
        raise AttributeError("AbsoluteDate is immutable")

    @classmethod
    def from_datetime(cls, dt: datetime,
                      scale: TimeScale = TimeScale.UTC) -> 'AbsoluteDate':
        """Create a date from a calendar label in the given time scale.

        Parameters
        ----------
        dt : datetime.datetime
            Calendar label; timezone-aware values are converted to UTC and
            are only meaningful with ``TimeScale.UTC``
        scale : TimeScale
            Time scale of the label

        Returns
        -------
        AbsoluteDate
            Corresponding instant
        """
        dt = _naive_utc(dt)
        delta = dt - _J2000_LABEL
        whole = delta.days * 86400 + delta.seconds
        frac = delta.microseconds * 1e-6

        # shift the label so that the result counts TAI seconds from J2000.0
        if scale == TimeScale.TT:
            shift = 0.0
        elif scale == TimeScale.TAI:
            shift = TT_MINUS_TAI
        elif scale == TimeScale.GPS:
            shift = TT_MINUS_TAI + TAI_MINUS_GPS
        elif scale == TimeScale.UTC:
            shift = TT_MINUS_TAI + get_leap_seconds(dt)
        else:
            raise ValueError(f"Unknown time scale: {scale}")

        shift_whole, shift_frac = _split(shift)
        return cls(whole + shift_whole, frac + shift_frac)

    @classmethod
    def from_components(cls, year: int, month: int, day: int,
                        hour: int = 0, minute: int = 0, second: float = 0.0,
                        scale: TimeScale = TimeScale.UTC) -> 'AbsoluteDate':
        """Create a date from calendar components"""
        whole, frac = _split(second)
        base = cls.from_datetime(datetime(year, month, day, hour, minute, whole), scale)
        return base.shifted_by(frac)

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def offset(self) -> float:
        return self._offset

    def shifted_by(self, dt: float) -> 'AbsoluteDate':
        """Get a new date shifted by ``dt`` seconds"""
        dt_whole, dt_frac = _split(dt)
        return AbsoluteDate(self._epoch + dt_whole, self._offset + dt_frac)

    def duration_from(self, other: 'AbsoluteDate') -> float:
        """Elapsed seconds from ``other`` to this date"""
        return (self._epoch - other._epoch) + (self._offset - other._offset)

    def _scale_offset(self, scale: TimeScale) -> float:
        """Seconds to subtract from the TT-based count to get ``scale`` labels"""
        if scale == TimeScale.TT:
            return 0.0
        if scale == TimeScale.TAI:
            return TT_MINUS_TAI
        if scale == TimeScale.GPS:
            return TT_MINUS_TAI + TAI_MINUS_GPS
        if scale == TimeScale.UTC:
            # TAI - UTC depends on the UTC label itself, refine once
            guess = TT_MINUS_TAI + get_leap_seconds(
                _J2000_LABEL + timedelta(seconds=self.duration_from(AbsoluteDate.J2000_EPOCH)))
            label = _J2000_LABEL + timedelta(seconds=self.duration_from(AbsoluteDate.J2000_EPOCH) - guess)
            return TT_MINUS_TAI + get_leap_seconds(label)
        raise ValueError(f"Unknown time scale: {scale}")

    def to_datetime(self, scale: TimeScale = TimeScale.UTC) -> datetime:
        """Convert to a naive calendar label in the given time scale.

        Resolution is limited to the microsecond by ``datetime``.
        """
        shift_whole, shift_frac = _split(self._scale_offset(scale))
        whole = self._epoch - shift_whole
        frac = self._offset - shift_frac
        return _J2000_LABEL + timedelta(seconds=whole) + timedelta(seconds=frac)

    def to_julian_date(self, scale: TimeScale = TimeScale.TT) -> float:
        """Julian date of this instant in the given time scale"""
        seconds = (self._epoch - self._scale_offset(scale)) + self._offset
        return JD_J2000 + seconds / SECONDS_PER_DAY

    def __add__(self, seconds: float) -> 'AbsoluteDate':
        if isinstance(seconds, (int, float)):
            return self.shifted_by(float(seconds))
        return NotImplemented

    def __sub__(self, other: Union['AbsoluteDate', float]) -> Union[float, 'AbsoluteDate']:
        if isinstance(other, AbsoluteDate):
            return self.duration_from(other)
        if isinstance(other, (int, float)):
            return self.shifted_by(-float(other))
        return NotImplemented

    def _key(self):
        return (self._epoch, self._offset)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AbsoluteDate):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: 'AbsoluteDate') -> bool:
        if not isinstance(other, AbsoluteDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: 'AbsoluteDate') -> bool:
        if not isinstance(other, AbsoluteDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: 'AbsoluteDate') -> bool:
        if not isinstance(other, AbsoluteDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: 'AbsoluteDate') -> bool:
        if not isinstance(other, AbsoluteDate):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.to_datetime(TimeScale.TAI).isoformat() + ' TAI'

    def __repr__(self):
        return f"AbsoluteDate({self._epoch}, {self._offset!r})"


AbsoluteDate.J2000_EPOCH = AbsoluteDate(0, 0.0)
AbsoluteDate.GPS_EPOCH = AbsoluteDate.from_datetime(datetime(*GPST0), TimeScale.GPS)
AbsoluteDate.GALILEO_EPOCH = AbsoluteDate.from_datetime(datetime(*GST0), TimeScale.GPS)

__all__ = ['AbsoluteDate', 'TimeScale', 'LEAPSECONDS_TABLE', 'get_leap_seconds']

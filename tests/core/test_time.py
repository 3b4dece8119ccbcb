#!/usr/bin/env python3
"""Test suite for absolute dates and time scales"""

import unittest
from datetime import datetime, timedelta

from pyframes.core.time import AbsoluteDate, TimeScale, get_leap_seconds


class TestLeapSeconds(unittest.TestCase):

    def test_gps_epoch(self):
        self.assertEqual(get_leap_seconds(datetime(1980, 1, 6)), 19)

    def test_latest_leap_second(self):
        self.assertEqual(get_leap_seconds(datetime(2016, 12, 31, 23, 59, 59)), 36)
        self.assertEqual(get_leap_seconds(datetime(2017, 1, 1)), 37)
        self.assertEqual(get_leap_seconds(datetime(2024, 6, 1)), 37)

    def test_j2000(self):
        self.assertEqual(get_leap_seconds(datetime(2000, 1, 1, 12)), 32)

    def test_before_gps_epoch(self):
        with self.assertRaises(ValueError):
            get_leap_seconds(datetime(1979, 12, 31))


class TestAbsoluteDate(unittest.TestCase):

    def test_j2000_in_tt(self):
        date = AbsoluteDate.from_components(2000, 1, 1, 12, 0, 0.0, TimeScale.TT)
        self.assertEqual(date, AbsoluteDate.J2000_EPOCH)

    def test_j2000_in_tai_and_utc(self):
        tai = AbsoluteDate.from_components(2000, 1, 1, 11, 59, 27.816, TimeScale.TAI)
        utc = AbsoluteDate.from_components(2000, 1, 1, 11, 58, 55.816, TimeScale.UTC)
        self.assertAlmostEqual(tai.duration_from(AbsoluteDate.J2000_EPOCH), 0.0, places=9)
        self.assertAlmostEqual(utc.duration_from(AbsoluteDate.J2000_EPOCH), 0.0, places=9)

    def test_gps_scale(self):
        gps = AbsoluteDate.from_components(2020, 5, 17, 3, 0, 0.0, TimeScale.GPS)
        tai = AbsoluteDate.from_components(2020, 5, 17, 3, 0, 19.0, TimeScale.TAI)
        self.assertAlmostEqual(gps.duration_from(tai), 0.0, places=9)
        self.assertEqual(AbsoluteDate.GPS_EPOCH.to_datetime(TimeScale.GPS), datetime(1980, 1, 6))

    def test_utc_across_leap_second(self):
        before = AbsoluteDate.from_components(2016, 12, 31, 23, 59, 59.0, TimeScale.UTC)
        after = AbsoluteDate.from_components(2017, 1, 1, 0, 0, 0.0, TimeScale.UTC)
        # 23:59:60 was inserted in between
        self.assertAlmostEqual(after.duration_from(before), 2.0, places=9)

    def test_datetime_round_trip(self):
        for scale in TimeScale:
            dt = datetime(2023, 3, 14, 15, 9, 26, 535897)
            date = AbsoluteDate.from_datetime(dt, scale)
            self.assertLessEqual(abs(date.to_datetime(scale) - dt), timedelta(microseconds=2))

    def test_offset_normalization(self):
        date = AbsoluteDate(10, 2.5)
        self.assertEqual(date.epoch, 12)
        self.assertAlmostEqual(date.offset, 0.5)
        date = AbsoluteDate(10, -0.25)
        self.assertEqual(date.epoch, 9)
        self.assertAlmostEqual(date.offset, 0.75)

    def test_tiny_negative_offset(self):
        j2000 = AbsoluteDate.J2000_EPOCH
        for date in (AbsoluteDate(0, -1e-17), j2000.shifted_by(-1e-17)):
            self.assertEqual(date.epoch, 0)
            self.assertEqual(date.offset, 0.0)
            self.assertEqual(date, j2000)
            self.assertFalse(date < j2000)
            self.assertEqual(hash(date), hash(j2000))
            self.assertEqual(date.duration_from(j2000), 0.0)

    def test_shift_and_duration(self):
        t0 = AbsoluteDate.from_components(2024, 3, 1)
        t1 = t0.shifted_by(60.25)
        self.assertAlmostEqual(t1.duration_from(t0), 60.25, places=12)
        self.assertAlmostEqual(t1 - t0, 60.25, places=12)
        self.assertEqual(t0 + 60.25, t1)
        self.assertAlmostEqual((t1 - 60.25).duration_from(t0), 0.0, places=12)

    def test_ordering_and_hash(self):
        t0 = AbsoluteDate(100, 0.5)
        t1 = AbsoluteDate(100, 0.75)
        self.assertLess(t0, t1)
        self.assertLessEqual(t0, t0)
        self.assertGreater(t1, t0)
        self.assertEqual(sorted([t1, t0]), [t0, t1])
        self.assertEqual(hash(AbsoluteDate(100, 0.5)), hash(t0))
        self.assertEqual(len({t0, AbsoluteDate(100, 0.5), t1}), 2)

    def test_exact_equality(self):
        t0 = AbsoluteDate(100, 0.5)
        self.assertNotEqual(t0, t0.shifted_by(1e-9))

    def test_immutable(self):
        date = AbsoluteDate(0, 0.0)
        with self.assertRaises(AttributeError):
            date._epoch = 5

    def test_julian_date(self):
        self.assertAlmostEqual(AbsoluteDate.J2000_EPOCH.to_julian_date(), 2451545.0, places=9)
        one_day = AbsoluteDate.J2000_EPOCH.shifted_by(86400.0)
        self.assertAlmostEqual(one_day.to_julian_date(TimeScale.TT), 2451546.0, places=9)


if __name__ == '__main__':
    unittest.main()

#!/usr/bin/env python3
"""Test suite for physical and time constants"""

import unittest
import numpy as np
from pyframes.core.constants import (
    AS2R, D2R, JULIAN_CENTURY, OMGE, R2D, RE_WGS84, FE_WGS84,
    S_PRIME_RATE, TT_MINUS_TAI, TAI_MINUS_GPS
)


class TestConstants(unittest.TestCase):

    def test_angles(self):
        self.assertAlmostEqual(R2D * D2R, 1.0)
        self.assertAlmostEqual(3600.0 * AS2R, np.pi / 180.0)

    def test_time_scales(self):
        self.assertEqual(TT_MINUS_TAI, 32.184)
        self.assertEqual(TAI_MINUS_GPS, 19.0)
        self.assertEqual(JULIAN_CENTURY, 36525.0 * 86400.0)

    def test_earth(self):
        self.assertEqual(RE_WGS84, 6378137.0)
        self.assertAlmostEqual(1.0 / FE_WGS84, 298.257223563)
        # one sidereal day is about 86164 s
        self.assertAlmostEqual(2 * np.pi / OMGE, 86164.09, delta=0.01)

    def test_s_prime_rate(self):
        # -47 micro arc seconds per century
        self.assertAlmostEqual(S_PRIME_RATE / AS2R, -47e-6)


if __name__ == '__main__':
    unittest.main()

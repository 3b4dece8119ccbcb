#!/usr/bin/env python3
"""Test suite for lines"""

import unittest
import numpy as np

from pyframes.core.errors import DegenerateGeometryError
from pyframes.geometry.line import Line


class TestLine(unittest.TestCase):

    def test_origin_and_direction(self):
        line = Line([1.0, 5.0, 0.0], [3.0, 5.0, 0.0])
        np.testing.assert_allclose(line.direction, [1.0, 0.0, 0.0])
        np.testing.assert_allclose(line.origin, [0.0, 5.0, 0.0])

    def test_points(self):
        line = Line([1.0, 1.0, 1.0], [2.0, 3.0, 4.0])
        p = line.point_at(2.5)
        self.assertTrue(line.contains(p))
        self.assertAlmostEqual(line.abscissa(p), 2.5)
        self.assertTrue(line.contains([0.0, -1.0, -2.0]))
        self.assertFalse(line.contains([0.0, 0.0, 0.0]))

    def test_distance(self):
        line = Line([0.0, 0.0, 0.0], [0.0, 0.0, 1.0])
        self.assertAlmostEqual(line.distance([3.0, 4.0, 10.0]), 5.0)

    def test_revert(self):
        line = Line([1.0, 1.0, 1.0], [2.0, 3.0, 4.0])
        reverted = line.revert()
        np.testing.assert_allclose(reverted.direction, -line.direction)
        np.testing.assert_allclose(reverted.origin, line.origin, atol=1e-15)

    def test_coincident_points(self):
        with self.assertRaises(DegenerateGeometryError):
            Line([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])


if __name__ == '__main__':
    unittest.main()

#!/usr/bin/env python3
"""Test suite for the Rotation operator"""

import unittest
import numpy as np

from pyframes.attitude.rotation import Rotation, RotationConvention
from pyframes.core.errors import DegenerateGeometryError


def random_rotation(rng):
    return Rotation(rng.normal(size=4))


class TestRotation(unittest.TestCase):

    def setUp(self):
        self.rng = np.random.default_rng(42)

    def test_axis_angle_conventions(self):
        r = Rotation.from_axis_angle([0, 0, 1], np.pi / 2)
        np.testing.assert_allclose(r.apply_to([1, 0, 0]), [0, 1, 0], atol=1e-15)
        r = Rotation.from_axis_angle([0, 0, 1], np.pi / 2, RotationConvention.FRAME_TRANSFORM)
        np.testing.assert_allclose(r.apply_to([1, 0, 0]), [0, -1, 0], atol=1e-15)

    def test_axis_not_normalized(self):
        r1 = Rotation.from_axis_angle([0, 0, 5], 0.3)
        r2 = Rotation.from_axis_angle([0, 0, 1], 0.3)
        self.assertLess(Rotation.distance(r1, r2), 1e-15)

    def test_zero_axis(self):
        with self.assertRaises(DegenerateGeometryError):
            Rotation.from_axis_angle([0, 0, 0], 0.3)
        with self.assertRaises(ValueError):
            Rotation.from_axis_angle([0, 0, 0], 0.3)

    def test_zero_quaternion(self):
        with self.assertRaises(DegenerateGeometryError):
            Rotation([0, 0, 0, 0])

    def test_matrix_matches_apply(self):
        for _ in range(10):
            r = random_rotation(self.rng)
            v = self.rng.normal(size=3)
            np.testing.assert_allclose(r.matrix @ v, r.apply_to(v), atol=1e-14)
            np.testing.assert_allclose(r.matrix.T @ v, r.apply_inverse_to(v), atol=1e-14)

    def test_compose_order(self):
        for _ in range(10):
            r1 = random_rotation(self.rng)
            r2 = random_rotation(self.rng)
            v = self.rng.normal(size=3)
            r = r1.compose(r2)
            np.testing.assert_allclose(r.matrix, r1.matrix @ r2.matrix, atol=1e-14)
            np.testing.assert_allclose(r.apply_to(v), r1.apply_to(r2.apply_to(v)), atol=1e-14)

    def test_compose_inverse(self):
        r1 = random_rotation(self.rng)
        r2 = random_rotation(self.rng)
        self.assertLess(Rotation.distance(r1.compose_inverse(r2), r1.revert().compose(r2)), 1e-14)

    def test_revert(self):
        for _ in range(10):
            r = random_rotation(self.rng)
            self.assertLess(r.compose(r.revert()).angle, 1e-14)
            self.assertEqual(r.revert().revert(), r)

    def test_matrix_round_trip(self):
        # large angles about each axis exercise every branch of the conversion
        for axis in np.eye(3):
            for angle in (0.1, 2.0, np.radians(179.0), np.pi):
                r = Rotation.from_axis_angle(axis, angle)
                back = Rotation.from_matrix(r.matrix)
                self.assertLess(Rotation.distance(r, back), 1e-12)
        for _ in range(10):
            r = random_rotation(self.rng)
            self.assertLess(Rotation.distance(r, Rotation.from_matrix(r.matrix)), 1e-12)

    def test_non_orthogonal_matrix(self):
        m = np.eye(3)
        m[0, 1] = 0.01
        with self.assertRaises(DegenerateGeometryError):
            Rotation.from_matrix(m)

    def test_reflection(self):
        with self.assertRaises(DegenerateGeometryError):
            Rotation.from_matrix(np.diag([1.0, 1.0, -1.0]))

    def test_angle_and_axis(self):
        r = Rotation.from_axis_angle([1, 1, 0], 0.7)
        self.assertAlmostEqual(r.angle, 0.7, places=14)
        np.testing.assert_allclose(r.axis(), np.array([1, 1, 0]) / np.sqrt(2), atol=1e-15)
        np.testing.assert_allclose(r.axis(RotationConvention.FRAME_TRANSFORM),
                                   -np.array([1, 1, 0]) / np.sqrt(2), atol=1e-15)
        # negative angles are reported as positive angles about the opposite axis
        r = Rotation.from_axis_angle([0, 0, 1], -0.7)
        self.assertAlmostEqual(r.angle, 0.7, places=14)
        np.testing.assert_allclose(r.axis(), [0, 0, -1], atol=1e-15)

    def test_identity(self):
        self.assertEqual(Rotation.IDENTITY.angle, 0.0)
        np.testing.assert_array_equal(Rotation.IDENTITY.apply_to([1, 2, 3]), [1, 2, 3])
        np.testing.assert_array_equal(Rotation.IDENTITY.axis(), [1, 0, 0])

    def test_rotation_vector(self):
        for _ in range(10):
            rv = self.rng.normal(size=3)
            rv *= 3.0 / np.linalg.norm(rv) * self.rng.uniform()
            np.testing.assert_allclose(Rotation.from_rotation_vector(rv).rotation_vector(), rv,
                                       atol=1e-13)
        self.assertIs(Rotation.from_rotation_vector([0, 0, 0]), Rotation.IDENTITY)

    def test_equality(self):
        q = np.array([0.5, 0.5, 0.5, 0.5])
        self.assertEqual(Rotation(q), Rotation(-q))
        self.assertNotEqual(Rotation(q), Rotation.IDENTITY)

    def test_quaternion_read_only(self):
        r = Rotation.from_axis_angle([0, 1, 0], 0.2)
        with self.assertRaises(ValueError):
            r.quaternion[0] = 1.0


if __name__ == '__main__':
    unittest.main()

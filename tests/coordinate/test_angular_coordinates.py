#!/usr/bin/env python3
"""Test suite for AngularCoordinates"""

import unittest
import numpy as np

from pyframes.attitude.rotation import Rotation, RotationConvention
from pyframes.coordinate.angular_coordinates import AngularCoordinates
from pyframes.coordinate.filters import AngularDerivativesFilter
from pyframes.coordinate.pv_coordinates import PVCoordinates
from pyframes.core.errors import DegenerateGeometryError, TooFewPointsError
from pyframes.core.time import AbsoluteDate


def random_angular(rng, with_acceleration=True):
    return AngularCoordinates(Rotation(rng.normal(size=4)),
                              0.1 * rng.normal(size=3),
                              0.01 * rng.normal(size=3) if with_acceleration else None)


def accelerating_spin(t, axis=np.array([0.3, -0.5, 0.8]), theta0=0.4, rate0=0.2, acc=0.05):
    """Frame spinning about a fixed axis with constant angular acceleration"""
    axis = axis / np.linalg.norm(axis)
    theta = theta0 + rate0 * t + 0.5 * acc * t * t
    return AngularCoordinates(
        Rotation.from_axis_angle(axis, theta, RotationConvention.FRAME_TRANSFORM),
        (rate0 + acc * t) * axis,
        acc * axis)


class TestAngularCoordinates(unittest.TestCase):

    def setUp(self):
        self.rng = np.random.default_rng(1234)

    def test_defaults(self):
        ac = AngularCoordinates()
        self.assertIs(ac.rotation, Rotation.IDENTITY)
        np.testing.assert_array_equal(ac.rotation_rate, np.zeros(3))
        np.testing.assert_array_equal(ac.rotation_acceleration, np.zeros(3))

    def test_revert_twice(self):
        for _ in range(10):
            ac = random_angular(self.rng)
            back = ac.revert().revert()
            self.assertEqual(back.rotation, ac.rotation)
            np.testing.assert_allclose(back.rotation_rate, ac.rotation_rate, atol=1e-15)
            np.testing.assert_allclose(back.rotation_acceleration, ac.rotation_acceleration, atol=1e-15)

    def test_compose_with_revert(self):
        for _ in range(10):
            ac = random_angular(self.rng)
            composed = AngularCoordinates.compose(ac, ac.revert())
            self.assertLess(composed.rotation.angle, 1e-14)
            np.testing.assert_allclose(composed.rotation_rate, np.zeros(3), atol=1e-15)
            np.testing.assert_allclose(composed.rotation_acceleration, np.zeros(3), atol=1e-15)

    def test_apply_to_pv_against_finite_differences(self):
        ac = random_angular(self.rng, with_acceleration=False)
        pv = PVCoordinates([1.0, -2.0, 0.5], [0.3, 0.1, -0.2], [0.05, -0.01, 0.02])
        h = 1e-4

        def transformed(dt):
            return ac.shifted_by(dt).apply_to_pv(pv.shifted_by(dt))

        result = ac.apply_to_pv(pv)
        np.testing.assert_allclose(result.position, ac.apply_to(pv.position), atol=1e-15)
        np.testing.assert_allclose(result.velocity,
                                   (transformed(h).position - transformed(-h).position) / (2 * h),
                                   atol=1e-9)
        np.testing.assert_allclose(result.acceleration,
                                   (transformed(h).velocity - transformed(-h).velocity) / (2 * h),
                                   atol=1e-9)

    def test_compose_rates_against_finite_differences(self):
        first = random_angular(self.rng, with_acceleration=False)
        second = random_angular(self.rng, with_acceleration=False)
        h = 1e-4

        def composed(dt):
            return AngularCoordinates.compose(first.shifted_by(dt), second.shifted_by(dt))

        result = composed(0.0)
        rate = AngularCoordinates.estimate_rate(composed(-h).rotation, composed(h).rotation, 2 * h)
        np.testing.assert_allclose(result.rotation_rate, rate, atol=1e-9)
        np.testing.assert_allclose(result.rotation_acceleration,
                                   (composed(h).rotation_rate - composed(-h).rotation_rate) / (2 * h),
                                   atol=1e-9)

    def test_shifted_by_constant_rate(self):
        ac = AngularCoordinates(Rotation.from_axis_angle([1, 2, 3], 0.4), [0.0, 0.0, 0.1])
        shifted = ac.shifted_by(2.0)
        expected = Rotation.from_axis_angle([0, 0, 1], 0.2, RotationConvention.FRAME_TRANSFORM) \
            .compose(ac.rotation)
        self.assertLess(Rotation.distance(shifted.rotation, expected), 1e-14)
        np.testing.assert_array_equal(shifted.rotation_rate, ac.rotation_rate)
        back = shifted.shifted_by(-2.0)
        self.assertLess(Rotation.distance(back.rotation, ac.rotation), 1e-14)

    def test_shifted_by_acceleration(self):
        ac = accelerating_spin(0.0)
        for dt in (0.1, -0.3, 1.0):
            shifted = ac.shifted_by(dt)
            expected = accelerating_spin(dt)
            self.assertLess(Rotation.distance(shifted.rotation, expected.rotation), 1e-12)
            np.testing.assert_allclose(shifted.rotation_rate, expected.rotation_rate, atol=1e-12)

    def test_estimate_rate(self):
        ac = AngularCoordinates(Rotation(self.rng.normal(size=4)), [0.01, -0.02, 0.03])
        rate = AngularCoordinates.estimate_rate(ac.rotation, ac.shifted_by(5.0).rotation, 5.0)
        np.testing.assert_allclose(rate, ac.rotation_rate, atol=1e-14)

    def test_from_axes(self):
        theta, rate, acc = 0.3, 0.01, 0.002
        c, s = np.cos(theta), np.sin(theta)
        x = PVCoordinates([c, s, 0.0],
                          rate * np.array([-s, c, 0.0]),
                          acc * np.array([-s, c, 0.0]) - rate**2 * np.array([c, s, 0.0]))
        y = PVCoordinates([-s, c, 0.0],
                          rate * np.array([-c, -s, 0.0]),
                          acc * np.array([-c, -s, 0.0]) - rate**2 * np.array([-s, c, 0.0]))
        z = PVCoordinates([0.0, 0.0, 1.0])
        ac = AngularCoordinates.from_axes(x, y, z)
        expected = Rotation.from_axis_angle([0, 0, 1], theta, RotationConvention.FRAME_TRANSFORM)
        self.assertLess(Rotation.distance(ac.rotation, expected), 1e-14)
        np.testing.assert_allclose(ac.rotation_rate, [0.0, 0.0, rate], atol=1e-16)
        np.testing.assert_allclose(ac.rotation_acceleration, [0.0, 0.0, acc], atol=1e-16)
        np.testing.assert_allclose(ac.apply_to(x.position), [1.0, 0.0, 0.0], atol=1e-15)

    def test_equality(self):
        ac = random_angular(self.rng)
        same = AngularCoordinates(ac.rotation, ac.rotation_rate, ac.rotation_acceleration)
        self.assertEqual(ac, same)
        self.assertNotEqual(ac, ac.revert())


class TestAngularInterpolation(unittest.TestCase):

    def setUp(self):
        self.t0 = AbsoluteDate.from_components(2024, 3, 1)

    def sample(self, offsets):
        return [(self.t0.shifted_by(dt), accelerating_spin(dt)) for dt in offsets]

    def check(self, angular_filter, offsets, query, angle_tol, rate_tol, acc_tol):
        result = AngularCoordinates.interpolate(self.t0.shifted_by(query), angular_filter,
                                                self.sample(offsets))
        expected = accelerating_spin(query)
        self.assertLess(Rotation.distance(result.rotation, expected.rotation), angle_tol)
        np.testing.assert_allclose(result.rotation_rate, expected.rotation_rate, atol=rate_tol)
        np.testing.assert_allclose(result.rotation_acceleration, expected.rotation_acceleration,
                                   atol=acc_tol)

    def test_full_derivatives(self):
        self.check(AngularDerivativesFilter.USE_RRA, [0.0, 0.2, 0.4, 0.6], 0.3, 1e-12, 1e-10, 1e-8)

    def test_rates(self):
        self.check(AngularDerivativesFilter.USE_RR, [0.0, 0.2, 0.4, 0.6], 0.3, 1e-11, 1e-9, 1e-7)

    def test_rotations_only(self):
        self.check(AngularDerivativesFilter.USE_R, [0.0, 0.2, 0.4, 0.6, 0.8, 1.0], 0.5,
                   1e-8, 1e-6, 1e-4)

    def test_uniform_rotation_is_exact(self):
        rate = np.array([0.0, 0.0, 0.2])
        reference = AngularCoordinates(Rotation.from_axis_angle([1, 0, 0], 0.3), rate)
        sample = [(self.t0.shifted_by(dt), reference.shifted_by(dt)) for dt in (0.0, 0.8, 1.6)]
        result = AngularCoordinates.interpolate(self.t0.shifted_by(1.1),
                                                AngularDerivativesFilter.USE_RR, sample)
        expected = reference.shifted_by(1.1)
        self.assertLess(Rotation.distance(result.rotation, expected.rotation), 1e-14)
        np.testing.assert_allclose(result.rotation_rate, rate, atol=1e-14)

    def test_two_samples_minimum(self):
        AngularCoordinates.interpolate(self.t0.shifted_by(0.1), AngularDerivativesFilter.USE_R,
                                       self.sample([0.0, 0.2]))
        with self.assertRaises(TooFewPointsError):
            AngularCoordinates.interpolate(self.t0, AngularDerivativesFilter.USE_R, self.sample([0.0]))

    def test_duplicate_dates(self):
        with self.assertRaises(DegenerateGeometryError):
            AngularCoordinates.interpolate(self.t0, AngularDerivativesFilter.USE_R,
                                           self.sample([0.0, 0.2, 0.2]))


if __name__ == '__main__':
    unittest.main()

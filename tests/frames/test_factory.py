#!/usr/bin/env python3
"""Test suite for FramesFactory"""

import unittest
import numpy as np

from pyframes.attitude.rotation import Rotation
from pyframes.config import FramesConfig, InterpolationConfig
from pyframes.coordinate.pv_coordinates import PVCoordinates
from pyframes.core.constants import AS2R, D2R
from pyframes.core.time import AbsoluteDate
from pyframes.frames.earth import EarthRotationProvider, PoleCorrectionTable, PoleMotionProvider
from pyframes.frames.factory import GCRF, ITRF, TIRF, FramesFactory
from pyframes.frames.local import LOFType, llh2ecef
from pyframes.frames.providers import FixedTransformProvider, InterpolatingTransformProvider
from pyframes.frames.transform import Transform


class TestFramesFactory(unittest.TestCase):

    def setUp(self):
        self.factory = FramesFactory()
        self.date = AbsoluteDate.from_components(2024, 7, 14, 6, 0, 0.0)

    def test_canonical_tree(self):
        self.assertEqual(self.factory.names(), [GCRF, TIRF, ITRF])
        self.assertTrue(self.factory.gcrf.is_pseudo_inertial())
        self.assertIs(self.factory.tirf.parent, self.factory.gcrf)
        self.assertIs(self.factory.itrf.parent, self.factory.tirf)
        self.assertIsInstance(self.factory.tirf.provider, EarthRotationProvider)
        self.assertIsInstance(self.factory.itrf.provider, PoleMotionProvider)

    def test_get_frame(self):
        self.assertIs(self.factory.get_frame(ITRF), self.factory.itrf)
        with self.assertRaises(KeyError):
            self.factory.get_frame("EME2000")

    def test_duplicate_name(self):
        with self.assertRaises(ValueError):
            self.factory.add_frame(TIRF, self.factory.gcrf, FixedTransformProvider(Transform.IDENTITY))

    def test_ground_station_moves_in_inertial_frame(self):
        llh = np.array([0.0, 0.0, 0.0])
        station = self.factory.add_topocentric_frame("equator", llh)
        self.assertIs(self.factory.get_frame("equator"), station)
        transform = station.get_transform_to(self.factory.gcrf, self.date)
        pv = transform.transform_pv_coordinates(PVCoordinates.ZERO)
        self.assertAlmostEqual(np.linalg.norm(pv.position), 6378137.0, delta=1e-6)
        # equatorial ground speed of the Earth rotation
        self.assertAlmostEqual(np.linalg.norm(pv.velocity), 465.1, delta=0.1)
        self.assertAlmostEqual(pv.position[2], 0.0, delta=1e-6)

    def test_station_round_trip_through_itrf(self):
        llh = np.array([48.85 * D2R, 2.35 * D2R, 35.0])
        station = self.factory.add_topocentric_frame("paris", llh)
        transform = station.get_transform_to(self.factory.itrf, self.date)
        np.testing.assert_allclose(transform.transform_position([0.0, 0.0, 0.0]), llh2ecef(llh), atol=1e-6)

    def test_local_orbital_frame(self):
        def pv_function(date):
            return PVCoordinates([7000e3, 0.0, 0.0], [0.0, 7500.0, 0.0], [-8.13, 0.0, 0.0])

        lof = self.factory.add_local_orbital_frame("sat", pv_function, LOFType.TNW)
        self.assertIs(lof.parent, self.factory.gcrf)
        transform = self.factory.gcrf.get_transform_to(lof, self.date)
        np.testing.assert_allclose(transform.transform_vector([0.0, 1.0, 0.0]), [1.0, 0.0, 0.0], atol=1e-15)

    def test_pole_table_in_config(self):
        t0 = self.date.shifted_by(-86400.0)
        table = PoleCorrectionTable.from_arcseconds([(t0, 0.2, 0.3), (t0.shifted_by(2 * 86400.0), 0.2, 0.3)])
        factory = FramesFactory(FramesConfig(pole_table=table))
        transform = factory.tirf.get_transform_to(factory.itrf, self.date)
        np.testing.assert_allclose(transform.transform_vector([0.0, 0.0, 1.0]),
                                   [0.2 * AS2R, -0.3 * AS2R, 1.0], atol=1e-11)

    def test_interpolated_earth_frames(self):
        config = FramesConfig(interpolate_earth_frames=True,
                              interpolation=InterpolationConfig(grid_points=6, step=60.0, cache_size=12))
        factory = FramesFactory(config)
        self.assertIsInstance(factory.tirf.provider, InterpolatingTransformProvider)
        self.assertIsInstance(factory.itrf.provider, InterpolatingTransformProvider)

        date = self.date.shifted_by(17.25)
        interpolated = factory.gcrf.get_transform_to(factory.itrf, date)
        reference = self.factory.gcrf.get_transform_to(self.factory.itrf, date)
        point = np.array([6378137.0, 1000.0, -2000.0])
        self.assertLess(Rotation.distance(interpolated.rotation, reference.rotation), 1e-10)
        np.testing.assert_allclose(interpolated.transform_position(point),
                                   reference.transform_position(point), atol=1e-3)
        np.testing.assert_allclose(interpolated.rotation_rate, reference.rotation_rate, atol=1e-11)


if __name__ == '__main__':
    unittest.main()

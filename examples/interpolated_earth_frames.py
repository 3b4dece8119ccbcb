#!/usr/bin/env python3
"""
Interpolated Earth Frames Example using PyFrames

This example demonstrates:
1. Wrapping the Earth rotation and pole motion providers in interpolating
   providers through FramesConfig
2. Comparing interpolated and directly computed transforms
3. Watching raw grid fetches at DEBUG level with per-module log levels
"""

import time

import numpy as np

from pyframes import AbsoluteDate, FramesConfig, FramesFactory, Rotation
from pyframes.logger import setup_logger_from_config


def main():
    logger = setup_logger_from_config({
        'default_level': 'INFO',
        'console': True,
        'module_levels': {
            'pyframes.frames.providers': 'DEBUG',
        }
    })

    direct = FramesFactory()
    interpolated = FramesFactory(FramesConfig.from_dict({
        'interpolate_earth_frames': True,
        'interpolation': {
            'grid_points': 6,
            'step': 120.0,
            'cache_size': 24,
            'cartesian_filter': 'USE_PVA',
            'angular_filter': 'USE_RRA'
        }
    }))

    start = AbsoluteDate.from_components(2024, 9, 1, 12, 0, 0.0)
    dates = [start.shifted_by(7.5 * i) for i in range(200)]
    point = np.array([6378137.0, 0.0, 0.0])

    for name, factory in (("direct", direct), ("interpolated", interpolated)):
        tic = time.perf_counter()
        for date in dates:
            factory.gcrf.get_transform_to(factory.itrf, date)
        logger.info("%-12s %d transforms in %.3f s", name, len(dates), time.perf_counter() - tic)

    worst_angle = 0.0
    worst_position = 0.0
    for date in dates:
        reference = direct.gcrf.get_transform_to(direct.itrf, date)
        approx = interpolated.gcrf.get_transform_to(interpolated.itrf, date)
        worst_angle = max(worst_angle, Rotation.distance(reference.rotation, approx.rotation))
        worst_position = max(worst_position, np.linalg.norm(
            reference.transform_position(point) - approx.transform_position(point)))

    logger.info("worst rotation error %.3e rad, %.3e m at the Earth surface", worst_angle, worst_position)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Ground Station Tracking Example using PyFrames

This example demonstrates:
1. Building the GCRF / TIRF / ITRF frame tree with a pole correction table
2. Attaching a topocentric (East-North-Up) frame to a ground station
3. Expressing a spacecraft given in the inertial frame in the station frame
4. Computing azimuth, elevation and range rate over a pass
"""

import numpy as np

from pyframes import AbsoluteDate, FramesConfig, FramesFactory, PoleCorrectionTable, PVCoordinates
from pyframes.core.constants import D2R, R2D
from pyframes.logger import setup_logger

MU = 3.986004418e14


def circular_orbit(radius, inclination):
    """PV function of a circular orbit in the inertial frame"""
    n = np.sqrt(MU / radius**3)
    ci, si = np.cos(inclination), np.sin(inclination)

    def pv_function(date):
        u = n * date.duration_from(AbsoluteDate.J2000_EPOCH)
        p = radius * np.array([np.cos(u), ci * np.sin(u), si * np.sin(u)])
        v = radius * n * np.array([-np.sin(u), ci * np.cos(u), si * np.cos(u)])
        return PVCoordinates(p, v, -n**2 * p)

    return pv_function


def main():
    logger = setup_logger(level="INFO")

    start = AbsoluteDate.from_components(2024, 3, 20, 0, 0, 0.0)
    table = PoleCorrectionTable.from_arcseconds([
        (start.shifted_by(-86400.0), 0.0331, 0.4102),
        (start, 0.0346, 0.4098),
        (start.shifted_by(86400.0), 0.0361, 0.4093),
    ])
    factory = FramesFactory(FramesConfig(pole_table=table))
    station = factory.add_topocentric_frame("KOGANEI", [35.71 * D2R, 139.49 * D2R, 80.0])
    gcrf = factory.gcrf
    orbit = circular_orbit(6378137.0 + 550e3, 53.0 * D2R)

    logger.info("Scanning 24 hours for passes above 10 degrees")
    visible = 0
    for minute in range(0, 24 * 60, 2):
        date = start.shifted_by(60.0 * minute)
        pv = gcrf.get_transform_to(station, date).transform_pv_coordinates(orbit(date))
        east, north, up = pv.position
        distance = np.linalg.norm(pv.position)
        elevation = np.arcsin(up / distance) * R2D
        if elevation < 10.0:
            continue
        visible += 1
        azimuth = np.arctan2(east, north) * R2D % 360.0
        range_rate = np.dot(pv.position, pv.velocity) / distance
        logger.info("%s az %6.1f el %5.1f range %8.1f km rate %7.3f km/s",
                    date, azimuth, elevation, distance / 1e3, range_rate / 1e3)

    logger.info("%d visible samples", visible)


if __name__ == "__main__":
    main()

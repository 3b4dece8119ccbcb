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

"""Local frames: topocentric and local orbital frames"""

import logging
from enum import Enum
from typing import Callable

import numpy as np

from ..attitude.rotation import Rotation
from ..coordinate.angular_coordinates import AngularCoordinates
from ..coordinate.pv_coordinates import PVCoordinates
from ..core.constants import FE_WGS84, RE_WGS84
from ..core.time import AbsoluteDate
from .providers import TransformProvider
from .transform import Transform

logger = logging.getLogger(__name__)


def llh2ecef(llh: np.ndarray) -> np.ndarray:
    """Convert geodetic coordinates to ECEF coordinates

    Parameters
    ----------
    llh : np.ndarray
        Geodetic coordinates [lat, lon, height] (rad, rad, m) on WGS84

    Returns
    -------
    np.ndarray
        ECEF coordinates [x, y, z] in meters
    """
    lat, lon, h = llh[0], llh[1], llh[2]

    sin_lat = np.sin(lat)
    e2 = FE_WGS84 * (2.0 - FE_WGS84)
    N = RE_WGS84 / np.sqrt(1.0 - e2 * sin_lat**2)

    return np.array([(N + h) * np.cos(lat) * np.cos(lon),
                     (N + h) * np.cos(lat) * np.sin(lon),
                     (N * (1.0 - e2) + h) * sin_lat])


def enu_matrix(llh: np.ndarray) -> np.ndarray:
    """Rotation matrix from ECEF to East-North-Up at a geodetic point"""
    lat, lon = llh[0], llh[1]
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    return np.array([
        [-sin_lon, cos_lon, 0.0],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat]
    ])


class TopocentricProvider(TransformProvider):
    """
    Earth-fixed frame to the East-North-Up frame of a ground point.

    Parameters
    ----------
    llh : array_like
        Geodetic coordinates [lat, lon, height] of the origin (rad, rad, m)
    name : str, optional
        Name of the ground point, for log messages
    """

    def __init__(self, llh, name: str = None):
        self.llh = np.asarray(llh, dtype=np.double)
        self.name = name
        self.origin = llh2ecef(self.llh)
        self.rotation = Rotation.from_matrix(enu_matrix(self.llh))
        logger.debug("Topocentric frame %s at ECEF %s", name, self.origin)

    def get_transform(self, date: AbsoluteDate) -> Transform:
        return Transform(date, PVCoordinates(-self.origin), AngularCoordinates(self.rotation))


class LOFType(Enum):
    """
    Local orbital frame axes.

    QSW: X along the position, Z along the orbital momentum, Y completing
    the frame (roughly along the velocity).
    TNW: X along the velocity, Z along the orbital momentum, Y completing
    the frame (roughly towards the central body).
    """
    QSW = 'QSW'
    TNW = 'TNW'

    def angular(self, pv: PVCoordinates) -> AngularCoordinates:
        """Rotation from the parent frame to the local orbital frame"""
        p, v, a = pv.position, pv.velocity, pv.acceleration
        # jerk is unknown and taken as zero
        momentum = PVCoordinates.cross_product(PVCoordinates(p, v, a), PVCoordinates(v, a))
        w = momentum.normalize()
        if self == LOFType.QSW:
            x = pv.normalize()
        else:
            x = PVCoordinates(v, a).normalize()
        y = PVCoordinates.cross_product(w, x)
        return AngularCoordinates.from_axes(x, y, w)


class LocalOrbitalProvider(TransformProvider):
    """
    Inertial frame to a local orbital frame centered on a spacecraft.

    Parameters
    ----------
    pv_function : callable
        ``pv_function(date)`` returns the spacecraft ``PVCoordinates`` in
        the parent frame
    lof_type : LOFType
        Axes definition
    """

    def __init__(self, pv_function: Callable[[AbsoluteDate], PVCoordinates],
                 lof_type: LOFType = LOFType.QSW):
        self.pv_function = pv_function
        self.lof_type = lof_type

    def get_transform(self, date: AbsoluteDate) -> Transform:
        pv = self.pv_function(date)
        return Transform(date, -pv, self.lof_type.angular(pv))


__all__ = [
    'llh2ecef', 'enu_matrix', 'TopocentricProvider', 'LOFType', 'LocalOrbitalProvider',
]

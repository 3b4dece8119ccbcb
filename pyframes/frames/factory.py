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

"""Factory building the canonical frame tree

The tree is rooted at an inertial frame named ``GCRF``:

    GCRF
     └── TIRF   (Earth rotation)
          └── ITRF   (pole motion)

Further frames (topocentric, local orbital, user defined) are attached
with :meth:`FramesFactory.add_frame` and looked up by name.
"""

import logging
import threading
from typing import Callable, Dict, Optional

from ..config import FramesConfig
from ..coordinate.pv_coordinates import PVCoordinates
from ..core.time import AbsoluteDate
from .earth import EarthRotationProvider, PoleMotionProvider
from .frame import Frame
from .local import LocalOrbitalProvider, LOFType, TopocentricProvider
from .providers import InterpolatingTransformProvider, TransformProvider

logger = logging.getLogger(__name__)

GCRF = 'GCRF'
TIRF = 'TIRF'
ITRF = 'ITRF'


class FramesFactory:
    """
    Frame tree with a registry by name.

    Parameters
    ----------
    config : FramesConfig, optional
        Tree configuration, defaults used if omitted
    """

    def __init__(self, config: Optional[FramesConfig] = None):
        self.config = config if config is not None else FramesConfig()
        self._frames: Dict[str, Frame] = {}
        self._lock = threading.Lock()

        gcrf = Frame(GCRF, pseudo_inertial=True)
        self._register(gcrf)
        tirf = self.add_frame(TIRF, gcrf, self._earth_provider(EarthRotationProvider()))
        self.add_frame(ITRF, tirf, self._earth_provider(PoleMotionProvider(self.config.pole_table)))
        logger.debug("Frame tree built (interpolated Earth frames: %s)",
                     self.config.interpolate_earth_frames)

    def _earth_provider(self, raw: TransformProvider) -> TransformProvider:
        if self.config.interpolate_earth_frames:
            return InterpolatingTransformProvider.from_config(raw, self.config.interpolation)
        return raw

    def _register(self, frame: Frame):
        with self._lock:
            if frame.name in self._frames:
                raise ValueError(f"frame {frame.name} already registered")
            self._frames[frame.name] = frame

    def add_frame(self, name: str, parent: Frame, provider: TransformProvider,
                  pseudo_inertial: bool = False) -> Frame:
        """Create a frame under ``parent`` and register it"""
        frame = Frame(name, parent, provider, pseudo_inertial)
        self._register(frame)
        return frame

    def add_topocentric_frame(self, name: str, llh) -> Frame:
        """East-North-Up frame of a ground point, attached to ITRF"""
        return self.add_frame(name, self.itrf, TopocentricProvider(llh, name))

    def add_local_orbital_frame(self, name: str,
                                pv_function: Callable[[AbsoluteDate], PVCoordinates],
                                lof_type: LOFType = LOFType.QSW,
                                parent: Optional[Frame] = None) -> Frame:
        """Local orbital frame of a spacecraft whose coordinates are given in ``parent``"""
        parent = self.gcrf if parent is None else parent
        return self.add_frame(name, parent, LocalOrbitalProvider(pv_function, lof_type))

    def get_frame(self, name: str) -> Frame:
        """
        Look a frame up by name.

        Raises
        ------
        KeyError
            If no frame has this name
        """
        with self._lock:
            try:
                return self._frames[name]
            except KeyError:
                raise KeyError(f"unknown frame {name!r}") from None

    def names(self):
        with self._lock:
            return list(self._frames)

    @property
    def gcrf(self) -> Frame:
        return self.get_frame(GCRF)

    @property
    def tirf(self) -> Frame:
        return self.get_frame(TIRF)

    @property
    def itrf(self) -> Frame:
        return self.get_frame(ITRF)


__all__ = ['FramesFactory', 'GCRF', 'TIRF', 'ITRF']

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

"""Frames module: transforms, providers and the frame tree

This module provides:
- ``Transform``: dated translation then rotation with derivatives
- Providers: fixed, single-slot cached, interpolating, Earth rotation,
  pole motion, topocentric and local orbital
- ``Frame`` and ``FramesFactory``: the frame tree and its canonical
  GCRF / TIRF / ITRF branch

Example Usage:
    >>> from pyframes.core import AbsoluteDate
    >>> from pyframes.frames import FramesFactory
    >>> factory = FramesFactory()
    >>> date = AbsoluteDate.from_components(2024, 3, 1)
    >>> t = factory.gcrf.get_transform_to(factory.itrf, date)
    >>> r_itrf = t.transform_position([7000e3, 0.0, 0.0])
"""

from .earth import *
from .factory import *
from .frame import *
from .local import *
from .providers import *
from .transform import *

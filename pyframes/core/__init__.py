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

"""Core module: errors, time and constants.

This module provides the foundations shared by every other part of pyframes:

- **Constants**: angle and time conversions, time-scale offsets, WGS84 and
  Earth rotation parameters, interpolation defaults
- **Errors**: the ``FramesError`` hierarchy raised by geometry,
  interpolation, providers and the frame tree
- **Time**: ``AbsoluteDate``, an immutable leap-second aware instant, and
  the ``TimeScale`` enumeration

Example Usage:
    >>> from pyframes.core import AbsoluteDate, TimeScale
    >>> t0 = AbsoluteDate.from_components(2024, 3, 1, 12, 0, 0.0, TimeScale.UTC)
    >>> t1 = t0.shifted_by(60.0)
    >>> t1.duration_from(t0)
    60.0
"""

from .constants import *
from .errors import *
from .time import *

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

"""
PyFrames - Reference frame transforms for spaceflight dynamics

A Python library to represent, compose, invert, interpolate and apply
rigid body and kinematic transforms between time-varying frames, from an
inertial root down to Earth-fixed, topocentric and local orbital frames.
"""

__version__ = "1.0.0"
__author__ = "PyFrames Development Team"
__title__ = "pyframes"
__description__ = "Reference frame transform composition engine"

from .core import *
from .attitude import *
from .coordinate import *
from .geometry import *
from .frames import *
from .config import *

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

"""Coordinate value types and their interpolation

This module provides:
- ``PVCoordinates``: position, velocity and acceleration
- ``AngularCoordinates``: rotation, rotation rate and rotation acceleration
- Derivative filters selecting which sample derivatives feed Hermite
  interpolation
- ``hermite_interpolate``: Krogh based Hermite interpolation of vectors
"""

from .angular_coordinates import AngularCoordinates
from .filters import AngularDerivativesFilter, CartesianDerivativesFilter
from .hermite import MIN_SAMPLES, check_abscissae, hermite_interpolate
from .pv_coordinates import PVCoordinates

__all__ = [
    'PVCoordinates', 'AngularCoordinates',
    'CartesianDerivativesFilter', 'AngularDerivativesFilter',
    'hermite_interpolate', 'check_abscissae', 'MIN_SAMPLES',
]

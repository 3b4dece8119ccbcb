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

"""Selection of the sample derivatives used by Hermite interpolation"""

from enum import Enum


class CartesianDerivativesFilter(Enum):
    """Which of position, velocity and acceleration samples are used"""
    USE_P = 0
    USE_PV = 1
    USE_PVA = 2

    @property
    def max_order(self) -> int:
        """Highest derivative order taken from the samples"""
        return self.value


class AngularDerivativesFilter(Enum):
    """Which of rotation, rate and acceleration samples are used"""
    USE_R = 0
    USE_RR = 1
    USE_RRA = 2

    @property
    def max_order(self) -> int:
        """Highest derivative order taken from the samples"""
        return self.value


__all__ = ['CartesianDerivativesFilter', 'AngularDerivativesFilter']

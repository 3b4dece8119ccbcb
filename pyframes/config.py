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

"""Configuration of the frame tree and its interpolation settings"""

from dataclasses import dataclass, field
from typing import Optional

from .coordinate.filters import AngularDerivativesFilter, CartesianDerivativesFilter
from .core.constants import DEFAULT_CACHE_SIZE, DEFAULT_GRID_POINTS, DEFAULT_GRID_STEP


def _enum_value(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls[str(value).upper()]
    except KeyError:
        raise ValueError(f"unknown {enum_cls.__name__}: {value!r}") from None


@dataclass
class InterpolationConfig:
    """Settings of an interpolating transform provider.

    Attributes:
        grid_points: Number of grid samples per interpolation (>= 2).
        step: Grid step [seconds].
        cache_size: Grid samples kept in memory (>= grid_points).
        cartesian_filter: Translation derivatives used.
        angular_filter: Rotation derivatives used.
    """
    grid_points: int = DEFAULT_GRID_POINTS
    step: float = DEFAULT_GRID_STEP
    cache_size: int = DEFAULT_CACHE_SIZE
    cartesian_filter: CartesianDerivativesFilter = CartesianDerivativesFilter.USE_PVA
    angular_filter: AngularDerivativesFilter = AngularDerivativesFilter.USE_RRA

    def __post_init__(self):
        self.cartesian_filter = _enum_value(CartesianDerivativesFilter, self.cartesian_filter)
        self.angular_filter = _enum_value(AngularDerivativesFilter, self.angular_filter)
        if self.grid_points < 2:
            raise ValueError(f"grid_points must be at least 2, got {self.grid_points}")
        if not self.step > 0.0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.cache_size < self.grid_points:
            raise ValueError(f"cache_size ({self.cache_size}) must hold at least "
                             f"grid_points ({self.grid_points})")

    @classmethod
    def from_dict(cls, config: dict) -> 'InterpolationConfig':
        known = {k: v for k, v in config.items() if k in cls.__dataclass_fields__}
        return cls(**known)


@dataclass
class FramesConfig:
    """Top-level frame tree configuration.

    Attributes:
        interpolate_earth_frames: Wrap the Earth rotation and pole motion
            providers in interpolating providers.
        interpolation: Interpolation settings used when enabled.
        pole_table: Optional ``PoleCorrectionTable``; zero pole motion if None.
    """
    interpolate_earth_frames: bool = False
    interpolation: InterpolationConfig = field(default_factory=InterpolationConfig)
    pole_table: Optional[object] = None

    @classmethod
    def from_dict(cls, config: dict) -> 'FramesConfig':
        """Build from a dictionary, e.g. a parsed YAML or JSON document

        Example config:
        {
            'interpolate_earth_frames': True,
            'interpolation': {
                'grid_points': 6,
                'step': 60.0,
                'cartesian_filter': 'USE_PV',
                'angular_filter': 'USE_RR'
            }
        }
        """
        interpolation = InterpolationConfig.from_dict(config.get('interpolation', {}))
        return cls(interpolate_earth_frames=bool(config.get('interpolate_earth_frames', False)),
                   interpolation=interpolation,
                   pole_table=config.get('pole_table'))


__all__ = ['InterpolationConfig', 'FramesConfig']

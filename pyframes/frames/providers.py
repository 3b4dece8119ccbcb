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
Transform providers.

A provider is the date-dependent link between a frame and its parent:
``get_transform(date)`` returns the transform from the parent frame to the
frame at that date. Providers are logically pure functions of the date.
The stateful variants here only memoise results and never return a
transform computed for another date.

Thread safety: the memoisation cells are guarded by ``threading`` locks.
The wrapped computation always runs outside the locks, so concurrent
callers asking for different dates recompute instead of blocking each
other.
"""

import logging
import math
import threading
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from ..coordinate.filters import AngularDerivativesFilter, CartesianDerivativesFilter
from ..core.constants import DEFAULT_CACHE_SIZE, DEFAULT_GRID_POINTS, DEFAULT_GRID_STEP
from ..core.errors import ProviderComputationError
from ..core.time import AbsoluteDate
from .transform import Transform

logger = logging.getLogger(__name__)


class TransformProvider(ABC):
    """Source of the transform from a parent frame to a frame"""

    @abstractmethod
    def get_transform(self, date: AbsoluteDate) -> Transform:
        """
        Get the transform at the specified date.

        Parameters
        ----------
        date : AbsoluteDate
            Date of the transform

        Returns
        -------
        Transform
            Transform from the parent frame to the frame, stamped with ``date``
        """


class FixedTransformProvider(TransformProvider):
    """Provider returning the same transform at every date"""

    def __init__(self, transform: Transform):
        self.transform = transform

    def get_transform(self, date: AbsoluteDate) -> Transform:
        return Transform(date, self.transform.cartesian, self.transform.angular)


class SingleSlotCache:
    """
    Last computed (date, transform) pair.

    A lookup is a hit only when the requested date is exactly equal to the
    stored one. The pair is read and replaced as a single tuple under the
    lock, so readers never see the date of one request with the transform
    of another. A failing computation leaves the slot unchanged.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._entry: Optional[Tuple[AbsoluteDate, Transform]] = None
        self.hits = 0
        self.misses = 0

    def get(self, date: AbsoluteDate, compute: Callable[[AbsoluteDate], Transform]) -> Transform:
        """Return the cached transform for ``date`` or compute and store it"""
        with self._lock:
            entry = self._entry
            if entry is not None and entry[0] == date:
                self.hits += 1
                return entry[1]
            self.misses += 1

        transform = compute(date)

        with self._lock:
            self._entry = (date, transform)
        return transform

    def clear(self):
        with self._lock:
            self._entry = None


def _computation_error(provider, date: AbsoluteDate, exc: Exception) -> ProviderComputationError:
    logger.debug("%s failed at %s: %s", type(provider).__name__, date, exc)
    return ProviderComputationError(
        f"{type(provider).__name__} failed at {date}: {exc}",
        provider=type(provider).__name__, date=date)


class CachedTransformProvider(TransformProvider):
    """
    Single-slot memoisation wrapper.

    Parameters
    ----------
    raw : TransformProvider
        Provider doing the actual computation; it stays reachable through
        the ``raw`` attribute for cache-free reference computations
    """

    def __init__(self, raw: TransformProvider):
        self.raw = raw
        self.cache = SingleSlotCache()

    def _compute(self, date: AbsoluteDate) -> Transform:
        try:
            return self.raw.get_transform(date)
        except ProviderComputationError:
            raise
        except Exception as exc:
            raise _computation_error(self.raw, date, exc) from exc

    def get_transform(self, date: AbsoluteDate) -> Transform:
        return self.cache.get(date, self._compute)


class InterpolatingTransformProvider(TransformProvider):
    """
    Provider interpolating an expensive raw provider on a regular time grid.

    Grid points are the dates ``J2000_EPOCH + k * step`` for integer k. For
    a request at date t, the ``grid_points`` consecutive grid points around
    t are taken, starting at index ``floor((t - J2000) / step) - (grid_points - 1) // 2``.
    Raw transforms at grid points are kept in a bounded least recently used
    cache, so the raw provider is only called for grid points not already
    known.

    Parameters
    ----------
    raw : TransformProvider
        Provider sampled on the grid
    cartesian_filter : CartesianDerivativesFilter
        Translation derivatives used in interpolation
    angular_filter : AngularDerivativesFilter
        Rotation derivatives used in interpolation
    grid_points : int
        Number of grid points per interpolation, at least 2
    step : float
        Grid step (s)
    cache_size : int
        Maximum number of grid transforms kept, at least ``grid_points``
    """

    def __init__(self, raw: TransformProvider,
                 cartesian_filter: CartesianDerivativesFilter = CartesianDerivativesFilter.USE_PVA,
                 angular_filter: AngularDerivativesFilter = AngularDerivativesFilter.USE_RRA,
                 grid_points: int = DEFAULT_GRID_POINTS,
                 step: float = DEFAULT_GRID_STEP,
                 cache_size: int = DEFAULT_CACHE_SIZE):
        if grid_points < 2:
            raise ValueError(f"grid_points must be at least 2, got {grid_points}")
        if not step > 0.0:
            raise ValueError(f"step must be positive, got {step}")
        if cache_size < grid_points:
            raise ValueError(f"cache_size ({cache_size}) must hold at least grid_points ({grid_points})")
        self.raw = raw
        self.cartesian_filter = cartesian_filter
        self.angular_filter = angular_filter
        self.grid_points = grid_points
        self.step = step
        self.cache_size = cache_size
        self._samples: 'OrderedDict[int, Transform]' = OrderedDict()
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, raw: TransformProvider, config) -> 'InterpolatingTransformProvider':
        """Build from an ``InterpolationConfig``"""
        return cls(raw, config.cartesian_filter, config.angular_filter,
                   config.grid_points, config.step, config.cache_size)

    def grid_indices(self, date: AbsoluteDate) -> range:
        """Indices of the grid points used to interpolate at ``date``"""
        k0 = math.floor(date.duration_from(AbsoluteDate.J2000_EPOCH) / self.step)
        first = k0 - (self.grid_points - 1) // 2
        return range(first, first + self.grid_points)

    def grid_date(self, index: int) -> AbsoluteDate:
        return AbsoluteDate.J2000_EPOCH.shifted_by(index * self.step)

    def cached_indices(self):
        with self._lock:
            return list(self._samples.keys())

    def _sample(self, index: int) -> Transform:
        with self._lock:
            transform = self._samples.get(index)
            if transform is not None:
                self._samples.move_to_end(index)
                return transform

        date = self.grid_date(index)
        logger.debug("Fetching raw transform for grid point %d (%s)", index, date)
        try:
            transform = self.raw.get_transform(date)
        except ProviderComputationError:
            raise
        except Exception as exc:
            raise _computation_error(self.raw, date, exc) from exc

        with self._lock:
            self._samples[index] = transform
            self._samples.move_to_end(index)
            while len(self._samples) > self.cache_size:
                self._samples.popitem(last=False)
        return transform

    def get_transform(self, date: AbsoluteDate) -> Transform:
        sample = [self._sample(k) for k in self.grid_indices(date)]
        return Transform.interpolate(date, sample, self.cartesian_filter, self.angular_filter)


__all__ = [
    'TransformProvider', 'FixedTransformProvider', 'SingleSlotCache',
    'CachedTransformProvider', 'InterpolatingTransformProvider',
]

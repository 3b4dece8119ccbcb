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

"""Frames organized as a tree

Each frame holds a reference to its parent and the provider of the
transform from the parent to itself. Transforms between any two connected
frames are obtained by walking up to their closest common ancestor.
"""

import logging
from typing import List, Optional

from ..core.errors import FrameTreeError
from ..core.time import AbsoluteDate
from .providers import TransformProvider
from .transform import Transform

logger = logging.getLogger(__name__)


class Frame:
    """
    Reference frame.

    Parameters
    ----------
    name : str
        Name of the frame
    parent : Frame, optional
        Parent frame, None for a root frame
    provider : TransformProvider, optional
        Provider of the transform from ``parent`` to this frame; required
        when a parent is given, forbidden otherwise
    pseudo_inertial : bool
        True if the frame is suitable for Newtonian mechanics

    Raises
    ------
    ValueError
        If exactly one of ``parent`` and ``provider`` is given
    """

    __slots__ = ('_name', '_parent', '_provider', '_pseudo_inertial', '_depth')

    def __init__(self, name: str, parent: Optional['Frame'] = None,
                 provider: Optional[TransformProvider] = None,
                 pseudo_inertial: bool = False):
        if (parent is None) != (provider is None):
            raise ValueError(f"frame {name}: parent and provider must be given together")
        self._name = name
        self._parent = parent
        self._provider = provider
        self._pseudo_inertial = pseudo_inertial
        self._depth = 0 if parent is None else parent._depth + 1
        logger.debug("Created frame %s (depth %d)", name, self._depth)

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Optional['Frame']:
        return self._parent

    @property
    def provider(self) -> Optional[TransformProvider]:
        return self._provider

    @property
    def depth(self) -> int:
        """Number of hops to the root of the tree"""
        return self._depth

    def is_pseudo_inertial(self) -> bool:
        return self._pseudo_inertial

    def get_ancestor(self, n: int) -> 'Frame':
        """
        Get the n-th generation ancestor (0 is the frame itself).

        Raises
        ------
        ValueError
            If n is negative or larger than the depth
        """
        if n < 0 or n > self._depth:
            raise ValueError(f"frame {self._name} has no ancestor {n} generations up (depth {self._depth})")
        current = self
        for _ in range(n):
            current = current._parent
        return current

    def is_child_of(self, potential_ancestor: 'Frame') -> bool:
        """True if ``potential_ancestor`` is a strict ancestor of this frame"""
        if potential_ancestor._depth >= self._depth:
            return False
        return self.get_ancestor(self._depth - potential_ancestor._depth) is potential_ancestor

    def path_to_root(self) -> List['Frame']:
        """Frames from this one up to the root, both included"""
        path = []
        current = self
        while current is not None:
            path.append(current)
            current = current._parent
        return path

    def _common_ancestor(self, other: 'Frame') -> 'Frame':
        current_self = self
        current_other = other
        while current_self._depth > current_other._depth:
            current_self = current_self._parent
        while current_other._depth > current_self._depth:
            current_other = current_other._parent
        while current_self is not current_other:
            current_self = current_self._parent
            current_other = current_other._parent
            if current_self is None:
                raise FrameTreeError(
                    f"frames {self._name} and {other._name} do not share a common ancestor",
                    frames=(self._name, other._name))
        return current_self

    def _transform_from_ancestor(self, ancestor: 'Frame', date: AbsoluteDate) -> Transform:
        transform = Transform.IDENTITY
        hops = []
        current = self
        while current is not ancestor:
            hops.append(current)
            current = current._parent
        for frame in reversed(hops):
            transform = Transform.compose(date, transform, frame._provider.get_transform(date))
        return transform

    def get_transform_to(self, destination: 'Frame', date: AbsoluteDate) -> Transform:
        """
        Get the transform from this frame to another frame.

        Parameters
        ----------
        destination : Frame
            Destination frame
        date : AbsoluteDate
            Date of the transform

        Returns
        -------
        Transform
            Transform mapping coordinates in this frame to coordinates in
            ``destination``

        Raises
        ------
        FrameTreeError
            If the two frames belong to different trees
        ProviderComputationError
            If a provider on the path fails
        """
        if destination is self:
            return Transform.IDENTITY

        ancestor = self._common_ancestor(destination)
        ancestor_to_self = self._transform_from_ancestor(ancestor, date)
        ancestor_to_destination = destination._transform_from_ancestor(ancestor, date)
        return Transform.compose(date, ancestor_to_self.get_inverse(), ancestor_to_destination)

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"Frame({self._name!r}, depth={self._depth})"


__all__ = ['Frame']

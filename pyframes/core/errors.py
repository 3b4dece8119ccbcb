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

"""Exception hierarchy for frame and transform computations"""


class FramesError(RuntimeError):
    """Base exception for all transform-engine failures.

    Parameters
    ----------
    message : str
        Human readable description
    **context
        Extra values describing the failing request (dates, sizes, names),
        kept in the ``context`` attribute for callers and log records
    """

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.context = context


class DegenerateGeometryError(FramesError, ValueError):
    """A geometric precondition does not hold.

    Raised for zero-length vectors that must be normalized, zero-norm
    rotation axes, non-orthogonal rotation matrices, coincident points
    defining a line and degenerate interpolation samples.
    """


class TooFewPointsError(FramesError):
    """Interpolation requested with fewer samples than required"""

    def __init__(self, actual: int, required: int):
        super().__init__(
            f"too few points for interpolation: {actual} < {required}",
            actual=actual, required=required)
        self.actual = actual
        self.required = required


class ProviderComputationError(FramesError):
    """A transform provider failed to compute its transform.

    The original failure, when there is one, is chained as ``__cause__``.
    """


class FrameTreeError(FramesError):
    """Frames are not connected through a common ancestor"""


__all__ = [
    'FramesError', 'DegenerateGeometryError', 'TooFewPointsError',
    'ProviderComputationError', 'FrameTreeError',
]

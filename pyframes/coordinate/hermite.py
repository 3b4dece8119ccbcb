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
Hermite interpolation of vector samples with derivatives.

Samples give a value and optionally its first and second derivatives at
each abscissa. The polynomial matching all of them is built with
``scipy.interpolate.KroghInterpolator``, which accepts repeated abscissae
as derivative conditions.
"""

import logging

import numpy as np
from scipy.interpolate import KroghInterpolator

from ..core.errors import DegenerateGeometryError, TooFewPointsError

logger = logging.getLogger(__name__)

MIN_SAMPLES = 2

# Polynomials above this degree oscillate badly with Krogh divided differences
MAX_CONDITIONS = 30


def check_abscissae(abscissae) -> np.ndarray:
    """
    Validate interpolation abscissae.

    Raises
    ------
    TooFewPointsError
        If fewer than two abscissae are given
    DegenerateGeometryError
        If two abscissae are equal
    """
    xs = np.asarray(abscissae, dtype=np.double)
    n = len(xs)
    if n < MIN_SAMPLES:
        raise TooFewPointsError(n, MIN_SAMPLES)
    if len(np.unique(xs)) != n:
        raise DegenerateGeometryError("duplicated abscissae in interpolation sample",
                                      abscissae=xs.tolist())
    return xs


def hermite_interpolate(abscissae, derivatives, x: float = 0.0) -> np.ndarray:
    """
    Evaluate the Hermite polynomial and its first two derivatives.

    Parameters
    ----------
    abscissae : array_like, shape (n,)
        Sample abscissae, all distinct
    derivatives : array_like, shape (n, k, d)
        For each sample, the value followed by its first k-1 derivatives
        (k is 1, 2 or 3), each of dimension d
    x : float
        Evaluation abscissa

    Returns
    -------
    result : ndarray, shape (3, d)
        Value, first and second derivative at x

    Raises
    ------
    TooFewPointsError
        If fewer than two samples are given
    DegenerateGeometryError
        If two samples share the same abscissa
    """
    xs = check_abscissae(abscissae)
    ys = np.asarray(derivatives, dtype=np.double)
    n = len(xs)

    k = ys.shape[1]
    if n * k > MAX_CONDITIONS:
        logger.debug("Hermite interpolation with %d conditions, expect oscillations", n * k)

    # scale abscissae to [-1, 1] to keep divided differences well conditioned
    scale = np.max(np.abs(xs - x))
    if scale == 0.0:
        scale = 1.0
    t = (xs - x) / scale

    xi = np.repeat(t, k)
    yi = np.empty((n * k, ys.shape[2]))
    for order in range(k):
        yi[order::k] = ys[:, order, :] * scale ** order

    interpolator = KroghInterpolator(xi, yi)
    values = interpolator.derivatives(0.0, der=3)

    result = np.zeros((3, ys.shape[2]))
    for order in range(3):
        result[order] = values[order] / scale ** order
    return result


__all__ = ['check_abscissae', 'hermite_interpolate', 'MIN_SAMPLES']

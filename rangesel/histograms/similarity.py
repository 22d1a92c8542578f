# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Similarity Scorer

Scores two histograms which share one binning. The raw similarity is the inner
product of the bin masses; dividing by the product of the total masses gives
the chance that a value drawn from each distribution lands in the same bin,
which is used as the selectivity of an overlap join.

score(a, a) is at most 1, and reaches 1 only when all of a's mass sits in a
single bin.

The totals are those of the histograms passed in. The estimator passes
histograms already cut down to the common domain, so when the two columns
share only a sliver of their domains, the mass in that sliver is renormalized
to the full probability scale. Mass outside the common domain doesn't lower
the score.
"""

import math

import numpy

from rangesel.config import MIN_SELECTIVITY
from rangesel.exceptions import InvalidInternalStateError
from rangesel.models.histogram import Histogram


def clamp_probability(value: float, floor: float = MIN_SELECTIVITY) -> float:
    """Force a value into [floor, 1.0], NaN becomes the floor."""
    if value is None or math.isnan(value):
        return floor
    return min(max(float(value), floor), 1.0)


def inner_product(a: Histogram, b: Histogram) -> float:
    if a.bin_count != b.bin_count:
        raise InvalidInternalStateError(
            f"Histograms must share a binning to be compared, they have {a.bin_count} and {b.bin_count} bins."
        )
    return float(numpy.dot(a.masses(), b.masses()))


def score(a: Histogram, b: Histogram) -> float:
    """
    Normalized similarity of two histograms resampled onto the same grid.

    Returns:
        float in [MIN_SELECTIVITY, 1.0]
    """
    raw_similarity = inner_product(a, b)
    normalizer = a.total_mass * b.total_mass
    if normalizer <= 0:
        return clamp_probability(0.0)
    return clamp_probability(raw_similarity / normalizer)

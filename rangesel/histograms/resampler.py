# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Histogram Resampler

Re-bin a histogram onto K equal-width bins spanning [grid_min, grid_max].

Each source bin's mass is spread over the target bins in proportion to how
much of the source bin's span falls inside each target bin:

~~~
    source  |     6     |  2  |
    target  |  ?  |  ?  |  ?  |
    result  |  3  |  3  |  2  |
~~~

Mass that falls outside the grid is dropped, which is what we want when two
histograms are being compared over the domain they have in common. When the
grid covers the whole of the source domain the total mass is unchanged.

The number of source bins and the number of target bins are unrelated, every
source bin is visited regardless of K.
"""

import numpy

from rangesel.exceptions import InvalidInternalStateError
from rangesel.histograms.builder import build_histogram
from rangesel.histograms.overlap import overlap_fractions
from rangesel.models.histogram import Histogram


def target_grid(grid_min: float, grid_max: float, bin_count: int) -> numpy.ndarray:
    """
    The bin_count + 1 edges of an equal-width grid over [grid_min, grid_max].

    The last edge is pinned to grid_max so accumulated floating point error
    can't leave a sliver of the domain uncovered.
    """
    if bin_count < 1:
        raise InvalidInternalStateError(f"Cannot resample onto {bin_count} bins.")
    if grid_max < grid_min:
        raise InvalidInternalStateError(
            f"Resampling grid is inverted, [{grid_min}, {grid_max}]."
        )
    # interpolated rather than grid_min + i * width, the width of a grid
    # between very large finite bounds overflows
    steps = numpy.arange(bin_count + 1, dtype=numpy.float64) / bin_count
    edges = grid_min * (1.0 - steps) + grid_max * steps
    edges = numpy.maximum.accumulate(numpy.clip(edges, grid_min, grid_max))
    edges[-1] = grid_max
    return edges


def resample(histogram: Histogram, grid_min: float, grid_max: float, bin_count: int) -> Histogram:
    """
    Redistribute the mass of a histogram onto an equal-width grid.

    Parameters:
        histogram: Histogram
            The histogram to resample, it is not modified.
        grid_min: float
            Lower edge of the grid.
        grid_max: float
            Upper edge of the grid.
        bin_count: int
            The number of bins in the grid (K).

    Returns:
        Histogram
            A new histogram with bin_count bins.
    """
    edges = target_grid(grid_min, grid_max, bin_count)

    # (K, B) matrix of the share of each source bin landing in each target bin
    coverage = overlap_fractions(
        edges[:-1], edges[1:], histogram.lowers(), histogram.uppers()
    )
    masses = coverage @ histogram.masses()

    return build_histogram(edges, masses)

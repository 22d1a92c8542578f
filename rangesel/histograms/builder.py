# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Histogram Builder

Turns the two raw statistics slots, B+1 boundaries and B masses, into a
Histogram. Bin i spans [boundaries[i], boundaries[i+1]) and carries masses[i].

The statistics store is trusted to hand us matched arrays, so anything that
can't describe a histogram is an internal error rather than a user error.
"""

from typing import Sequence

import numpy

from rangesel.exceptions import MalformedStatisticsError
from rangesel.models.histogram import Bin
from rangesel.models.histogram import Histogram


def as_float_axis(values: Sequence) -> numpy.ndarray:
    """
    Place boundary values on a float64 axis.

    DATE and TIMESTAMP boundaries arrive as numpy.datetime64, these are
    measured in microseconds since the epoch so every temporal unit shares
    one axis.
    """
    array = numpy.asarray(values)
    if numpy.issubdtype(array.dtype, numpy.datetime64):
        return array.astype("datetime64[us]").astype(numpy.int64).astype(numpy.float64)
    try:
        return array.astype(numpy.float64)
    except (TypeError, ValueError) as err:
        raise MalformedStatisticsError(f"Histogram statistics are not numeric - {err}") from err


def build_histogram(boundaries: Sequence, masses: Sequence) -> Histogram:
    """
    Construct a Histogram from raw boundary and mass arrays.

    Parameters:
        boundaries: Sequence
            B+1 bin edges.
        masses: Sequence
            B non-negative bin weights.

    Returns:
        Histogram

    Raises:
        MalformedStatisticsError: when the arrays can't describe a histogram.
    """
    edges = as_float_axis(boundaries)
    weights = as_float_axis(masses)

    bin_count = len(weights)
    if bin_count < 1:
        raise MalformedStatisticsError("Histogram must have at least one bin.")
    if len(edges) != bin_count + 1:
        raise MalformedStatisticsError(
            f"Histogram with {bin_count} bins needs {bin_count + 1} boundaries, {len(edges)} provided."
        )
    if not numpy.isfinite(edges).all():
        raise MalformedStatisticsError("Histogram boundaries must be finite.")
    if not numpy.isfinite(weights).all() or (weights < 0).any():
        raise MalformedStatisticsError("Histogram masses must be finite and non-negative.")

    bins = []
    domain_min = domain_max = None
    for i in range(bin_count):
        lower = float(edges[i])
        upper = float(edges[i + 1])
        if upper < lower:
            raise MalformedStatisticsError(f"Histogram bin {i} has its upper bound below its lower bound.")
        bins.append(Bin(lower=lower, upper=upper, mass=float(weights[i])))

        # the extent starts at the first bin written, bins need not be sorted
        if domain_min is None or lower < domain_min:
            domain_min = lower
        if domain_max is None or upper > domain_max:
            domain_max = upper

    return Histogram(
        bins=tuple(bins),
        total_mass=float(weights.sum()),
        domain_min=domain_min,
        domain_max=domain_max,
    )

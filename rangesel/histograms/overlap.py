# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Range Overlap Fraction

The share of a source interval's length that lies inside a target interval,
used to decide how much of a bin's mass moves into a new bin.

~~~
   target         |-----------|
   source     |-------|
                  ^^^^^ covered / source length = 0.5
~~~
"""

import numpy


def overlap_fraction(
    target_lower: float, target_upper: float, source_lower: float, source_upper: float
) -> float:
    """
    Fraction of [source_lower, source_upper] covered by [target_lower, target_upper].

    A zero-length source covers nothing, so it moves no mass.
    """
    # halved so spans between very large finite bounds stay finite
    source_length = source_upper * 0.5 - source_lower * 0.5
    if source_length <= 0:
        return 0.0
    covered = min(target_upper, source_upper) * 0.5 - max(target_lower, source_lower) * 0.5
    if covered <= 0:
        return 0.0
    return min(covered / source_length, 1.0)


def overlap_fractions(
    target_lowers: numpy.ndarray,
    target_uppers: numpy.ndarray,
    source_lowers: numpy.ndarray,
    source_uppers: numpy.ndarray,
) -> numpy.ndarray:
    """
    overlap_fraction for every (target, source) pair.

    Returns:
        numpy.ndarray of shape (len(targets), len(sources))
    """
    target_lowers = numpy.asarray(target_lowers, dtype=numpy.float64)[:, numpy.newaxis]
    target_uppers = numpy.asarray(target_uppers, dtype=numpy.float64)[:, numpy.newaxis]
    source_lowers = numpy.asarray(source_lowers, dtype=numpy.float64)[numpy.newaxis, :]
    source_uppers = numpy.asarray(source_uppers, dtype=numpy.float64)[numpy.newaxis, :]

    source_lengths = source_uppers * 0.5 - source_lowers * 0.5
    covered = numpy.minimum(target_uppers, source_uppers) * 0.5 - numpy.maximum(
        target_lowers, source_lowers
    ) * 0.5

    fractions = numpy.zeros(numpy.broadcast(covered, source_lengths).shape, dtype=numpy.float64)
    numpy.divide(covered, source_lengths, out=fractions, where=source_lengths > 0)
    return numpy.clip(fractions, 0.0, 1.0)

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Piecewise-constant density histograms over an ordered scalar domain.

A histogram is a sequence of bins, each an interval with a mass (relative
frequency) attached. Histograms are immutable, resampling one produces a new
instance.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy


@dataclass(frozen=True)
class Bin:
    lower: float
    upper: float
    mass: float

    @property
    def span(self) -> float:
        return self.upper - self.lower


@dataclass(frozen=True)
class Histogram:
    bins: Tuple[Bin, ...]
    total_mass: float
    domain_min: float
    domain_max: float

    def __len__(self) -> int:
        return len(self.bins)

    @property
    def bin_count(self) -> int:
        return len(self.bins)

    def lowers(self) -> numpy.ndarray:
        return numpy.fromiter((b.lower for b in self.bins), dtype=numpy.float64, count=len(self))

    def uppers(self) -> numpy.ndarray:
        return numpy.fromiter((b.upper for b in self.bins), dtype=numpy.float64, count=len(self))

    def masses(self) -> numpy.ndarray:
        return numpy.fromiter((b.mass for b in self.bins), dtype=numpy.float64, count=len(self))

    def __repr__(self) -> str:
        return (
            f"<Histogram bins={self.bin_count} domain=[{self.domain_min}, {self.domain_max}] "
            f"mass={self.total_mass}>"
        )

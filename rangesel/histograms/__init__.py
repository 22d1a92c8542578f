# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from rangesel.histograms.builder import build_histogram
from rangesel.histograms.overlap import overlap_fraction
from rangesel.histograms.overlap import overlap_fractions
from rangesel.histograms.resampler import resample
from rangesel.histograms.resampler import target_grid
from rangesel.histograms.similarity import clamp_probability
from rangesel.histograms.similarity import inner_product
from rangesel.histograms.similarity import score

__all__ = (
    "build_histogram",
    "clamp_probability",
    "inner_product",
    "overlap_fraction",
    "overlap_fractions",
    "resample",
    "score",
    "target_grid",
)

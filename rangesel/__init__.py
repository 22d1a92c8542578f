# isort: skip_file
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
rangesel estimates the selectivity of overlap joins between range columns for
a cost-based query planner.

Each side's value distribution is summarized by a histogram, both histograms
are resampled onto a common grid over the domain they share, and the
normalized inner product of the two is used as the probability that a pair of
rows satisfies the predicate.

To get started:
    from rangesel import AttributeReference, ColumnStatistics, MemoryStatisticsStore
    from rangesel import estimate_overlap_join_selectivity

    left = AttributeReference("bookings", "stay")
    right = AttributeReference("events", "duration")

    store = MemoryStatisticsStore()
    store.record(left, ColumnStatistics(boundaries=[0, 10, 20], masses=[5, 5]))
    store.record(right, ColumnStatistics(boundaries=[0, 10, 20], masses=[5, 5]))
    selectivity = estimate_overlap_join_selectivity(left, right, store=store)
"""

from rangesel.__version__ import __version__, __build__

from rangesel.models import AttributeReference
from rangesel.models import ColumnStatistics
from rangesel.models import EstimationStatistics
from rangesel.models import Histogram
from rangesel.statistics_store import MemoryStatisticsStore
from rangesel.selectivity import JoinContext
from rangesel.selectivity import estimate_overlap_join_selectivity
from rangesel.selectivity import get_estimator

__all__ = [
    "__build__",
    "__version__",
    "AttributeReference",
    "ColumnStatistics",
    "EstimationStatistics",
    "Histogram",
    "JoinContext",
    "MemoryStatisticsStore",
    "estimate_overlap_join_selectivity",
    "get_estimator",
]

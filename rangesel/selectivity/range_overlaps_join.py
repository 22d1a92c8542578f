# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Range Overlaps Join Selectivity

Estimates how likely `left && right` is to hold for a random pair of rows by
comparing the value distributions of the two range columns.

~~~
   FETCH_LEFT ──► FETCH_RIGHT ──► RESAMPLE ──► SCORE ──► DONE
        │              │              │
        └──────────────┴──────────────┴──────► FALLBACK
~~~

- FETCH_LEFT / FETCH_RIGHT: read each side's bins histogram from the
  statistics store. Missing statistics, or statistics the operator isn't
  allowed to use, fall back without looking at the other side. When the
  planner reports the join variables as reversed, the operator's left
  operand is fetched first. Boundaries must be temporal exactly when the
  attribute's element type is.
- RESAMPLE: both histograms are resampled onto the same K equal-width bins
  covering the part of the domain they have in common. Each side scans all of
  its own source bins, the two sides need not have the same number of bins.
  If the domains don't intersect we fall back.
- SCORE: the normalized inner product of the resampled histograms.

Whatever happens the planner gets a probability, errors are never raised to
it. Every attribute fetched from the store is released on every path out.
"""

import logging
import time
from enum import Enum
from enum import auto
from typing import Any
from typing import List
from typing import Optional

import numpy

from rangesel.config import DEFAULT_OVERLAP_SELECTIVITY
from rangesel.config import HISTOGRAM_RESAMPLE_BINS
from rangesel.exceptions import EmptyOverlapDomainError
from rangesel.exceptions import InvalidConfigurationError
from rangesel.exceptions import InvalidInternalStateError
from rangesel.exceptions import MalformedStatisticsError
from rangesel.exceptions import PermissionsError
from rangesel.exceptions import StatisticsUnavailableError
from rangesel.histograms import build_histogram
from rangesel.histograms import clamp_probability
from rangesel.histograms import resample
from rangesel.histograms import score
from rangesel.models import AttributeReference
from rangesel.models import EstimationStatistics
from rangesel.models import Histogram
from rangesel.statistics_store import BaseStatisticsStore

from .base_estimator import JoinContext
from .base_estimator import SelectivityEstimator

logger = logging.getLogger(__name__)

FALLBACK_REASONS = {
    StatisticsUnavailableError: "statistics_unavailable",
    PermissionsError: "statistics_not_permitted",
    EmptyOverlapDomainError: "empty_overlap_domain",
}


class EstimationState(Enum):
    FETCH_LEFT = auto()
    FETCH_RIGHT = auto()
    RESAMPLE = auto()
    SCORE = auto()
    DONE = auto()
    FALLBACK = auto()


class RangeOverlapsJoinEstimator(SelectivityEstimator):
    name = "rangeoverlapsjoinsel"

    def __init__(
        self,
        store: Optional[BaseStatisticsStore] = None,
        *,
        bin_count: int = HISTOGRAM_RESAMPLE_BINS,
        fallback: float = DEFAULT_OVERLAP_SELECTIVITY,
        statistics: Optional[EstimationStatistics] = None,
    ):
        super().__init__(statistics)
        if bin_count < 1:
            raise InvalidConfigurationError(
                config_item="bin_count",
                provided_value=bin_count,
                valid_value_description="a positive integer",
            )
        if not 0.0 <= fallback <= 1.0:
            raise InvalidConfigurationError(
                config_item="fallback",
                provided_value=fallback,
                valid_value_description="a probability between 0 and 1",
            )
        self.store = store
        self.bin_count = bin_count
        self.fallback = fallback

    def _fetch(self, attribute: AttributeReference, operator: str) -> Histogram:
        if self.store is None:
            raise StatisticsUnavailableError(attribute, "No statistics store is configured.")
        boundaries, masses = self.store.fetch_histogram(attribute, operator)

        temporal_boundaries = numpy.issubdtype(numpy.asarray(boundaries).dtype, numpy.datetime64)
        if temporal_boundaries != attribute.is_temporal:
            raise MalformedStatisticsError(
                f"Statistics for '{attribute}' ({attribute.element_type}) have "
                f"{'temporal' if temporal_boundaries else 'non-temporal'} boundaries."
            )
        return build_histogram(boundaries, masses)

    def restriction_selectivity(
        self, attribute: AttributeReference, constant: Any, context: Optional[JoinContext] = None
    ) -> float:
        # comparing against a constant doesn't use the histograms
        self.statistics.increase("estimates_constant")
        return self.fallback

    def join_selectivity(
        self,
        left: AttributeReference,
        right: AttributeReference,
        context: Optional[JoinContext] = None,
    ) -> float:
        """
        Estimate the selectivity of `left && right`.

        Parameters:
            left: AttributeReference
                The range column on the left of the operator.
            right: AttributeReference
                The range column on the right of the operator.
            context: JoinContext (optional)
                The operator and join type being planned.

        Returns:
            float in [0, 1]
        """
        if context is None:
            context = JoinContext()
        if context.is_reversed:
            left, right = right, left

        start_time = time.monotonic_ns()
        self.statistics.increase("estimates_requested")

        state = EstimationState.FETCH_LEFT
        fetched: List[AttributeReference] = []
        try:
            fetched.append(left)
            left_histogram = self._fetch(left, context.operator)

            state = EstimationState.FETCH_RIGHT
            fetched.append(right)
            right_histogram = self._fetch(right, context.operator)

            state = EstimationState.RESAMPLE
            grid_min = max(left_histogram.domain_min, right_histogram.domain_min)
            grid_max = min(left_histogram.domain_max, right_histogram.domain_max)
            if grid_min >= grid_max:
                raise EmptyOverlapDomainError(grid_min, grid_max)

            left_resampled = resample(left_histogram, grid_min, grid_max, self.bin_count)
            right_resampled = resample(right_histogram, grid_min, grid_max, self.bin_count)

            state = EstimationState.SCORE
            selectivity = score(left_resampled, right_resampled)
            state = EstimationState.DONE

        except (StatisticsUnavailableError, PermissionsError, EmptyOverlapDomainError) as err:
            logger.debug(
                "%s %s %s falling back during %s - %s",
                left,
                context.operator,
                right,
                state.name,
                err,
            )
            state, selectivity = EstimationState.FALLBACK, self._fall_back(err)
        except InvalidInternalStateError as err:
            logger.warning(
                "Statistics for %s %s %s are unusable, falling back - %s",
                left,
                context.operator,
                right,
                err,
            )
            self.statistics.add_message(f"Unusable statistics for {left} or {right}: {err}")
            state, selectivity = EstimationState.FALLBACK, self._fall_back(err)
        except Exception as err:  # pragma: no cover - the planner must always get an answer
            logger.exception(
                "Estimating %s %s %s failed during %s", left, context.operator, right, state.name
            )
            state, selectivity = EstimationState.FALLBACK, self._fall_back(err)
        finally:
            if self.store is not None:
                for attribute in fetched:
                    self.store.release(attribute)
            self.statistics.increase("time_estimating", time.monotonic_ns() - start_time)

        if state == EstimationState.DONE:
            self.statistics.increase("estimates_from_histograms")
            logger.debug(
                "%s %s %s (%s join) selectivity %f",
                left,
                context.operator,
                right,
                context.join_type,
                selectivity,
            )
            return clamp_probability(selectivity)
        return selectivity

    def _fall_back(self, reason: Exception) -> float:
        self.statistics.increase("estimates_fallback")
        self.statistics.increase(f"fallback_{FALLBACK_REASONS.get(type(reason), 'internal_error')}")
        return self.fallback


def estimate_overlap_join_selectivity(
    left: AttributeReference,
    right: AttributeReference,
    join_context: Optional[JoinContext] = None,
    store: Optional[BaseStatisticsStore] = None,
    statistics: Optional[EstimationStatistics] = None,
) -> float:
    """
    Selectivity of a range overlap join between two attributes.

    Uses the configured HISTOGRAM_RESAMPLE_BINS and DEFAULT_OVERLAP_SELECTIVITY.
    Without a statistics store the answer is DEFAULT_OVERLAP_SELECTIVITY.
    """
    estimator = RangeOverlapsJoinEstimator(store, statistics=statistics)
    return estimator.join_selectivity(left, right, join_context)

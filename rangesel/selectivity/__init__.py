# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Selectivity estimators are registered by name, the planner looks them up by the
name recorded against an operator and calls them through the
SelectivityEstimator interface.

Example Usage:
    estimator = get_estimator("rangeoverlapsjoinsel", store=store)
    selectivity = estimator.join_selectivity(left, right, JoinContext(operator="&&"))
"""

from typing import Dict
from typing import Optional
from typing import Type

from rangesel.exceptions import EstimatorNotFoundError
from rangesel.exceptions import ParameterError
from rangesel.models import EstimationStatistics
from rangesel.statistics_store import BaseStatisticsStore
from rangesel.utils import suggest_alternative

from .base_estimator import JoinContext
from .base_estimator import SelectivityEstimator
from .constant_estimators import AreaSelectivityEstimator
from .constant_estimators import ContainmentSelectivityEstimator
from .constant_estimators import PositionSelectivityEstimator
from .range_overlaps_join import EstimationState
from .range_overlaps_join import RangeOverlapsJoinEstimator
from .range_overlaps_join import estimate_overlap_join_selectivity

ESTIMATORS: Dict[str, Type[SelectivityEstimator]] = {
    "areasel": AreaSelectivityEstimator,
    "areajoinsel": AreaSelectivityEstimator,
    "positionsel": PositionSelectivityEstimator,
    "positionjoinsel": PositionSelectivityEstimator,
    "contsel": ContainmentSelectivityEstimator,
    "contjoinsel": ContainmentSelectivityEstimator,
    "rangeoverlapsjoinsel": RangeOverlapsJoinEstimator,
}


def get_estimator(
    name: str,
    *,
    store: Optional[BaseStatisticsStore] = None,
    statistics: Optional[EstimationStatistics] = None,
) -> SelectivityEstimator:
    """
    Create the estimator registered under a name.

    Estimators which read histograms need a statistics store.
    """
    estimator_class = ESTIMATORS.get(name.lower())
    if estimator_class is None:
        raise EstimatorNotFoundError(name, suggest_alternative(name, ESTIMATORS))
    if estimator_class is RangeOverlapsJoinEstimator:
        if store is None:
            raise ParameterError(f"Selectivity estimator '{name}' needs a statistics store.")
        return RangeOverlapsJoinEstimator(store, statistics=statistics)
    return estimator_class(statistics)


__all__ = (
    "ESTIMATORS",
    "AreaSelectivityEstimator",
    "ContainmentSelectivityEstimator",
    "EstimationState",
    "JoinContext",
    "PositionSelectivityEstimator",
    "RangeOverlapsJoinEstimator",
    "SelectivityEstimator",
    "estimate_overlap_join_selectivity",
    "get_estimator",
)

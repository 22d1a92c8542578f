# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
The SelectivityEstimator is the capability the planner calls to ask how likely
a predicate is to hold.

Restriction selectivity is for `column <op> constant`, join selectivity is for
`column <op> column` across two relations. Either way the answer is a
probability in [0, 1] and an estimator must never raise to the planner.
"""

from dataclasses import dataclass
from typing import Any
from typing import Optional

from rangesel.models import AttributeReference
from rangesel.models import EstimationStatistics


@dataclass(frozen=True)
class JoinContext:
    operator: str = "&&"
    join_type: str = "inner"
    # the planner saw the operator's operands in the opposite order
    is_reversed: bool = False


class SelectivityEstimator:
    name: str = "selectivity"

    def __init__(self, statistics: Optional[EstimationStatistics] = None):
        if statistics is None:
            statistics = EstimationStatistics()
        self.statistics = statistics

    def restriction_selectivity(
        self, attribute: AttributeReference, constant: Any, context: Optional[JoinContext] = None
    ) -> float:  # pragma: no cover
        raise NotImplementedError(
            "restriction_selectivity must be implemented in SelectivityEstimator classes."
        )

    def join_selectivity(
        self, left: AttributeReference, right: AttributeReference, context: Optional[JoinContext] = None
    ) -> float:  # pragma: no cover
        raise NotImplementedError(
            "join_selectivity must be implemented in SelectivityEstimator classes."
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} '{self.name}'>"

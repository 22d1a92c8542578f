# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Fixed selectivities for geometric operators.

Without knowing how the keys are distributed we can't make a good prediction
for these operators. The values are deliberately small so the planner will
prefer an index when one is available.
"""

from typing import Any
from typing import Optional

from rangesel.models import AttributeReference

from .base_estimator import JoinContext
from .base_estimator import SelectivityEstimator


class ConstantSelectivityEstimator(SelectivityEstimator):
    selectivity: float = 0.005

    def restriction_selectivity(
        self, attribute: AttributeReference, constant: Any, context: Optional[JoinContext] = None
    ) -> float:
        self.statistics.increase("estimates_constant")
        return self.selectivity

    def join_selectivity(
        self, left: AttributeReference, right: AttributeReference, context: Optional[JoinContext] = None
    ) -> float:
        self.statistics.increase("estimates_constant")
        return self.selectivity


class AreaSelectivityEstimator(ConstantSelectivityEstimator):
    """Operators that depend on area, such as 'overlap'."""

    name = "areasel"
    selectivity = 0.005


class PositionSelectivityEstimator(ConstantSelectivityEstimator):
    """How likely is a box to be strictly left of (right of, above, below) another box?"""

    name = "positionsel"
    selectivity = 0.1


class ContainmentSelectivityEstimator(ConstantSelectivityEstimator):
    """
    How likely is a box to contain (be contained by) another box?

    This is a tighter constraint than overlap, so the estimate is smaller than
    the area estimate.
    """

    name = "contsel"
    selectivity = 0.001

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
In-process statistics store.

Statistics are held serialized, so each fetch hands the caller its own copy of
the arrays and nothing an estimator does can leak into another estimate.

Operators can be barred from reading an attribute's statistics, mirroring the
catalog's check that a support function is safe to run against values it
hasn't been granted access to.
"""

import logging
from typing import Dict
from typing import List
from typing import Optional
from typing import Set
from typing import Tuple

from rangesel.exceptions import PermissionsError
from rangesel.exceptions import StatisticsUnavailableError
from rangesel.models import AttributeReference
from rangesel.models import ColumnStatistics

from .base_statistics_store import BaseStatisticsStore

logger = logging.getLogger(__name__)


class MemoryStatisticsStore(BaseStatisticsStore):
    def __init__(self):
        self._statistics: Dict[AttributeReference, bytes] = {}
        self._revoked: Set[Tuple[AttributeReference, Optional[str]]] = set()
        self.open_handles: int = 0

    def record(self, attribute: AttributeReference, statistics: ColumnStatistics):
        self._statistics[attribute] = statistics.to_bytes()

    def forget(self, attribute: AttributeReference):
        self._statistics.pop(attribute, None)

    def revoke(self, attribute: AttributeReference, operator: Optional[str] = None):
        """Stop an operator, or every operator if None, using an attribute's statistics."""
        self._revoked.add((attribute, operator))

    def _permitted(self, attribute: AttributeReference, operator: Optional[str]) -> bool:
        return (attribute, None) not in self._revoked and (attribute, operator) not in self._revoked

    def fetch_histogram(
        self, attribute: AttributeReference, operator: Optional[str] = None
    ) -> Tuple[List, List[float]]:
        self.open_handles += 1
        if not self._permitted(attribute, operator):
            raise PermissionsError(attribute=attribute, operator=operator)
        raw = self._statistics.get(attribute)
        if raw is None:
            raise StatisticsUnavailableError(attribute=attribute)
        statistics = ColumnStatistics.from_bytes(raw)
        logger.debug("Read %s histogram bins for %s", statistics.bin_count, attribute)
        return statistics.boundaries, statistics.masses

    def release(self, attribute: AttributeReference) -> None:
        self.open_handles -= 1

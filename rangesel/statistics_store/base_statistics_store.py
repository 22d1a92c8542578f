# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
The BaseStatisticsStore provides a common interface for the places histogram
statistics are read from.
"""

from typing import List
from typing import Optional
from typing import Tuple

from rangesel.models import AttributeReference


class BaseStatisticsStore:
    def fetch_histogram(
        self, attribute: AttributeReference, operator: Optional[str] = None
    ) -> Tuple[List, List[float]]:  # pragma: no cover
        """
        Retrieve the bins histogram recorded for an attribute.

        Parameters:
            attribute: AttributeReference
                The range column to read statistics for.
            operator: str (optional)
                The operator whose support function will use the statistics.

        Returns:
            A tuple of (boundaries, masses)

        Raises:
            StatisticsUnavailableError: nothing has been recorded for the attribute.
            PermissionsError: the operator isn't allowed to use the statistics.
        """
        raise NotImplementedError("Subclasses must implement fetch_histogram method.")

    def release(self, attribute: AttributeReference) -> None:
        """
        Called once for every attribute passed to fetch_histogram, whether or not
        the fetch succeeded, when the estimator has finished with it.
        """
        return None

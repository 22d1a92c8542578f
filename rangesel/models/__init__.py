# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from rangesel.models.attribute_reference import AttributeReference
from rangesel.models.column_statistics import ColumnStatistics
from rangesel.models.estimation_statistics import EstimationStatistics
from rangesel.models.histogram import Bin
from rangesel.models.histogram import Histogram

__all__ = (
    "AttributeReference",
    "Bin",
    "ColumnStatistics",
    "EstimationStatistics",
    "Histogram",
)

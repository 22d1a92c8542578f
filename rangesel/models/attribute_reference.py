# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from dataclasses import dataclass

from orso.types import OrsoTypes

# element types whose boundaries arrive as numpy.datetime64
TEMPORAL_TYPES = (OrsoTypes.DATE, OrsoTypes.TIMESTAMP)


@dataclass(frozen=True)
class AttributeReference:
    """A range-valued column taking part in a join predicate."""

    relation: str
    column: str
    element_type: OrsoTypes = OrsoTypes.DOUBLE

    @property
    def qualified_name(self) -> str:
        return f"{self.relation}.{self.column}"

    @property
    def is_temporal(self) -> bool:
        return self.element_type in TEMPORAL_TYPES

    def __str__(self) -> str:
        return self.qualified_name

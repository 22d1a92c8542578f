# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
The bins histogram recorded against a range column.

`boundaries` holds the B+1 cut points and `masses` the B bin weights, the two
statistics slots the histogram builder consumes. Temporal boundaries are
serialized tagged, so they survive the trip through bytes.
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import List

import numpy
import orjson


def orjson_default(obj):
    if isinstance(obj, numpy.datetime64):
        return {"__datetime64__": str(obj)}
    if isinstance(obj, numpy.integer):
        return int(obj)
    if isinstance(obj, numpy.inexact):
        return float(obj)
    raise TypeError(f"Type not serializable: {type(obj)}")


def decode_boundary(value):
    if type(value) is dict and "__datetime64__" in value:
        return numpy.datetime64(value["__datetime64__"])
    return value


@dataclass
class ColumnStatistics:
    boundaries: List[Any] = field(default_factory=list)
    masses: List[float] = field(default_factory=list)
    null_fraction: float = 0.0

    @property
    def bin_count(self) -> int:
        return len(self.masses)

    def to_bytes(self) -> bytes:
        return orjson.dumps(asdict(self), default=orjson_default)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ColumnStatistics":
        loaded = orjson.loads(data)
        loaded["boundaries"] = [decode_boundary(b) for b in loaded["boundaries"]]
        return cls(**loaded)

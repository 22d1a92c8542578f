# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.


from collections import defaultdict


class EstimationStatistics:
    """
    Counters describing what the estimators did, reported to the planner.

    Each planning session should hold its own instance, nothing here is
    synchronized.
    """

    def __init__(self):
        # predefine "messages" so all new statistics default to 0
        self._stats: dict = defaultdict(int)
        self._stats["messages"] = []

    def _ns_to_s(self, nano_seconds: int) -> float:
        """convert elapsed ns to s"""
        if nano_seconds == 0:
            return 0
        return nano_seconds / 1e9

    def __getattr__(self, attr):
        """allow access using stats.statistic_name"""
        if attr.startswith("__"):
            raise AttributeError(attr)
        return self._stats[attr]

    def __setattr__(self, attr, value):
        """allow access using stats.statistic_name"""
        if attr == "_stats":
            super().__setattr__(attr, value)
        else:
            self._stats[attr] = value

    def increase(self, attr: str, amount: float = 1.0):
        self._stats[attr] += amount

    def add_message(self, message: str):
        """collect warnings"""
        self._stats["messages"].append(message)

    @property
    def fallback_rate(self) -> float:
        """share of requested join estimates answered with the fallback constant"""
        requested = self._stats.get("estimates_requested", 0)
        if not requested:
            return 0.0
        return self._stats.get("estimates_fallback", 0) / requested

    def as_dict(self):
        """
        Return statistics as a dictionary
        """
        stats_dict = dict(self._stats)
        if stats_dict.get("estimates_requested"):
            stats_dict["fallback_rate"] = self.fallback_rate
        for k, v in stats_dict.items():
            # times are recorded in ns but reported in seconds
            if k.startswith("time_"):
                stats_dict[k] = self._ns_to_s(v)
        stats_dict = {key: stats_dict[key] for key in sorted(stats_dict)}
        # put messages at the end
        stats_dict["messages"] = stats_dict.pop("messages", [])
        return stats_dict

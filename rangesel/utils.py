# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from typing import Iterable
from typing import Optional

MAX_SUGGESTION_DISTANCE: int = 3


def levenshtein_distance(word1: str, word2: str) -> int:
    """
    https://en.wikipedia.org/wiki/Levenshtein_distance
    """
    word1 = word1.lower()
    word2 = word2.lower()
    previous = list(range(len(word2) + 1))

    for x in range(1, len(word1) + 1):
        current = [x] + [0] * len(word2)
        for y in range(1, len(word2) + 1):
            substitution = 0 if word1[x - 1] == word2[y - 1] else 1
            current[y] = min(
                previous[y] + 1, previous[y - 1] + substitution, current[y - 1] + 1
            )
        previous = current

    return previous[len(word2)]


def suggest_alternative(value: str, candidates: Iterable[str]) -> Optional[str]:
    """
    Find the closest candidate to a value, ignoring case and non-alphanumeric
    characters. Only candidates fewer than three edits away are suggested.
    """
    name = "".join(char for char in value if char.isalnum())
    best_match = None
    best_score = MAX_SUGGESTION_DISTANCE

    for raw in candidates:
        candidate = "".join(char for char in raw if char.isalnum())
        distance = levenshtein_distance(candidate, name)
        if distance == 0:
            return raw
        if distance < best_score:
            best_score = distance
            best_match = raw

    return best_match

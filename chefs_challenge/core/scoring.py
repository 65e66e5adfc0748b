from __future__ import annotations

import math
from collections.abc import Sequence


def calculate_bonus(time_left: float, level: int) -> int:
    return level * 100 + math.floor(time_left) * 10


def record_high_score(scores: Sequence[int], score: int, *, limit: int = 5) -> list[int]:
    """Merge `score` into a descending high-score table capped at `limit` entries."""

    return sorted([*scores, score], reverse=True)[:limit]

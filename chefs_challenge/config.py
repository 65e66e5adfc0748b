from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameSettings:
    # Seconds on the clock for level 1.
    start_time: int = 20
    # Later levels lose a second each, down to this floor.
    min_time: int = 10
    high_score_limit: int = 5
    tick_seconds: float = 1.0
    # None => pick a fresh seed per process (recorded in the session snapshot).
    seed: int | None = None
    log_level: str = "INFO"

    def time_for_level(self, level: int) -> int:
        return max(self.min_time, self.start_time - level)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    return int(raw) if raw else default


def settings_from_env() -> GameSettings:
    raw_seed = os.environ.get("CHEFS_CHALLENGE_SEED")
    raw_tick = os.environ.get("CHEFS_CHALLENGE_TICK_SECONDS")
    return GameSettings(
        start_time=_env_int("CHEFS_CHALLENGE_START_TIME", 20),
        min_time=_env_int("CHEFS_CHALLENGE_MIN_TIME", 10),
        high_score_limit=_env_int("CHEFS_CHALLENGE_HIGH_SCORE_LIMIT", 5),
        tick_seconds=float(raw_tick) if raw_tick else 1.0,
        seed=int(raw_seed) if raw_seed else None,
        log_level=os.environ.get("CHEFS_CHALLENGE_LOG_LEVEL", "INFO").upper(),
    )

from __future__ import annotations

import os
from dataclasses import dataclass

SEED_ENV = "MENTALITTY_SEED"
LOG_LEVEL_ENV = "MENTALITTY_LOG_LEVEL"

QUIT_KEYS = frozenset({"q", "esc", "ctrl+c"})


@dataclass(frozen=True, slots=True)
class GameConfig:
    tick_interval_s: float = 1.0
    frame_interval_s: float = 1.0 / 60.0
    # None selects the OS-backed secure prompt source.
    seed: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.tick_interval_s <= 0:
            raise ValueError("tick_interval_s must be > 0")
        if self.frame_interval_s <= 0:
            raise ValueError("frame_interval_s must be > 0")

    @classmethod
    def from_env(cls) -> "GameConfig":
        raw_seed = os.environ.get(SEED_ENV, "").strip()
        seed: int | None = None
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise ValueError(f"{SEED_ENV} must be an integer, got {raw_seed!r}") from None
        level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or "WARNING"
        return cls(seed=seed, log_level=level)

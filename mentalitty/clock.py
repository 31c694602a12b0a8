from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Source of event timestamps.

    The runtime stamps every key press and timer event with ``now()`` so the
    game core can measure reaction times without reading real time itself.
    """

    def now(self) -> float:
        """Return monotonic seconds."""


class RealClock:
    """Wall clock for the pygame runtime, backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()

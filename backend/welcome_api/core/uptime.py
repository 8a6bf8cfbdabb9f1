"""Uptime Clock — process-wide monotonic counter, injected into handlers.

Invariants:
    - uptime() is never negative
    - uptime() is non-decreasing across calls on the same clock
    - now() is always timezone-aware UTC

Design Decisions:
    - Monotonic source over wall clock: unaffected by NTP or manual clock changes
    - process_clock starts counting when this module is first imported, not at
      interpreter start; under uvicorn the gap is the import time of the app
    - Routes read it through the get_clock dependency, never as a bare global
"""

import time
from datetime import datetime, timezone
from typing import Callable


class UptimeClock:
    """Elapsed seconds since a fixed start instant, plus current UTC time."""

    def __init__(
        self,
        started_at: float | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self._monotonic = monotonic
        self.started_at = monotonic() if started_at is None else started_at

    def uptime(self) -> float:
        """Seconds elapsed since started_at."""
        return max(0.0, self._monotonic() - self.started_at)

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


process_clock = UptimeClock()

"""Route Dependencies — clock provider for handlers.

Invariants:
    - Routes obtain the clock only through get_clock
    - The clock lives on app.state, bound once by create_app()
"""

from fastapi import Request

from welcome_api.core.uptime import UptimeClock, process_clock


def get_clock(request: Request) -> UptimeClock:
    return getattr(request.app.state, "clock", process_clock)

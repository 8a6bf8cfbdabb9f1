"""Health Probe — liveness endpoint reporting process uptime.

Invariants:
    - GET /api/health always returns 200 with status "UP" if the process is up
    - uptime is read from the injected clock, non-negative and non-decreasing
"""

import logging

from fastapi import APIRouter, Depends, status

from welcome_api.api.dependencies import get_clock
from welcome_api.core.status_payloads import build_health
from welcome_api.core.uptime import UptimeClock
from welcome_api.schemas.status import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check(clock: UptimeClock = Depends(get_clock)):
    """Liveness probe. Returns 200 with uptime in seconds."""
    uptime = clock.uptime()
    logger.debug("Health probe answered", extra={"path": "/api/health"})
    return build_health(uptime, clock.now())

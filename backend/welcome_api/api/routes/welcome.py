"""Welcome Route — GET / returns the fixed welcome message."""

from fastapi import APIRouter, Depends, status

from welcome_api.api.dependencies import get_clock
from welcome_api.core.status_payloads import build_welcome
from welcome_api.core.uptime import UptimeClock
from welcome_api.schemas.status import WelcomeResponse

router = APIRouter(tags=["welcome"])


@router.get(
    "/", response_model=WelcomeResponse, status_code=status.HTTP_200_OK,
)
async def welcome(clock: UptimeClock = Depends(get_clock)):
    """Welcome message with the current timestamp."""
    return build_welcome(clock.now())

"""API test fixtures — in-process FastAPI client with a controllable clock.

Invariants:
    - Every test gets a fresh app built in test mode (no socket bound)
    - The clock is a ManualClock, advanced explicitly by tests

Design Decisions:
    - raise_app_exceptions=False: Starlette re-raises after the 500 handler
      responds, the client must see the response instead
"""

import pytest
from httpx import ASGITransport, AsyncClient

from welcome_api.config import Settings
from welcome_api.main import create_app
from tests.fakes import ManualClock


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def test_app(clock):
    return create_app(Settings(app_env="test"), clock=clock)


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

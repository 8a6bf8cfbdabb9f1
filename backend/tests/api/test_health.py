"""GET /api/health — liveness probe with process uptime.

Invariants:
    - status is always "UP"
    - uptime comes from the injected clock and never decreases
"""

from httpx import ASGITransport, AsyncClient

from welcome_api.api.dependencies import get_clock
from welcome_api.config import Settings
from welcome_api.main import create_app
from tests.fakes import ManualClock


async def test_health_returns_up(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert "application/json" in res.headers["content-type"]
    body = res.json()
    assert body["status"] == "UP"
    assert "timestamp" in body
    assert isinstance(body["uptime"], (int, float))
    assert body["uptime"] >= 0


async def test_health_reports_clock_uptime(client, clock):
    clock.advance(12.25)
    body = (await client.get("/api/health")).json()
    assert body["uptime"] == 12.25


async def test_sequential_probes_are_non_decreasing(client, clock):
    first = (await client.get("/api/health")).json()["uptime"]
    clock.advance(0.75)
    second = (await client.get("/api/health")).json()["uptime"]
    third = (await client.get("/api/health")).json()["uptime"]
    assert first <= second <= third


async def test_default_app_uses_process_clock():
    """Without an explicit clock the app reports real process uptime."""
    app = create_app(Settings(app_env="test"))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        first = (await c.get("/api/health")).json()["uptime"]
        second = (await c.get("/api/health")).json()["uptime"]
    assert 0 <= first <= second


async def test_clock_dependency_can_be_overridden(test_app, client):
    frozen = ManualClock(start=0.0)
    frozen.advance(99.0)
    test_app.dependency_overrides[get_clock] = lambda: frozen
    body = (await client.get("/api/health")).json()
    assert body["uptime"] == 99.0

"""Test fixtures for the schedule dashboard."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator, Callable
from datetime import datetime

import httpx
import pytest
import pytest_asyncio

os.environ.setdefault("PROVIDER_ID", "provider-1")
os.environ.setdefault("LOCALE", "pt_BR")
os.environ.setdefault("TIMEZONE", "America/Sao_Paulo")

from app.services.dashboard_service import ScheduleDashboard
from app.services.schedule_client import ScheduleApiClient
from tests.factories import NOW, FakeScheduleClient, appointment, month_availability


@pytest.fixture()
def fake_client() -> FakeScheduleClient:
    client = FakeScheduleClient()
    client.availability[(2021, 3)] = month_availability(unavailable={15, 17})
    client.appointments[NOW.date()] = [
        appointment("a-0900", 9),
        appointment("a-1400", 14),
        appointment("a-1100", 11),
    ]
    return client


@pytest.fixture()
def clock() -> Callable[[], datetime]:
    return lambda: NOW


@pytest.fixture()
def dashboard(fake_client: FakeScheduleClient, clock: Callable[[], datetime]) -> ScheduleDashboard:
    return ScheduleDashboard(fake_client, "provider-1", clock=clock)  # type: ignore[arg-type]


@pytest.fixture()
def upstream_routes() -> dict[str, Callable[[httpx.Request], httpx.Response]]:
    """Route table for the mocked upstream API, keyed by path."""
    return {}


@pytest_asyncio.fixture()
async def api_client(
    upstream_routes: dict[str, Callable[[httpx.Request], httpx.Response]],
) -> AsyncIterator[ScheduleApiClient]:
    def handler(request: httpx.Request) -> httpx.Response:
        route = upstream_routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        return route(request)

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://upstream.test"
    ) as http:
        yield ScheduleApiClient(http, timezone="America/Sao_Paulo")

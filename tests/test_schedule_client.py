"""Upstream client decoding and error mapping."""
from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime

import httpx
import pytest

from app.core.errors import DecodeError, NetworkError
from app.services.schedule_client import ScheduleApiClient

pytestmark = pytest.mark.asyncio

Routes = dict[str, Callable[[httpx.Request], httpx.Response]]


async def test_month_availability_request_and_decode(
    api_client: ScheduleApiClient, upstream_routes: Routes
) -> None:
    seen: list[httpx.Request] = []

    def route(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"day": 1, "available": True}, {"day": 2, "available": False}])

    upstream_routes["/providers/provider-1/month-availability"] = route

    days = await api_client.get_month_availability("provider-1", 2021, 3)

    assert [(d.day, d.available) for d in days] == [(1, True), (2, False)]
    assert seen[0].url.params["year"] == "2021"
    assert seen[0].url.params["month"] == "3"


async def test_out_of_range_days_are_dropped(api_client: ScheduleApiClient, upstream_routes: Routes) -> None:
    upstream_routes["/providers/p/month-availability"] = lambda request: httpx.Response(
        200, json=[{"day": 0, "available": False}, {"day": 5, "available": False}]
    )

    days = await api_client.get_month_availability("p", 2021, 3)

    assert [d.day for d in days] == [5]


async def test_appointments_are_converted_to_local_time(
    api_client: ScheduleApiClient, upstream_routes: Routes
) -> None:
    def route(request: httpx.Request) -> httpx.Response:
        assert request.url.params["day"] == "15"
        return httpx.Response(
            200,
            json=[
                {
                    "id": "a1",
                    "date": "2021-03-15T12:00:00.000Z",
                    "user": {"name": "Ana", "avatar_url": "https://cdn.example.com/ana.png"},
                },
                {"id": "a2", "date": "2021-03-15T15:30:00", "user": {"name": "Bruno", "avatar_url": None}},
            ],
        )

    upstream_routes["/appointments/me"] = route

    appointments = await api_client.get_day_appointments(date(2021, 3, 15))

    # Sao Paulo is UTC-3 in March 2021
    assert appointments[0].starts_at == datetime(2021, 3, 15, 9, 0)
    assert appointments[0].hour_formatted == "09:00"
    assert appointments[0].client_name == "Ana"
    assert appointments[1].starts_at == datetime(2021, 3, 15, 15, 30)
    assert appointments[1].client_avatar_url == ""


async def test_error_status_raises_network_error(api_client: ScheduleApiClient, upstream_routes: Routes) -> None:
    upstream_routes["/appointments/me"] = lambda request: httpx.Response(500, text="boom")

    with pytest.raises(NetworkError) as exc_info:
        await api_client.get_day_appointments(date(2021, 3, 15))

    assert exc_info.value.status_code == 500


async def test_transport_failure_raises_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://upstream.test") as http:
        client = ScheduleApiClient(http, timezone="UTC")
        with pytest.raises(NetworkError) as exc_info:
            await client.get_month_availability("p", 2021, 3)

    assert exc_info.value.status_code is None


async def test_non_json_body_raises_decode_error(api_client: ScheduleApiClient, upstream_routes: Routes) -> None:
    upstream_routes["/appointments/me"] = lambda request: httpx.Response(200, text="<html>")

    with pytest.raises(DecodeError):
        await api_client.get_day_appointments(date(2021, 3, 15))


async def test_shape_mismatch_raises_decode_error(api_client: ScheduleApiClient, upstream_routes: Routes) -> None:
    upstream_routes["/providers/p/month-availability"] = lambda request: httpx.Response(
        200, json={"days": [1, 2, 3]}
    )

    with pytest.raises(DecodeError):
        await api_client.get_month_availability("p", 2021, 3)

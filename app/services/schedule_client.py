import logging
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import httpx
from pydantic import TypeAdapter, ValidationError

from app.api.schemas.upstream import appointments_adapter, month_availability_adapter
from app.core.config import settings
from app.core.errors import DecodeError, NetworkError
from app.models.appointment import Appointment
from app.models.availability import AvailabilityDay

logger = logging.getLogger(__name__)


def build_http_client() -> httpx.AsyncClient:
    """Shared upstream client; owned by the app lifespan."""
    headers = {"Accept": "application/json"}
    if settings.auth_configured:
        headers["Authorization"] = f"Bearer {settings.api_token}"
    return httpx.AsyncClient(
        base_url=settings.schedule_api_url,
        headers=headers,
        timeout=settings.request_timeout_seconds,
    )


def to_naive_local(dt: datetime, tz: ZoneInfo) -> datetime:
    """Convert to naive local time; naive input is already local."""
    if dt.tzinfo is not None:
        return dt.astimezone(tz).replace(tzinfo=None)
    return dt


class ScheduleApiClient:
    def __init__(self, http: httpx.AsyncClient, timezone: str | None = None) -> None:
        self._http = http
        self._tz = ZoneInfo(timezone or settings.timezone)

    async def _get_json(self, path: str, params: dict[str, int]) -> object:
        try:
            resp = await self._http.get(path, params=params)
        except httpx.HTTPError as e:
            raise NetworkError(f"GET {path} failed: {type(e).__name__}: {e}") from e
        if resp.status_code < 200 or resp.status_code >= 300:
            logger.warning(
                "Upstream request failed: GET %s status=%s body=%s",
                path,
                resp.status_code,
                resp.text[:500],
            )
            raise NetworkError(f"GET {path} returned {resp.status_code}", status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(f"GET {path} returned a non-JSON body") from e

    @staticmethod
    def _validate(adapter: TypeAdapter, payload: object, path: str) -> list:
        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            raise DecodeError(f"GET {path} returned an unexpected shape: {e.error_count()} error(s)") from e

    async def get_month_availability(
        self, provider_id: str, year: int, month: int
    ) -> list[AvailabilityDay]:
        path = f"/providers/{provider_id}/month-availability"
        payload = await self._get_json(path, {"year": year, "month": month})
        items = self._validate(month_availability_adapter, payload, path)
        # Out-of-range days would not map to a calendar date
        days = [AvailabilityDay(day=i.day, available=i.available) for i in items if 1 <= i.day <= 31]
        if len(days) != len(items):
            logger.debug("Dropped %d availability item(s) with invalid day", len(items) - len(days))
        return days

    async def get_day_appointments(self, d: date) -> list[Appointment]:
        path = "/appointments/me"
        payload = await self._get_json(path, {"year": d.year, "month": d.month, "day": d.day})
        items = self._validate(appointments_adapter, payload, path)
        return [
            Appointment(
                id=i.id,
                starts_at=to_naive_local(i.date, self._tz),
                client_name=i.user.name,
                client_avatar_url=i.user.avatar_url or "",
            )
            for i in items
        ]


def local_now(timezone: str | None = None) -> datetime:
    """Naive local wall-clock time, comparable with ``Appointment.starts_at``."""
    return datetime.now(UTC).astimezone(ZoneInfo(timezone or settings.timezone)).replace(tzinfo=None)

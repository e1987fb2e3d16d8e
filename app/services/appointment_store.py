from datetime import date

from app.models.appointment import Appointment
from app.services.schedule_client import ScheduleApiClient
from app.services.snapshot_store import SnapshotStore


class AppointmentStore(SnapshotStore[date, tuple[Appointment, ...]]):
    """Appointments of the selected date, as returned by the server."""

    name = "appointments"

    def __init__(self, client: ScheduleApiClient) -> None:
        super().__init__()
        self._client = client

    @property
    def appointments(self) -> tuple[Appointment, ...]:
        return self.value or ()

    async def load(self, d: date) -> tuple[Appointment, ...] | None:
        async def fetch() -> tuple[Appointment, ...]:
            return tuple(await self._client.get_day_appointments(d))

        return await self._load(d, fetch)

from app.models.availability import AvailabilitySnapshot
from app.services.schedule_client import ScheduleApiClient
from app.services.snapshot_store import SnapshotStore


class AvailabilityStore(SnapshotStore[tuple[int, int], AvailabilitySnapshot]):
    """Month availability for one provider, tagged with (year, month)."""

    name = "month availability"

    def __init__(self, client: ScheduleApiClient, provider_id: str) -> None:
        super().__init__()
        self._client = client
        self._provider_id = provider_id

    @property
    def snapshot(self) -> AvailabilitySnapshot | None:
        return self.value

    def covers(self, year: int, month: int) -> bool:
        return self.snapshot is not None and self.snapshot.covers(year, month)

    async def load(self, year: int, month: int) -> AvailabilitySnapshot | None:
        async def fetch() -> AvailabilitySnapshot:
            days = await self._client.get_month_availability(self._provider_id, year, month)
            return AvailabilitySnapshot(year=year, month=month, days=days)

        return await self._load((year, month), fetch)

import asyncio
import logging
from collections.abc import Callable, Collection
from datetime import date, datetime

from app.models.appointment import Appointment, SchedulePartition
from app.services.appointment_store import AppointmentStore
from app.services.availability_store import AvailabilityStore
from app.services.calendar_service import WEEKEND_DAYS, derive_disabled_days, is_weekend
from app.services.partition_service import MORNING_CUTOFF_HOUR, partition_schedule
from app.services.schedule_client import ScheduleApiClient, local_now
from app.services.selection_service import SelectionController

logger = logging.getLogger(__name__)


class ScheduleDashboard:
    """Schedule state of one provider's dashboard.

    Owns the availability and appointment stores and the selection, and
    keeps the derived disabled-day set and partition cached against the
    snapshot they were computed from. The partition's next appointment is
    evaluated when the appointment list changes or on
    ``refresh_next_appointment``; in between it can go stale.
    """

    def __init__(
        self,
        client: ScheduleApiClient,
        provider_id: str,
        *,
        clock: Callable[[], datetime] = local_now,
        cutoff_hour: int = MORNING_CUTOFF_HOUR,
        weekend_days: Collection[int] = WEEKEND_DAYS,
    ) -> None:
        self._clock = clock
        self.cutoff_hour = cutoff_hour
        self.weekend_days = frozenset(weekend_days)
        self._disabled_cache: tuple[object, tuple[int, int], set[date]] | None = None
        self._partition_cache: tuple[object, SchedulePartition] | None = None
        self.availability = AvailabilityStore(client, provider_id)
        self.appointments = AppointmentStore(client)
        # Today is selected unvalidated, even on a weekend or unavailable day
        self.selection = SelectionController(
            clock().date(), self.disabled_days, weekend_days=self.weekend_days
        )

    def today(self) -> date:
        return self._clock().date()

    # Loads

    async def start(self) -> None:
        year, month = self.selection.displayed_month
        await asyncio.gather(
            self.availability.load(year, month),
            self.appointments.load(self.selection.selected_date),
        )

    async def change_month(self, year: int, month: int) -> None:
        logger.debug("Displayed month changed to %04d-%02d", year, month)
        self.selection.on_month_change(year, month)
        await self.availability.load(year, month)

    async def select_day(
        self,
        candidate: date,
        available: bool | None = None,
        disabled: bool | None = None,
    ) -> bool:
        """Apply a day click; modifiers left as None are computed here."""
        if available is None:
            available = not is_weekend(candidate, self.weekend_days)
        if disabled is None:
            disabled = candidate in self.disabled_days()
        applied = self.selection.handle_day_click(candidate, available, disabled)
        # Also retries a date whose previous load failed
        if applied and self.appointments.key != candidate:
            await self.appointments.load(candidate)
        return applied

    async def refresh(self) -> None:
        """Reload both stores for the current month and date."""
        year, month = self.selection.displayed_month
        await asyncio.gather(
            self.availability.load(year, month),
            self.appointments.load(self.selection.selected_date),
        )

    # Derived views

    def availability_known(self) -> bool:
        year, month = self.selection.displayed_month
        return self.availability.covers(year, month)

    def disabled_days(self) -> set[date]:
        snapshot = self.availability.snapshot
        displayed = self.selection.displayed_month
        cache = self._disabled_cache
        if cache is None or cache[0] is not snapshot or cache[1] != displayed:
            disabled = derive_disabled_days(snapshot, self.weekend_days, displayed)
            self._disabled_cache = cache = (snapshot, displayed, disabled)
        return cache[2]

    def partition(self) -> SchedulePartition:
        appointments = self.appointments.appointments
        if self._partition_cache is None or self._partition_cache[0] is not appointments:
            self._partition_cache = (
                appointments,
                partition_schedule(appointments, self._clock(), self.cutoff_hour),
            )
        return self._partition_cache[1]

    def refresh_next_appointment(self) -> Appointment | None:
        """Re-evaluate the partition against the current clock."""
        self._partition_cache = None
        return self.partition().next_appointment

    def is_today(self) -> bool:
        return self.selection.selected_date == self.today()

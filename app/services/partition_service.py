from collections.abc import Iterable
from datetime import datetime

from app.models.appointment import Appointment, SchedulePartition

MORNING_CUTOFF_HOUR = 12


def sort_by_start(appointments: Iterable[Appointment]) -> list[Appointment]:
    """Ascending by start time; equal start times keep their input order."""
    return sorted(appointments, key=lambda a: a.starts_at)


def find_next_appointment(
    appointments: Iterable[Appointment], now: datetime
) -> Appointment | None:
    """Earliest appointment starting strictly after ``now``, or None."""
    for appointment in sort_by_start(appointments):
        if appointment.starts_at > now:
            return appointment
    return None


def partition_schedule(
    appointments: Iterable[Appointment],
    now: datetime,
    cutoff_hour: int = MORNING_CUTOFF_HOUR,
) -> SchedulePartition:
    """Split a day's appointments into ordered morning/afternoon buckets.

    An appointment is "morning" when its local hour is below ``cutoff_hour``.
    The next appointment is evaluated against ``now`` only; callers must
    re-run this when time passes to keep it fresh.
    """
    ordered = sort_by_start(appointments)
    morning: list[Appointment] = []
    afternoon: list[Appointment] = []
    for appointment in ordered:
        if appointment.starts_at.hour < cutoff_hour:
            morning.append(appointment)
        else:
            afternoon.append(appointment)
    return SchedulePartition(
        morning=tuple(morning),
        afternoon=tuple(afternoon),
        next_appointment=find_next_appointment(ordered, now),
    )

import calendar
from collections.abc import Collection
from datetime import date

from app.models.availability import AvailabilitySnapshot

# date.weekday() numbering: Monday=0 .. Sunday=6
WEEKEND_DAYS: frozenset[int] = frozenset({5, 6})
ALL_DAYS_OF_WEEK: tuple[int, ...] = tuple(range(7))


def is_weekend(d: date, weekend_days: Collection[int] = WEEKEND_DAYS) -> bool:
    return d.weekday() in weekend_days


def working_days_of_week(weekend_days: Collection[int] = WEEKEND_DAYS) -> list[int]:
    return [wd for wd in ALL_DAYS_OF_WEEK if wd not in weekend_days]


def _days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def weekend_dates(year: int, month: int, weekend_days: Collection[int] = WEEKEND_DAYS) -> set[date]:
    days = (date(year, month, day) for day in range(1, _days_in_month(year, month) + 1))
    return {d for d in days if is_weekend(d, weekend_days)}


def derive_disabled_days(
    snapshot: AvailabilitySnapshot | None,
    weekend_days: Collection[int] = WEEKEND_DAYS,
    displayed_month: tuple[int, int] | None = None,
) -> set[date]:
    """Dates that cannot be selected.

    Union of the days the snapshot flags unavailable (in the snapshot's own
    month) and every weekend day of the snapshot's month and of
    ``displayed_month``. Weekends are disabled even with no snapshot, and
    stay disabled even if flagged available.
    """
    disabled: set[date] = set()
    if displayed_month is not None:
        disabled |= weekend_dates(*displayed_month, weekend_days)
    if snapshot is None:
        return disabled
    last_day = _days_in_month(snapshot.year, snapshot.month)
    for item in snapshot.days:
        if not item.available and item.day <= last_day:
            disabled.add(date(snapshot.year, snapshot.month, item.day))
    disabled |= weekend_dates(snapshot.year, snapshot.month, weekend_days)
    return disabled

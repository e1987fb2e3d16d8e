from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class AvailabilityDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1, le=31)
    available: bool


class AvailabilitySnapshot(BaseModel):
    """Per-day availability of one month, only valid for (year, month)."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(ge=1, le=12)
    days: tuple[AvailabilityDay, ...] = ()

    def covers(self, year: int, month: int) -> bool:
        return self.year == year and self.month == month


class ScheduleSelection(BaseModel):
    """Displayed calendar month and the committed selected date.

    ``selected_date`` may lie outside ``displayed_month``.
    """

    displayed_year: int
    displayed_month: int = Field(ge=1, le=12)
    selected_date: date

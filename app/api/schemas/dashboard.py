from datetime import date

from pydantic import BaseModel, Field


class AppointmentView(BaseModel):
    id: str
    starts_at: str  # local ISO-8601, no offset
    hour_formatted: str  # HH:MM
    client_name: str
    client_avatar_url: str


class CalendarView(BaseModel):
    year: int
    month: int
    from_year: int
    from_month: int
    disabled_days: list[date]
    available_days_of_week: list[int]  # 0=Monday .. 6=Sunday
    weekend_days: list[int]
    selected_date: date
    availability_known: bool
    availability_error: str | None = None


class ScheduleView(BaseModel):
    selected_date: date
    is_today: bool
    selected_date_label: str
    selected_weekday_label: str
    morning: list[AppointmentView]
    afternoon: list[AppointmentView]
    next_appointment: AppointmentView | None = None
    appointments_error: str | None = None
    # Day the listed appointments belong to; differs from selected_date after a failed load
    appointments_date: date | None = None


class MonthChangeRequest(BaseModel):
    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)


class DaySelectRequest(BaseModel):
    date: date
    # Picker modifiers for the clicked cell; omitted means "let the server decide"
    available: bool | None = None
    disabled: bool | None = None


class DaySelectResponse(BaseModel):
    applied: bool
    schedule: ScheduleView


class DashboardResponse(BaseModel):
    calendar: CalendarView
    schedule: ScheduleView

import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_dashboard
from app.api.schemas.dashboard import (
    AppointmentView,
    CalendarView,
    DashboardResponse,
    DaySelectRequest,
    DaySelectResponse,
    MonthChangeRequest,
    ScheduleView,
)
from app.core.config import settings
from app.models.appointment import Appointment
from app.services.calendar_service import working_days_of_week
from app.services.dashboard_service import ScheduleDashboard
from app.services.date_labels import selected_date_label, weekday_label

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _to_view(a: Appointment) -> AppointmentView:
    return AppointmentView(
        id=a.id,
        starts_at=a.starts_at.isoformat(),
        hour_formatted=a.hour_formatted,
        client_name=a.client_name,
        client_avatar_url=a.client_avatar_url,
    )


def _calendar_view(dashboard: ScheduleDashboard) -> CalendarView:
    year, month = dashboard.selection.displayed_month
    today = dashboard.today()
    error = dashboard.availability.error
    return CalendarView(
        year=year,
        month=month,
        from_year=today.year,
        from_month=today.month,
        disabled_days=sorted(dashboard.disabled_days()),
        available_days_of_week=working_days_of_week(dashboard.weekend_days),
        weekend_days=sorted(dashboard.weekend_days),
        selected_date=dashboard.selection.selected_date,
        availability_known=dashboard.availability_known(),
        availability_error=str(error) if error else None,
    )


def _schedule_view(dashboard: ScheduleDashboard) -> ScheduleView:
    selected = dashboard.selection.selected_date
    partition = dashboard.partition()
    is_today = dashboard.is_today()
    # The upcoming appointment only makes sense for today's schedule
    upcoming = partition.next_appointment if is_today else None
    error = dashboard.appointments.error
    return ScheduleView(
        selected_date=selected,
        is_today=is_today,
        selected_date_label=selected_date_label(selected, settings.locale),
        selected_weekday_label=weekday_label(selected, settings.locale),
        morning=[_to_view(a) for a in partition.morning],
        afternoon=[_to_view(a) for a in partition.afternoon],
        next_appointment=_to_view(upcoming) if upcoming else None,
        appointments_error=str(error) if error else None,
        appointments_date=dashboard.appointments.key,
    )


@router.get("/calendar", response_model=CalendarView)
async def get_calendar(dashboard: ScheduleDashboard = Depends(get_dashboard)) -> CalendarView:
    return _calendar_view(dashboard)


@router.get("/schedule", response_model=ScheduleView)
async def get_schedule(dashboard: ScheduleDashboard = Depends(get_dashboard)) -> ScheduleView:
    return _schedule_view(dashboard)


@router.put("/month", response_model=CalendarView)
async def change_month(
    body: MonthChangeRequest,
    dashboard: ScheduleDashboard = Depends(get_dashboard),
) -> CalendarView:
    """Show another month; loads its availability before answering."""
    await dashboard.change_month(body.year, body.month)
    return _calendar_view(dashboard)


@router.post("/select", response_model=DaySelectResponse)
async def select_day(
    body: DaySelectRequest,
    dashboard: ScheduleDashboard = Depends(get_dashboard),
) -> DaySelectResponse:
    """Select a day. Disabled days are ignored and reported as applied=false."""
    applied = await dashboard.select_day(body.date, body.available, body.disabled)
    return DaySelectResponse(applied=applied, schedule=_schedule_view(dashboard))


@router.post("/refresh", response_model=DashboardResponse)
async def refresh(dashboard: ScheduleDashboard = Depends(get_dashboard)) -> DashboardResponse:
    logger.info("Reloading availability and appointments")
    await dashboard.refresh()
    return DashboardResponse(calendar=_calendar_view(dashboard), schedule=_schedule_view(dashboard))

"""Response shapes of the upstream scheduling API."""
from datetime import datetime

from pydantic import BaseModel, TypeAdapter


class MonthAvailabilityItem(BaseModel):
    day: int
    available: bool


class AppointmentUser(BaseModel):
    name: str
    avatar_url: str | None = None


class AppointmentItem(BaseModel):
    id: str
    date: datetime
    user: AppointmentUser


month_availability_adapter = TypeAdapter(list[MonthAvailabilityItem])
appointments_adapter = TypeAdapter(list[AppointmentItem])

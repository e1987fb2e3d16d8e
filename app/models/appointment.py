from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Appointment(BaseModel):
    """A client appointment, with ``starts_at`` as naive local time."""

    model_config = ConfigDict(frozen=True)

    id: str
    starts_at: datetime
    client_name: str
    client_avatar_url: str = ""

    @property
    def hour_formatted(self) -> str:
        return self.starts_at.strftime("%H:%M")


class SchedulePartition(BaseModel):
    """Morning/afternoon split of one day's appointments.

    ``next_appointment`` is one of the objects held in ``morning`` or
    ``afternoon``, never a copy.
    """

    model_config = ConfigDict(frozen=True)

    morning: tuple[Appointment, ...] = ()
    afternoon: tuple[Appointment, ...] = ()
    next_appointment: Appointment | None = None

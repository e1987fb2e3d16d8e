from app.models.appointment import Appointment, SchedulePartition
from app.models.availability import AvailabilityDay, AvailabilitySnapshot, ScheduleSelection

__all__ = [
    "Appointment",
    "SchedulePartition",
    "AvailabilityDay",
    "AvailabilitySnapshot",
    "ScheduleSelection",
]

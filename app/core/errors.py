class ScheduleError(Exception):
    """Base error for failures talking to the upstream scheduling API."""


class NetworkError(ScheduleError):
    """Transport failure or non-success status from the upstream API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ScheduleError):
    """Upstream response did not match the expected shape."""

import logging
from collections.abc import Callable, Collection
from datetime import date

from app.models.availability import ScheduleSelection
from app.services.calendar_service import WEEKEND_DAYS, is_weekend

logger = logging.getLogger(__name__)


class SelectionController:
    """Owns the displayed month and the selected date.

    Candidates are checked against the weekend rule and the current
    disabled-day set; a date outside the loaded month is accepted
    optimistically. Rejections leave the selection untouched.
    """

    def __init__(
        self,
        selected_date: date,
        disabled_days: Callable[[], Collection[date]],
        weekend_days: Collection[int] = WEEKEND_DAYS,
    ) -> None:
        self._disabled_days = disabled_days
        self._weekend_days = weekend_days
        self._selection = ScheduleSelection(
            displayed_year=selected_date.year,
            displayed_month=selected_date.month,
            selected_date=selected_date,
        )

    @property
    def selected_date(self) -> date:
        return self._selection.selected_date

    @property
    def displayed_month(self) -> tuple[int, int]:
        return self._selection.displayed_year, self._selection.displayed_month

    def can_select(self, candidate: date) -> bool:
        if is_weekend(candidate, self._weekend_days):
            return False
        return candidate not in self._disabled_days()

    def try_select(self, candidate: date) -> bool:
        if not self.can_select(candidate):
            logger.debug("Ignoring selection of disabled day %s", candidate)
            return False
        if candidate != self._selection.selected_date:
            self._selection = self._selection.model_copy(update={"selected_date": candidate})
        return True

    def handle_day_click(self, candidate: date, available: bool, disabled: bool) -> bool:
        """Day click from the calendar, carrying the cell's modifiers."""
        if not available or disabled:
            return False
        return self.try_select(candidate)

    def on_month_change(self, year: int, month: int) -> None:
        self._selection = self._selection.model_copy(
            update={"displayed_year": year, "displayed_month": month}
        )

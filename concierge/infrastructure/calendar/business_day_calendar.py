from __future__ import annotations

import logging
from datetime import date, timedelta

from concierge.application.ports.calendar import CalendarPort
from concierge.domain.entities.availability import AvailabilityCalendar

DEFAULT_TIMES = ("09:00", "11:30", "14:00", "16:00")
DEFAULT_BUSINESS_DAYS = 21


class BusinessDayCalendar(CalendarPort):
    """Offers the same canonical times on each of the next N weekdays, today included."""

    def __init__(self, business_days: int = DEFAULT_BUSINESS_DAYS, times: tuple[str, ...] = DEFAULT_TIMES) -> None:
        self._business_days = business_days
        self._times = tuple(times)
        self._logger = logging.getLogger(__name__)

    def generate(self, today: date) -> AvailabilityCalendar:
        slots: list[tuple[str, tuple[str, ...]]] = []
        cursor = today
        while len(slots) < self._business_days:
            if cursor.weekday() < 5:
                slots.append((cursor.isoformat(), self._times))
            cursor += timedelta(days=1)

        self._logger.debug(
            "Availability generated",
            extra={"first_date": slots[0][0] if slots else None, "days": len(slots)},
        )
        return AvailabilityCalendar(slots=tuple(slots))

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from concierge.domain.entities.availability import AvailabilityCalendar


class CalendarPort(ABC):
    @abstractmethod
    def generate(self, today: date) -> AvailabilityCalendar:
        """Build the bookable calendar for a session starting on `today`."""
        raise NotImplementedError

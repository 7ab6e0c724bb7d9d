from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AvailabilityCalendar:
    """Bookable times per ISO date. Built once per session and never changed."""

    slots: tuple[tuple[str, tuple[str, ...]], ...] = field(default_factory=tuple)

    def dates(self) -> list[str]:
        return sorted(day for day, _ in self.slots)

    def times_for(self, day: str) -> tuple[str, ...]:
        for candidate, times in self.slots:
            if candidate == day:
                return times
        return ()

    def as_dict(self) -> dict[str, list[str]]:
        return {day: list(times) for day, times in self.slots}

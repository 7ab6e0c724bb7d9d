from __future__ import annotations

from dataclasses import dataclass

from concierge.domain.entities.slot import Slot


@dataclass(frozen=True)
class AppointmentDraft:
    name: str | None = None
    email: str | None = None
    purpose: str | None = None
    duration_minutes: int | None = None
    preferred_date: str | None = None  # YYYY-MM-DD
    preferred_time: str | None = None  # HH:MM
    timezone: str | None = None  # free-text label, never converted


@dataclass(frozen=True)
class ConfirmedAppointment:
    name: str | None
    email: str | None
    purpose: str | None
    duration_minutes: int | None
    timezone: str | None
    slot: Slot
    summary: str
    confirmation_time: int  # epoch milliseconds

    @property
    def identity(self) -> tuple[str, str, str | None]:
        return (self.slot.date, self.slot.time, self.email)

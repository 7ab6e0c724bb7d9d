from __future__ import annotations

from dataclasses import dataclass

from concierge.domain.entities.appointment import ConfirmedAppointment
from concierge.domain.entities.slot import Slot


@dataclass(frozen=True)
class BookingLedger:
    """Append-only record of confirmed appointments for one session."""

    appointments: tuple[ConfirmedAppointment, ...] = ()

    def append(self, appointment: ConfirmedAppointment) -> "BookingLedger":
        return BookingLedger(appointments=self.appointments + (appointment,))

    def is_booked(self, slot: Slot) -> bool:
        return any(appointment.slot == slot for appointment in self.appointments)

    def booked_times(self, day: str) -> set[str]:
        return {a.slot.time for a in self.appointments if a.slot.date == day}

    def by_confirmation_time(self) -> list[ConfirmedAppointment]:
        return sorted(self.appointments, key=lambda a: a.confirmation_time)

    def __len__(self) -> int:
        return len(self.appointments)

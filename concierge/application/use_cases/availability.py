from __future__ import annotations

from concierge.domain.entities.availability import AvailabilityCalendar
from concierge.domain.entities.booking_ledger import BookingLedger
from concierge.domain.entities.slot import Slot

DEFAULT_ALTERNATIVE_LIMIT = 3


def free_times(calendar: AvailabilityCalendar, day: str, ledger: BookingLedger) -> list[str]:
    """Calendar times for `day` that nobody has booked yet, in calendar order."""
    booked = ledger.booked_times(day)
    return [t for t in calendar.times_for(day) if t not in booked]


def is_slot_available(calendar: AvailabilityCalendar, slot: Slot, ledger: BookingLedger) -> bool:
    return slot.time in free_times(calendar, slot.date, ledger)


def find_alternatives(
    calendar: AvailabilityCalendar,
    requested_date: str | None,
    ledger: BookingLedger,
    limit: int = DEFAULT_ALTERNATIVE_LIMIT,
) -> list[Slot]:
    """
    Rank open slots near a requested date.

    Same-day openings come first, then every later calendar date in ascending
    order. The result never holds a booked slot and never exceeds `limit`.
    """
    options: list[Slot] = []
    if limit <= 0:
        return options

    if requested_date:
        for t in free_times(calendar, requested_date, ledger):
            if len(options) >= limit:
                break
            options.append(Slot(date=requested_date, time=t))

    for day in calendar.dates():
        if len(options) >= limit:
            break
        if requested_date and day < requested_date:
            continue
        for t in free_times(calendar, day, ledger):
            candidate = Slot(date=day, time=t)
            if candidate not in options:
                options.append(candidate)
            if len(options) >= limit:
                break

    return options[:limit]

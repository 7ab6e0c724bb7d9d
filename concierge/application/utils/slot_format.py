from __future__ import annotations

from datetime import datetime

from concierge.domain.entities.slot import Slot


def format_slot_human_readable(slot: Slot, timezone: str | None = None) -> str:
    """Render a slot as 'Monday, October 26 at 9:00 AM (EST)'."""
    suffix = f" ({timezone})" if timezone else ""
    try:
        moment = datetime.strptime(f"{slot.date} {slot.time}", "%Y-%m-%d %H:%M")
    except ValueError:
        return f"{slot.date} at {slot.time}{suffix}"
    hour = moment.hour % 12 or 12
    return f"{moment:%A, %B} {moment.day} at {hour}:{moment:%M %p}{suffix}"


def format_slot_list(slots: list[Slot], timezone: str | None = None) -> str:
    return "\n".join(
        f"{index}. {format_slot_human_readable(slot, timezone)}" for index, slot in enumerate(slots, start=1)
    )

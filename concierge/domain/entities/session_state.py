from __future__ import annotations

from dataclasses import dataclass

from concierge.domain.entities.availability import AvailabilityCalendar
from concierge.domain.entities.booking_ledger import BookingLedger
from concierge.domain.entities.dialogue_state import DialogueState
from concierge.domain.entities.message import Message


@dataclass(frozen=True)
class SessionState:
    session_id: str
    availability: AvailabilityCalendar
    dialogue: DialogueState = DialogueState()
    ledger: BookingLedger = BookingLedger()
    messages: tuple[Message, ...] = ()
    created_at: float | None = None
    updated_at: float | None = None

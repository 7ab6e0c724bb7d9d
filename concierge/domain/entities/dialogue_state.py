from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from concierge.domain.entities.appointment import AppointmentDraft
from concierge.domain.entities.slot import Slot


class Step(str, Enum):
    need_name = "need-name"
    need_email = "need-email"
    need_purpose = "need-purpose"
    need_duration = "need-duration"
    need_date = "need-date"
    need_time = "need-time"
    need_timezone = "need-timezone"
    confirming = "confirming"
    confirmed = "confirmed"


@dataclass(frozen=True)
class DialogueState:
    step: Step = Step.need_name
    draft: AppointmentDraft = AppointmentDraft()
    pending_slot: Slot | None = None  # awaiting an explicit yes/no
    suggested_slots: tuple[Slot, ...] = ()  # last alternatives shown to the user

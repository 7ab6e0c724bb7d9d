from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable

from concierge.application.use_cases.availability import (
    DEFAULT_ALTERNATIVE_LIMIT,
    find_alternatives,
    is_slot_available,
)
from concierge.application.utils import replies
from concierge.application.utils.date_parser import parse_preferred_date, parse_preferred_time
from concierge.application.utils.field_parsers import (
    first_name,
    parse_duration_minutes,
    parse_email,
    parse_name,
)
from concierge.application.utils.greeting import build_name_acknowledgement
from concierge.application.utils.slot_format import format_slot_human_readable, format_slot_list
from concierge.domain.entities.appointment import AppointmentDraft, ConfirmedAppointment
from concierge.domain.entities.dialogue_state import DialogueState, Step
from concierge.domain.entities.session_state import SessionState
from concierge.domain.entities.slot import Slot

AFFIRMATIVE_PATTERN = re.compile(r"\b(yes|y|confirm|sounds good|works|locked in)\b", re.IGNORECASE)
CHANGE_PATTERN = re.compile(r"no|change|different|adjust|update|another", re.IGNORECASE)


@dataclass(frozen=True)
class TurnResult:
    updated_state: SessionState
    replies: list[str]
    booked: ConfirmedAppointment | None = None

    @property
    def step(self) -> Step:
        return self.updated_state.dialogue.step


class DialogueUseCase:
    """
    Turn-by-turn booking dialogue.

    Each call to process_turn takes the whole session state and one trimmed
    user message and returns the next state plus the assistant replies. The
    input state is never modified.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        alternative_limit: int = DEFAULT_ALTERNATIVE_LIMIT,
    ) -> None:
        self._clock = clock
        self._alternative_limit = alternative_limit
        self._logger = logging.getLogger(__name__)

    def process_turn(self, state: SessionState, text: str) -> TurnResult:
        trimmed = text.strip()
        dialogue = state.dialogue
        step = dialogue.step

        if step == Step.need_name:
            result = self._process_name(state, trimmed)
        elif step == Step.need_email:
            result = self._process_email(state, trimmed)
        elif step == Step.need_purpose:
            result = self._process_purpose(state, trimmed)
        elif step == Step.need_duration:
            result = self._process_duration(state, trimmed)
        elif step == Step.need_date:
            result = self._process_date(state, trimmed)
        elif step == Step.need_time:
            result = self._process_time(state, trimmed)
        elif step == Step.need_timezone:
            result = self._process_timezone(state, trimmed)
        elif step == Step.confirming:
            result = self._process_confirmation(state, trimmed)
        elif step == Step.confirmed:
            result = self._start_next_booking(state)
        else:
            self._logger.warning(
                "Unknown dialogue step, restarting",
                extra={"session_id": state.session_id, "step": _step_value(step)},
            )
            result = self._advance(state, DialogueState(), replies.REALIGN_ON_NAME)

        if result.step == step:
            self._logger.debug("Turn not accepted", extra={"session_id": state.session_id, "step": _step_value(step)})
        else:
            self._logger.info(
                "Dialogue advanced",
                extra={"session_id": state.session_id, "step": f"{_step_value(step)}->{result.step.value}"},
            )
        return result

    def _process_name(self, state: SessionState, text: str) -> TurnResult:
        name = parse_name(text)
        if not name:
            return self._stay(state, replies.ASK_NAME_AGAIN)
        dialogue = state.dialogue
        return self._advance(
            state,
            replace(dialogue, step=Step.need_email, draft=replace(dialogue.draft, name=name)),
            build_name_acknowledgement(first_name(name)),
        )

    def _process_email(self, state: SessionState, text: str) -> TurnResult:
        email = parse_email(text)
        if not email:
            return self._stay(state, replies.ASK_EMAIL_AGAIN)
        dialogue = state.dialogue
        return self._advance(
            state,
            replace(dialogue, step=Step.need_purpose, draft=replace(dialogue.draft, email=email)),
            replies.ASK_PURPOSE,
        )

    def _process_purpose(self, state: SessionState, text: str) -> TurnResult:
        if not text:
            return self._stay(state, replies.ASK_PURPOSE_AGAIN)
        dialogue = state.dialogue
        return self._advance(
            state,
            replace(dialogue, step=Step.need_duration, draft=replace(dialogue.draft, purpose=text)),
            replies.ASK_DURATION,
        )

    def _process_duration(self, state: SessionState, text: str) -> TurnResult:
        duration = parse_duration_minutes(text)
        if not duration:
            return self._stay(state, replies.ASK_DURATION_AGAIN)
        dialogue = state.dialogue
        return self._advance(
            state,
            replace(dialogue, step=Step.need_date, draft=replace(dialogue.draft, duration_minutes=duration)),
            replies.ASK_DATE,
        )

    def _process_date(self, state: SessionState, text: str) -> TurnResult:
        preferred_date = parse_preferred_date(text, self._clock().date())
        if not preferred_date:
            return self._stay(state, replies.ASK_DATE_AGAIN)
        dialogue = state.dialogue
        return self._advance(
            state,
            replace(dialogue, step=Step.need_time, draft=replace(dialogue.draft, preferred_date=preferred_date)),
            replies.ASK_TIME,
        )

    def _process_time(self, state: SessionState, text: str) -> TurnResult:
        preferred_time = parse_preferred_time(text)
        if not preferred_time:
            return self._stay(state, replies.ASK_TIME_AGAIN)
        dialogue = state.dialogue
        return self._advance(
            state,
            replace(dialogue, step=Step.need_timezone, draft=replace(dialogue.draft, preferred_time=preferred_time)),
            replies.ASK_TIMEZONE,
        )

    def _process_timezone(self, state: SessionState, text: str) -> TurnResult:
        if not text:
            return self._stay(state, replies.ASK_TIMEZONE_AGAIN)

        dialogue = state.dialogue
        draft = replace(dialogue.draft, timezone=text)

        if not draft.preferred_date or not draft.preferred_time:
            self._logger.warning(
                "Draft incomplete at timezone step, asking for date again",
                extra={"session_id": state.session_id, "reason": "missing_date_or_time"},
            )
            return self._advance(
                state,
                replace(dialogue, step=Step.need_date, draft=draft, suggested_slots=()),
                replies.ASK_DATE,
            )

        requested = Slot(date=draft.preferred_date, time=draft.preferred_time)
        requested_summary = format_slot_human_readable(requested, draft.timezone)

        if is_slot_available(state.availability, requested, state.ledger):
            return self._advance(
                state,
                replace(dialogue, step=Step.confirming, draft=draft, pending_slot=requested, suggested_slots=()),
                replies.build_recap(draft, requested_summary),
            )

        alternatives = find_alternatives(
            state.availability,
            requested.date,
            state.ledger,
            limit=self._alternative_limit,
        )
        self._logger.info(
            "Requested slot unavailable",
            extra={
                "session_id": state.session_id,
                "slot": f"{requested.date} {requested.time}",
                "reason": f"alternatives={len(alternatives)}",
            },
        )

        if not alternatives:
            return self._advance(
                state,
                replace(
                    dialogue,
                    step=Step.need_date,
                    draft=replace(draft, preferred_date=None, preferred_time=None),
                    suggested_slots=(),
                ),
                replies.NOTHING_OPEN,
            )

        return self._advance(
            state,
            replace(
                dialogue,
                step=Step.need_time,
                draft=replace(draft, preferred_time=None),
                suggested_slots=tuple(alternatives),
            ),
            replies.build_alternatives(requested_summary, format_slot_list(alternatives, draft.timezone)),
        )

    def _process_confirmation(self, state: SessionState, text: str) -> TurnResult:
        dialogue = state.dialogue

        if AFFIRMATIVE_PATTERN.search(text):
            if dialogue.pending_slot is None:
                self._logger.warning(
                    "Confirmation without a pending slot",
                    extra={"session_id": state.session_id, "reason": "missing_pending_slot"},
                )
                return self._advance(state, replace(dialogue, step=Step.need_date), replies.LOST_PENDING_SLOT)
            return self._book(state)

        if CHANGE_PATTERN.search(text):
            return self._advance(
                state,
                replace(
                    dialogue,
                    step=Step.need_date,
                    draft=replace(dialogue.draft, preferred_date=None, preferred_time=None),
                    pending_slot=None,
                ),
                replies.ASK_DIFFERENT_DATE,
            )

        return self._stay(state, replies.ASK_CONFIRMATION_AGAIN)

    def _book(self, state: SessionState) -> TurnResult:
        dialogue = state.dialogue
        draft = dialogue.draft
        slot = dialogue.pending_slot
        summary = format_slot_human_readable(slot, draft.timezone)
        appointment = ConfirmedAppointment(
            name=draft.name,
            email=draft.email,
            purpose=draft.purpose,
            duration_minutes=draft.duration_minutes,
            timezone=draft.timezone,
            slot=slot,
            summary=summary,
            confirmation_time=int(self._clock().timestamp() * 1000),
        )
        self._logger.info(
            "Appointment booked",
            extra={"session_id": state.session_id, "slot": f"{slot.date} {slot.time}"},
        )
        updated = replace(
            state,
            ledger=state.ledger.append(appointment),
            dialogue=DialogueState(step=Step.confirmed),
        )
        return TurnResult(
            updated_state=updated,
            replies=[replies.build_booked(summary, draft.name, draft.email), replies.OFFER_FURTHER_HELP],
            booked=appointment,
        )

    def _start_next_booking(self, state: SessionState) -> TurnResult:
        return self._advance(
            state,
            replace(state.dialogue, step=Step.need_name, draft=AppointmentDraft()),
            replies.START_NEXT_BOOKING,
        )

    def _stay(self, state: SessionState, reply: str) -> TurnResult:
        return TurnResult(updated_state=state, replies=[reply])

    def _advance(self, state: SessionState, dialogue: DialogueState, reply: str) -> TurnResult:
        return TurnResult(updated_state=replace(state, dialogue=dialogue), replies=[reply])


def _step_value(step: Step | str) -> str:
    return step.value if isinstance(step, Step) else str(step)

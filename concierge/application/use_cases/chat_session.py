from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable

from concierge.application.exceptions import EmptyTurnError, SessionNotFoundError
from concierge.application.ports.calendar import CalendarPort
from concierge.application.ports.session_store import SessionStorePort
from concierge.application.use_cases.dialogue import DialogueUseCase
from concierge.application.utils.greeting import build_greeting
from concierge.domain.entities.appointment import ConfirmedAppointment
from concierge.domain.entities.message import Message
from concierge.domain.entities.session_state import SessionState


@dataclass(frozen=True)
class TurnOutcome:
    state: SessionState
    replies: list[Message]
    booked: ConfirmedAppointment | None = None


class ChatSessionUseCase:
    """Hosts dialogue sessions: bootstraps them, records messages, and runs one turn at a time."""

    def __init__(
        self,
        store: SessionStorePort,
        calendar: CalendarPort,
        dialogue: DialogueUseCase,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._calendar = calendar
        self._dialogue = dialogue
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def start_session(self, session_id: str | None = None) -> SessionState:
        session_id = session_id or uuid.uuid4().hex
        now = self._clock()
        state = SessionState(
            session_id=session_id,
            availability=self._calendar.generate(now.date()),
            messages=(self._message("assistant", build_greeting()),),
            created_at=now.timestamp(),
            updated_at=now.timestamp(),
        )
        self._store.put(state)
        self._logger.info("Session started", extra={"session_id": session_id})
        return state

    def get_session(self, session_id: str) -> SessionState:
        state = self._store.get(session_id)
        if state is None:
            raise SessionNotFoundError(session_id)
        return state

    def handle_turn(self, session_id: str, text: str) -> TurnOutcome:
        trimmed = text.strip()
        if not trimmed:
            raise EmptyTurnError("Turn text must not be empty.")

        self.get_session(session_id)
        with self._store.session_lock(session_id):
            # The session may have ended while this turn waited for the lock.
            state = self.get_session(session_id)
            user_message = self._message("user", trimmed)
            result = self._dialogue.process_turn(state, trimmed)
            reply_messages = [self._message("assistant", reply) for reply in result.replies]

            updated = replace(
                result.updated_state,
                messages=state.messages + (user_message, *reply_messages),
                updated_at=self._clock().timestamp(),
            )
            self._store.put(updated)

        return TurnOutcome(state=updated, replies=reply_messages, booked=result.booked)

    def end_session(self, session_id: str) -> None:
        self.get_session(session_id)
        with self._store.session_lock(session_id):
            if not self._store.delete(session_id):
                raise SessionNotFoundError(session_id)
        self._logger.info("Session ended", extra={"session_id": session_id})

    def _message(self, sender: str, text: str) -> Message:
        return Message(
            id=str(uuid.uuid4()),
            sender=sender,
            text=text,
            timestamp=int(self._clock().timestamp() * 1000),
        )

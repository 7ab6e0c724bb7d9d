"""
Shared fixtures. All tests run against a fixed clock: Monday 2026-10-19, 10:00.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from concierge.application.use_cases.chat_session import ChatSessionUseCase
from concierge.application.use_cases.dialogue import DialogueUseCase
from concierge.domain.entities.appointment import ConfirmedAppointment
from concierge.domain.entities.session_state import SessionState
from concierge.domain.entities.slot import Slot
from concierge.infrastructure.calendar.business_day_calendar import BusinessDayCalendar
from concierge.infrastructure.store.memory_store import MemorySessionStore

FIXED_NOW = datetime(2026, 10, 19, 10, 0)


def fixed_clock() -> datetime:
    return FIXED_NOW


def _make_appointment(date: str, time: str, confirmation_time: int = 0, email: str = "a@example.com"):
    return ConfirmedAppointment(
        name="Someone Else",
        email=email,
        purpose="Sync",
        duration_minutes=30,
        timezone="UTC",
        slot=Slot(date=date, time=time),
        summary=f"{date} at {time}",
        confirmation_time=confirmation_time,
    )


@pytest.fixture
def calendar() -> BusinessDayCalendar:
    return BusinessDayCalendar()


@pytest.fixture
def availability(calendar):
    return calendar.generate(FIXED_NOW.date())


@pytest.fixture
def session_state(availability) -> SessionState:
    return SessionState(session_id="test-session", availability=availability)


@pytest.fixture
def dialogue() -> DialogueUseCase:
    return DialogueUseCase(clock=fixed_clock)


@pytest.fixture
def store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def chat_use_case(store, calendar, dialogue) -> ChatSessionUseCase:
    return ChatSessionUseCase(store=store, calendar=calendar, dialogue=dialogue, clock=fixed_clock)


@pytest.fixture
def make_appointment():
    return _make_appointment


@pytest.fixture
def booking_turns() -> list[str]:
    return [
        "jane doe",
        "reach me at JANE@Example.com please",
        "Quarterly planning",
        "45 minutes",
        "October 26",
        "9am",
        "EST",
        "yes",
    ]

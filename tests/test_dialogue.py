"""
Tests for the booking dialogue state machine.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from concierge.application.utils import replies
from concierge.domain.entities.appointment import AppointmentDraft
from concierge.domain.entities.dialogue_state import DialogueState, Step
from concierge.domain.entities.slot import Slot

FULL_DRAFT = AppointmentDraft(
    name="Jane Doe",
    email="jane@example.com",
    purpose="Quarterly planning",
    duration_minutes=45,
    preferred_date="2026-10-26",
    preferred_time="09:00",
    timezone="EST",
)


def run_turns(dialogue, state, *texts):
    result = None
    for text in texts:
        result = dialogue.process_turn(state, text)
        state = result.updated_state
    return result


def at_step(state, step, draft=AppointmentDraft(), **fields):
    return replace(state, dialogue=DialogueState(step=step, draft=draft, **fields))


def test_end_to_end_booking(dialogue, session_state):
    """Jane books Monday 09:00 and the next turn starts a fresh booking."""
    result = dialogue.process_turn(session_state, "jane doe")
    assert result.step == Step.need_email
    assert result.updated_state.dialogue.draft.name == "Jane Doe"
    assert result.replies == ["Wonderful, Jane. What's the best email address for your confirmation?"]

    result = dialogue.process_turn(result.updated_state, "reach me at JANE@Example.com please")
    assert result.step == Step.need_purpose
    assert result.updated_state.dialogue.draft.email == "jane@example.com"

    result = run_turns(dialogue, result.updated_state, "Quarterly planning", "45 minutes", "October 26", "9am")
    assert result.step == Step.need_timezone
    draft = result.updated_state.dialogue.draft
    assert draft.purpose == "Quarterly planning"
    assert draft.duration_minutes == 45
    assert draft.preferred_date == "2026-10-26"
    assert draft.preferred_time == "09:00"

    result = dialogue.process_turn(result.updated_state, "EST")
    assert result.step == Step.confirming
    assert result.updated_state.dialogue.pending_slot == Slot("2026-10-26", "09:00")
    assert "• Preferred time: Monday, October 26 at 9:00 AM (EST)" in result.replies[0]
    assert "• Duration: 45 minutes" in result.replies[0]

    result = dialogue.process_turn(result.updated_state, "yes")
    assert result.step == Step.confirmed
    ledger = result.updated_state.ledger
    assert len(ledger) == 1
    booked = ledger.appointments[0]
    assert booked.slot == Slot("2026-10-26", "09:00")
    assert booked.summary == "Monday, October 26 at 9:00 AM (EST)"
    assert booked.identity == ("2026-10-26", "09:00", "jane@example.com")
    assert result.booked == booked
    assert len(result.replies) == 2
    assert "Jane Doe" in result.replies[0]
    assert "jane@example.com" in result.replies[0]
    assert result.updated_state.dialogue == DialogueState(step=Step.confirmed)

    result = dialogue.process_turn(result.updated_state, "thanks!")
    assert result.step == Step.need_name
    assert result.updated_state.dialogue.draft == AppointmentDraft()
    assert result.replies == [replies.START_NEXT_BOOKING]
    assert len(result.updated_state.ledger) == 1


@pytest.mark.parametrize(
    "step,draft,text",
    [
        (Step.need_name, AppointmentDraft(), "J"),
        (Step.need_email, AppointmentDraft(name="Jane Doe"), "not an email"),
        (Step.need_duration, replace(FULL_DRAFT, duration_minutes=None, preferred_date=None), "a while"),
        (Step.need_date, replace(FULL_DRAFT, preferred_date=None, preferred_time=None), "whenever"),
        (Step.need_date, replace(FULL_DRAFT, preferred_date=None, preferred_time=None), "2026-10-16"),
        (Step.need_time, replace(FULL_DRAFT, preferred_time=None, timezone=None), "whenever"),
        (Step.need_time, replace(FULL_DRAFT, preferred_time=None, timezone=None), "25:00"),
    ],
)
def test_parse_miss_keeps_step(dialogue, session_state, step, draft, text):
    state = at_step(session_state, step, draft)
    result = dialogue.process_turn(state, text)
    assert result.step == step
    assert len(result.replies) == 1
    assert result.updated_state == state


def test_unrecognized_confirmation_keeps_step(dialogue, session_state):
    state = at_step(session_state, Step.confirming, FULL_DRAFT, pending_slot=Slot("2026-10-26", "09:00"))
    result = dialogue.process_turn(state, "hmm")
    assert result.step == Step.confirming
    assert result.replies == [replies.ASK_CONFIRMATION_AGAIN]
    assert len(result.updated_state.ledger) == 0


@pytest.mark.parametrize("text", ["Y", "sounds good", "That works for me", "Locked in!", "confirm please"])
def test_affirmative_variants_book(dialogue, session_state, text):
    state = at_step(session_state, Step.confirming, FULL_DRAFT, pending_slot=Slot("2026-10-26", "09:00"))
    result = dialogue.process_turn(state, text)
    assert result.step == Step.confirmed
    assert len(result.updated_state.ledger) == 1


def test_purpose_is_stored_verbatim(dialogue, session_state):
    state = at_step(session_state, Step.need_purpose, AppointmentDraft(name="Jane Doe", email="jane@example.com"))
    result = dialogue.process_turn(state, "Discuss the Q4 roadmap!")
    assert result.step == Step.need_duration
    assert result.updated_state.dialogue.draft.purpose == "Discuss the Q4 roadmap!"


def test_bare_number_duration_means_hours(dialogue, session_state):
    state = at_step(session_state, Step.need_duration, replace(FULL_DRAFT, duration_minutes=None, preferred_date=None))
    result = dialogue.process_turn(state, "2")
    assert result.step == Step.need_date
    assert result.updated_state.dialogue.draft.duration_minutes == 120


def test_unavailable_time_offers_same_day_alternatives(dialogue, session_state):
    state = at_step(session_state, Step.need_timezone, replace(FULL_DRAFT, preferred_time="10:00", timezone=None))
    result = dialogue.process_turn(state, "EST")
    assert result.step == Step.need_time
    dialogue_state = result.updated_state.dialogue
    assert dialogue_state.draft.preferred_date == "2026-10-26"
    assert dialogue_state.draft.preferred_time is None
    assert dialogue_state.draft.timezone == "EST"
    assert dialogue_state.pending_slot is None
    assert dialogue_state.suggested_slots == (
        Slot("2026-10-26", "09:00"),
        Slot("2026-10-26", "11:30"),
        Slot("2026-10-26", "14:00"),
    )
    text = result.replies[0]
    assert text.startswith("The Monday, October 26 at 10:00 AM (EST) slot isn't open.")
    assert "1. Monday, October 26 at 9:00 AM (EST)" in text
    assert "3. Monday, October 26 at 2:00 PM (EST)" in text


def test_weekend_request_offers_next_business_day(dialogue, session_state):
    state = at_step(
        session_state,
        Step.need_timezone,
        replace(FULL_DRAFT, preferred_date="2026-10-24", timezone=None),
    )
    result = dialogue.process_turn(state, "UTC")
    assert result.step == Step.need_time
    assert [slot.date for slot in result.updated_state.dialogue.suggested_slots] == ["2026-10-26"] * 3


def test_no_alternatives_returns_to_date(dialogue, session_state):
    state = at_step(
        session_state,
        Step.need_timezone,
        replace(FULL_DRAFT, preferred_date="2026-12-14", timezone=None),
    )
    result = dialogue.process_turn(state, "PST")
    assert result.step == Step.need_date
    draft = result.updated_state.dialogue.draft
    assert draft.preferred_date is None
    assert draft.preferred_time is None
    assert result.updated_state.dialogue.suggested_slots == ()
    assert result.replies == [replies.NOTHING_OPEN]


def test_timezone_with_incomplete_draft_rewinds_to_date(dialogue, session_state):
    state = at_step(
        session_state,
        Step.need_timezone,
        replace(FULL_DRAFT, preferred_time=None, timezone=None),
        suggested_slots=(Slot("2026-10-26", "09:00"),),
    )
    result = dialogue.process_turn(state, "CET")
    assert result.step == Step.need_date
    assert result.updated_state.dialogue.suggested_slots == ()
    assert result.replies == [replies.ASK_DATE]


def test_change_request_clears_slot(dialogue, session_state):
    state = at_step(session_state, Step.confirming, FULL_DRAFT, pending_slot=Slot("2026-10-26", "09:00"))
    result = dialogue.process_turn(state, "Actually, can we change it?")
    assert result.step == Step.need_date
    dialogue_state = result.updated_state.dialogue
    assert dialogue_state.pending_slot is None
    assert dialogue_state.draft.preferred_date is None
    assert dialogue_state.draft.preferred_time is None
    assert dialogue_state.draft.name == "Jane Doe"
    assert result.replies == [replies.ASK_DIFFERENT_DATE]


def test_affirmative_without_pending_slot_rewinds(dialogue, session_state):
    state = at_step(session_state, Step.confirming, FULL_DRAFT)
    result = dialogue.process_turn(state, "yes")
    assert result.step == Step.need_date
    assert len(result.updated_state.ledger) == 0
    assert result.replies == [replies.LOST_PENDING_SLOT]


def test_unknown_step_restarts_at_name(dialogue, session_state):
    state = replace(session_state, dialogue=DialogueState(step="bogus", draft=FULL_DRAFT))
    result = dialogue.process_turn(state, "hello")
    assert result.step == Step.need_name
    assert result.replies == [replies.REALIGN_ON_NAME]


def test_double_booking_is_prevented(dialogue, session_state):
    """A second booking attempt for a confirmed slot is offered the remaining times."""
    first = at_step(session_state, Step.confirming, FULL_DRAFT, pending_slot=Slot("2026-10-26", "09:00"))
    booked_state = dialogue.process_turn(first, "yes").updated_state

    second = replace(
        booked_state,
        dialogue=DialogueState(
            step=Step.need_timezone,
            draft=replace(FULL_DRAFT, name="John Roe", email="john@example.com", timezone=None),
        ),
    )
    result = dialogue.process_turn(second, "EST")
    assert result.step == Step.need_time
    suggested = result.updated_state.dialogue.suggested_slots
    assert Slot("2026-10-26", "09:00") not in suggested
    assert suggested == (
        Slot("2026-10-26", "11:30"),
        Slot("2026-10-26", "14:00"),
        Slot("2026-10-26", "16:00"),
    )


def test_available_slot_always_confirmable(dialogue, session_state):
    for day in session_state.availability.dates()[:5]:
        for t in session_state.availability.times_for(day):
            state = at_step(
                session_state,
                Step.need_timezone,
                replace(FULL_DRAFT, preferred_date=day, preferred_time=t, timezone=None),
            )
            result = dialogue.process_turn(state, "UTC")
            assert result.step == Step.confirming
            assert result.updated_state.dialogue.pending_slot == Slot(day, t)


def test_input_state_is_not_modified(dialogue, session_state):
    before = session_state
    dialogue.process_turn(session_state, "jane doe")
    assert session_state == before
    assert session_state.dialogue.step == Step.need_name

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Response

from concierge.api.v1.schemas import (
    AppointmentDraftSchema,
    ConfirmedAppointmentSchema,
    MessageSchema,
    SessionSnapshotSchema,
    SlotSchema,
    TurnRequestSchema,
    TurnResponseSchema,
)
from concierge.application.exceptions import EmptyTurnError, SessionNotFoundError
from concierge.application.use_cases.chat_session import ChatSessionUseCase
from concierge.domain.entities.session_state import SessionState
from concierge.wiring.dependencies import get_chat_session_use_case

router = APIRouter()


@router.post("/sessions", response_model=SessionSnapshotSchema, status_code=201)
def create_session(uc: ChatSessionUseCase = Depends(get_chat_session_use_case)):
    return _snapshot(uc.start_session())


@router.get("/sessions/{session_id}", response_model=SessionSnapshotSchema)
def get_session(session_id: str, uc: ChatSessionUseCase = Depends(get_chat_session_use_case)):
    try:
        state = uc.get_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _snapshot(state)


@router.post("/sessions/{session_id}/messages", response_model=TurnResponseSchema)
def post_message(
    session_id: str,
    req: TurnRequestSchema,
    uc: ChatSessionUseCase = Depends(get_chat_session_use_case),
):
    try:
        outcome = uc.handle_turn(session_id, req.text)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except EmptyTurnError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return TurnResponseSchema(
        replies=[MessageSchema(**asdict(m)) for m in outcome.replies],
        session=_snapshot(outcome.state),
    )


@router.get("/sessions/{session_id}/appointments", response_model=list[ConfirmedAppointmentSchema])
def list_appointments(session_id: str, uc: ChatSessionUseCase = Depends(get_chat_session_use_case)):
    try:
        state = uc.get_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [ConfirmedAppointmentSchema(**asdict(a)) for a in state.ledger.by_confirmation_time()]


@router.delete("/sessions/{session_id}", status_code=204)
def delete_session(session_id: str, uc: ChatSessionUseCase = Depends(get_chat_session_use_case)):
    try:
        uc.end_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)


def _snapshot(state: SessionState) -> SessionSnapshotSchema:
    dialogue = state.dialogue
    return SessionSnapshotSchema(
        session_id=state.session_id,
        step=dialogue.step.value,
        draft=AppointmentDraftSchema(**asdict(dialogue.draft)),
        pending_slot=SlotSchema(**asdict(dialogue.pending_slot)) if dialogue.pending_slot else None,
        suggested_slots=[SlotSchema(**asdict(s)) for s in dialogue.suggested_slots],
        messages=[MessageSchema(**asdict(m)) for m in state.messages],
        booked_appointments=[ConfirmedAppointmentSchema(**asdict(a)) for a in state.ledger.by_confirmation_time()],
    )

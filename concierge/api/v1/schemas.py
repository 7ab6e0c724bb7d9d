from pydantic import BaseModel, ConfigDict, Field


class TurnRequestSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(min_length=1, max_length=2000)


class MessageSchema(BaseModel):
    id: str
    sender: str
    text: str
    timestamp: int


class SlotSchema(BaseModel):
    date: str
    time: str


class AppointmentDraftSchema(BaseModel):
    name: str | None = None
    email: str | None = None
    purpose: str | None = None
    duration_minutes: int | None = None
    preferred_date: str | None = None
    preferred_time: str | None = None
    timezone: str | None = None


class ConfirmedAppointmentSchema(BaseModel):
    name: str | None = None
    email: str | None = None
    purpose: str | None = None
    duration_minutes: int | None = None
    timezone: str | None = None
    slot: SlotSchema
    summary: str
    confirmation_time: int


class SessionSnapshotSchema(BaseModel):
    session_id: str
    step: str
    draft: AppointmentDraftSchema
    pending_slot: SlotSchema | None = None
    suggested_slots: list[SlotSchema] = Field(default_factory=list)
    messages: list[MessageSchema] = Field(default_factory=list)
    booked_appointments: list[ConfirmedAppointmentSchema] = Field(default_factory=list)


class TurnResponseSchema(BaseModel):
    replies: list[MessageSchema]
    session: SessionSnapshotSchema

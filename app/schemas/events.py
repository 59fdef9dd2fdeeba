from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, field_validator

from app.models.common import as_utc
from app.schemas.common import CreateRequest, RecordOut, RequiredStr


class EventCreateRequest(CreateRequest):
    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'adminId', 'title', 'description', 'dateTime', 'location', "
        "and 'organizerId' are provided and are of the correct types."
    )

    admin_id: RequiredStr
    title: RequiredStr
    description: RequiredStr
    date_time: datetime
    location: RequiredStr
    organizer_id: RequiredStr

    @field_validator("date_time")
    @classmethod
    def normalize_date_time(cls, value: datetime) -> datetime:
        return as_utc(value)


class EventOut(RecordOut):
    admin_id: str
    title: str
    description: str
    date_time: datetime
    location: str
    organizer_id: str
    created_at: datetime


class EventResponse(BaseModel):
    message: str
    event: EventOut


class EventListResponse(BaseModel):
    message: str
    events: list[EventOut]

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel

from app.schemas.common import CreateRequest, RecordOut, RequiredStr


class RegistrationCreateRequest(CreateRequest):
    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'eventId', 'volunteerId', and 'status' are provided and are of the correct types."
    )

    event_id: RequiredStr
    volunteer_id: RequiredStr
    status: RequiredStr  # "Registered", "Attended" or "Missed" by convention


class RegistrationOut(RecordOut):
    event_id: str
    volunteer_id: str
    status: str
    registered_at: datetime
    attended_at: datetime | None


class RegistrationResponse(BaseModel):
    message: str
    registration: RegistrationOut


class RegistrationListResponse(BaseModel):
    message: str
    registrations: list[RegistrationOut]

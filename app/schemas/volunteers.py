from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, StrictStr

from app.schemas.common import CreateRequest, EmailAddress, RecordOut, RequiredStr


class VolunteerCreateRequest(CreateRequest):
    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'name', 'contact', 'email', and 'skills' are provided and are of the correct types."
    )

    name: RequiredStr
    email: EmailAddress
    contact: RequiredStr
    skills: list[StrictStr]


class VolunteerOut(RecordOut):
    name: str
    email: str
    contact: str
    skills: list[str]
    created_at: datetime


class VolunteerResponse(BaseModel):
    message: str
    volunteer: VolunteerOut


class VolunteerListResponse(BaseModel):
    message: str
    volunteers: list[VolunteerOut]

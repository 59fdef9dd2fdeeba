from typing import ClassVar

from pydantic import BaseModel, Field

from app.schemas.common import CreateRequest, EmailAddress, RecordOut, RequiredStr


class AdminCreateRequest(CreateRequest):
    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'name', 'email', and 'password' are provided and are of the correct types."
    )

    name: RequiredStr
    email: EmailAddress
    password: RequiredStr


class AdminOut(RecordOut):
    name: str
    email: str
    # Only the hash is ever stored or returned.
    password: str = Field(validation_alias="password_hash")


class AdminCreateResponse(BaseModel):
    message: str
    admin: AdminOut

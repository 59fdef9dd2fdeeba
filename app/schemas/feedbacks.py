from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel

from app.schemas.common import CreateRequest, Number, RecordOut, RequiredStr


class FeedbackCreateRequest(CreateRequest):
    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'volunteerId', 'eventId', 'feedback', and 'rating' are provided "
        "and are of the correct types."
    )

    volunteer_id: RequiredStr
    event_id: RequiredStr
    feedback: RequiredStr
    rating: Number


class FeedbackOut(RecordOut):
    volunteer_id: str
    event_id: str
    feedback: str
    rating: float
    created_at: datetime


class FeedbackResponse(BaseModel):
    message: str
    feedback: FeedbackOut


class FeedbackListResponse(BaseModel):
    message: str
    feedbacks: list[FeedbackOut]

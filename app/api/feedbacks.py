from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.api.deps import get_feedback_repository
from app.api.errors import ERROR_RESPONSES
from app.api.validation import validate_payload
from app.repositories import FeedbackRepository
from app.schemas.feedbacks import FeedbackCreateRequest, FeedbackListResponse, FeedbackOut, FeedbackResponse

router = APIRouter(prefix="/feedbacks", tags=["feedbacks"], responses=ERROR_RESPONSES)


@router.post("", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
def create_feedback(
    payload: Any = Body(None),
    feedbacks: FeedbackRepository = Depends(get_feedback_repository),
):
    data = validate_payload(FeedbackCreateRequest, payload)
    entry = feedbacks.create(
        volunteer_id=data.volunteer_id,
        event_id=data.event_id,
        feedback=data.feedback,
        rating=data.rating,
    )
    return FeedbackResponse(message="Feedback created successfully", feedback=FeedbackOut.model_validate(entry))


@router.get("", response_model=FeedbackListResponse)
def list_feedbacks(feedbacks: FeedbackRepository = Depends(get_feedback_repository)):
    rows = feedbacks.list_all()
    return FeedbackListResponse(
        message="Feedback retrieved successfully",
        feedbacks=[FeedbackOut.model_validate(row) for row in rows],
    )

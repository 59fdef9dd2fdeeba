from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.api.deps import get_admin_repository, get_event_repository
from app.api.errors import ERROR_RESPONSES
from app.api.validation import validate_payload
from app.core.errors import NotFoundError
from app.repositories import AdminRepository, EventRepository
from app.schemas.events import EventCreateRequest, EventListResponse, EventOut, EventResponse

router = APIRouter(prefix="/events", tags=["events"], responses=ERROR_RESPONSES)


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: Any = Body(None),
    events: EventRepository = Depends(get_event_repository),
    admins: AdminRepository = Depends(get_admin_repository),
):
    data = validate_payload(EventCreateRequest, payload)
    if admins.get_by_id(data.admin_id) is None:
        raise NotFoundError("Admin with the provided ID does not exist.")

    event = events.create(
        admin_id=data.admin_id,
        title=data.title,
        description=data.description,
        date_time=data.date_time,
        location=data.location,
        organizer_id=data.organizer_id,
    )
    return EventResponse(message="Event created successfully", event=EventOut.model_validate(event))


@router.get("", response_model=EventListResponse)
def list_events(events: EventRepository = Depends(get_event_repository)):
    rows = events.list_all()
    return EventListResponse(
        message="Events retrieved successfully",
        events=[EventOut.model_validate(row) for row in rows],
    )

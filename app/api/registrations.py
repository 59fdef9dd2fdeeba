from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.api.deps import get_registration_repository
from app.api.errors import ERROR_RESPONSES
from app.api.validation import validate_payload
from app.repositories import RegistrationRepository
from app.schemas.registrations import (
    RegistrationCreateRequest,
    RegistrationListResponse,
    RegistrationOut,
    RegistrationResponse,
)

router = APIRouter(prefix="/registrations", tags=["registrations"], responses=ERROR_RESPONSES)


@router.post("", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
def create_registration(
    payload: Any = Body(None),
    registrations: RegistrationRepository = Depends(get_registration_repository),
):
    data = validate_payload(RegistrationCreateRequest, payload)
    # Event and volunteer ids are stored as given.
    registration = registrations.create(
        event_id=data.event_id,
        volunteer_id=data.volunteer_id,
        status=data.status,
        attended_at=None,
    )
    return RegistrationResponse(
        message="Registration created successfully",
        registration=RegistrationOut.model_validate(registration),
    )


@router.get("", response_model=RegistrationListResponse)
def list_registrations(registrations: RegistrationRepository = Depends(get_registration_repository)):
    rows = registrations.list_all()
    return RegistrationListResponse(
        message="Registrations retrieved successfully",
        registrations=[RegistrationOut.model_validate(row) for row in rows],
    )

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.api.deps import get_volunteer_repository
from app.api.errors import ERROR_RESPONSES
from app.api.validation import parse_int_param, validate_payload
from app.core.errors import ConflictError, InvalidInputError, NotFoundError
from app.repositories import VolunteerRepository
from app.schemas.volunteers import (
    VolunteerCreateRequest,
    VolunteerListResponse,
    VolunteerOut,
    VolunteerResponse,
)

router = APIRouter(prefix="/volunteers", tags=["volunteers"], responses=ERROR_RESPONSES)


@router.post("", response_model=VolunteerResponse, status_code=status.HTTP_201_CREATED)
def create_volunteer(
    payload: Any = Body(None),
    volunteers: VolunteerRepository = Depends(get_volunteer_repository),
):
    data = validate_payload(VolunteerCreateRequest, payload)
    if volunteers.find_by_email(data.email):
        raise ConflictError("Invalid input: Volunteer with the same email already exists.")

    volunteer = volunteers.create(
        name=data.name,
        email=data.email,
        contact=data.contact,
        skills=list(data.skills),
    )
    return VolunteerResponse(message="Volunteer created successfully", volunteer=VolunteerOut.model_validate(volunteer))


@router.get("/pagination/{start}/{end}", response_model=VolunteerListResponse)
def list_volunteers_page(
    start: str,
    end: str,
    volunteers: VolunteerRepository = Depends(get_volunteer_repository),
):
    start_index = parse_int_param(start)
    end_index = parse_int_param(end)
    if start_index is None or end_index is None:
        raise InvalidInputError("Invalid input: Ensure 'start' and 'end' are integers.")
    if start_index >= end_index:
        raise InvalidInputError("Invalid input: Ensure 'start' is less than 'end'.")

    rows = volunteers.list_page(start_index, end_index)
    return VolunteerListResponse(
        message="Volunteers retrieved successfully",
        volunteers=[VolunteerOut.model_validate(row) for row in rows],
    )


@router.get("/{volunteer_id}", response_model=VolunteerResponse)
def get_volunteer(
    volunteer_id: str,
    volunteers: VolunteerRepository = Depends(get_volunteer_repository),
):
    volunteer = volunteers.get_by_id(volunteer_id)
    if volunteer is None:
        raise NotFoundError("Volunteer with the provided ID does not exist.")
    return VolunteerResponse(message="Volunteer retrieved successfully", volunteer=VolunteerOut.model_validate(volunteer))


@router.get("", response_model=VolunteerListResponse)
def list_volunteers(volunteers: VolunteerRepository = Depends(get_volunteer_repository)):
    rows = volunteers.list_all()
    if not rows:
        raise NotFoundError("No volunteers found.")
    return VolunteerListResponse(
        message="Volunteers retrieved successfully",
        volunteers=[VolunteerOut.model_validate(row) for row in rows],
    )

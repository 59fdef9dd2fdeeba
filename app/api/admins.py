from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.api.deps import get_admin_repository
from app.api.errors import ERROR_RESPONSES
from app.api.validation import validate_payload
from app.core.errors import ConflictError
from app.repositories import AdminRepository
from app.schemas.admins import AdminCreateRequest, AdminCreateResponse, AdminOut

router = APIRouter(prefix="/admins", tags=["admins"], responses=ERROR_RESPONSES)


@router.post("", response_model=AdminCreateResponse, status_code=status.HTTP_201_CREATED)
def create_admin(
    payload: Any = Body(None),
    admins: AdminRepository = Depends(get_admin_repository),
):
    data = validate_payload(AdminCreateRequest, payload)
    if admins.find_by_email(data.email):
        raise ConflictError("Invalid input: Admin with the same email already exists.")

    admin = admins.create_admin(name=data.name, email=data.email, password=data.password)
    return AdminCreateResponse(message="Admin created successfully", admin=AdminOut.model_validate(admin))

from fastapi import APIRouter, Depends

from app.api.deps import (
    get_admin_repository,
    get_event_repository,
    get_feedback_repository,
    get_registration_repository,
    get_volunteer_repository,
)
from app.core.config import get_settings
from app.repositories import (
    AdminRepository,
    EventRepository,
    FeedbackRepository,
    RegistrationRepository,
    VolunteerRepository,
)

router = APIRouter(tags=["system"])


@router.get("/health")
def health():
    settings = get_settings()
    return {"status": "ok", "version": settings.app_version}


@router.get("/system/info")
def system_info(
    admins: AdminRepository = Depends(get_admin_repository),
    volunteers: VolunteerRepository = Depends(get_volunteer_repository),
    events: EventRepository = Depends(get_event_repository),
    registrations: RegistrationRepository = Depends(get_registration_repository),
    feedbacks: FeedbackRepository = Depends(get_feedback_repository),
):
    settings = get_settings()
    return {
        "app_name": settings.app_name,
        "app_env": settings.app_env,
        "app_version": settings.app_version,
        "records": {
            "admins": admins.count(),
            "volunteers": volunteers.count(),
            "events": events.count(),
            "registrations": registrations.count(),
            "feedbacks": feedbacks.count(),
        },
    }

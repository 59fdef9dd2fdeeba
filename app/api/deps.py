from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.repositories import (
    AdminRepository,
    EventRepository,
    FeedbackRepository,
    RegistrationRepository,
    VolunteerRepository,
)


def get_admin_repository(db: Session = Depends(get_db)) -> AdminRepository:
    return AdminRepository(db)


def get_volunteer_repository(db: Session = Depends(get_db)) -> VolunteerRepository:
    return VolunteerRepository(db)


def get_event_repository(db: Session = Depends(get_db)) -> EventRepository:
    return EventRepository(db)


def get_registration_repository(db: Session = Depends(get_db)) -> RegistrationRepository:
    return RegistrationRepository(db)


def get_feedback_repository(db: Session = Depends(get_db)) -> FeedbackRepository:
    return FeedbackRepository(db)

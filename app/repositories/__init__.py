from app.repositories.admins import AdminRepository
from app.repositories.events import EventRepository
from app.repositories.feedbacks import FeedbackRepository
from app.repositories.registrations import RegistrationRepository
from app.repositories.volunteers import VolunteerRepository

__all__ = [
    "AdminRepository",
    "VolunteerRepository",
    "EventRepository",
    "RegistrationRepository",
    "FeedbackRepository",
]

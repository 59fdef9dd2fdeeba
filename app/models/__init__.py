from app.models.admin import Admin
from app.models.event import Event
from app.models.feedback import Feedback
from app.models.registration import Registration
from app.models.volunteer import Volunteer

__all__ = [
    "Admin",
    "Volunteer",
    "Event",
    "Registration",
    "Feedback",
]

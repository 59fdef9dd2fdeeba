from app.models.registration import Registration
from app.repositories.base import Repository


class RegistrationRepository(Repository[Registration]):
    model = Registration
    entity_name = "registration"
    entity_plural = "registrations"

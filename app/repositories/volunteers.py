from app.models.volunteer import Volunteer
from app.repositories.base import EmailLookupMixin, Repository


class VolunteerRepository(EmailLookupMixin, Repository[Volunteer]):
    model = Volunteer
    entity_name = "volunteer"
    entity_plural = "volunteers"

    def list_page(self, start: int, end: int) -> list[Volunteer]:
        """Return the half-open slice ``[start, end)`` of :meth:`list_all`.

        Indices outside the listing are clamped the way list slicing does.
        """
        if start >= end:
            raise ValueError("start must be less than end")
        return self.list_all()[start:end]

from app.models.feedback import Feedback
from app.repositories.base import Repository


class FeedbackRepository(Repository[Feedback]):
    model = Feedback
    entity_name = "feedback"
    entity_plural = "feedback"

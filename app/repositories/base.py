import logging
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StorageError
from app.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Typed access to one entity table.

    Records are keyed by their string ``id`` and enumerated in insertion
    order. Absence is reported as ``None``; anything the database raises is
    turned into :class:`StorageError`.
    """

    model: ClassVar[type[Any]]
    entity_name: ClassVar[str]
    entity_plural: ClassVar[str]

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, **fields: Any) -> ModelT:
        record = self.model(**fields)
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"creating the {self.entity_name}") from exc
        logger.info("Created %s %s", self.entity_name, record.id)
        return record

    def get_by_id(self, record_id: str) -> ModelT | None:
        try:
            return self.db.scalar(select(self.model).where(self.model.id == record_id))
        except SQLAlchemyError as exc:
            raise StorageError(f"retrieving the {self.entity_name}") from exc

    def list_all(self) -> list[ModelT]:
        try:
            return list(self.db.scalars(select(self.model).order_by(self.model.seq)).all())
        except SQLAlchemyError as exc:
            raise StorageError(f"retrieving {self.entity_plural}") from exc

    def count(self) -> int:
        try:
            return self.db.scalar(select(func.count()).select_from(self.model)) or 0
        except SQLAlchemyError as exc:
            raise StorageError(f"counting {self.entity_plural}") from exc


class EmailLookupMixin:
    def find_by_email(self, email: str) -> Any | None:
        # Linear scan over the full listing.
        return next((record for record in self.list_all() if record.email == email), None)

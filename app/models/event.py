from datetime import datetime

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import CreatedAtMixin, RecordKeyMixin, UTCDateTime


class Event(RecordKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "events"

    admin_id: Mapped[str] = mapped_column(String(36), ForeignKey("admins.id", ondelete="RESTRICT"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    date_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    # Free reference, not checked against any table.
    organizer_id: Mapped[str] = mapped_column(String(255), nullable=False)

    admin = relationship("Admin", back_populates="events")

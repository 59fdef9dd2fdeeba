from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.common import RecordKeyMixin, UTCDateTime, utcnow


class Registration(RecordKeyMixin, Base):
    __tablename__ = "registrations"

    event_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    volunteer_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(64), nullable=False)  # Registered | Attended | Missed, not enforced
    registered_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    attended_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

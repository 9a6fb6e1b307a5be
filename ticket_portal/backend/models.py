# ticket_portal/backend/models.py
from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ticket_portal.backend.database import Base
from ticket_portal.ticket.schemas import Priority, Status


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TicketRecord(Base):
    __tablename__ = "tickets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    priority: Mapped[str] = mapped_column(String(16), default=Priority.MEDIUM.value, nullable=False)
    status: Mapped[str] = mapped_column(String(16), default=Status.OPEN.value, index=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)

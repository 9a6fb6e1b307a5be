# ticket_portal/backend/services.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from ticket_portal.backend.models import TicketRecord
from ticket_portal.ticket.schemas import TicketCreate, TicketUpdate


def list_tickets(db: Session) -> list[TicketRecord]:
    return list(db.scalars(select(TicketRecord).order_by(TicketRecord.id)))


def get_ticket(db: Session, ticket_id: int) -> TicketRecord | None:
    return db.get(TicketRecord, ticket_id)


def create_ticket(db: Session, payload: TicketCreate) -> TicketRecord:
    record = TicketRecord(**payload.model_dump())
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def update_ticket(db: Session, ticket_id: int, payload: TicketUpdate) -> TicketRecord | None:
    record = get_ticket(db, ticket_id)
    if record is None:
        return None
    for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(record, field, value)
    db.commit()
    db.refresh(record)
    return record


def delete_ticket(db: Session, ticket_id: int) -> bool:
    record = get_ticket(db, ticket_id)
    if record is None:
        return False
    db.delete(record)
    db.commit()
    return True

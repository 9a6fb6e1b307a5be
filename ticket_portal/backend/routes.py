# ticket_portal/backend/routes.py
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ticket_portal.backend import services as ticket_service
from ticket_portal.backend.database import get_db
from ticket_portal.ticket.schemas import Ticket, TicketCreate, TicketUpdate

router = APIRouter(prefix="/api/tickets", tags=["Tickets"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Ticket not found")


@router.post("", response_model=Ticket, status_code=201)
def create(ticket: TicketCreate, db: Session = Depends(get_db)):
    return ticket_service.create_ticket(db, ticket)


@router.get("", response_model=list[Ticket])
def list_all(db: Session = Depends(get_db)):
    return ticket_service.list_tickets(db)


@router.get("/{ticket_id}", response_model=Ticket)
def get(ticket_id: int, db: Session = Depends(get_db)):
    ticket = ticket_service.get_ticket(db, ticket_id)
    if ticket is None:
        raise _not_found()
    return ticket


@router.put("/{ticket_id}", response_model=Ticket)
def update(ticket_id: int, ticket: TicketUpdate, db: Session = Depends(get_db)):
    updated = ticket_service.update_ticket(db, ticket_id, ticket)
    if updated is None:
        raise _not_found()
    return updated


@router.delete("/{ticket_id}", status_code=204)
def delete(ticket_id: int, db: Session = Depends(get_db)):
    if not ticket_service.delete_ticket(db, ticket_id):
        raise _not_found()
    return Response(status_code=204)

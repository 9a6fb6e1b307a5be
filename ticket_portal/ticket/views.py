# ticket_portal/ticket/views.py
import logging
from datetime import datetime

from ticket_portal.ticket.client import TicketClient, TransportError
from ticket_portal.ticket.forms import initial_form_values, validate_ticket_form
from ticket_portal.ticket.schemas import Ticket, TicketCreate

logger = logging.getLogger(__name__)

SUBMIT_ERROR_MESSAGE = "Failed to submit ticket. Please try again."
LOAD_ERROR_MESSAGE = "Failed to load tickets"

PRIORITY_CLASSES = {
    "critical": "priority-critical",
    "high": "priority-high",
    "medium": "priority-medium",
    "low": "priority-low",
}
STATUS_CLASSES = {
    "open": "status-open",
    "in-progress": "status-progress",
    "closed": "status-closed",
}


def priority_class(priority: str | None) -> str:
    return PRIORITY_CLASSES.get((priority or "").lower(), PRIORITY_CLASSES["medium"])


def status_class(status: str | None) -> str:
    return STATUS_CLASSES.get((status or "").lower(), STATUS_CLASSES["open"])


def format_created(value: datetime | str | None) -> str:
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    return value or ""


class TicketFormView:
    def __init__(self, client: TicketClient):
        self.client = client
        self.values = initial_form_values()
        self.is_submitting = False
        self.submit_success = False
        self.submit_error = ""

    def bind(self, **values: str) -> None:
        self.values.update(values)

    def reset(self) -> None:
        self.values = initial_form_values()

    @property
    def invalid_fields(self) -> set[str]:
        return validate_ticket_form(self.values)

    @property
    def valid(self) -> bool:
        return not self.invalid_fields

    async def submit(self) -> Ticket | None:
        # invalid forms never reach the client
        if not self.valid:
            return None

        self.is_submitting = True
        self.submit_error = ""
        self.submit_success = False

        ticket = TicketCreate(**self.values)
        try:
            created = await self.client.create_ticket(ticket)
        except TransportError:
            self.submit_error = SUBMIT_ERROR_MESSAGE
            self.is_submitting = False
            logger.exception("Error submitting ticket")
            return None

        self.submit_success = True
        self.is_submitting = False
        self.reset()
        return created


class TicketListView:
    def __init__(self, client: TicketClient):
        self.client = client
        self.tickets: list[Ticket] = []
        self.loading = False
        self.error = ""
        self._load_seq = 0

    async def on_show(self) -> None:
        await self.load_tickets()

    async def load_tickets(self) -> None:
        # only the latest load may touch state; earlier responses are dropped
        self._load_seq += 1
        seq = self._load_seq

        self.loading = True
        self.error = ""

        try:
            tickets = await self.client.get_all_tickets()
        except TransportError:
            logger.exception("Error loading tickets")
            if seq != self._load_seq:
                logger.debug("Ignoring failure of superseded load #%d", seq)
                return
            self.error = LOAD_ERROR_MESSAGE
            self.loading = False
            return

        if seq != self._load_seq:
            logger.debug("Ignoring response of superseded load #%d", seq)
            return
        self.tickets = tickets
        self.loading = False

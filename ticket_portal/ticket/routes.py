# ticket_portal/ticket/routes.py
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ticket_portal.core.config import Settings, get_settings
from ticket_portal.ticket.client import TicketClient
from ticket_portal.ticket.forms import PRIORITIES
from ticket_portal.ticket.schemas import Priority
from ticket_portal.ticket.views import (
    TicketFormView,
    TicketListView,
    format_created,
    priority_class,
    status_class,
)

router = APIRouter(tags=["Tickets"])

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")
templates.env.globals.update(
    format_created=format_created,
    priority_class=priority_class,
    status_class=status_class,
    priorities=PRIORITIES,
)


def get_ticket_client(settings: Settings = Depends(get_settings)) -> TicketClient:
    return TicketClient(settings.TICKETS_API_URL, timeout=settings.TICKETS_API_TIMEOUT)


@router.get("/", include_in_schema=False)
def index():
    return RedirectResponse(url="/submit")


@router.get("/submit", response_class=HTMLResponse)
def show_form(request: Request, client: TicketClient = Depends(get_ticket_client)):
    view = TicketFormView(client)
    return templates.TemplateResponse(
        request, "ticket_form.html", {"view": view, "show_errors": False}
    )


@router.post("/submit", response_class=HTMLResponse)
async def submit_form(
    request: Request,
    title: str = Form(default=""),
    description: str = Form(default=""),
    priority: str = Form(default=Priority.MEDIUM.value),
    client: TicketClient = Depends(get_ticket_client),
):
    view = TicketFormView(client)
    view.bind(title=title, description=description, priority=priority)
    await view.submit()
    return templates.TemplateResponse(
        request, "ticket_form.html", {"view": view, "show_errors": True}
    )


@router.get("/tickets", response_class=HTMLResponse)
async def list_tickets(request: Request, client: TicketClient = Depends(get_ticket_client)):
    view = TicketListView(client)
    await view.on_show()
    return templates.TemplateResponse(request, "ticket_list.html", {"view": view})

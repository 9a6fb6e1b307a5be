# tests/test_integration.py
import httpx
import pytest

from ticket_portal.backend.main import app as backend_app
from ticket_portal.ticket.client import TicketClient, TransportError
from ticket_portal.ticket.views import TicketFormView, TicketListView


@pytest.fixture
def ticket_client():
    return TicketClient(
        "http://backend.test/api/tickets",
        transport=httpx.ASGITransport(app=backend_app),
    )


@pytest.mark.asyncio
async def test_submitted_ticket_shows_up_in_listing(ticket_client):
    form = TicketFormView(ticket_client)
    form.bind(title="VPN drops", description="Disconnects every ten minutes", priority="Critical")

    created = await form.submit()

    assert form.submit_success is True
    assert created.id is not None
    assert created.status == "Open"
    assert created.created_at is not None

    listing = TicketListView(ticket_client)
    await listing.on_show()

    assert listing.error == ""
    match = [t for t in listing.tickets if t.id == created.id]
    assert len(match) == 1
    assert match[0].priority == "Critical"


@pytest.mark.asyncio
async def test_wrong_path_is_a_transport_error():
    client = TicketClient("http://backend.test/api/nothing", transport=httpx.ASGITransport(app=backend_app))

    with pytest.raises(TransportError) as exc_info:
        await client.get_all_tickets()

    assert exc_info.value.status_code == 404

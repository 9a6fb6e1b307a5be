# ticket_portal/ticket/client.py
import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from ticket_portal.ticket.schemas import Ticket, TicketCreate

logger = logging.getLogger(__name__)

_ticket_list = TypeAdapter(list[Ticket])


class TransportError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


# Each call opens its own AsyncClient; instances only keep connection settings
class TicketClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            headers={"Accept": "application/json"},
        )

    async def _request(self, method: str, **kwargs) -> httpx.Response:
        try:
            async with self._client() as client:
                resp = await client.request(method, self.base_url, **kwargs)
                resp.raise_for_status()
                return resp
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise TransportError(
                f"{method} {self.base_url} returned {status_code}",
                status_code=status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {self.base_url} failed: {exc!r}") from exc

    async def create_ticket(self, ticket: TicketCreate) -> Ticket | None:
        resp = await self._request("POST", json=ticket.model_dump(mode="json"))
        # any 2xx means the ticket exists; the body is informational only
        if not resp.content:
            logger.info("Created ticket (empty %d response)", resp.status_code)
            return None
        try:
            created = Ticket.model_validate(resp.json())
        except ValueError:
            logger.warning("Created ticket but could not decode the %d response body", resp.status_code)
            return None
        logger.info("Created ticket id=%s", created.id)
        return created

    async def get_all_tickets(self) -> list[Ticket]:
        resp = await self._request("GET")
        try:
            return _ticket_list.validate_json(resp.content)
        except ValidationError as exc:
            raise TransportError("Backend returned an unexpected ticket list") from exc

"""Ticket REST resource."""

from collections.abc import Sequence
from typing import Any

import structlog

from bugtracker.models import Ticket, get_ticket_identifier, ticket_from_json, ticket_to_json
from bugtracker.service import EntityService

logger = structlog.get_logger()


class TicketService(EntityService[Ticket]):
    """Service for ``api/tickets``.

    Converts ``dueDate`` between calendar-date strings on the wire and
    ``datetime.date`` values using the service's ``date_format``.
    """

    resource_url = "api/tickets"
    entity_name = "ticket"
    identify = staticmethod(get_ticket_identifier)

    def to_json(self, entity: Ticket, exclude_none: bool = False) -> dict[str, Any]:
        return ticket_to_json(entity, self.date_format, exclude_none)

    def from_json(self, data: dict[str, Any]) -> Ticket:
        return ticket_from_json(data, self.date_format)

    async def query_self(self) -> list[Ticket]:
        """List the tickets assigned to the authenticated user."""
        logger.info("Querying own tickets")
        response = await self._request("GET", f"{self.resource_url}/self")
        return [self.from_json(item) for item in response.json()]

    def add_ticket_to_collection_if_missing(
        self, collection: Sequence[Ticket], *tickets: Ticket | None
    ) -> Sequence[Ticket]:
        return self.add_to_collection_if_missing(collection, *tickets)

"""Async client bundling the entity services of the bug tracker API."""

from typing import Any

import httpx
import structlog

from bugtracker.models import DATE_FORMAT
from bugtracker.services import LabelService, ProjectService, TicketService, UserService

logger = structlog.get_logger()


class BugtrackerClient:
    """Async bug tracker API client.

    Owns one ``httpx.AsyncClient`` shared by all entity services.

    Example:
        async with BugtrackerClient("http://localhost:8080", token="...") as client:
            tickets = await client.tickets.query({"sort": ["dueDate,asc"]})
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        date_format: str = DATE_FORMAT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Server root, API paths are resolved against it
            token: Optional bearer token sent with every request
            timeout: Request timeout in seconds
            date_format: strftime pattern for date fields on the wire
            transport: Custom transport, mainly for tests
        """
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self.base_url = base_url
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + "/",
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

        self.tickets = TicketService(self._http, date_format)
        self.projects = ProjectService(self._http, date_format)
        self.labels = LabelService(self._http, date_format)
        self.users = UserService(self._http, date_format)

        logger.debug("Bugtracker client initialized", base_url=base_url)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._http.aclose()

    async def __aenter__(self) -> "BugtrackerClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

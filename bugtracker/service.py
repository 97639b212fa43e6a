"""Entity service interface for the bug tracker REST API."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

import httpx
import structlog

from bugtracker.collection import add_to_collection_if_missing
from bugtracker.exceptions import NotFound, TransportError
from bugtracker.models import DATE_FORMAT

logger = structlog.get_logger()

E = TypeVar("E")

MERGE_PATCH_CONTENT_TYPE = "application/merge-patch+json"


def create_request_option(criteria: dict[str, Any] | None = None) -> list[tuple[str, Any]]:
    """Build query parameters from request criteria.

    Keys with a None value are dropped. List values (such as several ``sort``
    clauses) become repeated parameters.
    """
    params: list[tuple[str, Any]] = []
    if not criteria:
        return params
    for key, value in criteria.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params.extend((key, item) for item in value)
        elif isinstance(value, bool):
            params.append((key, str(value).lower()))
        else:
            params.append((key, value))
    return params


class EntityService(ABC, Generic[E]):
    """Abstract CRUD service over one REST resource."""

    resource_url: str = ""
    entity_name: str = "entity"
    identify: Callable[[Any], str | None]

    def __init__(self, http: httpx.AsyncClient, date_format: str = DATE_FORMAT) -> None:
        """Initialize the service.

        Args:
            http: HTTP client configured with the API base URL
            date_format: strftime pattern for date fields on the wire
        """
        self.http = http
        self.date_format = date_format

    @abstractmethod
    def to_json(self, entity: E, exclude_none: bool = False) -> dict[str, Any]:
        """Convert an entity to its wire representation."""
        pass

    @abstractmethod
    def from_json(self, data: dict[str, Any]) -> E:
        """Convert a wire representation to an entity."""
        pass

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send a request and map failures to TransportError/NotFound."""
        logger.debug("Sending request", method=method, url=url)
        try:
            response = await self.http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning("Request failed", method=method, url=url, status_code=status_code)
            if status_code == 404:
                raise NotFound(f"{self.entity_name} not found: {url}", status_code=status_code, url=url) from e
            raise TransportError(
                f"{method} {url} failed with status {status_code}", status_code=status_code, url=url
            ) from e
        except httpx.RequestError as e:
            logger.error("Request could not be sent", method=method, url=url, error=str(e))
            raise TransportError(f"{method} {url} failed: {e}", url=url) from e
        logger.debug("Request completed", method=method, url=url, status_code=response.status_code)
        return response

    def _require_identifier(self, entity: E, operation: str) -> str:
        entity_id = self.identify(entity)
        if not entity_id:
            raise ValueError(f"Cannot {operation} a {self.entity_name} without an id")
        return entity_id

    async def find(self, entity_id: str) -> E:
        """Fetch a single entity by id."""
        logger.info("Fetching entity", entity=self.entity_name, entity_id=entity_id)
        response = await self._request("GET", f"{self.resource_url}/{entity_id}")
        return self.from_json(response.json())

    async def create(self, entity: E) -> E:
        """Create an entity and return it with its server-assigned id."""
        logger.info("Creating entity", entity=self.entity_name)
        response = await self._request("POST", self.resource_url, json=self.to_json(entity))
        created = self.from_json(response.json())
        logger.info("Entity created", entity=self.entity_name, entity_id=self.identify(created))
        return created

    async def update(self, entity: E) -> E:
        """Replace an existing entity.

        Raises:
            ValueError: If the entity has no id
        """
        entity_id = self._require_identifier(entity, "update")
        logger.info("Updating entity", entity=self.entity_name, entity_id=entity_id)
        response = await self._request("PUT", f"{self.resource_url}/{entity_id}", json=self.to_json(entity))
        return self.from_json(response.json())

    async def partial_update(self, entity: E) -> E:
        """Send only the fields that are set, as a JSON merge patch.

        Raises:
            ValueError: If the entity has no id
        """
        entity_id = self._require_identifier(entity, "partially update")
        body = self.to_json(entity, exclude_none=True)
        logger.info("Partially updating entity", entity=self.entity_name, entity_id=entity_id, fields=list(body))
        response = await self._request(
            "PATCH",
            f"{self.resource_url}/{entity_id}",
            json=body,
            headers={"Content-Type": MERGE_PATCH_CONTENT_TYPE},
        )
        return self.from_json(response.json())

    async def query(self, criteria: dict[str, Any] | None = None) -> list[E]:
        """List entities, optionally paginated, sorted or filtered.

        Args:
            criteria: Request options such as ``page``, ``size``, ``sort``, ``eagerload``

        Returns:
            Entities in the order returned by the server
        """
        logger.info("Querying entities", entity=self.entity_name, criteria=criteria)
        response = await self._request("GET", self.resource_url, params=create_request_option(criteria))
        entities = [self.from_json(item) for item in response.json()]
        logger.debug("Queried entities", entity=self.entity_name, count=len(entities))
        return entities

    async def delete(self, entity_id: str) -> bool:
        """Delete an entity by id."""
        logger.info("Deleting entity", entity=self.entity_name, entity_id=entity_id)
        response = await self._request("DELETE", f"{self.resource_url}/{entity_id}")
        return response.is_success

    def add_to_collection_if_missing(self, collection: Sequence[E], *candidates: E | None) -> Sequence[E]:
        """Add candidates not yet present (by id) to a collection."""
        return add_to_collection_if_missing(collection, *candidates, identifier=self.identify)

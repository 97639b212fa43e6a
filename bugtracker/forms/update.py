"""Update form controller interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, Generic, TypeVar

import structlog

from bugtracker.forms.form import EditForm
from bugtracker.service import EntityService

logger = structlog.get_logger()

E = TypeVar("E")


class FormState(Enum):
    """Lifecycle of an update form."""

    LOADING = "loading"
    READY = "ready"
    SAVING = "saving"


async def resolve_entity(service: EntityService[E], entity_id: str | None, factory: Callable[[], E]) -> E:
    """Resolve the entity an update form edits.

    Args:
        service: Service used to fetch an existing entity
        entity_id: Id of the entity to edit, or None to create a new one
        factory: Builds a blank entity

    Returns:
        The fetched entity, or a blank one when no id is given
    """
    if entity_id:
        logger.debug("Resolving entity for edit", entity_id=entity_id)
        return await service.find(entity_id)
    logger.debug("Resolving blank entity")
    return factory()


class UpdateController(ABC, Generic[E]):
    """Base class for create/edit forms of one entity type.

    The controller starts in ``LOADING``, becomes ``READY`` once the form is
    bound and the relation options are loaded, and is ``SAVING`` while a
    create or update request is in flight.
    """

    entity_key: str = "entity"
    form_fields: tuple[str, ...] = ("id",)
    identify: Callable[[Any], str | None]

    def __init__(
        self,
        service: EntityService[E],
        route_data: Mapping[str, Any],
        navigate_back: Callable[[], Any] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            service: Service saving the edited entity
            route_data: Resolved data holding the entity under ``entity_key``
            navigate_back: Called after a successful save
        """
        self.service = service
        self.route_data = route_data
        self.navigate_back = navigate_back
        self.edit_form = EditForm(*self.form_fields)
        self.state = FormState.LOADING

    @property
    def is_saving(self) -> bool:
        return self.state is FormState.SAVING

    @abstractmethod
    def update_form(self, entity: E) -> None:
        """Bind an entity's values to the form."""
        pass

    @abstractmethod
    def create_from_form(self) -> E:
        """Build an entity from the form's current values."""
        pass

    async def load_relationships_options(self) -> None:
        """Load the option collections of related entities."""
        return None

    async def init(self) -> None:
        """Bind the routed entity and load relation options."""
        self.state = FormState.LOADING
        entity = self.route_data[self.entity_key]
        logger.debug("Initializing update form", entity=self.entity_key, entity_id=self.identify(entity))
        self.update_form(entity)
        await self.load_relationships_options()
        self.state = FormState.READY

    def previous_state(self) -> None:
        """Leave the form."""
        if self.navigate_back is not None:
            self.navigate_back()

    async def save(self) -> E:
        """Create or update the entity from the form's values.

        On failure or cancellation the form returns to ``READY`` with its
        values untouched, no navigation happens and the error propagates.

        Raises:
            RuntimeError: If a save is already in flight
        """
        if self.is_saving:
            raise RuntimeError(f"A {self.entity_key} save is already in progress")

        self.state = FormState.SAVING
        entity_id = None
        try:
            entity = self.create_from_form()
            entity_id = self.identify(entity)
            if entity_id:
                saved = await self.service.update(entity)
            else:
                saved = await self.service.create(entity)
        except Exception as e:
            logger.warning("Save failed", entity=self.entity_key, entity_id=entity_id, error=str(e))
            raise
        finally:
            self.state = FormState.READY

        logger.info("Save succeeded", entity=self.entity_key, entity_id=self.identify(saved))
        self.previous_state()
        return saved

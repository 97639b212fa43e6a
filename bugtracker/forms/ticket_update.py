"""Ticket create/edit form."""

import asyncio
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import structlog

from bugtracker.forms.update import UpdateController
from bugtracker.models import (
    Label,
    Project,
    Ticket,
    User,
    get_label_identifier,
    get_project_identifier,
    get_ticket_identifier,
    get_user_identifier,
)
from bugtracker.services import LabelService, ProjectService, TicketService, UserService

logger = structlog.get_logger()


class TicketUpdateController(UpdateController[Ticket]):
    """Form controller editing a ticket and its project, assignee and labels.

    The shared collections hold the options offered by each relation selector.
    The ticket's current relations are always merged into them, so the bound
    value stays selectable even when the server's listing does not return it.
    """

    entity_key = "ticket"
    identify = staticmethod(get_ticket_identifier)
    form_fields = ("id", "title", "description", "due_date", "done", "project", "assigned_to", "labels")

    def __init__(
        self,
        ticket_service: TicketService,
        project_service: ProjectService,
        user_service: UserService,
        label_service: LabelService,
        route_data: Mapping[str, Any],
        navigate_back: Callable[[], Any] | None = None,
    ) -> None:
        super().__init__(ticket_service, route_data, navigate_back)
        self.project_service = project_service
        self.user_service = user_service
        self.label_service = label_service

        self.projects_shared_collection: Sequence[Project] = []
        self.users_shared_collection: Sequence[User] = []
        self.labels_shared_collection: Sequence[Label] = []

    def track_project_by_id(self, index: int, item: Project) -> str | None:
        return get_project_identifier(item)

    def track_user_by_id(self, index: int, item: User) -> str | None:
        return get_user_identifier(item)

    def track_label_by_id(self, index: int, item: Label) -> str | None:
        return get_label_identifier(item)

    def get_selected_label(self, option: Label, selected_vals: Sequence[Label] | None = None) -> Label:
        """Return the already selected label matching ``option``, or ``option`` itself.

        Keeps the form bound to the label objects the ticket already holds
        rather than to equal copies from a fresh listing.
        """
        if selected_vals:
            for selected in selected_vals:
                if get_label_identifier(option) == get_label_identifier(selected):
                    return selected
        return option

    def update_form(self, ticket: Ticket) -> None:
        self.edit_form.patch_value(
            id=ticket.id,
            title=ticket.title,
            description=ticket.description,
            due_date=ticket.due_date,
            done=ticket.done,
            project=ticket.project,
            assigned_to=ticket.assigned_to,
            labels=ticket.labels,
        )

        self.projects_shared_collection = self.project_service.add_project_to_collection_if_missing(
            self.projects_shared_collection, ticket.project
        )
        self.users_shared_collection = self.user_service.add_user_to_collection_if_missing(
            self.users_shared_collection, ticket.assigned_to
        )
        self.labels_shared_collection = self.label_service.add_label_to_collection_if_missing(
            self.labels_shared_collection, *(ticket.labels or [])
        )

    async def _load_projects(self) -> None:
        projects = await self.project_service.query()
        self.projects_shared_collection = self.project_service.add_project_to_collection_if_missing(
            projects, self.edit_form.get("project")
        )

    async def _load_users(self) -> None:
        users = await self.user_service.query()
        self.users_shared_collection = self.user_service.add_user_to_collection_if_missing(
            users, self.edit_form.get("assigned_to")
        )

    async def _load_labels(self) -> None:
        labels = await self.label_service.query()
        self.labels_shared_collection = self.label_service.add_label_to_collection_if_missing(
            labels, *(self.edit_form.get("labels") or [])
        )

    async def load_relationships_options(self) -> None:
        await asyncio.gather(self._load_projects(), self._load_users(), self._load_labels())
        logger.debug(
            "Loaded ticket relation options",
            projects=len(self.projects_shared_collection),
            users=len(self.users_shared_collection),
            labels=len(self.labels_shared_collection),
        )

    def create_from_form(self) -> Ticket:
        return Ticket(
            id=self.edit_form.get("id"),
            title=self.edit_form.get("title"),
            description=self.edit_form.get("description"),
            due_date=self.edit_form.get("due_date"),
            done=self.edit_form.get("done"),
            project=self.edit_form.get("project"),
            assigned_to=self.edit_form.get("assigned_to"),
            labels=self.edit_form.get("labels"),
        )

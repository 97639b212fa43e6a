"""Project REST resource."""

from collections.abc import Sequence
from typing import Any

from bugtracker.models import Project, get_project_identifier, project_from_json, project_to_json
from bugtracker.service import EntityService


class ProjectService(EntityService[Project]):
    """Service for ``api/projects``."""

    resource_url = "api/projects"
    entity_name = "project"
    identify = staticmethod(get_project_identifier)

    def to_json(self, entity: Project, exclude_none: bool = False) -> dict[str, Any]:
        return project_to_json(entity, exclude_none)

    def from_json(self, data: dict[str, Any]) -> Project:
        return project_from_json(data)

    def add_project_to_collection_if_missing(
        self, collection: Sequence[Project], *projects: Project | None
    ) -> Sequence[Project]:
        return self.add_to_collection_if_missing(collection, *projects)

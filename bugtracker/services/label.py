"""Label REST resource."""

from collections.abc import Sequence
from typing import Any

from bugtracker.models import Label, get_label_identifier, label_from_json, label_to_json
from bugtracker.service import EntityService


class LabelService(EntityService[Label]):
    """Service for ``api/labels``."""

    resource_url = "api/labels"
    entity_name = "label"
    identify = staticmethod(get_label_identifier)

    def to_json(self, entity: Label, exclude_none: bool = False) -> dict[str, Any]:
        return label_to_json(entity, self.date_format, exclude_none)

    def from_json(self, data: dict[str, Any]) -> Label:
        return label_from_json(data, self.date_format)

    def add_label_to_collection_if_missing(self, collection: Sequence[Label], *labels: Label | None) -> Sequence[Label]:
        return self.add_to_collection_if_missing(collection, *labels)

"""User REST resource."""

from collections.abc import Sequence
from typing import Any

from bugtracker.models import User, get_user_identifier, user_from_json, user_to_json
from bugtracker.service import EntityService


class UserService(EntityService[User]):
    """Service for ``api/users``, the users tickets can be assigned to."""

    resource_url = "api/users"
    entity_name = "user"
    identify = staticmethod(get_user_identifier)

    def to_json(self, entity: User, exclude_none: bool = False) -> dict[str, Any]:
        return user_to_json(entity, exclude_none)

    def from_json(self, data: dict[str, Any]) -> User:
        return user_from_json(data)

    def add_user_to_collection_if_missing(self, collection: Sequence[User], *users: User | None) -> Sequence[User]:
        return self.add_to_collection_if_missing(collection, *users)

"""Merging of related entities into selectable collections."""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

E = TypeVar("E")


def _get_id(entity: Any) -> str | None:
    return entity.id


def add_to_collection_if_missing(
    collection: Sequence[E],
    *candidates: E | None,
    identifier: Callable[[E], str | None] = _get_id,
) -> Sequence[E]:
    """Append candidates whose identifier is not yet in the collection.

    ``None`` candidates are skipped. A candidate without an identifier has not
    been persisted yet and is always appended. When a candidate identifier is
    repeated, only its first occurrence is kept.

    Args:
        collection: Existing collection, free of duplicate identifiers
        *candidates: Entities to add if missing
        identifier: Function returning an entity's identifier

    Returns:
        A new list with the missing candidates appended after the existing
        elements, or ``collection`` itself when nothing was added
    """
    present = [candidate for candidate in candidates if candidate is not None]
    if not present:
        return collection

    known = {identifier(entity) for entity in collection}
    known.discard(None)

    to_add: list[E] = []
    for candidate in present:
        candidate_id = identifier(candidate)
        if candidate_id is None:
            to_add.append(candidate)
        elif candidate_id not in known:
            known.add(candidate_id)
            to_add.append(candidate)

    if not to_add:
        return collection
    return [*collection, *to_add]

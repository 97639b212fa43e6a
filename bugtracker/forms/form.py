"""Minimal form binding for update controllers."""

from typing import Any


class EditForm:
    """Holds the editable field values of one entity.

    Fields are fixed at construction; reading or writing an unknown field
    raises KeyError.
    """

    def __init__(self, *fields: str) -> None:
        self._values: dict[str, Any] = dict.fromkeys(fields)

    def _check(self, name: str) -> None:
        if name not in self._values:
            raise KeyError(f"Unknown form field: {name}")

    def get(self, name: str) -> Any:
        self._check(name)
        return self._values[name]

    def set(self, name: str, value: Any) -> None:
        self._check(name)
        self._values[name] = value

    def patch_value(self, **values: Any) -> None:
        """Set several fields at once."""
        for name in values:
            self._check(name)
        self._values.update(values)

    @property
    def value(self) -> dict[str, Any]:
        return dict(self._values)

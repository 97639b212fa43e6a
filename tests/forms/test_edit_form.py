"""Tests for the edit form binding."""

import pytest

from bugtracker.forms import EditForm


def test_fields_start_empty() -> None:
    """Test that declared fields start as None."""
    form = EditForm("id", "name")
    assert form.value == {"id": None, "name": None}


def test_patch_value() -> None:
    """Test setting several fields."""
    form = EditForm("id", "name")
    form.patch_value(id="P1", name="Backend")
    assert form.get("id") == "P1"
    assert form.get("name") == "Backend"


def test_unknown_field() -> None:
    """Test that unknown fields are rejected."""
    form = EditForm("id")
    with pytest.raises(KeyError):
        form.set("name", "Backend")
    with pytest.raises(KeyError):
        form.patch_value(id="P1", name="Backend")
    assert form.get("id") is None


def test_value_is_a_copy() -> None:
    """Test that changing the returned values does not change the form."""
    form = EditForm("id")
    form.value["id"] = "P1"
    assert form.get("id") is None

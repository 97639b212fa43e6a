"""Tests for the project and label forms and entity resolution."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from bugtracker.exceptions import NotFound
from bugtracker.forms import FormState, LabelUpdateController, ProjectUpdateController, resolve_entity
from bugtracker.models import Label, Project, get_label_identifier, get_project_identifier
from bugtracker.services import LabelService, ProjectService


@pytest.fixture
def project_service() -> MagicMock:
    """Create a mock project service."""
    return MagicMock(spec=ProjectService)


@pytest.fixture
def label_service() -> MagicMock:
    """Create a mock label service."""
    return MagicMock(spec=LabelService)


@pytest.mark.asyncio
async def test_resolve_entity_fetches_by_id(project_service: MagicMock) -> None:
    """Test resolving an existing entity."""
    project_service.find.return_value = Project(id="P1", name="Backend")

    project = await resolve_entity(project_service, "P1", Project)

    project_service.find.assert_awaited_once_with("P1")
    assert project.name == "Backend"


@pytest.mark.asyncio
async def test_resolve_entity_blank(project_service: MagicMock) -> None:
    """Test resolving a new entity."""
    project = await resolve_entity(project_service, None, Project)

    project_service.find.assert_not_called()
    assert project == Project()


@pytest.mark.asyncio
async def test_resolve_entity_not_found(project_service: MagicMock) -> None:
    """Test that a missing entity surfaces unchanged."""
    project_service.find.side_effect = NotFound("project not found", status_code=404)

    with pytest.raises(NotFound):
        await resolve_entity(project_service, "missing", Project)


@pytest.mark.asyncio
async def test_project_form_save_creates(project_service: MagicMock) -> None:
    """Test creating a project through its form."""
    project_service.create.return_value = Project(id="P1", name="Backend")
    navigate_back = MagicMock()
    controller = ProjectUpdateController(project_service, {"project": Project()}, navigate_back)

    await controller.init()
    assert controller.state is FormState.READY
    controller.edit_form.set("name", "Backend")
    saved = await controller.save()

    project_service.create.assert_awaited_once_with(Project(name="Backend"))
    navigate_back.assert_called_once_with()
    assert saved.id == "P1"


@pytest.mark.asyncio
async def test_project_form_save_updates(project_service: MagicMock) -> None:
    """Test renaming a project through its form."""
    project_service.update.return_value = Project(id="P1", name="Renamed")
    controller = ProjectUpdateController(project_service, {"project": Project(id="P1", name="Backend")})

    await controller.init()
    assert controller.edit_form.value == {"id": "P1", "name": "Backend"}
    controller.edit_form.set("name", "Renamed")
    await controller.save()

    project_service.update.assert_awaited_once_with(Project(id="P1", name="Renamed"))
    project_service.create.assert_not_called()


@pytest.mark.asyncio
async def test_label_form_save_updates(label_service: MagicMock) -> None:
    """Test updating a label drops its informational tickets."""
    label_service.update.return_value = Label(id="L1", value="feature")
    controller = LabelUpdateController(label_service, {"label": Label(id="L1", value="bug", tickets=[])})

    await controller.init()
    controller.edit_form.set("value", "feature")
    await controller.save()

    label_service.update.assert_awaited_once_with(Label(id="L1", value="feature"))


@pytest.mark.asyncio
async def test_label_form_save_failure(label_service: MagicMock) -> None:
    """Test that a failed label save does not navigate."""
    label_service.create.side_effect = RuntimeError("boom")
    navigate_back = MagicMock()
    controller = LabelUpdateController(label_service, {"label": Label(value="bug")}, navigate_back)

    await controller.init()
    with pytest.raises(RuntimeError, match="boom"):
        await controller.save()

    assert controller.is_saving is False
    navigate_back.assert_not_called()


@pytest.mark.asyncio
async def test_init_requires_routed_entity(label_service: MagicMock) -> None:
    """Test that a form without its entity in the route data fails."""
    controller = LabelUpdateController(label_service, {})

    with pytest.raises(KeyError):
        await controller.init()


@pytest.mark.asyncio
async def test_save_picks_update_through_form_identifier(
    project_service: MagicMock, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that create or update is chosen by the form's identifier accessor."""
    assert ProjectUpdateController.identify is get_project_identifier
    assert LabelUpdateController.identify is get_label_identifier
    monkeypatch.setattr(ProjectUpdateController, "identify", staticmethod(lambda project: None))
    project_service.create.return_value = Project(id="P1", name="Backend")
    controller = ProjectUpdateController(project_service, {"project": Project(id="P1", name="Backend")})

    await controller.init()
    await controller.save()

    project_service.create.assert_awaited_once_with(Project(id="P1", name="Backend"))
    project_service.update.assert_not_called()

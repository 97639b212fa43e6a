"""Project create/edit form."""

from bugtracker.forms.update import UpdateController
from bugtracker.models import Project, get_project_identifier


class ProjectUpdateController(UpdateController[Project]):
    """Form controller editing a project."""

    entity_key = "project"
    identify = staticmethod(get_project_identifier)
    form_fields = ("id", "name")

    def update_form(self, project: Project) -> None:
        self.edit_form.patch_value(id=project.id, name=project.name)

    def create_from_form(self) -> Project:
        return Project(id=self.edit_form.get("id"), name=self.edit_form.get("name"))

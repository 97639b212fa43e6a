"""Label create/edit form."""

from bugtracker.forms.update import UpdateController
from bugtracker.models import Label, get_label_identifier


class LabelUpdateController(UpdateController[Label]):
    """Form controller editing a label.

    The label's tickets are not editable here; the ticket form owns that relation.
    """

    entity_key = "label"
    identify = staticmethod(get_label_identifier)
    form_fields = ("id", "value")

    def update_form(self, label: Label) -> None:
        self.edit_form.patch_value(id=label.id, value=label.value)

    def create_from_form(self) -> Label:
        return Label(id=self.edit_form.get("id"), value=self.edit_form.get("value"))

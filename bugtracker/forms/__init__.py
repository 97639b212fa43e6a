"""Update form controllers."""

from bugtracker.forms.form import EditForm
from bugtracker.forms.label_update import LabelUpdateController
from bugtracker.forms.project_update import ProjectUpdateController
from bugtracker.forms.ticket_update import TicketUpdateController
from bugtracker.forms.update import FormState, UpdateController, resolve_entity

__all__ = [
    "EditForm",
    "FormState",
    "LabelUpdateController",
    "ProjectUpdateController",
    "TicketUpdateController",
    "UpdateController",
    "resolve_entity",
]

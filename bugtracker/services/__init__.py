"""Entity service implementations."""

from bugtracker.services.label import LabelService
from bugtracker.services.project import ProjectService
from bugtracker.services.ticket import TicketService
from bugtracker.services.user import UserService

__all__ = ["LabelService", "ProjectService", "TicketService", "UserService"]

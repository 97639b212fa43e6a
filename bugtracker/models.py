"""Data models for the bug tracker API."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

DATE_FORMAT = "%Y-%m-%d"


@dataclass
class User:
    """Represents a user that tickets can be assigned to."""

    id: str | None = None
    login: str | None = None


@dataclass
class Project:
    """Represents a project grouping tickets."""

    id: str | None = None
    name: str | None = None


@dataclass
class Label:
    """Represents a label attached to tickets.

    ``tickets`` is the reverse side of the ticket/label relation and is only
    informational; the ticket owns the relation.
    """

    id: str | None = None
    value: str | None = None
    tickets: list["Ticket"] | None = None


@dataclass
class Ticket:
    """Represents a ticket with its relations.

    ``done=None`` means the value was not provided, so a partial update leaves
    it alone. Use ``Ticket.blank()`` for a new ticket, whose ``done`` is False.
    """

    id: str | None = None
    title: str | None = None
    description: str | None = None
    due_date: date | None = None
    done: bool | None = None
    project: Project | None = None
    assigned_to: User | None = None
    labels: list[Label] | None = None

    @classmethod
    def blank(cls) -> "Ticket":
        """Build a new, unsaved ticket."""
        return cls(done=False)


def get_user_identifier(user: User) -> str | None:
    return user.id


def get_project_identifier(project: Project) -> str | None:
    return project.id


def get_label_identifier(label: Label) -> str | None:
    return label.id


def get_ticket_identifier(ticket: Ticket) -> str | None:
    return ticket.id


def format_date(value: date | None, date_format: str = DATE_FORMAT) -> str | None:
    """Format a date for the wire, passing ``None`` through."""
    if value is None:
        return None
    return value.strftime(date_format)


def parse_date(value: str | None, date_format: str = DATE_FORMAT) -> date | None:
    """Parse a wire date string, passing ``None`` and empty strings through."""
    if not value:
        return None
    return datetime.strptime(value, date_format).date()


def _drop_none(data: dict[str, Any], exclude_none: bool) -> dict[str, Any]:
    if not exclude_none:
        return data
    return {key: value for key, value in data.items() if value is not None}


def user_to_json(user: User, exclude_none: bool = False) -> dict[str, Any]:
    """Convert a User to its JSON representation."""
    return _drop_none({"id": user.id, "login": user.login}, exclude_none)


def user_from_json(data: dict[str, Any]) -> User:
    """Convert a JSON object to a User."""
    return User(id=data.get("id"), login=data.get("login"))


def project_to_json(project: Project, exclude_none: bool = False) -> dict[str, Any]:
    """Convert a Project to its JSON representation."""
    return _drop_none({"id": project.id, "name": project.name}, exclude_none)


def project_from_json(data: dict[str, Any]) -> Project:
    """Convert a JSON object to a Project."""
    return Project(id=data.get("id"), name=data.get("name"))


def label_to_json(label: Label, date_format: str = DATE_FORMAT, exclude_none: bool = False) -> dict[str, Any]:
    """Convert a Label to its JSON representation.

    Args:
        label: Label to convert
        date_format: Format used for dates of nested tickets
        exclude_none: Omit fields whose value is None

    Returns:
        JSON-compatible dictionary
    """
    tickets = None
    if label.tickets is not None:
        tickets = [ticket_to_json(ticket, date_format, exclude_none) for ticket in label.tickets]
    return _drop_none({"id": label.id, "value": label.value, "tickets": tickets}, exclude_none)


def label_from_json(data: dict[str, Any], date_format: str = DATE_FORMAT) -> Label:
    """Convert a JSON object to a Label."""
    tickets = data.get("tickets")
    return Label(
        id=data.get("id"),
        value=data.get("value"),
        tickets=[ticket_from_json(t, date_format) for t in tickets] if tickets is not None else None,
    )


def ticket_to_json(ticket: Ticket, date_format: str = DATE_FORMAT, exclude_none: bool = False) -> dict[str, Any]:
    """Convert a Ticket to its JSON representation.

    Relations are sent as nested objects. ``labels=None`` stays ``null`` on the
    wire while an empty list stays an empty list.

    Args:
        ticket: Ticket to convert
        date_format: strftime pattern for ``dueDate``
        exclude_none: Omit fields whose value is None (merge-patch bodies)

    Returns:
        JSON-compatible dictionary
    """
    labels = None
    if ticket.labels is not None:
        labels = [label_to_json(label, date_format, exclude_none) for label in ticket.labels]

    done = ticket.done
    if done is None and not exclude_none:
        done = False

    data = {
        "id": ticket.id,
        "title": ticket.title,
        "description": ticket.description,
        "dueDate": format_date(ticket.due_date, date_format),
        "done": done,
        "project": project_to_json(ticket.project, exclude_none) if ticket.project is not None else None,
        "assignedTo": user_to_json(ticket.assigned_to, exclude_none) if ticket.assigned_to is not None else None,
        "labels": labels,
    }
    return _drop_none(data, exclude_none)


def ticket_from_json(data: dict[str, Any], date_format: str = DATE_FORMAT) -> Ticket:
    """Convert a JSON object to a Ticket.

    Args:
        data: Ticket object as returned by the API
        date_format: strptime pattern for ``dueDate``

    Returns:
        Ticket object
    """
    project = data.get("project")
    assigned_to = data.get("assignedTo")
    labels = data.get("labels")
    return Ticket(
        id=data.get("id"),
        title=data.get("title"),
        description=data.get("description"),
        due_date=parse_date(data.get("dueDate"), date_format),
        done=bool(data.get("done")),
        project=project_from_json(project) if project is not None else None,
        assigned_to=user_from_json(assigned_to) if assigned_to is not None else None,
        labels=[label_from_json(label, date_format) for label in labels] if labels is not None else None,
    )

"""Tests for data models and their JSON conversion."""

from datetime import date

from bugtracker.models import (
    Label,
    Project,
    Ticket,
    User,
    format_date,
    get_ticket_identifier,
    label_from_json,
    parse_date,
    ticket_from_json,
    ticket_to_json,
)


def test_ticket_creation() -> None:
    """Test ticket creation with defaults."""
    ticket = Ticket()
    assert ticket.id is None
    assert ticket.title is None
    assert ticket.done is None
    assert ticket.labels is None
    assert get_ticket_identifier(ticket) is None


def test_blank_ticket_is_not_done() -> None:
    """Test that a new ticket starts as not done."""
    ticket = Ticket.blank()
    assert ticket.done is False
    assert get_ticket_identifier(ticket) is None


def test_ticket_to_json_unset_done_is_false() -> None:
    """Test that a full representation sends done=False when it was not set."""
    assert ticket_to_json(Ticket(id="ABC"))["done"] is False


def test_date_round_trip() -> None:
    """Test that formatting then parsing a date gives the same date."""
    value = date(2023, 1, 15)
    assert format_date(value) == "2023-01-15"
    assert parse_date(format_date(value)) == value


def test_date_custom_format() -> None:
    """Test dates with an explicit format."""
    assert format_date(date(2023, 1, 15), "%d/%m/%Y") == "15/01/2023"
    assert parse_date("15/01/2023", "%d/%m/%Y") == date(2023, 1, 15)


def test_date_none_passes_through() -> None:
    """Test that missing dates stay missing."""
    assert format_date(None) is None
    assert parse_date(None) is None
    assert parse_date("") is None


def test_ticket_from_json() -> None:
    """Test parsing a ticket with nested relations."""
    ticket = ticket_from_json(
        {
            "id": "AAAAAAA",
            "title": "Crash on save",
            "description": "Stack trace attached",
            "dueDate": "2023-01-15",
            "done": True,
            "project": {"id": "P1", "name": "Backend"},
            "assignedTo": {"id": "U1", "login": "admin"},
            "labels": [{"id": "L1", "value": "bug"}],
        }
    )
    assert ticket.id == "AAAAAAA"
    assert ticket.due_date == date(2023, 1, 15)
    assert ticket.done is True
    assert ticket.project == Project(id="P1", name="Backend")
    assert ticket.assigned_to == User(id="U1", login="admin")
    assert ticket.labels == [Label(id="L1", value="bug")]


def test_ticket_from_json_missing_fields() -> None:
    """Test that absent fields become None and done defaults to False."""
    ticket = ticket_from_json({"id": "ABC"})
    assert ticket.due_date is None
    assert ticket.project is None
    assert ticket.labels is None
    assert ticket.done is False


def test_ticket_to_json() -> None:
    """Test serializing a ticket uses wire names and date strings."""
    ticket = Ticket(
        id="ABC",
        title="Title",
        due_date=date(2023, 1, 15),
        project=Project(id="P1"),
        assigned_to=User(id="U1"),
        labels=[],
    )
    data = ticket_to_json(ticket)
    assert data["dueDate"] == "2023-01-15"
    assert data["project"] == {"id": "P1", "name": None}
    assert data["assignedTo"] == {"id": "U1", "login": None}
    assert data["labels"] == []
    assert data["description"] is None


def test_ticket_to_json_keeps_none_and_empty_labels_distinct() -> None:
    """Test that no labels and an empty label list serialize differently."""
    assert ticket_to_json(Ticket(labels=None))["labels"] is None
    assert ticket_to_json(Ticket(labels=[]))["labels"] == []


def test_ticket_to_json_exclude_none() -> None:
    """Test that unset fields, done included, are dropped for partial updates."""
    data = ticket_to_json(Ticket(id="ABC", title="New"), exclude_none=True)
    assert data == {"id": "ABC", "title": "New"}


def test_ticket_to_json_exclude_none_keeps_explicit_done() -> None:
    """Test that an explicitly set done travels in a partial update."""
    assert ticket_to_json(Ticket(id="ABC", done=False), exclude_none=True) == {"id": "ABC", "done": False}


def test_label_from_json_with_tickets() -> None:
    """Test that a label's informational tickets are parsed."""
    label = label_from_json({"id": "L1", "value": "bug", "tickets": [{"id": "T1", "dueDate": "2024-02-29"}]})
    assert label.tickets is not None
    assert label.tickets[0].id == "T1"
    assert label.tickets[0].due_date == date(2024, 2, 29)


def test_label_from_json_without_tickets() -> None:
    """Test a label without tickets."""
    assert label_from_json({"id": "L1", "value": "bug"}).tickets is None

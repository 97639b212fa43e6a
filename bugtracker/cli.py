"""CLI for the bug tracker admin client."""

import asyncio
from collections.abc import Callable, Sequence
from datetime import date
from typing import Annotated, Literal, TypeVar

import structlog
from cyclopts import App, Parameter

from bugtracker.client import BugtrackerClient
from bugtracker.config import get_config
from bugtracker.config_commands import config_app
from bugtracker.forms import TicketUpdateController, resolve_entity
from bugtracker.label_commands import label_app
from bugtracker.models import Ticket, get_label_identifier, get_project_identifier, get_user_identifier
from bugtracker.project_commands import project_app

logger = structlog.get_logger()

E = TypeVar("E")

app = App(
    name="bt",
    help="Bug tracker admin - manage tickets, projects and labels",
)

app.command(config_app)
app.command(project_app)
app.command(label_app)


def configure_logging(log_level: str) -> None:
    """Configure structlog with the specified log level."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()))


def get_client() -> BugtrackerClient:
    """Get a client for the configured server."""
    config = get_config()
    if not config.api_url:
        raise ValueError("API URL not configured. Set it using:\n  bt config set api.url <url>")
    return BugtrackerClient(
        config.api_url,
        token=config.api_token,
        timeout=config.timeout,
        date_format=config.date_format,
    )


def parse_ids(value: str) -> list[str]:
    """Split a comma-separated list of ids."""
    return [item.strip() for item in value.split(",") if item.strip()]


def select_option(
    options: Sequence[E], entity_id: str, kind: str, identifier: Callable[[E], str | None]
) -> E | None:
    """Pick the option with the given id; an empty id clears the relation."""
    if not entity_id:
        return None
    for option in options:
        if identifier(option) == entity_id:
            return option
    raise ValueError(f"Unknown {kind}: {entity_id}")


def format_ticket(ticket: Ticket) -> str:
    marker = "○" if ticket.done else "●"
    due = f" (due {ticket.due_date.isoformat()})" if ticket.due_date else ""
    return f"{marker} {ticket.id}: {ticket.title}{due}"


def print_ticket(ticket: Ticket) -> None:
    print(f"Ticket: {ticket.id}")
    print(f"Title: {ticket.title}")
    print(f"Description: {ticket.description or ''}")
    print(f"Done: {'yes' if ticket.done else 'no'}")
    if ticket.due_date:
        print(f"Due: {ticket.due_date.isoformat()}")
    if ticket.project:
        print(f"Project: {ticket.project.name} ({ticket.project.id})")
    if ticket.assigned_to:
        print(f"Assigned to: {ticket.assigned_to.login} ({ticket.assigned_to.id})")
    if ticket.labels:
        print(f"Labels: {', '.join(label.value or label.id or '' for label in ticket.labels)}")


async def edit_ticket(
    client: BugtrackerClient,
    ticket_id: str | None,
    title: str | None = None,
    description: str | None = None,
    due_date: str | None = None,
    done: bool | None = None,
    project: str | None = None,
    assignee: str | None = None,
    labels: str | None = None,
) -> Ticket:
    """Drive the ticket form: resolve, bind the given values and save.

    Only the values that are given change; relations are picked by id from
    the form's option collections.
    """
    ticket = await resolve_entity(client.tickets, ticket_id, Ticket.blank)
    controller = TicketUpdateController(
        client.tickets, client.projects, client.users, client.labels, route_data={"ticket": ticket}
    )
    await controller.init()
    form = controller.edit_form

    if title is not None:
        form.set("title", title)
    if description is not None:
        form.set("description", description)
    if due_date is not None:
        form.set("due_date", date.fromisoformat(due_date) if due_date else None)
    if done is not None:
        form.set("done", done)
    if project is not None:
        form.set(
            "project", select_option(controller.projects_shared_collection, project, "project", get_project_identifier)
        )
    if assignee is not None:
        form.set("assigned_to", select_option(controller.users_shared_collection, assignee, "user", get_user_identifier))
    if labels is not None:
        label_ids = parse_ids(labels)
        current = form.get("labels")
        selected = [
            controller.get_selected_label(option, current)
            for option in controller.labels_shared_collection
            if get_label_identifier(option) in label_ids
        ]
        missing = set(label_ids) - {get_label_identifier(label) for label in selected}
        if missing:
            raise ValueError(f"Unknown label(s): {', '.join(sorted(missing))}")
        form.set("labels", selected)

    return await controller.save()


async def _run_edit(ticket_id: str | None, **values: object) -> Ticket:
    async with get_client() as client:
        return await edit_ticket(client, ticket_id, **values)


@app.command
def create(
    title: str,
    description: str | None = None,
    due_date: str | None = None,
    done: bool | None = None,
    project: str | None = None,
    assignee: str | None = None,
    labels: str | None = None,
) -> None:
    """Create a new ticket.

    Args:
        title: Ticket title
        description: Ticket description
        due_date: Due date as YYYY-MM-DD
        done: Mark the ticket as done
        project: Project id
        assignee: User id
        labels: Comma-separated label ids
    """
    ticket = asyncio.run(
        _run_edit(
            None,
            title=title,
            description=description,
            due_date=due_date,
            done=done,
            project=project,
            assignee=assignee,
            labels=labels,
        )
    )
    print(f"Created ticket {ticket.id}: {ticket.title}")


@app.command
def read(ticket_id: str) -> None:
    """Read a ticket by ID."""

    async def run() -> Ticket:
        async with get_client() as client:
            return await client.tickets.find(ticket_id)

    print_ticket(asyncio.run(run()))


@app.command
def update(
    ticket_id: str,
    title: str | None = None,
    description: str | None = None,
    due_date: str | None = None,
    done: bool | None = None,
    project: str | None = None,
    assignee: str | None = None,
    labels: str | None = None,
) -> None:
    """Update a ticket. Pass an empty string to clear due date, project or assignee."""
    ticket = asyncio.run(
        _run_edit(
            ticket_id,
            title=title,
            description=description,
            due_date=due_date,
            done=done,
            project=project,
            assignee=assignee,
            labels=labels,
        )
    )
    print(f"Updated ticket {ticket.id}: {ticket.title}")


@app.command
def delete(*ticket_ids: str) -> None:
    """Delete one or more tickets."""

    async def run() -> None:
        async with get_client() as client:
            for ticket_id in ticket_ids:
                await client.tickets.delete(ticket_id)

    asyncio.run(run())
    print(f"Deleted {len(ticket_ids)} ticket(s)")


@app.command(name="list")
def list_tickets(
    page: int | None = None,
    size: int | None = None,
    sort: str | None = None,
) -> None:
    """List tickets.

    Args:
        page: Page number, starting at 0
        size: Page size
        sort: Comma-separated sort clauses, e.g. "dueDate:asc,id"
    """
    sort_clauses = [clause.replace(":", ",") for clause in parse_ids(sort)] if sort else None

    async def run() -> list[Ticket]:
        async with get_client() as client:
            return await client.tickets.query({"page": page, "size": size, "sort": sort_clauses})

    tickets = asyncio.run(run())
    print(f"Found {len(tickets)} ticket(s):\n")
    for ticket in tickets:
        print(format_ticket(ticket))


@app.command
def mine() -> None:
    """List the tickets assigned to you."""

    async def run() -> list[Ticket]:
        async with get_client() as client:
            return await client.tickets.query_self()

    tickets = asyncio.run(run())
    print(f"Found {len(tickets)} ticket(s) assigned to you:\n")
    for ticket in tickets:
        print(format_ticket(ticket))


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "critical",
) -> None:
    """Main entry point with global options."""
    configure_logging(log_level)
    app(tokens)


if __name__ == "__main__":
    app.meta()

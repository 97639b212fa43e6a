"""Label commands for the bug tracker CLI."""

import asyncio

from cyclopts import App

from bugtracker.forms import LabelUpdateController, resolve_entity
from bugtracker.models import Label

label_app = App(name="label", help="Manage labels")


@label_app.command(name="list")
def list_labels(page: int | None = None, size: int | None = None) -> None:
    """List labels."""
    from bugtracker.cli import get_client

    async def run() -> list[Label]:
        async with get_client() as client:
            return await client.labels.query({"page": page, "size": size})

    labels = asyncio.run(run())
    print(f"Found {len(labels)} label(s):\n")
    for label in labels:
        count = f" [{len(label.tickets)} ticket(s)]" if label.tickets else ""
        print(f"  {label.id}: {label.value}{count}")


@label_app.command
def save(value: str, label_id: str | None = None) -> None:
    """Create a label, or change its value when an id is given."""
    from bugtracker.cli import get_client

    async def run() -> Label:
        async with get_client() as client:
            label = await resolve_entity(client.labels, label_id, Label)
            controller = LabelUpdateController(client.labels, {"label": label})
            await controller.init()
            controller.edit_form.set("value", value)
            return await controller.save()

    label = asyncio.run(run())
    print(f"Saved label {label.id}: {label.value}")


@label_app.command
def delete(*label_ids: str) -> None:
    """Delete one or more labels."""
    from bugtracker.cli import get_client

    async def run() -> None:
        async with get_client() as client:
            for label_id in label_ids:
                await client.labels.delete(label_id)

    asyncio.run(run())
    print(f"Deleted {len(label_ids)} label(s)")

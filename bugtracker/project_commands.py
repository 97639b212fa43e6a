"""Project commands for the bug tracker CLI."""

import asyncio

from cyclopts import App

from bugtracker.forms import ProjectUpdateController, resolve_entity
from bugtracker.models import Project

project_app = App(name="project", help="Manage projects")


@project_app.command(name="list")
def list_projects(page: int | None = None, size: int | None = None) -> None:
    """List projects."""
    from bugtracker.cli import get_client

    async def run() -> list[Project]:
        async with get_client() as client:
            return await client.projects.query({"page": page, "size": size})

    projects = asyncio.run(run())
    print(f"Found {len(projects)} project(s):\n")
    for project in projects:
        print(f"  {project.id}: {project.name}")


@project_app.command
def save(name: str, project_id: str | None = None) -> None:
    """Create a project, or rename it when an id is given."""
    from bugtracker.cli import get_client

    async def run() -> Project:
        async with get_client() as client:
            project = await resolve_entity(client.projects, project_id, Project)
            controller = ProjectUpdateController(client.projects, {"project": project})
            await controller.init()
            controller.edit_form.set("name", name)
            return await controller.save()

    project = asyncio.run(run())
    print(f"Saved project {project.id}: {project.name}")


@project_app.command
def delete(*project_ids: str) -> None:
    """Delete one or more projects."""
    from bugtracker.cli import get_client

    async def run() -> None:
        async with get_client() as client:
            for project_id in project_ids:
                await client.projects.delete(project_id)

    asyncio.run(run())
    print(f"Deleted {len(project_ids)} project(s)")

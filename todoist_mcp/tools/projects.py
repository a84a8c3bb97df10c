"""MCP tool definitions for Todoist projects and sections."""

import json

from mcp.types import ToolAnnotations

from todoist_mcp.enums import ResponseFormat
from todoist_mcp.errors import TodoistError
from todoist_mcp.models.inputs import (
    ArchiveProjectInput,
    CreateProjectInput,
    CreateSectionInput,
    DeleteProjectInput,
    DeleteSectionInput,
    GetProjectInput,
    GetSectionInput,
    ListProjectsInput,
    ListSectionsInput,
    UpdateProjectInput,
    UpdateSectionInput,
)
from todoist_mcp.models.todoist import TodoistProject, TodoistSection
from todoist_mcp.server import mcp
from todoist_mcp.utils.api import get_api_service
from todoist_mcp.utils.formatters import (
    _format_error,
    _format_json,
    _format_project_markdown,
    _format_projects_markdown,
    _format_section_markdown,
    _format_sections_markdown,
)
from todoist_mcp.utils.parsers import _parse_items


@mcp.tool(
    name="todoist_list_projects",
    annotations=ToolAnnotations(
        title="List Projects",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_list_projects(params: ListProjectsInput) -> str:
    """
    List projects with their IDs; archived projects only on request.

    USE THIS WHEN:
    - Finding a project ID for creating, listing, or moving tasks
    - Getting an overview of how work is organized

    Args:
        params: ListProjectsInput with include_archived and response_format

    Returns:
        List of projects (markdown or JSON)
    """
    try:
        projects = _parse_items(TodoistProject, await get_api_service().get_projects(params.include_archived))
    except TodoistError as e:
        return _format_error(e)

    if params.response_format == ResponseFormat.JSON:
        archived_count = sum(1 for p in projects if p.is_archived)
        return json.dumps(
            {
                "count": len(projects),
                "archived_count": archived_count,
                "projects": [p.model_dump(mode="json") for p in projects],
            },
            indent=2,
        )
    return _format_projects_markdown(projects)


@mcp.tool(
    name="todoist_get_project",
    annotations=ToolAnnotations(
        title="Get Project",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_get_project(params: GetProjectInput) -> str:
    """Retrieve a single project by ID."""
    try:
        project = TodoistProject.model_validate(await get_api_service().get_project(params.project_id))
    except TodoistError as e:
        return _format_error(e)

    if params.response_format == ResponseFormat.JSON:
        return _format_json(project)
    return _format_project_markdown(project)


@mcp.tool(
    name="todoist_create_project",
    annotations=ToolAnnotations(
        title="Create Project",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_create_project(params: CreateProjectInput) -> str:
    """
    Create a new project, optionally nested under a parent project.

    Args:
        params: CreateProjectInput containing name and optional parent_id, color, is_favorite, view_style

    Returns:
        Confirmation with the new project ID
    """
    try:
        raw = await get_api_service().create_project(params.model_dump(exclude_none=True))
    except TodoistError as e:
        return _format_error(e)

    project = TodoistProject.model_validate(raw)
    return f"Project created successfully.\n{_format_project_markdown(project)}"


@mcp.tool(
    name="todoist_update_project",
    annotations=ToolAnnotations(
        title="Update Project",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_update_project(params: UpdateProjectInput) -> str:
    """Rename a project or change its color, favorite flag, or view style."""
    data = params.model_dump(exclude_none=True, exclude={"project_id"})
    if not data:
        return "Error: No fields to update. Provide name, color, is_favorite, or view_style."

    try:
        raw = await get_api_service().update_project(params.project_id, data)
    except TodoistError as e:
        return _format_error(e)

    project = TodoistProject.model_validate(raw)
    return f"Project {params.project_id} updated successfully.\n{_format_project_markdown(project)}"


@mcp.tool(
    name="todoist_delete_project",
    annotations=ToolAnnotations(
        title="Delete Project",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_delete_project(params: DeleteProjectInput) -> str:
    """
    Permanently delete a project with all its sections and tasks.

    Prefer todoist_archive_project when the project may be needed again.
    """
    try:
        await get_api_service().delete_project(params.project_id)
    except TodoistError as e:
        return _format_error(e)
    return f"Project {params.project_id} deleted."


@mcp.tool(
    name="todoist_archive_project",
    annotations=ToolAnnotations(
        title="Archive Project",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_archive_project(params: ArchiveProjectInput) -> str:
    """Archive a project. Archived projects can be restored with todoist_unarchive_project."""
    try:
        await get_api_service().archive_project(params.project_id)
    except TodoistError as e:
        return _format_error(e)
    return f"Project {params.project_id} archived."


@mcp.tool(
    name="todoist_unarchive_project",
    annotations=ToolAnnotations(
        title="Unarchive Project",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_unarchive_project(params: ArchiveProjectInput) -> str:
    """Restore an archived project."""
    try:
        await get_api_service().unarchive_project(params.project_id)
    except TodoistError as e:
        return _format_error(e)
    return f"Project {params.project_id} unarchived."


# ============================================================================
# Sections
# ============================================================================


@mcp.tool(
    name="todoist_list_sections",
    annotations=ToolAnnotations(
        title="List Sections",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_list_sections(params: ListSectionsInput) -> str:
    """
    List sections, optionally limited to one project.

    Args:
        params: ListSectionsInput with optional project_id and response_format

    Returns:
        List of sections (markdown or JSON)
    """
    try:
        sections = _parse_items(TodoistSection, await get_api_service().get_sections(params.project_id))
    except TodoistError as e:
        return _format_error(e)

    if params.response_format == ResponseFormat.JSON:
        return _format_json(sections)
    return _format_sections_markdown(sections)


@mcp.tool(
    name="todoist_get_section",
    annotations=ToolAnnotations(
        title="Get Section",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_get_section(params: GetSectionInput) -> str:
    """Retrieve a single section by ID."""
    try:
        section = TodoistSection.model_validate(await get_api_service().get_section(params.section_id))
    except TodoistError as e:
        return _format_error(e)

    if params.response_format == ResponseFormat.JSON:
        return _format_json(section)
    return _format_section_markdown(section)


@mcp.tool(
    name="todoist_create_section",
    annotations=ToolAnnotations(
        title="Create Section",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_create_section(params: CreateSectionInput) -> str:
    """Add a section to a project."""
    try:
        raw = await get_api_service().create_section(params.model_dump(exclude_none=True))
    except TodoistError as e:
        return _format_error(e)

    section = TodoistSection.model_validate(raw)
    return f"Section '{section.name}' created with ID {section.id}."


@mcp.tool(
    name="todoist_update_section",
    annotations=ToolAnnotations(
        title="Rename Section",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_update_section(params: UpdateSectionInput) -> str:
    """Rename a section."""
    try:
        await get_api_service().update_section(params.section_id, {"name": params.name})
    except TodoistError as e:
        return _format_error(e)
    return f"Section {params.section_id} renamed to '{params.name}'."


@mcp.tool(
    name="todoist_delete_section",
    annotations=ToolAnnotations(
        title="Delete Section",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_delete_section(params: DeleteSectionInput) -> str:
    """Delete a section together with all its tasks."""
    try:
        await get_api_service().delete_section(params.section_id)
    except TodoistError as e:
        return _format_error(e)
    return f"Section {params.section_id} deleted."

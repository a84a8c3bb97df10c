"""MCP tool definitions for Todoist tasks."""

import json

from mcp.types import ToolAnnotations

from todoist_mcp.enums import ResponseFormat
from todoist_mcp.errors import TodoistError
from todoist_mcp.models.inputs import (
    CompleteTaskInput,
    CreateTaskInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTasksInput,
    ReopenTaskInput,
    UpdateTaskInput,
)
from todoist_mcp.server import mcp
from todoist_mcp.utils.api import get_api_service
from todoist_mcp.utils.formatters import _format_error, _format_task_markdown, _format_tasks_markdown
from todoist_mcp.utils.parsers import _parse_task, _parse_tasks


@mcp.tool(
    name="todoist_list_tasks",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_list_tasks(params: ListTasksInput) -> str:
    """
    Search and filter active Todoist tasks.

    USE THIS WHEN:
    - Listing tasks in a project, section, or with a label
    - Running a Todoist filter query ("today", "overdue", "p1 & #Work")
    - Finding task IDs before updating or completing tasks

    DO NOT USE WHEN:
    - You have a specific task ID → use todoist_get_task instead
    - You want to change many tasks at once → use todoist_bulk_tasks

    Args:
        params: ListTasksInput with optional project_id, section_id, label, filter, limit

    Returns:
        Formatted list of tasks (markdown or JSON based on response_format)

    Examples:
        - Tasks due today: params with filter="today"
        - Tasks in a project: params with project_id="2203306141"
        - Labelled tasks as JSON: params with label="waiting", response_format="json"
    """
    try:
        api = get_api_service()
        if params.filter:
            raw_tasks = await api.get_tasks_by_filter(params.filter, limit=params.limit)
        else:
            raw_tasks = await api.get_tasks(
                project_id=params.project_id,
                section_id=params.section_id,
                label=params.label,
                limit=params.limit,
            )
    except TodoistError as e:
        return _format_error(e)

    tasks = _parse_tasks(raw_tasks)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {"count": len(tasks), "tasks": [t.model_dump(mode="json") for t in tasks]},
            indent=2,
        )

    title = "Tasks"
    if params.filter:
        title = f"Tasks matching '{params.filter}'"
    elif params.label:
        title = f"Tasks labelled '{params.label}'"
    return _format_tasks_markdown(tasks, title)


@mcp.tool(
    name="todoist_get_task",
    annotations=ToolAnnotations(
        title="Get Task Details",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_get_task(params: GetTaskInput) -> str:
    """
    Retrieve full details for a single task by ID.

    Args:
        params: GetTaskInput containing task_id and response_format

    Returns:
        Detailed task information (markdown or JSON)
    """
    try:
        task = _parse_task(await get_api_service().get_task(params.task_id))
    except TodoistError as e:
        return _format_error(e)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(task.model_dump(mode="json"), indent=2)
    return _format_task_markdown(task)


@mcp.tool(
    name="todoist_create_task",
    annotations=ToolAnnotations(
        title="Create Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_create_task(params: CreateTaskInput) -> str:
    """
    Create a new task in Todoist.

    USE THIS WHEN:
    - Adding a new task, optionally with project, section, labels, priority, due date

    DO NOT USE WHEN:
    - Changing an existing task → use todoist_update_task instead
    - Adding notes to a task → use todoist_create_comment instead

    Args:
        params: CreateTaskInput containing content and optional attributes

    Returns:
        Confirmation with the created task

    Examples:
        - Simple task: params with content="Buy groceries"
        - Urgent task due tomorrow: params with content="Fix bug", priority=4, due_string="tomorrow"
        - Subtask: params with content="Write tests", parent_id="6X7rM8997g3RQmvh"
    """
    try:
        raw_task = await get_api_service().create_task(params.model_dump(mode="json", exclude_none=True))
    except TodoistError as e:
        return _format_error(e)

    task = _parse_task(raw_task)
    return f"Task created successfully.\n{_format_task_markdown(task)}"


@mcp.tool(
    name="todoist_update_task",
    annotations=ToolAnnotations(
        title="Update Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_update_task(params: UpdateTaskInput) -> str:
    """
    Update an existing task's attributes.

    Moving a task to another project or section is not an update; use
    todoist_bulk_tasks with action="move" (it accepts a single task ID).

    Args:
        params: UpdateTaskInput containing task_id and the fields to change

    Returns:
        Confirmation with the updated task
    """
    data = params.model_dump(mode="json", exclude_none=True, exclude={"task_id"})
    if not data:
        return "Error: No fields to update. Provide at least one attribute to change."

    try:
        raw_task = await get_api_service().update_task(params.task_id, data)
    except TodoistError as e:
        return _format_error(e)

    task = _parse_task(raw_task)
    return f"Task {params.task_id} updated successfully.\n{_format_task_markdown(task)}"


@mcp.tool(
    name="todoist_delete_task",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_delete_task(params: DeleteTaskInput) -> str:
    """
    Permanently delete a task and its subtasks.

    Args:
        params: DeleteTaskInput containing the task_id to delete

    Returns:
        Confirmation message
    """
    try:
        await get_api_service().delete_task(params.task_id)
    except TodoistError as e:
        return _format_error(e)
    return f"Task {params.task_id} deleted."


@mcp.tool(
    name="todoist_complete_task",
    annotations=ToolAnnotations(
        title="Complete Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_complete_task(params: CompleteTaskInput) -> str:
    """
    Mark a task as completed. Recurring tasks move to their next occurrence.

    Args:
        params: CompleteTaskInput containing the task_id to complete

    Returns:
        Confirmation message
    """
    try:
        await get_api_service().close_task(params.task_id)
    except TodoistError as e:
        return _format_error(e)
    return f"Task {params.task_id} marked as complete."


@mcp.tool(
    name="todoist_reopen_task",
    annotations=ToolAnnotations(
        title="Reopen Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_reopen_task(params: ReopenTaskInput) -> str:
    """
    Reopen a completed task.

    Args:
        params: ReopenTaskInput containing the task_id to reopen

    Returns:
        Confirmation message
    """
    try:
        await get_api_service().reopen_task(params.task_id)
    except TodoistError as e:
        return _format_error(e)
    return f"Task {params.task_id} reopened."

"""MCP tool definitions for task reminders."""

from typing import Any

from mcp.types import ToolAnnotations

from todoist_mcp.enums import ReminderType, ResponseFormat
from todoist_mcp.errors import TodoistError
from todoist_mcp.models.inputs import (
    CreateReminderInput,
    DeleteReminderInput,
    ListRemindersInput,
    UpdateReminderInput,
)
from todoist_mcp.models.todoist import TodoistReminder
from todoist_mcp.server import mcp
from todoist_mcp.utils.api import get_api_service
from todoist_mcp.utils.formatters import _format_error, _format_json, _format_reminders_markdown
from todoist_mcp.utils.parsers import _parse_items


def _location_args(params: CreateReminderInput | UpdateReminderInput) -> dict[str, Any]:
    args: dict[str, Any] = {}
    for field in ("name", "loc_lat", "loc_long", "radius"):
        value = getattr(params, field)
        if value is not None:
            args[field] = value
    if params.loc_trigger is not None:
        args["loc_trigger"] = params.loc_trigger.value
    return args


def _reminder_args(params: CreateReminderInput) -> dict[str, Any]:
    """Build ``reminder_add`` arguments for the requested reminder type."""
    args: dict[str, Any] = {"item_id": params.task_id, "type": params.type.value}
    if params.type == ReminderType.RELATIVE:
        args["minute_offset"] = params.minute_offset
    elif params.type == ReminderType.LOCATION:
        args.update(_location_args(params))
    elif params.due_datetime:
        args["due"] = {"date": params.due_datetime}
    else:
        args["due"] = {"string": params.due_string}
    return args


def _reminder_update_args(params: UpdateReminderInput) -> dict[str, Any]:
    """Build ``reminder_update`` arguments from the fields that were set."""
    args: dict[str, Any] = {}
    if params.type is not None:
        args["type"] = params.type.value
    if params.minute_offset is not None:
        args["minute_offset"] = params.minute_offset
    if params.due_datetime:
        args["due"] = {"date": params.due_datetime}
    elif params.due_string:
        args["due"] = {"string": params.due_string}
    args.update(_location_args(params))
    return args


@mcp.tool(
    name="todoist_list_reminders",
    annotations=ToolAnnotations(
        title="List Reminders",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_list_reminders(params: ListRemindersInput) -> str:
    """
    List active reminders, optionally for one task.

    Args:
        params: ListRemindersInput with optional task_id and response_format

    Returns:
        Reminders (markdown or JSON)
    """
    try:
        raw = await get_api_service().get_reminders(task_id=params.task_id)
    except TodoistError as e:
        return _format_error(e)

    reminders = _parse_items(TodoistReminder, raw)
    if params.response_format == ResponseFormat.JSON:
        return _format_json(reminders)
    return _format_reminders_markdown(reminders)


@mcp.tool(
    name="todoist_create_reminder",
    annotations=ToolAnnotations(
        title="Add Reminder",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_create_reminder(params: CreateReminderInput) -> str:
    """
    Add a reminder to a task.

    Relative reminders fire ``minute_offset`` minutes before the task's due
    time, so the task needs a due date with a time. Absolute reminders fire
    at ``due_datetime`` or at the time described by ``due_string``. Location
    reminders fire on entering or leaving the circle around
    ``loc_lat``/``loc_long``.

    Examples:
        - 30 minutes before due: params with task_id="123", type="relative", minute_offset=30
        - Fixed time: params with task_id="123", type="absolute", due_string="tomorrow at 9am"
        - Leaving home: params with task_id="123", type="location", name="Home",
          loc_lat="52.52", loc_long="13.405", loc_trigger="on_leave", radius=100
    """
    try:
        reminder_id = await get_api_service().create_reminder(_reminder_args(params))
    except TodoistError as e:
        return _format_error(e)
    return f"Reminder {reminder_id} added to task {params.task_id}."


@mcp.tool(
    name="todoist_update_reminder",
    annotations=ToolAnnotations(
        title="Update Reminder",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_update_reminder(params: UpdateReminderInput) -> str:
    """
    Change when an existing reminder fires.

    Only the fields given are sent; set ``type`` as well when switching
    between relative, absolute and location reminders.
    """
    args = _reminder_update_args(params)
    if not args:
        return "Error: No fields to update. Provide type, minute_offset, due_string, due_datetime, or location fields."

    try:
        await get_api_service().update_reminder(params.reminder_id, args)
    except TodoistError as e:
        return _format_error(e)
    return f"Reminder {params.reminder_id} updated."


@mcp.tool(
    name="todoist_delete_reminder",
    annotations=ToolAnnotations(
        title="Delete Reminder",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_delete_reminder(params: DeleteReminderInput) -> str:
    try:
        await get_api_service().delete_reminder(params.reminder_id)
    except TodoistError as e:
        return _format_error(e)
    return f"Reminder {params.reminder_id} deleted."

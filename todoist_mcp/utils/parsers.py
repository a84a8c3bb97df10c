"""Parser helpers for Todoist API data."""

from typing import Any, TypeVar

from pydantic import BaseModel

from todoist_mcp.models.bulk import SyncFailed, SyncOk, SyncStatus, SyncStatusMap
from todoist_mcp.models.todoist import TodoistTask

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse_task(task_dict: dict[str, Any]) -> TodoistTask:
    """
    Parse a task dictionary into a TodoistTask.

    Args:
        task_dict: Dictionary from the Todoist REST API

    Returns:
        TodoistTask instance with validated data
    """
    return TodoistTask.model_validate(task_dict)


def _parse_tasks(tasks: list[dict[str, Any]]) -> list[TodoistTask]:
    """Parse a list of task dictionaries into TodoistTask instances."""
    return [TodoistTask.model_validate(t) for t in tasks]


def _parse_items(model: type[ModelT], items: list[dict[str, Any]]) -> list[ModelT]:
    """Parse raw API objects into instances of ``model``."""
    return [model.model_validate(item) for item in items]


def _parse_sync_entry(entry: Any) -> SyncStatus:
    """
    Convert one ``sync_status`` value into SyncOk or SyncFailed.

    The sync API reports ``"ok"`` for an executed command and an object such as
    ``{"error": "TASK_NOT_FOUND", "error_message": "Task not found",
    "error_code": 404}`` for a rejected one. Anything else is treated as a
    failure so it cannot be mistaken for success.
    """
    if entry == "ok":
        return SyncOk()

    if isinstance(entry, dict):
        http_code = entry.get("http_code", entry.get("error_code"))
        return SyncFailed(
            code=str(entry["error"]) if entry.get("error") is not None else None,
            message=entry.get("error_message") or None,
            http_code=http_code if isinstance(http_code, int) else None,
        )

    return SyncFailed(code="UNEXPECTED_STATUS", message=f"Unexpected sync status: {entry!r}")


def _parse_sync_status(raw: Any) -> SyncStatusMap:
    """
    Parse the ``sync_status`` object of a sync response.

    Args:
        raw: Value of ``sync_status`` (missing or non-dict yields an empty map)

    Returns:
        Mapping of command uuid to SyncOk / SyncFailed
    """
    if not isinstance(raw, dict):
        return {}
    return {str(uuid): _parse_sync_entry(entry) for uuid, entry in raw.items()}

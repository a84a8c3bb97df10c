"""Utility functions for Todoist MCP."""

from todoist_mcp.utils.api import TodoistApiService, get_api_service
from todoist_mcp.utils.batch import build_batch_commands, execute_batch, reconcile_batch
from todoist_mcp.utils.bulk import (
    build_sync_commands,
    execute_bulk,
    normalize_task_ids,
    reconcile_results,
)
from todoist_mcp.utils.formatters import _format_error, _format_task_markdown, _format_tasks_markdown
from todoist_mcp.utils.parsers import _parse_sync_status, _parse_task, _parse_tasks

__all__ = [
    "TodoistApiService",
    "get_api_service",
    "normalize_task_ids",
    "build_sync_commands",
    "reconcile_results",
    "execute_bulk",
    "build_batch_commands",
    "reconcile_batch",
    "execute_batch",
    "_parse_task",
    "_parse_tasks",
    "_parse_sync_status",
    "_format_error",
    "_format_task_markdown",
    "_format_tasks_markdown",
]

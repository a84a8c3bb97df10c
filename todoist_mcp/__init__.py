"""
MCP Server for Todoist.

This server exposes Todoist tasks, projects, sections, comments, labels,
filters, and reminders as MCP tools, including a bulk tool that applies one
action to many tasks through a single sync request and reports the outcome
of every task individually.
"""

# Re-export enums
from todoist_mcp.enums import (
    BatchCommandType,
    BulkAction,
    DurationUnit,
    ErrorCode,
    LocationTrigger,
    ReminderType,
    ResponseFormat,
    SyncCommandType,
)

# Re-export errors
from todoist_mcp.errors import (
    AuthenticationError,
    ConfigurationError,
    NotFoundError,
    RateLimitError,
    ServiceUnavailableError,
    TodoistError,
    TransportError,
    UpstreamError,
    ValidationError,
)

# Re-export models
from todoist_mcp.models import (
    BatchCommandsInput,
    BatchResponse,
    BulkOperationSummary,
    BulkParams,
    BulkRequest,
    BulkTasksInput,
    BulkTasksResponse,
    NormalizedTaskSet,
    OperationResult,
    SyncCommand,
    SyncFailed,
    SyncOk,
    TodoistTask,
)

# Re-export MCP server instance
from todoist_mcp.server import mcp

# Re-export tools
from todoist_mcp.tools import (
    todoist_batch_commands,
    todoist_bulk_tasks,
    todoist_complete_task,
    todoist_create_task,
    todoist_delete_task,
    todoist_get_task,
    todoist_list_tasks,
    todoist_reopen_task,
    todoist_update_task,
)

# Re-export utilities (including private functions used by tests)
from todoist_mcp.utils import (
    TodoistApiService,
    _format_error,
    _format_task_markdown,
    _format_tasks_markdown,
    _parse_sync_status,
    _parse_task,
    _parse_tasks,
    build_sync_commands,
    execute_batch,
    execute_bulk,
    get_api_service,
    normalize_task_ids,
    reconcile_results,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "BulkAction",
    "SyncCommandType",
    "BatchCommandType",
    "DurationUnit",
    "ReminderType",
    "LocationTrigger",
    "ErrorCode",
    # Errors
    "TodoistError",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "UpstreamError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ServiceUnavailableError",
    # Models
    "TodoistTask",
    "BulkParams",
    "BulkRequest",
    "BulkTasksInput",
    "BulkTasksResponse",
    "NormalizedTaskSet",
    "SyncCommand",
    "SyncOk",
    "SyncFailed",
    "OperationResult",
    "BulkOperationSummary",
    "BatchCommandsInput",
    "BatchResponse",
    # Bulk engine
    "normalize_task_ids",
    "build_sync_commands",
    "reconcile_results",
    "execute_bulk",
    "execute_batch",
    # Utility functions
    "TodoistApiService",
    "get_api_service",
    "_parse_task",
    "_parse_tasks",
    "_parse_sync_status",
    "_format_error",
    "_format_task_markdown",
    "_format_tasks_markdown",
    # Task tools
    "todoist_list_tasks",
    "todoist_get_task",
    "todoist_create_task",
    "todoist_update_task",
    "todoist_delete_task",
    "todoist_complete_task",
    "todoist_reopen_task",
    "todoist_bulk_tasks",
    "todoist_batch_commands",
    # MCP server instance
    "mcp",
]

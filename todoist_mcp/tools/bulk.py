"""MCP tool definition for bulk task operations."""

from mcp.types import ToolAnnotations

from todoist_mcp.enums import ErrorCode
from todoist_mcp.errors import TodoistError, ValidationError
from todoist_mcp.models.bulk import BulkError, BulkParams, BulkRequest, BulkTasksResponse
from todoist_mcp.models.inputs import BulkTasksInput
from todoist_mcp.server import mcp
from todoist_mcp.utils.api import get_api_service
from todoist_mcp.utils.bulk import execute_bulk


@mcp.tool(
    name="todoist_bulk_tasks",
    annotations=ToolAnnotations(
        title="Bulk Task Operations",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_bulk_tasks(params: BulkTasksInput) -> str:
    """
    Apply one action to many tasks with a single Todoist sync request.

    USE THIS WHEN:
    - Completing or reopening several tasks at once
    - Moving tasks to another project, section, or parent task
    - Setting the same priority, labels, due date, or deadline on several tasks

    DO NOT USE WHEN:
    - Creating tasks → use todoist_create_task
    - Deleting tasks → use todoist_delete_task

    ACTIONS:
    - update: set any of content, description, priority, labels, order, assignee_id,
      due_string/due_date/due_datetime (+ due_lang), duration + duration_unit, deadline_date
    - move: exactly one of project_id, section_id, parent_id
    - complete / uncomplete: no extra fields

    Duplicate task IDs are removed first. Each task succeeds or fails on its
    own: the response has success=true with per-task results even when some
    tasks failed. success=false means the whole request failed and nothing
    is known about individual tasks.

    Args:
        params: BulkTasksInput containing action, task_ids, and action fields

    Returns:
        JSON with success, data (total_tasks, successful, failed, results),
        error, and metadata (deduplication counts, execution_time_ms)

    Examples:
        - Complete three tasks: params with action="complete", task_ids=["1", "2", "3"]
        - Move to a section: params with action="move", task_ids=["1", "2"], section_id="7025"
        - Raise priority: params with action="update", task_ids=["1", "2"], priority=4
    """
    request = BulkRequest(
        action=params.action,
        task_ids=params.task_ids,
        params=BulkParams.model_validate(params.model_dump(exclude={"action", "task_ids"})),
    )

    try:
        api = get_api_service()
        response = await execute_bulk(request, api, max_tasks=api.config.bulk_max_tasks)
    except ValidationError as e:
        response = BulkTasksResponse(
            success=False,
            error=BulkError(code=ErrorCode.INVALID_PARAMS.value, message=e.message),
        )
    except TodoistError as e:
        response = BulkTasksResponse(
            success=False,
            error=BulkError(code=e.code.value, message=e.message, retryable=e.retryable, http_status=e.http_status),
        )

    return response.model_dump_json(indent=2)

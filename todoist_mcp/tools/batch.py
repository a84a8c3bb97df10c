"""MCP tool definition for raw batches of sync commands."""

from mcp.types import ToolAnnotations

from todoist_mcp.errors import TodoistError
from todoist_mcp.models.bulk import BatchResponse, BulkError
from todoist_mcp.models.inputs import BatchCommandsInput
from todoist_mcp.server import mcp
from todoist_mcp.utils.api import get_api_service
from todoist_mcp.utils.batch import execute_batch


@mcp.tool(
    name="todoist_batch_commands",
    annotations=ToolAnnotations(
        title="Batch Sync Commands",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_batch_commands(params: BatchCommandsInput) -> str:
    """
    Run up to 100 task, project, and section commands in one sync request.

    USE THIS WHEN:
    - Creating a project together with its sections and tasks
    - Mixing different changes (add, update, delete) in one round trip

    DO NOT USE WHEN:
    - Applying the same change to many existing tasks → use todoist_bulk_tasks

    Give a command that creates something a ``temp_id`` (e.g., "tmp_project").
    Later commands in the same batch can use that temp_id wherever an ID is
    expected, such as ``project_id`` of an item_add. The response maps every
    temp_id to the real ID.

    Args:
        params: BatchCommandsInput with commands (type, args, optional temp_id)

    Returns:
        JSON with success, data (total_commands, successful, failed, results,
        temp_id_mapping), error, and execution_time_ms

    Examples:
        - Project with one task: commands=[
            {"type": "project_add", "temp_id": "tmp_p", "args": {"name": "Move"}},
            {"type": "item_add", "args": {"content": "Book van", "project_id": "tmp_p"}}]
    """
    try:
        response = await execute_batch(params.commands, get_api_service())
    except TodoistError as e:
        response = BatchResponse(
            success=False,
            error=BulkError(code=e.code.value, message=e.message, retryable=e.retryable, http_status=e.http_status),
        )

    return response.model_dump_json(indent=2)

"""MCP tool definitions for task and project comments."""

from mcp.types import ToolAnnotations

from todoist_mcp.enums import ResponseFormat
from todoist_mcp.errors import TodoistError
from todoist_mcp.models.inputs import (
    CreateCommentInput,
    DeleteCommentInput,
    GetCommentInput,
    ListCommentsInput,
    UpdateCommentInput,
)
from todoist_mcp.models.todoist import TodoistComment
from todoist_mcp.server import mcp
from todoist_mcp.utils.api import get_api_service
from todoist_mcp.utils.formatters import (
    _format_comment_markdown,
    _format_comments_markdown,
    _format_error,
    _format_json,
)
from todoist_mcp.utils.parsers import _parse_items


@mcp.tool(
    name="todoist_list_comments",
    annotations=ToolAnnotations(
        title="List Comments",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_list_comments(params: ListCommentsInput) -> str:
    """
    List the comments on a task or on a project.

    Args:
        params: ListCommentsInput with exactly one of task_id or project_id

    Returns:
        Comments, oldest first (markdown or JSON)
    """
    try:
        raw = await get_api_service().get_comments(task_id=params.task_id, project_id=params.project_id)
    except TodoistError as e:
        return _format_error(e)

    comments = _parse_items(TodoistComment, raw)
    if params.response_format == ResponseFormat.JSON:
        return _format_json(comments)
    return _format_comments_markdown(comments)


@mcp.tool(
    name="todoist_get_comment",
    annotations=ToolAnnotations(
        title="Get Comment",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_get_comment(params: GetCommentInput) -> str:
    """Retrieve a single comment by ID, with its full text."""
    try:
        comment = TodoistComment.model_validate(await get_api_service().get_comment(params.comment_id))
    except TodoistError as e:
        return _format_error(e)

    if params.response_format == ResponseFormat.JSON:
        return _format_json(comment)
    return _format_comment_markdown(comment)


@mcp.tool(
    name="todoist_create_comment",
    annotations=ToolAnnotations(
        title="Add Comment",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_create_comment(params: CreateCommentInput) -> str:
    """
    Add a comment to a task or project.

    USE THIS WHEN:
    - Recording progress notes, links, or context on a task

    Args:
        params: CreateCommentInput with content and exactly one of task_id or project_id

    Returns:
        Confirmation with the new comment ID
    """
    try:
        raw = await get_api_service().create_comment(params.model_dump(exclude_none=True))
    except TodoistError as e:
        return _format_error(e)

    comment = TodoistComment.model_validate(raw)
    target = f"task {params.task_id}" if params.task_id else f"project {params.project_id}"
    return f"Comment {comment.id} added to {target}."


@mcp.tool(
    name="todoist_update_comment",
    annotations=ToolAnnotations(
        title="Edit Comment",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_update_comment(params: UpdateCommentInput) -> str:
    """Replace the text of an existing comment."""
    try:
        await get_api_service().update_comment(params.comment_id, {"content": params.content})
    except TodoistError as e:
        return _format_error(e)
    return f"Comment {params.comment_id} updated."


@mcp.tool(
    name="todoist_delete_comment",
    annotations=ToolAnnotations(
        title="Delete Comment",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_delete_comment(params: DeleteCommentInput) -> str:
    try:
        await get_api_service().delete_comment(params.comment_id)
    except TodoistError as e:
        return _format_error(e)
    return f"Comment {params.comment_id} deleted."

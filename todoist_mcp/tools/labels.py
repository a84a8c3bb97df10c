"""MCP tool definitions for personal labels, shared labels and saved filters."""

from mcp.types import ToolAnnotations

from todoist_mcp.enums import ResponseFormat
from todoist_mcp.errors import TodoistError
from todoist_mcp.models.inputs import (
    CreateFilterInput,
    CreateLabelInput,
    DeleteFilterInput,
    DeleteLabelInput,
    GetFilterInput,
    GetLabelInput,
    ListFiltersInput,
    ListLabelsInput,
    RemoveSharedLabelInput,
    RenameSharedLabelInput,
    UpdateFilterInput,
    UpdateLabelInput,
)
from todoist_mcp.models.todoist import TodoistFilter, TodoistLabel
from todoist_mcp.server import mcp
from todoist_mcp.utils.api import get_api_service
from todoist_mcp.utils.formatters import (
    _format_error,
    _format_filter_markdown,
    _format_filters_markdown,
    _format_json,
    _format_label_markdown,
    _format_labels_markdown,
)
from todoist_mcp.utils.parsers import _parse_items


@mcp.tool(
    name="todoist_list_labels",
    annotations=ToolAnnotations(
        title="List Labels",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_list_labels(params: ListLabelsInput) -> str:
    """
    List all personal labels.

    Tasks reference labels by name, so use the names shown here when
    setting labels on tasks.
    """
    try:
        labels = _parse_items(TodoistLabel, await get_api_service().get_labels())
    except TodoistError as e:
        return _format_error(e)

    if params.response_format == ResponseFormat.JSON:
        return _format_json(labels)
    return _format_labels_markdown(labels)


@mcp.tool(
    name="todoist_get_label",
    annotations=ToolAnnotations(
        title="Get Label",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_get_label(params: GetLabelInput) -> str:
    """Retrieve a single personal label by ID."""
    try:
        label = TodoistLabel.model_validate(await get_api_service().get_label(params.label_id))
    except TodoistError as e:
        return _format_error(e)

    if params.response_format == ResponseFormat.JSON:
        return _format_json(label)
    return _format_label_markdown(label)


@mcp.tool(
    name="todoist_create_label",
    annotations=ToolAnnotations(
        title="Create Label",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_create_label(params: CreateLabelInput) -> str:
    """Create a personal label."""
    try:
        raw = await get_api_service().create_label(params.model_dump(exclude_none=True))
    except TodoistError as e:
        return _format_error(e)

    label = TodoistLabel.model_validate(raw)
    return f"Label '{label.name}' created with ID {label.id}."


@mcp.tool(
    name="todoist_update_label",
    annotations=ToolAnnotations(
        title="Update Label",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_update_label(params: UpdateLabelInput) -> str:
    """
    Rename a label or change its color, order, or favorite flag.

    Renaming updates the label on every task that carries it.
    """
    data = params.model_dump(exclude_none=True, exclude={"label_id"})
    if not data:
        return "Error: No fields to update. Provide name, color, order, or is_favorite."

    try:
        await get_api_service().update_label(params.label_id, data)
    except TodoistError as e:
        return _format_error(e)
    return f"Label {params.label_id} updated."


@mcp.tool(
    name="todoist_delete_label",
    annotations=ToolAnnotations(
        title="Delete Label",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_delete_label(params: DeleteLabelInput) -> str:
    """Delete a personal label and remove it from all tasks."""
    try:
        await get_api_service().delete_label(params.label_id)
    except TodoistError as e:
        return _format_error(e)
    return f"Label {params.label_id} deleted."


@mcp.tool(
    name="todoist_rename_shared_label",
    annotations=ToolAnnotations(
        title="Rename Shared Label",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_rename_shared_label(params: RenameSharedLabelInput) -> str:
    """
    Rename a label by name on every task that carries it.

    USE THIS WHEN:
    - The label comes from a shared project and has no personal label ID
    - Renaming across all tasks without looking up the label ID

    Args:
        params: RenameSharedLabelInput with name and new_name

    Returns:
        Confirmation message
    """
    try:
        await get_api_service().rename_shared_label(params.name, params.new_name)
    except TodoistError as e:
        return _format_error(e)
    return f"Shared label '{params.name}' renamed to '{params.new_name}' on all tasks."


@mcp.tool(
    name="todoist_remove_shared_label",
    annotations=ToolAnnotations(
        title="Remove Shared Label",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_remove_shared_label(params: RemoveSharedLabelInput) -> str:
    """Remove a label by name from every task that carries it."""
    try:
        await get_api_service().remove_shared_label(params.name)
    except TodoistError as e:
        return _format_error(e)
    return f"Shared label '{params.name}' removed from all tasks."


# ============================================================================
# Filters
# ============================================================================


@mcp.tool(
    name="todoist_list_filters",
    annotations=ToolAnnotations(
        title="List Saved Filters",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_list_filters(params: ListFiltersInput) -> str:
    """
    List saved filters with their queries.

    A filter's query can be passed to todoist_list_tasks as ``filter``.
    """
    try:
        filters = _parse_items(TodoistFilter, await get_api_service().get_filters())
    except TodoistError as e:
        return _format_error(e)

    if params.response_format == ResponseFormat.JSON:
        return _format_json(filters)
    return _format_filters_markdown(filters)


@mcp.tool(
    name="todoist_get_filter",
    annotations=ToolAnnotations(
        title="Get Saved Filter",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_get_filter(params: GetFilterInput) -> str:
    """Retrieve a single saved filter and its query by ID."""
    try:
        saved_filter = TodoistFilter.model_validate(await get_api_service().get_filter(params.filter_id))
    except TodoistError as e:
        return _format_error(e)

    if params.response_format == ResponseFormat.JSON:
        return _format_json(saved_filter)
    return _format_filter_markdown(saved_filter)


@mcp.tool(
    name="todoist_create_filter",
    annotations=ToolAnnotations(
        title="Create Saved Filter",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_create_filter(params: CreateFilterInput) -> str:
    """
    Save a filter query under a name.

    Args:
        params: CreateFilterInput with name, query, and optional color, is_favorite

    Returns:
        Confirmation with the new filter ID

    Examples:
        - params with name="Urgent work", query="p1 & #Work"
    """
    try:
        filter_id = await get_api_service().create_filter(params.model_dump(exclude_none=True))
    except TodoistError as e:
        return _format_error(e)
    return f"Filter '{params.name}' created with ID {filter_id}."


@mcp.tool(
    name="todoist_update_filter",
    annotations=ToolAnnotations(
        title="Update Saved Filter",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_update_filter(params: UpdateFilterInput) -> str:
    data = params.model_dump(exclude_none=True, exclude={"filter_id"})
    if not data:
        return "Error: No fields to update. Provide name, query, color, or is_favorite."

    try:
        await get_api_service().update_filter(params.filter_id, data)
    except TodoistError as e:
        return _format_error(e)
    return f"Filter {params.filter_id} updated."


@mcp.tool(
    name="todoist_delete_filter",
    annotations=ToolAnnotations(
        title="Delete Saved Filter",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_delete_filter(params: DeleteFilterInput) -> str:
    try:
        await get_api_service().delete_filter(params.filter_id)
    except TodoistError as e:
        return _format_error(e)
    return f"Filter {params.filter_id} deleted."

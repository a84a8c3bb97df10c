"""Bulk task operations over the Todoist sync endpoint.

A bulk request applies one action to many tasks with a single sync call:

    task ids -> normalize_task_ids -> build_sync_commands
             -> SyncSubmitter.submit_commands -> reconcile_results

The sync endpoint runs each command independently, so some tasks may fail
while others succeed. Such per-task failures are returned as data; only
failures of the request as a whole (validation, transport, upstream
rejection) are errors.
"""

import logging
import time
from typing import Any, Protocol

from todoist_mcp.enums import BulkAction, SyncCommandType
from todoist_mcp.errors import TodoistError, TransportError, UpstreamError, ValidationError
from todoist_mcp.models.bulk import (
    BulkError,
    BulkMetadata,
    BulkOperationSummary,
    BulkParams,
    BulkRequest,
    BulkTasksResponse,
    NormalizedTaskSet,
    OperationResult,
    SyncCommand,
    SyncFailed,
    SyncOk,
    SyncStatusMap,
)
from todoist_mcp.utils.ids import new_command_uuid

logger = logging.getLogger(__name__)

RESOURCE_URI_TEMPLATE = "todoist://task/{task_id}"
NO_STATUS_MESSAGE = "No status returned for command"
DEFAULT_MAX_TASKS = 50

ACTION_COMMANDS = {
    BulkAction.UPDATE: SyncCommandType.ITEM_UPDATE,
    BulkAction.MOVE: SyncCommandType.ITEM_MOVE,
    BulkAction.COMPLETE: SyncCommandType.ITEM_COMPLETE,
    BulkAction.UNCOMPLETE: SyncCommandType.ITEM_UNCOMPLETE,
}

DESTINATION_FIELDS = ("project_id", "section_id", "parent_id")
UPDATE_FIELDS = ("content", "description", "priority", "labels", "order", "assignee_id")


class SyncSubmitter(Protocol):
    """Anything that can send a batch of sync commands in one call."""

    async def submit_commands(self, commands: list[SyncCommand]) -> SyncStatusMap: ...


def task_resource_uri(task_id: str) -> str:
    return RESOURCE_URI_TEMPLATE.format(task_id=task_id)


# ============================================================================
# Identifier Normalizer
# ============================================================================


def normalize_task_ids(task_ids: list[str]) -> NormalizedTaskSet:
    """
    Remove duplicate task IDs, keeping the first occurrence of each.

    Args:
        task_ids: Requested IDs, possibly with duplicates

    Returns:
        NormalizedTaskSet with the unique IDs and before/after counts

    Examples:
        ["a", "b", "a", "c", "b"] -> ["a", "b", "c"], original_count=5, deduplicated_count=3
    """
    unique = list(dict.fromkeys(task_ids))
    return NormalizedTaskSet(
        task_ids=unique,
        original_count=len(task_ids),
        deduplicated_count=len(unique),
    )


# ============================================================================
# Command Builder
# ============================================================================


def _update_args(params: BulkParams) -> dict[str, Any]:
    """Build the shared ``item_update`` arguments from the set fields."""
    if any(getattr(params, field) is not None for field in DESTINATION_FIELDS):
        raise ValidationError(
            "The 'update' action does not accept project_id, section_id or parent_id. "
            "Todoist's item_update ignores destinations, so use the 'move' action to relocate tasks"
        )

    args: dict[str, Any] = {}
    for field in UPDATE_FIELDS:
        value = getattr(params, field)
        if value is not None:
            args[field] = value

    # Due fields collapse into the remote ``due`` object
    due = {
        "string": params.due_string,
        "date": params.due_date,
        "datetime": params.due_datetime,
    }
    due = {k: v for k, v in due.items() if v is not None}
    if due:
        if params.due_lang is not None:
            due["lang"] = params.due_lang
        args["due"] = due

    if (params.duration is None) != (params.duration_unit is None):
        raise ValidationError("duration and duration_unit must be provided together")
    if params.duration is not None and params.duration_unit is not None:
        args["duration"] = {"amount": params.duration, "unit": params.duration_unit.value}

    if params.deadline_date is not None:
        args["deadline"] = {"date": params.deadline_date}

    if not args:
        raise ValidationError("The 'update' action requires at least one field to update")
    return args


def _move_args(params: BulkParams) -> dict[str, Any]:
    """Return the single destination for ``item_move``."""
    destinations = {
        field: getattr(params, field) for field in DESTINATION_FIELDS if getattr(params, field) is not None
    }
    if len(destinations) != 1:
        raise ValidationError(
            "The 'move' action requires exactly one of project_id, section_id, or parent_id"
        )
    field, value = next(iter(destinations.items()))
    if not value:
        raise ValidationError(f"The 'move' destination {field} cannot be blank")
    return destinations


def build_sync_commands(action: BulkAction, task_ids: list[str], params: BulkParams) -> list[SyncCommand]:
    """
    Turn a bulk action into one sync command per task.

    Args:
        action: Bulk action to apply
        task_ids: Normalized (duplicate-free) task IDs
        params: Action parameters

    Returns:
        Commands in task order, each with a fresh correlation uuid

    Raises:
        ValidationError: If params lack what the action requires
    """
    if action == BulkAction.UPDATE:
        shared_args = _update_args(params)
    elif action == BulkAction.MOVE:
        shared_args = _move_args(params)
    else:
        shared_args = {}

    command_type = ACTION_COMMANDS[action]
    return [
        SyncCommand(type=command_type, uuid=new_command_uuid(), args={"id": task_id, **shared_args})
        for task_id in task_ids
    ]


# ============================================================================
# Result Reconciler
# ============================================================================


def reconcile_results(
    task_ids: list[str],
    commands: list[SyncCommand],
    status_map: SyncStatusMap,
) -> BulkOperationSummary:
    """
    Map the sync status of each command back onto its task.

    A task whose command has no entry in ``status_map`` is reported as failed
    with NO_STATUS_MESSAGE; the endpoint does not promise a complete map.

    Args:
        task_ids: Normalized task IDs, in request order
        commands: Commands built for those IDs
        status_map: Parsed ``sync_status`` from the response

    Returns:
        Summary with one OperationResult per task, in ``task_ids`` order
    """
    uuid_by_task = {command.args["id"]: command.uuid for command in commands}

    results: list[OperationResult] = []
    for task_id in task_ids:
        status = status_map.get(uuid_by_task.get(task_id, ""))
        if isinstance(status, SyncOk):
            error = None
        elif isinstance(status, SyncFailed):
            error = status.reason
        else:
            error = NO_STATUS_MESSAGE
        results.append(
            OperationResult(
                task_id=task_id,
                success=error is None,
                error=error,
                resource_uri=task_resource_uri(task_id),
            )
        )

    successful = sum(1 for r in results if r.success)
    return BulkOperationSummary(
        total_tasks=len(results),
        successful=successful,
        failed=len(results) - successful,
        results=results,
    )


# ============================================================================
# Bulk Orchestrator
# ============================================================================


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _pipeline_error(error: TodoistError) -> BulkError:
    return BulkError(
        code=error.code.value,
        message=error.message,
        retryable=error.retryable,
        http_status=error.http_status,
    )


async def execute_bulk(
    request: BulkRequest,
    submitter: SyncSubmitter,
    max_tasks: int = DEFAULT_MAX_TASKS,
) -> BulkTasksResponse:
    """
    Run a bulk request end to end with a single sync call.

    Args:
        request: Action, task IDs and parameters
        submitter: Sends the commands (normally TodoistApiService)
        max_tasks: Upper bound on unique task IDs

    Returns:
        BulkTasksResponse. ``success`` is true even if some tasks failed; it is
        false only when the sync call itself failed, in which case no per-task
        results are reported.

    Raises:
        ValidationError: If the request is too large or lacks required params
    """
    start = time.perf_counter()
    normalized = normalize_task_ids(request.task_ids)

    if normalized.deduplication_applied:
        logger.info(
            "Bulk %s: removed %d duplicate task ID(s)",
            request.action.value,
            normalized.original_count - normalized.deduplicated_count,
        )

    if normalized.deduplicated_count > max_tasks:
        raise ValidationError(f"Maximum {max_tasks} tasks allowed, received {normalized.deduplicated_count}")

    def metadata() -> BulkMetadata:
        return BulkMetadata(
            deduplication_applied=normalized.deduplication_applied,
            original_count=normalized.original_count,
            deduplicated_count=normalized.deduplicated_count,
            execution_time_ms=_elapsed_ms(start),
        )

    if not normalized.task_ids:
        summary = BulkOperationSummary(total_tasks=0, successful=0, failed=0, results=[])
        return BulkTasksResponse(success=True, data=summary, metadata=metadata())

    commands = build_sync_commands(request.action, normalized.task_ids, request.params)
    logger.info("Bulk %s: submitting %d command(s)", request.action.value, len(commands))

    try:
        status_map = await submitter.submit_commands(commands)
    except (TransportError, UpstreamError) as e:
        logger.warning("Bulk %s failed: %s", request.action.value, e.message)
        return BulkTasksResponse(success=False, error=_pipeline_error(e), metadata=metadata())

    summary = reconcile_results(normalized.task_ids, commands, status_map)
    if summary.failed:
        logger.info(
            "Bulk %s: %d of %d task(s) failed", request.action.value, summary.failed, summary.total_tasks
        )
    return BulkTasksResponse(success=True, data=summary, metadata=metadata())

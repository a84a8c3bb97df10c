"""Raw batches of sync commands with temp id resolution.

Unlike a bulk request, a batch mixes command types: a project, its sections
and their tasks can be created together. A command that creates something
carries a ``temp_id``; later commands in the same batch may use that temp id
wherever a real id is expected, and Todoist substitutes the real id while
executing the batch. The real ids come back in ``temp_id_mapping``.
"""

import logging
import time
from typing import Protocol

from todoist_mcp.enums import SyncCommandType
from todoist_mcp.errors import TransportError, UpstreamError
from todoist_mcp.models.bulk import (
    BatchCommandResult,
    BatchResponse,
    BatchSummary,
    SyncCommand,
    SyncFailed,
    SyncOk,
    SyncStatusMap,
)
from todoist_mcp.models.inputs import BatchCommandInput
from todoist_mcp.utils.bulk import NO_STATUS_MESSAGE, _elapsed_ms, _pipeline_error
from todoist_mcp.utils.ids import new_command_uuid

logger = logging.getLogger(__name__)


class BatchSubmitter(Protocol):
    """Anything that can send commands and report statuses plus temp id mapping."""

    async def submit_batch(self, commands: list[SyncCommand]) -> tuple[SyncStatusMap, dict[str, str]]: ...


def build_batch_commands(commands: list[BatchCommandInput]) -> list[SyncCommand]:
    """Wrap each requested command in an envelope with a fresh correlation uuid."""
    return [
        SyncCommand(
            type=SyncCommandType(command.type.value),
            uuid=new_command_uuid(),
            args=command.args,
            temp_id=command.temp_id,
        )
        for command in commands
    ]


def reconcile_batch(
    commands: list[SyncCommand],
    status_map: SyncStatusMap,
    temp_id_mapping: dict[str, str],
) -> BatchSummary:
    """
    Report the outcome of every command in submission order.

    A created resource's real id is filled in from ``temp_id_mapping`` when
    its command succeeded.
    """
    results: list[BatchCommandResult] = []
    for index, command in enumerate(commands):
        status = status_map.get(command.uuid)
        if isinstance(status, SyncOk):
            error = None
        elif isinstance(status, SyncFailed):
            error = status.reason
        else:
            error = NO_STATUS_MESSAGE

        resolved_id = None
        if error is None and command.temp_id is not None:
            resolved_id = temp_id_mapping.get(command.temp_id)

        results.append(
            BatchCommandResult(
                index=index,
                type=command.type.value,
                temp_id=command.temp_id,
                resolved_id=resolved_id,
                success=error is None,
                error=error,
            )
        )

    successful = sum(1 for r in results if r.success)
    return BatchSummary(
        total_commands=len(results),
        successful=successful,
        failed=len(results) - successful,
        results=results,
        temp_id_mapping=temp_id_mapping,
    )


async def execute_batch(commands: list[BatchCommandInput], submitter: BatchSubmitter) -> BatchResponse:
    """
    Run a raw batch with a single sync call.

    Args:
        commands: Validated commands, in execution order
        submitter: Sends the commands (normally TodoistApiService)

    Returns:
        BatchResponse. As with bulk requests, ``success`` stays true when
        individual commands fail and is false only when the call itself failed.
    """
    start = time.perf_counter()
    envelopes = build_batch_commands(commands)
    logger.info("Batch: submitting %d command(s)", len(envelopes))

    try:
        status_map, temp_id_mapping = await submitter.submit_batch(envelopes)
    except (TransportError, UpstreamError) as e:
        logger.warning("Batch failed: %s", e.message)
        return BatchResponse(success=False, error=_pipeline_error(e), execution_time_ms=_elapsed_ms(start))

    summary = reconcile_batch(envelopes, status_map, temp_id_mapping)
    if summary.failed:
        logger.info("Batch: %d of %d command(s) failed", summary.failed, summary.total_commands)
    return BatchResponse(success=True, data=summary, execution_time_ms=_elapsed_ms(start))

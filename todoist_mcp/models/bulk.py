"""Models for bulk task operations."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from todoist_mcp.enums import BulkAction, DurationUnit, SyncCommandType


class BulkParams(BaseModel):
    """Action-specific parameters for a bulk request. Unset fields are left alone."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    # Destinations (move)
    project_id: str | None = Field(default=None, description="Destination project ID (move only)")
    section_id: str | None = Field(default=None, description="Destination section ID (move only)")
    parent_id: str | None = Field(default=None, description="Destination parent task ID (move only)")

    # Fields (update)
    content: str | None = Field(default=None, description="New task title")
    description: str | None = Field(default=None, description="New task description (markdown)")
    priority: int | None = Field(default=None, description="Priority from 1 (normal) to 4 (urgent)", ge=1, le=4)
    labels: list[str] | None = Field(default=None, description="Label names; replaces the current labels")
    order: int | None = Field(default=None, description="Position among sibling tasks")
    assignee_id: str | None = Field(default=None, description="User ID to assign the tasks to (shared projects)")
    due_string: str | None = Field(default=None, description="Natural language due date (e.g., 'next monday')")
    due_date: str | None = Field(
        default=None, description="Due date in YYYY-MM-DD format", pattern=r"^\d{4}-\d{2}-\d{2}$"
    )
    due_datetime: str | None = Field(default=None, description="Due datetime in RFC 3339 format")
    due_lang: str | None = Field(default=None, description="Language code used to parse due_string")
    duration: int | None = Field(default=None, description="Task duration amount (requires duration_unit)", ge=1)
    duration_unit: DurationUnit | None = Field(default=None, description="Duration unit: 'minute' or 'day'")
    deadline_date: str | None = Field(
        default=None, description="Deadline in YYYY-MM-DD format", pattern=r"^\d{4}-\d{2}-\d{2}$"
    )


class BulkRequest(BaseModel):
    """A single batch mutation: one action applied to many task IDs."""

    action: BulkAction
    task_ids: list[str]
    params: BulkParams = Field(default_factory=BulkParams)


class NormalizedTaskSet(BaseModel):
    """Duplicate-free task IDs in first-occurrence order."""

    task_ids: list[str]
    original_count: int
    deduplicated_count: int

    @property
    def deduplication_applied(self) -> bool:
        return self.deduplicated_count != self.original_count


class SyncCommand(BaseModel):
    """One sync API command envelope. ``uuid`` is the correlation id."""

    model_config = ConfigDict(frozen=True)

    type: SyncCommandType
    uuid: str
    args: dict[str, Any]
    temp_id: str | None = None

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class SyncOk(BaseModel):
    """Command executed."""

    status: Literal["ok"] = "ok"


class SyncFailed(BaseModel):
    """Command rejected by the sync endpoint."""

    status: Literal["failed"] = "failed"
    code: str | None = None
    message: str | None = None
    http_code: int | None = None

    @property
    def reason(self) -> str:
        return self.message or self.code or "Unknown error"


SyncStatus = Annotated[Union[SyncOk, SyncFailed], Field(discriminator="status")]

SyncStatusMap = dict[str, SyncStatus]


class OperationResult(BaseModel):
    """Outcome for a single task within a bulk operation."""

    task_id: str
    success: bool
    error: str | None = None
    resource_uri: str

    @model_validator(mode="after")
    def check_error_matches_success(self) -> OperationResult:
        if self.success == (self.error is not None):
            raise ValueError("error must be set if and only if success is false")
        return self


class BulkOperationSummary(BaseModel):
    """Aggregated results for an entire bulk operation."""

    total_tasks: int
    successful: int
    failed: int
    results: list[OperationResult] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_counts(self) -> BulkOperationSummary:
        if self.successful + self.failed != self.total_tasks:
            raise ValueError("successful + failed must equal total_tasks")
        if len(self.results) != self.total_tasks:
            raise ValueError("one result per task is required")
        return self


class BulkMetadata(BaseModel):
    """Deduplication and timing information for a bulk operation."""

    deduplication_applied: bool
    original_count: int
    deduplicated_count: int
    execution_time_ms: int


class BulkError(BaseModel):
    """Top-level failure of a bulk operation."""

    code: str
    message: str
    retryable: bool = False
    http_status: int | None = None


class BulkTasksResponse(BaseModel):
    """Response envelope for the bulk task tool.

    ``success`` stays true under partial failure; it is false only when the
    whole pipeline failed, in which case ``data`` is absent.
    """

    success: bool
    data: BulkOperationSummary | None = None
    error: BulkError | None = None
    metadata: BulkMetadata | None = None


class BatchCommandResult(BaseModel):
    """Outcome for one command of a raw batch, in submission order."""

    index: int
    type: str
    temp_id: str | None = None
    resolved_id: str | None = None
    success: bool
    error: str | None = None


class BatchSummary(BaseModel):
    """Per-command results of a raw batch plus the temp id mapping."""

    total_commands: int
    successful: int
    failed: int
    results: list[BatchCommandResult] = Field(default_factory=list)
    temp_id_mapping: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_counts(self) -> BatchSummary:
        if self.successful + self.failed != self.total_commands:
            raise ValueError("successful + failed must equal total_commands")
        if len(self.results) != self.total_commands:
            raise ValueError("one result per command is required")
        return self


class BatchResponse(BaseModel):
    """Response envelope for the raw batch tool; same success rules as bulk."""

    success: bool
    data: BatchSummary | None = None
    error: BulkError | None = None
    execution_time_ms: int | None = None

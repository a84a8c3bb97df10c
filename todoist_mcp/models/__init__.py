"""Pydantic models for Todoist MCP."""

from todoist_mcp.models.bulk import (
    BatchCommandResult,
    BatchResponse,
    BatchSummary,
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
    SyncStatus,
    SyncStatusMap,
)
from todoist_mcp.models.inputs import (
    ArchiveProjectInput,
    BatchCommandInput,
    BatchCommandsInput,
    BulkTasksInput,
    CompleteTaskInput,
    CreateCommentInput,
    CreateFilterInput,
    CreateLabelInput,
    CreateProjectInput,
    CreateReminderInput,
    CreateSectionInput,
    CreateTaskInput,
    DeleteCommentInput,
    DeleteFilterInput,
    DeleteLabelInput,
    DeleteProjectInput,
    DeleteReminderInput,
    DeleteSectionInput,
    DeleteTaskInput,
    GetCommentInput,
    GetFilterInput,
    GetLabelInput,
    GetProjectInput,
    GetSectionInput,
    GetTaskInput,
    ListCommentsInput,
    ListFiltersInput,
    ListLabelsInput,
    ListProjectsInput,
    ListRemindersInput,
    ListSectionsInput,
    ListTasksInput,
    RemoveSharedLabelInput,
    RenameSharedLabelInput,
    ReopenTaskInput,
    UpdateCommentInput,
    UpdateFilterInput,
    UpdateLabelInput,
    UpdateProjectInput,
    UpdateReminderInput,
    UpdateSectionInput,
    UpdateTaskInput,
)
from todoist_mcp.models.todoist import (
    Deadline,
    Due,
    Duration,
    TodoistComment,
    TodoistFilter,
    TodoistLabel,
    TodoistProject,
    TodoistReminder,
    TodoistSection,
    TodoistTask,
)

__all__ = [
    # Entity models
    "Due",
    "Duration",
    "Deadline",
    "TodoistTask",
    "TodoistProject",
    "TodoistSection",
    "TodoistComment",
    "TodoistLabel",
    "TodoistFilter",
    "TodoistReminder",
    # Bulk models
    "BulkParams",
    "BulkRequest",
    "NormalizedTaskSet",
    "SyncCommand",
    "SyncOk",
    "SyncFailed",
    "SyncStatus",
    "SyncStatusMap",
    "OperationResult",
    "BulkOperationSummary",
    "BulkMetadata",
    "BulkError",
    "BulkTasksResponse",
    "BatchCommandResult",
    "BatchSummary",
    "BatchResponse",
    # Task input models
    "ListTasksInput",
    "GetTaskInput",
    "CreateTaskInput",
    "UpdateTaskInput",
    "DeleteTaskInput",
    "CompleteTaskInput",
    "ReopenTaskInput",
    "BulkTasksInput",
    "BatchCommandInput",
    "BatchCommandsInput",
    # Project input models
    "ListProjectsInput",
    "GetProjectInput",
    "CreateProjectInput",
    "UpdateProjectInput",
    "DeleteProjectInput",
    "ArchiveProjectInput",
    # Section input models
    "ListSectionsInput",
    "GetSectionInput",
    "CreateSectionInput",
    "UpdateSectionInput",
    "DeleteSectionInput",
    # Comment input models
    "ListCommentsInput",
    "GetCommentInput",
    "CreateCommentInput",
    "UpdateCommentInput",
    "DeleteCommentInput",
    # Label input models
    "ListLabelsInput",
    "GetLabelInput",
    "CreateLabelInput",
    "UpdateLabelInput",
    "DeleteLabelInput",
    "RenameSharedLabelInput",
    "RemoveSharedLabelInput",
    # Filter input models
    "ListFiltersInput",
    "GetFilterInput",
    "CreateFilterInput",
    "UpdateFilterInput",
    "DeleteFilterInput",
    # Reminder input models
    "ListRemindersInput",
    "CreateReminderInput",
    "UpdateReminderInput",
    "DeleteReminderInput",
]

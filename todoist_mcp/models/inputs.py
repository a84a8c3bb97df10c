"""Input models for Todoist MCP tools."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from todoist_mcp.enums import (
    BatchCommandType,
    BulkAction,
    DurationUnit,
    LocationTrigger,
    ReminderType,
    ResponseFormat,
)
from todoist_mcp.models.bulk import BulkParams

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
COORDINATE_PATTERN = r"^-?\d{1,3}(\.\d+)?$"
LOCATION_FIELDS = ("name", "loc_lat", "loc_long", "loc_trigger")

# ============================================================================
# Task Input Models
# ============================================================================


class ListTasksInput(BaseModel):
    """Input model for listing tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project_id: str | None = Field(default=None, description="Only tasks in this project")
    section_id: str | None = Field(default=None, description="Only tasks in this section")
    label: str | None = Field(default=None, description="Only tasks with this label name")
    filter: str | None = Field(
        default=None,
        description="Todoist filter query (e.g., 'today', 'overdue', 'p1 & #Work'); overrides the other filters",
    )
    limit: int = Field(default=50, description="Maximum number of tasks to return", ge=1, le=200)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Todoist task ID", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class _TaskFields(BaseModel):
    """Fields shared by task create and update."""

    model_config = ConfigDict(str_strip_whitespace=True)

    description: str | None = Field(default=None, description="Extended task description (markdown)")
    labels: list[str] | None = Field(default=None, description="Label names to set on the task", max_length=100)
    priority: int | None = Field(default=None, description="Priority from 1 (normal) to 4 (urgent)", ge=1, le=4)
    due_string: str | None = Field(default=None, description="Natural language due date (e.g., 'tomorrow 5pm')")
    due_date: str | None = Field(default=None, description="Due date in YYYY-MM-DD format", pattern=DATE_PATTERN)
    due_datetime: str | None = Field(default=None, description="Due datetime in RFC 3339 format")
    due_lang: str | None = Field(default=None, description="Language code used to parse due_string")
    assignee_id: str | None = Field(default=None, description="User ID to assign the task to (shared projects)")
    duration: int | None = Field(default=None, description="Task duration amount", ge=1)
    duration_unit: DurationUnit | None = Field(default=None, description="Duration unit: 'minute' or 'day'")
    deadline_date: str | None = Field(default=None, description="Deadline in YYYY-MM-DD format", pattern=DATE_PATTERN)

    @model_validator(mode="after")
    def validate_duration_pair(self):
        if (self.duration is None) != (self.duration_unit is None):
            raise ValueError("duration and duration_unit must be provided together")
        return self


class CreateTaskInput(_TaskFields):
    """Input model for creating a new task."""

    content: str = Field(..., description="Task title (required)", min_length=1, max_length=500)
    project_id: str | None = Field(default=None, description="Project to create the task in (default: Inbox)")
    section_id: str | None = Field(default=None, description="Section to create the task in")
    parent_id: str | None = Field(default=None, description="Parent task ID to create a subtask")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Content cannot be empty")
        return v.strip()


class UpdateTaskInput(_TaskFields):
    """Input model for updating a task."""

    task_id: str = Field(..., description="Todoist task ID to update", min_length=1)
    content: str | None = Field(default=None, description="New task title", max_length=500)


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Todoist task ID to delete", min_length=1)


class CompleteTaskInput(BaseModel):
    """Input model for completing a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Todoist task ID to complete", min_length=1)


class ReopenTaskInput(BaseModel):
    """Input model for reopening a completed task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Todoist task ID to reopen", min_length=1)


class BulkTasksInput(BulkParams):
    """Input model for bulk task operations."""

    action: BulkAction = Field(..., description="Operation to apply: update, move, complete, or uncomplete")
    task_ids: list[str] = Field(
        ...,
        description="Todoist task IDs. Duplicates are removed before processing.",
        min_length=1,
    )

    @field_validator("task_ids")
    @classmethod
    def validate_task_ids(cls, v: list[str]) -> list[str]:
        cleaned = [tid.strip() for tid in v if tid.strip()]
        if not cleaned:
            raise ValueError("At least one valid task ID is required")
        return cleaned


class BatchCommandInput(BaseModel):
    """One raw sync command inside a batch."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    type: BatchCommandType = Field(..., description="Sync command type (e.g., 'item_add', 'section_add')")
    args: dict[str, Any] = Field(
        default_factory=dict,
        description="Command arguments, e.g. {'content': 'Buy milk', 'project_id': 'tmp_project'}",
    )
    temp_id: str | None = Field(
        default=None,
        description="Client-side ID for a created resource; later commands may use it in place of the real ID",
        min_length=1,
    )

    @model_validator(mode="after")
    def validate_temp_id(self):
        if self.temp_id is not None and not self.type.value.endswith("_add"):
            raise ValueError(f"temp_id is only meaningful for *_add commands, not {self.type.value}")
        return self


class BatchCommandsInput(BaseModel):
    """Input model for a raw batch of sync commands."""

    commands: list[BatchCommandInput] = Field(
        ...,
        description="Commands to run in order within a single sync request",
        min_length=1,
        max_length=100,
    )

    @field_validator("commands")
    @classmethod
    def validate_unique_temp_ids(cls, v: list[BatchCommandInput]) -> list[BatchCommandInput]:
        temp_ids = [c.temp_id for c in v if c.temp_id is not None]
        if len(temp_ids) != len(set(temp_ids)):
            raise ValueError("temp_id values must be unique within a batch")
        return v


# ============================================================================
# Project Input Models
# ============================================================================


class ListProjectsInput(BaseModel):
    """Input model for listing projects."""

    model_config = ConfigDict(str_strip_whitespace=True)

    include_archived: bool = Field(default=False, description="Also list archived projects")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class GetProjectInput(BaseModel):
    """Input model for getting a single project."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project_id: str = Field(..., description="Todoist project ID", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class CreateProjectInput(BaseModel):
    """Input model for creating a project."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., description="Project name", min_length=1, max_length=120)
    parent_id: str | None = Field(default=None, description="Parent project ID for a nested project")
    color: str | None = Field(default=None, description="Color name (e.g., 'berry_red', 'blue')")
    is_favorite: bool | None = Field(default=None, description="Mark the project as favorite")
    view_style: str | None = Field(default=None, description="'list' or 'board'", pattern=r"^(list|board)$")


class UpdateProjectInput(BaseModel):
    """Input model for updating a project."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project_id: str = Field(..., description="Todoist project ID to update", min_length=1)
    name: str | None = Field(default=None, description="New project name", min_length=1, max_length=120)
    color: str | None = Field(default=None, description="New color name")
    is_favorite: bool | None = Field(default=None, description="Favorite flag")
    view_style: str | None = Field(default=None, description="'list' or 'board'", pattern=r"^(list|board)$")


class DeleteProjectInput(BaseModel):
    """Input model for deleting a project."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project_id: str = Field(..., description="Todoist project ID to delete", min_length=1)


class ArchiveProjectInput(BaseModel):
    """Input model for archiving or unarchiving a project."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project_id: str = Field(..., description="Todoist project ID", min_length=1)


# ============================================================================
# Section Input Models
# ============================================================================


class ListSectionsInput(BaseModel):
    """Input model for listing sections."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project_id: str | None = Field(default=None, description="Only sections of this project")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class GetSectionInput(BaseModel):
    """Input model for getting a single section."""

    model_config = ConfigDict(str_strip_whitespace=True)

    section_id: str = Field(..., description="Todoist section ID", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class CreateSectionInput(BaseModel):
    """Input model for creating a section."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., description="Section name", min_length=1, max_length=120)
    project_id: str = Field(..., description="Project to add the section to", min_length=1)
    order: int | None = Field(default=None, description="Position within the project")


class UpdateSectionInput(BaseModel):
    """Input model for renaming a section."""

    model_config = ConfigDict(str_strip_whitespace=True)

    section_id: str = Field(..., description="Todoist section ID", min_length=1)
    name: str = Field(..., description="New section name", min_length=1, max_length=120)


class DeleteSectionInput(BaseModel):
    """Input model for deleting a section."""

    model_config = ConfigDict(str_strip_whitespace=True)

    section_id: str = Field(..., description="Todoist section ID to delete", min_length=1)


# ============================================================================
# Comment Input Models
# ============================================================================


class _CommentTarget(BaseModel):
    """Exactly one of task_id / project_id."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str | None = Field(default=None, description="Task the comments belong to")
    project_id: str | None = Field(default=None, description="Project the comments belong to")

    @model_validator(mode="after")
    def validate_target(self):
        if bool(self.task_id) == bool(self.project_id):
            raise ValueError("Provide exactly one of task_id or project_id")
        return self


class ListCommentsInput(_CommentTarget):
    """Input model for listing comments."""

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class GetCommentInput(BaseModel):
    """Input model for getting a single comment."""

    model_config = ConfigDict(str_strip_whitespace=True)

    comment_id: str = Field(..., description="Todoist comment ID", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class CreateCommentInput(_CommentTarget):
    """Input model for adding a comment."""

    content: str = Field(..., description="Comment text (markdown)", min_length=1, max_length=15000)


class UpdateCommentInput(BaseModel):
    """Input model for editing a comment."""

    model_config = ConfigDict(str_strip_whitespace=True)

    comment_id: str = Field(..., description="Todoist comment ID", min_length=1)
    content: str = Field(..., description="New comment text", min_length=1, max_length=15000)


class DeleteCommentInput(BaseModel):
    """Input model for deleting a comment."""

    model_config = ConfigDict(str_strip_whitespace=True)

    comment_id: str = Field(..., description="Todoist comment ID to delete", min_length=1)


# ============================================================================
# Label Input Models
# ============================================================================


class ListLabelsInput(BaseModel):
    """Input model for listing labels."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class GetLabelInput(BaseModel):
    """Input model for getting a single personal label."""

    model_config = ConfigDict(str_strip_whitespace=True)

    label_id: str = Field(..., description="Todoist label ID", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class CreateLabelInput(BaseModel):
    """Input model for creating a personal label."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., description="Label name (unique)", min_length=1, max_length=128)
    color: str | None = Field(default=None, description="Color name")
    order: int | None = Field(default=None, description="Sort order")
    is_favorite: bool | None = Field(default=None, description="Mark the label as favorite")


class UpdateLabelInput(BaseModel):
    """Input model for updating a personal label."""

    model_config = ConfigDict(str_strip_whitespace=True)

    label_id: str = Field(..., description="Todoist label ID", min_length=1)
    name: str | None = Field(default=None, description="New label name", min_length=1, max_length=128)
    color: str | None = Field(default=None, description="New color name")
    order: int | None = Field(default=None, description="New sort order")
    is_favorite: bool | None = Field(default=None, description="Favorite flag")


class DeleteLabelInput(BaseModel):
    """Input model for deleting a personal label."""

    model_config = ConfigDict(str_strip_whitespace=True)

    label_id: str = Field(..., description="Todoist label ID to delete", min_length=1)


class RenameSharedLabelInput(BaseModel):
    """Input model for renaming a shared label on every task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., description="Current shared label name", min_length=1, max_length=128)
    new_name: str = Field(..., description="New shared label name", min_length=1, max_length=128)


class RemoveSharedLabelInput(BaseModel):
    """Input model for removing a shared label from every task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., description="Shared label name to remove", min_length=1, max_length=128)


# ============================================================================
# Filter Input Models
# ============================================================================


class ListFiltersInput(BaseModel):
    """Input model for listing saved filters."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class GetFilterInput(BaseModel):
    """Input model for getting a single saved filter."""

    model_config = ConfigDict(str_strip_whitespace=True)

    filter_id: str = Field(..., description="Todoist filter ID", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class CreateFilterInput(BaseModel):
    """Input model for creating a saved filter."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., description="Filter name", min_length=1, max_length=120)
    query: str = Field(..., description="Todoist filter query (e.g., 'today | overdue')", min_length=1)
    color: str | None = Field(default=None, description="Color name")
    is_favorite: bool | None = Field(default=None, description="Mark the filter as favorite")


class UpdateFilterInput(BaseModel):
    """Input model for updating a saved filter."""

    model_config = ConfigDict(str_strip_whitespace=True)

    filter_id: str = Field(..., description="Todoist filter ID", min_length=1)
    name: str | None = Field(default=None, description="New filter name", min_length=1, max_length=120)
    query: str | None = Field(default=None, description="New filter query", min_length=1)
    color: str | None = Field(default=None, description="New color name")
    is_favorite: bool | None = Field(default=None, description="Favorite flag")


class DeleteFilterInput(BaseModel):
    """Input model for deleting a saved filter."""

    model_config = ConfigDict(str_strip_whitespace=True)

    filter_id: str = Field(..., description="Todoist filter ID to delete", min_length=1)


# ============================================================================
# Reminder Input Models
# ============================================================================


class ListRemindersInput(BaseModel):
    """Input model for listing reminders."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str | None = Field(default=None, description="Only reminders of this task")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class _ReminderFields(BaseModel):
    """Trigger fields for the three reminder types."""

    model_config = ConfigDict(str_strip_whitespace=True)

    minute_offset: int | None = Field(
        default=None, description="Minutes before the due time (relative reminders)", ge=0, le=43200
    )
    due_string: str | None = Field(default=None, description="When to remind, natural language (absolute reminders)")
    due_datetime: str | None = Field(default=None, description="When to remind, RFC 3339 (absolute reminders)")
    name: str | None = Field(default=None, description="Place name (location reminders)", max_length=120)
    loc_lat: str | None = Field(
        default=None, description="Latitude, e.g. '52.5200' (location reminders)", pattern=COORDINATE_PATTERN
    )
    loc_long: str | None = Field(
        default=None, description="Longitude, e.g. '13.4050' (location reminders)", pattern=COORDINATE_PATTERN
    )
    loc_trigger: LocationTrigger | None = Field(
        default=None, description="'on_enter' or 'on_leave' (location reminders)"
    )
    radius: int | None = Field(default=None, description="Radius in meters (location reminders)", ge=1)


class CreateReminderInput(_ReminderFields):
    """Input model for adding a reminder to a task."""

    task_id: str = Field(..., description="Task to remind about", min_length=1)
    type: ReminderType = Field(
        ..., description="'relative' (before due time), 'absolute' (fixed time) or 'location' (geofenced)"
    )

    @model_validator(mode="after")
    def validate_type_fields(self):
        if self.type == ReminderType.RELATIVE and self.minute_offset is None:
            raise ValueError("minute_offset is required for relative reminders")
        if self.type == ReminderType.ABSOLUTE and not (self.due_string or self.due_datetime):
            raise ValueError("due_string or due_datetime is required for absolute reminders")
        if self.type == ReminderType.LOCATION:
            missing = [f for f in LOCATION_FIELDS if getattr(self, f) is None]
            if missing:
                raise ValueError(f"Location reminders require {', '.join(missing)}")
        return self


class UpdateReminderInput(_ReminderFields):
    """Input model for changing an existing reminder."""

    reminder_id: str = Field(..., description="Todoist reminder ID to update", min_length=1)
    type: ReminderType | None = Field(default=None, description="New reminder type")


class DeleteReminderInput(BaseModel):
    """Input model for deleting a reminder."""

    model_config = ConfigDict(str_strip_whitespace=True)

    reminder_id: str = Field(..., description="Todoist reminder ID to delete", min_length=1)

"""Enums for Todoist MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class BulkAction(str, Enum):
    """Actions supported by the bulk task tool."""

    UPDATE = "update"
    MOVE = "move"
    COMPLETE = "complete"
    UNCOMPLETE = "uncomplete"


class SyncCommandType(str, Enum):
    """Sync API command types issued by this server."""

    ITEM_ADD = "item_add"
    ITEM_UPDATE = "item_update"
    ITEM_MOVE = "item_move"
    ITEM_DELETE = "item_delete"
    ITEM_COMPLETE = "item_complete"
    ITEM_UNCOMPLETE = "item_uncomplete"
    PROJECT_ADD = "project_add"
    PROJECT_UPDATE = "project_update"
    PROJECT_DELETE = "project_delete"
    PROJECT_ARCHIVE = "project_archive"
    SECTION_ADD = "section_add"
    SECTION_UPDATE = "section_update"
    SECTION_DELETE = "section_delete"
    REMINDER_ADD = "reminder_add"
    REMINDER_UPDATE = "reminder_update"
    REMINDER_DELETE = "reminder_delete"
    FILTER_ADD = "filter_add"
    FILTER_UPDATE = "filter_update"
    FILTER_DELETE = "filter_delete"
    SHARED_LABEL_RENAME = "shared_label_rename"
    SHARED_LABEL_REMOVE = "shared_label_remove"


class BatchCommandType(str, Enum):
    """Sync command types accepted by the raw batch tool."""

    ITEM_ADD = "item_add"
    ITEM_UPDATE = "item_update"
    ITEM_DELETE = "item_delete"
    ITEM_COMPLETE = "item_complete"
    ITEM_UNCOMPLETE = "item_uncomplete"
    PROJECT_ADD = "project_add"
    PROJECT_UPDATE = "project_update"
    PROJECT_DELETE = "project_delete"
    PROJECT_ARCHIVE = "project_archive"
    SECTION_ADD = "section_add"
    SECTION_UPDATE = "section_update"
    SECTION_DELETE = "section_delete"


class DurationUnit(str, Enum):
    """Task duration units."""

    MINUTE = "minute"
    DAY = "day"


class ReminderType(str, Enum):
    """Reminder kinds."""

    RELATIVE = "relative"  # minutes before the task is due
    ABSOLUTE = "absolute"  # specific date/time
    LOCATION = "location"  # entering or leaving an area


class LocationTrigger(str, Enum):
    """When a location reminder fires."""

    ON_ENTER = "on_enter"
    ON_LEAVE = "on_leave"


class ErrorCode(str, Enum):
    """Stable error codes surfaced to tool callers."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PARAMS = "INVALID_PARAMS"
    INVALID_REQUEST = "INVALID_REQUEST"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INVALID_TOKEN = "INVALID_TOKEN"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    SYNC_ERROR = "SYNC_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

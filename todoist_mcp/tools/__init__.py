"""MCP tool definitions for Todoist."""

# Import all tools to register them with the MCP server
from todoist_mcp.tools.batch import todoist_batch_commands
from todoist_mcp.tools.bulk import todoist_bulk_tasks
from todoist_mcp.tools.comments import (
    todoist_create_comment,
    todoist_delete_comment,
    todoist_get_comment,
    todoist_list_comments,
    todoist_update_comment,
)
from todoist_mcp.tools.labels import (
    todoist_create_filter,
    todoist_create_label,
    todoist_delete_filter,
    todoist_delete_label,
    todoist_get_filter,
    todoist_get_label,
    todoist_list_filters,
    todoist_list_labels,
    todoist_remove_shared_label,
    todoist_rename_shared_label,
    todoist_update_filter,
    todoist_update_label,
)
from todoist_mcp.tools.projects import (
    todoist_archive_project,
    todoist_create_project,
    todoist_create_section,
    todoist_delete_project,
    todoist_delete_section,
    todoist_get_project,
    todoist_get_section,
    todoist_list_projects,
    todoist_list_sections,
    todoist_unarchive_project,
    todoist_update_project,
    todoist_update_section,
)
from todoist_mcp.tools.reminders import (
    todoist_create_reminder,
    todoist_delete_reminder,
    todoist_list_reminders,
    todoist_update_reminder,
)
from todoist_mcp.tools.tasks import (
    todoist_complete_task,
    todoist_create_task,
    todoist_delete_task,
    todoist_get_task,
    todoist_list_tasks,
    todoist_reopen_task,
    todoist_update_task,
)

__all__ = [
    # Task tools
    "todoist_list_tasks",
    "todoist_get_task",
    "todoist_create_task",
    "todoist_update_task",
    "todoist_delete_task",
    "todoist_complete_task",
    "todoist_reopen_task",
    "todoist_bulk_tasks",
    "todoist_batch_commands",
    # Project and section tools
    "todoist_list_projects",
    "todoist_get_project",
    "todoist_create_project",
    "todoist_update_project",
    "todoist_delete_project",
    "todoist_archive_project",
    "todoist_unarchive_project",
    "todoist_list_sections",
    "todoist_get_section",
    "todoist_create_section",
    "todoist_update_section",
    "todoist_delete_section",
    # Comment tools
    "todoist_list_comments",
    "todoist_get_comment",
    "todoist_create_comment",
    "todoist_update_comment",
    "todoist_delete_comment",
    # Label and filter tools
    "todoist_list_labels",
    "todoist_get_label",
    "todoist_create_label",
    "todoist_update_label",
    "todoist_delete_label",
    "todoist_rename_shared_label",
    "todoist_remove_shared_label",
    "todoist_list_filters",
    "todoist_get_filter",
    "todoist_create_filter",
    "todoist_update_filter",
    "todoist_delete_filter",
    # Reminder tools
    "todoist_list_reminders",
    "todoist_create_reminder",
    "todoist_update_reminder",
    "todoist_delete_reminder",
]

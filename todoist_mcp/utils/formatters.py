"""Formatting utilities for tool output."""

import json
from typing import Any

from pydantic import BaseModel

from todoist_mcp.errors import ConfigurationError, RateLimitError, TodoistError, TransportError
from todoist_mcp.models.todoist import (
    TodoistComment,
    TodoistFilter,
    TodoistLabel,
    TodoistProject,
    TodoistReminder,
    TodoistSection,
    TodoistTask,
)

# Todoist stores priority 4 as the most urgent ("p1" in the apps)
PRIORITY_NAMES = {4: "Urgent (p1)", 3: "High (p2)", 2: "Medium (p3)", 1: "Normal (p4)"}


def _format_json(data: BaseModel | list[BaseModel] | dict[str, Any]) -> str:
    """Serialize a model, a list of models, or a plain dict as indented JSON."""
    if isinstance(data, BaseModel):
        return json.dumps(data.model_dump(mode="json"), indent=2)
    if isinstance(data, list):
        return json.dumps([item.model_dump(mode="json") for item in data], indent=2)
    return json.dumps(data, indent=2)


def _format_error(e: Exception) -> str:
    """
    Consistent error formatting across all tools with actionable messages.

    Args:
        e: Exception to format

    Returns:
        Human-readable error message with guidance
    """
    if isinstance(e, ConfigurationError):
        return f"Error: {e.message}"
    if isinstance(e, RateLimitError):
        wait = f" Retry after {e.retry_after} seconds." if e.retry_after else ""
        return f"Error: {e.message}.{wait}"
    if isinstance(e, TransportError):
        return f"Error: {e.message}. Check your internet connection and try again."
    if isinstance(e, TodoistError):
        status = f" (HTTP {e.http_status})" if e.http_status else ""
        hint = " This may be temporary; try again shortly." if e.retryable else ""
        return f"Error [{e.code.value}]{status}: {e.message}.{hint}"
    return f"Error: Unexpected error - {type(e).__name__}: {str(e)}"


def _format_task_markdown(task: TodoistTask) -> str:
    """Format a single task as markdown."""
    icon = "✅" if task.checked else "⬜"
    lines = [f"### {icon} [{task.id}] {task.content or 'No content'}"]

    details = []
    if task.priority > 1:
        details.append(f"**Priority**: {PRIORITY_NAMES.get(task.priority, task.priority)}")
    if task.due:
        due = task.due.string or task.due.datetime or task.due.date
        recurring = " (recurring)" if task.due.is_recurring else ""
        details.append(f"**Due**: {due}{recurring}")
    if task.deadline:
        details.append(f"**Deadline**: {task.deadline.date}")
    if task.duration:
        details.append(f"**Duration**: {task.duration.amount} {task.duration.unit}(s)")
    if task.labels:
        details.append(f"**Labels**: {', '.join(task.labels)}")
    if task.project_id:
        details.append(f"**Project**: {task.project_id}")
    if task.section_id:
        details.append(f"**Section**: {task.section_id}")

    if details:
        lines.append(" | ".join(details))
    if task.description:
        lines.append(task.description)
    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TodoistTask], title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]
    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")
    return "\n".join(lines)


def _format_projects_markdown(projects: list[TodoistProject]) -> str:
    if not projects:
        return "# Projects\n\nNo projects found."

    lines = ["# Projects", ""]
    for project in projects:
        flags = []
        if project.inbox_project:
            flags.append("inbox")
        if project.is_favorite:
            flags.append("favorite")
        if project.is_shared:
            flags.append("shared")
        if project.is_archived:
            flags.append("archived")
        suffix = f" ({', '.join(flags)})" if flags else ""
        indent = "  " if project.parent_id else ""
        lines.append(f"{indent}- **{project.name}** [{project.id}]{suffix}")
    return "\n".join(lines)


def _format_project_markdown(project: TodoistProject) -> str:
    lines = [f"# {project.name}", f"- **ID**: {project.id}"]
    if project.parent_id:
        lines.append(f"- **Parent**: {project.parent_id}")
    if project.color:
        lines.append(f"- **Color**: {project.color}")
    if project.view_style:
        lines.append(f"- **View**: {project.view_style}")
    if project.url:
        lines.append(f"- **URL**: {project.url}")
    return "\n".join(lines)


def _format_sections_markdown(sections: list[TodoistSection]) -> str:
    if not sections:
        return "# Sections\n\nNo sections found."
    lines = ["# Sections", ""]
    lines.extend(f"- **{s.name}** [{s.id}] (project {s.project_id})" for s in sections)
    return "\n".join(lines)


def _format_section_markdown(section: TodoistSection) -> str:
    lines = [f"# {section.name}", f"- **ID**: {section.id}"]
    if section.project_id:
        lines.append(f"- **Project**: {section.project_id}")
    if section.section_order is not None:
        lines.append(f"- **Order**: {section.section_order}")
    return "\n".join(lines)


def _format_comments_markdown(comments: list[TodoistComment]) -> str:
    if not comments:
        return "# Comments\n\nNo comments found."
    lines = ["# Comments", ""]
    for comment in comments:
        posted = f" ({comment.posted_at[:10]})" if comment.posted_at else ""
        lines.append(f"- [{comment.id}]{posted} {comment.content}")
    return "\n".join(lines)


def _format_comment_markdown(comment: TodoistComment) -> str:
    lines = [f"# Comment {comment.id}"]
    if comment.item_id:
        lines.append(f"- **Task**: {comment.item_id}")
    if comment.project_id:
        lines.append(f"- **Project**: {comment.project_id}")
    if comment.posted_at:
        lines.append(f"- **Posted**: {comment.posted_at}")
    lines.extend(["", comment.content])
    return "\n".join(lines)


def _format_labels_markdown(labels: list[TodoistLabel]) -> str:
    if not labels:
        return "# Labels\n\nNo labels found."
    lines = ["# Labels", ""]
    lines.extend(f"- **{label.name}** [{label.id}]" for label in labels)
    return "\n".join(lines)


def _format_label_markdown(label: TodoistLabel) -> str:
    lines = [f"# {label.name}", f"- **ID**: {label.id}"]
    if label.color:
        lines.append(f"- **Color**: {label.color}")
    if label.is_favorite:
        lines.append("- **Favorite**: yes")
    return "\n".join(lines)


def _format_filters_markdown(filters: list[TodoistFilter]) -> str:
    if not filters:
        return "# Filters\n\nNo filters found."
    lines = ["# Filters", ""]
    lines.extend(f"- **{f.name}** [{f.id}]: `{f.query}`" for f in filters)
    return "\n".join(lines)


def _format_filter_markdown(saved_filter: TodoistFilter) -> str:
    lines = [f"# {saved_filter.name}", f"- **ID**: {saved_filter.id}", f"- **Query**: `{saved_filter.query}`"]
    if saved_filter.color:
        lines.append(f"- **Color**: {saved_filter.color}")
    if saved_filter.is_favorite:
        lines.append("- **Favorite**: yes")
    return "\n".join(lines)


def _format_reminders_markdown(reminders: list[TodoistReminder]) -> str:
    if not reminders:
        return "# Reminders\n\nNo reminders found."

    lines = ["# Reminders", ""]
    for reminder in reminders:
        if reminder.type == "relative" and reminder.minute_offset is not None:
            when = f"{reminder.minute_offset} min before due"
        elif reminder.type == "location":
            trigger = "leaving" if reminder.loc_trigger == "on_leave" else "arriving at"
            radius = f" ({reminder.radius} m)" if reminder.radius else ""
            when = f"{trigger} {reminder.name or 'location'}{radius}"
        elif reminder.due:
            when = reminder.due.string or reminder.due.datetime or reminder.due.date or "?"
        else:
            when = "?"
        lines.append(f"- [{reminder.id}] task {reminder.item_id}: {when}")
    return "\n".join(lines)

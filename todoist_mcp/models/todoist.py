"""Todoist entity models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Due(BaseModel):
    """Due date attached to a task or reminder."""

    model_config = ConfigDict(extra="allow")

    date: str | None = None
    datetime: str | None = None
    string: str | None = None
    timezone: str | None = None
    is_recurring: bool = False
    lang: str | None = None


class Duration(BaseModel):
    """Estimated task duration."""

    amount: int
    unit: str


class Deadline(BaseModel):
    """Fixed deadline date; unlike ``due`` it does not recur."""

    model_config = ConfigDict(extra="allow")

    date: str


class TodoistTask(BaseModel):
    """Model representing a Todoist task with all its attributes."""

    model_config = ConfigDict(extra="allow")

    id: str
    content: str = ""
    description: str = ""
    project_id: str | None = None
    section_id: str | None = None
    parent_id: str | None = None
    child_order: int | None = None
    priority: int = 1
    labels: list[str] = Field(default_factory=list)
    responsible_uid: str | None = None
    checked: bool = False
    due: Due | None = None
    duration: Duration | None = None
    deadline: Deadline | None = None
    note_count: int = 0
    added_at: str | None = None
    url: str | None = None


class TodoistProject(BaseModel):
    """Container for tasks and sections."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    color: str | None = None
    parent_id: str | None = None
    is_favorite: bool = False
    is_shared: bool = False
    is_archived: bool = False
    inbox_project: bool = False
    view_style: str | None = None
    url: str | None = None


class TodoistSection(BaseModel):
    """Subdivision within a project."""

    model_config = ConfigDict(extra="allow")

    id: str
    project_id: str | None = None
    name: str = ""
    section_order: int | None = None


class TodoistComment(BaseModel):
    """Comment (note) attached to a task or project."""

    model_config = ConfigDict(extra="allow")

    id: str
    item_id: str | None = None
    project_id: str | None = None
    content: str = ""
    posted_at: str | None = None


class TodoistLabel(BaseModel):
    """Personal label."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    color: str | None = None
    order: int | None = None
    is_favorite: bool = False


class TodoistFilter(BaseModel):
    """Saved query."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    query: str = ""
    color: str | None = None
    item_order: int | None = None
    is_favorite: bool = False


class TodoistReminder(BaseModel):
    """Time- or location-based reminder on a task."""

    model_config = ConfigDict(extra="allow")

    id: str
    item_id: str | None = None
    type: str | None = None
    minute_offset: int | None = None
    due: Due | None = None
    name: str | None = None
    loc_lat: str | None = None
    loc_long: str | None = None
    loc_trigger: str | None = None
    radius: int | None = None
    is_deleted: bool = False

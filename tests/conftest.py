"""Pytest configuration and fixtures for todoist-mcp tests."""

from unittest.mock import patch

import httpx
import pytest

from todoist_mcp.config import TodoistConfig
from todoist_mcp.utils.api import TodoistApiService
from todoist_mcp.utils.parsers import _parse_sync_status

TEST_TOKEN = "test-token-0123456789abcdef"


class FakeSubmitter:
    """Records submitted command batches and answers with canned statuses.

    ``statuses`` maps a task ID to the raw ``sync_status`` entry for its
    command; tasks not in the map get ``default`` and a value of None leaves
    the entry out. Set ``error`` to make the call fail as a whole.
    """

    def __init__(self, statuses=None, default="ok", error=None):
        self.statuses = statuses or {}
        self.default = default
        self.error = error
        self.batches = []

    async def submit_commands(self, commands):
        self.batches.append(list(commands))
        if self.error is not None:
            raise self.error

        raw = {}
        for command in commands:
            task_id = command.args["id"]
            entry = self.statuses.get(task_id, self.default)
            if entry is not None:
                raw[command.uuid] = entry
        return _parse_sync_status(raw)


@pytest.fixture
def config():
    """Configuration with a valid token and defaults elsewhere."""
    return TodoistConfig(api_token=TEST_TOKEN)


@pytest.fixture
def make_service(config):
    """Factory: a TodoistApiService whose requests go to ``handler``."""

    def _make(handler, **overrides):
        cfg = config.model_copy(update=overrides) if overrides else config
        return TodoistApiService(cfg, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def use_service():
    """Install a service as the process-wide instance used by the tools."""
    patchers = []

    def _use(service):
        patcher = patch("todoist_mcp.utils.api._service", service)
        patcher.start()
        patchers.append(patcher)
        return service

    yield _use

    for patcher in patchers:
        patcher.stop()


@pytest.fixture
def sample_task():
    """A single task as returned by the REST API."""
    return {
        "id": "6X7rM8997g3RQmvh",
        "content": "Buy milk",
        "description": "Whole milk",
        "project_id": "6Jf8VQXxpwv56VQ7",
        "section_id": None,
        "parent_id": None,
        "child_order": 1,
        "priority": 4,
        "labels": ["errands"],
        "checked": False,
        "due": {
            "date": "2025-02-01",
            "string": "tomorrow",
            "lang": "en",
            "is_recurring": False,
        },
        "deadline": {"date": "2025-02-03"},
        "note_count": 0,
        "added_at": "2025-01-30T10:00:00Z",
    }


@pytest.fixture
def sample_tasks(sample_task):
    """Three tasks as returned by the REST API."""
    return [
        sample_task,
        {"id": "2", "content": "Write report", "project_id": "6Jf8VQXxpwv56VQ7", "priority": 1},
        {"id": "3", "content": "Call mom", "project_id": "7", "priority": 2, "labels": ["family"]},
    ]


@pytest.fixture
def fake_submitter():
    """Factory for FakeSubmitter instances."""
    return FakeSubmitter

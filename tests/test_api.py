"""Tests for the Todoist HTTP client."""

import json
from unittest.mock import patch

import httpx
import pytest

from todoist_mcp.enums import ErrorCode, SyncCommandType
from todoist_mcp.errors import (
    AuthenticationError,
    ConfigurationError,
    NotFoundError,
    RateLimitError,
    ServiceUnavailableError,
    TransportError,
    UpstreamError,
)
from todoist_mcp.models.bulk import SyncCommand, SyncFailed, SyncOk
from todoist_mcp.utils.api import get_api_service


def _fixed(status_code, **kwargs):
    """Handler that always answers with the same response."""

    def handler(request):
        return httpx.Response(status_code, **kwargs)

    return handler


class TestRequests:
    """Tests for request construction and decoding."""

    @pytest.mark.asyncio
    async def test_headers_and_url(self, make_service, config, sample_task):
        """Test that requests carry the token and hit the v1 base URL."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=sample_task)

        service = make_service(handler)
        task = await service.get_task("6X7rM8997g3RQmvh")

        assert task["content"] == "Buy milk"
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/api/v1/tasks/6X7rM8997g3RQmvh"
        assert seen[0].headers["Authorization"] == f"Bearer {config.api_token}"
        assert seen[0].headers["User-Agent"].startswith("todoist-mcp/")

    @pytest.mark.asyncio
    async def test_no_content(self, make_service):
        """Test that a 204 response decodes to None."""
        service = make_service(_fixed(204))
        assert await service.delete_task("1") is None

    @pytest.mark.asyncio
    async def test_body_without_none_values(self, make_service):
        """Test that None fields are not sent."""
        bodies = []

        def handler(request):
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"id": "1", "content": "x"})

        await make_service(handler).create_task({"content": "x", "priority": None, "labels": ["a"]})
        assert bodies[0] == {"content": "x", "labels": ["a"]}

    @pytest.mark.asyncio
    async def test_query_params_skip_none(self, make_service):
        """Test that unset filters are not sent as query parameters."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"results": [], "next_cursor": None})

        await make_service(handler).get_tasks(project_id="p1")
        params = dict(seen[0].url.params)
        assert params == {"project_id": "p1"}

    @pytest.mark.asyncio
    async def test_non_json_body(self, make_service):
        """Test that an undecodable success body is an upstream error."""
        service = make_service(_fixed(200, text="<html>oops</html>"))
        with pytest.raises(UpstreamError, match="not JSON"):
            await service.get_task("1")


class TestPagination:
    """Tests for cursor-based pagination."""

    @pytest.mark.asyncio
    async def test_follows_cursor(self, make_service):
        """Test that all pages are collected."""

        def handler(request):
            if request.url.params.get("cursor") == "page2":
                return httpx.Response(200, json={"results": [{"id": "3"}], "next_cursor": None})
            return httpx.Response(200, json={"results": [{"id": "1"}, {"id": "2"}], "next_cursor": "page2"})

        tasks = await make_service(handler).get_tasks()
        assert [t["id"] for t in tasks] == ["1", "2", "3"]

    @pytest.mark.asyncio
    async def test_stops_at_limit(self, make_service):
        """Test that pagination stops once the limit is reached."""
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(
                200, json={"results": [{"id": str(i)} for i in range(3)], "next_cursor": "more"}
            )

        tasks = await make_service(handler).get_tasks(limit=2)
        assert len(tasks) == 2
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_plain_list_body(self, make_service):
        """Test an endpoint that answers with a bare list."""
        service = make_service(_fixed(200, json=[{"id": "1"}]))
        assert await service.get_labels() == [{"id": "1"}]

    @pytest.mark.asyncio
    async def test_filter_query(self, make_service):
        """Test that filter queries use the filter endpoint."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"results": [], "next_cursor": None})

        await make_service(handler).get_tasks_by_filter("today | overdue")
        assert seen[0].url.path == "/api/v1/tasks/filter"
        assert seen[0].url.params["query"] == "today | overdue"


class TestErrorMapping:
    """Tests for translating HTTP failures into exceptions."""

    @pytest.mark.asyncio
    async def test_unauthorized(self, make_service):
        """Test 401 handling."""
        with pytest.raises(AuthenticationError) as exc_info:
            await make_service(_fixed(401, json={"error": "Unauthorized"})).get_task("1")
        assert exc_info.value.code == ErrorCode.INVALID_TOKEN
        assert exc_info.value.http_status == 401
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_forbidden(self, make_service):
        """Test 403 handling."""
        with pytest.raises(AuthenticationError) as exc_info:
            await make_service(_fixed(403)).get_task("1")
        assert exc_info.value.code == ErrorCode.INSUFFICIENT_PERMISSIONS

    @pytest.mark.asyncio
    async def test_not_found(self, make_service):
        """Test 404 handling."""
        with pytest.raises(NotFoundError) as exc_info:
            await make_service(_fixed(404, text="Task not found")).get_task("1")
        assert exc_info.value.code == ErrorCode.RESOURCE_NOT_FOUND
        assert exc_info.value.body == "Task not found"

    @pytest.mark.asyncio
    async def test_rate_limited(self, make_service):
        """Test 429 handling with a Retry-After header."""
        service = make_service(_fixed(429, headers={"Retry-After": "30"}, json={}))
        with pytest.raises(RateLimitError) as exc_info:
            await service.get_task("1")
        assert exc_info.value.retry_after == 30
        assert exc_info.value.retryable is True
        assert exc_info.value.to_dict()["retry_after"] == 30

    @pytest.mark.asyncio
    async def test_bad_request_uses_remote_message(self, make_service):
        """Test that a 400 surfaces the API's own error text."""
        service = make_service(_fixed(400, json={"error": "Invalid argument value"}))
        with pytest.raises(UpstreamError, match="Invalid argument value") as exc_info:
            await service.create_task({"content": "x"})
        assert exc_info.value.code == ErrorCode.INVALID_REQUEST
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_server_error(self, make_service):
        """Test 5xx handling."""
        with pytest.raises(ServiceUnavailableError) as exc_info:
            await make_service(_fixed(502)).get_task("1")
        assert exc_info.value.retryable is True
        assert exc_info.value.code == ErrorCode.SERVICE_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_timeout(self, make_service):
        """Test that a timeout becomes a retryable transport error."""

        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TransportError) as exc_info:
            await make_service(handler, timeout_ms=2000).get_task("1")
        assert exc_info.value.code == ErrorCode.TIMEOUT_ERROR
        assert exc_info.value.retryable is True
        assert "2s" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_connection_refused(self, make_service):
        """Test that a connection failure becomes a transport error."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError) as exc_info:
            await make_service(handler).get_task("1")
        assert exc_info.value.code == ErrorCode.NETWORK_ERROR


class TestSync:
    """Tests for the sync endpoint."""

    @pytest.mark.asyncio
    async def test_submit_commands_payload(self, make_service):
        """Test that all commands go out in one request and statuses come back parsed."""
        bodies = []

        def handler(request):
            body = json.loads(request.content)
            bodies.append(body)
            return httpx.Response(
                200,
                json={
                    "sync_status": {
                        "u1": "ok",
                        "u2": {"error": "TASK_NOT_FOUND", "error_message": "Task not found", "error_code": 404},
                    },
                    "temp_id_mapping": {},
                },
            )

        commands = [
            SyncCommand(type=SyncCommandType.ITEM_COMPLETE, uuid="u1", args={"id": "1"}),
            SyncCommand(type=SyncCommandType.ITEM_COMPLETE, uuid="u2", args={"id": "2"}),
        ]
        status_map = await make_service(handler).submit_commands(commands)

        assert len(bodies) == 1
        assert bodies[0] == {
            "commands": [
                {"type": "item_complete", "uuid": "u1", "args": {"id": "1"}},
                {"type": "item_complete", "uuid": "u2", "args": {"id": "2"}},
            ]
        }
        assert isinstance(status_map["u1"], SyncOk)
        assert isinstance(status_map["u2"], SyncFailed)
        assert status_map["u2"].reason == "Task not found"
        assert status_map["u2"].http_code == 404

    @pytest.mark.asyncio
    async def test_submit_commands_without_status(self, make_service):
        """Test that a response without sync_status yields an empty map."""
        service = make_service(_fixed(200, json={"full_sync": False}))
        command = SyncCommand(type=SyncCommandType.ITEM_COMPLETE, uuid="u1", args={"id": "1"})
        assert await service.submit_commands([command]) == {}

    @pytest.mark.asyncio
    async def test_submit_batch_returns_temp_id_mapping(self, make_service):
        """Test that batches keep temp_id on the wire and return the id mapping."""
        bodies = []

        def handler(request):
            bodies.append(json.loads(request.content))
            return httpx.Response(
                200,
                json={"sync_status": {"u1": "ok"}, "temp_id_mapping": {"tmp_p": "6Jf8VQXxpwv56VQ7"}},
            )

        command = SyncCommand(type=SyncCommandType.PROJECT_ADD, uuid="u1", temp_id="tmp_p", args={"name": "Move"})
        status_map, mapping = await make_service(handler).submit_batch([command])

        assert bodies[0]["commands"][0] == {
            "type": "project_add",
            "uuid": "u1",
            "temp_id": "tmp_p",
            "args": {"name": "Move"},
        }
        assert isinstance(status_map["u1"], SyncOk)
        assert mapping == {"tmp_p": "6Jf8VQXxpwv56VQ7"}

    @pytest.mark.asyncio
    async def test_submit_batch_without_mapping(self, make_service):
        """Test that a missing temp_id_mapping yields an empty mapping."""
        service = make_service(_fixed(200, json={"sync_status": {"u1": "ok"}}))
        command = SyncCommand(type=SyncCommandType.ITEM_DELETE, uuid="u1", args={"id": "1"})
        _, mapping = await service.submit_batch([command])
        assert mapping == {}

    @pytest.mark.asyncio
    async def test_sync_rejects_non_object(self, make_service):
        """Test that an unexpected response shape is an upstream error."""
        service = make_service(_fixed(200, json=["unexpected"]))
        with pytest.raises(UpstreamError):
            await service.sync({"commands": []})

    @pytest.mark.asyncio
    async def test_sync_http_failure(self, make_service):
        """Test that HTTP failures of the sync call raise."""
        command = SyncCommand(type=SyncCommandType.ITEM_COMPLETE, uuid="u1", args={"id": "1"})
        with pytest.raises(ServiceUnavailableError):
            await make_service(_fixed(503)).submit_commands([command])


class TestFiltersAndReminders:
    """Tests for resources managed through sync commands."""

    @pytest.mark.asyncio
    async def test_create_filter_returns_real_id(self, make_service):
        """Test that the temp id is resolved through temp_id_mapping."""

        def handler(request):
            command = json.loads(request.content)["commands"][0]
            assert command["type"] == "filter_add"
            assert command["args"] == {"name": "Urgent", "query": "p1"}
            return httpx.Response(
                200,
                json={
                    "sync_status": {command["uuid"]: "ok"},
                    "temp_id_mapping": {command["temp_id"]: "4638878"},
                },
            )

        filter_id = await make_service(handler).create_filter({"name": "Urgent", "query": "p1", "color": None})
        assert filter_id == "4638878"

    @pytest.mark.asyncio
    async def test_rejected_command_raises(self, make_service):
        """Test that a rejected single command is an error."""

        def handler(request):
            command = json.loads(request.content)["commands"][0]
            return httpx.Response(
                200,
                json={
                    "sync_status": {
                        command["uuid"]: {"error": "INVALID_ARGUMENT", "error_message": "Invalid query", "error_code": 400}
                    }
                },
            )

        with pytest.raises(UpstreamError, match="filter_add failed: Invalid query") as exc_info:
            await make_service(handler).create_filter({"name": "Bad", "query": "(("})
        assert exc_info.value.http_status == 400

    @pytest.mark.asyncio
    async def test_missing_status_raises(self, make_service):
        """Test that a single command without a status entry is an error."""
        service = make_service(_fixed(200, json={"sync_status": {}}))
        with pytest.raises(UpstreamError, match="No status returned"):
            await service.delete_filter("1")

    @pytest.mark.asyncio
    async def test_update_filter_args(self, make_service):
        """Test the filter_update command arguments."""
        bodies = []

        def handler(request):
            body = json.loads(request.content)
            bodies.append(body)
            return httpx.Response(200, json={"sync_status": {body["commands"][0]["uuid"]: "ok"}})

        await make_service(handler).update_filter("9", {"query": "today"})
        assert bodies[0]["commands"][0]["type"] == "filter_update"
        assert bodies[0]["commands"][0]["args"] == {"id": "9", "query": "today"}

    @pytest.mark.asyncio
    async def test_get_filters_skips_deleted(self, make_service):
        """Test that deleted filters are hidden."""
        bodies = []

        def handler(request):
            bodies.append(json.loads(request.content))
            return httpx.Response(
                200,
                json={
                    "filters": [
                        {"id": "1", "name": "Work", "query": "#Work"},
                        {"id": "2", "name": "Old", "query": "p4", "is_deleted": True},
                    ]
                },
            )

        filters = await make_service(handler).get_filters()
        assert [f["id"] for f in filters] == ["1"]
        assert bodies[0] == {"sync_token": "*", "resource_types": ["filters"]}

    @pytest.mark.asyncio
    async def test_get_reminders_for_task(self, make_service):
        """Test that reminders can be narrowed to one task."""
        reminders = [
            {"id": "r1", "item_id": "1", "type": "relative", "minute_offset": 30},
            {"id": "r2", "item_id": "2", "type": "relative", "minute_offset": 10},
            {"id": "r3", "item_id": "1", "type": "relative", "minute_offset": 5, "is_deleted": True},
        ]
        service = make_service(_fixed(200, json={"reminders": reminders}))
        result = await service.get_reminders(task_id="1")
        assert [r["id"] for r in result] == ["r1"]

    @pytest.mark.asyncio
    async def test_create_reminder(self, make_service):
        """Test the reminder_add command."""

        def handler(request):
            command = json.loads(request.content)["commands"][0]
            assert command["type"] == "reminder_add"
            assert command["args"] == {"item_id": "1", "type": "relative", "minute_offset": 30}
            return httpx.Response(
                200,
                json={
                    "sync_status": {command["uuid"]: "ok"},
                    "temp_id_mapping": {command["temp_id"]: "r99"},
                },
            )

        reminder_id = await make_service(handler).create_reminder(
            {"item_id": "1", "type": "relative", "minute_offset": 30}
        )
        assert reminder_id == "r99"

    @pytest.mark.asyncio
    async def test_update_reminder(self, make_service):
        """Test the reminder_update command arguments."""
        bodies = []

        def handler(request):
            body = json.loads(request.content)
            bodies.append(body)
            return httpx.Response(200, json={"sync_status": {body["commands"][0]["uuid"]: "ok"}})

        await make_service(handler).update_reminder("r1", {"minute_offset": 60, "due": None})
        command = bodies[0]["commands"][0]
        assert command["type"] == "reminder_update"
        assert command["args"] == {"id": "r1", "minute_offset": 60}

    @pytest.mark.asyncio
    async def test_get_filter(self, make_service):
        """Test looking up one filter among the synced filters."""
        filters = [{"id": "1", "name": "Work", "query": "#Work"}, {"id": "2", "name": "Home", "query": "#Home"}]
        service = make_service(_fixed(200, json={"filters": filters}))
        assert (await service.get_filter("2"))["name"] == "Home"

    @pytest.mark.asyncio
    async def test_get_filter_not_found(self, make_service):
        """Test that an unknown or deleted filter is a not-found error."""
        filters = [{"id": "1", "name": "Old", "query": "p4", "is_deleted": True}]
        service = make_service(_fixed(200, json={"filters": filters}))
        with pytest.raises(NotFoundError, match="Filter 1 not found") as exc_info:
            await service.get_filter("1")
        assert exc_info.value.code == ErrorCode.RESOURCE_NOT_FOUND


class TestSharedLabels:
    """Tests for shared label commands."""

    @pytest.mark.asyncio
    async def test_rename_shared_label(self, make_service):
        """Test the shared_label_rename command."""
        bodies = []

        def handler(request):
            body = json.loads(request.content)
            bodies.append(body)
            return httpx.Response(200, json={"sync_status": {body["commands"][0]["uuid"]: "ok"}})

        await make_service(handler).rename_shared_label("waiting", "blocked")
        command = bodies[0]["commands"][0]
        assert command["type"] == "shared_label_rename"
        assert command["args"] == {"name": "waiting", "new_name": "blocked"}
        assert "temp_id" not in command

    @pytest.mark.asyncio
    async def test_remove_shared_label_rejected(self, make_service):
        """Test that a rejected shared label removal raises."""

        def handler(request):
            command = json.loads(request.content)["commands"][0]
            assert command["type"] == "shared_label_remove"
            assert command["args"] == {"name": "ghost"}
            return httpx.Response(
                200,
                json={"sync_status": {command["uuid"]: {"error": "LABEL_NOT_FOUND", "error_message": "Label not found"}}},
            )

        with pytest.raises(UpstreamError, match="shared_label_remove failed: Label not found"):
            await make_service(handler).remove_shared_label("ghost")


class TestSingleResourceLookups:
    """Tests for single-resource GET calls and archived projects."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, resource_id, path",
        [
            ("get_section", "s1", "/api/v1/sections/s1"),
            ("get_comment", "c1", "/api/v1/comments/c1"),
            ("get_label", "l1", "/api/v1/labels/l1"),
        ],
    )
    async def test_get_by_id(self, make_service, method, resource_id, path):
        """Test that single lookups hit the resource path."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"id": resource_id})

        result = await getattr(make_service(handler), method)(resource_id)
        assert result == {"id": resource_id}
        assert seen[0].method == "GET"
        assert seen[0].url.path == path

    @pytest.mark.asyncio
    async def test_projects_exclude_archived_by_default(self, make_service):
        """Test that only active projects are fetched by default."""
        seen = []

        def handler(request):
            seen.append(request.url.path)
            return httpx.Response(200, json={"results": [{"id": "1"}], "next_cursor": None})

        projects = await make_service(handler).get_projects()
        assert projects == [{"id": "1"}]
        assert seen == ["/api/v1/projects"]

    @pytest.mark.asyncio
    async def test_projects_include_archived(self, make_service):
        """Test that archived projects are appended after active ones."""

        def handler(request):
            if request.url.path == "/api/v1/projects/archived":
                return httpx.Response(200, json={"results": [{"id": "9", "is_archived": True}], "next_cursor": None})
            return httpx.Response(200, json={"results": [{"id": "1"}], "next_cursor": None})

        projects = await make_service(handler).get_projects(include_archived=True)
        assert [p["id"] for p in projects] == ["1", "9"]


class TestGetApiService:
    """Tests for the process-wide service accessor."""

    def test_reuses_instance(self, make_service, use_service):
        """Test that an installed service is returned as-is."""
        service = use_service(make_service(_fixed(200)))
        assert get_api_service() is service

    def test_missing_configuration(self):
        """Test that an unconfigured environment raises ConfigurationError."""
        with patch("todoist_mcp.utils.api._service", None), patch(
            "todoist_mcp.utils.api.load_config",
            side_effect=ConfigurationError("TODOIST_API_TOKEN environment variable is required"),
        ):
            with pytest.raises(ConfigurationError):
                get_api_service()

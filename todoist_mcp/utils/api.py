"""HTTP client for the Todoist API v1."""

import logging
from typing import Any

import httpx

from todoist_mcp.config import TodoistConfig, load_config
from todoist_mcp.enums import ErrorCode, SyncCommandType
from todoist_mcp.errors import (
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ServiceUnavailableError,
    TransportError,
    UpstreamError,
)
from todoist_mcp.models.bulk import SyncCommand, SyncOk, SyncStatusMap
from todoist_mcp.utils.bulk import NO_STATUS_MESSAGE
from todoist_mcp.utils.ids import new_command_uuid, new_temp_id
from todoist_mcp.utils.parsers import _parse_sync_status

logger = logging.getLogger(__name__)

USER_AGENT = "todoist-mcp/0.1.0"


def _clean(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {k: v for k, v in data.items() if v is not None}


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _map_http_error(response: httpx.Response) -> UpstreamError:
    """
    Translate a non-2xx response into the matching UpstreamError subclass.

    Args:
        response: Failed httpx response

    Returns:
        Exception instance carrying the status and raw body
    """
    status = response.status_code
    body = _response_body(response)

    if status == 401:
        return AuthenticationError("Invalid or expired Todoist API token", body=body, http_status=status)
    if status == 403:
        return AuthenticationError(
            "Insufficient permissions for this operation",
            body=body,
            http_status=status,
            code=ErrorCode.INSUFFICIENT_PERMISSIONS,
        )
    if status == 404:
        return NotFoundError("Resource not found", body=body, http_status=status)
    if status == 429:
        retry_after = response.headers.get("retry-after")
        return RateLimitError(
            "Todoist API rate limit exceeded",
            retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            body=body,
            http_status=status,
        )
    if status == 400:
        message = body.get("error") if isinstance(body, dict) and isinstance(body.get("error"), str) else None
        return UpstreamError(
            message or "Invalid request data",
            body=body,
            http_status=status,
            code=ErrorCode.INVALID_REQUEST,
        )
    if status >= 500:
        return ServiceUnavailableError("Todoist service temporarily unavailable", body=body, http_status=status)
    return UpstreamError(f"Todoist API request failed with status {status}", body=body, http_status=status)


class TodoistApiService:
    """
    Thin async wrapper over the Todoist REST and sync endpoints.

    Every call opens a short-lived ``httpx.AsyncClient``; the service itself
    holds configuration only and is safe to share between concurrent tool
    calls. Pass ``transport`` to route requests somewhere other than the
    network (tests use ``httpx.MockTransport``).
    """

    def __init__(self, config: TodoistConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.config = config
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout_seconds,
            headers={
                "Authorization": f"Bearer {self.config.api_token}",
                "User-Agent": USER_AGENT,
            },
            transport=self._transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """
        Issue one request and decode the JSON body.

        Raises:
            TransportError: Connection failure or timeout
            UpstreamError: Non-2xx status or undecodable body
        """
        logger.debug("%s %s", method, path)
        try:
            async with self._client() as client:
                response = await client.request(method, path, params=_clean(params or {}), json=json)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = _map_http_error(e.response)
            logger.warning("%s %s failed with HTTP %s: %s", method, path, e.response.status_code, error.message)
            raise error from e
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request to Todoist timed out after {self.config.timeout_seconds:g}s",
                code=ErrorCode.TIMEOUT_ERROR,
            ) from e
        except httpx.RequestError as e:
            raise TransportError(f"Cannot connect to Todoist API: {type(e).__name__}: {e}") from e

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                "Todoist returned a response that is not JSON",
                body=response.text,
                http_status=response.status_code,
            ) from e

    async def _get_paginated(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Follow ``next_cursor`` until exhausted or ``limit`` items are collected."""
        results: list[dict[str, Any]] = []
        cursor = None
        while True:
            page = await self._request("GET", path, params={**(params or {}), "cursor": cursor})
            if isinstance(page, list):
                results.extend(page)
                break
            page = page or {}
            results.extend(page.get("results") or [])
            cursor = page.get("next_cursor")
            if not cursor or (limit is not None and len(results) >= limit):
                break
        return results[:limit] if limit is not None else results

    # ------------------------------------------------------------------
    # Sync endpoint
    # ------------------------------------------------------------------

    async def sync(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST to the sync endpoint and return the decoded response object."""
        data = await self._request("POST", "/sync", json=payload)
        if not isinstance(data, dict):
            raise UpstreamError("Sync endpoint returned an unexpected response", body=data)
        return data

    async def submit_commands(self, commands: list[SyncCommand]) -> SyncStatusMap:
        """
        Send a batch of commands in one sync call.

        Args:
            commands: Command envelopes; each ``uuid`` keys its status entry

        Returns:
            Status per correlation id. Entries may be missing; callers decide
            what an absent entry means.
        """
        status_map, _ = await self.submit_batch(commands)
        return status_map

    async def submit_batch(self, commands: list[SyncCommand]) -> tuple[SyncStatusMap, dict[str, str]]:
        """
        Send a batch of commands in one sync call, keeping ``temp_id_mapping``.

        Returns:
            Status per correlation id, and the temp id -> real id mapping for
            resources the batch created
        """
        logger.debug("Submitting %d sync command(s)", len(commands))
        data = await self.sync({"commands": [command.to_wire() for command in commands]})
        mapping = data.get("temp_id_mapping")
        return _parse_sync_status(data.get("sync_status")), mapping if isinstance(mapping, dict) else {}

    async def _run_command(self, command: SyncCommand) -> dict[str, str]:
        """Submit a single command whose failure is fatal; return ``temp_id_mapping``."""
        data = await self.sync({"commands": [command.to_wire()]})
        status = _parse_sync_status(data.get("sync_status")).get(command.uuid)
        if not isinstance(status, SyncOk):
            reason = status.reason if status is not None else NO_STATUS_MESSAGE
            raise UpstreamError(
                f"{command.type.value} failed: {reason}",
                body=data.get("sync_status"),
                http_status=status.http_code if status is not None else None,
            )
        return data.get("temp_id_mapping") or {}

    async def _read_resources(self, resource_types: list[str]) -> dict[str, Any]:
        return await self.sync({"sync_token": "*", "resource_types": resource_types})

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    async def get_tasks(
        self,
        project_id: str | None = None,
        section_id: str | None = None,
        label: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        params = {"project_id": project_id, "section_id": section_id, "label": label}
        return await self._get_paginated("/tasks", params, limit)

    async def get_tasks_by_filter(self, query: str, limit: int | None = None) -> list[dict[str, Any]]:
        return await self._get_paginated("/tasks/filter", {"query": query}, limit)

    async def get_task(self, task_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/tasks/{task_id}")

    async def create_task(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/tasks", json=_clean(data))

    async def update_task(self, task_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", f"/tasks/{task_id}", json=_clean(data))

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"/tasks/{task_id}")

    async def close_task(self, task_id: str) -> None:
        await self._request("POST", f"/tasks/{task_id}/close")

    async def reopen_task(self, task_id: str) -> None:
        await self._request("POST", f"/tasks/{task_id}/reopen")

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def get_projects(self, include_archived: bool = False) -> list[dict[str, Any]]:
        projects = await self._get_paginated("/projects")
        if include_archived:
            projects.extend(await self._get_paginated("/projects/archived"))
        return projects

    async def get_project(self, project_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/projects/{project_id}")

    async def create_project(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/projects", json=_clean(data))

    async def update_project(self, project_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", f"/projects/{project_id}", json=_clean(data))

    async def delete_project(self, project_id: str) -> None:
        await self._request("DELETE", f"/projects/{project_id}")

    async def archive_project(self, project_id: str) -> None:
        await self._request("POST", f"/projects/{project_id}/archive")

    async def unarchive_project(self, project_id: str) -> None:
        await self._request("POST", f"/projects/{project_id}/unarchive")

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    async def get_sections(self, project_id: str | None = None) -> list[dict[str, Any]]:
        return await self._get_paginated("/sections", {"project_id": project_id})

    async def get_section(self, section_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/sections/{section_id}")

    async def create_section(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/sections", json=_clean(data))

    async def update_section(self, section_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", f"/sections/{section_id}", json=_clean(data))

    async def delete_section(self, section_id: str) -> None:
        await self._request("DELETE", f"/sections/{section_id}")

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    async def get_comments(self, task_id: str | None = None, project_id: str | None = None) -> list[dict[str, Any]]:
        return await self._get_paginated("/comments", {"task_id": task_id, "project_id": project_id})

    async def get_comment(self, comment_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/comments/{comment_id}")

    async def create_comment(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/comments", json=_clean(data))

    async def update_comment(self, comment_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", f"/comments/{comment_id}", json=_clean(data))

    async def delete_comment(self, comment_id: str) -> None:
        await self._request("DELETE", f"/comments/{comment_id}")

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------

    async def get_labels(self) -> list[dict[str, Any]]:
        return await self._get_paginated("/labels")

    async def get_label(self, label_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/labels/{label_id}")

    async def create_label(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/labels", json=_clean(data))

    async def update_label(self, label_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", f"/labels/{label_id}", json=_clean(data))

    async def delete_label(self, label_id: str) -> None:
        await self._request("DELETE", f"/labels/{label_id}")

    async def rename_shared_label(self, name: str, new_name: str) -> None:
        """Rename a label on every task that carries it, personal label or not."""
        command = SyncCommand(
            type=SyncCommandType.SHARED_LABEL_RENAME,
            uuid=new_command_uuid(),
            args={"name": name, "new_name": new_name},
        )
        await self._run_command(command)

    async def remove_shared_label(self, name: str) -> None:
        """Remove a label from every task that carries it."""
        command = SyncCommand(
            type=SyncCommandType.SHARED_LABEL_REMOVE, uuid=new_command_uuid(), args={"name": name}
        )
        await self._run_command(command)

    # ------------------------------------------------------------------
    # Filters (sync only)
    # ------------------------------------------------------------------

    async def get_filters(self) -> list[dict[str, Any]]:
        data = await self._read_resources(["filters"])
        return [f for f in data.get("filters") or [] if not f.get("is_deleted")]

    async def get_filter(self, filter_id: str) -> dict[str, Any]:
        """
        Look up one saved filter.

        Raises:
            NotFoundError: If no active filter has this ID
        """
        for item in await self.get_filters():
            if str(item.get("id")) == filter_id:
                return item
        raise NotFoundError(f"Filter {filter_id} not found")

    async def create_filter(self, data: dict[str, Any]) -> str:
        """Create a filter and return its permanent id."""
        temp_id = new_temp_id()
        command = SyncCommand(
            type=SyncCommandType.FILTER_ADD, uuid=new_command_uuid(), temp_id=temp_id, args=_clean(data)
        )
        mapping = await self._run_command(command)
        return mapping.get(temp_id, temp_id)

    async def update_filter(self, filter_id: str, data: dict[str, Any]) -> None:
        command = SyncCommand(
            type=SyncCommandType.FILTER_UPDATE, uuid=new_command_uuid(), args={"id": filter_id, **_clean(data)}
        )
        await self._run_command(command)

    async def delete_filter(self, filter_id: str) -> None:
        command = SyncCommand(type=SyncCommandType.FILTER_DELETE, uuid=new_command_uuid(), args={"id": filter_id})
        await self._run_command(command)

    # ------------------------------------------------------------------
    # Reminders (sync only)
    # ------------------------------------------------------------------

    async def get_reminders(self, task_id: str | None = None) -> list[dict[str, Any]]:
        data = await self._read_resources(["reminders"])
        reminders = [r for r in data.get("reminders") or [] if not r.get("is_deleted")]
        if task_id:
            reminders = [r for r in reminders if r.get("item_id") == task_id]
        return reminders

    async def create_reminder(self, data: dict[str, Any]) -> str:
        """Create a reminder and return its permanent id."""
        temp_id = new_temp_id()
        command = SyncCommand(
            type=SyncCommandType.REMINDER_ADD, uuid=new_command_uuid(), temp_id=temp_id, args=_clean(data)
        )
        mapping = await self._run_command(command)
        return mapping.get(temp_id, temp_id)

    async def update_reminder(self, reminder_id: str, data: dict[str, Any]) -> None:
        command = SyncCommand(
            type=SyncCommandType.REMINDER_UPDATE, uuid=new_command_uuid(), args={"id": reminder_id, **_clean(data)}
        )
        await self._run_command(command)

    async def delete_reminder(self, reminder_id: str) -> None:
        command = SyncCommand(type=SyncCommandType.REMINDER_DELETE, uuid=new_command_uuid(), args={"id": reminder_id})
        await self._run_command(command)


_service: TodoistApiService | None = None


def get_api_service() -> TodoistApiService:
    """
    Return the process-wide API service, creating it from the environment.

    Raises:
        ConfigurationError: If the environment is not configured
    """
    global _service
    if _service is None:
        _service = TodoistApiService(load_config())
    return _service

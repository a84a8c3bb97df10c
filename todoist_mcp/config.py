"""Environment configuration for Todoist MCP."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from todoist_mcp.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.todoist.com/api/v1"
DEFAULT_TIMEOUT_MS = 10000
DEFAULT_BULK_MAX_TASKS = 50

# Environment variable -> config field
ENV_FIELDS = {
    "TODOIST_API_TOKEN": "api_token",
    "TODOIST_API_BASE_URL": "base_url",
    "REQUEST_TIMEOUT": "timeout_ms",
    "TODOIST_BULK_MAX_TASKS": "bulk_max_tasks",
    "LOG_LEVEL": "log_level",
}


class TodoistConfig(BaseModel):
    """Runtime configuration for the API service and server."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    api_token: str = Field(..., description="Todoist API token (Settings > Integrations > Developer)", min_length=10)
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Todoist API v1 base URL")
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, description="Request timeout in milliseconds", ge=1000, le=60000)
    bulk_max_tasks: int = Field(
        default=DEFAULT_BULK_MAX_TASKS,
        description="Maximum unique task IDs per bulk request (sync API accepts 100 commands)",
        ge=1,
        le=100,
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
            raise ValueError("must be one of DEBUG, INFO, WARNING, ERROR")
        return level

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


def load_config(env: dict[str, str] | None = None) -> TodoistConfig:
    """
    Build configuration from environment variables.

    Reads a ``.env`` file first when ``env`` is not given.

    Args:
        env: Mapping to read instead of ``os.environ`` (used by tests)

    Returns:
        Validated TodoistConfig

    Raises:
        ConfigurationError: If a variable is missing or invalid
    """
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    if not env.get("TODOIST_API_TOKEN"):
        raise ConfigurationError(
            "TODOIST_API_TOKEN environment variable is required. "
            "Set it in your MCP client configuration or a .env file."
        )

    values = {field: env[var] for var, field in ENV_FIELDS.items() if env.get(var)}
    try:
        return TodoistConfig(**values)
    except ValidationError as e:
        field_to_env = {field: var for var, field in ENV_FIELDS.items()}
        first = e.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else ""
        raise ConfigurationError(f"{field_to_env.get(field, field)}: {first['msg']}") from e

"""FastMCP server initialization for Todoist MCP."""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from todoist_mcp.config import load_config
from todoist_mcp.errors import ConfigurationError

# Initialize the MCP server
mcp = FastMCP("todoist_mcp")

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Log to stderr; stdout carries the MCP stdio protocol."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def run() -> None:
    """Run the MCP server."""
    # Tools register themselves with ``mcp`` on import
    import todoist_mcp.tools  # noqa: F401

    try:
        config = load_config()
    except ConfigurationError as e:
        configure_logging()
        logger.error("Cannot start Todoist MCP server: %s", e.message)
        sys.exit(1)

    configure_logging(config.log_level)
    logger.info("Starting Todoist MCP server (%s)", config.base_url)
    mcp.run()


if __name__ == "__main__":
    run()

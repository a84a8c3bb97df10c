"""Identifier generation for sync commands."""

import uuid


def new_command_uuid() -> str:
    """Return a fresh correlation id for one sync command.

    Random UUID4 values are never reused within a process, so status entries
    cannot be confused between concurrent bulk requests.
    """
    return str(uuid.uuid4())


def new_temp_id() -> str:
    """Return a temporary id for a resource created through a sync command."""
    return f"temp_{uuid.uuid4().hex}"

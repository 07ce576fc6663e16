"""Client modules for external services."""

from cheesedir.clients.sqlite_client import SqliteClient

__all__ = ["SqliteClient"]

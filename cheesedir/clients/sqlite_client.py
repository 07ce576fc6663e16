"""Thin SQLite client used by the mirror service."""

import sqlite3
from typing import Iterable, List, Optional, Sequence, Tuple


class SqliteClient:
    """SQLite database client with connection management."""

    def __init__(self, connection_string: str):
        self.connection_string = connection_string
        self._connection = sqlite3.connect(self.connection_string)

    def execute_query(self, query: str, params: Optional[Sequence] = None) -> List[Tuple]:
        """Execute a query and return all results.

        INSERT, UPDATE and DELETE statements are committed immediately.
        """
        cursor = self._connection.cursor()
        try:
            cursor.execute(query, params or ())

            if query.strip().upper().startswith(("INSERT", "UPDATE", "DELETE")):
                self._connection.commit()

            return cursor.fetchall()
        finally:
            cursor.close()

    def execute(self, query: str, params: Optional[Sequence] = None) -> int:
        """Execute one statement inside the open transaction without committing.

        Returns the number of rows affected.
        """
        cursor = self._connection.cursor()
        try:
            cursor.execute(query, params or ())
            return cursor.rowcount
        finally:
            cursor.close()

    def execute_many(self, query: str, rows: Iterable[Sequence]) -> int:
        """Execute one statement per parameter row, leaving the commit to the caller.

        Returns the number of rows affected.
        """
        cursor = self._connection.cursor()
        try:
            cursor.executemany(query, rows)
            return cursor.rowcount
        finally:
            cursor.close()

    def commit(self) -> None:
        self._connection.commit()

    def rollback(self) -> None:
        self._connection.rollback()

    def close(self):
        """Close the database connection."""
        self._connection.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit with cleanup."""
        self.close()
        return False

"""SQLite mirror of the in-memory record store.

The mirror is kept in sync by full replacement: every sync deletes all rows
and re-inserts the whole store in order. That is O(n) writes per sync no
matter how many records changed, which is acceptable for a single-user
directory of a few thousand cheeses.

Rows are always read in order of the internal `id` key, so row order matches
insertion order. After a sync, row id 1 holds the record at store index 0.
"""

import logging
import sqlite3
from typing import Iterable, List, Optional, Tuple

from ..clients import SqliteClient
from ..models import CheeseRecord

logger = logging.getLogger(__name__)

# Field columns in CheeseRecord declaration order
RECORD_COLUMNS = (
    "cheese_id",
    "cheese_name",
    "manufacturer_name",
    "manufacturer_prov_code",
    "manufacturing_type",
    "website",
    "fat_content_percent",
    "moisture_percent",
    "particularities",
    "flavour",
    "characteristics",
    "ripening",
    "organic",
    "category_type",
    "milk_type",
    "milk_treatment_type",
    "rind_type",
    "last_update_date",
)

# SQL statements
CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS cheeses (
    id INTEGER PRIMARY KEY,
    cheese_id INTEGER,
    cheese_name TEXT,
    manufacturer_name TEXT,
    manufacturer_prov_code TEXT,
    manufacturing_type TEXT,
    website TEXT,
    fat_content_percent REAL,
    moisture_percent REAL,
    particularities TEXT,
    flavour TEXT,
    characteristics TEXT,
    ripening TEXT,
    organic INTEGER,
    category_type TEXT,
    milk_type TEXT,
    milk_treatment_type TEXT,
    rind_type TEXT,
    last_update_date TEXT
)
"""

_SELECT_COLUMNS = ", ".join(RECORD_COLUMNS)

INSERT_SQL = (
    f"INSERT INTO cheeses ({_SELECT_COLUMNS}) "
    f"VALUES ({', '.join('?' for _ in RECORD_COLUMNS)})"
)


class MirrorStoreError(Exception):
    """Raised when the mirror database cannot be opened, queried or written."""

    pass


def _record_to_row(record: CheeseRecord) -> Tuple:
    return (
        record.cheese_id,
        record.cheese_name,
        record.manufacturer_name,
        record.manufacturer_prov_code,
        record.manufacturing_type,
        record.website,
        record.fat_content_percent,
        record.moisture_percent,
        record.particularities,
        record.flavour,
        record.characteristics,
        record.ripening,
        1 if record.organic else 0,
        record.category_type,
        record.milk_type,
        record.milk_treatment_type,
        record.rind_type,
        record.last_update_date,
    )


def _row_to_record(row: Tuple) -> CheeseRecord:
    return CheeseRecord(
        cheese_id=row[0],
        cheese_name=row[1],
        manufacturer_name=row[2],
        manufacturer_prov_code=row[3],
        manufacturing_type=row[4],
        website=row[5],
        fat_content_percent=row[6],
        moisture_percent=row[7],
        particularities=row[8],
        flavour=row[9],
        characteristics=row[10],
        ripening=row[11],
        organic=bool(row[12]),
        category_type=row[13],
        milk_type=row[14],
        milk_treatment_type=row[15],
        rind_type=row[16],
        last_update_date=row[17],
    )


class CheeseMirrorService:
    """Durable SQLite copy of the record store."""

    def __init__(self, db_path: str = "cheesedir.db"):
        """Open the mirror database and create the table if needed.

        Args:
            db_path: Path to the SQLite database file.

        Raises:
            MirrorStoreError: If the database cannot be opened or initialized.
        """
        self._db_path = db_path
        try:
            self._sqlite_client = SqliteClient(db_path)
            self._sqlite_client.execute_query(CREATE_TABLE_SQL)
        except sqlite3.Error as e:
            raise MirrorStoreError(f"Cannot open mirror database {db_path}: {e}") from e
        logger.debug(f"Mirror table initialized in {db_path}")

    def _query(self, query: str, params=None) -> List[Tuple]:
        try:
            return self._sqlite_client.execute_query(query, params)
        except sqlite3.Error as e:
            raise MirrorStoreError(f"Mirror query failed: {e}") from e

    def sync(self, records: Iterable[CheeseRecord]) -> int:
        """Replace the mirror contents with `records`, in order.

        Args:
            records: The current store contents.

        Returns:
            Number of rows inserted.

        Raises:
            MirrorStoreError: If the delete or insert fails.
        """
        rows = [_record_to_row(record) for record in records]
        try:
            self._sqlite_client.execute("DELETE FROM cheeses")
            self._sqlite_client.execute_many(INSERT_SQL, rows)
            self._sqlite_client.commit()
        except (sqlite3.Error, OverflowError) as e:
            self._sqlite_client.rollback()
            raise MirrorStoreError(f"Mirror sync failed: {e}") from e

        logger.debug(f"Synced {len(rows)} records to mirror {self._db_path}")
        return len(rows)

    def count(self) -> int:
        """Return the number of records in the mirror."""
        result = self._query("SELECT count(*) FROM cheeses")
        return result[0][0]

    def get_all(self) -> List[CheeseRecord]:
        """Return every record in insertion order."""
        result = self._query(f"SELECT {_SELECT_COLUMNS} FROM cheeses ORDER BY id ASC")
        return [_row_to_record(row) for row in result]

    def get_by_position(self, index: int) -> CheeseRecord:
        """Return the record at 0-based position `index` in insertion order.

        Raises:
            IndexError: If there is no record at that position.
        """
        if index < 0:
            raise IndexError(f"Mirror position {index} out of range")
        result = self._query(
            f"SELECT {_SELECT_COLUMNS} FROM cheeses ORDER BY id ASC LIMIT 1 OFFSET ?",
            (index,),
        )
        if not result:
            raise IndexError(f"Mirror position {index} out of range")
        return _row_to_record(result[0])

    def get_by_row_id(self, row_id: int) -> Optional[CheeseRecord]:
        """Return the record stored under the internal 1-based key, if any."""
        result = self._query(
            f"SELECT {_SELECT_COLUMNS} FROM cheeses WHERE id = ?",
            (row_id,),
        )
        if not result:
            return None
        return _row_to_record(result[0])

    def filter_records(self, **criteria) -> List[CheeseRecord]:
        """Return records whose named columns all equal the given values.

        Example:
            filter_records(cheese_name="Oka", flavour="Fruity")

        Raises:
            ValueError: If a criterion names an unknown column.
        """
        unknown = [name for name in criteria if name not in RECORD_COLUMNS]
        if unknown:
            raise ValueError(f"Unknown record columns: {', '.join(sorted(unknown))}")

        query = f"SELECT {_SELECT_COLUMNS} FROM cheeses"
        params = []
        if criteria:
            # Column names are whitelisted above, only values are bound
            query += " WHERE " + " AND ".join(f"{name} = ?" for name in criteria)
            params = [
                (1 if value else 0) if isinstance(value, bool) else value
                for value in criteria.values()
            ]
        query += " ORDER BY id ASC"

        result = self._query(query, tuple(params))
        return [_row_to_record(row) for row in result]

    def close(self) -> None:
        """Close the database connection."""
        self._sqlite_client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit with cleanup."""
        self.close()
        return False

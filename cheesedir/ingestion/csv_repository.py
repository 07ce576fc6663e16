"""CSV source and sink for cheese records.

Loads the Canadian Cheese Directory dataset and writes records back out in
the 18-column persist layout.
"""

import csv
import logging
from typing import Iterable, List, Tuple

from cheesedir.ingestion.record_codec import decode, decode_row, encode
from cheesedir.models.cheese_record import OUTPUT_HEADERS, CheeseRecord

logger = logging.getLogger(__name__)


class DataFileError(Exception):
    """Raised when a CSV file cannot be opened, parsed or written."""

    pass


def _read_rows(file_path: str) -> List[List[str]]:
    """Read every row of a CSV file."""
    try:
        with open(file_path, "r", newline="", encoding="utf-8-sig") as f:
            return list(csv.reader(f))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise DataFileError(f"Cannot read CSV file {file_path}: {e}") from e


def _numbered_data_rows(rows: List[List[str]]) -> List[Tuple[int, List[str]]]:
    """Pair each non-empty data row with its 1-based line number."""
    return [(n, row) for n, row in enumerate(rows[1:], start=2) if row]


def load_records(file_path: str, limit: int) -> List[CheeseRecord]:
    """
    Load up to `limit` records from the dataset CSV.

    Args:
        file_path: Path to the 30-column dataset file.
        limit: Maximum number of data rows to decode.

    Returns:
        Decoded records in file order.

    Raises:
        DataFileError: If the file cannot be read or a row is malformed.
    """
    rows = _read_rows(file_path)

    # First row holds the column names; blank lines are not records
    data_rows = _numbered_data_rows(rows)

    records: List[CheeseRecord] = []
    for line_number, row in data_rows[:limit]:
        try:
            records.append(decode(row))
        except ValueError as e:
            raise DataFileError(f"{file_path}, line {line_number}: {e}") from e

    logger.info(f"Loaded {len(records)} records from {file_path}")
    return records


def persist_records(records: Iterable[CheeseRecord], file_path: str) -> int:
    """
    Write records to a CSV file with the 18-column header.

    Args:
        records: Records to write, in order.
        file_path: Destination path; overwritten if it exists.

    Returns:
        Number of records written.

    Raises:
        DataFileError: If the file cannot be written.
    """
    count = 0
    try:
        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(OUTPUT_HEADERS)
            for record in records:
                writer.writerow(encode(record))
                count += 1
    except (OSError, csv.Error) as e:
        raise DataFileError(f"Cannot write CSV file {file_path}: {e}") from e

    logger.info(f"Wrote {count} records to {file_path}")
    return count


def read_persisted(file_path: str) -> List[CheeseRecord]:
    """Read back a file written by persist_records."""
    rows = _read_rows(file_path)
    records: List[CheeseRecord] = []
    for line_number, row in _numbered_data_rows(rows):
        try:
            records.append(decode_row(row))
        except ValueError as e:
            raise DataFileError(f"{file_path}, line {line_number}: {e}") from e
    return records

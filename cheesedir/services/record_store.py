"""In-memory record store.

Records are addressed by 0-based position. Removing a record shifts every
later record down by one, so positions remembered before a delete are stale
afterwards.
"""

from typing import Iterable, Iterator, List

from cheesedir.models.cheese_record import CheeseRecord


class RecordStore:
    """Ordered, index-addressable collection of CheeseRecord objects."""

    def __init__(self, records: Iterable[CheeseRecord] = ()):
        self._records: List[CheeseRecord] = list(records)

    def _check_index(self, index: int) -> None:
        # Negative indices are rejected rather than wrapping like list indexing
        if not 0 <= index < len(self._records):
            raise IndexError(
                f"Record index {index} out of range (0..{len(self._records) - 1})"
            )

    def append(self, record: CheeseRecord) -> None:
        """Add a record at the end of the store."""
        self._records.append(record)

    def get_at(self, index: int) -> CheeseRecord:
        """Return the record at `index`.

        Raises:
            IndexError: If `index` is outside 0..len-1.
        """
        self._check_index(index)
        return self._records[index]

    def replace_at(self, index: int, record: CheeseRecord) -> None:
        """Replace the record at `index`, keeping its position.

        Raises:
            IndexError: If `index` is outside 0..len-1.
        """
        self._check_index(index)
        self._records[index] = record

    def remove_at(self, index: int) -> CheeseRecord:
        """Remove and return the record at `index`, preserving order.

        Raises:
            IndexError: If `index` is outside 0..len-1.
        """
        self._check_index(index)
        return self._records.pop(index)

    def replace_all(self, records: Iterable[CheeseRecord]) -> None:
        """Discard the current contents and take `records` instead."""
        self._records = list(records)

    def records(self) -> List[CheeseRecord]:
        """Return a copy of the records in order."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CheeseRecord]:
        return iter(list(self._records))

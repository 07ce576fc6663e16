"""Data models module."""

from cheesedir.models.cheese_record import (
    NOT_AVAILABLE,
    OUTPUT_HEADERS,
    UNKNOWN_PROVINCE,
    CheeseRecord,
)

__all__ = [
    "CheeseRecord",
    "NOT_AVAILABLE",
    "OUTPUT_HEADERS",
    "UNKNOWN_PROVINCE",
]

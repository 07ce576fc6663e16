"""CSV ingestion: record codec and dataset file access."""

from cheesedir.ingestion.csv_repository import (
    DataFileError,
    load_records,
    persist_records,
    read_persisted,
)
from cheesedir.ingestion.record_codec import (
    decode,
    decode_row,
    encode,
    normalize,
)

__all__ = [
    "DataFileError",
    "decode",
    "decode_row",
    "encode",
    "load_records",
    "normalize",
    "persist_records",
    "read_persisted",
]

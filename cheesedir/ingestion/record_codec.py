"""Conversion between CSV rows and CheeseRecord objects.

The source dataset is bilingual: most logical fields appear twice, once in
English and once in French. Decoding picks the first non-blank of the pair.
Numeric and boolean columns are parsed leniently; a value that does not
parse becomes the zero value for that field instead of failing the row.
"""

import re
from typing import List, Sequence

from cheesedir.models.cheese_record import (
    NOT_AVAILABLE,
    UNKNOWN_PROVINCE,
    CheeseRecord,
)

DATASET_COLUMN_COUNT = 30
OUTPUT_COLUMN_COUNT = 18

_TRUE_TOKENS = frozenset({"1", "t", "T", "TRUE", "true", "True"})

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Cheese ids are stored as SQLite INTEGER, a signed 64-bit value
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1


def normalize(primary: str, secondary: str) -> str:
    """Return the first non-blank of two candidate values, or "N/A".

    Args:
        primary: Preferred value (e.g. the English column).
        secondary: Fallback value (e.g. the French column).

    Returns:
        The trimmed primary if non-blank, else the trimmed secondary if
        non-blank, else NOT_AVAILABLE.
    """
    primary = (primary or "").strip()
    if primary:
        return primary
    secondary = (secondary or "").strip()
    if secondary:
        return secondary
    return NOT_AVAILABLE


def parse_int(text: str) -> int:
    """Parse a signed 64-bit decimal integer, returning 0 if it does not parse.

    Surrounding whitespace, digit separators and out-of-range values are
    rejected.
    """
    if not isinstance(text, str) or not _INT_PATTERN.fullmatch(text):
        return 0
    value = int(text)
    if value < _INT_MIN or value > _INT_MAX:
        return 0
    return value


def parse_float(text: str) -> float:
    """Parse a float, returning 0.0 if it does not parse."""
    try:
        return float(text)
    except (TypeError, ValueError):
        return 0.0


def parse_bool(text: str) -> bool:
    """Parse a boolean token; unknown tokens are False."""
    return text in _TRUE_TOKENS


def decode(fields: Sequence[str]) -> CheeseRecord:
    """
    Convert one 30-column dataset row into a CheeseRecord.

    Args:
        fields: Raw column values in dataset order (header already removed).

    Returns:
        The decoded CheeseRecord.

    Raises:
        ValueError: If the row has fewer than 30 columns.
    """
    if len(fields) < DATASET_COLUMN_COUNT:
        raise ValueError(
            f"Expected {DATASET_COLUMN_COUNT} columns, got {len(fields)}"
        )

    return CheeseRecord(
        cheese_id=parse_int(fields[0]),
        cheese_name=normalize(fields[1], fields[2]),
        manufacturer_name=normalize(fields[3], fields[4]),
        manufacturer_prov_code=normalize(fields[5], UNKNOWN_PROVINCE),
        manufacturing_type=normalize(fields[6], fields[7]),
        website=normalize(fields[8], fields[9]),
        fat_content_percent=parse_float(fields[10]),
        moisture_percent=parse_float(fields[11]),
        particularities=normalize(fields[12], fields[13]),
        flavour=normalize(fields[14], fields[15]),
        characteristics=normalize(fields[16], fields[17]),
        ripening=normalize(fields[18], fields[19]),
        organic=parse_bool(fields[20]),
        category_type=normalize(fields[21], fields[22]),
        milk_type=normalize(fields[23], fields[24]),
        milk_treatment_type=normalize(fields[25], fields[26]),
        rind_type=normalize(fields[27], fields[28]),
        last_update_date=fields[29],
    )


def decode_row(fields: Sequence[str]) -> CheeseRecord:
    """
    Convert one 18-column row (persist layout or interactive entry).

    Args:
        fields: Values in CheeseRecord field order.

    Returns:
        The decoded CheeseRecord.

    Raises:
        ValueError: If the row has fewer than 18 columns.
    """
    if len(fields) < OUTPUT_COLUMN_COUNT:
        raise ValueError(
            f"Expected {OUTPUT_COLUMN_COUNT} columns, got {len(fields)}"
        )

    return CheeseRecord(
        cheese_id=parse_int(fields[0]),
        cheese_name=normalize(fields[1], ""),
        manufacturer_name=normalize(fields[2], ""),
        manufacturer_prov_code=normalize(fields[3], ""),
        manufacturing_type=normalize(fields[4], ""),
        website=normalize(fields[5], ""),
        fat_content_percent=parse_float(fields[6]),
        moisture_percent=parse_float(fields[7]),
        particularities=normalize(fields[8], ""),
        flavour=normalize(fields[9], ""),
        characteristics=normalize(fields[10], ""),
        ripening=normalize(fields[11], ""),
        organic=parse_bool(fields[12]),
        category_type=normalize(fields[13], ""),
        milk_type=normalize(fields[14], ""),
        milk_treatment_type=normalize(fields[15], ""),
        rind_type=normalize(fields[16], ""),
        last_update_date=fields[17],
    )


def encode(record: CheeseRecord) -> List[str]:
    """
    Convert a CheeseRecord into its 18-column output row.

    Floats are written with two decimals, so precision beyond that is lost.
    """
    return [
        str(record.cheese_id),
        record.cheese_name,
        record.manufacturer_name,
        record.manufacturer_prov_code,
        record.manufacturing_type,
        record.website,
        f"{record.fat_content_percent:.2f}",
        f"{record.moisture_percent:.2f}",
        record.particularities,
        record.flavour,
        record.characteristics,
        record.ripening,
        "true" if record.organic else "false",
        record.category_type,
        record.milk_type,
        record.milk_treatment_type,
        record.rind_type,
        record.last_update_date,
    ]

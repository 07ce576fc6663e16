"""Shared fixtures for the cheese directory tests."""

import os
import tempfile
from pathlib import Path

import pytest

from cheesedir.models import CheeseRecord

DATASET_PATH = Path(__file__).parent.parent / "data" / "canadianCheeseDirectory.csv"


@pytest.fixture
def dataset_path() -> str:
    """Path to the sample Canadian Cheese Directory dataset."""
    return str(DATASET_PATH)


@pytest.fixture
def first_record() -> CheeseRecord:
    """Expected record for the first data row of the sample dataset."""
    return CheeseRecord(
        cheese_id=228,
        cheese_name="Sieur de Duplessis (Le)",
        manufacturer_name="Fromages la faim de loup",
        manufacturer_prov_code="NB",
        manufacturing_type="Farmstead",
        website="N/A",
        fat_content_percent=24.2,
        moisture_percent=47.0,
        particularities="N/A",
        flavour="Sharp, lactic",
        characteristics="Uncooked",
        ripening="9 Months",
        organic=False,
        category_type="Firm Cheese",
        milk_type="Ewe",
        milk_treatment_type="Raw Milk",
        rind_type="Washed Rind",
        last_update_date="2016-02-03",
    )


@pytest.fixture
def temp_db_path():
    """Create a temporary database file for testing."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    yield path
    # Cleanup
    if os.path.exists(path):
        os.remove(path)


@pytest.fixture
def temp_csv_path():
    """Create a temporary CSV output path for testing."""
    fd, path = tempfile.mkstemp(suffix=".csv")
    os.close(fd)
    yield path
    if os.path.exists(path):
        os.remove(path)

"""Cheese record model for the Canadian Cheese Directory."""

from dataclasses import dataclass

NOT_AVAILABLE = "N/A"
UNKNOWN_PROVINCE = "??"

# Header written by the persist operation, in field declaration order
OUTPUT_HEADERS = [
    "CheeseId",
    "CheeseName",
    "ManufacturerName",
    "ManufacturerProvCode",
    "ManufacturingType",
    "WebSite",
    "FatContentPercent",
    "MoisturePercent",
    "Particularities",
    "Flavour",
    "Characteristics",
    "Ripening",
    "Organic",
    "CategoryType",
    "MilkType",
    "MilkTreatmentType",
    "RindType",
    "LastUpdateDate",
]


@dataclass
class CheeseRecord:
    """One cheese product entry.

    `cheese_id` comes from the dataset (or the user) and is not unique;
    stores address records by position, never by this identifier.
    """

    cheese_id: int
    cheese_name: str
    manufacturer_name: str
    manufacturer_prov_code: str
    manufacturing_type: str
    website: str
    fat_content_percent: float
    moisture_percent: float
    particularities: str
    flavour: str
    characteristics: str
    ripening: str
    organic: bool
    category_type: str
    milk_type: str
    milk_treatment_type: str
    rind_type: str
    last_update_date: str  # opaque, never parsed

"""Load the reference catalogs from CSV into domain dataclasses.

Headers follow the published KALRO dataset (e.g. ``minPrep`` for minimum
rainfall, ``ke_ph`` for soil pH, ``Pasture/fodder`` for the fodder category).
Numeric cells that don't parse become 0; rows missing their identifying
text fields are dropped and logged.
"""

import csv
import logging
from pathlib import Path

from shamba.core.types import (
    AEZDefinition,
    Catalog,
    ClimateRecord,
    CropVariety,
    LivestockRecord,
    PastureRecord,
)

logger = logging.getLogger(__name__)

CROPS_FILE = "crops.csv"
CLIMATE_FILE = "climate.csv"
LIVESTOCK_FILE = "livestock.csv"
PASTURE_FILE = "pasture.csv"
AEZ_FILE = "aez.csv"

AEZ_ZONE_COLUMN = "Agro-Ecological Zone"
AEZ_ALTITUDE_COLUMN = "Altitude Range (meters above sea level)"
AEZ_RAINFALL_COLUMN = "Average Annual Rainfall (mm)"


class CatalogError(Exception):
    """A catalog file is missing or has no header row."""


def _number(row: dict[str, str], column: str) -> float:
    raw = (row.get(column) or "").strip()
    try:
        return float(raw)
    except ValueError:
        return 0.0


def _optional_number(row: dict[str, str], column: str) -> float | None:
    if not (row.get(column) or "").strip():
        return None
    return _number(row, column)


def _text(row: dict[str, str], column: str) -> str:
    return (row.get(column) or "").strip()


def _flag(row: dict[str, str], column: str) -> bool:
    return _number(row, column) == 1


def _read_rows(path: Path) -> list[dict[str, str]]:
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")
    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None:
            raise CatalogError(f"Catalog file has no header row: {path}")
        reader.fieldnames = [name.strip() for name in reader.fieldnames]
        return list(reader)


def _log_parsed(kind: str, kept: int, total: int) -> None:
    logger.info("Parsed %d valid %s records from %d total rows", kept, kind, total)


# ---------------------------------------------------------------------------
# Row parsers: return None for rows missing essential fields
# ---------------------------------------------------------------------------

def parse_crop_row(row: dict[str, str]) -> CropVariety | None:
    crop_type, crop, variety = _text(row, "Type"), _text(row, "Crop"), _text(row, "Variety")
    if not (crop_type and crop and variety):
        return None
    textures = tuple(t for t in (_text(row, "tex1"), _text(row, "tex2"), _text(row, "tex3")) if t)
    return CropVariety(
        crop_type=crop_type,
        crop=crop,
        variety=variety,
        min_temp=_number(row, "minTemp"),
        max_temp=_number(row, "maxTemp"),
        min_rain=_number(row, "minPrep"),
        max_rain=_number(row, "maxPrep"),
        min_altitude=_number(row, "minAlti"),
        max_altitude=_number(row, "maxAlti"),
        min_ph=_number(row, "minpH"),
        max_ph=_number(row, "maxpH"),
        soil_textures=textures,
        drought_tolerant=_flag(row, "drought_tolerant"),
        pest_tolerant=_flag(row, "pest_tolerant"),
        seed_available=_flag(row, "availability"),
        farmer_preferred=_flag(row, "farmer_preference"),
    )


def parse_climate_row(row: dict[str, str]) -> ClimateRecord | None:
    county, subcounty, ward = _text(row, "county"), _text(row, "subcounty"), _text(row, "ward")
    if not (county and subcounty and ward):
        return None
    return ClimateRecord(
        county=county,
        subcounty=subcounty,
        ward=ward,
        lat=_number(row, "lat"),
        lon=_number(row, "lon"),
        altitude=_number(row, "altitude"),
        annual_rain=_number(row, "annual_Rain"),
        annual_temp=_number(row, "annual_Temp"),
        soil_ph=_number(row, "ke_ph"),
        lr_rain=_optional_number(row, "LR_Rain"),
        lr_temp=_optional_number(row, "LR_Temp"),
        sr_rain=_optional_number(row, "SR_Rain"),
        sr_temp=_optional_number(row, "SR_Temp"),
    )


def parse_livestock_row(row: dict[str, str]) -> LivestockRecord | None:
    livestock, breed, aez = _text(row, "Livestock"), _text(row, "Breed"), _text(row, "AEZ")
    if not (livestock and breed and aez):
        return None
    return LivestockRecord(livestock=livestock, breed=breed, aez=aez)


def parse_pasture_row(row: dict[str, str]) -> PastureRecord | None:
    category = _text(row, "Pasture/fodder")
    pasture_type, variety, aez = _text(row, "Type"), _text(row, "Variety"), _text(row, "AEZ")
    if not (category and pasture_type and variety and aez):
        return None
    return PastureRecord(category=category, pasture_type=pasture_type, variety=variety, aez=aez)


def parse_aez_row(row: dict[str, str]) -> AEZDefinition | None:
    zone = _text(row, AEZ_ZONE_COLUMN)
    altitude, rainfall = _text(row, AEZ_ALTITUDE_COLUMN), _text(row, AEZ_RAINFALL_COLUMN)
    if not (zone and altitude and rainfall):
        return None
    return AEZDefinition(zone=zone, altitude_range=altitude, rainfall_range=rainfall)


def _load(path: Path, kind: str, parse) -> list:
    rows = _read_rows(path)
    records = []
    for line_no, row in enumerate(rows, start=2):
        record = parse(row)
        if record is None:
            logger.warning("Skipping %s row %d: missing essential fields", kind, line_no)
            continue
        records.append(record)
    _log_parsed(kind, len(records), len(rows))
    return records


def load_crops(path: Path) -> list[CropVariety]:
    return _load(path, "crop", parse_crop_row)


def load_climate(path: Path) -> list[ClimateRecord]:
    return _load(path, "climate", parse_climate_row)


def load_livestock(path: Path) -> list[LivestockRecord]:
    return _load(path, "livestock", parse_livestock_row)


def load_pasture(path: Path) -> list[PastureRecord]:
    return _load(path, "pasture", parse_pasture_row)


def load_aez(path: Path) -> list[AEZDefinition]:
    return _load(path, "AEZ", parse_aez_row)


def load_catalog(data_dir: str | Path) -> Catalog:
    """Load all five catalog files from a directory.

    Raises:
        CatalogError: if any file is missing or headerless.
    """
    base = Path(data_dir)
    catalog = Catalog(
        crops=load_crops(base / CROPS_FILE),
        livestock=load_livestock(base / LIVESTOCK_FILE),
        pasture=load_pasture(base / PASTURE_FILE),
        climate=load_climate(base / CLIMATE_FILE),
        aez=load_aez(base / AEZ_FILE),
    )
    logger.info("Catalog loaded from %s: %s", base, catalog.sizes())
    return catalog

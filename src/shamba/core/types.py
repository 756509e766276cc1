"""Domain types for the shamba recommendation engine.

All shared dataclasses live here to prevent circular imports and keep a
single source of truth for the domain model. Input records are frozen:
catalogs are loaded once and never mutated by the engine.
"""

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Location / climate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ClimateRecord:
    """Climate attributes for one ward (finest administrative unit)."""

    county: str
    subcounty: str
    ward: str
    lat: float
    lon: float
    altitude: float
    annual_rain: float
    annual_temp: float
    soil_ph: float
    # Long-rains / short-rains seasonal figures, carried for display only.
    lr_rain: float | None = None
    lr_temp: float | None = None
    sr_rain: float | None = None
    sr_temp: float | None = None


# ---------------------------------------------------------------------------
# Catalog records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CropVariety:
    """A crop variety and its ideal growing ranges."""

    crop_type: str
    crop: str
    variety: str
    min_temp: float
    max_temp: float
    min_rain: float
    max_rain: float
    min_altitude: float
    max_altitude: float
    min_ph: float
    max_ph: float
    soil_textures: tuple[str, ...] = ()
    drought_tolerant: bool = False
    pest_tolerant: bool = False
    seed_available: bool = False
    farmer_preferred: bool = False


@dataclass(frozen=True)
class LivestockRecord:
    """A livestock breed and the AEZ it is adapted to."""

    livestock: str
    breed: str
    aez: str


@dataclass(frozen=True)
class PastureRecord:
    """A pasture/fodder variety and the AEZ it is adapted to."""

    category: str
    pasture_type: str
    variety: str
    aez: str


@dataclass(frozen=True)
class AEZDefinition:
    """Reference row describing an agro-ecological zone, as published."""

    zone: str
    altitude_range: str
    rainfall_range: str


# ---------------------------------------------------------------------------
# Recommendation types
# ---------------------------------------------------------------------------

@dataclass
class CropRecommendation:
    """Suitability of one crop variety at one location."""

    crop: CropVariety
    suitability_score: int
    matching_factors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass
class LivestockRecommendation:
    """Binary AEZ match of a livestock breed at one location."""

    livestock: LivestockRecord
    suitability_score: int
    aez_match: bool
    zone: str


@dataclass
class PastureRecommendation:
    """Binary AEZ match of a pasture variety at one location."""

    pasture: PastureRecord
    suitability_score: int
    aez_match: bool
    zone: str


@dataclass
class LocationReport:
    """Everything recommended for a single ward."""

    location: ClimateRecord
    zone: str
    crops: list[CropRecommendation] = field(default_factory=list)
    crops_ranked: int = 0
    used_fallback: bool = False
    livestock: list[LivestockRecommendation] = field(default_factory=list)
    pasture: list[PastureRecommendation] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Catalog bundle
# ---------------------------------------------------------------------------

@dataclass
class Catalog:
    """All reference data the engine runs against."""

    crops: list[CropVariety] = field(default_factory=list)
    livestock: list[LivestockRecord] = field(default_factory=list)
    pasture: list[PastureRecord] = field(default_factory=list)
    climate: list[ClimateRecord] = field(default_factory=list)
    aez: list[AEZDefinition] = field(default_factory=list)

    def sizes(self) -> dict[str, int]:
        return {
            "crops": len(self.crops),
            "livestock": len(self.livestock),
            "pasture": len(self.pasture),
            "climate": len(self.climate),
            "aez": len(self.aez),
        }

"""Core domain types shared across all shamba modules."""

from shamba.core.types import (
    AEZDefinition,
    Catalog,
    ClimateRecord,
    CropRecommendation,
    CropVariety,
    LivestockRecommendation,
    LivestockRecord,
    LocationReport,
    PastureRecommendation,
    PastureRecord,
)

__all__ = [
    "AEZDefinition",
    "Catalog",
    "ClimateRecord",
    "CropRecommendation",
    "CropVariety",
    "LivestockRecommendation",
    "LivestockRecord",
    "LocationReport",
    "PastureRecommendation",
    "PastureRecord",
]

"""Group flat recommendation lists for display.

Dicts preserve insertion order, so each bucket keeps the ranked order it
received. Nothing is re-sorted here.
"""

from collections.abc import Iterable

from shamba.core.types import (
    CropRecommendation,
    LivestockRecommendation,
    PastureRecommendation,
)


def group_crops_by_type(
    recommendations: Iterable[CropRecommendation],
) -> dict[str, list[CropRecommendation]]:
    groups: dict[str, list[CropRecommendation]] = {}
    for rec in recommendations:
        groups.setdefault(rec.crop.crop_type, []).append(rec)
    return groups


def group_crops_by_type_and_name(
    recommendations: Iterable[CropRecommendation],
) -> dict[str, dict[str, list[CropRecommendation]]]:
    """Two-level grouping: crop type (e.g. "Cereal") → crop (e.g. "Maize") → varieties."""
    groups: dict[str, dict[str, list[CropRecommendation]]] = {}
    for rec in recommendations:
        by_crop = groups.setdefault(rec.crop.crop_type, {})
        by_crop.setdefault(rec.crop.crop, []).append(rec)
    return groups


def group_livestock_by_type(
    recommendations: Iterable[LivestockRecommendation],
) -> dict[str, list[LivestockRecommendation]]:
    groups: dict[str, list[LivestockRecommendation]] = {}
    for rec in recommendations:
        groups.setdefault(rec.livestock.livestock, []).append(rec)
    return groups


def group_pasture_by_type(
    recommendations: Iterable[PastureRecommendation],
) -> dict[str, list[PastureRecommendation]]:
    groups: dict[str, list[PastureRecommendation]] = {}
    for rec in recommendations:
        groups.setdefault(rec.pasture.category, []).append(rec)
    return groups

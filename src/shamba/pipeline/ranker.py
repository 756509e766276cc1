"""Crop recommendation ranking and selection.

Scores a whole crop catalog for one location, drops varieties with no
suitability at all, and orders the rest best-first. Python's sort is stable,
so varieties with equal scores keep their catalog order.
"""

import logging
from collections.abc import Iterable, Sequence

import mlflow
from mlflow.entities import SpanType

from shamba.core.types import ClimateRecord, CropRecommendation, CropVariety
from shamba.pipeline.scorer import score_crop

logger = logging.getLogger(__name__)

DEFAULT_RANK_LIMIT = 100
DEFAULT_SUITABILITY_THRESHOLD = 60
DEFAULT_FALLBACK_LIMIT = 10


@mlflow.trace(name="rank_crops", span_type=SpanType.CHAIN)
def rank_crops(
    crops: Sequence[CropVariety],
    location: ClimateRecord,
    limit: int = DEFAULT_RANK_LIMIT,
) -> list[CropRecommendation]:
    """Score every crop, keep scores > 0, sort descending, truncate to limit."""
    if not crops:
        logger.warning("No crop data available for recommendations")
        return []

    scored = [score_crop(crop, location) for crop in crops]
    ranked = sorted(
        (rec for rec in scored if rec.suitability_score > 0),
        key=lambda rec: rec.suitability_score,
        reverse=True,
    )[:limit]

    logger.info(
        "Ranked %d of %d crops, top score %d",
        len(ranked), len(crops), ranked[0].suitability_score if ranked else 0,
        extra={
            "county": location.county,
            "subcounty": location.subcounty,
            "ward": location.ward,
            "step": "rank_crops",
        },
    )
    return ranked


def select_crop_recommendations(
    ranked: list[CropRecommendation],
    threshold: int = DEFAULT_SUITABILITY_THRESHOLD,
    fallback_limit: int = DEFAULT_FALLBACK_LIMIT,
) -> tuple[list[CropRecommendation], bool]:
    """Apply the display policy to a ranked list.

    Keep everything scoring at least ``threshold``. If that leaves nothing
    while the ranked list is non-empty, fall back to the top
    ``fallback_limit`` regardless of score, so a location never shows
    "no crops" when any variety scored above zero.

    Returns:
        Tuple of (selected recommendations, whether the fallback was used).
    """
    selected = [rec for rec in ranked if rec.suitability_score >= threshold]
    if not selected and ranked:
        return ranked[:fallback_limit], True
    return selected, False


def suitability_label(score: int) -> str:
    """Card label for a crop score."""
    if score >= 80:
        return "Highly Suitable"
    if score >= 60:
        return "Moderately Suitable"
    return "Low Suitability"


def suitability_level(score: int) -> str:
    """Four-step level used when shading wards on a suitability map."""
    if score >= 80:
        return "Excellent"
    if score >= 65:
        return "Good"
    if score >= 45:
        return "Fair"
    return "Poor"


def score_wards(
    crop: CropVariety,
    locations: Iterable[ClimateRecord],
) -> list[tuple[ClimateRecord, CropRecommendation]]:
    """Score one variety across many wards, preserving input order.

    Unlike rank_crops, nothing is filtered: a map needs every ward, including
    the unsuitable ones.
    """
    return [(location, score_crop(crop, location)) for location in locations]

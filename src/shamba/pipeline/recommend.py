"""Location recommendation pipeline.

Given one ward and the loaded catalog: rank crops → apply the display
policy → match livestock and pasture by AEZ. Every step is a pure function
over the catalog, so concurrent requests need no locking.
"""

import logging
import time
from dataclasses import asdict

import mlflow
from mlflow.entities import SpanType

from shamba.config import Settings, settings as default_settings
from shamba.core.types import Catalog, ClimateRecord, LocationReport
from shamba.pipeline.aez import determine_aez
from shamba.pipeline.matcher import match_livestock, match_pasture
from shamba.pipeline.ranker import rank_crops, select_crop_recommendations

logger = logging.getLogger(__name__)


@mlflow.trace(name="recommend_for_location", span_type=SpanType.CHAIN)
def recommend_for_location(
    location: ClimateRecord,
    catalog: Catalog,
    settings: Settings | None = None,
) -> LocationReport:
    """Build the full crop/livestock/pasture report for one ward."""
    cfg = settings or default_settings
    start = time.monotonic()

    zone = determine_aez(location.altitude, location.annual_rain)

    ranked = rank_crops(catalog.crops, location, limit=cfg.rank_limit)
    crops, used_fallback = select_crop_recommendations(
        ranked,
        threshold=cfg.suitability_threshold,
        fallback_limit=cfg.fallback_limit,
    )
    if used_fallback:
        logger.info(
            "No crop reached %d, showing top %d instead",
            cfg.suitability_threshold, len(crops),
            extra={
                "county": location.county,
                "subcounty": location.subcounty,
                "ward": location.ward,
                "step": "select_crops",
            },
        )

    livestock = match_livestock(catalog.livestock, location)
    pasture = match_pasture(catalog.pasture, location)

    elapsed_ms = round((time.monotonic() - start) * 1000, 1)
    logger.info(
        "Recommendations ready: %d crops, %d livestock, %d pasture",
        len(crops), len(livestock), len(pasture),
        extra={
            "county": location.county,
            "subcounty": location.subcounty,
            "ward": location.ward,
            "zone": zone,
            "duration_ms": elapsed_ms,
        },
    )

    return LocationReport(
        location=location,
        zone=zone,
        crops=crops,
        crops_ranked=len(ranked),
        used_fallback=used_fallback,
        livestock=livestock,
        pasture=pasture,
    )


def report_to_dict(report: LocationReport) -> dict:
    """Serialize a LocationReport to a JSON-safe dict."""
    data = asdict(report)
    for rec in data["crops"]:
        rec["crop"]["soil_textures"] = list(rec["crop"]["soil_textures"])
    return data

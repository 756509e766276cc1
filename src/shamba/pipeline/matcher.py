"""Binary AEZ matching for livestock breeds and pasture varieties.

There is no partial credit here: a breed or fodder is either adapted to the
ward's zone (score 100) or it is dropped from the results entirely.
"""

import logging
from collections.abc import Sequence

import mlflow
from mlflow.entities import SpanType

from shamba.core.types import (
    ClimateRecord,
    LivestockRecommendation,
    LivestockRecord,
    PastureRecommendation,
    PastureRecord,
)
from shamba.pipeline.aez import determine_aez

logger = logging.getLogger(__name__)

MATCH_SCORE = 100


def aez_matches(declared: str, zone: str) -> bool:
    """Case-insensitive equality between a record's declared AEZ and a zone label."""
    return declared.lower() == zone.lower()


@mlflow.trace(name="match_livestock", span_type=SpanType.CHAIN)
def match_livestock(
    records: Sequence[LivestockRecord],
    location: ClimateRecord,
) -> list[LivestockRecommendation]:
    """Livestock breeds adapted to the location's AEZ, in catalog order."""
    zone = determine_aez(location.altitude, location.annual_rain)
    logger.info(
        "Ward AEZ %s for livestock (altitude %sm, rainfall %smm)",
        zone, location.altitude, location.annual_rain,
        extra={
            "county": location.county,
            "subcounty": location.subcounty,
            "ward": location.ward,
            "zone": zone,
        },
    )

    recommendations = []
    for record in records:
        matched = aez_matches(record.aez, zone)
        recommendations.append(LivestockRecommendation(
            livestock=record,
            suitability_score=MATCH_SCORE if matched else 0,
            aez_match=matched,
            zone=zone,
        ))
    return _suitable_first(recommendations)


@mlflow.trace(name="match_pasture", span_type=SpanType.CHAIN)
def match_pasture(
    records: Sequence[PastureRecord],
    location: ClimateRecord,
) -> list[PastureRecommendation]:
    """Pasture and fodder varieties adapted to the location's AEZ, in catalog order."""
    zone = determine_aez(location.altitude, location.annual_rain)
    logger.info(
        "Ward AEZ %s for pasture",
        zone,
        extra={
            "county": location.county,
            "subcounty": location.subcounty,
            "ward": location.ward,
            "zone": zone,
        },
    )

    recommendations = []
    for record in records:
        matched = aez_matches(record.aez, zone)
        recommendations.append(PastureRecommendation(
            pasture=record,
            suitability_score=MATCH_SCORE if matched else 0,
            aez_match=matched,
            zone=zone,
        ))
    return _suitable_first(recommendations)


def _suitable_first(recommendations: list) -> list:
    """Stable sort by score descending, then drop non-matches."""
    ordered = sorted(recommendations, key=lambda rec: rec.suitability_score, reverse=True)
    return [rec for rec in ordered if rec.suitability_score > 0]

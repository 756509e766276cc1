"""Agro-ecological zone (AEZ) classifier.

Pure functions, no I/O. Maps an (altitude, rainfall) pair to one of the
seven Kenyan AEZ labels. Rainfall only counts when it agrees with the
altitude band; otherwise altitude alone decides.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ZONE_LABELS: tuple[str, ...] = (
    "zone I",
    "zone II",
    "zone III",
    "zone IV",
    "zone V",
    "zone VI",
    "zone VII",
)


@dataclass(frozen=True)
class AEZBand:
    """Published altitude/rainfall envelope of one zone (None = open-ended)."""

    zone: str
    name: str
    altitude_min: float | None
    altitude_max: float | None
    rainfall_min: float | None
    rainfall_max: float | None


AEZ_BANDS: tuple[AEZBand, ...] = (
    AEZBand("zone I", "Agro-Alpine", 2900, None, 1400, None),
    AEZBand("zone II", "Upper Highlands", 2400, 2900, 1200, 2000),
    AEZBand("zone III", "Lower Highlands", 1800, 2400, 1000, 1800),
    AEZBand("zone IV", "Upper Midlands", 1500, 1800, 950, 1500),
    AEZBand("zone V", "Lower Midlands", 1200, 1500, 850, 1200),
    AEZBand("zone VI", "Upper Lowlands", 600, 1200, 700, 1100),
    AEZBand("zone VII", "Lower Lowlands", 0, 600, None, 700),
)


def _between(value: float, low: float, high: float) -> bool:
    return low <= value <= high


def determine_aez(altitude: float, rainfall: float) -> str:
    """Classify a location into an AEZ label ("zone I" … "zone VII").

    Total: always returns one of ZONE_LABELS. Bands II–VI are inclusive on
    both ends; zone I is strictly above 2900 m and 1400 mm; zone VII is
    0–600 m with strictly less than 700 mm.
    """
    zone = _match_band(altitude, rainfall)
    if zone is None:
        zone = _altitude_only(altitude)
        logger.debug(
            "No joint AEZ band for altitude=%s rainfall=%s, altitude fallback -> %s",
            altitude, rainfall, zone,
        )
    return zone


def _match_band(altitude: float, rainfall: float) -> str | None:
    """First band where altitude AND rainfall both agree, else None."""
    if altitude > 2900 and rainfall > 1400:
        return "zone I"
    if _between(altitude, 2400, 2900) and _between(rainfall, 1200, 2000):
        return "zone II"
    if _between(altitude, 1800, 2400) and _between(rainfall, 1000, 1800):
        return "zone III"
    if _between(altitude, 1500, 1800) and _between(rainfall, 950, 1500):
        return "zone IV"
    if _between(altitude, 1200, 1500) and _between(rainfall, 850, 1200):
        return "zone V"
    if _between(altitude, 600, 1200) and _between(rainfall, 700, 1100):
        return "zone VI"
    if _between(altitude, 0, 600) and rainfall < 700:
        return "zone VII"
    return None


def _altitude_only(altitude: float) -> str:
    if altitude > 2900:
        return "zone I"
    if altitude >= 2400:
        return "zone II"
    if altitude >= 1800:
        return "zone III"
    if altitude >= 1500:
        return "zone IV"
    if altitude >= 1200:
        return "zone V"
    if altitude >= 600:
        return "zone VI"
    # Negative altitude and NaN land here
    return "zone VII"


def describe_zone(label: str) -> AEZBand | None:
    """Look up the band for a zone label, ignoring case and surrounding space."""
    wanted = label.strip().lower()
    for band in AEZ_BANDS:
        if band.zone.lower() == wanted:
            return band
    return None

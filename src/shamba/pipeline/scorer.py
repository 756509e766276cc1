"""Deterministic crop suitability scorer.

Pure functions, no I/O. Takes one CropVariety + one ClimateRecord and
returns a CropRecommendation with a weighted score and the reasons for it.

Four climate factors are weighted 30/25/20/15 (90 in total). Just outside a
range earns partial credit within a tolerance band. Bonus flags add up to 10
more. The total is the plain sum with no clamp applied, so its ceiling is
whatever the weights add up to (currently 100).
"""

from shamba.core.types import ClimateRecord, CropRecommendation, CropVariety

TEMP_WEIGHT = 30
TEMP_PARTIAL = 15
TEMP_TOLERANCE_C = 3

RAIN_WEIGHT = 25
RAIN_PARTIAL = 12
RAIN_TOLERANCE_MM = 200

ALTITUDE_WEIGHT = 20
ALTITUDE_PARTIAL = 10
ALTITUDE_TOLERANCE_M = 300

PH_WEIGHT = 15
PH_PARTIAL = 7
PH_TOLERANCE = 0.5

DROUGHT_BONUS = 3
DROUGHT_RAIN_CEILING_MM = 800
PEST_BONUS = 3
SEED_BONUS = 2
PREFERENCE_BONUS = 2


def _fmt(value: float) -> str:
    """Render a number at full precision without a trailing '.0' (18.0 -> '18', 17.834567 -> '17.834567')."""
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _distance_to_range(value: float, low: float, high: float) -> float:
    """Distance from value to the nearest bound of [low, high]; caller ensures value is outside."""
    return low - value if value < low else value - high


def score_crop(crop: CropVariety, location: ClimateRecord) -> CropRecommendation:
    """Score a crop variety against a location's climate.

    matching_factors and warnings are appended in a fixed order
    (temperature, rainfall, altitude, pH, bonuses) that UIs rely on.
    """
    score = 0
    factors: list[str] = []
    warnings: list[str] = []

    # ── Factor 1: Temperature ──
    temp = location.annual_temp
    temp_range = f"{_fmt(crop.min_temp)}-{_fmt(crop.max_temp)}°C"
    if crop.min_temp <= temp <= crop.max_temp:
        score += TEMP_WEIGHT
        factors.append(f"Temperature suitable ({_fmt(temp)}°C within {temp_range})")
    elif _distance_to_range(temp, crop.min_temp, crop.max_temp) <= TEMP_TOLERANCE_C:
        score += TEMP_PARTIAL
        factors.append(f"Temperature close match ({_fmt(temp)}°C, optimal {temp_range})")
    else:
        warnings.append(f"Temperature mismatch: Current {_fmt(temp)}°C, Required {temp_range}")

    # ── Factor 2: Rainfall ──
    rain = location.annual_rain
    rain_range = f"{_fmt(crop.min_rain)}-{_fmt(crop.max_rain)}mm"
    if crop.min_rain <= rain <= crop.max_rain:
        score += RAIN_WEIGHT
        factors.append(f"Rainfall suitable ({_fmt(rain)}mm within {rain_range})")
    elif _distance_to_range(rain, crop.min_rain, crop.max_rain) <= RAIN_TOLERANCE_MM:
        score += RAIN_PARTIAL
        factors.append(f"Rainfall close match ({_fmt(rain)}mm, optimal {rain_range})")
    else:
        warnings.append(f"Rainfall mismatch: Current {_fmt(rain)}mm, Required {rain_range}")

    # ── Factor 3: Altitude ──
    alt = location.altitude
    alt_range = f"{_fmt(crop.min_altitude)}-{_fmt(crop.max_altitude)}m"
    if crop.min_altitude <= alt <= crop.max_altitude:
        score += ALTITUDE_WEIGHT
        factors.append(f"Altitude suitable ({_fmt(alt)}m within {alt_range})")
    elif _distance_to_range(alt, crop.min_altitude, crop.max_altitude) <= ALTITUDE_TOLERANCE_M:
        score += ALTITUDE_PARTIAL
        factors.append(f"Altitude close match ({_fmt(alt)}m, optimal {alt_range})")
    else:
        warnings.append(f"Altitude mismatch: Current {_fmt(alt)}m, Required {alt_range}")

    # ── Factor 4: Soil pH (tolerance measured from the range midpoint) ──
    ph = location.soil_ph
    ph_range = f"{_fmt(crop.min_ph)}-{_fmt(crop.max_ph)}"
    if crop.min_ph <= ph <= crop.max_ph:
        score += PH_WEIGHT
        factors.append(f"Soil pH suitable ({_fmt(ph)} within {ph_range})")
    elif abs(ph - (crop.min_ph + crop.max_ph) / 2) <= PH_TOLERANCE:
        score += PH_PARTIAL
        factors.append(f"Soil pH close match ({_fmt(ph)}, optimal {ph_range})")
    else:
        warnings.append(f"pH mismatch: Current {_fmt(ph)}, Required {ph_range}")

    # ── Bonuses ──
    if crop.drought_tolerant and rain < DROUGHT_RAIN_CEILING_MM:
        score += DROUGHT_BONUS
        factors.append("Drought tolerant variety (good for low rainfall)")
    if crop.pest_tolerant:
        score += PEST_BONUS
        factors.append("Pest resistant variety")
    if crop.seed_available:
        score += SEED_BONUS
        factors.append("Seeds readily available")
    if crop.farmer_preferred:
        score += PREFERENCE_BONUS
        factors.append("Preferred by local farmers")

    return CropRecommendation(
        crop=crop,
        suitability_score=score,
        matching_factors=factors,
        warnings=warnings,
    )

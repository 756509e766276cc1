"""Pydantic request/response models for the Shamba API.

These are the API contract, decoupled from the internal domain dataclasses.
Route handlers bridge the two with dataclasses.asdict().
"""

from pydantic import BaseModel, Field


class RecommendationRequest(BaseModel):
    """Request body for POST /api/v1/recommendations."""

    ward: str = Field(
        ...,
        min_length=1,
        max_length=100,
        examples=["Kiamokama"],
        description="Ward name; add subcounty/county when the name is ambiguous",
    )
    subcounty: str | None = Field(default=None, max_length=100)
    county: str | None = Field(default=None, max_length=100)


class LocationResponse(BaseModel):
    county: str
    subcounty: str
    ward: str
    lat: float
    lon: float
    altitude: float
    annual_rain: float
    annual_temp: float
    soil_ph: float
    lr_rain: float | None = None
    lr_temp: float | None = None
    sr_rain: float | None = None
    sr_temp: float | None = None


class CropVarietyResponse(BaseModel):
    crop_type: str
    crop: str
    variety: str
    soil_textures: list[str] = []
    min_temp: float
    max_temp: float
    min_rain: float
    max_rain: float
    min_altitude: float
    max_altitude: float
    min_ph: float
    max_ph: float
    drought_tolerant: bool = False
    pest_tolerant: bool = False
    seed_available: bool = False
    farmer_preferred: bool = False


class CropRecommendationResponse(BaseModel):
    crop: CropVarietyResponse
    suitability_score: int
    suitability_label: str = ""
    matching_factors: list[str] = []
    warnings: list[str] = []


class LivestockResponse(BaseModel):
    livestock: str
    breed: str
    aez: str


class LivestockRecommendationResponse(BaseModel):
    livestock: LivestockResponse
    suitability_score: int
    aez_match: bool
    zone: str


class PastureResponse(BaseModel):
    category: str
    pasture_type: str
    variety: str
    aez: str


class PastureRecommendationResponse(BaseModel):
    pasture: PastureResponse
    suitability_score: int
    aez_match: bool
    zone: str


class LocationReportResponse(BaseModel):
    """Full recommendation report for one ward."""

    location: LocationResponse
    zone: str
    crops: list[CropRecommendationResponse] = []
    crops_ranked: int = 0
    used_fallback: bool = False
    livestock: list[LivestockRecommendationResponse] = []
    pasture: list[PastureRecommendationResponse] = []


class AEZResponse(BaseModel):
    zone: str
    name: str = ""
    altitude_range: str = ""
    rainfall_range: str = ""
    altitude: float
    rainfall: float


class LocationListResponse(BaseModel):
    county: str | None = None
    names: list[str]


class ErrorResponse(BaseModel):
    detail: str


class WardSuitabilityResponse(BaseModel):
    county: str
    subcounty: str
    ward: str
    lat: float
    lon: float
    suitability_score: int
    suitability_level: str


class SuitabilityMapResponse(BaseModel):
    crop: str
    variety: str
    wards: list[WardSuitabilityResponse]

"""API route handlers for Shamba.

GET  /api/v1/aez              classify an (altitude, rainfall) point
GET  /api/v1/locations        counties, or wards within a county
GET  /api/v1/suitability      one variety scored across wards (map data)
POST /api/v1/recommendations  crop/livestock/pasture report for a ward
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Query, Request

from shamba.api.schemas import (
    AEZResponse,
    ErrorResponse,
    LocationListResponse,
    LocationReportResponse,
    RecommendationRequest,
    SuitabilityMapResponse,
    WardSuitabilityResponse,
)
from shamba.core.types import Catalog
from shamba.pipeline.aez import describe_zone, determine_aez
from shamba.pipeline.ranker import score_wards, suitability_label, suitability_level
from shamba.pipeline.recommend import recommend_for_location
from shamba.retrieval.locations import find_location, list_counties, list_wards

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["recommendations"])


def _catalog(request: Request) -> Catalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=503, detail="Catalog not loaded")
    return catalog


@router.get("/aez", response_model=AEZResponse)
async def classify_point(
    request: Request,
    altitude: float = Query(..., description="Metres above sea level"),
    rainfall: float = Query(..., description="Annual rainfall in mm"),
):
    """Classify a point into its agro-ecological zone.

    Published ranges come from the loaded AEZ table when one is available.
    """
    zone = determine_aez(altitude, rainfall)
    band = describe_zone(zone)
    catalog = getattr(request.app.state, "catalog", None)
    published = next(
        (d for d in (catalog.aez if catalog else []) if d.zone.lower() == zone.lower()),
        None,
    )
    return AEZResponse(
        zone=zone,
        name=band.name if band else "",
        altitude_range=published.altitude_range if published else "",
        rainfall_range=published.rainfall_range if published else "",
        altitude=altitude,
        rainfall=rainfall,
    )


@router.get("/locations", response_model=LocationListResponse)
async def locations(request: Request, county: str | None = None):
    """List counties, or the wards of one county."""
    catalog = _catalog(request)
    if county is None:
        return LocationListResponse(names=list_counties(catalog.climate))
    wards = list_wards(catalog.climate, county)
    if not wards:
        raise HTTPException(status_code=404, detail=f"Unknown county: {county}")
    return LocationListResponse(county=county, names=wards)


@router.post(
    "/recommendations",
    response_model=LocationReportResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Ward not found"},
        503: {"model": ErrorResponse, "description": "Catalog not loaded"},
    },
)
async def recommendations(body: RecommendationRequest, request: Request):
    """Recommend crops, livestock and pasture for a ward."""
    catalog = _catalog(request)
    location = find_location(catalog.climate, body.ward, body.subcounty, body.county)
    if location is None:
        logger.info("Ward not found: %s", body.ward, extra={"county": body.county, "subcounty": body.subcounty, "ward": body.ward})
        raise HTTPException(status_code=404, detail=f"Ward not found: {body.ward}")

    report = recommend_for_location(location, catalog, request.app.state.settings)

    response = LocationReportResponse(**asdict(report))
    for rec in response.crops:
        rec.suitability_label = suitability_label(rec.suitability_score)
    return response


@router.get(
    "/suitability",
    response_model=SuitabilityMapResponse,
    responses={404: {"model": ErrorResponse, "description": "Variety or county not found"}},
)
async def suitability_map(
    request: Request,
    crop: str,
    variety: str,
    county: str | None = None,
    subcounty: str | None = None,
):
    """Score one variety across every ward (optionally within a county/subcounty)."""
    catalog = _catalog(request)
    wanted = next(
        (c for c in catalog.crops
         if c.crop.casefold() == crop.casefold() and c.variety.casefold() == variety.casefold()),
        None,
    )
    if wanted is None:
        raise HTTPException(status_code=404, detail=f"Unknown variety: {crop} / {variety}")

    wards = catalog.climate
    if county is not None:
        wards = [w for w in wards if w.county.casefold() == county.casefold()]
    if subcounty is not None:
        wards = [w for w in wards if w.subcounty.casefold() == subcounty.casefold()]
    if not wards:
        raise HTTPException(status_code=404, detail="No wards match the given county/subcounty")

    return SuitabilityMapResponse(
        crop=wanted.crop,
        variety=wanted.variety,
        wards=[
            WardSuitabilityResponse(
                county=loc.county,
                subcounty=loc.subcounty,
                ward=loc.ward,
                lat=loc.lat,
                lon=loc.lon,
                suitability_score=rec.suitability_score,
                suitability_level=suitability_level(rec.suitability_score),
            )
            for loc, rec in score_wards(wanted, wards)
        ],
    )

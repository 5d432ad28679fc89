"""Admin routes for catalog curation and quality control."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from explora.application.usecase.admin import (
    CreateLocationRequest,
    CreateLocationResponse,
    CreateLocationUseCase,
    DeleteLocationRequest,
    DeleteLocationUseCase,
    GetCatalogValidationRequest,
    GetCatalogValidationUseCase,
    GetQualityReportRequest,
    GetQualityReportUseCase,
    ImportLocationsRequest,
    ImportLocationsUseCase,
    ListLocationsByQualityRequest,
    ListLocationsByQualityResponse,
    ListLocationsByQualityUseCase,
    UpdateLocationTagsRequest,
    UpdateLocationTagsUseCase,
    ValidateLocationRequest,
    ValidateLocationUseCase,
    VerifyLocationRequest,
    VerifyLocationUseCase,
)
from explora.domain.model.analysis import (
    CatalogValidationReport,
    ImportResult,
    LocationValidationResult,
    QualityReport,
)
from explora.domain.model.location import Location, LocationTags

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class ImportLocationsAPIRequest(BaseModel):
    """API request for a bulk import."""

    locations: list[dict[str, Any]] = Field(min_length=1, max_length=1000)


class VerifyLocationAPIRequest(BaseModel):
    verified_by: str = Field(default="admin", min_length=1, max_length=100)


@router.post("/locations/validate", response_model=LocationValidationResult)
async def validate_location(
    location: Location, use_case: FromDishka[ValidateLocationUseCase]
) -> LocationValidationResult:
    """Check a location's tagging without saving it."""
    return await use_case.execute(ValidateLocationRequest(location=location))


@router.post(
    "/locations",
    response_model=CreateLocationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_location(
    location: Location, use_case: FromDishka[CreateLocationUseCase]
) -> CreateLocationResponse:
    """Add a location to the catalog.

    Rejected with 400 and the full error list when its tags fail validation.
    """
    return await use_case.execute(CreateLocationRequest(location=location))


@router.post("/locations/import", response_model=ImportResult)
async def import_locations(
    request: ImportLocationsAPIRequest, use_case: FromDishka[ImportLocationsUseCase]
) -> ImportResult:
    """Import many locations; each record succeeds or fails on its own."""
    result = await use_case.execute(ImportLocationsRequest(records=request.locations))
    if result.failed:
        logfire.warn(
            "Import finished with failures",
            imported=len(result.imported),
            failed=len(result.failed),
        )
    return result


@router.put("/locations/{location_id}/tags", response_model=Location)
async def update_location_tags(
    location_id: str, tags: LocationTags, use_case: FromDishka[UpdateLocationTagsUseCase]
) -> Location:
    """Replace a location's tags."""
    return await use_case.execute(
        UpdateLocationTagsRequest(location_id=location_id, tags=tags)
    )


@router.post("/locations/{location_id}/verify", response_model=Location)
async def verify_location(
    location_id: str,
    use_case: FromDishka[VerifyLocationUseCase],
    request: VerifyLocationAPIRequest | None = None,
) -> Location:
    """Mark a location as verified."""
    verified_by = request.verified_by if request else "admin"
    return await use_case.execute(
        VerifyLocationRequest(location_id=location_id, verified_by=verified_by)
    )


@router.delete("/locations/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(
    location_id: str, use_case: FromDishka[DeleteLocationUseCase]
) -> None:
    """Remove a location from the catalog."""
    await use_case.execute(DeleteLocationRequest(location_id=location_id))


@router.get("/quality", response_model=QualityReport)
async def get_quality_report(
    use_case: FromDishka[GetQualityReportUseCase],
) -> QualityReport:
    """Catalog-wide quality summary."""
    return await use_case.execute(GetQualityReportRequest())


@router.get("/quality/locations", response_model=ListLocationsByQualityResponse)
async def list_locations_by_quality(
    use_case: FromDishka[ListLocationsByQualityUseCase],
    min_score: int = Query(default=0, ge=0, le=100),
    max_score: int = Query(default=100, ge=0, le=100),
) -> ListLocationsByQualityResponse:
    """Locations whose quality score falls within [min_score, max_score]."""
    return await use_case.execute(
        ListLocationsByQualityRequest(min_score=min_score, max_score=max_score)
    )


@router.get("/validation", response_model=CatalogValidationReport)
async def get_catalog_validation(
    use_case: FromDishka[GetCatalogValidationUseCase],
) -> CatalogValidationReport:
    """Per-location tagging analysis of the whole catalog."""
    return await use_case.execute(GetCatalogValidationRequest())

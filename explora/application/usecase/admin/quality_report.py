"""Catalog quality use cases for the admin dashboard."""

import logfire
from pydantic import BaseModel, Field, model_validator

from explora.domain.model.analysis import (
    CatalogValidationReport,
    LocationValidationResult,
    QualityReport,
)
from explora.domain.service import LocationService, QualityService, TagValidationService


class GetQualityReportRequest(BaseModel):
    pass


class ListLocationsByQualityRequest(BaseModel):
    """Inclusive quality score range."""

    min_score: int = Field(default=0, ge=0, le=100)
    max_score: int = Field(default=100, ge=0, le=100)

    @model_validator(mode="after")
    def check_range(self) -> "ListLocationsByQualityRequest":
        if self.min_score > self.max_score:
            raise ValueError("min_score must not exceed max_score")
        return self


class ListLocationsByQualityResponse(BaseModel):
    results: list[LocationValidationResult]
    total: int


class GetCatalogValidationRequest(BaseModel):
    pass


class GetQualityReportUseCase:
    """Use case for the catalog-wide quality summary."""

    def __init__(
        self, location_service: LocationService, quality_service: QualityService
    ) -> None:
        self.location_service = location_service
        self.quality_service = quality_service

    async def execute(self, request: GetQualityReportRequest) -> QualityReport:
        locations = await self.location_service.get_all()
        return self.quality_service.build_report(locations)


class ListLocationsByQualityUseCase:
    """Use case for listing locations within a quality score range."""

    def __init__(
        self, location_service: LocationService, quality_service: QualityService
    ) -> None:
        self.location_service = location_service
        self.quality_service = quality_service

    async def execute(
        self, request: ListLocationsByQualityRequest
    ) -> ListLocationsByQualityResponse:
        """Execute range listing.

        Args:
            request: Score range

        Returns:
            Quality results within the range, best first
        """
        with logfire.span(
            "list_locations_by_quality.execute",
            min_score=request.min_score,
            max_score=request.max_score,
        ):
            locations = await self.location_service.get_all()
            results = self.quality_service.filter_by_quality(
                locations, request.min_score, request.max_score
            )
            return ListLocationsByQualityResponse(results=results, total=len(results))


class GetCatalogValidationUseCase:
    """Use case for the per-location tagging analysis of the catalog."""

    def __init__(
        self,
        location_service: LocationService,
        tag_validation_service: TagValidationService,
    ) -> None:
        self.location_service = location_service
        self.tag_validation_service = tag_validation_service

    async def execute(self, request: GetCatalogValidationRequest) -> CatalogValidationReport:
        locations = await self.location_service.get_all()
        return self.tag_validation_service.validate_catalog(locations)

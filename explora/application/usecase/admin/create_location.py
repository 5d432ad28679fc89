"""Create location use case."""

from pydantic import BaseModel

from explora.domain.model.location import Location
from explora.domain.service import LocationService, QualityService


class CreateLocationRequest(BaseModel):
    """Create location request."""

    location: Location


class CreateLocationResponse(BaseModel):
    """Create location response."""

    location: Location
    quality_score: int
    warnings: list[str]
    suggestions: list[str]


class CreateLocationUseCase:
    """Use case for adding a location to the catalog."""

    def __init__(
        self, location_service: LocationService, quality_service: QualityService
    ) -> None:
        """Initialize create location use case.

        Args:
            location_service: Location catalog service
            quality_service: Quality control for the response summary
        """
        self.location_service = location_service
        self.quality_service = quality_service

    async def execute(self, request: CreateLocationRequest) -> CreateLocationResponse:
        """Execute create location flow.

        Args:
            request: Location to add

        Returns:
            Saved location with its quality summary

        Raises:
            LocationValidationError: If the tags fail validation
            BusinessRuleViolationError: If the ID is already taken
        """
        saved = await self.location_service.add_location(request.location)
        result = self.quality_service.validate_with_quality_control(saved)
        return CreateLocationResponse(
            location=saved,
            quality_score=result.quality_score,
            warnings=result.warnings,
            suggestions=result.suggestions,
        )

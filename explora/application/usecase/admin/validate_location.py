"""Validate location use case."""

import logfire
from pydantic import BaseModel

from explora.domain.model.analysis import LocationValidationResult
from explora.domain.model.location import Location
from explora.domain.service import QualityService


class ValidateLocationRequest(BaseModel):
    """Dry-run validation of a location before it is saved."""

    location: Location


class ValidateLocationUseCase:
    """Use case for checking a location's tagging without saving it."""

    def __init__(self, quality_service: QualityService) -> None:
        self.quality_service = quality_service

    async def execute(self, request: ValidateLocationRequest) -> LocationValidationResult:
        """Execute validation flow.

        Args:
            request: Location to check

        Returns:
            Errors, warnings, suggestions and quality score
        """
        with logfire.span("validate_location.execute", location_id=request.location.id):
            result = self.quality_service.validate_with_quality_control(request.location)
            logfire.info(
                "Location validated",
                location_id=request.location.id,
                is_valid=result.is_valid,
                quality_score=result.quality_score,
            )
            return result

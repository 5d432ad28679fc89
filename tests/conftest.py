"""Test configuration and fixtures."""

import logfire
import pytest

from explora.config import (
    PerformanceSettings,
    PersonalizationSettings,
    QualitySettings,
    TaggingSettings,
)
from explora.domain.model.location import Location, LocationTags
from explora.domain.registry import VIENNA_TAXONOMY
from explora.domain.service import (
    CategoryService,
    PerformanceService,
    QualityService,
    TagValidationService,
)
from explora.domain.value import LocationId

# Keep telemetry local; the API module instruments FastAPI on import
logfire.configure(send_to_logfire=False, console=False)


def make_tags(
    primary: list[str] | None = None,
    secondary: list[str] | None = None,
    hidden: list[str] | None = None,
    contextual: list[str] | None = None,
) -> LocationTags:
    """Helper function to build tags that pass validation by default.

    Primary tags span three categories and secondary tags cover every
    required group, so only the layers a test overrides can cause findings.
    """
    return LocationTags(
        primary=(
            primary
            if primary is not None
            else ["Art Museums", "Urban Parks", "Rooftop Views"]
        ),
        secondary=(
            secondary
            if secondary is not None
            else [
                "1-Hour Visit",
                "Indoor",
                "Walkable From Center",
                "Solo-Friendly",
            ]
        ),
        hidden=hidden if hidden is not None else ["Local Favorite", "Quiet Retreat"],
        contextual=contextual if contextual is not None else ["Best in Spring"],
    )


def make_location(
    location_id: str = "test-location",
    name: str = "Test Location",
    tags: LocationTags | None = None,
    **fields,
) -> Location:
    """Helper function to create a catalog location for tests."""
    return Location(
        id=LocationId(location_id),
        name=name,
        tags=tags if tags is not None else make_tags(),
        **fields,
    )


@pytest.fixture
def validation_service() -> TagValidationService:
    return TagValidationService(taxonomy=VIENNA_TAXONOMY, rules=TaggingSettings())


@pytest.fixture
def category_service() -> CategoryService:
    return CategoryService(taxonomy=VIENNA_TAXONOMY)


@pytest.fixture
def quality_service(
    validation_service: TagValidationService, category_service: CategoryService
) -> QualityService:
    return QualityService(
        validation_service=validation_service,
        category_service=category_service,
        performance_service=PerformanceService(settings=PerformanceSettings()),
        settings=QualitySettings(),
    )


@pytest.fixture
def personalization_settings() -> PersonalizationSettings:
    return PersonalizationSettings()

"""Unit tests for the admin catalog use cases."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from explora.application.usecase.admin import (
    CreateLocationRequest,
    CreateLocationUseCase,
    GetCatalogValidationRequest,
    GetCatalogValidationUseCase,
    GetQualityReportRequest,
    GetQualityReportUseCase,
    ImportLocationsRequest,
    ImportLocationsUseCase,
    ListLocationsByQualityRequest,
    ListLocationsByQualityUseCase,
    ValidateLocationRequest,
    ValidateLocationUseCase,
)
from explora.domain.error import LocationValidationError
from explora.domain.repository import LocationRepository
from tests.conftest import make_location, make_tags
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

# Seeded Vienna catalog
catalog_env = create_env_fixture(unmock={"persistence"})


class TestValidateLocationUseCase:
    @pytest.mark.asyncio
    async def test_dry_run_does_not_save(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ValidateLocationUseCase)
        location_repo = await unit_env.get(LocationRepository)

        # Act
        result = await use_case.execute(ValidateLocationRequest(location=make_location()))

        # Assert
        assert result.is_valid
        assert result.quality_score == 100
        assert await location_repo.find_all() == []


class TestCreateLocationUseCase:
    @pytest.mark.asyncio
    async def test_returns_quality_summary(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateLocationUseCase)
        location = make_location(
            tags=make_tags(
                primary=["Art Museums", "Urban Parks", "Rooftop Views"],
                secondary=["1-Hour Visit", "Indoor"],
                hidden=[],
                contextual=[],
            )
        )

        # Act
        response = await use_case.execute(CreateLocationRequest(location=location))

        # Assert
        assert response.location.id == "test-location"
        assert response.quality_score == 92
        assert len(response.warnings) >= 3

    @pytest.mark.asyncio
    async def test_rejects_badly_tagged_location(self, unit_env):
        use_case = await unit_env.get(CreateLocationUseCase)
        location = make_location(tags=make_tags(primary=[]))

        with pytest.raises(LocationValidationError):
            await use_case.execute(CreateLocationRequest(location=location))


class TestImportLocationsUseCase:
    @pytest.mark.asyncio
    async def test_reports_imported_and_failed(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ImportLocationsUseCase)
        records = [
            make_location("a", "A").model_dump(mode="json"),
            {"id": "b", "name": "B", "tags": {"primary": ["Moon Base"]}},
        ]

        # Act
        result = await use_case.execute(ImportLocationsRequest(records=records))

        # Assert
        assert result.imported == ["a"]
        assert [f.name for f in result.failed] == ["B"]

    def test_empty_import_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            ImportLocationsRequest(records=[])


class TestQualityUseCases:
    @pytest.mark.asyncio
    async def test_quality_report_over_seed_catalog(self, catalog_env):
        use_case = await catalog_env.get(GetQualityReportUseCase)

        report = await use_case.execute(GetQualityReportRequest())

        assert report.total_locations == 7
        assert report.valid_locations == 7
        assert report.needs_improvement == []
        assert 0 < len(report.top_quality) <= 5

    @pytest.mark.asyncio
    async def test_list_by_quality_range(self, catalog_env):
        use_case = await catalog_env.get(ListLocationsByQualityUseCase)

        response = await use_case.execute(
            ListLocationsByQualityRequest(min_score=0, max_score=100)
        )

        scores = [r.quality_score for r in response.results]
        assert response.total == 7
        assert scores == sorted(scores, reverse=True)

    def test_reversed_range_is_rejected(self):
        with pytest.raises(PydanticValidationError, match="min_score"):
            ListLocationsByQualityRequest(min_score=80, max_score=20)

    @pytest.mark.asyncio
    async def test_catalog_validation(self, catalog_env):
        use_case = await catalog_env.get(GetCatalogValidationUseCase)

        report = await use_case.execute(GetCatalogValidationRequest())

        assert report.total_locations == 7
        assert report.with_errors == 0
        assert report.meets_three_plus_rule == 7

"""Admin use cases."""

from .create_location import (
    CreateLocationRequest,
    CreateLocationResponse,
    CreateLocationUseCase,
)
from .import_locations import ImportLocationsRequest, ImportLocationsUseCase
from .quality_report import (
    GetCatalogValidationRequest,
    GetCatalogValidationUseCase,
    GetQualityReportRequest,
    GetQualityReportUseCase,
    ListLocationsByQualityRequest,
    ListLocationsByQualityResponse,
    ListLocationsByQualityUseCase,
)
from .update_location import (
    DeleteLocationRequest,
    DeleteLocationUseCase,
    UpdateLocationTagsRequest,
    UpdateLocationTagsUseCase,
    VerifyLocationRequest,
    VerifyLocationUseCase,
)
from .validate_location import ValidateLocationRequest, ValidateLocationUseCase

__all__ = [
    "CreateLocationRequest",
    "CreateLocationResponse",
    "CreateLocationUseCase",
    "DeleteLocationRequest",
    "DeleteLocationUseCase",
    "GetCatalogValidationRequest",
    "GetCatalogValidationUseCase",
    "GetQualityReportRequest",
    "GetQualityReportUseCase",
    "ImportLocationsRequest",
    "ImportLocationsUseCase",
    "ListLocationsByQualityRequest",
    "ListLocationsByQualityResponse",
    "ListLocationsByQualityUseCase",
    "UpdateLocationTagsRequest",
    "UpdateLocationTagsUseCase",
    "ValidateLocationRequest",
    "ValidateLocationUseCase",
    "VerifyLocationRequest",
    "VerifyLocationUseCase",
]

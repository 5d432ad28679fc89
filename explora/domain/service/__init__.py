"""Domain services."""

from .base import Service
from .category_service import CategoryService
from .favorite_service import FavoriteService
from .location_service import LocationService
from .mood_service import MoodService
from .performance_service import PerformanceService
from .personalization_service import PersonalizationService
from .quality_service import QualityService
from .search_service import SearchService
from .tag_validation_service import TagValidationService
from .trip_service import TripService
from .user_profile_service import UserProfileService

__all__ = [
    "CategoryService",
    "FavoriteService",
    "LocationService",
    "MoodService",
    "PerformanceService",
    "PersonalizationService",
    "QualityService",
    "SearchService",
    "Service",
    "TagValidationService",
    "TripService",
    "UserProfileService",
]

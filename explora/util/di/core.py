"""Settings sections and the tag registry, shared for the app lifetime."""

from dishka import Scope, provide

from explora.config import (
    CacheSettings,
    PerformanceSettings,
    PersonalizationSettings,
    QualitySettings,
    Settings,
    TaggingSettings,
    TripSettings,
)
from explora.domain.model.taxonomy import TagTaxonomy
from explora.domain.registry import VIENNA_TAXONOMY
from explora.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings, each settings section and the Vienna tag registry."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_taxonomy(self) -> TagTaxonomy:
        return VIENNA_TAXONOMY

    @provide
    def provide_tagging_settings(self, settings: Settings) -> TaggingSettings:
        return settings.tagging

    @provide
    def provide_quality_settings(self, settings: Settings) -> QualitySettings:
        return settings.quality

    @provide
    def provide_personalization_settings(
        self, settings: Settings
    ) -> PersonalizationSettings:
        return settings.personalization

    @provide
    def provide_performance_settings(self, settings: Settings) -> PerformanceSettings:
        return settings.performance

    @provide
    def provide_cache_settings(self, settings: Settings) -> CacheSettings:
        return settings.cache

    @provide
    def provide_trip_settings(self, settings: Settings) -> TripSettings:
        return settings.trips

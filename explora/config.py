"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TaggingSettings(BaseModel):
    """Tag count rules applied by the tag validator."""

    # Primary tags: outside these bounds is an error
    min_primary_tags: int = 3
    max_primary_tags: int = 5

    # Secondary tags: below min is an error, above max only a warning
    min_secondary_tags: int = 2
    max_secondary_tags: int = 5

    # Hidden and contextual tags are advisory only
    min_hidden_tags: int = 2
    max_hidden_tags: int = 6
    max_contextual_tags: int = 4

    # Secondary groups every location should cover
    required_secondary_groups: list[str] = [
        "Time Commitment",
        "Weather Suitability",
        "Mobility Context",
        "Audience Suitability",
    ]


class QualitySettings(BaseModel):
    """Weights for the tagging quality score."""

    validity_points: int = 40
    primary_tag_points: int = 8
    primary_tag_cap: int = 40
    secondary_tag_points: int = 4
    secondary_tag_cap: int = 20
    diversity_points: int = 20
    hidden_tag_bonus: int = 10
    contextual_tag_bonus: int = 10

    # Number of distinct primary categories that saturates diversity at 1.0
    diversity_saturation: int = 3

    # Final score is clamped to [0, max_score]
    max_score: int = 100

    # Quality report buckets
    top_quality_threshold: int = 80
    top_quality_limit: int = 5
    needs_improvement_threshold: int = 60
    needs_improvement_limit: int = 10
    # Locations spanning at least this many primary categories count as cross-category
    cross_category_min_categories: int = 2


class PersonalizationSettings(BaseModel):
    """Weights for personalized location ranking."""

    base_score: int = 1
    primary_match_points: int = 3
    secondary_match_points: int = 2

    # Bonus for strong alignment (total matches >= strong_match_threshold)
    strong_match_threshold: int = 3
    strong_match_bonus: int = 2

    # Bonus for exactly partial_match_threshold matches
    partial_match_threshold: int = 2
    partial_match_bonus: int = 1

    favorite_bonus: int = 5


class PerformanceSettings(BaseModel):
    """Thresholds for the catalog performance advisories."""

    primary_tag_variety_threshold: int = 50
    tags_per_location_threshold: float = 15.0
    scalability_location_threshold: int = 100
    pagination_location_threshold: int = 500


class CacheSettings(BaseModel):
    """Cache configuration."""

    # How long a (user, location) -> trips lookup stays valid
    trip_location_ttl_seconds: int = 300


class TripSettings(BaseModel):
    """Trip planning limits."""

    # Adding beyond max is refused; from warning_threshold on a pace warning is returned
    max_locations_per_day: int = 8
    recommended_locations_per_day: int = 5
    warning_threshold: int = 6

    # Longest trip that can be created, in days
    max_trip_days: int = 30


class CatalogSettings(BaseModel):
    """Location catalog configuration."""

    city_id: str = "vienna-austria"

    # Optional JSON file with location records
    # When unset, the bundled Vienna seed catalog is used
    seed_path: Path | None = None


class APISettings(BaseModel):
    """API configuration."""

    host: str = "localhost"
    port: int = 8000
    frontend_host: str = "localhost"

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Frontend origin allowed by CORS.

        In development: http://localhost:5173 (Vite)
        In production: https://<frontend_host>
        """
        if self.frontend_host == "localhost":
            return "http://localhost:5173"
        return f"https://{self.frontend_host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Every section can be overridden from the environment using the
    nested delimiter, for example:

        ENVIRONMENT=production
        QUALITY__MAX_SCORE=100
        TAGGING__MAX_PRIMARY_TAGS=6
        CATALOG__SEED_PATH=/data/vienna.json
        CACHE__TRIP_LOCATION_TTL_SECONDS=60
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows QUALITY__MAX_SCORE syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    # Nested settings
    api: APISettings = APISettings()
    tagging: TaggingSettings = TaggingSettings()
    quality: QualitySettings = QualitySettings()
    personalization: PersonalizationSettings = PersonalizationSettings()
    performance: PerformanceSettings = PerformanceSettings()
    cache: CacheSettings = CacheSettings()
    trips: TripSettings = TripSettings()
    catalog: CatalogSettings = CatalogSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def load_git_sha(self) -> "Settings":
        """Load git SHA from the version file baked into the image."""
        if self.git_sha == "unknown":
            self.git_sha = self._load_git_sha()
        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        # In development, version file may not exist
        return "unknown"

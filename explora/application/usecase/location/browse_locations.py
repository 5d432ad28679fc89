"""Browse locations use case."""

import logfire
from pydantic import BaseModel

from explora.domain.model.location import Location
from explora.domain.service import (
    FavoriteService,
    LocationService,
    MoodService,
    PersonalizationService,
    SearchService,
    UserProfileService,
)
from explora.domain.service.search_service import ALL_CATEGORY
from explora.domain.value import Coordinates, LocationId, Mood, UserId


class LocationItem(BaseModel):
    """Location card shown in lists.

    Hidden tags are algorithm-only and are never exposed here.
    """

    id: str
    name: str
    description: str
    category: str
    primary_tags: list[str]
    secondary_tags: list[str]
    contextual_tags: list[str]
    rating: float | None
    address: str | None
    coordinates: Coordinates | None
    image: str | None
    verified: bool
    is_favorite: bool = False
    score: int | None = None

    @classmethod
    def from_location(
        cls, location: Location, is_favorite: bool = False, score: int | None = None
    ) -> "LocationItem":
        tags = location.tags
        return cls(
            id=location.id,
            name=location.name,
            description=location.description,
            category=location.category,
            primary_tags=list(tags.primary),
            secondary_tags=list(tags.secondary),
            contextual_tags=list(tags.contextual),
            rating=location.rating,
            address=location.address,
            coordinates=location.coordinates,
            image=location.image,
            verified=location.verified,
            is_favorite=is_favorite,
            score=score,
        )


class BrowseLocationsRequest(BaseModel):
    """Browse locations request."""

    search: str = ""
    category: str = ALL_CATEGORY
    mood: Mood | None = None
    user_id: str | None = None  # Personalizes ranking when set


class BrowseLocationsResponse(BaseModel):
    """Browse locations response."""

    locations: list[LocationItem]
    total: int


class BrowseLocationsUseCase:
    """Use case for the main discovery list: filter, then rank."""

    def __init__(
        self,
        location_service: LocationService,
        search_service: SearchService,
        mood_service: MoodService,
        personalization_service: PersonalizationService,
        favorite_service: FavoriteService,
        user_profile_service: UserProfileService,
    ) -> None:
        """Initialize browse locations use case.

        Args:
            location_service: Location catalog service
            search_service: Text and category filtering
            mood_service: Mood filtering
            personalization_service: Ranking
            favorite_service: User favorites
            user_profile_service: User profiles
        """
        self.location_service = location_service
        self.search_service = search_service
        self.mood_service = mood_service
        self.personalization_service = personalization_service
        self.favorite_service = favorite_service
        self.user_profile_service = user_profile_service

    async def execute(self, request: BrowseLocationsRequest) -> BrowseLocationsResponse:
        """Execute browse flow.

        Anonymous requests get the unpersonalized ranking (every location
        scores the base score, so the list is alphabetical).

        Args:
            request: Filters and optional user

        Returns:
            Matching locations, best match first
        """
        with logfire.span(
            "browse_locations.execute",
            category=request.category,
            mood=request.mood.value if request.mood else None,
            personalized=request.user_id is not None,
        ):
            locations = await self.location_service.get_all()

            favorite_ids: set[LocationId] = set()
            profile = None
            if request.user_id:
                user_id = UserId(request.user_id)
                favorite_ids = await self.favorite_service.get_favorites(user_id)
                profile = await self.user_profile_service.get(user_id)

            locations = self.search_service.filter_locations(
                locations,
                search_term=request.search,
                category=request.category,
                favorite_ids=favorite_ids,
                accessibility=profile.accessibility if profile else None,
            )
            if request.mood:
                locations = self.mood_service.filter_by_mood(locations, request.mood)

            preferred = profile.travel_style.preferred_tags if profile else []
            ranked = self.personalization_service.rank(locations, preferred, favorite_ids)

            items = [
                LocationItem.from_location(
                    location,
                    is_favorite=location.id in favorite_ids,
                    score=self.personalization_service.score_for_profile(
                        location, profile, favorite_ids
                    ),
                )
                for location in ranked
            ]

            logfire.info("Locations browsed", count=len(items))

            return BrowseLocationsResponse(locations=items, total=len(items))

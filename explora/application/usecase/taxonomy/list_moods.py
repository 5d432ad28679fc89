"""Mood use cases."""

from pydantic import BaseModel

from explora.domain.model.taxonomy import MoodProfile
from explora.domain.service import MoodService
from explora.domain.value import Mood


class MoodItem(BaseModel):
    mood: Mood
    description: str
    tags: list[str]

    @classmethod
    def from_profile(cls, profile: MoodProfile) -> "MoodItem":
        return cls(
            mood=profile.mood, description=profile.description, tags=list(profile.fragments)
        )


class ListMoodsRequest(BaseModel):
    pass


class ListMoodsResponse(BaseModel):
    moods: list[MoodItem]


class GetMoodRequest(BaseModel):
    mood: Mood


class ListMoodsUseCase:
    """Use case for listing moods with their tag mappings."""

    def __init__(self, mood_service: MoodService) -> None:
        self.mood_service = mood_service

    async def execute(self, request: ListMoodsRequest) -> ListMoodsResponse:
        return ListMoodsResponse(
            moods=[MoodItem.from_profile(p) for p in self.mood_service.moods()]
        )


class GetMoodUseCase:
    """Use case for a single mood's tag mapping."""

    def __init__(self, mood_service: MoodService) -> None:
        self.mood_service = mood_service

    async def execute(self, request: GetMoodRequest) -> MoodItem:
        # Every Mood member is mapped in the registry; unknown strings are
        # rejected by request validation before reaching here
        profiles = {profile.mood: profile for profile in self.mood_service.moods()}
        return MoodItem.from_profile(profiles[request.mood])

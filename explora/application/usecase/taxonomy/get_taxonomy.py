"""Get taxonomy use case."""

from pydantic import BaseModel

from explora.domain.model.taxonomy import TagTaxonomy
from explora.domain.service import SearchService


class CategoryItem(BaseModel):
    key: str
    name: str
    tags: list[str]


class GetTaxonomyRequest(BaseModel):
    pass


class GetTaxonomyResponse(BaseModel):
    """User-facing tag layers plus the browse filter chips.

    Hidden tags are left out; they are for the ranking algorithms only.
    """

    primary_categories: list[CategoryItem]
    secondary_groups: list[CategoryItem]
    contextual_tags: list[str]
    filter_categories: list[str]


class GetTaxonomyUseCase:
    """Use case for exposing the tag registry to clients."""

    def __init__(self, taxonomy: TagTaxonomy, search_service: SearchService) -> None:
        self.taxonomy = taxonomy
        self.search_service = search_service

    async def execute(self, request: GetTaxonomyRequest) -> GetTaxonomyResponse:
        return GetTaxonomyResponse(
            primary_categories=[
                CategoryItem(key=c.key, name=c.name, tags=list(c.tags))
                for c in self.taxonomy.primary_categories
            ],
            secondary_groups=[
                CategoryItem(key=g.key, name=g.name, tags=list(g.tags))
                for g in self.taxonomy.secondary_groups
            ],
            contextual_tags=list(self.taxonomy.contextual_tags),
            filter_categories=self.search_service.filter_categories(),
        )

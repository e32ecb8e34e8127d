"""Shared fixtures for slugroute tests."""

import pytest

from slugroute.categories import Category, InMemoryCategoryRepository
from slugroute.routing.listing import ListingRouter


class RecordingRepository(InMemoryCategoryRepository):
    """In-memory repository that remembers every slug it was asked for."""

    __slots__ = ("calls",)

    def __init__(self, categories=()) -> None:
        self.calls: list[str] = []
        super().__init__(categories)

    def get_category_by_slug(self, slug: str, exception_on_miss: bool = True) -> Category | None:
        self.calls.append(slug)
        return super().get_category_by_slug(slug, exception_on_miss)


@pytest.fixture
def body_care() -> Category:
    return Category(
        key="body-care",
        slug={
            "de": "haustechnik-ht-koerperpflege-mundpflege",
            "en": "home-ht-body-care-oral-care",
        },
        languages=("de",),
    )


@pytest.fixture
def repository(body_care: Category) -> RecordingRepository:
    return RecordingRepository([body_care])


@pytest.fixture
def router(repository: RecordingRepository) -> ListingRouter:
    return ListingRouter(repository)

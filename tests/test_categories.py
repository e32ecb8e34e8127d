"""Tests for slugroute.categories: category model and in-memory repository."""

import pytest

from slugroute.categories import (
    Category,
    CategoryRepository,
    InMemoryCategoryRepository,
    LocalizedSlugSource,
)
from slugroute.errors import CategoryNotFound


class TestCategory:
    def test_first_language_wins(self) -> None:
        cat = Category("care", {"de": "pflege", "en": "care"}, ("de", "en"))
        assert cat.get_localized_slug() == "pflege"

    def test_falls_back_to_next_language(self) -> None:
        cat = Category("care", {"en": "care"}, ("de", "en"))
        assert cat.get_localized_slug() == "care"

    def test_empty_slug_counts_as_missing(self) -> None:
        cat = Category("care", {"de": "", "en": "care"}, ("de", "en"))
        assert cat.get_localized_slug() == "care"

    def test_no_languages_uses_first_slug(self) -> None:
        assert Category("care", {"de": "", "en": "care"}).get_localized_slug() == "care"

    def test_no_languages_and_no_slug(self) -> None:
        assert Category("care").get_localized_slug() is None

    def test_no_slug(self) -> None:
        assert Category("care", languages=("en",)).get_localized_slug() is None

    def test_with_languages(self) -> None:
        cat = Category("care", {"de": "pflege", "en": "care"}, ("de",))
        assert cat.with_languages("en").get_localized_slug() == "care"
        assert cat.get_localized_slug() == "pflege"

    def test_str_is_key(self) -> None:
        assert str(Category("care")) == "care"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(Category("care"), LocalizedSlugSource)


class TestInMemoryCategoryRepository:
    def test_lookup(self) -> None:
        cat = Category("care", {"de": "pflege", "en": "care"})
        repo = InMemoryCategoryRepository([cat])
        assert repo.get_category_by_slug("pflege") is cat
        assert repo.get_category_by_slug("care") is cat

    def test_miss_raises(self) -> None:
        repo = InMemoryCategoryRepository()
        with pytest.raises(CategoryNotFound) as exc_info:
            repo.get_category_by_slug("nope")
        assert exc_info.value.slug == "nope"

    def test_miss_without_exception(self) -> None:
        repo = InMemoryCategoryRepository()
        assert repo.get_category_by_slug("nope", exception_on_miss=False) is None

    def test_add(self) -> None:
        repo = InMemoryCategoryRepository()
        repo.add(Category("care", {"en": "care"}))
        assert "care" in repo
        assert len(repo) == 1
        assert list(repo) == ["care"]

    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryCategoryRepository(), CategoryRepository)

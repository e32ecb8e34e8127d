"""Category model and lookup contracts.

The router never owns categories. It asks a ``CategoryRepository`` for
one while matching, and asks any ``LocalizedSlugSource`` for its slug
while generating. Developers bring their own catalog client; the
in-memory repository here covers fixtures and small static catalogs.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from slugroute.errors import CategoryNotFound


@runtime_checkable
class LocalizedSlugSource(Protocol):
    """Anything that can name its slug for the current locale.

    Any object with ``get_localized_slug()`` satisfies this.
    """

    def get_localized_slug(self) -> str | None: ...


@runtime_checkable
class CategoryRepository(Protocol):
    """Resolves a slug to a category.

    Implementations raise ``CategoryNotFound`` on a miss when
    *exception_on_miss* is true, and return ``None`` otherwise.
    """

    def get_category_by_slug(self, slug: str, exception_on_miss: bool = True) -> Any: ...


@dataclass(frozen=True, slots=True)
class Category:
    """A product category with one slug per locale.

    ``languages`` lists the preferred locales in order; the first one
    with a non-empty slug wins::

        cat = Category("care", {"de": "koerperpflege", "en": "body-care"}, ("de",))
        cat.get_localized_slug()  # "koerperpflege"

    Without ``languages`` the first non-empty slug is used.
    """

    key: str
    slug: Mapping[str, str] = field(default_factory=dict)
    languages: tuple[str, ...] = ()

    def get_localized_slug(self) -> str | None:
        candidates = self.languages or tuple(self.slug)
        for language in candidates:
            value = self.slug.get(language)
            if value:
                return value
        return None

    def with_languages(self, *languages: str) -> "Category":
        """Return a copy that resolves slugs for *languages*."""
        return Category(key=self.key, slug=self.slug, languages=languages)

    def __str__(self) -> str:
        return self.key


class InMemoryCategoryRepository:
    """Dict-backed ``CategoryRepository``.

    Every locale's slug of every added category is indexed, so a
    lookup succeeds regardless of which language the URL was built in.
    """

    __slots__ = ("_by_slug",)

    def __init__(self, categories: Iterable[Category] = ()) -> None:
        self._by_slug: dict[str, Category] = {}
        for category in categories:
            self.add(category)

    def add(self, category: Category) -> None:
        for value in category.slug.values():
            if value:
                self._by_slug[value] = category

    def get_category_by_slug(self, slug: str, exception_on_miss: bool = True) -> Category | None:
        category = self._by_slug.get(slug)
        if category is None and exception_on_miss:
            raise CategoryNotFound(slug)
        return category

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_slug)

    def __len__(self) -> int:
        return len(self._by_slug)

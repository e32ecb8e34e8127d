"""Listing router: resolves category slugs to listing pages and back.

Matching trims the path to a slug and asks a ``CategoryRepository``
for the category. Generation turns a route name plus ``slug`` parameter,
or any ``LocalizedSlugSource``, into ``<base_url>/<slug>[?query]``.

The router holds no routing table and caches nothing: every call goes
through the repository or the target object.
"""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from slugroute.categories import CategoryRepository, LocalizedSlugSource
from slugroute.errors import (
    CategoryNotFound,
    ForbiddenChars,
    MissingSlugParameter,
    ResourceNotFound,
    RouteNotFound,
)
from slugroute.routing.collection import RouteCollection
from slugroute.routing.context import RequestContext
from slugroute.routing.route import ByName, DispatchDescriptor, ReferenceType, target_of

DEFAULT_CONTROLLER = "BestIt\\Frontend\\ListingBundle\\Controller\\ListingController::indexAction"
DEFAULT_ROUTE = "best_it_frontend_listing_listing_index"

# Unicode word characters plus the unreserved URL punctuation and "/"
_SLUG_CHARS = re.compile(r"[\w\-.~/]*")


class ListingRouter:
    """Bidirectional slug <-> category router.

    Usage::

        router = ListingRouter(repository)
        router.context = RequestContext("/shop")
        router.match("/body-care/").category   # repository lookup
        router.generate(category)              # "/shop/body-care"
    """

    __slots__ = ("_context", "_controller", "_repository", "_route")

    def __init__(
        self,
        repository: CategoryRepository,
        controller: str = DEFAULT_CONTROLLER,
        route: str = DEFAULT_ROUTE,
        context: RequestContext | None = None,
    ) -> None:
        self._repository = repository
        self._controller = controller
        self._route = route
        self._context = context if context is not None else RequestContext()

    @property
    def controller(self) -> str:
        return self._controller

    @property
    def route(self) -> str:
        return self._route

    @property
    def repository(self) -> CategoryRepository:
        return self._repository

    @property
    def context(self) -> RequestContext:
        return self._context

    @context.setter
    def context(self, context: RequestContext) -> None:
        self._context = context

    # -- Matching --

    def match(self, path: str) -> DispatchDescriptor:
        """Resolve *path* to the category listing it names.

        Raises ``ForbiddenChars`` if the path cannot be a slug.
        Raises ``ResourceNotFound`` if the repository has no category for it.
        """
        slug = path.strip("/")
        if not _SLUG_CHARS.fullmatch(slug):
            msg = f"Forbidden characters in category path {path!r}"
            raise ForbiddenChars(msg)

        try:
            category = self._repository.get_category_by_slug(slug)
        except CategoryNotFound as exc:
            msg = f"No category found for slug {path}"
            raise ResourceNotFound(msg) from exc

        return DispatchDescriptor(controller=self._controller, route=self._route, category=category)

    # -- Generation --

    def resolve(
        self,
        target: Any,
        params: Mapping[str, Any] | None = None,
    ) -> tuple[str | None, dict[str, Any]]:
        """Return the slug for *target* and the parameters left for the query.

        The caller's *params* mapping is copied, never modified.
        """
        remaining = dict(params or {})
        tagged = target_of(target)

        if isinstance(tagged, ByName):
            if tagged.name != self._route:
                return None, remaining
            if "slug" not in remaining:
                msg = "Missing param `slug` for category route generation"
                raise MissingSlugParameter(msg)
            return remaining.pop("slug"), remaining

        if isinstance(tagged.source, LocalizedSlugSource):
            return tagged.source.get_localized_slug(), remaining
        return None, remaining

    def generate(
        self,
        target: Any,
        params: Mapping[str, Any] | None = None,
        reference_type: ReferenceType | int = ReferenceType.ABSOLUTE_PATH,
    ) -> str:
        """Build the listing URL for *target*.

        *target* is either the configured route name (with a ``slug``
        entry in *params*) or an object exposing ``get_localized_slug()``.
        Remaining *params* become the query string.

        Raises ``RouteNotFound`` for any reference type other than
        ``ABSOLUTE_PATH``, or when no slug can be resolved.
        Raises ``MissingSlugParameter`` if the route name is given without
        a ``slug`` parameter.
        """
        if reference_type != ReferenceType.ABSOLUTE_PATH:
            msg = "Only `absolute path` is allowed for category route generation"
            raise RouteNotFound(msg)

        slug, query = self.resolve(target, params)
        if not slug:
            msg = f"No category found for route {target}"
            raise RouteNotFound(msg)

        url = f"{self._context.base_url}/{slug}"
        # None values never reach the query string; booleans are written as 1/0
        query = {
            key: int(value) if isinstance(value, bool) else value
            for key, value in query.items()
            if value is not None
        }
        if query:
            url = f"{url}?{urlencode(query, doseq=True)}"
        return url

    # -- Chain support --

    def supports(self, target: Any) -> bool:
        """True if *target* is a slug source or the configured route name."""
        tagged = target_of(target)
        if isinstance(tagged, ByName):
            return tagged.name == self._route
        return isinstance(tagged.source, LocalizedSlugSource)

    def get_route_collection(self) -> RouteCollection:
        """Always empty; listing routes are resolved dynamically."""
        return RouteCollection()

    def get_route_debug_message(self, target: Any, params: Mapping[str, Any] | None = None) -> str:
        return str(target)

    def __repr__(self) -> str:
        return f"ListingRouter(route={self._route!r}, controller={self._controller!r})"

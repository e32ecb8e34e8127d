"""slugroute exception hierarchy.

Shared across ListingRouter, ChainRouter, repositories, and wiring so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class SlugRouteError(Exception):
    """Base for all slugroute-specific errors."""


class ConfigurationError(SlugRouteError):
    """Raised when router configuration is invalid.

    Typically raised by ``RouterConfig`` or ``install()`` at startup.
    """


class CategoryNotFound(SlugRouteError):  # noqa: N818
    """A category repository found nothing for the given slug."""

    def __init__(self, slug: str, detail: str = "") -> None:
        self.slug = slug
        super().__init__(detail or f"No category found for slug {slug!r}")


@dataclass(frozen=True, slots=True)
class HTTPError(SlugRouteError):
    """An error that maps directly to an HTTP status code.

    Raised while matching a path. The host framework turns these
    into responses.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class ResourceNotFound(HTTPError):  # noqa: N818
    """404: the path does not resolve to a category."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class ForbiddenChars(ResourceNotFound):  # noqa: N818
    """404: the path holds characters that can never be part of a slug."""


class NoRouterMatched(ResourceNotFound):  # noqa: N818
    """404: every router in the chain declined the path."""


class RouteNotFound(SlugRouteError):  # noqa: N818
    """A URL cannot be generated for the given target."""


class MissingSlugParameter(SlugRouteError, ValueError):  # noqa: N818
    """Generation by route name was attempted without a ``slug`` parameter."""

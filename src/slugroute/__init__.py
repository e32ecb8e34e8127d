"""slugroute: category slug routing for storefront listing pages.

Maps URL slugs to product categories and categories back to URLs,
and plugs into a host framework's prioritized router chain.

Basic usage::

    from slugroute import Category, ChainRouter, InMemoryCategoryRepository, install

    repository = InMemoryCategoryRepository([Category("care", {"en": "body-care"}, ("en",))])
    chain = ChainRouter()
    install(chain, {"repository": "shop.catalog:categories"}, repository=repository)

    chain.match("/body-care/").category       # Category("care", ...)
    chain.generate(repository.get_category_by_slug("body-care"))  # "/body-care"
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ByName",
    "ByObject",
    "Category",
    "CategoryNotFound",
    "CategoryRepository",
    "ChainRouter",
    "ConfigurationError",
    "DispatchDescriptor",
    "ForbiddenChars",
    "HTTPError",
    "InMemoryCategoryRepository",
    "ListingRouter",
    "LocalizedSlugSource",
    "MissingSlugParameter",
    "NoRouterMatched",
    "ReferenceType",
    "RequestContext",
    "ResourceNotFound",
    "RouteCollection",
    "RouteNotFound",
    "RouterConfig",
    "SlugRouteError",
    "install",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ByName": "slugroute.routing.route",
    "ByObject": "slugroute.routing.route",
    "Category": "slugroute.categories",
    "CategoryNotFound": "slugroute.errors",
    "CategoryRepository": "slugroute.categories",
    "ChainRouter": "slugroute.routing.chain",
    "ConfigurationError": "slugroute.errors",
    "DispatchDescriptor": "slugroute.routing.route",
    "ForbiddenChars": "slugroute.errors",
    "HTTPError": "slugroute.errors",
    "InMemoryCategoryRepository": "slugroute.categories",
    "ListingRouter": "slugroute.routing.listing",
    "LocalizedSlugSource": "slugroute.categories",
    "MissingSlugParameter": "slugroute.errors",
    "NoRouterMatched": "slugroute.errors",
    "ReferenceType": "slugroute.routing.route",
    "RequestContext": "slugroute.routing.context",
    "ResourceNotFound": "slugroute.errors",
    "RouteCollection": "slugroute.routing.collection",
    "RouteNotFound": "slugroute.errors",
    "RouterConfig": "slugroute.config",
    "SlugRouteError": "slugroute.errors",
    "install": "slugroute.wiring",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import slugroute`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)

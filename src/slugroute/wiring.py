"""Wiring: builds listing routers from configuration and installs them.

The host passes one or more configuration mappings; the repository is
either handed in directly or located through its import string.
"""

import importlib
import logging
from collections.abc import Mapping
from typing import Any

from slugroute.categories import CategoryRepository
from slugroute.config import RouterConfig, process_configuration
from slugroute.errors import ConfigurationError
from slugroute.routing.chain import ChainRouter
from slugroute.routing.listing import ListingRouter

logger = logging.getLogger("slugroute.wiring")


def resolve_repository(import_string: str) -> CategoryRepository:
    """Resolve an import string to a category repository.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"repository"`` (e.g. ``"shop.catalog"``
    resolves to ``shop.catalog.repository``).

    Supports factory functions: if the resolved object is callable and
    not already a repository, it is called.

    Raises:
        ConfigurationError: If the module or attribute cannot be found,
            the factory fails, or the result is not a repository.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "repository"

    try:
        module = importlib.import_module(module_path)
        obj = getattr(module, attr_name)
    except (ModuleNotFoundError, AttributeError) as exc:
        msg = f"Cannot resolve repository {import_string!r}: {exc}"
        raise ConfigurationError(msg) from exc

    # Classes satisfy the protocol check through their methods; instantiate them too
    if isinstance(obj, type) or (callable(obj) and not isinstance(obj, CategoryRepository)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Repository factory {import_string!r} raised an error: {exc}"
            raise ConfigurationError(msg) from exc

    if isinstance(obj, type) or not isinstance(obj, CategoryRepository):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a category repository"
        raise ConfigurationError(msg)

    return obj


def build_router(config: RouterConfig, repository: CategoryRepository | None = None) -> ListingRouter:
    """Create a ``ListingRouter`` for *config*.

    *repository* overrides the configured reference, which is then
    not imported at all.
    """
    if repository is None:
        repository = resolve_repository(config.repository)
    return ListingRouter(repository, controller=config.controller, route=config.route)


def install(
    chain: ChainRouter,
    *configs: Mapping[str, Any],
    repository: CategoryRepository | None = None,
) -> ListingRouter:
    """Process *configs*, build the router, and add it to *chain*.

    Returns the installed router.
    """
    config = process_configuration(configs)
    router = build_router(config, repository)
    chain.add(router, priority=config.priority)
    logger.info(
        "Installed listing router %r (controller=%s, priority=%d)",
        config.route,
        config.controller,
        config.priority,
    )
    return router

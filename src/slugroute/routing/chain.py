"""Prioritized router chain.

Routers are tried from the highest priority down. A router that raises
``ResourceNotFound`` while matching, or ``RouteNotFound`` while
generating, has declined and the next one gets its turn.
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from slugroute.errors import NoRouterMatched, ResourceNotFound, RouteNotFound
from slugroute.routing.collection import RouteCollection
from slugroute.routing.context import RequestContext
from slugroute.routing.route import DispatchDescriptor, ReferenceType

logger = logging.getLogger("slugroute.routing")


class Router(Protocol):
    """What the chain needs from a member router.

    ``supports()`` is optional; routers without it are always asked
    to generate.
    """

    context: RequestContext

    def match(self, path: str) -> DispatchDescriptor: ...

    def generate(
        self,
        target: Any,
        params: Mapping[str, Any] | None = None,
        reference_type: ReferenceType | int = ReferenceType.ABSOLUTE_PATH,
    ) -> str: ...

    def get_route_collection(self) -> RouteCollection: ...


class ChainRouter:
    """Tries member routers in priority order.

    Usage::

        chain = ChainRouter()
        chain.add(listing_router, priority=10)
        chain.add(fallback_router)
        chain.context = RequestContext("/shop")
        chain.match("/body-care")
    """

    __slots__ = ("_context", "_entries", "_sequence")

    def __init__(self, context: RequestContext | None = None) -> None:
        self._context = context if context is not None else RequestContext()
        # (priority, insertion order, router)
        self._entries: list[tuple[int, int, Router]] = []
        self._sequence = 0

    def add(self, router: Router, priority: int = 0) -> None:
        """Register *router*. Higher priorities are tried first.

        Routers with equal priority keep their registration order.
        The router is switched to the chain's request context.
        """
        router.context = self._context
        self._entries.append((priority, self._sequence, router))
        self._sequence += 1
        self._entries.sort(key=lambda entry: (-entry[0], entry[1]))

    @property
    def routers(self) -> tuple[Router, ...]:
        """Member routers in the order they are tried."""
        return tuple(router for _, _, router in self._entries)

    @property
    def context(self) -> RequestContext:
        return self._context

    @context.setter
    def context(self, context: RequestContext) -> None:
        self._context = context
        for router in self.routers:
            router.context = context

    def match(self, path: str) -> DispatchDescriptor:
        """Return the first member match for *path*.

        Raises ``NoRouterMatched`` if every router declines.
        """
        last_decline: ResourceNotFound | None = None
        for router in self.routers:
            try:
                return router.match(path)
            except ResourceNotFound as exc:
                logger.debug("%r declined %r: %s", router, path, exc.detail)
                last_decline = exc

        msg = f"No route found for {path!r}"
        raise NoRouterMatched(msg) from last_decline

    def generate(
        self,
        target: Any,
        params: Mapping[str, Any] | None = None,
        reference_type: ReferenceType | int = ReferenceType.ABSOLUTE_PATH,
    ) -> str:
        """Return the first URL a supporting member generates for *target*.

        Raises ``RouteNotFound`` if no router can generate it.
        """
        last_decline: RouteNotFound | None = None
        for router in self.routers:
            supports = getattr(router, "supports", None)
            if supports is not None and not supports(target):
                continue
            try:
                return router.generate(target, params, reference_type)
            except RouteNotFound as exc:
                logger.debug("%r declined to generate %s: %s", router, target, exc)
                last_decline = exc

        msg = f"No router could generate a URL for {target}"
        raise RouteNotFound(msg) from last_decline

    def get_route_collection(self) -> RouteCollection:
        """Merge every member's static routes; higher priorities win."""
        collection = RouteCollection()
        for router in reversed(self.routers):
            collection.add_collection(router.get_route_collection())
        return collection

    def __len__(self) -> int:
        return len(self._entries)

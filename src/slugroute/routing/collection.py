"""Ordered collection of statically known routes."""

from collections.abc import Iterator, Mapping
from typing import Any


class RouteCollection(Mapping[str, Any]):
    """Route name -> route definition, in insertion order.

    Dynamic routers contribute nothing here. The collection exists so
    a chain can merge whatever static routes its members expose.
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Mapping[str, Any] | None = None) -> None:
        self._routes: dict[str, Any] = dict(routes or {})

    def add(self, name: str, route: Any) -> None:
        """Add *route* under *name*, replacing any previous entry."""
        self._routes.pop(name, None)
        self._routes[name] = route

    def add_collection(self, other: Mapping[str, Any]) -> None:
        """Merge *other* into this collection. Later entries win."""
        for name, route in other.items():
            self.add(name, route)

    def __getitem__(self, name: str) -> Any:
        return self._routes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteCollection({self._routes!r})"

"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation, validated
on construction, no string-key dict lookups downstream.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from slugroute.errors import ConfigurationError
from slugroute.routing.listing import DEFAULT_CONTROLLER, DEFAULT_ROUTE


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Configuration for one listing router. Immutable after creation.

    Only the repository reference is required::

        config = RouterConfig(repository="shop.catalog:categories", priority=10)
    """

    # Import string of the category repository ("module:attribute")
    repository: str

    controller: str = DEFAULT_CONTROLLER
    route: str = DEFAULT_ROUTE

    # Position in the router chain; higher is tried first
    priority: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.repository, str) or not self.repository.strip():
            msg = "The repository reference must be a non-empty string."
            raise ConfigurationError(msg)
        for name in ("controller", "route"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                msg = f"{name!r} must be a non-empty string, got {value!r}."
                raise ConfigurationError(msg)
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            msg = f"'priority' must be an integer, got {self.priority!r}."
            raise ConfigurationError(msg)


_KNOWN_KEYS = frozenset(f.name for f in fields(RouterConfig))


def process_configuration(configs: Iterable[Mapping[str, Any]]) -> RouterConfig:
    """Merge config mappings left to right and build a ``RouterConfig``.

    Later mappings override earlier ones key by key, so defaults can be
    layered under environment-specific overrides.

    Raises ``ConfigurationError`` on unknown keys, a missing or empty
    repository reference, or invalid values.
    """
    merged: dict[str, Any] = {}
    for config in configs:
        unknown = set(config) - _KNOWN_KEYS
        if unknown:
            msg = f"Unknown router configuration keys: {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg)
        merged.update(config)

    if "repository" not in merged:
        msg = "The child node 'repository' must be configured."
        raise ConfigurationError(msg)
    return RouterConfig(**merged)

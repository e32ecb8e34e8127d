"""Tests for slugroute.config: RouterConfig and configuration processing."""

import pytest

from slugroute.config import RouterConfig, process_configuration
from slugroute.errors import ConfigurationError
from slugroute.routing.listing import DEFAULT_CONTROLLER, DEFAULT_ROUTE


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig(repository="shop.catalog:categories")

        assert cfg.controller == DEFAULT_CONTROLLER
        assert cfg.route == DEFAULT_ROUTE
        assert cfg.priority == 0

    def test_override(self) -> None:
        cfg = RouterConfig(repository="shop.catalog", controller="c", route="r", priority=42)

        assert cfg.controller == "c"
        assert cfg.route == "r"
        assert cfg.priority == 42

    def test_frozen(self) -> None:
        cfg = RouterConfig(repository="shop.catalog")

        with pytest.raises(AttributeError):
            cfg.priority = 5  # type: ignore[misc]

    @pytest.mark.parametrize("repository", ["", "   "])
    def test_empty_repository(self, repository: str) -> None:
        with pytest.raises(ConfigurationError, match="repository"):
            RouterConfig(repository=repository)

    def test_empty_route(self) -> None:
        with pytest.raises(ConfigurationError, match="route"):
            RouterConfig(repository="shop.catalog", route="")

    @pytest.mark.parametrize("priority", ["10", 1.5, True])
    def test_priority_must_be_int(self, priority: object) -> None:
        with pytest.raises(ConfigurationError, match="priority"):
            RouterConfig(repository="shop.catalog", priority=priority)  # type: ignore[arg-type]


class TestProcessConfiguration:
    def test_minimal(self) -> None:
        cfg = process_configuration([{"repository": "shop.catalog"}])
        assert cfg == RouterConfig(repository="shop.catalog")

    def test_later_mappings_win(self) -> None:
        cfg = process_configuration([
            {"repository": "shop.catalog", "priority": 1},
            {"priority": 20, "route": "listing"},
        ])
        assert cfg.priority == 20
        assert cfg.route == "listing"
        assert cfg.repository == "shop.catalog"

    def test_missing_repository(self) -> None:
        with pytest.raises(ConfigurationError, match="repository"):
            process_configuration([{"priority": 3}])

    def test_empty_repository_override(self) -> None:
        with pytest.raises(ConfigurationError):
            process_configuration([{"repository": "shop.catalog"}, {"repository": ""}])

    def test_unknown_keys(self) -> None:
        with pytest.raises(ConfigurationError, match="cache, locale"):
            process_configuration([{"repository": "shop.catalog", "locale": "de", "cache": True}])

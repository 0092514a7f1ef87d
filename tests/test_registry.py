"""Tests for perch.routing.registry: register/unregister lifecycle."""

import logging
from collections.abc import Callable

import pytest

from perch.aliases import RoutesAlias
from perch.errors import RouteValidationError
from perch.menu.paths import normalize_menu_paths
from perch.menu.types import MenuMeta, MenuNode
from perch.routing.iframe import IframeRouteManager
from perch.routing.registry import RouteRegistry
from perch.routing.route import RouteDefinition
from perch.routing.router import Router


class _FlakyRouter(Router):
    """Fails on the nth ``add_route`` call."""

    def __init__(self, fail_on: int) -> None:
        super().__init__()
        self._fail_on = fail_on
        self._calls = 0

    def add_route(self, definition: RouteDefinition) -> Callable[[], None]:
        self._calls += 1
        if self._calls == self._fail_on:
            raise RuntimeError("router rejected route")
        return super().add_route(definition)


@pytest.fixture
def menu(admin_menu: tuple[MenuNode, ...]) -> tuple[MenuNode, ...]:
    return normalize_menu_paths(admin_menu)


@pytest.fixture
def router() -> Router:
    return Router([RouteDefinition(path=RoutesAlias.LOGIN, name="Login")])


@pytest.fixture
def registry(router: Router) -> RouteRegistry:
    return RouteRegistry(router, IframeRouteManager())


class TestRegister:
    def test_adds_every_top_level_entry(
        self, registry: RouteRegistry, router: Router, menu: tuple[MenuNode, ...]
    ) -> None:
        registry.register(menu)

        assert registry.is_registered()
        assert len(registry.removers) == 4
        for name in ("Dashboard", "Console", "System", "User", "Role", "Reports", "Audit", "Help"):
            assert router.has_route(name), name
        assert router.match("/system/user").route.definition.name == "User"

    def test_unregister_restores_router(
        self, registry: RouteRegistry, router: Router, menu: tuple[MenuNode, ...]
    ) -> None:
        before = router.route_names

        registry.register(menu)
        registry.unregister()

        assert router.route_names == before
        assert not registry.is_registered()
        assert registry.removers == []

    def test_second_register_is_noop(
        self,
        registry: RouteRegistry,
        router: Router,
        menu: tuple[MenuNode, ...],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        registry.register(menu)
        records = router.routes

        with caplog.at_level(logging.WARNING, logger="perch.routing"):
            registry.register(menu)

        assert router.routes == records
        assert "already registered" in caplog.text

    def test_invalid_menu_adds_nothing(self, registry: RouteRegistry, router: Router) -> None:
        before = router.route_names

        with pytest.raises(RouteValidationError) as exc_info:
            registry.register([])

        assert exc_info.value.errors == ("Menu list is empty",)
        assert router.route_names == before
        assert not registry.is_registered()

    def test_skips_names_router_already_knows(self, registry: RouteRegistry, router: Router) -> None:
        menu = (
            MenuNode(name="Login", path=RoutesAlias.LOGIN, component=RoutesAlias.LOGIN),
            MenuNode(name="Help", path="/help", component="/help/index"),
        )

        registry.register(menu)

        assert len(registry.removers) == 1
        assert router.match(RoutesAlias.LOGIN).route.definition.component is None

    def test_iframe_entries_recorded(self, router: Router) -> None:
        iframes = IframeRouteManager()
        registry = RouteRegistry(router, iframes)
        node = MenuNode(
            name="Docs",
            path="/outside/iframe/docs",
            meta=MenuMeta(is_iframe=True, link="https://docs.example.com"),
        )

        registry.register([node])

        assert iframes.get_all() == [node]

    def test_rollback_on_router_failure(self, menu: tuple[MenuNode, ...]) -> None:
        router = _FlakyRouter(fail_on=3)
        registry = RouteRegistry(router, IframeRouteManager())

        with pytest.raises(RuntimeError, match="router rejected route"):
            registry.register(menu)

        assert router.routes == []
        assert not registry.is_registered()

    def test_rollback_restores_iframe_entries(self) -> None:
        kept = MenuNode(
            name="Wiki",
            path="/outside/iframe/wiki",
            meta=MenuMeta(is_iframe=True, link="https://wiki.example.com"),
        )
        iframes = IframeRouteManager()
        iframes.add(kept)
        menu = (
            MenuNode(
                name="Docs",
                path="/outside/iframe/docs",
                meta=MenuMeta(is_iframe=True, link="https://docs.example.com"),
            ),
            MenuNode(name="Help", path="/help", component="/help/index"),
        )
        registry = RouteRegistry(_FlakyRouter(fail_on=2), iframes)

        with pytest.raises(RuntimeError):
            registry.register(menu)

        assert iframes.get_all() == [kept]


class TestUnregister:
    def test_when_idle(self, registry: RouteRegistry, router: Router) -> None:
        before = router.route_names
        registry.unregister()
        assert router.route_names == before

    def test_register_again_after_unregister(
        self, registry: RouteRegistry, router: Router, menu: tuple[MenuNode, ...]
    ) -> None:
        registry.register(menu)
        registry.unregister()
        registry.register(menu)

        assert router.has_route("Dashboard")
        assert len(registry.removers) == 4


class TestMarkAsRegistered:
    def test_blocks_registration(
        self, registry: RouteRegistry, router: Router, menu: tuple[MenuNode, ...]
    ) -> None:
        registry.mark_as_registered()
        registry.register(menu)

        assert not router.has_route("Dashboard")
        assert registry.removers == []

    def test_unregister_clears_flag(self, registry: RouteRegistry) -> None:
        registry.mark_as_registered()
        registry.unregister()
        assert not registry.is_registered()

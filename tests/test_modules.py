"""Tests for perch.menu.modules: the built-in route declarations."""

from perch.aliases import RoutesAlias
from perch.menu.modules import ROUTE_MODULES
from perch.menu.paths import normalize_menu_paths, validate_menu_paths
from perch.menu.types import iter_nodes
from perch.routing.validator import RouteValidator


def test_module_order() -> None:
    assert [n.name for n in ROUTE_MODULES] == ["Dashboard", "System", "Result", "Exception", "ErrorDashboard"]


def test_names_unique() -> None:
    names = [n.name for n, _ in iter_nodes(ROUTE_MODULES)]
    assert len(names) == len(set(names))


def test_child_paths_relative() -> None:
    assert validate_menu_paths(ROUTE_MODULES) == []


def test_registrable() -> None:
    assert RouteValidator().validate(normalize_menu_paths(ROUTE_MODULES))


def test_directories_use_layout() -> None:
    for node in ROUTE_MODULES:
        if node.children:
            assert node.component == RoutesAlias.LAYOUT, node.name


def test_exception_pages_are_full_page() -> None:
    exception = next(n for n in ROUTE_MODULES if n.name == "Exception")
    assert exception.children is not None
    assert {c.name for c in exception.children} == {"Exception403", "Exception404", "Exception500"}
    assert all(c.meta.is_full_page for c in exception.children)


def test_error_dashboard_hidden_super_only() -> None:
    dashboard = ROUTE_MODULES[-1]
    assert dashboard.meta.is_hide
    assert dashboard.meta.roles == frozenset({"R_SUPER"})

"""Shared fixtures for perch tests."""

import pytest

from perch.menu.types import MenuMeta, MenuNode


def _node(
    name: str,
    path: str,
    *,
    component: str = "",
    roles: set[str] | None = None,
    children: tuple[MenuNode, ...] | None = None,
    **meta: object,
) -> MenuNode:
    """Build a menu node with a compact call."""
    return MenuNode(
        name=name,
        path=path,
        component=component,
        meta=MenuMeta(roles=frozenset(roles) if roles is not None else None, **meta),  # type: ignore[arg-type]
        children=children,
    )


@pytest.fixture
def admin_menu() -> tuple[MenuNode, ...]:
    """A small raw (pre-normalization) admin menu with mixed role gates."""
    return (
        _node(
            "Dashboard",
            "/dashboard",
            component="/index/index",
            children=(_node("Console", "console", component="/dashboard/console"),),
        ),
        _node(
            "System",
            "/system",
            component="/index/index",
            roles={"R_SUPER", "R_ADMIN"},
            children=(
                _node("User", "user", component="/system/user", roles={"R_SUPER", "R_ADMIN"}),
                _node("Role", "role", component="/system/role", roles={"R_SUPER"}),
            ),
        ),
        _node(
            "Reports",
            "/reports",
            component="/index/index",
            children=(_node("Audit", "audit", component="/reports/audit", roles={"R_AUDIT"}),),
        ),
        _node("Help", "/help", component="/help/index"),
    )

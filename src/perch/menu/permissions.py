"""Role-based menu filtering.

A node is visible when it declares no roles, or when at least one of its
roles is held by the caller. A denied node takes its whole subtree with
it; the children of a visible node are filtered independently.
"""

from collections.abc import Iterable, Sequence
from dataclasses import replace

from perch.menu.types import MenuNode


def has_permission(node: MenuNode, roles: frozenset[str]) -> bool:
    """True if ``roles`` may see ``node`` (ignoring its ancestors)."""
    node_roles = node.meta.roles
    if not node_roles:
        return True
    return not node_roles.isdisjoint(roles)


def filter_menu_by_roles(
    nodes: Sequence[MenuNode],
    roles: Iterable[str],
) -> tuple[MenuNode, ...]:
    """Prune ``nodes`` to the entries the given roles may see.

    Visible nodes with children get their children filtered recursively;
    the result may be an empty tuple, which keeps the node a directory.
    """
    role_set = frozenset(roles)
    result: list[MenuNode] = []
    for node in nodes:
        if not has_permission(node, role_set):
            continue
        if node.children:
            node = replace(node, children=filter_menu_by_roles(node.children, role_set))
        result.append(node)
    return tuple(result)

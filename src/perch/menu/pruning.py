"""Dead-branch pruning.

Runs after permission filtering. Filtering removes entries by
authorization; pruning then removes entries that no longer lead anywhere.
A node survives when, first match wins:

1. it declared ``children`` (even an empty tuple), making it a directory;
2. it is an external link or an iframe page;
3. it references a real view (any component except the layout container).

Everything else is dropped. An unrestricted directory whose children were
all filtered out is therefore kept as a visible, empty menu group.
"""

from collections.abc import Sequence
from dataclasses import replace

from perch.aliases import RoutesAlias
from perch.menu.types import MenuNode


def filter_empty_menus(
    nodes: Sequence[MenuNode],
    *,
    layout_component: str = RoutesAlias.LAYOUT,
) -> tuple[MenuNode, ...]:
    """Drop entries that are neither directories, links, nor views."""
    result: list[MenuNode] = []
    for node in nodes:
        if node.children:
            node = replace(
                node,
                children=filter_empty_menus(node.children, layout_component=layout_component),
            )
        if _should_keep(node, layout_component):
            result.append(node)
    return tuple(result)


def _should_keep(node: MenuNode, layout_component: str) -> bool:
    if node.is_directory:
        return True
    if node.meta.is_iframe or node.is_external:
        return True
    return bool(node.component) and node.component != layout_component

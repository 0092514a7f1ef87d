"""Menu node -> route definition.

Each node is classified once, in this precedence:

- ``IFRAME``: ``meta.is_iframe``. At depth 0 it is wrapped in the layout
  so the iframe page renders inside the app shell; deeper it simply uses
  the iframe host view. Either way it is recorded in the iframe registry.
- ``FIRST_LEVEL_LEAF``: a depth-0 node without children. Wrapped in the
  layout, marked ``meta.is_first_level``.
- ``NORMAL``: everything else; its own component is resolved.

A wrapper is an anonymous route (``name=""``) mounted at the first path
segment of the node; the node itself becomes its only child and keeps
its full path. Children of the node are transformed at ``depth + 1`` and
attached to the node, never to the wrapper.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from perch.menu.paths import extract_first_segment
from perch.menu.types import MenuNode
from perch.routing.components import ComponentLoader, ComponentRef
from perch.routing.iframe import IframeRouteManager
from perch.routing.route import RouteDefinition


class NodeKind(Enum):
    """How a menu node becomes a route."""

    IFRAME = "iframe"
    FIRST_LEVEL_LEAF = "first_level_leaf"
    NORMAL = "normal"


def classify(node: MenuNode, depth: int) -> NodeKind:
    if node.meta.is_iframe:
        return NodeKind.IFRAME
    if depth == 0 and not node.children:
        return NodeKind.FIRST_LEVEL_LEAF
    return NodeKind.NORMAL


class RouteTransformer:
    """Converts normalized menu nodes into ``RouteDefinition`` trees.

    Never raises: a component reference the loader cannot resolve is
    left as ``None`` on the definition.
    """

    __slots__ = ("_iframe_manager", "_loader")

    def __init__(self, loader: ComponentLoader, iframe_manager: IframeRouteManager) -> None:
        self._loader = loader
        self._iframe_manager = iframe_manager

    def transform(self, node: MenuNode, depth: int = 0) -> RouteDefinition:
        kind = classify(node, depth)
        if kind is NodeKind.IFRAME:
            self._iframe_manager.add(node)

        children = tuple(self.transform(child, depth + 1) for child in node.children or ())

        match kind:
            case NodeKind.IFRAME:
                route = _definition(node, self._loader.load_iframe(), children)
                if depth == 0:
                    return self._wrap(node, route)
                return route
            case NodeKind.FIRST_LEVEL_LEAF:
                first_level = replace(node, meta=replace(node.meta, is_first_level=True))
                route = _definition(first_level, self._loader.load(node.component), children)
                return self._wrap(node, route)
            case NodeKind.NORMAL:
                return _definition(node, self._loader.load(node.component), children)

    def _wrap(self, node: MenuNode, inner: RouteDefinition) -> RouteDefinition:
        return RouteDefinition(
            path=extract_first_segment(node.path),
            name="",
            component=self._loader.load_layout(),
            meta=node.meta,
            children=(inner,),
        )


def _definition(
    node: MenuNode,
    component: ComponentRef | None,
    children: tuple[RouteDefinition, ...],
) -> RouteDefinition:
    return RouteDefinition(
        path=node.path,
        name=node.name,
        component=component,
        meta=node.meta,
        children=children,
        redirect=node.redirect,
    )

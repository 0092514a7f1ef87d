"""In-memory router with named, removable route records.

Top-level ``RouteDefinition`` records are added and removed at runtime
(login, logout, permission change). Path matching uses a trie compiled
lazily from the current records and discarded on every mutation.

Child paths that start with ``/`` are absolute; other child paths are
joined to the parent's full path. Path parameters may be written
``:id`` or ``{id}``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from perch.errors import RouteNotFound
from perch.routing.route import PathSegment, ResolvedRoute, RouteDefinition, RouteMatch

logger = logging.getLogger("perch.routing")

_EXTERNAL_PREFIXES = ("http://", "https://")


@runtime_checkable
class RouterPort(Protocol):
    """The router primitives the registry needs."""

    def has_route(self, name: str) -> bool: ...

    def add_route(self, definition: RouteDefinition) -> Callable[[], None]: ...

    def remove_route(self, name: str) -> None: ...


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/users"        -> [PathSegment("users")]
        "/users/:id"    -> [PathSegment("users"), PathSegment(":id", is_param=True, param_name="id")]
        "/users/{id}"   -> [PathSegment("users"), PathSegment("{id}", is_param=True, param_name="id")]
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith(":") and len(part) > 1:
            segments.append(PathSegment(value=part, is_param=True, param_name=part[1:]))
        elif part.startswith("{") and part.endswith("}"):
            segments.append(PathSegment(value=part, is_param=True, param_name=part[1:-1]))
        else:
            segments.append(PathSegment(value=part))
    return segments


def join_path(parent_path: str, path: str) -> str:
    """Resolve a child route path against its parent's full path."""
    if path.startswith("/") or path.startswith(_EXTERNAL_PREFIXES):
        return path
    if not path:
        return parent_path or "/"
    return f"{parent_path.rstrip('/')}/{path}"


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("children", "param_child", "route")

    def __init__(self) -> None:
        # Static segment children: "users" -> node
        self.children: dict[str, _TrieNode] = {}
        # Single parameter child (only one param pattern per level)
        self.param_child: _ParamEdge | None = None
        # Deepest route ending at this node
        self.route: ResolvedRoute | None = None


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    node: _TrieNode


class Router:
    """Route table with runtime add/remove and name lookup.

    Usage::

        router = Router()
        remove = router.add_route(definition)
        router.has_route("Console")
        match = router.match("/dashboard/console")
        remove()

    Adding a definition whose subtree reuses a registered name replaces
    the record that owned that name.
    """

    __slots__ = ("_by_name", "_records", "_root")

    def __init__(self, routes: Iterable[RouteDefinition] = ()) -> None:
        self._records: list[RouteDefinition] = []
        # Route name -> the top-level record that contains it
        self._by_name: dict[str, RouteDefinition] = {}
        self._root: _TrieNode | None = None
        for route in routes:
            self.add_route(route)

    def add_route(self, definition: RouteDefinition) -> Callable[[], None]:
        """Add a top-level record. Returns a callable that removes it again."""
        names = [d.name for d in definition.walk() if d.name]
        for name in names:
            existing = self._by_name.get(name)
            if existing is not None:
                logger.debug("Route %r replaces an existing record", name)
                self._remove_record(existing)

        self._records.append(definition)
        for name in names:
            self._by_name[name] = definition
        self._root = None

        def remove_route() -> None:
            self._remove_record(definition)

        return remove_route

    def remove_route(self, name: str) -> None:
        """Remove the top-level record that contains ``name``, if any."""
        record = self._by_name.get(name)
        if record is not None:
            self._remove_record(record)

    def has_route(self, name: str) -> bool:
        return name in self._by_name

    @property
    def routes(self) -> list[RouteDefinition]:
        """The top-level records, in registration order."""
        return list(self._records)

    @property
    def route_names(self) -> frozenset[str]:
        return frozenset(self._by_name)

    def get_routes(self) -> list[ResolvedRoute]:
        """Every definition placed at its full path, depth-first."""
        result: list[ResolvedRoute] = []
        for record in self._records:
            _collect_routes(record, "", (), result)
        return result

    def match(self, path: str) -> RouteMatch:
        """Match a path against the registered routes.

        Static segments win over parameters. When a parent and its child
        share a full path the child, being deeper, is matched.
        Raises ``RouteNotFound`` if nothing matches.
        """
        if self._root is None:
            self._root = self._compile()

        parts = [p for p in path.strip("/").split("/") if p]
        result = _match_node(self._root, parts, 0, {})
        if result is None:
            raise RouteNotFound(path)
        resolved, params = result
        return RouteMatch(route=resolved, path_params=params)

    def _remove_record(self, record: RouteDefinition) -> None:
        if not any(r is record for r in self._records):
            return
        self._records = [r for r in self._records if r is not record]
        self._by_name = {name: r for name, r in self._by_name.items() if r is not record}
        self._root = None

    def _compile(self) -> _TrieNode:
        root = _TrieNode()
        for resolved in self.get_routes():
            if resolved.full_path.startswith(_EXTERNAL_PREFIXES):
                continue
            node = root
            for seg in parse_path(resolved.full_path):
                if seg.is_param:
                    if node.param_child is None:
                        node.param_child = _ParamEdge(
                            param_name=seg.param_name or "",
                            node=_TrieNode(),
                        )
                    node = node.param_child.node
                else:
                    if seg.value not in node.children:
                        node.children[seg.value] = _TrieNode()
                    node = node.children[seg.value]

            if node.route is None or len(resolved.chain) > len(node.route.chain):
                node.route = resolved
        return root


def _collect_routes(
    definition: RouteDefinition,
    parent_path: str,
    chain: tuple[RouteDefinition, ...],
    result: list[ResolvedRoute],
) -> None:
    """Recursively place definitions at their full paths."""
    full_path = join_path(parent_path, definition.path)
    chain = (*chain, definition)
    result.append(ResolvedRoute(full_path=full_path, definition=definition, chain=chain))
    for child in definition.children:
        _collect_routes(child, full_path, chain, result)


def _match_node(
    node: _TrieNode,
    parts: list[str],
    index: int,
    params: dict[str, str],
) -> tuple[ResolvedRoute, dict[str, str]] | None:
    """Recursively match path parts against the trie."""
    # All parts consumed; this node must hold a route
    if index == len(parts):
        if node.route is not None:
            return node.route, params
        return None

    part = parts[index]

    # 1. Try static child first (exact match)
    if part in node.children:
        result = _match_node(node.children[part], parts, index + 1, params)
        if result is not None:
            return result

    # 2. Try parameter child
    if node.param_child is not None:
        edge = node.param_child
        new_params = {**params, edge.param_name: part}
        return _match_node(edge.node, parts, index + 1, new_params)

    return None

"""Menu path normalization and lint.

Menu entries declare paths relative to their parent (``user`` under
``/system``). Before registration every path is rewritten to its absolute
form so menu links and route matching agree::

    build_full_path("user", "/system")        -> "/system/user"
    build_full_path("/outside/iframe/x", "/system") -> "/outside/iframe/x"
    build_full_path("https://example.com", "/system") -> "https://example.com"

``validate_menu_paths`` is a development-time lint run on the raw tree:
child entries must not start with ``/`` unless they are external links or
live under the iframe prefix. Issues are logged, never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from perch.menu.types import MenuNode

logger = logging.getLogger("perch.menu")

_EXTERNAL_PREFIXES = ("http://", "https://")

DEFAULT_IFRAME_PREFIX = "/outside/iframe/"


@dataclass(frozen=True, slots=True)
class PathIssue:
    """A child menu entry that declared an absolute path.

    ``level`` is the nesting level of the parent (1 = top level); the
    offending entry sits one level deeper.
    """

    parent_name: str
    route_name: str
    title: str
    path: str
    level: int
    suggested_path: str

    def __str__(self) -> str:
        return (
            f'Menu "{self.title}" (name: {self.route_name}, path: {self.path}) '
            f"is misconfigured at {self.parent_name} > {self.route_name}: "
            f"level {self.level + 1} menu paths must not start with '/'; "
            f"use path: '{self.suggested_path}'"
        )


def build_full_path(path: str, parent_path: str = "") -> str:
    """Resolve a menu path fragment against its parent's full path."""
    if not path:
        return ""
    if path.startswith(_EXTERNAL_PREFIXES):
        return path
    if path.startswith("/"):
        return path
    if parent_path:
        return f"{parent_path.rstrip('/')}/{path.lstrip('/')}"
    return f"/{path}"


def normalize_menu_paths(
    nodes: Sequence[MenuNode],
    parent_path: str = "",
) -> tuple[MenuNode, ...]:
    """Rewrite every node's path to its full form, recursively.

    Children resolve against their parent's freshly computed full path.
    A node's ``children`` presence (``None`` vs ``()``) is preserved.
    """
    normalized: list[MenuNode] = []
    for node in nodes:
        full_path = build_full_path(node.path, parent_path)
        children = node.children
        if children:
            children = normalize_menu_paths(children, full_path)
        normalized.append(replace(node, path=full_path, children=children))
    return tuple(normalized)


def is_valid_absolute_path(path: str, iframe_prefix: str = DEFAULT_IFRAME_PREFIX) -> bool:
    """True for absolute child paths that are allowed: external links and iframe pages."""
    return path.startswith(_EXTERNAL_PREFIXES) or path.startswith(iframe_prefix)


def validate_menu_paths(
    nodes: Sequence[MenuNode],
    level: int = 1,
    *,
    iframe_prefix: str = DEFAULT_IFRAME_PREFIX,
) -> list[PathIssue]:
    """Report child entries whose raw path illegally starts with ``/``.

    Run against the pre-normalization tree so reported paths match what
    the menu author wrote. Every issue is logged at ERROR on the
    ``perch.menu`` logger and returned.
    """
    issues: list[PathIssue] = []
    for node in nodes:
        if not node.children:
            continue

        parent_name = node.name or node.path or "<unknown>"
        for child in node.children:
            child_path = child.path
            if is_valid_absolute_path(child_path, iframe_prefix):
                continue
            if child_path.startswith("/"):
                issue = _path_issue(child, child_path, parent_name, level)
                logger.error("Route configuration error: %s", issue)
                issues.append(issue)

        issues.extend(validate_menu_paths(node.children, level + 1, iframe_prefix=iframe_prefix))
    return issues


def _path_issue(node: MenuNode, path: str, parent_name: str, level: int) -> PathIssue:
    route_name = node.name or path or "<unknown>"
    suggested = path.split("/")[-1] or path[1:]
    return PathIssue(
        parent_name=parent_name,
        route_name=route_name,
        title=node.meta.title or route_name,
        path=path,
        level=level,
        suggested_path=suggested,
    )


def extract_first_segment(path: str) -> str:
    """Return the first ``/``-delimited segment as an absolute path.

    ``/a/b/c`` -> ``/a``; an empty or root path -> ``/``.
    """
    segments = [s for s in path.split("/") if s]
    if segments:
        return f"/{segments[0]}"
    return "/"

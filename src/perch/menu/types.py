"""Menu tree data model.

Immutable frozen dataclasses for the menu tree consumed by the pipeline.
Built once per session from the static route modules or a server payload;
every stage returns new nodes via ``dataclasses.replace``.

Wire format (camelCase, as served by the menu endpoint)::

    {
        "id": 2,
        "path": "/system",
        "name": "System",
        "component": "/index/index",
        "meta": {"title": "menus.system.title", "roles": ["R_SUPER"]},
        "children": [...]
    }

The presence of ``children`` matters even when the list is empty: it marks
the node as a directory that survives pruning. ``MenuNode.children`` is
``None`` when the key was absent and ``()`` when it was present but empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from perch.errors import MenuFormatError

# Wire key -> MenuMeta attribute, for boolean flags
_META_FLAGS: dict[str, str] = {
    "isIframe": "is_iframe",
    "isHide": "is_hide",
    "isHideTab": "is_hide_tab",
    "keepAlive": "keep_alive",
    "isFullPage": "is_full_page",
    "isFirstLevel": "is_first_level",
}

_META_STRINGS = ("title", "icon", "link")


def _parse_roles(value: Any) -> frozenset[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return frozenset({value})
    if isinstance(value, list | tuple | set | frozenset):
        return frozenset(str(role) for role in value)
    msg = f"Menu roles must be a string or a list, got {type(value).__name__}"
    raise MenuFormatError(msg)


@dataclass(frozen=True, slots=True)
class MenuMeta:
    """Annotation bag attached to every menu node.

    Attributes:
        roles: Role codes allowed to see the node. ``None`` or empty means
            the node is public.
        link: External URL the menu entry opens, if any.
        extra: Wire keys perch does not interpret, kept for round-tripping.
    """

    title: str = ""
    icon: str = ""
    roles: frozenset[str] | None = None
    is_iframe: bool = False
    is_hide: bool = False
    is_hide_tab: bool = False
    keep_alive: bool = False
    is_full_page: bool = False
    is_first_level: bool = False
    link: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def has_roles(self) -> bool:
        """True when access to the node is restricted to specific roles."""
        return bool(self.roles)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> MenuMeta:
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            msg = f"Menu meta must be a mapping, got {type(data).__name__}"
            raise MenuFormatError(msg)

        kwargs: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in data.items():
            if key in _META_FLAGS:
                kwargs[_META_FLAGS[key]] = bool(value)
            elif key in _META_STRINGS:
                kwargs[key] = "" if value is None else str(value)
            elif key == "roles":
                kwargs["roles"] = _parse_roles(value)
            else:
                extra[key] = value

        if extra:
            kwargs["extra"] = extra
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        for key in _META_STRINGS:
            value = getattr(self, key)
            if value:
                data[key] = value
        if self.roles is not None:
            data["roles"] = sorted(self.roles)
        for wire_key, attr in _META_FLAGS.items():
            if getattr(self, attr):
                data[wire_key] = True
        return data


@dataclass(frozen=True, slots=True)
class MenuNode:
    """One entry of the menu tree.

    ``name`` doubles as the route name. ``path`` is a fragment relative to
    the parent, or absolute at depth 0 and for external/iframe entries.
    ``component`` is an opaque view reference, empty for pure containers.
    """

    name: str
    path: str = ""
    component: str = ""
    meta: MenuMeta = field(default_factory=MenuMeta)
    children: tuple[MenuNode, ...] | None = None
    id: int | str | None = None
    redirect: str = ""

    @property
    def is_directory(self) -> bool:
        """True when the node declared a ``children`` key, even an empty one."""
        return self.children is not None

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def is_external(self) -> bool:
        """True for entries that open an external URL."""
        return bool(self.meta.link) or self.path.startswith(("http://", "https://"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MenuNode:
        if not isinstance(data, Mapping):
            msg = f"Menu node must be a mapping, got {type(data).__name__}"
            raise MenuFormatError(msg)

        raw_children = data.get("children")
        children: tuple[MenuNode, ...] | None = None
        if "children" in data:
            if raw_children is None:
                children = ()
            elif isinstance(raw_children, list | tuple):
                children = tuple(cls.from_dict(child) for child in raw_children)
            else:
                name = data.get("name", "?")
                msg = f"Menu node {name!r}: children must be a list"
                raise MenuFormatError(msg)

        return cls(
            name=str(data.get("name") or ""),
            path=str(data.get("path") or ""),
            component=str(data.get("component") or ""),
            meta=MenuMeta.from_dict(data.get("meta")),
            children=children,
            id=data.get("id"),
            redirect=str(data.get("redirect") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data["path"] = self.path
        data["name"] = self.name
        if self.component:
            data["component"] = self.component
        if self.redirect:
            data["redirect"] = self.redirect
        data["meta"] = self.meta.to_dict()
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def parse_menu_list(payload: Any) -> tuple[MenuNode, ...]:
    """Convert a decoded JSON payload (a list of node dicts) into menu nodes.

    Raises ``MenuFormatError`` if the payload is not a list or any entry
    is malformed.
    """
    if not isinstance(payload, list | tuple):
        msg = f"Menu list must be a list, got {type(payload).__name__}"
        raise MenuFormatError(msg)
    return tuple(MenuNode.from_dict(item) for item in payload)


def iter_nodes(nodes: Iterable[MenuNode]) -> Iterable[tuple[MenuNode, int]]:
    """Yield ``(node, depth)`` for every node in the tree, depth-first."""
    stack = [(node, 0) for node in reversed(tuple(nodes))]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        if node.children:
            stack.extend((child, depth + 1) for child in reversed(node.children))

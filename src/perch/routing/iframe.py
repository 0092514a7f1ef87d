"""Iframe route registry.

Iframe menu entries render an external page inside the app shell. The
transformer records each one here so the iframe host view can look up
its source URL by path. Entries survive re-registration and are
persisted to a session-scoped store so they can be restored after a
full page reload.

One registry per running application: construct it at the composition
root and hand it to the transformer and the lifecycle.
"""

from __future__ import annotations

import json
import logging
from typing import Protocol, runtime_checkable

from perch.errors import MenuFormatError
from perch.menu.types import MenuNode, parse_menu_list

logger = logging.getLogger("perch.routing")


@runtime_checkable
class SessionStore(Protocol):
    """Session-scoped string key-value storage."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemorySessionStore:
    """In-process ``SessionStore``. Lives as long as the object does."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class IframeRouteManager:
    """Registry of iframe menu entries, de-duplicated by path."""

    __slots__ = ("_routes", "_storage_key", "_store")

    def __init__(
        self,
        store: SessionStore | None = None,
        *,
        storage_key: str = "iframeRoutes",
    ) -> None:
        self._store = store
        self._storage_key = storage_key
        self._routes: list[MenuNode] = []

    def add(self, route: MenuNode) -> None:
        """Record an iframe entry unless one with the same path exists."""
        if route.path not in self:
            self._routes.append(route)

    def get_all(self) -> list[MenuNode]:
        return list(self._routes)

    def find_by_path(self, path: str) -> MenuNode | None:
        for route in self._routes:
            if route.path == path:
                return route
        return None

    def clear(self) -> None:
        self._routes = []

    def save(self) -> None:
        """Persist the entries to the session store. Nothing is written when empty."""
        if self._store is None or not self._routes:
            return
        payload = json.dumps([route.to_dict() for route in self._routes], ensure_ascii=False)
        self._store.set(self._storage_key, payload)

    def load(self) -> None:
        """Replace the entries with those saved in the session store.

        A missing key leaves the registry untouched. A corrupt payload is
        logged and resets the registry to empty.
        """
        if self._store is None:
            return
        data = self._store.get(self._storage_key)
        if not data:
            return
        try:
            self._routes = list(parse_menu_list(json.loads(data)))
        except (ValueError, TypeError, MenuFormatError):
            logger.exception("Failed to load iframe routes from session storage")
            self._routes = []

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, path: object) -> bool:
        return any(route.path == path for route in self._routes)

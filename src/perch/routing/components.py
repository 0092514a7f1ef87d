"""Component resolution.

Menu entries name their view with an opaque string such as
``/system/user``. ``ComponentLoader`` turns that string into a
``ComponentRef``. Without a view table every non-empty reference
resolves (``target`` stays ``None``); with one, missing views resolve to
``None`` and are logged so the menu author can fix the reference.

Lookup tries the reference with surrounding slashes stripped, then with
an ``/index`` suffix, so ``/system/user`` finds either ``system/user``
or ``system/user/index``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from perch.aliases import RoutesAlias

logger = logging.getLogger("perch.routing")


@dataclass(frozen=True, slots=True)
class ComponentRef:
    """A resolved view reference.

    Attributes:
        path: The reference as written in the menu.
        target: The view object from the loader's table, if one was given.
    """

    path: str
    target: Any = None


class ComponentLoader:
    """Resolves menu component references into ``ComponentRef`` objects."""

    __slots__ = ("_iframe", "_layout", "_views")

    def __init__(
        self,
        views: Mapping[str, Any] | None = None,
        *,
        layout: str = RoutesAlias.LAYOUT,
        iframe: str = RoutesAlias.IFRAME,
    ) -> None:
        self._views = {_key(k): v for k, v in views.items()} if views is not None else None
        self._layout = layout
        self._iframe = iframe

    def load(self, component: str) -> ComponentRef | None:
        """Resolve ``component``; ``None`` for empty or unknown references."""
        if not component:
            return None
        if self._views is None:
            return ComponentRef(path=component)

        key = _key(component)
        for candidate in (key, f"{key}/index"):
            if candidate in self._views:
                return ComponentRef(path=component, target=self._views[candidate])

        logger.warning("Component not found: %s", component)
        return None

    def load_layout(self) -> ComponentRef | None:
        return self.load(self._layout)

    def load_iframe(self) -> ComponentRef | None:
        return self.load(self._iframe)


def _key(component: str) -> str:
    key = component.strip("/")
    if key.endswith(".vue"):
        key = key[: -len(".vue")]
    return key

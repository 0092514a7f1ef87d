"""Dynamic route registration.

``RouteRegistry`` validates a normalized menu list, transforms each
top-level entry, and adds it to the live router, keeping the removal
handle the router returns. ``unregister()`` replays those handles, so
a register/unregister pair leaves the router as it found it.

State machine::

    idle --register()--> registered --unregister()--> idle

The ``registered`` flag is the only guard: registration is expected once
per login and is not reentrant.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from perch.errors import RouteValidationError
from perch.menu.types import MenuNode
from perch.routing.components import ComponentLoader
from perch.routing.iframe import IframeRouteManager
from perch.routing.router import RouterPort
from perch.routing.transformer import RouteTransformer
from perch.routing.validator import RouteValidator

logger = logging.getLogger("perch.routing")


class RouteRegistry:
    """Adds and removes the menu-derived routes on a router.

    Args:
        router: The live router (``has_route`` / ``add_route``).
        iframe_manager: Receives every iframe entry seen during transformation.
        loader: Resolves component references. Defaults to a loader
            without a view table.
    """

    __slots__ = (
        "_iframe_manager",
        "_registered",
        "_removers",
        "_router",
        "_transformer",
        "_validator",
    )

    def __init__(
        self,
        router: RouterPort,
        iframe_manager: IframeRouteManager,
        *,
        loader: ComponentLoader | None = None,
        validator: RouteValidator | None = None,
    ) -> None:
        self._router = router
        self._iframe_manager = iframe_manager
        self._validator = validator or RouteValidator()
        self._transformer = RouteTransformer(loader or ComponentLoader(), iframe_manager)
        self._removers: list[Callable[[], None]] = []
        self._registered = False

    def register(self, menu_list: Sequence[MenuNode]) -> None:
        """Register routes for every top-level entry of ``menu_list``.

        Entries whose name the router already knows are skipped. Raises
        ``RouteValidationError`` if the list is structurally invalid;
        nothing is added in that case. If the router rejects an entry,
        the routes and iframe entries added so far are rolled back.
        """
        if self._registered:
            logger.warning("Routes already registered; skipping duplicate registration")
            return

        result = self._validator.validate(menu_list)
        if not result:
            raise RouteValidationError(result.errors)

        iframes = self._iframe_manager.get_all()
        removers: list[Callable[[], None]] = []
        try:
            for node in menu_list:
                if not self._router.has_route(node.name):
                    definition = self._transformer.transform(node)
                    removers.append(self._router.add_route(definition))
        except Exception:
            for remove in reversed(removers):
                remove()
            self._iframe_manager.clear()
            for route in iframes:
                self._iframe_manager.add(route)
            raise

        self._removers = removers
        self._registered = True
        logger.debug("Registered %d dynamic routes", len(removers))

    def unregister(self) -> None:
        """Remove every route added by ``register()``. Safe when idle."""
        removers, self._removers = self._removers, []
        for remove in removers:
            remove()
        self._registered = False

    def is_registered(self) -> bool:
        return self._registered

    def mark_as_registered(self) -> None:
        """Flag routes as registered without adding any.

        Lets a caller whose menu fetch failed stop every later navigation
        from retrying the fetch.
        """
        self._registered = True

    @property
    def removers(self) -> list[Callable[[], None]]:
        """A copy of the pending removal handles."""
        return list(self._removers)

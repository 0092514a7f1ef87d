"""Dynamic route lifecycle: login, logout, permission change, reload.

``DynamicRoutes`` is what a navigation guard calls before every guarded
navigation::

    routes = DynamicRoutes(processor, registry, iframe_manager)

    # before each navigation
    if not await routes.ensure_registered():
        show_degraded_shell()

    # on logout
    routes.reset()

    # when the user's roles change
    await routes.refresh()

A menu fetch failure is not retried on the next navigation: the
registry is marked registered and the app carries on without a menu
until ``reset()``. A menu that fails validation is marked the same way
before the error propagates.

In backend mode ``from_config`` may build its own HTTP client; close it
with ``aclose()`` or use the object as an async context manager::

    async with DynamicRoutes.from_config(config, router=router, session=session) as routes:
        await routes.ensure_registered()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from perch.config import AccessMode, PerchConfig
from perch.errors import MenuFetchError, RouteValidationError
from perch.menu.processor import MenuProcessor
from perch.menu.sources import HttpMenuSource, MenuSource, StaticMenuSource
from perch.menu.types import MenuNode
from perch.routing.components import ComponentLoader
from perch.routing.iframe import IframeRouteManager, SessionStore
from perch.routing.registry import RouteRegistry
from perch.routing.router import RouterPort
from perch.session import UserSession

logger = logging.getLogger("perch.lifecycle")


class DynamicRoutes:
    """Coordinates ``MenuProcessor``, ``RouteRegistry`` and ``IframeRouteManager``."""

    __slots__ = ("_iframe_manager", "_menu_list", "_processor", "_registry")

    def __init__(
        self,
        processor: MenuProcessor,
        registry: RouteRegistry,
        iframe_manager: IframeRouteManager,
    ) -> None:
        self._processor = processor
        self._registry = registry
        self._iframe_manager = iframe_manager
        self._menu_list: tuple[MenuNode, ...] = ()

    @classmethod
    def from_config(
        cls,
        config: PerchConfig,
        *,
        router: RouterPort,
        session: UserSession,
        store: SessionStore | None = None,
        views: Mapping[str, Any] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> DynamicRoutes:
        """Wire the whole pipeline for one running application.

        Frontend mode reads ``ROUTE_MODULES``; backend mode fetches the
        menu with ``client`` (or a client built from ``config``), sending
        the session's access token.
        """
        source: MenuSource
        if config.access_mode is AccessMode.FRONTEND:
            from perch.menu.modules import ROUTE_MODULES

            source = StaticMenuSource(ROUTE_MODULES)
        elif client is not None:
            source = HttpMenuSource(client, endpoint=config.menu_endpoint, token=session.get_token)
        else:
            source = HttpMenuSource.from_config(config, token=session.get_token)

        iframe_manager = IframeRouteManager(store, storage_key=config.iframe_storage_key)
        loader = ComponentLoader(
            views,
            layout=config.layout_component,
            iframe=config.iframe_component,
        )
        processor = MenuProcessor(config, source=source, roles=session.get_roles)
        registry = RouteRegistry(router, iframe_manager, loader=loader)
        return cls(processor, registry, iframe_manager)

    @property
    def iframe_manager(self) -> IframeRouteManager:
        return self._iframe_manager

    @property
    def menu_list(self) -> tuple[MenuNode, ...]:
        """The normalized menu from the last successful registration."""
        return self._menu_list

    @property
    def registry(self) -> RouteRegistry:
        return self._registry

    async def ensure_registered(self) -> bool:
        """Register the current user's routes unless already done.

        Returns False when the menu could not be fetched; the registry
        is then marked registered so the failure is not retried.
        ``RouteValidationError`` propagates after the registry is marked:
        the same menu would fail again.
        """
        if self._registry.is_registered():
            return True

        try:
            menu_list = await self._processor.get_menu_list()
        except MenuFetchError:
            logger.exception("Failed to load the menu; continuing without dynamic routes")
            self._registry.mark_as_registered()
            return False

        try:
            self._registry.register(menu_list)
        except RouteValidationError:
            logger.exception("Menu failed validation; continuing without dynamic routes")
            self._registry.mark_as_registered()
            raise
        self._menu_list = menu_list
        self._iframe_manager.save()
        return True

    def reset(self) -> None:
        """Remove the dynamic routes and iframe entries (logout)."""
        self._registry.unregister()
        self._iframe_manager.clear()
        self._menu_list = ()

    async def refresh(self) -> bool:
        """Re-register from scratch after the user's roles changed."""
        self.reset()
        return await self.ensure_registered()

    def restore(self) -> None:
        """Reload iframe entries saved before a full page reload."""
        self._iframe_manager.load()

    async def aclose(self) -> None:
        """Close the HTTP menu source, if it owns a client."""
        source = self._processor.source
        if isinstance(source, HttpMenuSource):
            await source.aclose()

    async def __aenter__(self) -> DynamicRoutes:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

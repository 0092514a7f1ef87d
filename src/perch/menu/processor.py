"""Menu processing: from raw menu source to the normalized tree.

Pipeline::

    source.fetch()
      -> filter_menu_by_roles   (frontend mode, non-empty role set only)
      -> filter_empty_menus     (both modes)
      -> validate_menu_paths    (lint on the raw paths, logged)
      -> normalize_menu_paths   (absolute paths)

The normalized tree is the only form ``RouteRegistry`` ever receives.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from perch.config import AccessMode, PerchConfig
from perch.menu.paths import normalize_menu_paths, validate_menu_paths
from perch.menu.permissions import filter_menu_by_roles
from perch.menu.pruning import filter_empty_menus
from perch.menu.sources import MenuSource
from perch.menu.types import MenuNode

logger = logging.getLogger("perch.menu")


def _no_roles() -> Sequence[str]:
    return ()


class MenuProcessor:
    """Produces the authorized, normalized menu tree for the current user.

    Args:
        config: Selects frontend or backend mode and the lint settings.
        source: Where the raw tree comes from. In frontend mode this is
            normally a ``StaticMenuSource`` over ``ROUTE_MODULES``; in
            backend mode an ``HttpMenuSource``.
        roles: Returns the current user's role codes; empty when
            nobody is logged in.
    """

    __slots__ = ("_config", "_roles", "_source")

    def __init__(
        self,
        config: PerchConfig,
        *,
        source: MenuSource,
        roles: Callable[[], Sequence[str]] = _no_roles,
    ) -> None:
        self._config = config
        self._source = source
        self._roles = roles

    @property
    def config(self) -> PerchConfig:
        return self._config

    @property
    def source(self) -> MenuSource:
        return self._source

    async def get_menu_list(self) -> tuple[MenuNode, ...]:
        """Fetch, filter, prune, lint and normalize the menu tree.

        Raises ``MenuFetchError`` when the backend source is unavailable.
        """
        if self._config.access_mode is AccessMode.FRONTEND:
            menu_list = await self.process_frontend_menu()
        else:
            menu_list = await self.process_backend_menu()

        if self._config.validate_paths:
            validate_menu_paths(menu_list, iframe_prefix=self._config.iframe_prefix)

        return normalize_menu_paths(menu_list)

    async def process_frontend_menu(self) -> tuple[MenuNode, ...]:
        menu_list = await self._source.fetch()
        roles = tuple(self._roles())
        # No roles means nobody is logged in yet; the static tree is shown as-is
        if roles:
            menu_list = filter_menu_by_roles(menu_list, roles)
        else:
            logger.debug("No roles in session; frontend menu left unfiltered")
        return filter_empty_menus(menu_list, layout_component=self._config.layout_component)

    async def process_backend_menu(self) -> tuple[MenuNode, ...]:
        menu_list = await self._source.fetch()
        return filter_empty_menus(menu_list, layout_component=self._config.layout_component)

"""Menu sources.

A *source* produces the raw menu tree. Two modes:

- **static**: the route modules declared in Python (frontend-controlled)
- **http**: the server-rendered tree behind the menu endpoint
  (backend-controlled), fetched once per ``get_menu_list()``

The HTTP source expects the admin API envelope::

    {"code": 200, "msg": "ok", "data": [ {menu node}, ... ]}

Any other response is raised as ``MenuFetchError``: a non-2xx status,
a transport failure, a body that is not JSON, a ``code`` other than 200,
or ``data`` that is not a list.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from types import TracebackType
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import httpx

from perch.errors import MenuFetchError, MenuFormatError
from perch.menu.types import MenuNode, parse_menu_list

if TYPE_CHECKING:
    from perch.config import PerchConfig

logger = logging.getLogger("perch.menu")

# Envelope code the admin API uses for success
SUCCESS_CODE = 200


@runtime_checkable
class MenuSource(Protocol):
    """Anything that can produce a raw menu tree."""

    async def fetch(self) -> tuple[MenuNode, ...]: ...


class StaticMenuSource:
    """Menu tree declared at import time."""

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Sequence[MenuNode]) -> None:
        self._nodes = tuple(nodes)

    async def fetch(self) -> tuple[MenuNode, ...]:
        return self._nodes


class HttpMenuSource:
    """Menu tree fetched from the admin API.

    Usage::

        async with HttpMenuSource.from_config(config, token=session.get_token) as source:
            nodes = await source.fetch()

    A caller-supplied ``client`` is borrowed, never closed. Clients built
    by ``from_config`` are owned and closed by ``aclose()``.
    """

    __slots__ = ("_client", "_endpoint", "_owns_client", "_token")

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        endpoint: str = "/api/v3/system/menus/simple",
        token: Callable[[], str | None] | None = None,
    ) -> None:
        self._client = client
        self._endpoint = endpoint
        self._token = token
        self._owns_client = False

    @classmethod
    def from_config(
        cls,
        config: PerchConfig,
        *,
        token: Callable[[], str | None] | None = None,
    ) -> HttpMenuSource:
        client = httpx.AsyncClient(base_url=config.base_url, timeout=config.request_timeout)
        source = cls(client, endpoint=config.menu_endpoint, token=token)
        source._owns_client = True
        return source

    async def fetch(self) -> tuple[MenuNode, ...]:
        headers: dict[str, str] = {}
        if self._token is not None:
            token = self._token()
            if token:
                headers["Authorization"] = token

        try:
            response = await self._client.get(self._endpoint, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise MenuFetchError(f"Menu request failed: {exc.response.reason_phrase}", status) from exc
        except httpx.HTTPError as exc:
            raise MenuFetchError(f"Menu request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise MenuFetchError("Menu response is not valid JSON") from exc

        data = _unwrap(body)
        try:
            nodes = parse_menu_list(data)
        except MenuFormatError as exc:
            raise MenuFetchError(f"Malformed menu payload: {exc}") from exc

        logger.debug("Fetched %d top-level menu entries from %s", len(nodes), self._endpoint)
        return nodes

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpMenuSource:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def _unwrap(body: Any) -> Any:
    """Pull ``data`` out of the API envelope, checking its ``code``."""
    if not isinstance(body, dict):
        msg = f"Menu response must be an object, got {type(body).__name__}"
        raise MenuFetchError(msg)

    code = body.get("code", SUCCESS_CODE)
    if code != SUCCESS_CODE:
        raise MenuFetchError(str(body.get("msg") or "Menu request rejected"), code)

    data = body.get("data")
    if not isinstance(data, list):
        raise MenuFetchError("Menu response has no 'data' list")
    return data

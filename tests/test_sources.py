"""Tests for perch.menu.sources: static and HTTP menu sources.

The HTTP source is exercised against ``httpx.MockTransport``; no server needed.
"""

import json
from typing import Any

import httpx
import pytest

from perch.config import PerchConfig
from perch.errors import MenuFetchError
from perch.menu.sources import HttpMenuSource, MenuSource, StaticMenuSource
from perch.menu.types import MenuNode

_MENUS = [
    {
        "id": 1,
        "path": "/dashboard",
        "name": "Dashboard",
        "component": "/index/index",
        "meta": {"title": "menus.dashboard.title"},
        "children": [{"id": 11, "path": "console", "name": "Console", "component": "/dashboard/console"}],
    },
]


def _client(handler: Any) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://admin.test")


def _json(body: Any, status: int = 200) -> httpx.Response:
    return httpx.Response(status, content=json.dumps(body).encode(), headers={"content-type": "application/json"})


class TestStaticMenuSource:
    @pytest.mark.asyncio
    async def test_returns_declared_nodes(self) -> None:
        nodes = (MenuNode(name="A", path="/a"),)
        assert await StaticMenuSource(nodes).fetch() == nodes

    def test_is_menu_source(self) -> None:
        assert isinstance(StaticMenuSource(()), MenuSource)


class TestHttpMenuSource:
    @pytest.mark.asyncio
    async def test_fetches_envelope_data(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json({"code": 200, "msg": "ok", "data": _MENUS})

        async with _client(handler) as client:
            nodes = await HttpMenuSource(client).fetch()

        assert [n.name for n in nodes] == ["Dashboard"]
        assert nodes[0].children is not None
        assert nodes[0].children[0].name == "Console"
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/api/v3/system/menus/simple"

    @pytest.mark.asyncio
    async def test_sends_token(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json({"code": 200, "data": []})

        async with _client(handler) as client:
            await HttpMenuSource(client, token=lambda: "Bearer abc").fetch()

        assert seen[0].headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_no_token_no_header(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json({"code": 200, "data": []})

        async with _client(handler) as client:
            await HttpMenuSource(client, token=lambda: None).fetch()

        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_custom_endpoint(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return _json({"code": 200, "data": []})

        async with _client(handler) as client:
            await HttpMenuSource(client, endpoint="/api/menus").fetch()

        assert seen == ["/api/menus"]

    @pytest.mark.asyncio
    async def test_http_error_status(self) -> None:
        async with _client(lambda request: _json({"msg": "boom"}, status=500)) as client:
            with pytest.raises(MenuFetchError) as exc_info:
                await HttpMenuSource(client).fetch()
        assert exc_info.value.status == 500

    @pytest.mark.asyncio
    async def test_envelope_error_code(self) -> None:
        body = {"code": 401, "msg": "Token expired", "data": None}
        async with _client(lambda request: _json(body)) as client:
            with pytest.raises(MenuFetchError, match="Token expired") as exc_info:
                await HttpMenuSource(client).fetch()
        assert exc_info.value.status == 401

    @pytest.mark.asyncio
    async def test_missing_data(self) -> None:
        async with _client(lambda request: _json({"code": 200, "msg": "ok"})) as client:
            with pytest.raises(MenuFetchError, match="no 'data' list"):
                await HttpMenuSource(client).fetch()

    @pytest.mark.asyncio
    async def test_not_json(self) -> None:
        async with _client(lambda request: httpx.Response(200, content=b"<html>")) as client:
            with pytest.raises(MenuFetchError, match="not valid JSON"):
                await HttpMenuSource(client).fetch()

    @pytest.mark.asyncio
    async def test_malformed_node(self) -> None:
        body = {"code": 200, "data": [{"name": "Bad", "children": "nope"}]}
        async with _client(lambda request: _json(body)) as client:
            with pytest.raises(MenuFetchError, match="Malformed menu payload"):
                await HttpMenuSource(client).fetch()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("roles", [1, True, {"code": "R_SUPER"}])
    async def test_bad_roles_value(self, roles: Any) -> None:
        body = {"code": 200, "data": [{"name": "A", "path": "/a", "meta": {"roles": roles}}]}
        async with _client(lambda request: _json(body)) as client:
            with pytest.raises(MenuFetchError, match="Menu roles must be a string or a list"):
                await HttpMenuSource(client).fetch()

    @pytest.mark.asyncio
    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(MenuFetchError) as exc_info:
                await HttpMenuSource(client).fetch()
        assert exc_info.value.status is None

    @pytest.mark.asyncio
    async def test_borrowed_client_not_closed(self) -> None:
        client = _client(lambda request: _json({"code": 200, "data": []}))
        async with HttpMenuSource(client) as source:
            await source.fetch()
        assert client.is_closed is False
        await client.aclose()

    @pytest.mark.asyncio
    async def test_from_config_owns_client(self) -> None:
        config = PerchConfig(base_url="http://admin.test", request_timeout=3.0)
        source = HttpMenuSource.from_config(config)
        client = source._client
        assert client.base_url.host == "admin.test"
        assert client.timeout.read == 3.0

        await source.aclose()
        assert client.is_closed is True

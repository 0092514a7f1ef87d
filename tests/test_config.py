"""Tests for perch.config: defaults and validation."""

import dataclasses

import pytest

from perch.config import AccessMode, PerchConfig
from perch.errors import ConfigurationError


class TestPerchConfig:
    def test_defaults(self) -> None:
        config = PerchConfig()

        assert config.access_mode is AccessMode.FRONTEND
        assert config.menu_endpoint == "/api/v3/system/menus/simple"
        assert config.layout_component == "/index/index"
        assert config.iframe_prefix == "/outside/iframe/"
        assert config.validate_paths

    def test_frozen(self) -> None:
        config = PerchConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.base_url = "http://other"  # type: ignore[misc]

    def test_mode_from_string(self) -> None:
        assert PerchConfig(access_mode="backend").access_mode is AccessMode.BACKEND  # type: ignore[arg-type]

    def test_unknown_mode(self) -> None:
        with pytest.raises(ConfigurationError, match="access_mode must be one of frontend, backend"):
            PerchConfig(access_mode="sideways")  # type: ignore[arg-type]

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_timeout_must_be_positive(self, timeout: float) -> None:
        with pytest.raises(ConfigurationError, match="request_timeout"):
            PerchConfig(request_timeout=timeout)

    def test_empty_endpoint(self) -> None:
        with pytest.raises(ConfigurationError, match="menu_endpoint"):
            PerchConfig(menu_endpoint="")

    @pytest.mark.parametrize("prefix", ["outside/iframe/", "/outside/iframe"])
    def test_iframe_prefix_slashes(self, prefix: str) -> None:
        with pytest.raises(ConfigurationError, match="iframe_prefix"):
            PerchConfig(iframe_prefix=prefix)

    def test_empty_storage_key(self) -> None:
        with pytest.raises(ConfigurationError, match="iframe_storage_key"):
            PerchConfig(iframe_storage_key="")

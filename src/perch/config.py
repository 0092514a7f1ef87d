"""Pipeline configuration.

PerchConfig is a frozen dataclass: immutable after creation and checked
once in ``__post_init__``, so a bad value fails at startup rather than on
the first login.
"""

from dataclasses import dataclass
from enum import StrEnum

from perch.aliases import RoutesAlias
from perch.errors import ConfigurationError


class AccessMode(StrEnum):
    """Where the menu tree comes from.

    ``FRONTEND``: the statically declared route modules, filtered by role
    on the client. ``BACKEND``: fetched from the server, already filtered.
    """

    FRONTEND = "frontend"
    BACKEND = "backend"


@dataclass(frozen=True, slots=True)
class PerchConfig:
    """Pipeline configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = PerchConfig(access_mode=AccessMode.BACKEND, base_url="https://admin.example")

    ``access_mode`` also accepts the plain strings ``"frontend"`` and
    ``"backend"``. Raises ``ConfigurationError`` on invalid values.
    """

    # Menu source
    access_mode: AccessMode = AccessMode.FRONTEND
    base_url: str = "http://127.0.0.1:3000"
    menu_endpoint: str = "/api/v3/system/menus/simple"
    request_timeout: float = 15.0

    # Component references
    layout_component: str = RoutesAlias.LAYOUT
    iframe_component: str = RoutesAlias.IFRAME

    # Child paths under this prefix may be absolute
    iframe_prefix: str = "/outside/iframe/"

    # Session storage key for iframe route recovery
    iframe_storage_key: str = "iframeRoutes"

    # Log absolute child paths before normalization
    validate_paths: bool = True

    def __post_init__(self) -> None:
        try:
            mode = AccessMode(self.access_mode)
        except ValueError:
            choices = ", ".join(m.value for m in AccessMode)
            msg = f"access_mode must be one of {choices}, got {self.access_mode!r}"
            raise ConfigurationError(msg) from None
        object.__setattr__(self, "access_mode", mode)

        if self.request_timeout <= 0:
            msg = f"request_timeout must be positive, got {self.request_timeout}"
            raise ConfigurationError(msg)
        if not self.menu_endpoint:
            msg = "menu_endpoint must not be empty"
            raise ConfigurationError(msg)
        if not (self.iframe_prefix.startswith("/") and self.iframe_prefix.endswith("/")):
            msg = f"iframe_prefix must start and end with '/', got {self.iframe_prefix!r}"
            raise ConfigurationError(msg)
        if not self.iframe_storage_key:
            msg = "iframe_storage_key must not be empty"
            raise ConfigurationError(msg)

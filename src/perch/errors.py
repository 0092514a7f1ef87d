"""Perch exception hierarchy.

Shared across the menu pipeline, the route registry, and the lifecycle
glue so every module raises and catches the same types.
"""

from collections.abc import Sequence


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when perch configuration is invalid."""


class MenuFormatError(PerchError):
    """Raised when a menu payload cannot be parsed into menu nodes."""


class MenuFetchError(PerchError):
    """Raised when the backend menu source is unavailable or malformed.

    ``status`` carries the HTTP status or envelope ``code`` when one was
    received; it is ``None`` for transport failures.
    """

    def __init__(self, detail: str, status: int | None = None) -> None:
        self.detail = detail
        self.status = status
        if status is not None:
            super().__init__(f"{status}: {detail}")
        else:
            super().__init__(detail)


class RouteValidationError(PerchError):
    """Raised by ``RouteRegistry.register()`` when the menu list is invalid.

    All collected defects are kept on ``errors``; the message joins them.
    """

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = tuple(errors)
        super().__init__(f"Route validation failed: {', '.join(self.errors)}")


class RouteNotFound(PerchError):  # noqa: N818
    """No registered route matches the requested path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No route matches {path!r}")

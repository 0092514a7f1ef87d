"""Perch: menu-driven dynamic routing with role-based authorization.

Turns a menu tree (declared in Python or fetched from the admin API) and
the current user's roles into a registered route table, and takes it down
again on logout.

Basic usage::

    from perch import DynamicRoutes, PerchConfig, Router, UserInfo, UserSession

    router = Router()
    session = UserSession()
    routes = DynamicRoutes.from_config(PerchConfig(), router=router, session=session)

    session.login(UserInfo(user_id=1, user_name="Super", roles=("R_SUPER",)))
    await routes.ensure_registered()
    router.match("/system/user")

    session.logout()
    routes.reset()
"""

from importlib import import_module

__version__ = "0.1.0.dev0"
__all__ = [
    "AccessMode",
    "ComponentLoader",
    "ConfigurationError",
    "DynamicRoutes",
    "HttpMenuSource",
    "IframeRouteManager",
    "MemorySessionStore",
    "MenuFetchError",
    "MenuFormatError",
    "MenuMeta",
    "MenuNode",
    "MenuProcessor",
    "PerchConfig",
    "PerchError",
    "RouteDefinition",
    "RouteNotFound",
    "RouteRegistry",
    "RouteTransformer",
    "RouteValidationError",
    "RouteValidator",
    "Router",
    "RoutesAlias",
    "StaticMenuSource",
    "UserInfo",
    "UserSession",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "AccessMode": "perch.config",
    "ComponentLoader": "perch.routing.components",
    "ConfigurationError": "perch.errors",
    "DynamicRoutes": "perch.lifecycle",
    "HttpMenuSource": "perch.menu.sources",
    "IframeRouteManager": "perch.routing.iframe",
    "MemorySessionStore": "perch.routing.iframe",
    "MenuFetchError": "perch.errors",
    "MenuFormatError": "perch.errors",
    "MenuMeta": "perch.menu.types",
    "MenuNode": "perch.menu.types",
    "MenuProcessor": "perch.menu.processor",
    "PerchConfig": "perch.config",
    "PerchError": "perch.errors",
    "RouteDefinition": "perch.routing.route",
    "RouteNotFound": "perch.errors",
    "RouteRegistry": "perch.routing.registry",
    "RouteTransformer": "perch.routing.transformer",
    "RouteValidationError": "perch.errors",
    "RouteValidator": "perch.routing.validator",
    "Router": "perch.routing.router",
    "RoutesAlias": "perch.aliases",
    "StaticMenuSource": "perch.menu.sources",
    "UserInfo": "perch.session",
    "UserSession": "perch.session",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)

"""Routing: menu-derived route definitions and their registration lifecycle.

Routes are transformed from the normalized menu tree at login and
removed again, through the handles the router returned, at logout.
"""

from perch.routing.components import ComponentLoader, ComponentRef
from perch.routing.iframe import IframeRouteManager, MemorySessionStore, SessionStore
from perch.routing.registry import RouteRegistry
from perch.routing.route import PathSegment, ResolvedRoute, RouteDefinition, RouteMatch
from perch.routing.router import Router, RouterPort, join_path, parse_path
from perch.routing.transformer import NodeKind, RouteTransformer, classify
from perch.routing.validator import RouteValidator, ValidationResult

__all__ = [
    "ComponentLoader",
    "ComponentRef",
    "IframeRouteManager",
    "MemorySessionStore",
    "NodeKind",
    "PathSegment",
    "ResolvedRoute",
    "RouteDefinition",
    "RouteMatch",
    "RouteRegistry",
    "RouteTransformer",
    "RouteValidator",
    "Router",
    "RouterPort",
    "SessionStore",
    "ValidationResult",
    "classify",
    "join_path",
    "parse_path",
]

"""Statically declared route modules for frontend-controlled mode.

Each module exports one top-level menu entry. ``ROUTE_MODULES`` is the
ordered tree ``MenuProcessor`` filters by role when the menu is not
fetched from the server.
"""

from perch.menu.modules.dashboard import dashboard_routes
from perch.menu.modules.error_dashboard import error_dashboard_routes
from perch.menu.modules.exception import exception_routes
from perch.menu.modules.result import result_routes
from perch.menu.modules.system import system_routes

ROUTE_MODULES = (
    dashboard_routes,
    system_routes,
    result_routes,
    exception_routes,
    error_dashboard_routes,
)

__all__ = [
    "ROUTE_MODULES",
    "dashboard_routes",
    "error_dashboard_routes",
    "exception_routes",
    "result_routes",
    "system_routes",
]

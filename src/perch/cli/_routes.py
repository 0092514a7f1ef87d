"""``perch routes``: list the routes a user would get.

Runs the full pipeline (filter, prune, normalize, transform) against an
in-memory router and prints a table of PATH, NAME and COMPONENT.
"""

import argparse
import sys

import anyio

from perch.cli._load import load_menu
from perch.config import AccessMode, PerchConfig
from perch.errors import RouteValidationError
from perch.menu.processor import MenuProcessor
from perch.menu.sources import StaticMenuSource
from perch.routing.iframe import IframeRouteManager
from perch.routing.registry import RouteRegistry
from perch.routing.router import Router


def run_routes(args: argparse.Namespace) -> None:
    nodes = load_menu(args.menu)
    roles = tuple(args.roles)
    config = PerchConfig(access_mode=AccessMode(args.mode))
    processor = MenuProcessor(config, source=StaticMenuSource(nodes), roles=lambda: roles)
    menu_list = anyio.run(processor.get_menu_list)

    router = Router()
    registry = RouteRegistry(router, IframeRouteManager())
    try:
        registry.register(menu_list)
    except RouteValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.get_routes()

    # Build rows: (path, name, component)
    rows: list[tuple[str, str, str]] = []
    for route in routes:
        definition = route.definition
        component = definition.component.path if definition.component else "-"
        rows.append((route.full_path, definition.name or "(layout)", component))

    # Column widths
    max_path = max(max((len(r[0]) for r in rows), default=0), 4)  # "PATH" header
    max_name = max(max((len(r[1]) for r in rows), default=0), 4)  # "NAME" header

    # Print table
    fmt = f"{{:<{max_path}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("PATH", "NAME", "COMPONENT"))
    sep_len = max_path + max_name + 4 + max((len(r[2]) for r in rows), default=9)
    print("-" * min(sep_len, 80))
    for path, name, component in rows:
        print(fmt.format(path, name, component))

"""Perch CLI: inspect and lint menu trees.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch: menu-driven dynamic routing with role-based authorization.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the routes a user would get")
    routes_parser.add_argument(
        "menu",
        nargs="?",
        default=None,
        help="Menu JSON file (a list, or a {'data': [...]} envelope); defaults to the built-in modules",
    )
    routes_parser.add_argument(
        "--roles",
        nargs="*",
        default=[],
        help="Role codes of the user (frontend mode only)",
    )
    routes_parser.add_argument(
        "--mode",
        choices=("frontend", "backend"),
        default="frontend",
        help="Treat the menu as a static declaration or a server-filtered tree",
    )

    # -- perch check ------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Lint menu paths and structure")
    check_parser.add_argument("menu", nargs="?", default=None, help="Menu JSON file")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from perch.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from perch.cli._check import run_check

        run_check(args)

"""``perch check``: lint a menu tree.

Reports child paths that illegally start with ``/`` (warnings) and
structural defects that would block registration (errors). Exits 1 when
there are errors.
"""

import argparse
import sys

from perch.cli._load import load_menu
from perch.menu.paths import normalize_menu_paths, validate_menu_paths
from perch.routing.validator import RouteValidator


def run_check(args: argparse.Namespace) -> None:
    nodes = load_menu(args.menu)

    issues = validate_menu_paths(nodes)
    result = RouteValidator().validate(normalize_menu_paths(nodes))

    for issue in issues:
        print(f"warning: {issue}")
    for error in result.errors:
        print(f"error: {error}")

    print(f"{len(nodes)} top-level entries, {len(issues)} path warnings, {len(result.errors)} errors")
    if not result:
        sys.exit(1)

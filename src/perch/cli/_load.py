"""Menu file loading shared by ``perch routes`` and ``perch check``."""

import json
import sys
from pathlib import Path

from perch.errors import MenuFormatError
from perch.menu.types import MenuNode, parse_menu_list


def load_menu(path: str | None) -> tuple[MenuNode, ...]:
    """Load a menu tree from a JSON file, or the built-in modules when ``path`` is None.

    Exits with status 1 and a message on stderr when the file cannot be
    read or parsed.
    """
    if path is None:
        from perch.menu.modules import ROUTE_MODULES

        return ROUTE_MODULES

    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"Error: cannot read {path}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if isinstance(payload, dict) and "data" in payload:
        payload = payload["data"]

    try:
        return parse_menu_list(payload)
    except MenuFormatError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

"""Menu pipeline: source selection, role filtering, pruning, path normalization.

Menu trees are immutable inputs; every stage returns a new tree.
"""

from perch.menu.paths import (
    PathIssue,
    build_full_path,
    extract_first_segment,
    is_valid_absolute_path,
    normalize_menu_paths,
    validate_menu_paths,
)
from perch.menu.permissions import filter_menu_by_roles, has_permission
from perch.menu.processor import MenuProcessor
from perch.menu.pruning import filter_empty_menus
from perch.menu.sources import HttpMenuSource, MenuSource, StaticMenuSource
from perch.menu.types import MenuMeta, MenuNode, iter_nodes, parse_menu_list

__all__ = [
    "HttpMenuSource",
    "MenuMeta",
    "MenuNode",
    "MenuProcessor",
    "MenuSource",
    "PathIssue",
    "StaticMenuSource",
    "build_full_path",
    "extract_first_segment",
    "filter_empty_menus",
    "filter_menu_by_roles",
    "has_permission",
    "is_valid_absolute_path",
    "iter_nodes",
    "normalize_menu_paths",
    "parse_menu_list",
    "validate_menu_paths",
]

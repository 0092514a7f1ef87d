"""Structural validation of a menu list before registration.

Collects every defect instead of stopping at the first, so a broken
menu is reported in one pass. ``RouteRegistry`` treats an invalid result
as fatal for the registration attempt.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from perch.menu.types import MenuNode


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating a menu list.

    The result is falsy when invalid, so you can write::

        result = validator.validate(menu_list)
        if not result:
            raise RouteValidationError(result.errors)
    """

    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.valid


class RouteValidator:
    """Checks that a menu list is registrable."""

    def validate(self, nodes: Any) -> ValidationResult:
        if not isinstance(nodes, Sequence) or isinstance(nodes, str):
            return ValidationResult(errors=("Menu list must be a sequence",))
        if not nodes:
            return ValidationResult(errors=("Menu list is empty",))

        errors: list[str] = []
        seen: set[str] = set()
        for index, node in enumerate(nodes):
            if not isinstance(node, MenuNode):
                errors.append(f"Route at index {index} is not a menu node")
                continue
            if not node.name:
                errors.append(f"Route at index {index} has no name")
            self._check_node(node, errors, seen)

        return ValidationResult(errors=tuple(errors))

    def _check_node(self, node: MenuNode, errors: list[str], seen: set[str]) -> None:
        label = node.name or node.path or "<unnamed>"
        if not node.path and not (node.meta.is_iframe or node.is_external):
            errors.append(f"Route {label!r} has no path")

        if node.name:
            if node.name in seen:
                errors.append(f"Duplicate route name {node.name!r}")
            seen.add(node.name)

        for child in node.children or ():
            self._check_node(child, errors, seen)

"""RouteDefinition, PathSegment and RouteMatch frozen dataclasses."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from perch.menu.types import MenuMeta
from perch.routing.components import ComponentRef


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/users``  (is_param=False)
    Param:   ``/:id`` or ``/{id}``  (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteDefinition:
    """A router-consumable route produced from a menu node.

    Never hand-authored and never persisted: created when routes are
    registered, dropped when they are removed.

    Layout wrappers carry ``name=""``; only named definitions can be
    looked up with ``has_route()``.
    """

    path: str
    name: str = ""
    component: ComponentRef | None = None
    meta: MenuMeta = field(default_factory=MenuMeta)
    children: tuple[RouteDefinition, ...] = ()
    redirect: str = ""

    def walk(self) -> Iterator[RouteDefinition]:
        """Yield this definition and every descendant, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True, slots=True)
class ResolvedRoute:
    """A definition placed at its full path.

    ``chain`` runs from the top-level record down to ``definition``; the
    renderer nests each component inside the previous one.
    """

    full_path: str
    definition: RouteDefinition
    chain: tuple[RouteDefinition, ...]


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: ResolvedRoute
    path_params: dict[str, str]

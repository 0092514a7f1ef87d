from perch.aliases import RoutesAlias
from perch.menu.types import MenuMeta, MenuNode

_ROLES = frozenset({"R_SUPER"})


def _error_page(code: str, title: str) -> MenuNode:
    return MenuNode(
        name=f"Exception{code}",
        path=code,
        component=f"/exception/{code}",
        meta=MenuMeta(
            title=title,
            keep_alive=True,
            is_hide_tab=True,
            is_full_page=True,
            roles=_ROLES,
        ),
    )


exception_routes = MenuNode(
    name="Exception",
    path="/exception",
    component=RoutesAlias.LAYOUT,
    meta=MenuMeta(title="menus.exception.title", icon="ri:error-warning-line", roles=_ROLES),
    children=(
        _error_page("403", "menus.exception.forbidden"),
        _error_page("404", "menus.exception.notFound"),
        _error_page("500", "menus.exception.serverError"),
    ),
)

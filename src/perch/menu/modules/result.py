from perch.aliases import RoutesAlias
from perch.menu.types import MenuMeta, MenuNode

_ROLES = frozenset({"R_SUPER", "R_ADMIN"})

result_routes = MenuNode(
    name="Result",
    path="/result",
    component=RoutesAlias.LAYOUT,
    meta=MenuMeta(title="menus.result.title", icon="ri:checkbox-circle-line", roles=_ROLES),
    children=(
        MenuNode(
            name="ResultSuccess",
            path="success",
            component="/result/success",
            meta=MenuMeta(
                title="menus.result.success",
                icon="ri:checkbox-circle-line",
                keep_alive=True,
                roles=_ROLES,
            ),
        ),
        MenuNode(
            name="ResultFail",
            path="fail",
            component="/result/fail",
            meta=MenuMeta(
                title="menus.result.fail",
                icon="ri:close-circle-line",
                keep_alive=True,
                roles=_ROLES,
            ),
        ),
    ),
)

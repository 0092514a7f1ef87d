from perch.aliases import RoutesAlias
from perch.menu.types import MenuMeta, MenuNode

system_routes = MenuNode(
    name="System",
    path="/system",
    component=RoutesAlias.LAYOUT,
    meta=MenuMeta(
        title="menus.system.title",
        icon="ri:user-3-line",
        roles=frozenset({"R_SUPER", "R_ADMIN"}),
    ),
    children=(
        MenuNode(
            name="User",
            path="user",
            component="/system/user",
            meta=MenuMeta(
                title="menus.system.user",
                icon="ri:user-line",
                keep_alive=True,
                roles=frozenset({"R_SUPER", "R_ADMIN"}),
            ),
        ),
        MenuNode(
            name="Role",
            path="role",
            component="/system/role",
            meta=MenuMeta(
                title="menus.system.role",
                icon="ri:admin-line",
                keep_alive=True,
                roles=frozenset({"R_SUPER"}),
            ),
        ),
        MenuNode(
            name="Menus",
            path="menu",
            component="/system/menu",
            meta=MenuMeta(
                title="menus.system.menu",
                icon="ri:menu-line",
                keep_alive=True,
                roles=frozenset({"R_SUPER"}),
            ),
        ),
    ),
)

from perch.aliases import RoutesAlias
from perch.menu.types import MenuMeta, MenuNode

dashboard_routes = MenuNode(
    name="Dashboard",
    path="/dashboard",
    component=RoutesAlias.LAYOUT,
    meta=MenuMeta(title="menus.dashboard.title", icon="ri:dashboard-line", keep_alive=True),
    children=(
        MenuNode(
            name="Console",
            path="console",
            component="/dashboard/console",
            meta=MenuMeta(title="menus.dashboard.console", icon="ri:computer-line", keep_alive=True),
        ),
    ),
)

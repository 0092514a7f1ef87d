from perch.menu.types import MenuMeta, MenuNode

error_dashboard_routes = MenuNode(
    name="ErrorDashboard",
    path="/error-dashboard",
    component="/error-dashboard",
    meta=MenuMeta(
        title="menus.errorDashboard.title",
        icon="ri:dashboard-line",
        is_hide=True,
        keep_alive=True,
        roles=frozenset({"R_SUPER"}),
    ),
)

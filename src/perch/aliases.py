"""System-level route aliases: the layout container, the iframe host, the login page."""


class RoutesAlias:
    LAYOUT = "/index/index"
    IFRAME = "/outside/Iframe"
    LOGIN = "/auth/login"

"""Current-user session state.

Holds the logged-in user's info; ``MenuProcessor`` reads role codes
from it through ``UserSession.get_roles``. Anonymous sessions have no
roles.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UserInfo:
    """The authenticated user as returned by the user-info endpoint."""

    user_id: int | str
    user_name: str
    roles: tuple[str, ...] = ()
    buttons: tuple[str, ...] = ()


class UserSession:
    """Mutable holder for the current user."""

    __slots__ = ("_info", "access_token")

    def __init__(self) -> None:
        self._info: UserInfo | None = None
        self.access_token: str | None = None

    def login(self, info: UserInfo, access_token: str | None = None) -> None:
        self._info = info
        self.access_token = access_token

    def logout(self) -> None:
        self._info = None
        self.access_token = None

    @property
    def info(self) -> UserInfo | None:
        return self._info

    @property
    def is_logged_in(self) -> bool:
        return self._info is not None

    @property
    def roles(self) -> tuple[str, ...]:
        if self._info is None:
            return ()
        return self._info.roles

    def get_roles(self) -> tuple[str, ...]:
        return self.roles

    def get_token(self) -> str | None:
        return self.access_token

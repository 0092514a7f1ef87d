"""Tests for perch.session."""

from perch.session import UserInfo, UserSession


class TestUserSession:
    def test_anonymous(self) -> None:
        session = UserSession()

        assert not session.is_logged_in
        assert session.info is None
        assert session.get_roles() == ()
        assert session.get_token() is None

    def test_login(self) -> None:
        session = UserSession()
        info = UserInfo(user_id=1, user_name="Super", roles=("R_SUPER",), buttons=("add",))

        session.login(info, access_token="Bearer abc")

        assert session.is_logged_in
        assert session.info is info
        assert session.roles == ("R_SUPER",)
        assert session.get_token() == "Bearer abc"

    def test_logout(self) -> None:
        session = UserSession()
        session.login(UserInfo(user_id=1, user_name="Super", roles=("R_SUPER",)), access_token="t")

        session.logout()

        assert not session.is_logged_in
        assert session.get_roles() == ()
        assert session.get_token() is None

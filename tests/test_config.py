"""Tests for crumb.config: CookiePolicy frozen dataclass."""

import pytest

from crumb.config import CookiePolicy
from crumb.errors import ConfigurationError
from crumb.http.cookies import Cookie, SameSite


class TestCookiePolicy:
    def test_defaults(self) -> None:
        policy = CookiePolicy()

        assert policy.version == 0
        assert policy.domain == ""
        assert policy.path == "/"
        assert policy.priority == ""
        assert policy.secure is False
        assert policy.httponly is True
        assert policy.samesite is SameSite.LAX
        assert policy.max_age == -1

    def test_override(self) -> None:
        policy = CookiePolicy(domain=".example.com", secure=True, samesite=SameSite.NONE)

        assert policy.domain == ".example.com"
        assert policy.secure is True
        assert policy.samesite is SameSite.NONE

    def test_frozen(self) -> None:
        policy = CookiePolicy()

        with pytest.raises(AttributeError):
            policy.secure = True  # type: ignore[misc]

    @pytest.mark.parametrize("version", [-1, 2, True, 1.0])
    def test_invalid_version(self, version: object) -> None:
        with pytest.raises(ConfigurationError, match="version"):
            CookiePolicy(version=version)  # type: ignore[arg-type]

    def test_invalid_max_age(self) -> None:
        with pytest.raises(ConfigurationError, match="max_age"):
            CookiePolicy(max_age=-2)

    def test_samesite_must_be_member(self) -> None:
        with pytest.raises(ConfigurationError, match="samesite"):
            CookiePolicy(samesite="lax")  # type: ignore[arg-type]

    def test_samesite_none_requires_secure(self) -> None:
        with pytest.raises(ConfigurationError, match="secure"):
            CookiePolicy(samesite=SameSite.NONE)


class TestMake:
    def test_applies_defaults(self) -> None:
        cookie = CookiePolicy().make("sid", "abc")

        assert cookie == Cookie("sid", "abc", path="/", httponly=True, samesite=SameSite.LAX)
        assert cookie.to_header_value() == "sid=abc; Path=/; HttpOnly; SameSite=Lax"

    def test_overrides(self) -> None:
        policy = CookiePolicy(domain="example.com")
        cookie = policy.make("sid", "abc", path="/app", max_age=60)

        assert cookie.domain == "example.com"
        assert cookie.path == "/app"
        assert cookie.max_age == 60
        assert policy.path == "/"

    def test_cookies_are_independent(self) -> None:
        policy = CookiePolicy()
        first = policy.make("a")
        second = policy.make("a")
        first.path = "/changed"
        assert second.path == "/"

    def test_version_1_policy(self) -> None:
        cookie = CookiePolicy(version=1).make("sid", "abc", comment="session")
        assert cookie.to_header_value() == (
            'sid=abc; Version="1"; Comment=session; Path=/; HttpOnly; SameSite=Lax'
        )


class TestExpire:
    def test_deletion_cookie(self) -> None:
        policy = CookiePolicy(domain="example.com", path="/app")
        cookie = policy.expire("sid")

        assert cookie.name == "sid"
        assert cookie.value == ""
        assert cookie.max_age == 0
        assert cookie.domain == "example.com"
        assert cookie.path == "/app"

    def test_deletion_header(self) -> None:
        header = CookiePolicy().expire("sid").to_header_value(now=0)
        assert header == (
            "sid=; Path=/; HttpOnly; Max-Age=0; "
            "Expires=Thu, 01 Jan 1970 00:00:00 GMT; SameSite=Lax"
        )

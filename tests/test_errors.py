"""Tests for crumb.errors: exception hierarchy and error messages."""

import pytest

from crumb.errors import ConfigurationError, CookieError, InvalidVersion
from crumb.http.cookies import Cookie


class TestHierarchy:
    def test_configuration_error_is_cookie_error(self) -> None:
        assert issubclass(ConfigurationError, CookieError)

    def test_invalid_version_is_cookie_error(self) -> None:
        assert issubclass(InvalidVersion, CookieError)

    def test_invalid_version_is_value_error(self) -> None:
        assert issubclass(InvalidVersion, ValueError)


class TestInvalidVersion:
    def test_carries_version(self) -> None:
        err = InvalidVersion(5)
        assert err.version == 5

    def test_message(self) -> None:
        assert str(InvalidVersion(5)) == "Cookie version must be 0 or 1, got 5"

    def test_raised_by_cookie(self) -> None:
        with pytest.raises(CookieError, match="got 9"):
            Cookie(version=9)

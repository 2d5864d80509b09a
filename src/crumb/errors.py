"""Crumb exception hierarchy.

Shared by the cookie record, the codec, and the policy layer so callers
catch one family of types.
"""


class CookieError(Exception):
    """Base for all crumb-specific errors."""


class ConfigurationError(CookieError):
    """Raised when a ``CookiePolicy`` is invalid.

    Raised at construction time, never during serialization.
    """


class InvalidVersion(CookieError, ValueError):  # noqa: N818
    """Raised when a cookie version other than 0 or 1 is assigned.

    Version 0 is the Netscape dialect, version 1 is RFC 2109.
    """

    def __init__(self, version: object) -> None:
        self.version = version
        super().__init__(f"Cookie version must be 0 or 1, got {version!r}")

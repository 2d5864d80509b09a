"""Crumb: HTTP cookies and their wire format.

Models a single cookie in either the Netscape (version 0) or RFC 2109
(version 1) dialect, with ``HttpOnly``, ``SameSite`` and ``Priority``
extensions, and converts it to and from header text.

Basic usage::

    from crumb import Cookie, SameSite, escape

    cookie = Cookie("sid", escape("a b;c"), secure=True, samesite=SameSite.LAX)
    response_headers.append(("set-cookie", cookie.to_header_value()))
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "Cookie",
    "CookieError",
    "CookiePolicy",
    "InvalidVersion",
    "SameSite",
    "escape",
    "format_cookie_header",
    "http_date",
    "parse_cookies",
    "serialize",
    "unescape",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    if name in ("Cookie", "SameSite", "parse_cookies", "format_cookie_header"):
        from crumb.http import cookies as _cookies

        return getattr(_cookies, name)

    if name in ("escape", "unescape", "serialize", "http_date"):
        from crumb.http import codec as _codec

        return getattr(_codec, name)

    if name == "CookiePolicy":
        from crumb.config import CookiePolicy

        return CookiePolicy

    if name in ("CookieError", "ConfigurationError", "InvalidVersion"):
        from crumb import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

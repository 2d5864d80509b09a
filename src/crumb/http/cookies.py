"""Cookie record, SameSite modes, and the ``Cookie`` request header.

``Cookie`` is the write side (serialized to ``Set-Cookie`` through
``crumb.http.codec``). ``parse_cookies`` and ``format_cookie_header``
cover the read side and the request header.

A single record type serves both dialects: ``version`` 0 is the Netscape
format, ``version`` 1 is RFC 2109. The only difference is which optional
attributes ``serialize`` emits.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import UTC
from email.utils import parsedate_to_datetime
from enum import Enum

from crumb.errors import InvalidVersion
from crumb.http.codec import serialize, unescape

logger = logging.getLogger("crumb.cookies")

_TEXT_ATTRS = frozenset({"name", "value", "comment", "domain", "path", "priority"})


class SameSite(Enum):
    """Cross-site sending policy for a cookie.

    The value of each member is the exact literal written after
    ``SameSite=``. ``NOT_SPECIFIED`` omits the attribute entirely.
    """

    NOT_SPECIFIED = ""
    NONE = "None"
    LAX = "Lax"
    STRICT = "Strict"

    @classmethod
    def parse(cls, text: str) -> SameSite | None:
        """Match ``None``/``Lax``/``Strict`` case-insensitively, else ``None``."""
        wanted = text.strip().lower()
        for member in (cls.NONE, cls.LAX, cls.STRICT):
            if member.value.lower() == wanted:
                return member
        return None

    @classmethod
    def coerce(cls, value: object) -> SameSite:
        """Convert *value* to a member or raise ``ValueError``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if not value.strip():
                return cls.NOT_SPECIFIED
            member = cls.parse(value)
            if member is not None:
                return member
        msg = f"{value!r} is not a valid SameSite mode"
        raise ValueError(msg)


@dataclass(slots=True)
class Cookie:
    """A single HTTP cookie: name, value, and optional attributes.

    Mutable and owned by whoever created it. Fields are read and written
    directly; only ``version`` is validated::

        cookie = Cookie("sid", "abc123", secure=True, httponly=True)
        cookie.samesite = SameSite.LAX
        cookie.to_header_value()
        # 'sid=abc123; Secure; HttpOnly; SameSite=Lax'

    ``value`` is written to the header untouched. If it may hold
    whitespace or reserved characters, pass it through ``escape`` first.

    A ``max_age`` of ``-1`` makes a session cookie (no expiry attributes),
    ``0`` tells the client to drop the cookie immediately.
    """

    name: str = ""
    value: str = ""
    version: int = 0
    comment: str = ""
    domain: str = ""
    path: str = ""
    priority: str = ""
    secure: bool = False
    max_age: int = -1
    httponly: bool = False
    samesite: SameSite = SameSite.NOT_SPECIFIED

    def __setattr__(self, name: str, value: object) -> None:
        if name == "version" and (type(value) is not int or value not in (0, 1)):
            raise InvalidVersion(value)
        if name == "samesite":
            value = SameSite.coerce(value)
        object.__setattr__(self, name, value)

    def __str__(self) -> str:
        return serialize(self)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str], *, now: float | None = None) -> Cookie:
        """Build a cookie from attribute-style key/value text.

        Best effort: keys match case-insensitively, unknown keys are
        ignored, and values that cannot be used are skipped. Never raises
        for wire-supplied text.

        ``Secure`` and ``HttpOnly`` are set by presence alone. ``Expires``
        is converted to ``max_age`` relative to *now*; an explicit
        ``Max-Age`` always wins over it.
        """
        cookie = cls()
        expires: str | None = None
        has_max_age = False
        for key, text in mapping.items():
            attr = key.strip().lower()
            if attr in _TEXT_ATTRS:
                setattr(cookie, attr, text)
            elif attr == "secure":
                cookie.secure = True
            elif attr == "httponly":
                cookie.httponly = True
            elif attr == "samesite":
                samesite = SameSite.parse(text)
                if samesite is None:
                    logger.debug("Ignoring unknown SameSite mode %r", text)
                else:
                    cookie.samesite = samesite
            elif attr == "version":
                version = _parse_int(key, text)
                if version in (0, 1):
                    cookie.version = version
                elif version is not None:
                    logger.debug("Ignoring unsupported cookie version %d", version)
            elif attr == "max-age":
                max_age = _parse_int(key, text)
                if max_age is not None:
                    # A non-positive Max-Age on the wire means "expire now".
                    cookie.max_age = max(max_age, 0)
                    has_max_age = True
            elif attr == "expires":
                expires = text
            else:
                logger.debug("Ignoring unrecognized cookie attribute %r", key)

        if expires is not None and not has_max_age:
            max_age = _max_age_from_expires(expires, now)
            if max_age is not None:
                cookie.max_age = max_age
        return cookie

    def copy(self) -> Cookie:
        """Return an independent copy of this cookie."""
        return replace(self)

    def to_header_value(self, *, now: float | None = None) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        return serialize(self, now=now)

    def to_cookie_pair(self) -> str:
        """Return the ``name=value`` pair sent back in a ``Cookie`` header."""
        return f"{self.name}={self.value}"


def _parse_int(key: str, text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        logger.debug("Ignoring non-integer %s value %r", key, text)
        return None


def _max_age_from_expires(text: str, now: float | None) -> int | None:
    try:
        expires = parsedate_to_datetime(text.strip())
    except (TypeError, ValueError):
        logger.debug("Ignoring unparsable Expires value %r", text)
        return None
    if expires.tzinfo is None:
        expires = expires.replace(tzinfo=UTC)
    if now is None:
        now = time.time()
    return max(int(expires.timestamp() - now), 0)


def parse_cookies(header: str, *, decode: bool = False) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a name-value dict.

    Returns an empty dict for empty or missing headers. With
    ``decode=True`` each value is passed through ``unescape``.
    """
    if not header:
        return {}
    cookies: dict[str, str] = {}
    for pair in header.split(";"):
        pair = pair.strip()
        if "=" in pair:
            key, _, value = pair.partition("=")
            value = value.strip()
            cookies[key.strip()] = unescape(value) if decode else value
    return cookies


def format_cookie_header(cookies: Iterable[Cookie]) -> str:
    """Join cookies into a ``Cookie`` request header value."""
    return "; ".join(cookie.to_cookie_pair() for cookie in cookies)

"""Cookie wire codec: percent escaping and Set-Cookie serialization.

``escape``/``unescape`` convert arbitrary text to and from a form that is
safe inside a cookie value. ``serialize`` turns a ``Cookie`` into a
``Set-Cookie`` header value with a fixed attribute order.

All functions are pure. The only module state is compiled patterns.
"""

from __future__ import annotations

import re
import time
from email.utils import formatdate
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from crumb.http.cookies import Cookie

# Legacy reserved set, kept byte-for-byte for compatibility with existing
# cookie producers. Whitespace, controls and every byte >= 0x7F are added
# as ranges below.
RESERVED_CHARS = "%<>{}[]()/|\\\"'^`,;"

_ESCAPE_RE = re.compile(rb"[\x00-\x20\x7f-\xff" + re.escape(RESERVED_CHARS.encode("ascii")) + rb"]")
_UNESCAPE_RE = re.compile(rb"%([0-9A-Fa-f]{2})")

# 9999-12-31 23:59:59 GMT, the last instant an HTTP-date can express.
MAX_HTTP_TIMESTAMP = 253_402_300_799


def _escape_byte(match: re.Match[bytes]) -> bytes:
    return b"%%%02X" % match[0][0]


def _unescape_byte(match: re.Match[bytes]) -> bytes:
    return bytes((int(match[1], 16),))


def _encode_text(data: str) -> bytes:
    try:
        return data.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # Lone surrogates outside U+DC80..U+DCFF have no byte to stand for.
        return data.encode("utf-8", "surrogatepass")


@overload
def escape(data: str) -> str: ...
@overload
def escape(data: bytes) -> bytes: ...


def escape(data: str | bytes) -> str | bytes:
    """Percent-escape every reserved, whitespace, control or non-ASCII byte.

    Returns the same type as *data*. Text is encoded as UTF-8 first, so the
    escaped form of a ``str`` is always plain ASCII::

        >>> escape("a b;c")
        'a%20b%3Bc'
    """
    if isinstance(data, str):
        raw = _encode_text(data)
        return _ESCAPE_RE.sub(_escape_byte, raw).decode("ascii")
    return _ESCAPE_RE.sub(_escape_byte, bytes(data))


@overload
def unescape(data: str) -> str: ...
@overload
def unescape(data: bytes) -> bytes: ...


def unescape(data: str | bytes) -> str | bytes:
    """Decode ``%XX`` sequences back into the bytes they stand for.

    A ``%`` that is not followed by two hex digits is copied through
    literally, so malformed input never raises::

        >>> unescape("100%")
        '100%'

    Decoded text is read as UTF-8; undecodable bytes survive as surrogate
    escapes and re-encode to the same bytes. Text holding other lone
    surrogates is escaped from its ``surrogatepass`` encoding, so it comes
    back as three surrogate escapes rather than the original code point.
    """
    if isinstance(data, str):
        raw = _encode_text(data)
        return _UNESCAPE_RE.sub(_unescape_byte, raw).decode("utf-8", "surrogateescape")
    return _UNESCAPE_RE.sub(_unescape_byte, bytes(data))


def http_date(timestamp: float) -> str:
    """Format a POSIX timestamp as ``Www, dd Mon yyyy hh:mm:ss GMT``.

    Weekday and month names are always English, whatever the locale.
    Timestamps past the end of year 9999 are clamped to its last second.
    """
    return formatdate(min(timestamp, MAX_HTTP_TIMESTAMP), usegmt=True)


def serialize(cookie: Cookie, *, now: float | None = None) -> str:
    """Serialize *cookie* to a ``Set-Cookie`` header value.

    The value is emitted as-is; escape it beforehand if it may contain
    reserved bytes. ``now`` pins the clock used for ``Expires``.
    """
    parts = [f"{cookie.name}={cookie.value}"]
    if cookie.version == 1:
        parts.append('Version="1"')
        if cookie.comment:
            parts.append(f"Comment={cookie.comment}")
    if cookie.domain:
        parts.append(f"Domain={cookie.domain}")
    if cookie.path:
        parts.append(f"Path={cookie.path}")
    if cookie.priority:
        parts.append(f"Priority={cookie.priority}")
    if cookie.secure:
        parts.append("Secure")
    if cookie.httponly:
        parts.append("HttpOnly")
    if cookie.max_age >= 0:
        if now is None:
            now = time.time()
        parts.append(f"Max-Age={cookie.max_age}")
        # Netscape clients ignore Max-Age and only honour Expires.
        parts.append(f"Expires={http_date(now + min(cookie.max_age, MAX_HTTP_TIMESTAMP))}")
    if cookie.samesite.value:
        parts.append(f"SameSite={cookie.samesite.value}")
    return "; ".join(parts)

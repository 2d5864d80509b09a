"""Cookie policy configuration.

CookiePolicy is a frozen dataclass. It is immutable after creation, checked
once at construction, then used to stamp out cookies with consistent
attributes.
"""

from dataclasses import dataclass

from crumb.errors import ConfigurationError
from crumb.http.cookies import Cookie, SameSite


@dataclass(frozen=True, slots=True)
class CookiePolicy:
    """Default attributes for cookies issued by one application.

    Override what you need::

        policy = CookiePolicy(domain=".example.com", secure=True)
        policy.make("sid", "abc123").to_header_value()
    """

    version: int = 0
    domain: str = ""
    path: str = "/"
    priority: str = ""
    secure: bool = False
    httponly: bool = True
    samesite: SameSite = SameSite.LAX
    max_age: int = -1  # -1 = session cookie

    def __post_init__(self) -> None:
        if type(self.version) is not int or self.version not in (0, 1):
            msg = f"CookiePolicy.version must be 0 or 1, got {self.version!r}."
            raise ConfigurationError(msg)
        if self.max_age < -1:
            msg = f"CookiePolicy.max_age must be -1 (session) or >= 0, got {self.max_age}."
            raise ConfigurationError(msg)
        if not isinstance(self.samesite, SameSite):
            msg = f"CookiePolicy.samesite must be a SameSite member, got {self.samesite!r}."
            raise ConfigurationError(msg)
        if self.samesite is SameSite.NONE and not self.secure:
            msg = "CookiePolicy with SameSite=None requires secure=True; browsers reject it otherwise."
            raise ConfigurationError(msg)

    def make(self, name: str, value: str = "", **overrides: object) -> Cookie:
        """Return a new cookie carrying this policy's defaults.

        Keyword *overrides* replace individual attributes for this cookie
        only; the policy itself is unchanged.
        """
        attrs: dict[str, object] = {
            "version": self.version,
            "domain": self.domain,
            "path": self.path,
            "priority": self.priority,
            "secure": self.secure,
            "httponly": self.httponly,
            "samesite": self.samesite,
            "max_age": self.max_age,
        }
        attrs.update(overrides)
        return Cookie(name, value, **attrs)  # type: ignore[arg-type]

    def expire(self, name: str) -> Cookie:
        """Return a cookie that tells the client to delete *name* (Max-Age=0)."""
        return self.make(name, "", max_age=0)

"""Cookie attribute options.

CookieOptions is a frozen dataclass: built fresh per call, immutable,
discarded after serialization. Every field is optional and maps to one
``Set-Cookie`` attribute.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any, Literal

from pastry.errors import ConfigurationError

# Cross-site transmission policy
type SameSite = Literal["Lax", "Strict", "None"]

# Absolute expiry: a datetime (naive means UTC) or POSIX seconds
type Expiry = datetime | int | float


@dataclass(frozen=True, slots=True)
class CookieOptions:
    """Attributes appended after ``key=value``. All default to absent.

    Override what you need::

        options = CookieOptions(path="/", max_age=3600, same_site="Lax")

    When both ``max_age`` and ``expiry`` are set, both attributes are
    emitted; browsers honour ``Max-Age``.
    """

    # Scope
    domain: str | None = None  # Unset: host-only, not sent to subdomains
    path: str | None = None  # Unset: the browser uses the "current" path

    # Lifetime (neither set: session cookie)
    expiry: Expiry | None = None
    max_age: int | None = None  # 0 expires immediately

    # Transmission
    partitioned: bool = False
    same_site: SameSite | None = None
    secure: bool = False
    http_only: bool = False

    def merge(self, **changes: Any) -> CookieOptions:
        """Return a copy with *changes* applied."""
        return replace(self, **changes)


# camelCase names of the duck-typed option object
_ALIASES = {
    "maxAge": "max_age",
    "sameSite": "same_site",
    "httpOnly": "http_only",
}

_FIELD_NAMES = frozenset(f.name for f in fields(CookieOptions))


def coerce_options(options: CookieOptions | Mapping[str, Any] | None) -> CookieOptions | None:
    """Normalize *options* to a ``CookieOptions`` (or ``None``).

    Mappings may use snake_case field names or the camelCase spelling
    (``maxAge``, ``sameSite``, ``httpOnly``). Unknown keys raise
    ``ConfigurationError``.
    """
    if options is None or isinstance(options, CookieOptions):
        return options

    kwargs: dict[str, Any] = {}
    for key, value in options.items():
        name = _ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            msg = f"Unknown cookie option {key!r}. Valid options: {', '.join(sorted(_FIELD_NAMES))}"
            raise ConfigurationError(msg)
        kwargs[name] = value
    return CookieOptions(**kwargs)

"""Cookie jar protocol and an in-memory jar.

A jar exposes the two operations of a browser's ``document.cookie``:
reading the combined ``k1=v1; k2=v2`` line and assigning one formatted
cookie string, which adds, replaces or expires a single entry.

``MemoryJar`` follows browser assignment rules closely enough to stand
in for ``document.cookie`` in tests and in non-browser runtimes.
"""

from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Protocol, runtime_checkable

# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class CookieJar(Protocol):
    """Minimal cookie jar protocol.

    ``read`` returns the full combined cookie line. ``write`` applies one
    ``Set-Cookie`` style string without needing to know other entries.
    """

    def read(self) -> str: ...

    def write(self, raw: str) -> None: ...


# ---------------------------------------------------------------------------
# Snapshot parsing
# ---------------------------------------------------------------------------


def split_jar(snapshot: str) -> list[tuple[str, str]]:
    """Split a combined cookie line into ``(key, value)`` pairs.

    Segments are trimmed and split once on ``=``, so values may contain
    ``=``. Empty segments and segments without ``=`` are skipped.
    """
    pairs: list[tuple[str, str]] = []
    for segment in snapshot.split(";"):
        segment = segment.strip()
        if "=" not in segment:
            continue
        key, _, value = segment.partition("=")
        pairs.append((key.strip(), value))
    return pairs


# ---------------------------------------------------------------------------
# MemoryJar
# ---------------------------------------------------------------------------


class MemoryJar:
    """In-memory ``document.cookie``.

    - ``Max-Age <= 0`` or a past ``Expires`` removes the cookie
    - Writes carrying ``HttpOnly`` are ignored, as browsers ignore them
      from script
    - ``blocked=True`` ignores every write (cookies disabled)
    - A pair without ``=`` is stored under the empty name

    Usage::

        jar = MemoryJar("theme=dark; lang=en")
        jar.write("theme=light; Path=/")
        jar.read()  # "theme=light; lang=en"
    """

    __slots__ = ("_cookies", "blocked")

    def __init__(self, initial: str = "", *, blocked: bool = False) -> None:
        self._cookies: dict[str, str] = {}
        self.blocked = blocked
        for pair in initial.split(";"):
            if pair.strip():
                self._store(pair)

    def read(self) -> str:
        pairs = (f"{name}={value}" if name else value for name, value in self._cookies.items())
        return "; ".join(pairs)

    def write(self, raw: str) -> None:
        if self.blocked:
            return
        pair, *attributes = raw.split(";")
        attrs: dict[str, str] = {}
        for attribute in attributes:
            name, _, value = attribute.strip().partition("=")
            attrs[name.strip().lower()] = value.strip()

        if "httponly" in attrs:
            return
        if _is_expired(attrs):
            name, _ = _split_pair(pair)
            self._cookies.pop(name, None)
            return
        self._store(pair)

    def clear(self) -> None:
        """Remove every cookie."""
        self._cookies.clear()

    def __repr__(self) -> str:
        return f"MemoryJar({self.read()!r})"

    def _store(self, pair: str) -> None:
        name, value = _split_pair(pair)
        self._cookies[name] = value


def _split_pair(pair: str) -> tuple[str, str]:
    name, sep, value = pair.partition("=")
    if not sep:
        return "", pair.strip()
    return name.strip(), value.strip()


def _is_expired(attrs: dict[str, str]) -> bool:
    """Return True when the attributes ask for immediate removal.

    ``Max-Age`` wins over ``Expires``. Unparseable values are ignored,
    as browsers ignore them.
    """
    max_age = attrs.get("max-age", "")
    if max_age.removeprefix("-").isdecimal():
        return int(max_age) <= 0
    if "expires" in attrs:
        try:
            expires = parsedate_to_datetime(attrs["expires"])
        except (TypeError, ValueError):
            return False
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=UTC)
        return expires <= datetime.now(UTC)
    return False

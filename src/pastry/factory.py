"""The ``pastry()`` entry point.

Groups both sides of the library behind one object::

    from pastry import pastry

    cookies = pastry()
    cookies.web().set("theme", "dark")            # ambient jar, see use_jar()
    header = cookies.server("session", token, {"httpOnly": True})
"""

from collections.abc import Mapping
from typing import Any

from pastry.options import CookieOptions
from pastry.server import format_cookie
from pastry.web.helpers import WebCookies
from pastry.web.jar import CookieJar


class Pastry:
    """Entry point holding an optional explicit jar for ``web()``."""

    __slots__ = ("jar",)

    def __init__(self, jar: CookieJar | None = None) -> None:
        self.jar = jar

    def web(self) -> WebCookies:
        """Return cookie helpers for the client-side jar."""
        return WebCookies(self.jar)

    def server(
        self,
        key: str,
        value: str,
        options: CookieOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Format a cookie to send from the server as a ``Set-Cookie`` value."""
        return format_cookie(key, value, options)


def pastry(jar: CookieJar | None = None) -> Pastry:
    """Return a ``Pastry``; without *jar* the web helpers use the ambient jar."""
    return Pastry(jar)

"""Browser-side cookie helpers.

``WebCookies`` implements set/get/delete/update/keys/values on top of a
``CookieJar``. Every query reads the jar fresh; nothing is cached, since
other code may write to the jar between calls.

Failures are reported, not raised: ``False`` from the mutating helpers,
``None`` from the queries. An unavailable jar and a failed operation
look the same to the caller.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pastry.context import jar_var
from pastry.http.cookies import encode_value, serialize_cookie
from pastry.options import CookieOptions
from pastry.web.jar import CookieJar, split_jar

logger = logging.getLogger("pastry.web")

# Deletion always overwrites with these attributes. It only reaches cookies
# set on the default path that can be overwritten without Secure.
_DELETE_OPTIONS = CookieOptions(max_age=0, secure=False, path="/")


class WebCookies:
    """Cookie helpers bound to a jar.

    With ``jar=None`` the ambient jar (``pastry.context.use_jar``) is
    looked up on every call::

        cookies = WebCookies(MemoryJar())
        cookies.set("theme", "dark", {"path": "/", "sameSite": "Lax"})
        cookies.get("theme")  # "dark"
    """

    __slots__ = ("_jar",)

    def __init__(self, jar: CookieJar | None = None) -> None:
        self._jar = jar

    @property
    def jar(self) -> CookieJar | None:
        """The jar operations run against, or ``None`` if unavailable."""
        if self._jar is not None:
            return self._jar
        return jar_var.get(None)

    def set(
        self,
        key: str,
        value: str,
        options: CookieOptions | Mapping[str, Any] | None = None,
    ) -> bool:
        """Write a cookie and confirm the jar reflects it.

        Success means ``key=encodedValue`` appears in the jar afterwards.
        Attributes are not checked; the jar never echoes them back.
        """
        jar = self.jar
        if jar is None:
            logger.debug("set %r: no cookie jar available", key)
            return False

        jar.write(serialize_cookie(key, value, options))

        if f"{key}={encode_value(value)}" in jar.read():
            return True
        logger.debug("set %r: write not reflected by the jar", key)
        return False

    def get(self, key: str) -> str | None:
        """Return the value of the first cookie named *key*, or ``None``.

        The value is returned as stored, still percent-encoded.
        """
        jar = self.jar
        if jar is None:
            return None

        prefix = f"{key}="
        for segment in jar.read().split(";"):
            segment = segment.strip()
            if segment.startswith(prefix):
                return segment.removeprefix(prefix)
        return None

    def delete(self, key: str) -> bool:
        """Expire an existing cookie.

        Returns ``False`` without touching the jar when *key* is not set.
        Otherwise returns the result of the overwriting ``set``, which
        checks for ``key=`` in the jar. A jar that drops the expired
        cookie therefore reports ``False``.
        """
        if self.get(key) is None:
            logger.debug("delete %r: no such cookie", key)
            return False
        return self.set(key, "", _DELETE_OPTIONS)

    def update(
        self,
        key: str,
        value: str,
        options: CookieOptions | Mapping[str, Any] | None = None,
    ) -> bool:
        """Overwrite an existing cookie; ``False`` if *key* is not set.

        Attributes are replaced wholesale, not merged with the old ones.
        """
        if self.get(key) is None:
            logger.debug("update %r: no such cookie", key)
            return False
        return self.set(key, value, options)

    def keys(self) -> list[str] | None:
        """Return every cookie name, or ``None`` when there are none."""
        pairs = self._pairs()
        if not pairs:
            return None
        return [key for key, _ in pairs]

    def values(self) -> list[str] | None:
        """Return every cookie value, or ``None`` when there are none.

        Aligned index for index with ``keys()``.
        """
        pairs = self._pairs()
        if not pairs:
            return None
        return [value for _, value in pairs]

    def _pairs(self) -> list[tuple[str, str]] | None:
        jar = self.jar
        if jar is None:
            return None
        snapshot = jar.read()
        if not snapshot:
            return None
        return split_jar(snapshot)

    def __repr__(self) -> str:
        return f"WebCookies(jar={self.jar!r})"

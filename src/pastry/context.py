"""Ambient cookie jar via ContextVar.

Provides:
- ``jar_var``: The jar the web helpers use when none is injected.
- ``use_jar()``: Install a jar for a block and restore the previous one.

Nothing installs a jar by default. Outside ``use_jar`` the ambient jar
is unavailable: ``get_jar()`` raises ``LookupError`` and the web helpers
report ``False``/``None``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from pastry.web.jar import CookieJar

jar_var: ContextVar[CookieJar] = ContextVar("pastry_jar")
"""The ambient cookie jar for the current context."""


def get_jar() -> CookieJar:
    """Return the ambient jar.

    Raises ``LookupError`` if no jar is installed.
    """
    return jar_var.get()


@contextmanager
def use_jar(jar: CookieJar) -> Iterator[CookieJar]:
    """Install *jar* as the ambient jar for the duration of the block.

    Usage::

        with use_jar(MemoryJar()):
            pastry().web().set("theme", "dark")
    """
    token = jar_var.set(jar)
    try:
        yield jar
    finally:
        jar_var.reset(token)

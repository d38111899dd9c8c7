"""Pastry: cookie formatting and parsing for both ends of HTTP.

Builds ``Set-Cookie`` strings on the server and reads, writes, updates
and deletes cookies through a browser-style cookie jar on the client.

Server usage::

    from pastry import pastry

    header_value = pastry().server("session", "abc 123", {"path": "/", "httpOnly": True})
    # "session=abc%20123; Path=/; HttpOnly"

Client usage::

    from pastry import MemoryJar, pastry, use_jar

    with use_jar(MemoryJar()):
        web = pastry().web()
        web.set("theme", "dark")
        web.get("theme")  # "dark"
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "CookieJar",
    "CookieOptions",
    "HttpxJar",
    "JarNotInstalledError",
    "MemoryJar",
    "Pastry",
    "PastryError",
    "SameSite",
    "WebCookies",
    "decode_value",
    "format_cookie",
    "get_jar",
    "pastry",
    "serialize_cookie",
    "use_jar",
]

# name -> module holding it
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "pastry.errors",
    "CookieJar": "pastry.web.jar",
    "CookieOptions": "pastry.options",
    "HttpxJar": "pastry.web.httpx_jar",
    "JarNotInstalledError": "pastry.errors",
    "MemoryJar": "pastry.web.jar",
    "Pastry": "pastry.factory",
    "PastryError": "pastry.errors",
    "SameSite": "pastry.options",
    "WebCookies": "pastry.web.helpers",
    "decode_value": "pastry.http.cookies",
    "format_cookie": "pastry.server",
    "get_jar": "pastry.context",
    "pastry": "pastry.factory",
    "serialize_cookie": "pastry.http.cookies",
    "use_jar": "pastry.context",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pastry`` fast and httpx optional.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)

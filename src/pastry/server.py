"""Server-side cookie formatting.

A pure function with no ambient state. The caller attaches the result
to an outgoing response as a ``Set-Cookie`` header value::

    from pastry.server import format_cookie

    value = format_cookie("session", token, {"httpOnly": True, "path": "/"})
    headers.append(("Set-Cookie", value))
"""

from collections.abc import Mapping
from typing import Any

from pastry.http.cookies import serialize_cookie
from pastry.options import CookieOptions


def format_cookie(
    key: str,
    value: str,
    options: CookieOptions | Mapping[str, Any] | None = None,
) -> str:
    """Return the ``Set-Cookie`` header value for one cookie."""
    return serialize_cookie(key, value, options)

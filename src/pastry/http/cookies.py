"""Cookie serialization.

``serialize_cookie`` is shared by the browser helpers and the server
formatter. ``encode_value`` and ``decode_value`` are the value codec.

Wire format::

    key=encodedValue; Domain=...; Expires=...; Max-Age=...; Partitioned;
    Path=...; SameSite=...; Secure; HttpOnly

Attributes always appear in that order, whatever order the options
were given in.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from email.utils import format_datetime
from typing import Any
from urllib.parse import quote, unquote

from pastry.options import CookieOptions, Expiry, coerce_options

# Characters encodeURIComponent leaves alone besides ASCII alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_value(value: str) -> str:
    """Percent-encode a cookie value as a URI component.

    ``;``, ``,``, ``=``, spaces and non-ASCII text are all escaped, so the
    result never breaks the ``key=value; Attr`` framing.
    """
    return quote(value, safe=_URI_COMPONENT_SAFE)


def decode_value(value: str) -> str:
    """Inverse of ``encode_value``."""
    return unquote(value)


def format_expires(expiry: Expiry) -> str:
    """Render *expiry* as an HTTP-date, e.g. ``Wed, 21 Oct 2015 07:28:00 GMT``.

    Naive datetimes are taken as UTC; numbers are POSIX seconds.
    Invalid values raise from ``datetime`` unchanged.
    """
    if isinstance(expiry, datetime):
        if expiry.tzinfo is None:
            moment = expiry.replace(tzinfo=UTC)
        else:
            moment = expiry.astimezone(UTC)
    else:
        moment = datetime.fromtimestamp(expiry, UTC)
    return format_datetime(moment, usegmt=True)


def serialize_cookie(
    key: str,
    value: str,
    options: CookieOptions | Mapping[str, Any] | None = None,
) -> str:
    """Serialize one cookie to a ``Set-Cookie`` compatible string.

    The value is percent-encoded; the key is written as given. Flags
    (Partitioned, Secure, HttpOnly) appear bare when true and not at all
    otherwise. ``max_age=0`` is emitted. No attribute value is validated.
    """
    cookie = f"{key}={encode_value(value)}"
    opts = coerce_options(options)
    if opts is None:
        return cookie

    parts = [cookie]
    if opts.domain:
        parts.append(f"Domain={opts.domain}")
    if opts.expiry is not None:
        parts.append(f"Expires={format_expires(opts.expiry)}")
    if opts.max_age is not None:
        parts.append(f"Max-Age={opts.max_age}")
    if opts.partitioned:
        parts.append("Partitioned")
    if opts.path:
        parts.append(f"Path={opts.path}")
    if opts.same_site:
        parts.append(f"SameSite={opts.same_site}")
    if opts.secure:
        parts.append("Secure")
    if opts.http_only:
        parts.append("HttpOnly")
    return "; ".join(parts)

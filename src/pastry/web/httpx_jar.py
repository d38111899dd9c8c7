"""Cookie jar backed by an ``httpx.Cookies`` store.

Lets the web helpers drive the cookies of an ``httpx.Client`` the way
browser code drives ``document.cookie``::

    client = httpx.Client()
    cookies = WebCookies(HttpxJar("https://example.com/", client.cookies))
    cookies.set("theme", "dark")

``httpx`` is an optional dependency (``pip install pastry[httpx]``).
"""

from typing import Any

from pastry.errors import JarNotInstalledError


def _get_httpx() -> Any:
    """Import httpx or raise a clear error."""
    try:
        import httpx

        return httpx
    except ImportError:
        msg = (
            "pastry.web.httpx_jar requires 'httpx'. "
            "Install it with: pip install pastry[httpx]"
        )
        raise JarNotInstalledError(msg) from None


class HttpxJar:
    """``CookieJar`` over ``httpx.Cookies`` for one origin.

    ``write`` applies the string as a ``Set-Cookie`` header received from
    *url*; ``read`` returns the ``Cookie`` header httpx would send to *url*.
    Domain, path, Secure and expiry rules are those of the standard
    library cookie policy httpx uses.
    """

    __slots__ = ("_httpx", "cookies", "url")

    def __init__(self, url: str, cookies: Any = None) -> None:
        self._httpx = _get_httpx()
        self.url = url
        self.cookies = cookies if cookies is not None else self._httpx.Cookies()

    def read(self) -> str:
        request = self._httpx.Request("GET", self.url)
        self.cookies.set_cookie_header(request)
        return request.headers.get("cookie", "")

    def write(self, raw: str) -> None:
        request = self._httpx.Request("GET", self.url)
        response = self._httpx.Response(200, headers=[("set-cookie", raw)], request=request)
        self.cookies.extract_cookies(response)

    def __repr__(self) -> str:
        return f"HttpxJar({self.url!r})"

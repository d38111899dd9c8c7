"""Tests for pastry.web.helpers: WebCookies over injected and ambient jars."""

import logging

import pytest

from pastry.context import use_jar
from pastry.http.cookies import decode_value
from pastry.options import CookieOptions
from pastry.web.helpers import WebCookies
from pastry.web.jar import MemoryJar


class StaticJar:
    """Jar whose read line never changes; records every write."""

    def __init__(self, line: str = "") -> None:
        self.line = line
        self.writes: list[str] = []

    def read(self) -> str:
        return self.line

    def write(self, raw: str) -> None:
        self.writes.append(raw)


@pytest.fixture
def jar() -> MemoryJar:
    return MemoryJar()


@pytest.fixture
def cookies(jar: MemoryJar) -> WebCookies:
    return WebCookies(jar)


class TestSet:
    def test_set_then_get(self, cookies: WebCookies, jar: MemoryJar) -> None:
        assert cookies.set("a", "1") is True
        assert cookies.get("a") == "1"
        assert jar.read() == "a=1"

    def test_value_encoded(self, cookies: WebCookies) -> None:
        assert cookies.set("msg", "hello world") is True
        assert cookies.get("msg") == "hello%20world"
        assert decode_value(cookies.get("msg") or "") == "hello world"

    def test_writes_attributes(self) -> None:
        jar = StaticJar()
        WebCookies(jar).set("a", "1", {"path": "/", "sameSite": "Strict", "maxAge": 60})
        assert jar.writes == ["a=1; Max-Age=60; Path=/; SameSite=Strict"]

    def test_options_instance(self, cookies: WebCookies) -> None:
        assert cookies.set("a", "1", CookieOptions(path="/", secure=True)) is True

    def test_rejected_write_reports_false(self, cookies: WebCookies, jar: MemoryJar) -> None:
        """Browsers drop HttpOnly cookies written from script."""
        assert cookies.set("a", "1", {"httpOnly": True}) is False
        assert jar.read() == ""

    def test_blocked_jar(self) -> None:
        assert WebCookies(MemoryJar(blocked=True)).set("a", "1") is False

    def test_verification_ignores_attributes(self) -> None:
        """Only ``key=value`` is checked, so a dropped Domain still passes."""
        jar = StaticJar("a=1")
        assert WebCookies(jar).set("a", "1", {"domain": "elsewhere.test"}) is True

    def test_rejected_write_logged(
        self, cookies: WebCookies, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="pastry.web"):
            cookies.set("a", "1", {"httpOnly": True})
        assert "write not reflected" in caplog.text


class TestGet:
    def test_missing_on_empty_jar(self, cookies: WebCookies) -> None:
        assert cookies.get("missing") is None

    def test_prefix_must_match_whole_key(self) -> None:
        cookies = WebCookies(MemoryJar("ab=2; a=1"))
        assert cookies.get("a") == "1"
        assert cookies.get("b") is None

    def test_first_match_wins(self) -> None:
        assert WebCookies(StaticJar("a=1; a=2")).get("a") == "1"

    def test_empty_value(self) -> None:
        assert WebCookies(StaticJar("a=")).get("a") == ""

    def test_value_with_equals(self) -> None:
        assert WebCookies(StaticJar("t=abc=; x=1")).get("t") == "abc="


class TestDelete:
    def test_missing_returns_false_without_writing(self) -> None:
        jar = StaticJar("a=1")
        assert WebCookies(jar).delete("missing") is False
        assert jar.writes == []

    def test_overwrites_with_expired_root_cookie(self) -> None:
        jar = StaticJar("a=1")
        WebCookies(jar).delete("a")
        assert jar.writes == ["a=; Max-Age=0; Path=/"]

    def test_removes_cookie(self, cookies: WebCookies, jar: MemoryJar) -> None:
        jar.write("a=1")
        jar.write("b=2")

        cookies.delete("a")

        assert cookies.get("a") is None
        assert jar.read() == "b=2"

    def test_empty_value_counts_as_existing(self) -> None:
        jar = StaticJar("a=")
        assert WebCookies(jar).delete("a") is True
        assert jar.writes == ["a=; Max-Age=0; Path=/"]

    def test_empty_value_removed_from_jar(self) -> None:
        jar = MemoryJar("a=; b=2")
        WebCookies(jar).delete("a")
        assert jar.read() == "b=2"

    def test_result_is_overwrite_verification(self) -> None:
        """delete returns what the overwriting set reports."""
        assert WebCookies(StaticJar("a=1")).delete("a") is True
        assert WebCookies(MemoryJar("a=1")).delete("a") is False


class TestUpdate:
    def test_missing_returns_false(self, cookies: WebCookies, jar: MemoryJar) -> None:
        assert cookies.update("a", "2") is False
        assert jar.read() == ""

    def test_existing(self, cookies: WebCookies) -> None:
        cookies.set("a", "1")

        assert cookies.update("a", "2") is True
        assert cookies.get("a") == "2"

    def test_empty_value_counts_as_existing(self) -> None:
        cookies = WebCookies(MemoryJar("a="))

        assert cookies.update("a", "2") is True
        assert cookies.get("a") == "2"

    def test_attributes_replaced_not_merged(self) -> None:
        jar = StaticJar("a=1")
        cookies = WebCookies(jar)
        cookies.set("a", "1", {"path": "/", "secure": True})

        cookies.update("a", "1", {"sameSite": "Lax"})

        assert jar.writes[-1] == "a=1; SameSite=Lax"


class TestKeysValues:
    def test_empty_jar_is_none(self, cookies: WebCookies) -> None:
        assert cookies.keys() is None
        assert cookies.values() is None

    def test_listing(self) -> None:
        cookies = WebCookies(MemoryJar("a=1; b=2; c="))
        assert cookies.keys() == ["a", "b", "c"]
        assert cookies.values() == ["1", "2", ""]

    def test_value_split_once(self) -> None:
        assert WebCookies(StaticJar("t=abc=def")).values() == ["abc=def"]

    def test_segments_without_equals_skipped(self) -> None:
        cookies = WebCookies(StaticJar("a=1; junk; b=2"))
        assert cookies.keys() == ["a", "b"]
        assert cookies.values() == ["1", "2"]

    def test_only_malformed_segments_is_none(self) -> None:
        cookies = WebCookies(MemoryJar("junk"))
        assert cookies.keys() is None
        assert cookies.values() is None

    def test_read_fresh_each_call(self, cookies: WebCookies, jar: MemoryJar) -> None:
        assert cookies.keys() is None
        jar.write("a=1")
        assert cookies.keys() == ["a"]


class TestAmbientJar:
    def test_no_jar_available(self) -> None:
        cookies = WebCookies()

        assert cookies.jar is None
        assert cookies.set("a", "1") is False
        assert cookies.get("a") is None
        assert cookies.delete("a") is False
        assert cookies.update("a", "1") is False
        assert cookies.keys() is None
        assert cookies.values() is None

    def test_uses_installed_jar(self) -> None:
        jar = MemoryJar()
        cookies = WebCookies()

        with use_jar(jar):
            assert cookies.set("a", "1") is True
            assert cookies.keys() == ["a"]

        assert jar.read() == "a=1"
        assert cookies.get("a") is None

    def test_explicit_jar_wins(self) -> None:
        explicit = MemoryJar()
        with use_jar(MemoryJar()) as ambient:
            WebCookies(explicit).set("a", "1")

        assert explicit.read() == "a=1"
        assert ambient.read() == ""

"""Tests for pastry.errors: exception hierarchy."""

from pastry.errors import ConfigurationError, JarNotInstalledError, PastryError


class TestHierarchy:
    def test_configuration_error_is_pastry_error(self) -> None:
        assert issubclass(ConfigurationError, PastryError)

    def test_jar_not_installed_is_pastry_error(self) -> None:
        assert issubclass(JarNotInstalledError, PastryError)

    def test_pastry_error_is_exception(self) -> None:
        assert issubclass(PastryError, Exception)

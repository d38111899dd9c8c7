"""Pastry exception hierarchy.

Expected failures (missing key, unavailable jar, rejected write) are
reported through ``False``/``None`` return values and never raise.
These types cover programming errors and missing optional installs.
"""


class PastryError(Exception):
    """Base for all pastry-specific errors."""


class ConfigurationError(PastryError):
    """Raised when cookie options cannot be built from the given input.

    Typically an unknown key in an options mapping.
    """


class JarNotInstalledError(PastryError):
    """Raised when a jar adapter's optional dependency is not installed."""

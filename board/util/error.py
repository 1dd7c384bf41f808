"""Errors raised outside the domain layer."""


class UtilError(Exception):
    """Raised by infrastructure helpers."""


class ConfigurationError(UtilError):
    """Settings are missing or unsafe for the current environment."""

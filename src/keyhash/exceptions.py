"""Library level exceptions."""

from __future__ import annotations

__all__ = [
    "KeyHashError",
    "ConfigurationError",
]


class KeyHashError(Exception):
    """Base class for keyhash specific errors."""


class ConfigurationError(KeyHashError, ValueError):
    """Raised when the service cannot be built from the supplied settings."""

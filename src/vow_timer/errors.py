"""Exception hierarchy for Vow Timer."""

from __future__ import annotations


class VowError(Exception):
    """Base class for all application errors."""


class ConfigError(VowError):
    """Raised when required configuration is missing or invalid."""


class StoreConnectionError(VowError):
    """Raised when the persistence store cannot be reached at startup."""


class StoreError(VowError):
    """Raised when a persistence operation fails during normal operation."""


class NotFoundError(StoreError):
    """Raised when a requested record does not exist."""

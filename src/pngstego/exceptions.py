"""Custom exception hierarchy for the pngstego toolkit."""
from __future__ import annotations


class PngStegoError(Exception):
    """Base class for all pngstego errors."""


class ConfigurationError(PngStegoError):
    """Raised when user-supplied configuration is invalid."""


__all__ = [
    "ConfigurationError",
    "PngStegoError",
]

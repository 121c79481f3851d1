"""
Exceptions raised by the NVP client.
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "DecodingError",
    "NvpError",
    "TransportError",
]


class NvpError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(NvpError):
    """Raised when credentials, settings or the requested method are invalid."""


class TransportError(NvpError):
    """Raised when the HTTP exchange with the NVP endpoint fails."""


class DecodingError(NvpError):
    """Raised when a response body is not a valid form-encoded payload."""

"""
geo-what3words — Custom Exception Hierarchy
============================================
Every error the client deliberately raises comes from this module so
callers can catch them at the right level of granularity.

Hierarchy::

    What3WordsError                      ← catch-all base
    ├── ConfigurationError               ← missing API key, bad endpoint
    ├── InputValidationError             ← malformed coordinate input
    └── GeocodingError                   ← remote-call problems that surface
        ├── ResponseDecodeError          ← body is not a JSON object
        └── UnsupportedOperationError    ← operation absent from API version

Transport failures (no response, non-2xx status) are *not* exceptions: the
client logs them and returns ``None``.

Usage::

    from shared.python.exceptions import ConfigurationError

    raise ConfigurationError("API key not set")
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class What3WordsError(Exception):
    """Base exception for the what3words client.

    Catch this to handle any client-specific error without caring about
    the exact subtype.

    Args:
        message: Human-readable description of the error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(What3WordsError):
    """Raised when the client is constructed with unusable settings.

    Raised eagerly from the constructor so that a misconfigured client
    never reaches the network.

    Example::

        raise ConfigurationError("API key not set")
    """


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class InputValidationError(What3WordsError):
    """Raised when a caller-supplied value cannot be turned into a request.

    Example::

        raise InputValidationError("Expected 'lat,lng', got: 'north'")
    """


# ---------------------------------------------------------------------------
# Geocoding
# ---------------------------------------------------------------------------


class GeocodingError(What3WordsError):
    """Raised when a remote geocoding call fails in a way that must surface.

    Subclass this for specific failure modes.
    """


class ResponseDecodeError(GeocodingError):
    """Raised when the API answers with a body that is not a JSON object.

    Args:
        url: The URL that produced the body.
        body: The raw response text (truncated in the message).

    Example::

        raise ResponseDecodeError(url, response.text)
    """

    _PREVIEW_CHARS = 80

    def __init__(self, url: str, body: str) -> None:
        preview = body[: self._PREVIEW_CHARS]
        super().__init__(
            f"Response from '{url}' is not a JSON object: {preview!r}"
        )
        self.url: str = url
        self.body: str = body


class UnsupportedOperationError(GeocodingError):
    """Raised when an operation does not exist in the targeted API version.

    Args:
        operation: Name of the requested operation (e.g. ``"oneword_available"``).
        api_version: Label of the API generation in use (e.g. ``"v3"``).

    Example::

        raise UnsupportedOperationError("oneword_available", "v3")
    """

    def __init__(self, operation: str, api_version: str) -> None:
        super().__init__(
            f"Operation '{operation}' is not available in API {api_version}."
        )
        self.operation: str = operation
        self.api_version: str = api_version

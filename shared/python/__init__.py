"""
geo-what3words — Shared Python Package
=======================================
Re-exports the exception hierarchy and validator utilities so the client
modules can import from a single location::

    from shared.python import Validators
    from shared.python.exceptions import ConfigurationError
"""

from shared.python.exceptions import (
    ConfigurationError,
    GeocodingError,
    InputValidationError,
    ResponseDecodeError,
    UnsupportedOperationError,
    What3WordsError,
)
from shared.python.validators import Validators

__all__ = [
    "Validators",
    "What3WordsError",
    "ConfigurationError",
    "InputValidationError",
    "GeocodingError",
    "ResponseDecodeError",
    "UnsupportedOperationError",
]

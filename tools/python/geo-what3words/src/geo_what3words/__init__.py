"""
geo-what3words
===============
Turn WGS84 coordinates into three-word addresses or OneWords and vice
versa using the what3words HTTP API.

Public API::

    from geo_what3words import What3WordsClient, WordsFormat, valid_words_format
"""

__version__ = "1.0.0"

from geo_what3words.client import What3WordsClient  # noqa: E402
from geo_what3words.config import ClientConfig  # noqa: E402
from geo_what3words.formats import WordsFormat, valid_words, valid_words_format  # noqa: E402
from geo_what3words.log_sink import (  # noqa: E402
    CallbackSink,
    ConsoleSink,
    DisabledSink,
    LogSink,
)
from geo_what3words.models import (  # noqa: E402
    AddressResult,
    ApiError,
    ApiVersion,
    BoundingSquare,
    Coordinate,
    LanguageCatalogue,
    LanguageEntry,
    OneWordAvailability,
    V1AddressResult,
    V2AddressResult,
    V3AddressResult,
)

__all__ = [
    "What3WordsClient",
    "ClientConfig",
    "WordsFormat",
    "valid_words",
    "valid_words_format",
    "LogSink",
    "DisabledSink",
    "ConsoleSink",
    "CallbackSink",
    "ApiVersion",
    "ApiError",
    "Coordinate",
    "BoundingSquare",
    "AddressResult",
    "V1AddressResult",
    "V2AddressResult",
    "V3AddressResult",
    "LanguageEntry",
    "LanguageCatalogue",
    "OneWordAvailability",
]

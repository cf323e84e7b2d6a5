"""
geo-what3words — API Generation Strategies
===========================================
The what3words service has gone through three request/response contracts.
Each :class:`ApiGeneration` subclass knows, for one of them, the default
endpoint, the path of every operation, the name of every request field and
how to turn a decoded JSON document into a result dataclass.

Architecture:
    ``ApiGeneration`` is an abstract strategy; :class:`What3WordsClient`
    delegates every version-specific decision to it, so adding a new
    generation never touches the client.

Classes:
    ApiGeneration   Abstract base.
    V1Generation    ``http://api.what3words.com/`` — ``w3w`` / ``position``.
    V2Generation    ``.../v2/`` — ``forward`` / ``reverse``.
    V3Generation    ``.../v3/`` — ``convert-to-coordinates`` / ``convert-to-3wa``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from geo_what3words.models import (
    AddressResult,
    ApiError,
    ApiVersion,
    LanguageCatalogue,
    LanguageEntry,
    OneWordAvailability,
    V1AddressResult,
    V2AddressResult,
    V3AddressResult,
)
from shared.python.exceptions import UnsupportedOperationError

# Operation names used as keys in ``ApiGeneration.paths``.
WORDS_TO_POSITION = "words_to_position"
POSITION_TO_WORDS = "position_to_words"
GET_LANGUAGES = "get_languages"
ONEWORD_AVAILABLE = "oneword_available"


class ApiGeneration(ABC):
    """Abstract strategy for one what3words API contract.

    Subclasses declare the class attributes and implement
    :meth:`parse_address` and :meth:`_parse_language_error`.
    """

    version: ClassVar[ApiVersion]
    default_endpoint: ClassVar[str]
    paths: ClassVar[dict[str, str]]
    words_field: ClassVar[str]
    position_field: ClassVar[str]
    language_field: ClassVar[str] = "lang"

    def path_for(self, operation: str) -> str:
        """Return the URL path of *operation*.

        Raises:
            UnsupportedOperationError: If this generation has no such operation.
        """
        try:
            return self.paths[operation]
        except KeyError:
            raise UnsupportedOperationError(operation, self.version.value) from None

    def supports(self, operation: str) -> bool:
        return operation in self.paths

    # ------------------------------------------------------------------
    # Request fields
    # ------------------------------------------------------------------

    def words_params(self, words: str, language: str | None) -> dict[str, Any]:
        return {self.words_field: words, self.language_field: language}

    def position_params(self, position: str, language: str | None) -> dict[str, Any]:
        return {self.position_field: position, self.language_field: language}

    def oneword_params(self, word: str, language: str | None) -> dict[str, Any]:
        return {"word": word, self.language_field: language}

    # ------------------------------------------------------------------
    # Response parsing
    # ------------------------------------------------------------------

    @abstractmethod
    def parse_address(self, data: dict[str, Any]) -> AddressResult:
        """Turn a forward/reverse response into this generation's result class."""

    @abstractmethod
    def _parse_language_error(self, data: dict[str, Any]) -> ApiError | None:
        """Extract the API error payload from a language listing, if any."""

    def parse_languages(self, data: dict[str, Any]) -> LanguageCatalogue:
        entries = tuple(
            LanguageEntry.from_json(item) for item in data.get("languages") or []
        )
        return LanguageCatalogue(
            api_version=self.version,
            languages=entries,
            error=self._parse_language_error(data),
            raw=data,
        )

    def parse_oneword_availability(self, data: dict[str, Any]) -> OneWordAvailability:
        return OneWordAvailability.from_json(data)


class V1Generation(ApiGeneration):
    """The original API, the only one with OneWords."""

    version = ApiVersion.V1
    default_endpoint = "http://api.what3words.com/"
    paths = {
        WORDS_TO_POSITION: "w3w",
        POSITION_TO_WORDS: "position",
        GET_LANGUAGES: "get-languages",
        ONEWORD_AVAILABLE: "oneword-available",
    }
    words_field = "string"
    position_field = "position"

    def parse_address(self, data: dict[str, Any]) -> V1AddressResult:
        return V1AddressResult.from_json(data)

    def _parse_language_error(self, data: dict[str, Any]) -> ApiError | None:
        return ApiError.from_v1(data)


class V2Generation(ApiGeneration):
    version = ApiVersion.V2
    default_endpoint = "https://api.what3words.com/v2/"
    paths = {
        WORDS_TO_POSITION: "forward",
        POSITION_TO_WORDS: "reverse",
        GET_LANGUAGES: "languages",
    }
    words_field = "words"
    position_field = "coordinates"

    def parse_address(self, data: dict[str, Any]) -> V2AddressResult:
        return V2AddressResult.from_json(data)

    def _parse_language_error(self, data: dict[str, Any]) -> ApiError | None:
        return ApiError.from_v2(data)


class V3Generation(ApiGeneration):
    version = ApiVersion.V3
    default_endpoint = "https://api.what3words.com/v3/"
    paths = {
        WORDS_TO_POSITION: "convert-to-coordinates",
        POSITION_TO_WORDS: "convert-to-3wa",
        GET_LANGUAGES: "available-languages",
    }
    words_field = "words"
    position_field = "coordinates"

    def parse_address(self, data: dict[str, Any]) -> V3AddressResult:
        return V3AddressResult.from_json(data)

    def _parse_language_error(self, data: dict[str, Any]) -> ApiError | None:
        return ApiError.from_v3(data)


_GENERATIONS: dict[ApiVersion, type[ApiGeneration]] = {
    ApiVersion.V1: V1Generation,
    ApiVersion.V2: V2Generation,
    ApiVersion.V3: V3Generation,
}


def generation_for(version: ApiVersion) -> ApiGeneration:
    """Return a strategy instance for *version*."""
    return _GENERATIONS[ApiVersion(version)]()

"""
geo-what3words — Result Models
===============================
Immutable dataclasses for everything the client returns.

Each what3words API generation answers with a differently shaped JSON
document, so every generation gets its own address-result class.  They
share the normalised base fields (:attr:`AddressResult.words`,
:attr:`AddressResult.coordinate`, :attr:`AddressResult.language`) so the
convenience wrappers never have to guess which keys exist.

Classes:
    ApiVersion          The three supported API generations.
    Coordinate          WGS84 ``(lat, lng)`` pair.
    BoundingSquare      South-west / north-east corners of a grid square.
    ApiError            API-level error payload (bad key, bad words, ...).
    AddressResult       Base for the per-generation address results.
    V1AddressResult     Flat ``position`` / ``words`` list shape.
    V2AddressResult     ``geometry`` / ``bounds`` shape.
    V3AddressResult     ``coordinates`` / ``square`` / ``nearestPlace`` shape.
    LanguageEntry       One supported language.
    LanguageCatalogue   Result of a language listing.
    OneWordAvailability Result of a OneWord availability check (V1 only).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from shared.python.exceptions import InputValidationError


class ApiVersion(str, Enum):
    """what3words API generation targeted by a client."""

    V1 = "v1"
    V2 = "v2"
    V3 = "v3"


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 position in decimal degrees.

    Attributes:
        lat: Latitude, positive north.
        lng: Longitude, positive east.

    ``str(coordinate)`` gives the ``"lat,lng"`` form the API expects, always
    in plain decimal notation (``0.00005``, never ``5e-05``).
    """

    lat: float
    lng: float

    def __str__(self) -> str:
        return f"{_decimal_degrees(self.lat)},{_decimal_degrees(self.lng)}"

    def to_pair(self) -> tuple[float, float]:
        """Return ``(lat, lng)``."""
        return (self.lat, self.lng)

    @classmethod
    def from_string(cls, value: str) -> "Coordinate":
        """Parse a ``"lat,lng"`` string.

        Raises:
            InputValidationError: If *value* is not two comma-separated numbers.
        """
        parts = [p.strip() for p in value.split(",")]
        if len(parts) != 2:
            raise InputValidationError(f"Expected 'lat,lng', got: {value!r}")
        try:
            return cls(lat=float(parts[0]), lng=float(parts[1]))
        except ValueError as exc:
            raise InputValidationError(f"Expected 'lat,lng', got: {value!r}") from exc

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Coordinate":
        """Build from a ``{"lat": ..., "lng": ...}`` mapping."""
        return cls(lat=float(data["lat"]), lng=float(data["lng"]))

    @classmethod
    def from_pair(cls, pair: Sequence[Any]) -> "Coordinate":
        """Build from a two-element ``(lat, lng)`` sequence."""
        if len(pair) != 2:
            raise InputValidationError(f"Expected a (lat, lng) pair, got: {pair!r}")
        return cls(lat=float(pair[0]), lng=float(pair[1]))

    @classmethod
    def from_json(cls, value: Any) -> "Coordinate | None":
        """Lenient parse of a response fragment.

        Accepts a ``lat``/``lng`` mapping or a two-element sequence and
        returns ``None`` for anything partial or non-numeric.
        """
        try:
            if isinstance(value, Mapping):
                return cls.from_mapping(value)
            if isinstance(value, Sequence) and not isinstance(value, str):
                return cls.from_pair(value)
        except (KeyError, TypeError, ValueError, InputValidationError):
            return None
        return None


def _decimal_degrees(value: float) -> str:
    # shortest repr digits, without an exponent
    return format(Decimal(repr(float(value))), "f")


def position_to_string(position: Any) -> str:
    """Convert any accepted position form to the ``"lat,lng"`` request value.

    Strings are passed through untouched so that the API, not the client,
    decides whether they are valid.  :class:`Coordinate` objects, mappings
    with ``lat``/``lng`` keys and two-element sequences are formatted.
    """
    if isinstance(position, str):
        return position
    if isinstance(position, Coordinate):
        return str(position)
    try:
        if isinstance(position, Mapping):
            return str(Coordinate.from_mapping(position))
        return str(Coordinate.from_pair(position))
    except (KeyError, TypeError, ValueError) as exc:
        raise InputValidationError(
            f"Cannot use {position!r} as a position; expected 'lat,lng', "
            "a (lat, lng) pair or a mapping with 'lat' and 'lng'."
        ) from exc


@dataclass(frozen=True)
class BoundingSquare:
    """The grid square a three-word address covers."""

    southwest: Coordinate
    northeast: Coordinate

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BoundingSquare":
        return cls(
            southwest=Coordinate.from_mapping(data["southwest"]),
            northeast=Coordinate.from_mapping(data["northeast"]),
        )

    @classmethod
    def from_json(cls, value: Any) -> "BoundingSquare | None":
        """Lenient parse; ``None`` unless both corners are usable."""
        if not isinstance(value, Mapping):
            return None
        southwest = Coordinate.from_json(value.get("southwest"))
        northeast = Coordinate.from_json(value.get("northeast"))
        if southwest is None or northeast is None:
            return None
        return cls(southwest=southwest, northeast=northeast)

    def contains(self, coordinate: Coordinate) -> bool:
        """``True`` when *coordinate* lies inside (or on the edge of) the square."""
        return (
            self.southwest.lat <= coordinate.lat <= self.northeast.lat
            and self.southwest.lng <= coordinate.lng <= self.northeast.lng
        )


# ---------------------------------------------------------------------------
# Errors reported by the API itself
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ApiError:
    """Error payload returned with an otherwise successful HTTP response.

    Attributes:
        code: API error code (``"11"`` in V1, ``"BadWords"`` in V3, ...).
        message: Human-readable explanation from the API.
    """

    code: str
    message: str

    @classmethod
    def from_v1(cls, data: Mapping[str, Any]) -> "ApiError | None":
        if "error" not in data:
            return None
        return cls(code=str(data["error"]), message=str(data.get("message", "")))

    @classmethod
    def from_v2(cls, data: Mapping[str, Any]) -> "ApiError | None":
        status = data.get("status")
        if not isinstance(status, Mapping) or "code" not in status:
            return None
        return cls(code=str(status["code"]), message=str(status.get("message", "")))

    @classmethod
    def from_v3(cls, data: Mapping[str, Any]) -> "ApiError | None":
        error = data.get("error")
        if not isinstance(error, Mapping):
            return None
        return cls(code=str(error.get("code", "")), message=str(error.get("message", "")))


# ---------------------------------------------------------------------------
# Address results, one class per API generation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddressResult:
    """Fields common to every generation's address result.

    Attributes:
        api_version: Generation that produced this result.
        words: Dotted three-word address, or ``*oneword`` in V1.
        coordinate: Resolved position.
        language: Language code the API answered in.
        error: Set when the API reported an error instead of a result.
        raw: The decoded JSON document, untouched.
    """

    api_version: ApiVersion
    words: str | None = None
    coordinate: Coordinate | None = None
    language: str | None = None
    error: ApiError | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        """``True`` when the API returned a result rather than an error."""
        return self.error is None

    @property
    def position(self) -> str | None:
        """:attr:`coordinate` as ``"lat,lng"``, or ``None`` when absent."""
        return str(self.coordinate) if self.coordinate is not None else None


@dataclass(frozen=True)
class V1AddressResult(AddressResult):
    """Result of the original flat API.

    Example payload::

        {"type": "3 words", "words": ["prom", "cape", "pump"],
         "position": ["51.484463", "-0.195405"], "language": "en"}
    """

    type: str | None = None

    @property
    def position(self) -> str | None:
        """The two position strings exactly as the API sent them."""
        sent = self.raw.get("position")
        if self.coordinate is None or not isinstance(sent, list):
            return super().position
        return ",".join(str(part).strip() for part in sent)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "V1AddressResult":
        words = data.get("words")
        if isinstance(words, list):
            words = ".".join(str(w) for w in words)
        return cls(
            api_version=ApiVersion.V1,
            words=words or None,
            coordinate=Coordinate.from_json(data.get("position")),
            language=data.get("language"),
            error=ApiError.from_v1(data),
            raw=data,
            type=data.get("type"),
        )


@dataclass(frozen=True)
class V2AddressResult(AddressResult):
    """Result of the second-generation API.

    Example payload::

        {"words": "prom.cape.pump", "language": "en",
         "geometry": {"lat": 51.484463, "lng": -0.195405},
         "bounds": {"southwest": {...}, "northeast": {...}},
         "map": "http://w3w.co/prom.cape.pump",
         "status": {"status": 200, "reason": "OK"}}
    """

    bounds: BoundingSquare | None = None
    map_url: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "V2AddressResult":
        return cls(
            api_version=ApiVersion.V2,
            words=data.get("words") or None,
            coordinate=Coordinate.from_json(data.get("geometry")),
            language=data.get("language"),
            error=ApiError.from_v2(data),
            raw=data,
            bounds=BoundingSquare.from_json(data.get("bounds")),
            map_url=data.get("map"),
        )


@dataclass(frozen=True)
class V3AddressResult(AddressResult):
    """Result of the current API generation.

    Example payload::

        {"country": "GB", "nearestPlace": "Fulham, London",
         "words": "prom.cape.pump", "language": "en",
         "coordinates": {"lat": 51.484463, "lng": -0.195405},
         "square": {"southwest": {...}, "northeast": {...}},
         "map": "https://w3w.co/prom.cape.pump"}
    """

    square: BoundingSquare | None = None
    nearest_place: str | None = None
    country: str | None = None
    map_url: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "V3AddressResult":
        return cls(
            api_version=ApiVersion.V3,
            words=data.get("words") or None,
            coordinate=Coordinate.from_json(data.get("coordinates")),
            language=data.get("language"),
            error=ApiError.from_v3(data),
            raw=data,
            square=BoundingSquare.from_json(data.get("square")),
            nearest_place=data.get("nearestPlace"),
            country=data.get("country"),
            map_url=data.get("map"),
        )


# ---------------------------------------------------------------------------
# Auxiliary results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LanguageEntry:
    """One language the API can produce addresses in.

    Attributes:
        code: ISO 639-1 code, e.g. ``"de"``.
        native_name: Name in the language itself, e.g. ``"Deutsch"``.
        name: English name, e.g. ``"German"``.  V1 does not supply it.
    """

    code: str
    native_name: str | None = None
    name: str | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "LanguageEntry":
        # V1 "name_display", V2 "native_name", V3 "nativeName"
        native = data.get("nativeName") or data.get("native_name") or data.get("name_display")
        return cls(code=str(data["code"]), native_name=native, name=data.get("name"))


@dataclass(frozen=True)
class LanguageCatalogue:
    """Supported-language listing."""

    api_version: ApiVersion
    languages: tuple[LanguageEntry, ...] = ()
    error: ApiError | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def codes(self) -> list[str]:
        """Language codes in API order."""
        return [lang.code for lang in self.languages]

    def get(self, code: str) -> LanguageEntry | None:
        """Return the entry for *code*, or ``None`` if unsupported."""
        for lang in self.languages:
            if lang.code == code:
                return lang
        return None


@dataclass(frozen=True)
class OneWordAvailability:
    """Answer to "is this OneWord still unclaimed?".

    Attributes:
        available: ``True`` if the OneWord can still be registered.
        message: The API's explanation, e.g. ``"Your OneWord is available"``.
    """

    available: bool
    message: str
    error: ApiError | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "OneWordAvailability":
        return cls(
            available=bool(int(data.get("available") or 0)),
            message=str(data.get("message", "")),
            error=ApiError.from_v1(data),
            raw=data,
        )

"""
geo-what3words — Core Module
=============================
Turn WGS84 coordinates into three-word addresses (or OneWords) and back by
calling the what3words HTTP API.

what3words divides the world into 3 m × 3 m squares and gives every square
an address made of three dictionary words.  This module does not compute
those addresses; it builds requests, sends them, and parses the answers.

Classes:
    What3WordsClient    The API client.

Usage::

    from geo_what3words import What3WordsClient

    w3w = What3WordsClient(api_key="your-api-key")

    w3w.pos2words("51.484463,-0.195405")          # 'prom.cape.pump'
    w3w.pos2words("51.484463,-0.195405", "ru")    # 'три.пример.слова'
    w3w.words2pos("prom.cape.pump")               # '51.484463,-0.195405'

    w3w.position_to_words((51.484463, -0.195405)) # V3AddressResult(...)
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from typing import Any
from urllib.parse import urlparse

import requests

from geo_what3words import __version__
from geo_what3words.config import ClientConfig
from geo_what3words.formats import WordsFormat, valid_words_format
from geo_what3words.generations import (
    GET_LANGUAGES,
    ONEWORD_AVAILABLE,
    POSITION_TO_WORDS,
    WORDS_TO_POSITION,
    generation_for,
)
from geo_what3words.log_sink import LogSink
from geo_what3words.models import (
    AddressResult,
    ApiVersion,
    Coordinate,
    LanguageCatalogue,
    OneWordAvailability,
    position_to_string,
)
from shared.python.exceptions import ResponseDecodeError

logger = logging.getLogger("geo_what3words.client")

USER_AGENT = f"Python geo-what3words {__version__}"


class What3WordsClient:
    """Client for one what3words API generation.

    The API key is required.  Everything else has a default::

        w3w = What3WordsClient(api_key="your-api-key")
        w3w = What3WordsClient(api_key="your-api-key", language="ru")

    For debugging, attach a log sink::

        w3w = What3WordsClient(api_key="...", log_sink=ConsoleSink())
        w3w = What3WordsClient(api_key="...", log_sink=CallbackSink(my_logger.info))

    Args:
        api_key: what3words API key.
        endpoint: Base URL.  Defaults to the public root of *api_version*.
        language: Default language code, used when a call does not pass one.
        log_sink: A :class:`~geo_what3words.log_sink.LogSink`; ``None``
                  disables per-instance debug output.
        api_version: Which API generation to speak.  Defaults to V3.
        session: A :class:`requests.Session` to send requests with.  Mainly
                 for tests, proxies or retries; the client does not close
                 a session it did not create.
        timeout: HTTP timeout in seconds, or ``None`` for no timeout.
        config: A ready :class:`ClientConfig`.  When given, the individual
                settings above are ignored; see :meth:`from_config`.

    Raises:
        ConfigurationError: If *api_key* is missing or blank, or *endpoint*
            is not an absolute http(s) URL.  Raised before any network access.
    """

    def __init__(
        self,
        api_key: str | None,
        endpoint: str | None = None,
        language: str | None = None,
        log_sink: LogSink | None = None,
        api_version: ApiVersion = ApiVersion.V3,
        session: requests.Session | None = None,
        timeout: float | None = None,
        *,
        config: ClientConfig | None = None,
    ) -> None:
        if config is None:
            config = ClientConfig(
                api_key=api_key,  # type: ignore[arg-type]
                endpoint=endpoint,
                language=language,
                log_sink=log_sink,  # type: ignore[arg-type]
                api_version=api_version,
                timeout=timeout,
            )
        self.config = config
        self.generation = generation_for(config.api_version)
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT

    @classmethod
    def from_config(
        cls, config: ClientConfig, session: requests.Session | None = None
    ) -> "What3WordsClient":
        """Build a client from an existing :class:`ClientConfig`."""
        return cls(config.api_key, session=session, config=config)

    # ------------------------------------------------------------------
    # Context manager / resource handling
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "What3WordsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Read-only views of the configuration
    # ------------------------------------------------------------------

    @property
    def endpoint(self) -> str:
        return self.config.endpoint  # type: ignore[return-value]

    @property
    def language(self) -> str | None:
        return self.config.language

    @property
    def api_version(self) -> ApiVersion:
        return self.config.api_version

    # ------------------------------------------------------------------
    # Reachability
    # ------------------------------------------------------------------

    def ping(self, timeout: int = 5) -> bool:
        """Check whether the API host answers an ICMP ping.

        Uses the system ``ping`` executable.  Useful when debugging a
        connection, but far too slow to run before every conversion.

        Args:
            timeout: Seconds to wait for the single echo reply.

        Returns:
            ``True`` if the host replied; ``False`` otherwise, including when
            no ``ping`` executable is installed.
        """
        # http://example.com/some/path => example.com, also for IP addresses
        host = urlparse(self.endpoint).hostname or ""
        self._log(f"pinging {host}...")

        available = _ping_host(host, timeout)
        self._log("available" if available else "unavailable")
        return available

    # ------------------------------------------------------------------
    # Local validation
    # ------------------------------------------------------------------

    @staticmethod
    def valid_words(words: str | None) -> WordsFormat:
        """Classify *words* without calling the API.

        Returns :attr:`WordsFormat.THREE_WORDS` (``3``) for
        ``"one.two.three"``, :attr:`WordsFormat.ONE_WORD` (``1``) for
        ``"*one-two12"`` and :attr:`WordsFormat.INVALID` (``0``) otherwise.
        """
        return valid_words_format(words)

    valid_words_format = valid_words

    # ------------------------------------------------------------------
    # Convenience wrappers
    # ------------------------------------------------------------------

    def words2pos(self, words: str, language: str | None = None) -> str | None:
        """Tiny wrapper around :meth:`words_to_position`.

        ``w3w.words2pos("prom.cape.pump")`` returns ``"51.484463,-0.195405"``.

        Returns:
            ``"lat,lng"``, or ``None`` if the lookup failed for any reason.
            V1 position strings are returned exactly as the API sent them.
        """
        result = self.words_to_position(words, language)
        if result is None or not result.ok:
            return None
        return result.position

    def words2coordinate(self, words: str, language: str | None = None) -> Coordinate | None:
        """Like :meth:`words2pos` but returns a :class:`Coordinate`."""
        result = self.words_to_position(words, language)
        if result is None or not result.ok:
            return None
        return result.coordinate

    def pos2words(self, position: Any, language: str | None = None) -> str | None:
        """Tiny wrapper around :meth:`position_to_words`.

        ``w3w.pos2words("51.484463,-0.195405", "ru")`` returns
        ``"три.пример.слова"``.

        Returns:
            The dotted address, or ``None`` if the lookup failed for any reason.
        """
        result = self.position_to_words(position, language)
        if result is None or not result.ok:
            return None
        return result.words

    # ------------------------------------------------------------------
    # Verbose API calls
    # ------------------------------------------------------------------

    def words_to_position(
        self, words: str, language: str | None = None
    ) -> AddressResult | None:
        """Resolve a three-word address (or V1 OneWord) to its position.

        Args:
            words: e.g. ``"prom.cape.pump"`` or ``"*libertytech"``.
            language: Language code; falls back to the client default.

        Returns:
            The generation's address result, or ``None`` on transport failure.
            API-level errors are reported in ``result.error``.

        Raises:
            ResponseDecodeError: If the API answered with something other than
                a JSON object.
        """
        params = self.generation.words_params(words, language or self.language)
        data = self._execute_query(WORDS_TO_POSITION, params)
        if data is None:
            return None
        return self.generation.parse_address(data)

    def position_to_words(
        self, position: Any, language: str | None = None
    ) -> AddressResult | None:
        """Resolve a position to the three-word address of its square.

        Args:
            position: ``"lat,lng"`` string, :class:`Coordinate`,
                      ``(lat, lng)`` pair or ``{"lat": .., "lng": ..}``.
            language: Language code; falls back to the client default.

        Returns:
            The generation's address result, or ``None`` on transport failure.

        Raises:
            InputValidationError: If *position* is not one of the accepted forms.
            ResponseDecodeError: If the body is not a JSON object.
        """
        params = self.generation.position_params(
            position_to_string(position), language or self.language
        )
        data = self._execute_query(POSITION_TO_WORDS, params)
        if data is None:
            return None
        return self.generation.parse_address(data)

    def get_languages(self) -> LanguageCatalogue | None:
        """List the languages the API can return addresses in."""
        data = self._execute_query(GET_LANGUAGES)
        if data is None:
            return None
        return self.generation.parse_languages(data)

    def oneword_available(
        self, word: str, language: str | None = None
    ) -> OneWordAvailability | None:
        """Check whether a OneWord is still available (V1 only).

        Raises:
            UnsupportedOperationError: On V2 and V3, which have no OneWords.
        """
        params = self.generation.oneword_params(word, language or self.language)
        data = self._execute_query(ONEWORD_AVAILABLE, params)
        if data is None:
            return None
        return self.generation.parse_oneword_availability(data)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _execute_query(
        self, operation: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """POST *params* to the URL of *operation* and decode the JSON answer.

        Empty parameters (notably an unset language) are not sent.  Transport
        failures are logged and turned into ``None``.
        """
        url = self.endpoint + self.generation.path_for(operation)
        fields: dict[str, Any] = {"key": self.config.api_key}
        fields.update({k: v for k, v in (params or {}).items() if v})

        self._log(f"POST {url} fields: {fields}")
        logger.debug("POST %s (%s)", url, ", ".join(sorted(k for k in fields if k != "key")))

        try:
            response = self.session.post(url, data=fields, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("got no response from %s: %s", url, exc)
            self._log(f"got no response from {url}")
            return None

        body = response.text
        self._log(body)

        try:
            data = response.json()
        except ValueError as exc:
            raise ResponseDecodeError(url, body) from exc
        if not isinstance(data, dict):
            raise ResponseDecodeError(url, body)
        return data

    def _log(self, message: str) -> None:
        self.config.log_sink.log(message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"endpoint={self.endpoint!r}, "
            f"api_version={self.api_version.value!r}, "
            f"language={self.language!r})"
        )


def _ping_command(executable: str, host: str, timeout: int) -> list[str]:
    """Build a single-echo ``ping`` command line for the running platform.

    The reply-wait flag differs: Windows takes ``-n``/``-w`` in
    milliseconds, macOS and the BSDs take ``-W`` in milliseconds, Linux
    iputils takes ``-W`` in seconds.
    """
    if sys.platform.startswith("win"):
        return [executable, "-n", "1", "-w", str(timeout * 1000), host]
    if sys.platform == "darwin" or "bsd" in sys.platform:
        return [executable, "-c", "1", "-W", str(timeout * 1000), host]
    return [executable, "-c", "1", "-W", str(timeout), host]


def _ping_host(host: str, timeout: int) -> bool:
    """Send one ICMP echo to *host* with the system ``ping`` executable."""
    executable = shutil.which("ping")
    if not host or executable is None:
        logger.debug("Cannot ping %r: no host or no ping executable.", host)
        return False
    try:
        completed = subprocess.run(
            _ping_command(executable, host, timeout),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=timeout + 5,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.debug("ping %s failed: %s", host, exc)
        return False
    return completed.returncode == 0

"""
geo-what3words — Client Configuration
======================================
:class:`ClientConfig` bundles everything a :class:`~geo_what3words.client.What3WordsClient`
needs.  It is frozen: a client's settings never change after construction,
and nothing is read from process-wide state except in :meth:`ClientConfig.from_env`.

Environment variables read by :meth:`ClientConfig.from_env`:

    ``W3W_API_KEY``       required
    ``W3W_API_ENDPOINT``  optional, defaults to the generation's public root
    ``W3W_LANGUAGE``      optional default language code
    ``W3W_API_VERSION``   optional, one of ``v1``, ``v2``, ``v3`` (default)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from geo_what3words.generations import generation_for
from geo_what3words.log_sink import DisabledSink, LogSink
from geo_what3words.models import ApiVersion
from shared.python.exceptions import ConfigurationError
from shared.python.validators import Validators


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings for one client instance.

    Attributes:
        api_key: what3words API key.  Required; never logged by the module
                 logger but *is* included in log-sink request lines.
        endpoint: Base URL ending in ``/``.  ``None`` selects the public
                  root of *api_version*.
        language: Default language code for conversions, or ``None`` to let
                  the API decide.
        log_sink: Destination for debug lines.
        api_version: API generation to target.
        timeout: Seconds before an HTTP request is abandoned, or ``None`` for
                 the transport default (no timeout).
    """

    api_key: str
    endpoint: str | None = None
    language: str | None = None
    log_sink: LogSink = field(default_factory=DisabledSink, compare=False)
    api_version: ApiVersion = ApiVersion.V3
    timeout: float | None = None

    def __post_init__(self) -> None:
        Validators.assert_api_key_present(self.api_key)
        object.__setattr__(self, "api_version", _coerce_version(self.api_version))

        endpoint = self.endpoint or generation_for(self.api_version).default_endpoint
        Validators.assert_endpoint_valid(endpoint)
        if not endpoint.endswith("/"):
            endpoint += "/"
        object.__setattr__(self, "endpoint", endpoint)

        if self.log_sink is None:
            object.__setattr__(self, "log_sink", DisabledSink())

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        log_sink: LogSink | None = None,
        timeout: float | None = None,
    ) -> "ClientConfig":
        """Build a config from ``W3W_*`` environment variables.

        Args:
            environ: Mapping to read instead of :data:`os.environ`.
            log_sink: Sink to attach; environment variables cannot express one.
            timeout: HTTP timeout in seconds.

        Raises:
            ConfigurationError: If ``W3W_API_KEY`` is unset or
                ``W3W_API_VERSION`` names an unknown generation.
        """
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get("W3W_API_KEY", ""),
            endpoint=env.get("W3W_API_ENDPOINT") or None,
            language=env.get("W3W_LANGUAGE") or None,
            log_sink=log_sink or DisabledSink(),
            api_version=_coerce_version(env.get("W3W_API_VERSION") or ApiVersion.V3),
            timeout=timeout,
        )


def _coerce_version(value: ApiVersion | str) -> ApiVersion:
    try:
        return ApiVersion(value.lower() if isinstance(value, str) else value)
    except ValueError as exc:
        known = ", ".join(v.value for v in ApiVersion)
        raise ConfigurationError(
            f"Unknown API version {value!r}. Use one of: {known}"
        ) from exc

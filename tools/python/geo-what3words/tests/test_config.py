"""
Tests — Client Configuration
=============================
:class:`~geo_what3words.config.ClientConfig` validation, defaults and
environment loading, plus building a client from a config.
"""

from __future__ import annotations

import dataclasses

import pytest
import requests

from geo_what3words.client import What3WordsClient
from geo_what3words.config import ClientConfig
from geo_what3words.log_sink import CallbackSink, DisabledSink
from geo_what3words.models import ApiVersion
from shared.python.exceptions import ConfigurationError


class TestClientConfig:
    def test_defaults(self) -> None:
        cfg = ClientConfig(api_key="k")
        assert cfg.endpoint == "https://api.what3words.com/v3/"
        assert cfg.api_version is ApiVersion.V3
        assert cfg.language is None
        assert cfg.timeout is None
        assert isinstance(cfg.log_sink, DisabledSink)

    def test_none_log_sink_becomes_disabled(self) -> None:
        cfg = ClientConfig(api_key="k", log_sink=None)  # type: ignore[arg-type]
        assert isinstance(cfg.log_sink, DisabledSink)

    def test_is_frozen(self) -> None:
        cfg = ClientConfig(api_key="k")
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.language = "de"  # type: ignore[misc]

    def test_version_label_is_coerced(self) -> None:
        cfg = ClientConfig(api_key="k", api_version="V1")  # type: ignore[arg-type]
        assert cfg.api_version is ApiVersion.V1
        assert cfg.endpoint == "http://api.what3words.com/"

    @pytest.mark.parametrize("key", ["", "  ", None])
    def test_blank_key_rejected(self, key: str | None) -> None:
        with pytest.raises(ConfigurationError):
            ClientConfig(api_key=key)  # type: ignore[arg-type]


class TestFromEnv:
    def test_reads_all_variables(self) -> None:
        cfg = ClientConfig.from_env(
            {
                "W3W_API_KEY": "env-key",
                "W3W_API_ENDPOINT": "http://localhost:9000/w3w",
                "W3W_LANGUAGE": "de",
                "W3W_API_VERSION": "v2",
            },
            timeout=3.0,
        )
        assert cfg.api_key == "env-key"
        assert cfg.endpoint == "http://localhost:9000/w3w/"
        assert cfg.language == "de"
        assert cfg.api_version is ApiVersion.V2
        assert cfg.timeout == 3.0

    def test_missing_key_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            ClientConfig.from_env({})

    def test_unknown_version_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            ClientConfig.from_env({"W3W_API_KEY": "k", "W3W_API_VERSION": "v4"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("W3W_API_KEY", "process-key")
        monkeypatch.delenv("W3W_API_ENDPOINT", raising=False)
        monkeypatch.delenv("W3W_LANGUAGE", raising=False)
        monkeypatch.delenv("W3W_API_VERSION", raising=False)
        cfg = ClientConfig.from_env()
        assert cfg.api_key == "process-key"
        assert cfg.api_version is ApiVersion.V3

    def test_log_sink_is_attached(self) -> None:
        sink = CallbackSink(print)
        cfg = ClientConfig.from_env({"W3W_API_KEY": "k"}, log_sink=sink)
        assert cfg.log_sink is sink


class TestFromConfig:
    def test_client_uses_config(self) -> None:
        cfg = ClientConfig(api_key="k", language="fr", api_version=ApiVersion.V1)
        session = requests.Session()
        client = What3WordsClient.from_config(cfg, session=session)

        assert client.config is cfg
        assert client.language == "fr"
        assert client.api_version is ApiVersion.V1
        assert client.endpoint == "http://api.what3words.com/"
        assert client.session is session
        assert "api_version='v1'" in repr(client)

    def test_config_keyword_takes_precedence(self) -> None:
        cfg = ClientConfig(api_key="k", language="de")
        client = What3WordsClient(api_key="ignored", language="fr", config=cfg)

        assert client.config is cfg
        assert client.language == "de"
        assert client.session.headers["User-Agent"].startswith("Python geo-what3words ")

"""
geo-what3words — Shared Input Validators
=========================================
Static precondition checks run by the client before it builds anything
that could reach the network.

All methods raise an appropriate exception from
:mod:`shared.python.exceptions` rather than returning booleans, which
keeps the client constructor simple and readable::

    Validators.assert_api_key_present(api_key)
    Validators.assert_endpoint_valid(endpoint)
"""

from __future__ import annotations

from urllib.parse import urlparse

from shared.python.exceptions import ConfigurationError


class Validators:
    """Collection of static precondition checks.

    All methods are ``@staticmethod`` — this class is never instantiated.
    It exists purely as a logical namespace.
    """

    _ALLOWED_SCHEMES = ("http", "https")

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    @staticmethod
    def assert_api_key_present(api_key: str | None) -> None:
        """Assert that *api_key* is a non-blank string.

        Args:
            api_key: The what3words API key supplied by the caller.

        Raises:
            ConfigurationError: If *api_key* is ``None``, empty or only
                whitespace.

        Example::

            Validators.assert_api_key_present(os.environ.get("W3W_API_KEY"))
        """
        if api_key is None or not str(api_key).strip():
            raise ConfigurationError(
                "API key not set. Register for a key at "
                "https://what3words.com and pass it as api_key."
            )

    # ------------------------------------------------------------------
    # Endpoint
    # ------------------------------------------------------------------

    @staticmethod
    def assert_endpoint_valid(endpoint: str) -> None:
        """Assert that *endpoint* is an absolute ``http(s)`` URL with a host.

        Args:
            endpoint: Base URL of the API (e.g. ``"https://api.what3words.com/v3/"``).

        Raises:
            ConfigurationError: If the scheme is missing or unsupported, or
                the URL has no host component.
        """
        parsed = urlparse(endpoint)
        if parsed.scheme not in Validators._ALLOWED_SCHEMES:
            raise ConfigurationError(
                f"Unsupported endpoint scheme in '{endpoint}'. "
                f"Accepted schemes: {', '.join(Validators._ALLOWED_SCHEMES)}"
            )
        if not parsed.hostname:
            raise ConfigurationError(f"Endpoint '{endpoint}' has no host.")

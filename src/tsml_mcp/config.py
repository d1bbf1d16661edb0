"""Connection configuration for the TSML client, loaded from environment variables."""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional


SERVER_NAME = "tsml-mcp-server"
SERVER_VERSION = "1.0.0"

DEFAULT_TIMEOUT_MS = 30000
DEFAULT_USER_AGENT = f"{SERVER_NAME}/{SERVER_VERSION}"


class ConfigurationError(Exception):
    """Raised when the server cannot be configured from its environment."""

    pass


@dataclass(frozen=True)
class TsmlServerConfig:
    """Settings shared by every request a TsmlClient makes."""

    wordpress_url: str
    api_key: Optional[str] = None
    timeout: int = DEFAULT_TIMEOUT_MS  # milliseconds
    user_agent: str = field(default=DEFAULT_USER_AGENT)

    def __post_init__(self):
        if self.timeout <= 0:
            raise ConfigurationError(
                f"TSML_TIMEOUT must be greater than zero milliseconds, got {self.timeout}"
            )

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> 'TsmlServerConfig':
        """
        Load configuration from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            TsmlServerConfig with defaults applied for unset optional values

        Raises:
            ConfigurationError if TSML_WORDPRESS_URL is missing or TSML_TIMEOUT is invalid
        """
        if environ is None:
            environ = os.environ

        wordpress_url = environ.get('TSML_WORDPRESS_URL')
        if not wordpress_url:
            raise ConfigurationError(
                "TSML_WORDPRESS_URL environment variable is required\n"
                "Example: TSML_WORDPRESS_URL=https://example.org"
            )

        timeout = DEFAULT_TIMEOUT_MS
        raw_timeout = environ.get('TSML_TIMEOUT')
        if raw_timeout:
            try:
                timeout = int(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"TSML_TIMEOUT must be an integer number of milliseconds, got {raw_timeout!r}"
                )

        return cls(
            wordpress_url=wordpress_url,
            api_key=environ.get('TSML_API_KEY') or None,
            timeout=timeout,
            user_agent=environ.get('TSML_USER_AGENT') or DEFAULT_USER_AGENT,
        )

    @property
    def timeout_seconds(self) -> float:
        """Request timeout in the unit requests expects."""
        return self.timeout / 1000

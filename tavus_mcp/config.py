"""Process configuration for the Tavus MCP server."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_API_URL = "https://tavusapi.com/v2"


class ConfigError(RuntimeError):
    """Raised when the server cannot be configured from the environment."""


class TavusSettings(BaseModel):
    """Immutable settings shared by the client and the server."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0
    transport: str = "stdio"  # stdio, http, or both
    http_host: str = "0.0.0.0"
    http_port: int = 14310
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TavusSettings":
        """Build settings from environment variables.

        TAVUS_API_KEY is required; everything else has a default.
        """
        env = os.environ if environ is None else environ

        api_key = env.get("TAVUS_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("TAVUS_API_KEY environment variable is required")

        transport = env.get("MCP_TRANSPORT", "stdio").lower()
        if transport not in ("stdio", "http", "both"):
            raise ConfigError(f"Unsupported MCP_TRANSPORT: {transport}")

        try:
            timeout = float(env.get("API_TIMEOUT", "30"))
            http_port = int(env.get("MCP_HTTP_PORT", "14310"))
        except ValueError as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e

        return cls(
            api_key=api_key,
            api_url=env.get("TAVUS_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout=timeout,
            transport=transport,
            http_host=env.get("MCP_HTTP_HOST", "0.0.0.0"),
            http_port=http_port,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )

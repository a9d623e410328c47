"""Writable config keys and reserved-key rules."""

from __future__ import annotations

from dataclasses import dataclass

RESERVED_PREFIX = "$"
ENCRYPTED_KEY = "encrypted_key"

VALID_KEYS: frozenset[str] = frozenset({
    "api_key",
    "api_url",
    "offline",
    "unsafe_https",
    "unsafe_registry",
    "http_proxy",
    "https_proxy",
    "http_concurrency",
    "http_timeout",
})


@dataclass(frozen=True, slots=True)
class ConfigKey:
    """Documentation for one writable config key.

    Attributes
    ----------
    name : str
        Key as stored in the config file
    description : str
        What the setting controls
    env_var : str
        Environment variable that overrides the stored value at use time
    default : str | None
        Rendered default value, if the key has one
    """

    name: str
    description: str
    env_var: str
    default: str | None = None

    def help_line(self) -> str:
        line = f"{self.name} - {self.description} Can be overridden by setting {self.env_var}"
        if self.default is not None:
            line += f" (Default: {self.default})"
        return line


CONFIG_KEYS: tuple[ConfigKey, ...] = (
    ConfigKey(
        "api_key",
        "Your API key. Overrides the API key of the authenticated user.",
        "HEX_API_KEY",
    ),
    ConfigKey("api_url", "Hex API URL.", "HEX_API_URL", '"https://hex.pm/api"'),
    ConfigKey(
        "offline",
        "If true, use locally cached registry and packages instead of fetching them.",
        "HEX_OFFLINE",
        "false",
    ),
    ConfigKey(
        "unsafe_https",
        "If true, HTTPS certificates are not verified.",
        "HEX_UNSAFE_HTTPS",
        "false",
    ),
    ConfigKey(
        "unsafe_registry",
        "If true, the registry signature is not verified against the repository's public key.",
        "HEX_UNSAFE_REGISTRY",
        "false",
    ),
    ConfigKey("http_proxy", "HTTP proxy server.", "HTTP_PROXY"),
    ConfigKey("https_proxy", "HTTPS proxy server.", "HTTPS_PROXY"),
    ConfigKey(
        "http_concurrency",
        "Limits the number of concurrent HTTP requests in flight.",
        "HEX_HTTP_CONCURRENCY",
        "8",
    ),
    ConfigKey(
        "http_timeout",
        "Timeout for HTTP requests in seconds.",
        "HEX_HTTP_TIMEOUT",
    ),
)


def is_reserved(key: str) -> bool:
    """Return True for internal entries hidden from list and read."""
    return key.startswith(RESERVED_PREFIX) or key == ENCRYPTED_KEY

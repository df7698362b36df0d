"""Runtime settings read from the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from data_endpoint.exceptions import ConfigError

ENV_PREFIX = "DATA_ENDPOINT_"

LOG_LEVELS: frozenset[str] = frozenset({"critical", "error", "warning", "info", "debug", "trace"})


@dataclass(frozen=True, slots=True)
class Settings:
    """Server settings.

    Attributes:
        host: Bind address.
        port: Bind port (0 lets the OS pick one).
        log_level: Log level name, as uvicorn spells it.
    """

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from DATA_ENDPOINT_* variables.

        Unset or empty variables keep their defaults.

        Raises:
            ConfigError: If the port or log level is invalid.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        host = env.get(f"{ENV_PREFIX}HOST") or defaults.host
        port = _parse_port(env.get(f"{ENV_PREFIX}PORT") or str(defaults.port))
        log_level = _parse_log_level(env.get(f"{ENV_PREFIX}LOG_LEVEL") or defaults.log_level)

        return cls(host=host, port=port, log_level=log_level)


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}PORT must be an integer, got {raw!r}") from None
    if not 0 <= port <= 65535:
        raise ConfigError(f"{ENV_PREFIX}PORT must be between 0 and 65535, got {port}")
    return port


def _parse_log_level(raw: str) -> str:
    level = raw.strip().lower()
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))}, got {raw!r}"
        )
    return level

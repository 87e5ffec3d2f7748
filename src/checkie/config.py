"""Server settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_ENV_PREFIX = "CHECKIE_"
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class ServerSettings:
    """All deploy-time settings."""

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    reload: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerSettings:
        """Read ``CHECKIE_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        s = cls()

        if (host := env.get(_ENV_PREFIX + "HOST")) is not None:
            s.host = host

        if (port := env.get(_ENV_PREFIX + "PORT")) is not None:
            try:
                s.port = int(port)
            except ValueError:
                raise ValueError(f"Invalid {_ENV_PREFIX}PORT: {port!r}") from None
            if not 0 < s.port < 65536:
                raise ValueError(f"Invalid {_ENV_PREFIX}PORT: {port!r}")

        if (level := env.get(_ENV_PREFIX + "LOG_LEVEL")) is not None:
            s.log_level = level.strip().upper()
            if s.log_level not in _LOG_LEVELS:
                raise ValueError(f"Invalid {_ENV_PREFIX}LOG_LEVEL: {level!r}")

        if (reload := env.get(_ENV_PREFIX + "RELOAD")) is not None:
            flag = reload.strip().lower()
            if flag not in _TRUE | _FALSE:
                raise ValueError(f"Invalid {_ENV_PREFIX}RELOAD: {reload!r}")
            s.reload = flag in _TRUE

        return s

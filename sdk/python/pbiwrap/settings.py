"""Process-level settings for invoking the powerbi binary."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigurationError

DEFAULT_BINARY = "powerbi"
# Large PBIX imports can run for well over an hour.
DEFAULT_TIMEOUT = 6400.0


@dataclass(frozen=True)
class CLISettings:
    binary: str = DEFAULT_BINARY
    # None runs powerbi from the caller's cwd; set it to pin a storage directory.
    working_dir: str | None = None
    timeout: float | None = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CLISettings":
        """Build settings from POWERBI_CLI_* environment variables."""

        env = os.environ if environ is None else environ
        binary = env.get("POWERBI_CLI_BINARY", "").strip() or DEFAULT_BINARY
        working_dir = env.get("POWERBI_CLI_WORKDIR", "").strip() or None
        raw_timeout = env.get("POWERBI_CLI_TIMEOUT", "").strip()
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(f"POWERBI_CLI_TIMEOUT is not a number: {raw_timeout!r}") from exc
        return cls(binary=binary, working_dir=working_dir, timeout=timeout)

"""Exceptions raised by the Power BI CLI wrapper."""

from __future__ import annotations

from typing import Sequence


class PowerBIError(RuntimeError):
    """Base class for wrapper errors."""


class ConfigurationError(PowerBIError):
    """Raised when the wrapper is constructed with unusable settings."""


class ProcessExecutionError(PowerBIError):
    """The powerbi process failed to start, timed out or exited non-zero."""

    def __init__(
        self,
        args: Sequence[str],
        returncode: int | None,
        stdout: str = "",
        stderr: str = "",
        message: str | None = None,
    ) -> None:
        self.command = list(args)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        if message is None:
            message = stderr.strip() or f"powerbi failed with exit code {returncode}"
        super().__init__(message)

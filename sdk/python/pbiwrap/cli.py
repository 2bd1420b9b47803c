"""Thin wrapper around the powerbi CLI process."""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Any, Mapping, Protocol, Sequence

from .errors import ProcessExecutionError
from .models import ProcessResult
from .settings import CLISettings

logger = logging.getLogger(__name__)


def format_args(options: Mapping[str, Any]) -> list[str]:
    """Flatten ``{name: value}`` into ``[name, value, ...]`` in mapping order."""

    args: list[str] = []
    for name, value in options.items():
        args.extend([str(name), str(value)])
    return args


def format_input(options: Mapping[str, Any]) -> str:
    """Render options as the ``name value name value`` string the CLI expects."""

    return " ".join(format_args(options))


def run_powerbi(args: Sequence[str], *, settings: CLISettings | None = None) -> ProcessResult:
    """Execute powerbi and return the completed process.

    Arguments are passed as an argv list, never through a shell. Failing to
    start or hitting the timeout raises ProcessExecutionError; a non-zero
    exit is reported through the returned result.
    """

    settings = settings or CLISettings()
    argv = [settings.binary, *args]
    logger.debug(f"running {argv} in {settings.working_dir or '.'}")
    try:
        proc = subprocess.run(
            argv,
            cwd=settings.working_dir,
            timeout=settings.timeout,
            check=False,
            text=True,
            capture_output=True,
        )
    except subprocess.TimeoutExpired as exc:
        logger.warning(f"powerbi timed out after {settings.timeout}s: {argv}")
        raise ProcessExecutionError(
            argv,
            None,
            stdout=_as_text(exc.stdout),
            stderr=_as_text(exc.stderr),
            message=f"powerbi timed out after {settings.timeout}s",
        ) from exc
    except OSError as exc:
        logger.warning(f"powerbi could not be started: {exc}")
        raise ProcessExecutionError(argv, None, message=f"powerbi could not be started: {exc}") from exc
    return ProcessResult(
        args=tuple(argv),
        returncode=proc.returncode,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )


class CommandRunner(Protocol):
    def run(self, args: Sequence[str]) -> ProcessResult: ...


class SubprocessRunner:
    """Default runner: spawns the configured powerbi binary."""

    def __init__(self, settings: CLISettings | None = None) -> None:
        self.settings = settings or CLISettings()

    def run(self, args: Sequence[str]) -> ProcessResult:
        return run_powerbi(args, settings=self.settings)


def execute(
    command: str | Sequence[str],
    *,
    settings: CLISettings | None = None,
    runner: CommandRunner | None = None,
) -> str:
    """Run a powerbi command and return its untrimmed stdout."""

    if isinstance(command, str):
        try:
            args = shlex.split(command)
        except ValueError as exc:
            raise ProcessExecutionError([command], None, message=f"could not parse command: {exc}") from exc
    else:
        args = list(command)
    runner = runner or SubprocessRunner(settings)
    result = runner.run(args)
    if not result.ok:
        logger.warning(f"powerbi exited with code {result.returncode}: {list(result.args)}")
        raise ProcessExecutionError(result.args, result.returncode, stdout=result.stdout, stderr=result.stderr)
    return result.stdout


def _as_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value

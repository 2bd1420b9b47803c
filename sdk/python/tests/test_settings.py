from __future__ import annotations

from pbiwrap.errors import ConfigurationError
from pbiwrap.settings import DEFAULT_TIMEOUT, CLISettings


def test_defaults() -> None:
    settings = CLISettings.from_env({})
    assert settings == CLISettings(binary="powerbi", working_dir=None, timeout=DEFAULT_TIMEOUT)


def test_from_env_overrides() -> None:
    settings = CLISettings.from_env(
        {
            "POWERBI_CLI_BINARY": "/usr/local/bin/powerbi",
            "POWERBI_CLI_WORKDIR": "/var/lib/powerbi",
            "POWERBI_CLI_TIMEOUT": "120",
        }
    )
    assert settings.binary == "/usr/local/bin/powerbi"
    assert settings.working_dir == "/var/lib/powerbi"
    assert settings.timeout == 120.0


def test_from_env_rejects_bad_timeout() -> None:
    try:
        CLISettings.from_env({"POWERBI_CLI_TIMEOUT": "soon"})
    except ConfigurationError as exc:
        assert "POWERBI_CLI_TIMEOUT" in str(exc)
    else:
        raise AssertionError("expected ConfigurationError")


def test_default_working_dir_is_callers_cwd() -> None:
    assert CLISettings().working_dir is None

from __future__ import annotations

import json
import subprocess

import pbiwrap.cli as cli
from pbiwrap.__main__ import main


def _fake_subprocess(monkeypatch, outputs: dict[str, str], returncode: int = 0):
    for name in ("POWERBI_CLI_BINARY", "POWERBI_CLI_WORKDIR", "POWERBI_CLI_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    calls: list[list[str]] = []

    def fake_run(args, **_kwargs):
        calls.append(args)
        return subprocess.CompletedProcess(
            args=args,
            returncode=returncode,
            stdout=outputs.get(args[1], ""),
            stderr="denied" if returncode else "",
        )

    monkeypatch.setattr(cli.subprocess, "run", fake_run)
    return calls


def test_reports_prints_json(monkeypatch, capsys) -> None:
    calls = _fake_subprocess(monkeypatch, {"get-reports": "[ powerbi ] ID: 42 |\n[ powerbi ] Name: Sales\n"})
    code = main(["--param=-c=contoso", "--param=-w=ws-1", "reports"])
    assert code == 0
    assert json.loads(capsys.readouterr().out) == [{"id": "42", "name": "Sales"}]
    assert calls == [
        ["powerbi", "config", "-c", "contoso", "-w", "ws-1"],
        ["powerbi", "get-reports", "-c", "contoso", "-w", "ws-1"],
    ]


def test_import_with_overwrite(monkeypatch, capsys) -> None:
    calls = _fake_subprocess(monkeypatch, {"import": "[ powerbi ] Import ID: abc123\n"})
    code = main(
        [
            "--binary",
            "pbi",
            "--no-apply-config",
            "--param=-c=contoso",
            "import",
            "sales.pbix",
            "Sales",
            "--overwrite",
            "--import-param=-w=ws-2",
        ]
    )
    assert code == 0
    assert json.loads(capsys.readouterr().out) == [{"id": "abc123"}]
    assert calls == [["pbi", "import", "-f", "sales.pbix", "-n", "Sales", "-w", "ws-2", "-o", "true"]]


def test_version_prints_text(monkeypatch, capsys) -> None:
    _fake_subprocess(monkeypatch, {"-V": "1.0.3\n"})
    assert main(["--no-apply-config", "--param=-c=contoso", "version"]) == 0
    assert capsys.readouterr().out == "1.0.3\n"


def test_missing_params_exit_2(monkeypatch, capsys) -> None:
    calls = _fake_subprocess(monkeypatch, {})
    assert main(["workspaces"]) == 2
    assert "empty" in capsys.readouterr().err
    assert calls == []


def test_malformed_param_exit_2(capsys) -> None:
    assert main(["--param=contoso", "workspaces"]) == 2
    assert "KEY=VALUE" in capsys.readouterr().err


def test_process_failure_exit_code(monkeypatch, capsys) -> None:
    _fake_subprocess(monkeypatch, {}, returncode=4)
    assert main(["--param=-c=contoso", "datasets"]) == 4
    assert "denied" in capsys.readouterr().err


def test_signal_killed_process_exits_1(monkeypatch, capsys) -> None:
    _fake_subprocess(monkeypatch, {}, returncode=-9)
    assert main(["--param=-c=contoso", "reports"]) == 1
    assert "denied" in capsys.readouterr().err

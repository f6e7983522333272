"""CLI behaviour for the filter pipeline, the logger demo, and entry points."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from numflow import __init__conf__
from numflow import cli as cli_mod


def invoke(args: list[str], **kwargs: object):
    runner = CliRunner()
    return runner.invoke(cli_mod.cli, args, prog_name=__init__conf__.shell_command, **kwargs)


def test_cli_without_subcommand_prints_summary() -> None:
    result = invoke([])

    assert result.exit_code == 0
    assert result.output == cli_mod.summary_info()


def test_info_command_matches_summary() -> None:
    result = invoke(["info"])

    assert result.exit_code == 0
    assert "Info for numflow" in result.output
    assert __init__conf__.version in result.output


def test_version_option_prints_version() -> None:
    result = invoke(["--version"])

    assert result.exit_code == 0
    assert __init__conf__.version in result.output


def test_filter_end_to_end_with_greater_than(numbers_file) -> None:
    path = numbers_file("2 3 x 4\n5 -2\n")

    result = invoke(["filter", "GT0", str(path)])

    assert result.exit_code == 0
    assert "Warning: Invalid number in file: x. Skipping." in result.output
    kept = [line.rsplit(" ", 1)[1] for line in result.output.splitlines() if line.startswith("Read and filtered number:")]
    assert kept == ["2", "3", "4", "5"]
    assert "Number processing finished." in result.output
    assert "Total number of filtered numbers: 4" in result.output


@pytest.mark.parametrize(
    "spec, expected",
    [("EVEN", ["2", "4", "-2"]), ("ODD", ["3", "5"])],
)
def test_filter_parity(numbers_file, spec: str, expected: list[str]) -> None:
    path = numbers_file("2 3 4\n5 -2\n")

    result = invoke(["filter", spec, str(path)])

    assert result.exit_code == 0
    kept = [line.rsplit(" ", 1)[1] for line in result.output.splitlines() if line.startswith("Read and filtered number:")]
    assert kept == expected
    assert f"Total number of filtered numbers: {len(expected)}" in result.output


@pytest.mark.parametrize("args", [[], ["EVEN"]])
def test_filter_requires_two_arguments(args: list[str]) -> None:
    result = invoke(["filter", *args])

    assert result.exit_code == 1
    assert "Usage: numflow <filter> <file>" in result.output
    assert "Available filters: EVEN, ODD, GT<n>" in result.output


@pytest.mark.parametrize(
    "spec, message",
    [
        ("PRIME", "Error: Unknown filter type: PRIME"),
        ("GTabc", "Error: Invalid argument for GT filter: abc"),
        ("GT99999999999", "Error: Argument out of range for GT filter: 99999999999"),
    ],
)
def test_filter_configuration_errors_exit_before_reading(spec: str, message: str, tmp_path: Path) -> None:
    result = invoke(["filter", spec, str(tmp_path / "never-read.txt")])

    assert result.exit_code == 1
    assert message in result.output
    assert "Could not open file" not in result.output
    assert "Total number" not in result.output


def test_filter_missing_file_aborts_with_nonzero_exit(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"

    result = invoke(["filter", "EVEN", str(missing)])

    assert result.exit_code == 1
    assert f"Error during processing: Could not open file: {missing}" in result.output
    assert "Number processing finished." not in result.output
    assert "Total number" not in result.output


def test_logdemo_defaults_to_console(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NUMFLOW_LOG_SINK", raising=False)
    monkeypatch.delenv("NUMFLOW_LOG_FILE", raising=False)

    result = invoke(["logdemo"])

    assert result.exit_code == 0
    output = result.output
    assert "No command line argument provided. Using default console output." in output
    assert "] First test message." in output
    assert "] Back to console output." in output
    assert "This message should go nowhere." not in output
    assert output.rstrip().endswith("Program finished.")
    assert (tmp_path / "app.log").read_text(encoding="utf-8").count("Message to file.") == 1


@pytest.mark.parametrize("argument", ["FILE", "file", "File"])
def test_logdemo_file_argument_is_case_insensitive(tmp_path: Path, argument: str) -> None:
    log_file = tmp_path / "demo.log"

    result = invoke(["logdemo", argument, "--log-file", str(log_file)])

    assert result.exit_code == 0
    assert f"Command line argument received: {argument}" in result.output
    assert f"Logging redirected to file {log_file}." in result.output
    messages = [line.split("] ", 1)[1] for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert messages == ["First test message.", "Second test message.", "Message to file."]


def test_logdemo_unknown_argument_falls_back_to_console(tmp_path: Path) -> None:
    result = invoke(["logdemo", "syslog", "--log-file", str(tmp_path / "demo.log")])

    assert result.exit_code == 0
    assert "Command line argument received: syslog" in result.output
    assert "] First test message." in result.output


def test_logdemo_none_argument_silences_first_messages(tmp_path: Path) -> None:
    result = invoke(["logdemo", "none", "--log-file", str(tmp_path / "demo.log")])

    assert result.exit_code == 0
    assert "Logging disabled." in result.output
    assert "First test message." not in result.output
    assert "] Back to console output." in result.output


def test_logdemo_reads_default_sink_from_environment(tmp_path: Path) -> None:
    log_file = tmp_path / "env.log"

    result = invoke(
        ["logdemo"],
        env={"NUMFLOW_LOG_SINK": "file", "NUMFLOW_LOG_FILE": str(log_file)},
    )

    assert result.exit_code == 0
    assert "Using file output from NUMFLOW_LOG_SINK." in result.output
    assert "First test message." in log_file.read_text(encoding="utf-8")


def test_cli_traceback_flag_updates_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    result = invoke(["--traceback", "info"])

    assert result.exit_code == 0
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    recorded: dict[str, object] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        runner = CliRunner()
        result = runner.invoke(command, [] if argv is None else argv)
        if result.exception is not None and not isinstance(result.exception, SystemExit):
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["prog_name"] = prog_name
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": True, "prog_name": "numflow"}
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_standalone_entry_points_pass_their_program_names(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str, str | None, list[str] | None]] = []

    def fake_run_cli(command, argv=None, *, prog_name=None, **_):  # noqa: ANN001
        calls.append((command.name, prog_name, argv))
        return 0

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    assert cli_mod.filter_main(["EVEN", "numbers.txt"]) == 0
    assert cli_mod.logdemo_main(["none"]) == 0

    assert calls == [
        ("filter", "numflow-filter", ["EVEN", "numbers.txt"]),
        ("logdemo", "numflow-logdemo", ["none"]),
    ]


def test_main_consumes_sys_argv(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "info"], raising=False)

    exit_code = cli_mod.main()
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Info for numflow" in captured.out

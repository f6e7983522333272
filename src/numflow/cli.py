"""Click command line surface for the number pipeline and the logger demo.

Purpose
-------
Wire the adapters into the two programs users run: ``filter`` (number
pipeline) and ``logdemo`` (sink switching), plus an ``info`` banner. Each
program is also exposed as its own console script.

Contents
--------
* :func:`cli` - root group carrying ``--traceback`` and ``.env`` toggles.
* :func:`filter_command` / :func:`logdemo_command` / :func:`info_command`.
* :func:`main`, :func:`filter_main`, :func:`logdemo_main` - entry points
  delegating exit-code handling to ``lib_cli_exit_tools``.

Exit codes
----------
``filter`` returns 1 for usage errors, filter configuration errors, and
unreadable input files; 0 otherwise. ``logdemo`` always returns 0.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import click
import lib_cli_exit_tools
from click.core import ParameterSource
from rich.console import Console

from . import __init__conf__
from . import config as app_config
from .adapters import CountObserver, FileNumberReader, PrintObserver
from .application.filter_factory import FilterFactory, parse_filter_spec
from .application.use_cases import create_process_numbers
from .config import LOG_SINK_ENV_VAR, LoggingSettings
from .domain.sinks import SinkKind
from .runtime import LogFacility, logdemo

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

FILTER_HELP = "Available filters: EVEN, ODD, GT<n>"


def summary_info() -> str:
    """Return the metadata banner as a single string."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def _stdout_console() -> Console:
    return Console(highlight=False, emoji=False)


def _stderr_console() -> Console:
    return Console(stderr=True, highlight=False, emoji=False)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on unexpected errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from a nearby .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if app_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(app_config.DOTENV_ENV_VAR)):
        app_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def info_command() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("filter", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("args", nargs=-1)
@click.pass_context
def filter_command(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Filter integers read from FILE and report them: <filter> <file>.

    The filter is EVEN, ODD, or GT<n> (for example GT5).
    """

    prog_name = ctx.find_root().info_name or __init__conf__.shell_command
    ctx.exit(run_filter(args, prog_name=prog_name))


def run_filter(
    args: Sequence[str],
    *,
    prog_name: str,
    console: Console | None = None,
    err_console: Console | None = None,
    factory: FilterFactory | None = None,
) -> int:
    """Run the number pipeline for ``args = (filter_spec, filename)``.

    Returns the process exit code.
    """

    out = console if console is not None else _stdout_console()
    err = err_console if err_console is not None else _stderr_console()

    def report(line: str) -> None:
        err.print(line, markup=False, highlight=False, soft_wrap=True)

    if len(args) < 2:
        report(f"Usage: {prog_name} <filter> <file>")
        report(FILTER_HELP)
        return 1

    filter_spec, filename = args[0], args[1]
    filter_type, filter_arg = parse_filter_spec(filter_spec)
    created = (factory or FilterFactory()).create(filter_type, filter_arg)
    if created.failure is not None:
        report(f"Error: {created.failure.message}")
        report(FILTER_HELP)
        return 1

    run = create_process_numbers(
        reader=FileNumberReader(),
        number_filter=created.unwrap(),
        observers=[PrintObserver(console=out), CountObserver(console=out)],
        diagnostic=report,
    )
    outcome = run(filename)
    return 0 if outcome.ok else 1


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("sink", required=False)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="File used by the file sink (defaults to NUMFLOW_LOG_FILE or app.log).",
)
def logdemo_command(sink: str | None, log_file: Path | None) -> None:
    """Walk through the console, file, and discard sinks.

    SINK is console, file, or none (case-insensitive); anything else selects
    the console.
    """

    settings = LoggingSettings.from_env(log_path=log_file)
    if sink is not None:
        requested = SinkKind.parse_or_default(sink)
        click.echo(f"Command line argument received: {sink}")
    elif settings.default_sink is SinkKind.CONSOLE:
        requested = SinkKind.CONSOLE
        click.echo("No command line argument provided. Using default console output.")
    else:
        requested = settings.default_sink
        click.echo(f"No command line argument provided. Using {requested.value} output from {LOG_SINK_ENV_VAR}.")

    with LogFacility(settings) as facility:
        logdemo(facility, requested)

    click.echo("Program finished.")


def _run(command: click.Command, argv: Sequence[str] | None, *, prog_name: str, restore_traceback: bool) -> int:
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            command,
            argv=list(argv) if argv is not None else None,
            prog_name=prog_name,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the root group and return its exit code."""

    return _run(cli, argv, prog_name=__init__conf__.shell_command, restore_traceback=restore_traceback)


def filter_main(argv: Sequence[str] | None = None) -> int:
    """Console-script entry for ``numflow-filter <filter> <file>``."""

    return _run(filter_command, argv, prog_name="numflow-filter", restore_traceback=True)


def logdemo_main(argv: Sequence[str] | None = None) -> int:
    """Console-script entry for ``numflow-logdemo [sink]``."""

    return _run(logdemo_command, argv, prog_name="numflow-logdemo", restore_traceback=True)


__all__ = [
    "cli",
    "filter_command",
    "filter_main",
    "info_command",
    "logdemo_command",
    "logdemo_main",
    "main",
    "run_filter",
    "summary_info",
]

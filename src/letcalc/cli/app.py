"""
letcalc command-line application.

Commands:
  repl   interactive session (default when no command is given)
  eval   evaluate one line and exit
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from letcalc.cli.repl import ReplShell, print_error
from letcalc.cli.utils import configure_logging, version_callback
from letcalc.core.ir import format_number
from letcalc.core.errors import CalcError, ConfigError
from letcalc.core.manifest import LOG_LEVELS, CalcManifest, get_manifest
from letcalc.core.session import CalcSession

logger = logging.getLogger(__name__)


@dataclass
class CliState:
    """Options shared by every command."""

    manifest: CalcManifest


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""letcalc – interactive calculator with let bindings

Statements are separated by ';', for example:
  let x = 5; let y = 3; x + y
""",
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to letcalc.toml (default: ./letcalc.toml)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help=f"Log level ({', '.join(LOG_LEVELS)})",
    ),
) -> None:
    """letcalc CLI main callback for global options."""
    try:
        manifest = get_manifest(config)
        if log_level:
            level = log_level.upper()
            if level not in LOG_LEVELS:
                raise ConfigError(f"Unknown log level {log_level!r}")
            manifest.logging.level = level
    except ConfigError as e:
        Console(stderr=True).print(f"[bold red]Config error:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=2)

    configure_logging(manifest.logging.level)
    if manifest.path:
        logger.info("Using config %s", manifest.path)

    ctx.obj = CliState(manifest=manifest)

    if ctx.invoked_subcommand is None:
        _run_repl(manifest)


def _run_repl(manifest: CalcManifest) -> None:
    session = CalcSession(manifest.variables)
    shell = ReplShell(session, config=manifest.repl)
    shell.loop()


@app.command()
def repl(ctx: typer.Context) -> None:
    """Start an interactive session. Ctrl-D or :quit exits."""
    state: CliState = ctx.obj
    _run_repl(state.manifest)


@app.command(name="eval", context_settings={"ignore_unknown_options": True})
def eval_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Statements to evaluate, e.g. 'let x = 2; x * 3'"),
) -> None:
    """Evaluate one line of statements and print each result."""
    state: CliState = ctx.obj
    session = CalcSession(state.manifest.variables)
    prefix = state.manifest.repl.result_prefix

    try:
        for value in session.run(text):
            typer.echo(f"{prefix}{format_number(value)}")
    except CalcError as e:
        print_error(Console(stderr=True), e)
        raise typer.Exit(code=1)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])

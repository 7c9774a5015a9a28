"""
Interactive shell for letcalc.

Reads lines until end of input, runs each one against a single CalcSession and
prints every statement result as soon as it is computed. Errors are reported
and the loop carries on with the environment intact.

Shell commands start with ':' and never reach the parser:

    :help       list commands
    :vars       show current bindings
    :reset      drop bindings (configured variables are restored)
    :quit, :q   leave the shell

The bare word ``q`` also quits.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from letcalc.core.ir import format_number
from letcalc.core.errors import CalcError
from letcalc.core.manifest import ReplConfig
from letcalc.core.session import CalcSession

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", ":q", ":quit", ":exit"}

HELP_TEXT = """\
Enter statements separated by ';', for example:
  let x = 5; let y = 3; x + y
Commands:
  :help       show this help
  :vars       show current variables
  :reset      clear variables
  :quit, :q   exit (Ctrl-D also works)"""


def print_error(console: Console, error: CalcError) -> None:
    """Print a letcalc error, with its source marker when available."""
    console.print(f"[bold red]Error:[/bold red] {escape(error.message)}", highlight=False)
    if error.context:
        console.print(escape(error.context.format()), highlight=False)


class ReplShell:
    """Read-eval-print loop over one CalcSession."""

    def __init__(
        self,
        session: CalcSession,
        config: ReplConfig | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.session = session
        self.config = config or ReplConfig()
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def emit(self, value: float) -> None:
        typer.echo(f"{self.config.result_prefix}{format_number(value)}")

    def run_line(self, line: str) -> bool:
        """Handle one input line. Returns False when the shell should stop."""
        text = line.strip()
        if not text:
            return True

        if text in QUIT_WORDS:
            return False

        if text.startswith(":"):
            self.run_command(text)
            return True

        try:
            for value in self.session.run(text):
                self.emit(value)
        except CalcError as e:
            logger.debug("Line failed: %r", text)
            print_error(self.err_console, e)
        return True

    def run_command(self, command: str) -> None:
        if command == ":help":
            typer.echo(HELP_TEXT)
        elif command == ":vars":
            self.show_variables()
        elif command == ":reset":
            self.session.reset()
            typer.echo("Variables cleared")
        else:
            self.err_console.print(
                f"[yellow]Unknown command {escape(command)}[/yellow] (try :help)",
                highlight=False,
            )

    def show_variables(self) -> None:
        items = self.session.env.items()
        if not items:
            typer.echo("No variables defined")
            return
        table = Table(title="Variables")
        table.add_column("Name", style="cyan")
        table.add_column("Value", justify="right")
        for name, value in items:
            table.add_row(name, format_number(value))
        self.console.print(table)

    def loop(self) -> None:
        """Run until end of input, a quit command, or Ctrl-C."""
        try:
            while True:
                try:
                    line = self.console.input(escape(self.config.prompt))
                except EOFError:
                    break
                if not self.run_line(line):
                    break
        except KeyboardInterrupt:
            pass
        typer.echo()

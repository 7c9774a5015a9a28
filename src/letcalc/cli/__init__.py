"""
letcalc CLI Package.

- app.py: typer application (repl, eval)
- repl.py: interactive shell loop
- utils.py: shared utilities (version, logging)
"""

from letcalc.cli.app import app, main
from letcalc.cli.repl import ReplShell
from letcalc.cli.utils import version_callback
from letcalc.core.ir import format_number

__all__ = [
    "app",
    "main",
    "ReplShell",
    "format_number",
    "version_callback",
]

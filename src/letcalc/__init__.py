"""
letcalc - interactive arithmetic evaluator with let bindings.

    >>> from letcalc import Environment, evaluate_line
    >>> evaluate_line("let x = 5; let y = 3; x + y", Environment())
    [5.0, 3.0, 8.0]
"""

from __future__ import annotations

from .core import ir
from .core.errors import CalcError, ConfigError, EvalError, LexError, ParseError
from .core.expression_lang import Environment
from .core.session import CalcSession, evaluate_line, iter_results

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ir",
    "CalcError",
    "CalcSession",
    "ConfigError",
    "Environment",
    "EvalError",
    "LexError",
    "ParseError",
    "evaluate_line",
    "iter_results",
]

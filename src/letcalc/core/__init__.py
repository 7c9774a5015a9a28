"""Core letcalc functionality: IR, expression language, sessions, configuration."""

from . import ir
from .errors import (
    CalcError,
    ConfigError,
    DivisionByZeroError,
    EmptyInputError,
    ErrorContext,
    EvalError,
    LexError,
    MissingClosingParenError,
    MissingEqualsError,
    MissingIdentifierError,
    NumericOverflowError,
    ParseError,
    TrailingTokensError,
    UndefinedVariableError,
    UnexpectedTokenError,
)
from .expression_lang import Environment
from .manifest import CalcManifest, get_manifest, load_manifest
from .session import CalcSession, evaluate_line, iter_results

__all__ = [
    "ir",
    # Errors
    "CalcError",
    "ConfigError",
    "DivisionByZeroError",
    "EmptyInputError",
    "ErrorContext",
    "EvalError",
    "LexError",
    "MissingClosingParenError",
    "MissingEqualsError",
    "MissingIdentifierError",
    "NumericOverflowError",
    "ParseError",
    "TrailingTokensError",
    "UndefinedVariableError",
    "UnexpectedTokenError",
    # Evaluation
    "CalcSession",
    "Environment",
    "evaluate_line",
    "iter_results",
    # Configuration
    "CalcManifest",
    "get_manifest",
    "load_manifest",
]

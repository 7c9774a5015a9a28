"""
Error types for letcalc tokenizing, parsing, evaluation and configuration.

Each pipeline stage raises its own family of errors so the shell can report
where a line went wrong:

- LexError: a character the tokenizer does not recognize
- ParseError (and subclasses): grammar violations
- EvalError (and subclasses): failures while walking the tree
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from letcalc.core.expression_lang.tokenizer import Token


@dataclass
class ErrorContext:
    """
    Source location of an error within a single input line.

    Attributes:
        source: The full line that was being processed
        column: Column number (1-indexed)
    """

    source: str
    column: int

    def format(self) -> str:
        """
        Format the context as the source line with a marker under the column.

        Returns:
            Two lines: the source text and a ``^`` under the error column
        """
        marker = " " * (self.column - 1) + "^"
        return f"  {self.source}\n  {marker}"


class CalcError(Exception):
    """Base exception for all letcalc errors."""

    pos: int | None = None

    def __init__(self, message: str, context: Optional[ErrorContext] = None):
        self.message = message
        self.context = context
        self.emitted: list[float] = []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message

    def attach_source(self, source: str) -> CalcError:
        """Attach an ErrorContext for ``source`` when the error has a position."""
        if self.context is None and self.pos is not None:
            self.context = ErrorContext(source=source, column=self.pos + 1)
            self.args = (self._format_message(),)
        return self


class LexError(CalcError):
    """
    Raised when the tokenizer meets text it cannot turn into a token.

    Examples:
    - Unknown character such as ``@`` or ``#``
    - Malformed number such as ``1.2.3``
    """

    def __init__(self, message: str, char: str, pos: int) -> None:
        self.char = char
        self.pos = pos
        super().__init__(message)


class ParseError(CalcError):
    """
    Raised when the token sequence does not match the grammar.

    Carries the offending token; ``pos`` is the token's character offset.
    """

    def __init__(self, message: str, token: Token) -> None:
        self.token = token
        self.pos = token.pos
        super().__init__(message)


class UnexpectedTokenError(ParseError):
    """A token appeared where an expression or statement was expected."""


class MissingClosingParenError(ParseError):
    """An opening parenthesis was never closed."""


class MissingEqualsError(ParseError):
    """A declared variable name was not followed by ``=``."""


class MissingIdentifierError(ParseError):
    """``let`` was not followed by a variable name."""


class TrailingTokensError(ParseError):
    """A complete statement was followed by something other than ``;``."""


class EmptyInputError(ParseError):
    """The line contained no statements at all."""


class EvalError(CalcError):
    """Raised when a syntactically valid statement cannot be evaluated."""

    def __init__(self, message: str, pos: int | None = None) -> None:
        self.pos = pos
        super().__init__(message)


class UndefinedVariableError(EvalError):
    """A variable was read or reassigned before any ``let`` declared it."""

    def __init__(self, name: str, pos: int | None = None, hint: str | None = None) -> None:
        self.name = name
        message = f"Undefined variable: {name}"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message, pos)


class DivisionByZeroError(EvalError):
    """The right operand of ``/`` evaluated to zero."""

    def __init__(self, pos: int | None = None) -> None:
        super().__init__("Division by zero", pos)


class NumericOverflowError(EvalError):
    """An operation produced a value outside the finite float range."""

    def __init__(self, pos: int | None = None) -> None:
        super().__init__("Numeric overflow: result is not a finite number", pos)


class ConfigError(CalcError):
    """
    Raised when letcalc.toml or an environment override is invalid.

    Examples:
    - Non-numeric value in the [variables] table
    - Unknown log level
    - Malformed TOML
    """

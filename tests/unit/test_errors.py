"""Tests for letcalc error types and formatting."""

from __future__ import annotations

from letcalc.core.errors import (
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
from letcalc.core.expression_lang.tokenizer import Token, TokenKind


class TestErrorHierarchy:
    """One error family per pipeline stage."""

    def test_parse_variants(self) -> None:
        for cls in (
            UnexpectedTokenError,
            MissingClosingParenError,
            MissingEqualsError,
            MissingIdentifierError,
            TrailingTokensError,
            EmptyInputError,
        ):
            assert issubclass(cls, ParseError)
            assert issubclass(cls, CalcError)

    def test_eval_variants(self) -> None:
        for cls in (UndefinedVariableError, DivisionByZeroError, NumericOverflowError):
            assert issubclass(cls, EvalError)

    def test_stage_families_are_distinct(self) -> None:
        assert not issubclass(LexError, ParseError)
        assert not issubclass(ParseError, EvalError)
        assert issubclass(ConfigError, CalcError)


class TestErrorContext:
    """Context renders the line and a marker under the column."""

    def test_format(self) -> None:
        context = ErrorContext(source="5 + @", column=5)
        assert context.format() == "  5 + @\n      ^"

    def test_attach_source(self) -> None:
        error = LexError("Unexpected character: '@'", "@", 4)
        error.attach_source("5 + @")
        assert error.context == ErrorContext(source="5 + @", column=5)
        assert str(error) == "Unexpected character: '@'\n  5 + @\n      ^"

    def test_attach_source_without_position(self) -> None:
        error = EvalError("boom")
        error.attach_source("1")
        assert error.context is None
        assert str(error) == "boom"

    def test_attach_source_keeps_existing_context(self) -> None:
        error = DivisionByZeroError(2)
        error.attach_source("5 / 0")
        error.attach_source("other")
        assert error.context is not None
        assert error.context.source == "5 / 0"


class TestErrorPayloads:
    """Errors carry what the shell needs to report them."""

    def test_parse_error_token(self) -> None:
        token = Token(TokenKind.RPAREN, ")", 5)
        error = TrailingTokensError("Unexpected ')'", token)
        assert error.token is token
        assert error.pos == 5

    def test_undefined_variable_message(self) -> None:
        error = UndefinedVariableError("z")
        assert error.name == "z"
        assert error.message == "Undefined variable: z"

    def test_undefined_variable_hint(self) -> None:
        error = UndefinedVariableError("x", hint="Use let")
        assert error.message == "Undefined variable: x. Use let"

    def test_division_by_zero_message(self) -> None:
        assert DivisionByZeroError().message == "Division by zero"

    def test_emitted_defaults_empty(self) -> None:
        assert DivisionByZeroError().emitted == []

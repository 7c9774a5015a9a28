"""Tests for line evaluation and CalcSession."""

from __future__ import annotations

import pytest

from letcalc.core.errors import (
    CalcError,
    DivisionByZeroError,
    LexError,
    ParseError,
    UndefinedVariableError,
)
from letcalc.core.expression_lang.environment import Environment
from letcalc.core.session import CalcSession, evaluate_line, iter_results


class TestEvaluateLine:
    """evaluate_line returns one result per statement, in order."""

    def test_single_expression(self, env: Environment) -> None:
        assert evaluate_line("5 + 3", env) == [8]

    def test_declaration_returns_value(self, env: Environment) -> None:
        assert evaluate_line("let x = 5", env) == [5]
        assert env.get("x") == 5

    def test_cross_statement_visibility(self, env: Environment) -> None:
        assert evaluate_line("let x = 5; let y = 3; x + y", env) == [5, 3, 8]

    def test_redeclaration(self, env: Environment) -> None:
        assert evaluate_line("let x = 5; let x = 10; x", env) == [5, 10, 10]

    def test_assign_use_change_use(self, env: Environment) -> None:
        assert evaluate_line("let x = 5; x/-10; x = 10; x + 3", env) == [5, -0.5, 10, 13]

    def test_trailing_semicolon(self, env: Environment) -> None:
        assert evaluate_line("5 + 3;", env) == [8]

    def test_bindings_carry_across_lines(self, env: Environment) -> None:
        evaluate_line("let x = 5", env)
        assert evaluate_line("x * 2", env) == [10]

    def test_no_forward_reference(self, env: Environment) -> None:
        with pytest.raises(UndefinedVariableError):
            evaluate_line("y + 1; let y = 2", env)
        assert "y" not in env


class TestLineErrors:
    """Errors stop the line but keep what already happened."""

    def test_error_keeps_earlier_results(self, env: Environment) -> None:
        with pytest.raises(UndefinedVariableError) as exc_info:
            evaluate_line("let x = 5; x + 3; x * y", env)
        assert exc_info.value.emitted == [5, 8]
        assert env.get("x") == 5

    def test_error_stops_remaining_statements(self, env: Environment) -> None:
        with pytest.raises(DivisionByZeroError):
            evaluate_line("let a = 1; 1 / 0; let b = 2", env)
        assert "a" in env
        assert "b" not in env

    def test_parse_error_runs_nothing(self, env: Environment) -> None:
        with pytest.raises(ParseError) as exc_info:
            evaluate_line("let x = 5; 5 + ", env)
        assert exc_info.value.emitted == []
        assert "x" not in env

    def test_lex_error_runs_nothing(self, env: Environment) -> None:
        with pytest.raises(LexError):
            evaluate_line("let x = 5; 5 @ 3", env)
        assert "x" not in env

    def test_unmatched_paren(self, env: Environment) -> None:
        with pytest.raises(ParseError):
            evaluate_line("5 + 3)", env)

    def test_error_has_source_context(self, env: Environment) -> None:
        with pytest.raises(CalcError) as exc_info:
            evaluate_line("1 + z", env)
        context = exc_info.value.context
        assert context is not None
        assert context.source == "1 + z"
        assert context.column == 5
        assert "^" in str(exc_info.value)


class TestIterResults:
    """iter_results streams results before a later failure."""

    def test_streams_before_failure(self, env: Environment) -> None:
        seen: list[float] = []
        with pytest.raises(UndefinedVariableError):
            for value in iter_results("1; 2; nope", env):
                seen.append(value)
        assert seen == [1, 2]

    def test_lazy(self, env: Environment) -> None:
        results = iter_results("let x = 1; let y = 2", env)
        assert "x" not in env
        assert next(results) == 1
        assert "x" in env
        assert "y" not in env


class TestCalcSession:
    """CalcSession owns its environment."""

    def test_evaluate(self, session: CalcSession) -> None:
        assert session.evaluate("let x = 2; x * 21") == [2, 42]
        assert session.variables == {"x": 2.0}

    def test_run_streams(self, session: CalcSession) -> None:
        assert list(session.run("1; 2")) == [1, 2]

    def test_unconsumed_run_does_nothing(self, session: CalcSession) -> None:
        stream = session.run("let x = 1")
        assert session.variables == {}
        assert list(stream) == [1]
        assert session.variables == {"x": 1.0}

    def test_initial_variables(self) -> None:
        session = CalcSession({"pi": 3.5})
        assert session.evaluate("pi * 2") == [7]

    def test_reset_restores_initial_variables(self) -> None:
        session = CalcSession({"pi": 3.5})
        session.evaluate("let pi = 1; let r = 2")
        session.reset()
        assert session.variables == {"pi": 3.5}

    def test_sessions_are_independent(self) -> None:
        first, second = CalcSession(), CalcSession()
        first.evaluate("let x = 1")
        with pytest.raises(UndefinedVariableError):
            second.evaluate("x")

    def test_error_does_not_corrupt_session(self, session: CalcSession) -> None:
        session.evaluate("let x = 5")
        with pytest.raises(DivisionByZeroError):
            session.evaluate("let x = x / 0")
        assert session.evaluate("x") == [5]

"""
Line-level entry points for letcalc.

A line is lexed and parsed as a whole, then its statements run left to right
against a caller-owned Environment.

Usage:
    from letcalc.core.expression_lang.environment import Environment
    from letcalc.core.session import CalcSession, evaluate_line

    env = Environment()
    evaluate_line("let x = 5; let y = 3; x + y", env)
    # [5.0, 3.0, 8.0]

    session = CalcSession()
    for value in session.run("let x = 2; x * 21"):
        print(value)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from letcalc.core.errors import CalcError
from letcalc.core.expression_lang.environment import Environment
from letcalc.core.expression_lang.evaluator import execute
from letcalc.core.expression_lang.parser import parse_program

logger = logging.getLogger(__name__)


def iter_results(text: str, env: Environment) -> Iterator[float]:
    """Yield the result of each statement in ``text`` as soon as it is computed.

    Lex and parse errors surface before anything is yielded. An evaluation
    error stops the line; results already yielded stay valid, and so do the
    bindings made by the statements that produced them.

    Raises:
        LexError, ParseError, EvalError: With an ErrorContext for ``text``.
    """
    try:
        program = parse_program(text)
    except CalcError as e:
        e.attach_source(text)
        raise

    for index, stmt in enumerate(program.statements):
        try:
            value = execute(stmt, env)
        except CalcError as e:
            logger.debug("Statement %d (%s) failed: %s", index, stmt, e.message)
            e.attach_source(text)
            raise
        yield value


def evaluate_line(text: str, env: Environment) -> list[float]:
    """Evaluate every statement in ``text`` and return the results in order.

    On failure the raised error's ``emitted`` attribute holds the results of
    the statements that completed before it.
    """
    results: list[float] = []
    try:
        for value in iter_results(text, env):
            results.append(value)
    except CalcError as e:
        e.emitted = results
        raise
    return results


class CalcSession:
    """One Environment plus the operations a shell runs against it."""

    def __init__(self, variables: Mapping[str, float] | None = None) -> None:
        self._initial = dict(variables or {})
        self.env = Environment(self._initial)

    def run(self, text: str) -> Iterator[float]:
        """Stream the results of one line (see iter_results)."""
        return iter_results(text, self.env)

    def evaluate(self, text: str) -> list[float]:
        """Evaluate one line and return all of its results."""
        return evaluate_line(text, self.env)

    def reset(self) -> None:
        """Drop user bindings and restore the initial variables."""
        logger.debug("Resetting session to %d initial variable(s)", len(self._initial))
        self.env = Environment(self._initial)

    @property
    def variables(self) -> dict[str, float]:
        return self.env.snapshot()

"""
Statement and expression evaluator for the letcalc expression language.

Walks statement and expression AST nodes against a caller-owned Environment.
Pure evaluation apart from the environment bindings made by declarations and
assignments. Does NOT use Python's eval().
"""

from __future__ import annotations

import logging
import math

from letcalc.core.errors import (
    DivisionByZeroError,
    EvalError,
    NumericOverflowError,
    UndefinedVariableError,
)
from letcalc.core.expression_lang.environment import Environment
from letcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryExpr,
    UnaryOp,
    Variable,
)
from letcalc.core.ir.statements import (
    Assignment,
    Declaration,
    ExpressionStatement,
    Statement,
)

logger = logging.getLogger(__name__)


def execute(stmt: Statement, env: Environment) -> float:
    """Execute one statement and return its result.

    Declarations and assignments evaluate their value before touching the
    environment, so a failing statement leaves every binding as it was.

    Args:
        stmt: Parsed statement.
        env: Environment to read from and bind into.

    Returns:
        The statement's numeric result.

    Raises:
        EvalError: If evaluation fails.
    """
    if isinstance(stmt, ExpressionStatement):
        return evaluate(stmt.expr, env)

    if isinstance(stmt, Declaration):
        value = evaluate(stmt.value, env)
        env.bind(stmt.name, value)
        return value

    if isinstance(stmt, Assignment):
        if stmt.name not in env:
            raise UndefinedVariableError(
                stmt.name,
                stmt.pos,
                hint=f"Use let to declare it before assigning, e.g. 'let {stmt.name} = 5'",
            )
        value = evaluate(stmt.value, env)
        env.bind(stmt.name, value)
        return value

    raise EvalError(f"Unknown statement type: {type(stmt).__name__}")


def evaluate(expr: Expr, env: Environment) -> float:
    """Evaluate an expression against an environment.

    This is a safe tree-walking interpreter; only the closed set of AST
    node types is handled.

    Raises:
        EvalError: If evaluation fails.
    """
    return _interpret(expr, env)


def _interpret(expr: Expr, env: Environment) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, Variable):
        value = env.get(expr.name)
        if value is None:
            raise UndefinedVariableError(expr.name, expr.pos)
        return value

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr, env)

    if isinstance(expr, UnaryExpr):
        operand = _interpret(expr.operand, env)
        if expr.op == UnaryOp.NEG:
            return -operand
        return operand

    raise EvalError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_binary(expr: BinaryExpr, env: Environment) -> float:
    """Evaluate a binary expression, left operand first."""
    left = _interpret(expr.left, env)
    right = _interpret(expr.right, env)

    if expr.op == BinaryOp.ADD:
        result = left + right
    elif expr.op == BinaryOp.SUB:
        result = left - right
    elif expr.op == BinaryOp.MUL:
        result = left * right
    elif expr.op == BinaryOp.DIV:
        if right == 0:
            raise DivisionByZeroError(expr.pos)
        result = left / right
    else:
        raise EvalError(f"Unknown binary op: {expr.op}", expr.pos)

    if not math.isfinite(result):
        raise NumericOverflowError(expr.pos)
    return result

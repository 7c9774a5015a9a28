"""
letcalc intermediate representation.

Expression and statement nodes shared by the parser and evaluator.
"""

from .expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    format_number,
    UnaryExpr,
    UnaryOp,
    Variable,
)
from .statements import (
    Assignment,
    Declaration,
    ExpressionStatement,
    Program,
    Statement,
)

__all__ = [
    # Expressions
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Literal",
    "UnaryExpr",
    "UnaryOp",
    "Variable",
    "format_number",
    # Statements
    "Assignment",
    "Declaration",
    "ExpressionStatement",
    "Program",
    "Statement",
]

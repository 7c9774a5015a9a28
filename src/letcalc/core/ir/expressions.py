"""
Expression types for the letcalc IR.

A typed, tree-shaped expression AST produced by the parser and consumed by
the evaluator.

Supports:
- Numeric literals: 42, 2.5, 1.23e-4
- Variable references: x, total_cost
- Arithmetic: +, -, *, /
- Unary sign: -x, +x

Grouping parentheses only steer precedence at parse time, so ``(a + b)``
is represented by the ``a + b`` node itself.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class UnaryOp(StrEnum):
    """Unary sign operators."""

    NEG = "-"
    POS = "+"


def format_number(value: float) -> str:
    """Render a number as the shell prints it: 5, -0.5, 11.5, 1e+20."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric constant."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return format_number(self.value)


class Variable(BaseModel):
    """
    Reference to a variable binding, resolved at evaluation time.

    Examples:
        - Variable(name="x") → x
        - Variable(name="total_cost") → total_cost
    """

    name: str = Field(description="Variable name")
    pos: int = Field(default=0, description="Character offset in the source line")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr
    pos: int = Field(default=0, description="Character offset of the operator")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.op.value}{self.operand}"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | Variable | BinaryExpr | UnaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
UnaryExpr.model_rebuild()

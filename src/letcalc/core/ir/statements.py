"""
Statement types for the letcalc IR.

One statement per ``;``-delimited unit of an input line.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from letcalc.core.ir.expressions import Expr


class Declaration(BaseModel):
    """``let name = value``: binds (or rebinds) a variable."""

    name: str = Field(description="Declared variable name")
    value: Expr = Field(description="Expression whose result is bound")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"let {self.name} = {self.value}"


class Assignment(BaseModel):
    """``name = value``: rebinds a variable that must already exist."""

    name: str = Field(description="Target variable name")
    value: Expr = Field(description="Expression whose result is bound")
    pos: int = Field(default=0, description="Character offset of the target name")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.name} = {self.value}"


class ExpressionStatement(BaseModel):
    """A bare expression whose value is the statement's result."""

    expr: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.expr)


Statement = Declaration | Assignment | ExpressionStatement


class Program(BaseModel):
    """All statements parsed from one input line, in source order."""

    source: str = Field(description="The line the statements were parsed from")
    statements: list[Statement] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.statements)

    def __str__(self) -> str:
        return "; ".join(str(s) for s in self.statements)

"""
letcalc expression language.

Tokenizer, parser, environment and evaluator for ``;``-separated arithmetic
statements with ``let`` bindings.

Usage:
    from letcalc.core.expression_lang import Environment, execute, parse_program

    env = Environment()
    program = parse_program("let x = 5; x * 2")
    results = [execute(stmt, env) for stmt in program.statements]
    # results == [5.0, 10.0]
"""

from letcalc.core.expression_lang.environment import Environment
from letcalc.core.expression_lang.evaluator import evaluate, execute
from letcalc.core.expression_lang.parser import parse_expr, parse_program
from letcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = [
    "Environment",
    "Token",
    "TokenKind",
    "evaluate",
    "execute",
    "parse_expr",
    "parse_program",
    "tokenize",
]

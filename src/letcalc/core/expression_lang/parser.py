"""
Recursive descent parser for the letcalc expression language.

Grammar (precedence low to high):
    program     → statement (";" statement)* ";"?
    statement   → declaration | assignment | expression
    declaration → "let" IDENT "=" expression
    assignment  → IDENT "=" expression
    expression  → term (("+" | "-") term)*
    term        → unary (("*" | "/") unary)*
    unary       → ("-" | "+") unary | factor
    factor      → NUMBER | IDENT | "(" expression ")"

The parser is purely syntactic: it never evaluates and never checks whether
a variable exists.
"""

from __future__ import annotations

import logging

from letcalc.core.errors import (
    EmptyInputError,
    MissingClosingParenError,
    MissingEqualsError,
    MissingIdentifierError,
    TrailingTokensError,
    UnexpectedTokenError,
)
from letcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
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
    Program,
    Statement,
)

logger = logging.getLogger(__name__)

_ADDITIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_MULTIPLICATIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}

_UNARY: dict[TokenKind, UnaryOp] = {
    TokenKind.MINUS: UnaryOp.NEG,
    TokenKind.PLUS: UnaryOp.POS,
}


class _Parser:
    """Recursive descent parser over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def peek(self, offset: int = 0) -> Token:
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return self.tokens[-1]  # EOF

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def match(self, *kinds: TokenKind) -> Token | None:
        if self.current.kind in kinds:
            return self.advance()
        return None

    # -- Grammar rules --

    def parse_program(self, source: str) -> Program:
        """statement (';' statement)* ';'?"""
        if self.current.kind == TokenKind.EOF:
            raise EmptyInputError("Empty input", self.current)

        statements: list[Statement] = [self.parse_statement()]
        while self.match(TokenKind.SEMICOLON):
            if self.current.kind == TokenKind.EOF:
                break
            statements.append(self.parse_statement())

        if self.current.kind != TokenKind.EOF:
            tok = self.current
            raise TrailingTokensError(
                f"Unexpected {tok.describe()} after statement; expected ';' or end of input",
                tok,
            )

        return Program(source=source, statements=statements)

    def parse_statement(self) -> Statement:
        """declaration | assignment | expression"""
        if self.current.kind == TokenKind.LET:
            return self.parse_declaration()
        if self.current.kind == TokenKind.IDENT and self.peek(1).kind == TokenKind.EQUALS:
            return self.parse_assignment()
        return ExpressionStatement(expr=self.parse_expression())

    def parse_declaration(self) -> Declaration:
        """'let' IDENT '=' expression"""
        self.advance()  # let
        name_tok = self.current
        if name_tok.kind != TokenKind.IDENT:
            raise MissingIdentifierError(
                f"Expected a variable name after 'let', got {name_tok.describe()}",
                name_tok,
            )
        self.advance()

        eq_tok = self.current
        if eq_tok.kind != TokenKind.EQUALS:
            raise MissingEqualsError(
                f"Expected '=' after 'let {name_tok.value}', got {eq_tok.describe()}",
                eq_tok,
            )
        self.advance()

        return Declaration(name=name_tok.value, value=self.parse_expression())

    def parse_assignment(self) -> Assignment:
        """IDENT '=' expression"""
        name_tok = self.advance()
        self.advance()  # =
        return Assignment(name=name_tok.value, value=self.parse_expression(), pos=name_tok.pos)

    def parse_expression(self) -> Expr:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        while self.current.kind in _ADDITIVE:
            op_tok = self.advance()
            right = self.parse_term()
            left = BinaryExpr(op=_ADDITIVE[op_tok.kind], left=left, right=right, pos=op_tok.pos)
        return left

    def parse_term(self) -> Expr:
        """unary (('*' | '/') unary)*"""
        left = self.parse_unary()
        while self.current.kind in _MULTIPLICATIVE:
            op_tok = self.advance()
            right = self.parse_unary()
            left = BinaryExpr(
                op=_MULTIPLICATIVE[op_tok.kind], left=left, right=right, pos=op_tok.pos
            )
        return left

    def parse_unary(self) -> Expr:
        """('-' | '+') unary | factor"""
        if self.current.kind in _UNARY:
            op = _UNARY[self.advance().kind]
            return UnaryExpr(op=op, operand=self.parse_unary())
        return self.parse_factor()

    def parse_factor(self) -> Expr:
        """NUMBER | IDENT | '(' expression ')'"""
        tok = self.current

        if tok.kind == TokenKind.LPAREN:
            self.advance()
            expr = self.parse_expression()
            if self.current.kind != TokenKind.RPAREN:
                raise MissingClosingParenError(
                    f"Expected ')' to close '(' at column {tok.pos + 1}, "
                    f"got {self.current.describe()}",
                    self.current,
                )
            self.advance()
            return expr

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return Literal(value=float(tok.value))

        if tok.kind == TokenKind.IDENT:
            self.advance()
            return Variable(name=tok.value, pos=tok.pos)

        raise UnexpectedTokenError(
            f"Expected a number, a variable or '(', got {tok.describe()}",
            tok,
        )


def parse_tokens(tokens: list[Token], source: str = "") -> Program:
    """Parse an already tokenized line into a Program.

    Raises:
        ParseError: If the tokens do not form a valid program.
    """
    program = _Parser(tokens).parse_program(source)
    logger.debug("Parsed %d statement(s): %s", len(program), program)
    return program


def parse_program(source: str) -> Program:
    """Parse a line of statements into a Program.

    Args:
        source: Input line (e.g., "let x = 5; x * 2")

    Returns:
        Parsed program with statements in source order.

    Raises:
        LexError: If tokenization fails.
        ParseError: If the line is not a valid program.
    """
    return parse_tokens(tokenize(source), source)


def parse_expr(source: str) -> Expr:
    """Parse a single expression (no statements, no ';').

    Raises:
        LexError: If tokenization fails.
        ParseError: If the expression is invalid or followed by extra tokens.
    """
    parser = _Parser(tokenize(source))
    if parser.current.kind == TokenKind.EOF:
        raise EmptyInputError("Empty input", parser.current)

    expr = parser.parse_expression()

    # Ensure all tokens consumed
    if parser.current.kind != TokenKind.EOF:
        raise TrailingTokensError(
            f"Unexpected token after expression: {parser.current.describe()}",
            parser.current,
        )

    return expr

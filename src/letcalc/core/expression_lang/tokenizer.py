"""
Tokenizer for the letcalc expression language.

Converts a line of source text into a sequence of typed tokens.
"""

from __future__ import annotations

import logging
import math
import re
from enum import StrEnum, auto

from letcalc.core.errors import LexError

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals and names
    NUMBER = auto()
    IDENT = auto()

    # Keywords
    LET = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()
    EQUALS = auto()
    SEMICOLON = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        if self.kind == TokenKind.EOF:
            return "end of input"
        return repr(self.value)


_KEYWORDS: dict[str, TokenKind] = {
    "let": TokenKind.LET,
}

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "=": TokenKind.EQUALS,
    ";": TokenKind.SEMICOLON,
}

_DIGITS = "0123456789"

# Number: 12, 2.5, 3., .5 with optional exponent (1.23e-4)
_NUMBER_RE = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")
# Identifier: letter or underscore followed by alphanumerics/underscores
_IDENT_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression line into a list of tokens ending with EOF.

    Raises:
        LexError: On an unrecognized character or a malformed number.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        # Skip whitespace
        if c in " \t\n\r":
            i += 1
            continue

        # Numbers
        if c in _DIGITS or (c == "." and i + 1 < n and source[i + 1] in _DIGITS):
            m = _NUMBER_RE.match(source, i)
            if m is None:
                raise LexError(f"Unexpected character: {c!r}", c, i)
            end = m.end()
            if end < n and source[end] == ".":
                bad = _NUMBER_RE.match(source, end)
                text = source[i : bad.end() if bad else end + 1]
                raise LexError(f"Malformed number: {text!r}", ".", end)
            text = m.group(0)
            if math.isinf(float(text)):
                raise LexError(f"Number out of range: {text!r}", c, i)
            tokens.append(Token(TokenKind.NUMBER, text, i))
            i = end
            continue

        # Identifiers and keywords
        if c.isalpha() or c == "_":
            m = _IDENT_RE.match(source, i)
            if m is None:
                raise LexError(f"Unexpected character: {c!r}", c, i)
            word = m.group(0)
            kind = _KEYWORDS.get(word, TokenKind.IDENT)
            tokens.append(Token(kind, word, i))
            i = m.end()
            continue

        if c in _SINGLE_CHAR:
            tokens.append(Token(_SINGLE_CHAR[c], c, i))
            i += 1
            continue

        raise LexError(f"Unexpected character: {c!r}", c, i)

    tokens.append(Token(TokenKind.EOF, "", n))
    logger.debug("Tokenized %r into %d tokens", source, len(tokens))
    return tokens

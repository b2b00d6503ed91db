"""
Token types for the function-expression lexer.

Only a handful of token types belong to the supported grammar.  A few
more operator tokens are recognised purely so that the parser can report
them as unsupported constructs rather than as stray characters.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """All token types recognized by the expression lexer."""

    # --- Literals and names ---
    NUMBER = auto()             # 42, 3.14, .5, 1e-9
    IDENTIFIER = auto()         # x, y, sin, ...

    # --- Supported operators ---
    PLUS = auto()               # +
    MINUS = auto()              # -
    STAR = auto()               # *
    SLASH = auto()              # /

    # --- Delimiters ---
    LPAREN = auto()             # (
    RPAREN = auto()             # )
    COMMA = auto()              # , (only meaningful as an error in calls)

    # --- Recognised but unsupported operators ---
    PERCENT = auto()            # %
    CARET = auto()              # ^
    DOUBLE_STAR = auto()        # **
    LT = auto()                 # <
    GT = auto()                 # >
    ASSIGN = auto()             # =
    BANG = auto()               # !

    # --- Special ---
    EOF = auto()                # end of input


@dataclass(frozen=True)
class SourceLocation:
    """A position in the expression text."""
    column: int         # 1-indexed column number
    offset: int         # 0-indexed character offset from start

    def __str__(self) -> str:
        return f"column {self.column}"


@dataclass(frozen=True)
class SourceSpan:
    """A range in the expression text."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        return f"{self.start.column}-{self.end.column}"


@dataclass(frozen=True)
class Token:
    """A single token from the lexer."""
    type: TokenType
    value: Any              # float for NUMBER, str for IDENTIFIER, else None
    lexeme: str             # Source text of the token
    span: SourceSpan

    def __str__(self) -> str:
        if self.type in (TokenType.NUMBER, TokenType.IDENTIFIER):
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        if self.type == TokenType.EOF:
            return "end of input"
        return f"'{self.lexeme}'"


# Single-character operator and delimiter tokens
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "%": TokenType.PERCENT,
    "^": TokenType.CARET,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "=": TokenType.ASSIGN,
    "!": TokenType.BANG,
}

# Operators the lexer knows about but the grammar does not accept
UNSUPPORTED_OPERATORS: frozenset = frozenset({
    TokenType.PERCENT,
    TokenType.CARET,
    TokenType.DOUBLE_STAR,
    TokenType.LT,
    TokenType.GT,
    TokenType.ASSIGN,
    TokenType.BANG,
})


def is_unsupported_operator(token_type: TokenType) -> bool:
    """Check if a token type is an operator outside the grammar."""
    return token_type in UNSUPPORTED_OPERATORS


def location_at(offset: int) -> SourceLocation:
    """Location for a 0-indexed offset into a single-line expression."""
    return SourceLocation(column=offset + 1, offset=offset)


def span_between(start: int, end: int) -> SourceSpan:
    return SourceSpan(location_at(start), location_at(end))


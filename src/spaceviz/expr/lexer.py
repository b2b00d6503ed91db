"""
Lexer for function expressions such as ``sin(x) * cos(y)``.

Converts expression text into a list of tokens for the parser.
Supports:
- Number literals (``42``, ``3.14``, ``.5``, scientific notation)
- Identifiers (variable and function names)
- The four arithmetic operators, parentheses and commas
- A few extra operators that the parser rejects as unsupported
"""

from typing import List, Iterator
from .tokens import (
    Token, TokenType, SourceLocation, SourceSpan, SINGLE_CHAR_TOKENS, location_at,
)
from .errors import (
    error_unexpected_character,
    error_invalid_number_literal,
)


class Lexer:
    """
    Tokenizer for single-line function expressions.

    Usage:
        lexer = Lexer("sqrt(x*x + y*y)")
        tokens = lexer.tokenize()
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0            # Current position in source

    def _location(self) -> SourceLocation:
        return location_at(self.pos)

    def _span(self, start: SourceLocation) -> SourceSpan:
        return SourceSpan(start, self._location())

    def _peek(self, offset: int = 0) -> str:
        """Look at character at current position + offset without consuming."""
        idx = self.pos + offset
        if idx >= len(self.source):
            return '\0'
        return self.source[idx]

    def _advance(self) -> str:
        if self.pos >= len(self.source):
            return '\0'
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _make_token(self, token_type: TokenType, value, start: SourceLocation) -> Token:
        lexeme = self.source[start.offset:self.pos]
        return Token(token_type, value, lexeme, self._span(start))

    def _scan_number(self) -> Token:
        """Scan a numeric literal; every number is a float."""
        start = self._location()

        while self._peek().isdigit():
            self._advance()

        if self._peek() == '.':
            self._advance()  # consume '.'
            while self._peek().isdigit():
                self._advance()

        # Scientific notation
        if self._peek() in 'eE':
            self._advance()  # consume 'e'
            if self._peek() in '+-':
                self._advance()
            if not self._peek().isdigit():
                raise error_invalid_number_literal(
                    self.source[start.offset:self.pos], self._span(start), self.source
                )
            while self._peek().isdigit():
                self._advance()

        lexeme = self.source[start.offset:self.pos]
        try:
            value = float(lexeme)
        except ValueError:
            raise error_invalid_number_literal(lexeme, self._span(start), self.source)
        return self._make_token(TokenType.NUMBER, value, start)

    def _scan_identifier(self) -> Token:
        start = self._location()
        while self._peek().isalnum() or self._peek() == '_':
            self._advance()
        lexeme = self.source[start.offset:self.pos]
        return self._make_token(TokenType.IDENTIFIER, lexeme, start)

    def _scan_token(self) -> Token:
        """Scan the next token."""
        while self._peek() in ' \t\r\n':
            self._advance()

        start = self._location()
        if self._is_at_end():
            return Token(TokenType.EOF, None, "", SourceSpan(start, start))

        ch = self._peek()

        if ch.isdigit() or (ch == '.' and self._peek(1).isdigit()):
            return self._scan_number()

        if ch.isalpha() or ch == '_':
            return self._scan_identifier()

        if ch == '*' and self._peek(1) == '*':
            self._advance()
            self._advance()
            return self._make_token(TokenType.DOUBLE_STAR, None, start)

        if ch in SINGLE_CHAR_TOKENS:
            self._advance()
            return self._make_token(SINGLE_CHAR_TOKENS[ch], None, start)

        self._advance()
        raise error_unexpected_character(ch, self._span(start), self.source)

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source, ending with an EOF token."""
        tokens = []
        while True:
            token = self._scan_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokenize())


def tokenize(source: str) -> List[Token]:
    """Convenience function to tokenize expression text."""
    return Lexer(source).tokenize()

"""
Recursive descent parser for function expressions.

Converts a token list into an expression AST.
"""

from typing import List, Optional
from .tokens import Token, TokenType, SourceSpan, is_unsupported_operator
from .ast import (
    Expression, Literal, Variable, BinaryOp, UnaryOp, Call, Grouping,
)
from .errors import (
    error_unexpected_token,
    error_unexpected_eof,
    error_unsupported,
    error_nesting_too_deep,
)
from .lexer import tokenize

# Free variables that may appear in an expression
VARIABLES = ("x", "y")

# Single-argument functions understood by the evaluator
FUNCTIONS = ("sin", "cos", "tan", "sqrt", "exp", "log")


class Parser:
    """
    Recursive descent parser for function expressions.

    Usage:
        parser = Parser(tokens, source)
        tree = parser.parse()

    Precedence, lowest first:
        + -     (binary, left-associative)
        * /     (binary, left-associative)
        + -     (unary)

    Nesting depth counts unary signs, parentheses, calls and chained binary
    operators; anything deeper than MAX_DEPTH is rejected with E103.
    """

    PRECEDENCE = {
        TokenType.PLUS: 1,
        TokenType.MINUS: 1,
        TokenType.STAR: 2,
        TokenType.SLASH: 2,
    }

    MAX_DEPTH = 150

    def __init__(self, tokens: List[Token], source: Optional[str] = None):
        self.tokens = tokens
        self.source = source  # Original text for diagnostics
        self.pos = 0
        self.depth = 0

    # =========================================================================
    # Token Navigation
    # =========================================================================

    def _current(self) -> Token:
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[self.pos]

    def _check(self, token_type: TokenType) -> bool:
        return self._current().type == token_type

    def _advance(self) -> Token:
        token = self._current()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def _match(self, token_type: TokenType) -> Optional[Token]:
        if self._check(token_type):
            return self._advance()
        return None

    def _consume(self, token_type: TokenType, expected: str) -> Token:
        if self._check(token_type):
            return self._advance()
        self._error(expected)

    def _error(self, expected: str) -> None:
        token = self._current()
        self._reject_unsupported(token)
        if token.type == TokenType.EOF:
            raise error_unexpected_eof(expected, token.span, self.source)
        raise error_unexpected_token(expected, token.describe(), token.span, self.source)

    def _enter(self, token: Token) -> None:
        self.depth += 1
        if self.depth > self.MAX_DEPTH:
            raise error_nesting_too_deep(self.MAX_DEPTH, token.span, self.source)

    def _reject_unsupported(self, token: Token) -> None:
        if is_unsupported_operator(token.type):
            raise error_unsupported(
                f"operator '{token.lexeme}'", token.span, self.source,
                hints=["only + - * / and parentheses are available"],
            )

    # =========================================================================
    # Expression Parsing (Precedence Climbing)
    # =========================================================================

    def parse(self) -> Expression:
        """Parse a complete expression; the whole input must be consumed."""
        expr = self._parse_binary_expr(1)
        if not self._check(TokenType.EOF):
            self._error("end of input")
        return expr

    def _parse_binary_expr(self, min_precedence: int) -> Expression:
        left = self._parse_unary_expr()
        entry_depth = self.depth

        while True:
            op_token = self._current()
            self._reject_unsupported(op_token)
            precedence = self.PRECEDENCE.get(op_token.type)
            if precedence is None or precedence < min_precedence:
                break

            self._advance()  # consume operator
            self._enter(op_token)
            right = self._parse_binary_expr(precedence + 1)
            left = BinaryOp(
                span=SourceSpan(left.span.start, right.span.end),
                left=left,
                operator=op_token.type,
                right=right,
            )

        self.depth = entry_depth
        return left

    def _parse_unary_expr(self) -> Expression:
        if self._check(TokenType.MINUS) or self._check(TokenType.PLUS):
            op = self._advance()
            self._enter(op)
            operand = self._parse_unary_expr()
            self.depth -= 1
            return UnaryOp(
                span=SourceSpan(op.span.start, operand.span.end),
                operator=op.type,
                operand=operand,
            )
        return self._parse_primary_expr()

    def _parse_primary_expr(self) -> Expression:
        token = self._current()

        if token.type == TokenType.NUMBER:
            self._advance()
            return Literal(span=token.span, value=token.value)

        if token.type == TokenType.IDENTIFIER:
            self._advance()
            if self._check(TokenType.LPAREN):
                return self._parse_call(token)
            if token.value in VARIABLES:
                return Variable(span=token.span, name=token.value)
            raise error_unsupported(
                f"identifier '{token.value}'", token.span, self.source,
                hints=["expressions may only use the variables x and y"],
            )

        if token.type == TokenType.LPAREN:
            start = self._advance()
            self._enter(start)
            inner = self._parse_binary_expr(1)
            end = self._consume(TokenType.RPAREN, "')'")
            self.depth -= 1
            return Grouping(span=SourceSpan(start.span.start, end.span.end), inner=inner)

        self._error("expression")

    def _parse_call(self, name: Token) -> Call:
        self._consume(TokenType.LPAREN, "'('")
        self._enter(name)

        arguments = []
        if not self._check(TokenType.RPAREN):
            arguments.append(self._parse_binary_expr(1))
            while self._match(TokenType.COMMA):
                arguments.append(self._parse_binary_expr(1))
        end = self._consume(TokenType.RPAREN, "')'")
        self.depth -= 1
        span = SourceSpan(name.span.start, end.span.end)

        if name.value not in FUNCTIONS:
            raise error_unsupported(
                f"function '{name.value}'", name.span, self.source,
                hints=[f"available functions: {', '.join(FUNCTIONS)}"],
            )
        if len(arguments) != 1:
            raise error_unsupported(
                f"call to '{name.value}' with {len(arguments)} arguments", span, self.source,
                hints=["functions take exactly one argument"],
            )
        return Call(span=span, name=name.value, argument=arguments[0])


def parse(tokens: List[Token], source: Optional[str] = None) -> Expression:
    """Convenience function to parse a token list."""
    return Parser(tokens, source).parse()


def parse_expression(source: str) -> Expression:
    """Tokenize and parse expression text in one step."""
    return parse(tokenize(source), source)

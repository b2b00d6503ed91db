"""
Expression-specific exceptions and diagnostics.

Error code ranges:
- E0xx: Lexer errors
- E1xx: Parser errors
- E2xx: Arithmetic errors
- E3xx: Domain errors
- E4xx: Unsupported constructs
"""

from dataclasses import dataclass, field
from typing import Optional, List
from .tokens import SourceSpan


@dataclass
class Diagnostic:
    """A single diagnostic message attached to an expression error."""
    code: str                       # E001, E101, etc.
    message: str                    # Human-readable message
    span: Optional[SourceSpan] = None
    source_line: Optional[str] = None   # The expression text
    hints: List[str] = field(default_factory=list)

    def format(self, show_source: bool = True) -> str:
        """Format the diagnostic for display."""
        if self.span is not None:
            parts = [f"{self.span.start}: error[{self.code}]: {self.message}"]
        else:
            parts = [f"error[{self.code}]: {self.message}"]

        # Source line with caret
        if show_source and self.source_line is not None and self.span is not None:
            parts.append(f"  | {self.source_line}")
            col = self.span.start.column
            underline_len = max(1, self.span.end.column - col)
            parts.append(f"  | {' ' * (col - 1)}{'^' * underline_len}")

        for hint in self.hints:
            parts.append(f"  = hint: {hint}")

        return "\n".join(parts)


class ExprError(Exception):
    """Base exception for expression errors."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def __str__(self) -> str:
        return self.diagnostic.format()


class ParseError(ExprError):
    """Malformed expression text (E0xx, E1xx)."""
    pass


class ArithmeticError(ExprError):
    """Division by zero (E2xx)."""
    pass


class DomainError(ExprError):
    """Math function argument outside its domain (E3xx)."""
    pass


class UnsupportedError(ExprError):
    """Construct outside the supported grammar (E4xx)."""
    pass


# --- Lexer error codes ---

def error_unexpected_character(char: str, span: SourceSpan, source_line: str = None) -> ParseError:
    """E001: Unexpected character."""
    diag = Diagnostic(
        code="E001",
        message=f"unexpected character '{char}'",
        span=span,
        source_line=source_line,
    )
    return ParseError(diag)


def error_invalid_number_literal(text: str, span: SourceSpan, source_line: str = None) -> ParseError:
    """E002: Invalid number literal."""
    diag = Diagnostic(
        code="E002",
        message=f"invalid number literal '{text}'",
        span=span,
        source_line=source_line,
        hints=["exponents need digits: 1e-3, 2.5E+10"],
    )
    return ParseError(diag)


# --- Parser error codes ---

def error_unexpected_token(expected: str, found: str, span: SourceSpan,
                           source_line: str = None) -> ParseError:
    """E101: Unexpected token."""
    diag = Diagnostic(
        code="E101",
        message=f"expected {expected}, found {found}",
        span=span,
        source_line=source_line,
    )
    return ParseError(diag)


def error_unexpected_eof(expected: str, span: SourceSpan, source_line: str = None) -> ParseError:
    """E102: Unexpected end of input."""
    diag = Diagnostic(
        code="E102",
        message=f"unexpected end of input, expected {expected}",
        span=span,
        source_line=source_line,
    )
    return ParseError(diag)


def error_nesting_too_deep(limit: int, span: SourceSpan, source_line: str = None) -> ParseError:
    """E103: Expression nested deeper than the parser allows."""
    diag = Diagnostic(
        code="E103",
        message=f"expression nested too deeply (limit {limit})",
        span=span,
        source_line=source_line,
        hints=["split long sums or remove redundant parentheses and signs"],
    )
    return ParseError(diag)


# --- Arithmetic error codes ---

def error_division_by_zero(span: SourceSpan = None, source_line: str = None) -> ArithmeticError:
    """E201: Division by zero."""
    diag = Diagnostic(
        code="E201",
        message="division by zero",
        span=span,
        source_line=source_line,
    )
    return ArithmeticError(diag)


# --- Domain error codes ---

def error_domain(function: str, argument: float, requirement: str,
                 span: SourceSpan = None, source_line: str = None) -> DomainError:
    """E301: Function argument out of domain."""
    diag = Diagnostic(
        code="E301",
        message=f"{function}({argument!r}) is undefined: argument must be {requirement}",
        span=span,
        source_line=source_line,
    )
    return DomainError(diag)


# --- Unsupported construct codes ---

def error_unsupported(what: str, span: SourceSpan = None, source_line: str = None,
                      hints: List[str] = None) -> UnsupportedError:
    """E401: Construct outside the supported grammar."""
    diag = Diagnostic(
        code="E401",
        message=f"unsupported {what}",
        span=span,
        source_line=source_line,
        hints=hints or [],
    )
    return UnsupportedError(diag)

"""
Function-expression language for height-field sampling.

This module provides:
- Lexer: Tokenizes expression text
- Parser: Builds an AST from tokens
- Evaluator: Computes ``z = f(x, y)`` from the AST

Grammar: numeric literals, the variables ``x`` and ``y``, binary
``+ - * /``, unary ``+ -``, parentheses, and single-argument calls to
``sin cos tan sqrt exp log``.

Usage:
    from spaceviz.expr import evaluate, FunctionEvaluator

    evaluate("x + y", 2, 3)          # 5.0

    f = FunctionEvaluator("sin(x) * cos(y)")
    f(0.5, 1.0)
"""

from .tokens import (
    Token,
    TokenType,
    SourceLocation,
    SourceSpan,
)

from .lexer import (
    Lexer,
    tokenize,
)

from .parser import (
    Parser,
    parse,
    parse_expression,
    VARIABLES,
    FUNCTIONS,
)

from .ast import (
    Expression,
    Literal,
    Variable,
    BinaryOp,
    UnaryOp,
    Call,
    Grouping,
    format_expr,
    print_ast,
)

from .errors import (
    ExprError,
    ParseError,
    ArithmeticError,
    DomainError,
    UnsupportedError,
    Diagnostic,
)

from .evaluator import (
    Evaluator,
    FunctionEvaluator,
    evaluate,
)

__all__ = [
    # Tokens
    "Token",
    "TokenType",
    "SourceLocation",
    "SourceSpan",
    # Lexer
    "Lexer",
    "tokenize",
    # Parser
    "Parser",
    "parse",
    "parse_expression",
    "VARIABLES",
    "FUNCTIONS",
    # AST
    "Expression",
    "Literal",
    "Variable",
    "BinaryOp",
    "UnaryOp",
    "Call",
    "Grouping",
    "format_expr",
    "print_ast",
    # Errors
    "ExprError",
    "ParseError",
    "ArithmeticError",
    "DomainError",
    "UnsupportedError",
    "Diagnostic",
    # Evaluation
    "Evaluator",
    "FunctionEvaluator",
    "evaluate",
]

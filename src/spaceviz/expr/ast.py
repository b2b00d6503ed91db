"""
Abstract Syntax Tree (AST) node definitions for function expressions.

The node set is closed: the parser only ever produces the six node types
below and the evaluator handles exactly these.
"""

from dataclasses import dataclass
from typing import Union, List
from .tokens import SourceSpan, TokenType


@dataclass
class Literal:
    """A numeric literal."""
    span: SourceSpan
    value: float


@dataclass
class Variable:
    """A free variable, ``x`` or ``y``."""
    span: SourceSpan
    name: str


@dataclass
class BinaryOp:
    """A binary operation (``a + b``, ``a / b``, ...)."""
    span: SourceSpan
    left: "Expression"
    operator: TokenType     # PLUS, MINUS, STAR or SLASH
    right: "Expression"


@dataclass
class UnaryOp:
    """A unary sign (``-a``, ``+a``)."""
    span: SourceSpan
    operator: TokenType     # PLUS or MINUS
    operand: "Expression"


@dataclass
class Call:
    """A single-argument function call (``sin(x)``)."""
    span: SourceSpan
    name: str
    argument: "Expression"


@dataclass
class Grouping:
    """A parenthesized expression."""
    span: SourceSpan
    inner: "Expression"


Expression = Union[Literal, Variable, BinaryOp, UnaryOp, Call, Grouping]

OPERATOR_SYMBOLS = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
}


def format_expr(node: Expression) -> str:
    """Render an AST back to fully parenthesized expression text."""
    if isinstance(node, Literal):
        return repr(node.value)
    if isinstance(node, Variable):
        return node.name
    if isinstance(node, BinaryOp):
        op = OPERATOR_SYMBOLS[node.operator]
        return f"({format_expr(node.left)} {op} {format_expr(node.right)})"
    if isinstance(node, UnaryOp):
        return f"{OPERATOR_SYMBOLS[node.operator]}{format_expr(node.operand)}"
    if isinstance(node, Call):
        return f"{node.name}({format_expr(node.argument)})"
    if isinstance(node, Grouping):
        return f"({format_expr(node.inner)})"
    raise TypeError(f"not an expression node: {type(node).__name__}")


def print_ast(node: Expression, indent: int = 0) -> str:
    """Pretty-print an AST node for debugging."""
    prefix = "  " * indent
    lines: List[str] = []

    if isinstance(node, Literal):
        lines.append(f"{prefix}Literal({node.value!r})")
    elif isinstance(node, Variable):
        lines.append(f"{prefix}Variable({node.name})")
    elif isinstance(node, BinaryOp):
        lines.append(f"{prefix}BinaryOp({OPERATOR_SYMBOLS[node.operator]})")
        lines.append(print_ast(node.left, indent + 1))
        lines.append(print_ast(node.right, indent + 1))
    elif isinstance(node, UnaryOp):
        lines.append(f"{prefix}UnaryOp({OPERATOR_SYMBOLS[node.operator]})")
        lines.append(print_ast(node.operand, indent + 1))
    elif isinstance(node, Call):
        lines.append(f"{prefix}Call({node.name})")
        lines.append(print_ast(node.argument, indent + 1))
    elif isinstance(node, Grouping):
        lines.append(f"{prefix}Grouping")
        lines.append(print_ast(node.inner, indent + 1))
    else:
        lines.append(f"{prefix}{type(node).__name__}")

    return "\n".join(lines)

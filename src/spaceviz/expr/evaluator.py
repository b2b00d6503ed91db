"""
Tree-walking evaluator for function expressions.

Evaluates an expression AST bottom-up with IEEE-754 double semantics.
Overflow produces ``inf`` and non-finite arguments produce ``nan``; only
the conditions listed below raise:

- division by zero                       -> ArithmeticError
- ``sqrt`` of a negative number          -> DomainError
- ``log`` of a non-positive number       -> DomainError
- anything outside the grammar           -> UnsupportedError
"""

import math
from typing import Callable, Dict, Optional

from .ast import Expression, Literal, Variable, BinaryOp, UnaryOp, Call, Grouping
from .errors import error_division_by_zero, error_domain, error_unsupported
from .parser import parse_expression
from .tokens import TokenType


def _exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


BUILTIN_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "sqrt": math.sqrt,
    "exp": _exp,
    "log": math.log,
}


class Evaluator:
    """
    Evaluates a parsed expression for given values of ``x`` and ``y``.

    Dispatches on the closed set of node types defined in
    :mod:`spaceviz.expr.ast`.
    """

    def __init__(self, source: Optional[str] = None):
        self.source = source  # Expression text, used in diagnostics

    def evaluate(self, expr: Expression, x: float, y: float) -> float:
        if isinstance(expr, Literal):
            return float(expr.value)
        elif isinstance(expr, Variable):
            return self._eval_variable(expr, x, y)
        elif isinstance(expr, BinaryOp):
            return self._eval_binary_op(expr, x, y)
        elif isinstance(expr, UnaryOp):
            return self._eval_unary_op(expr, x, y)
        elif isinstance(expr, Call):
            return self._eval_call(expr, x, y)
        elif isinstance(expr, Grouping):
            return self.evaluate(expr.inner, x, y)
        else:
            raise error_unsupported(f"expression node {type(expr).__name__}")

    def _eval_variable(self, var: Variable, x: float, y: float) -> float:
        if var.name == "x":
            return float(x)
        if var.name == "y":
            return float(y)
        raise error_unsupported(f"identifier '{var.name}'", var.span, self.source)

    def _eval_binary_op(self, op: BinaryOp, x: float, y: float) -> float:
        left = self.evaluate(op.left, x, y)
        right = self.evaluate(op.right, x, y)

        if op.operator == TokenType.PLUS:
            return left + right
        elif op.operator == TokenType.MINUS:
            return left - right
        elif op.operator == TokenType.STAR:
            return left * right
        elif op.operator == TokenType.SLASH:
            if right == 0:
                raise error_division_by_zero(op.span, self.source)
            return left / right
        else:
            raise error_unsupported(f"binary operator {op.operator.name}", op.span, self.source)

    def _eval_unary_op(self, op: UnaryOp, x: float, y: float) -> float:
        operand = self.evaluate(op.operand, x, y)

        if op.operator == TokenType.MINUS:
            return -operand
        elif op.operator == TokenType.PLUS:
            return operand
        else:
            raise error_unsupported(f"unary operator {op.operator.name}", op.span, self.source)

    def _eval_call(self, call: Call, x: float, y: float) -> float:
        func = BUILTIN_FUNCTIONS.get(call.name)
        if func is None:
            raise error_unsupported(f"function '{call.name}'", call.span, self.source)

        arg = self.evaluate(call.argument, x, y)

        if call.name == "sqrt" and arg < 0:
            raise error_domain("sqrt", arg, "non-negative", call.span, self.source)
        if call.name == "log" and arg <= 0:
            raise error_domain("log", arg, "positive", call.span, self.source)

        try:
            return func(arg)
        except ValueError:
            # sin/cos/tan of an infinity and the like
            return math.nan


class FunctionEvaluator:
    """
    A function ``z = f(x, y)`` bound to its expression text.

    The text is parsed on first use and the tree reused for every
    subsequent call.  A text that fails to parse raises the same
    ``ParseError``/``UnsupportedError`` on every call.
    """

    def __init__(self, expression: str):
        self.expression = expression
        self._tree: Optional[Expression] = None
        self._evaluator = Evaluator(expression)

    @property
    def tree(self) -> Expression:
        if self._tree is None:
            self._tree = parse_expression(self.expression)
        return self._tree

    def evaluate(self, x: float, y: float) -> float:
        return self._evaluator.evaluate(self.tree, x, y)

    __call__ = evaluate

    def __repr__(self) -> str:
        return f"FunctionEvaluator({self.expression!r})"


def evaluate(expression: str, x: float, y: float) -> float:
    """Parse ``expression`` and evaluate it at ``(x, y)``."""
    return Evaluator(expression).evaluate(parse_expression(expression), x, y)

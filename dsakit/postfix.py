"""Evaluation of integer postfix (reverse Polish) expressions."""

from __future__ import annotations

import math
import re

_OPERATORS = frozenset("+-*/^")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class PostfixError(ValueError):
    """Raised for an empty, malformed or unevaluable postfix expression."""


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _power(a: int, b: int) -> int:
    if b >= 0:
        return a**b
    if a == 0:
        raise PostfixError("zero cannot be raised to a negative power")
    result = float(a) ** b
    # Round half away from zero.
    return int(math.copysign(math.floor(abs(result) + 0.5), result))


def _apply(op: str, a: int, b: int) -> int:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise PostfixError("division by zero")
        return _truncating_divide(a, b)
    return _power(a, b)


def evaluate_postfix(expression: str) -> int:
    """Evaluate a whitespace-separated postfix expression of integers.

    Supports + - * / ^; division truncates toward zero.
    """
    tokens = expression.split()
    if not tokens:
        raise PostfixError("empty expression")

    stack: list[int] = []
    for token in tokens:
        if token in _OPERATORS:
            if len(stack) < 2:
                raise PostfixError(f"insufficient operands for operator '{token}'")
            b = stack.pop()
            a = stack.pop()
            stack.append(_apply(token, a, b))
        elif _INTEGER.fullmatch(token):
            stack.append(int(token))
        else:
            raise PostfixError(f"invalid token '{token}'")

    if len(stack) != 1:
        raise PostfixError(
            f"malformed expression (stack has {len(stack)} elements remaining)"
        )
    return stack[0]
"""Evaluation of integer postfix (reverse Polish) expressions with 32-bit arithmetic."""

from __future__ import annotations

import re
from typing import Iterable

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_NUMBER = re.compile(r"-?\d+")


class PostfixError(ValueError):
    """The expression is malformed."""


class PostfixDivisionByZero(PostfixError, ZeroDivisionError):
    """The expression divides by zero."""


def _wrap(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def _divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return _wrap(quotient if (a < 0) == (b < 0) else -quotient)


def _parse_number(token: str) -> int:
    match = _NUMBER.match(token)
    if match is None:
        raise PostfixError(f"invalid token {token!r}")
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        raise PostfixError(f"number out of range: {token!r}")
    return value


def evaluate_postfix(tokens: Iterable[str]) -> int:
    """Evaluate ``tokens`` and return the 32-bit result.

    Numbers may carry a leading minus sign; operators are + - * / with
    division truncating toward zero. Raises PostfixDivisionByZero on division
    by zero and PostfixError on any other malformed expression.
    """
    stack: list[int] = []
    for token in tokens:
        if token[:1].isdigit() or (token[:1] == "-" and token[1:2].isdigit()):
            stack.append(_parse_number(token))
        elif token in ("+", "-", "*", "/"):
            if len(stack) < 2:
                raise PostfixError(f"operator {token!r} needs two operands")
            b = stack.pop()
            a = stack.pop()
            if token == "+":
                stack.append(_wrap(a + b))
            elif token == "-":
                stack.append(_wrap(a - b))
            elif token == "*":
                stack.append(_wrap(a * b))
            else:
                if b == 0:
                    raise PostfixDivisionByZero("division by zero")
                stack.append(_divide(a, b))
        else:
            raise PostfixError(f"invalid token {token!r}")
    if len(stack) != 1:
        raise PostfixError("expression does not reduce to a single value")
    return stack[0]
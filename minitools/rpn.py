"""Evaluate reverse Polish notation expressions of single-digit operands."""

from __future__ import annotations

import operator as _op
import sys
from typing import Callable

_DIGITS = "0123456789"
_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}


class RPNError(ValueError):
    """The expression cannot be evaluated."""


class RPNStack:
    """An operand stack that applies the four arithmetic operators."""

    def __init__(self) -> None:
        self._stack: list[float] = []

    def push(self, operand: float) -> None:
        self._stack.append(float(operand))

    def apply(self, operator: str) -> None:
        """Replace the two topmost operands with the result of ``operator``."""
        if len(self._stack) < 2:
            raise RPNError(f"not enough operands for {operator!r}")
        if operator not in _OPERATIONS:
            raise RPNError(f"invalid token {operator!r}")
        right = self._stack.pop()
        left = self._stack.pop()
        if operator == "/" and right == 0:
            raise ZeroDivisionError("division by 0")
        self._stack.append(_OPERATIONS[operator](left, right))

    def value(self) -> float:
        """Return the topmost operand."""
        if not self._stack:
            raise RPNError("stack is empty")
        return self._stack[-1]

    def __len__(self) -> int:
        return len(self._stack)


def _feed(expression: str, stack: RPNStack) -> None:
    if not expression:
        raise RPNError("empty expression")
    for index, char in enumerate(expression):
        if char == " ":
            continue
        if char in _DIGITS:
            stack.push(int(char))
            following = expression[index + 1:index + 2]
            if following and following in _DIGITS:
                raise RPNError("operands must be single digits")
            continue
        stack.apply(char)


def evaluate(expression: str) -> float:
    """Evaluate an expression, which must leave exactly one value."""
    stack = RPNStack()
    _feed(expression, stack)
    if len(stack) != 1:
        raise RPNError("invalid expression")
    return stack.value()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: could not process expression", file=sys.stderr)
        return 1

    stack = RPNStack()
    try:
        _feed(args[0], stack)
    except ZeroDivisionError:
        print("Error: division by 0", file=sys.stderr)
        print("Error: expression wasn't processed.", file=sys.stderr)
        return 1
    except RPNError:
        print("Error: expression wasn't processed.", file=sys.stderr)
        return 1

    if len(stack) != 1:
        print("Error: invalid expression", file=sys.stderr)
        return 1
    print(format(stack.value(), "g"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
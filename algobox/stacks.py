"""Stack-based structures and algorithms."""

from __future__ import annotations

_OPENING = "([{"
_MATCHING = {")": "(", "}": "{", "]": "["}
_DIGITS = "0123456789"


class TwoStacks:
    """Two stacks sharing one fixed-size array, growing from opposite ends."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._items = [0] * size
        self._top1 = -1
        self._top2 = size

    def push1(self, value: int) -> None:
        """Push onto the first stack."""
        if self._top1 >= self._top2 - 1:
            raise OverflowError("stack overflow")
        self._top1 += 1
        self._items[self._top1] = value

    def push2(self, value: int) -> None:
        """Push onto the second stack."""
        if self._top1 >= self._top2 - 1:
            raise OverflowError("stack overflow")
        self._top2 -= 1
        self._items[self._top2] = value

    def pop1(self) -> int:
        """Pop from the first stack."""
        if self._top1 < 0:
            raise IndexError("stack underflow")
        value = self._items[self._top1]
        self._top1 -= 1
        return value

    def pop2(self) -> int:
        """Pop from the second stack."""
        if self._top2 >= len(self._items):
            raise IndexError("stack underflow")
        value = self._items[self._top2]
        self._top2 += 1
        return value


def is_balanced(expression: str) -> bool:
    """Return whether the brackets in ``expression`` are balanced.

    Any character that is not an opening bracket is treated as a closing one,
    so it fails when no bracket is open; only ``)``, ``}`` and ``]`` pop.
    """
    stack: list[str] = []
    for char in expression:
        if char in _OPENING:
            stack.append(char)
            continue
        if not stack:
            return False
        expected = _MATCHING.get(char)
        if expected is not None and stack.pop() != expected:
            return False
    return not stack


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for char in expression:
        if char in _DIGITS:
            stack.append(int(char))
            continue
        operation = _OPERATIONS.get(char)
        if operation is None:
            raise ValueError(f"unknown operator {char!r}")
        if len(stack) < 2:
            raise ValueError("malformed postfix expression")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ValueError("empty postfix expression")
    return stack[-1]
"""Bracket balance checking with nesting precedence: [ holds { holds (."""

from __future__ import annotations

_PRECEDENCE = {"[": 1, "]": 1, "{": 2, "}": 2, "(": 3, ")": 3}
_OPENING = frozenset("[{(")
_CLOSING = frozenset("]})")


def bracket_precedence(char: str) -> int:
    """1 for square, 2 for curly, 3 for round brackets, 0 for anything else."""
    return _PRECEDENCE.get(char, 0)


def are_brackets_balanced(expression: str) -> bool:
    """True when brackets match and nest only inside ones of lower precedence.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for char in expression:
        if char in _OPENING:
            if stack and bracket_precedence(char) < bracket_precedence(stack[-1]):
                return False
            stack.append(char)
        elif char in _CLOSING:
            if not stack or bracket_precedence(stack[-1]) != bracket_precedence(char):
                return False
            stack.pop()
    return not stack
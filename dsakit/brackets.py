"""Checking that brackets in an expression are balanced."""

from __future__ import annotations

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def is_balanced(expression: str) -> bool:
    """Return True if every (, { and [ is closed in the right order.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack
"""Parenthesis matching checks."""

import sys
from typing import Optional, Sequence

_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_PAIRS.values())


def longest_valid_parentheses(text: str) -> int:
    """Return twice the number of ')' that close an earlier unmatched '('."""
    open_count = 0
    matched = 0
    for c in text:
        if c == "(":
            open_count += 1
        elif c == ")" and open_count:
            open_count -= 1
            matched += 1
    return matched * 2


def is_valid_parentheses(text: str) -> bool:
    """Return whether every bracket in ``text`` is closed in the right order."""
    expected = []
    for c in text:
        if c in _PAIRS:
            expected.append(_PAIRS[c])
        elif c in _CLOSERS:
            if not expected or expected.pop() != c:
                return False
    return not expected


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print both checks for the given text, or for a sample string."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = args[0] if args else "(()"
    print(longest_valid_parentheses(text))
    print(is_valid_parentheses(text))
    return 0
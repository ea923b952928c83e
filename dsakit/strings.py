"""String and number problems: palindromes, brackets, unique characters."""

from __future__ import annotations

from collections import Counter

_PAIRS = {"(": ")", "{": "}", "[": "]"}


def is_palindrome_number(x: int) -> bool:
    """Return True if the decimal digits of x read the same both ways."""
    if x < 0:
        return False
    reversed_value = 0
    remaining = x
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value == x


def is_pair(last: str, cur: str) -> bool:
    """Return True if last opens the bracket that cur closes."""
    return _PAIRS.get(last) == cur


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in s is closed in the right order.

    Any character that does not close the bracket on top is pushed, so
    characters other than brackets make the string invalid.
    """
    stack: list[str] = []
    for ch in s:
        if stack and is_pair(stack[-1], ch):
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def is_valid_palindrome(s: str) -> bool:
    """Return True if the ASCII letters and digits of s form a palindrome, ignoring case."""
    cleaned = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def first_uniq_char(s: str) -> int:
    """Return the index of the first character occurring once in s, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), -1)
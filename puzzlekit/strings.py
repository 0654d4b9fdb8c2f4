"""String puzzles: bracket matching, word concatenations, zigzags and digit reversal."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_CLOSING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING.values())


def is_valid_parentheses(text: str) -> bool:
    """Whether every bracket in ``text`` is closed in the right order.

    Characters other than ``()[]{}`` are ignored.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif char in _CLOSING:
            if not stack or stack.pop() != _CLOSING[char]:
                return False
    return not stack


def find_substring(text: str, words: Sequence[str]) -> list[int]:
    """Start indices of substrings that are a concatenation of all ``words``.

    Every word is expected to have the length of the first one. Indices are
    listed by their offset modulo the word length, then in increasing order.
    """
    if not text or not words:
        return []
    width = len(words[0])
    if width == 0:
        raise ValueError("words must not be empty strings")
    if len(text) < width:
        return []
    wanted = Counter(words)
    result: list[int] = []
    for offset in range(width):
        found: Counter[str] = Counter()
        left = offset
        matched = 0
        for start in range(offset, len(text) - width + 1, width):
            word = text[start:start + width]
            if word not in wanted:
                found.clear()
                matched = 0
                left = start + width
                continue
            found[word] += 1
            matched += 1
            while found[word] > wanted[word]:
                found[text[left:left + width]] -= 1
                matched -= 1
                left += width
            if matched == len(words):
                result.append(left)
    return result


def length_of_longest_substring(text: str) -> int:
    """Length of the longest substring of ``text`` with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(text):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def zigzag_convert(text: str, num_rows: int) -> str:
    """``text`` written in a zigzag over ``num_rows`` rows, read row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be a positive integer")
    if num_rows == 1 or num_rows >= len(text):
        return text
    cycle = 2 * num_rows - 2
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for index, char in enumerate(text):
        phase = index % cycle
        rows[min(phase, cycle - phase)].append(char)
    return "".join("".join(row) for row in rows)


def reverse_integer(x: int) -> int:
    """The digits of ``x`` reversed, keeping its sign; 0 if outside 32-bit range."""
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if not INT32_MIN <= reversed_value <= INT32_MAX:
        return 0
    return reversed_value
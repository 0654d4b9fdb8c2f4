"""Solutions to the introductory problems of the CSES problem set."""

from __future__ import annotations

from collections import Counter
from itertools import groupby

MOD = 10**9 + 7
GRAY_CODE_MAX_BITS = 16

_SMALL_BOARDS = {1: 0, 2: 6, 3: 28, 4: 96}


def bit_strings(n: int) -> int:
    """Number of bit strings of length ``n``, modulo 10**9 + 7."""
    if n < 0:
        raise ValueError("length must be non-negative")
    return pow(2, n, MOD)


def coin_piles(a: int, b: int) -> bool:
    """Whether piles of ``a`` and ``b`` coins can both be emptied.

    Each move takes one coin from one pile and two from the other.
    """
    if a < 0 or b < 0:
        raise ValueError("pile sizes must be non-negative")
    return a <= 2 * b and b <= 2 * a and (a + b) % 3 == 0


def gray_code(n: int) -> list[str]:
    """The reflected Gray code of ``n`` bits, as binary strings."""
    if not 0 <= n <= GRAY_CODE_MAX_BITS:
        raise ValueError(f"bit count must be between 0 and {GRAY_CODE_MAX_BITS}")
    if n == 0:
        return [""]
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(1 << n)]


def increasing_array(values: list[int]) -> int:
    """Minimum total increments that make ``values`` non-decreasing."""
    moves = 0
    ceiling: int | None = None
    for value in values:
        if ceiling is not None and value < ceiling:
            moves += ceiling - value
        else:
            ceiling = value
    return moves


def missing_number(n: int, numbers: list[int]) -> int:
    """The one number of 1..n that is absent from ``numbers``."""
    return n * (n + 1) // 2 - sum(numbers)


def number_spiral(y: int, x: int) -> int:
    """The number at row ``y``, column ``x`` of the number spiral."""
    if y >= x:
        base = (y - 1) * (y - 1)
        return base + 2 * y - x if y % 2 == 0 else base + x
    base = (x - 1) * (x - 1)
    return base + y if x % 2 == 0 else base + 2 * x - y


def palindrome_reorder(text: str) -> str | None:
    """A palindrome made of the letters of ``text``, or None if there is none.

    A text that is already a palindrome is returned unchanged.
    """
    if text == text[::-1]:
        return text
    counts = Counter(text)
    odd = [char for char, count in counts.items() if count % 2]
    if len(odd) > 1:
        return None
    half = "".join(char * (counts[char] // 2) for char in sorted(counts))
    return half + "".join(odd) + half[::-1]


def beautiful_permutation(n: int) -> list[int] | None:
    """A permutation of 1..n with no adjacent consecutive numbers, or None."""
    if n >= 5:
        return list(range(1, n + 1, 2)) + list(range(2, n + 1, 2))
    if n == 4:
        return [3, 1, 4, 2]
    if n == 1:
        return [1]
    return None


def longest_repetition(text: str) -> int:
    """Length of the longest run of one repeated character in ``text``."""
    if not text:
        raise ValueError("text must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(text))


def trailing_zeros(n: int) -> int:
    """Number of trailing zeros of n factorial."""
    zeros = 0
    power = 5
    while n // power > 0:
        zeros += n // power
        power *= 5
    return zeros


def two_knights(n: int) -> list[int]:
    """Counts of two-knight placements for boards of size 1..n."""
    return [
        _SMALL_BOARDS[k]
        if k in _SMALL_BOARDS
        else ((k * k * (k * k - 1) // 2) - 16) * (k - 4) * (k - 4)
        for k in range(1, n + 1)
    ]


def two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two sets of equal sum, or None if that cannot be done."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n % 4 == 0:
        quarter = n // 4
        first = list(range(1, quarter + 1)) + list(range(3 * quarter + 1, n + 1))
        second = list(range(quarter + 1, 3 * quarter + 1))
        return first, second
    if n % 4 == 3:
        first = [1, n - 1]
        second = [n]
        for i in range(2, n // 2, 2):
            first += (i, n - i)
            second += (i + 1, n - i - 1)
        return sorted(first), sorted(second)
    return None


def weird_algorithm(n: int) -> list[int]:
    """The Collatz sequence starting at ``n`` and ending at 1."""
    if n < 1:
        raise ValueError("start must be a positive integer")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence
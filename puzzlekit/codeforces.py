"""Solutions to a selection of Codeforces problems."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from itertools import combinations, count, islice, permutations, product, accumulate


def combination_lock(rotations: Sequence[int]) -> bool:
    """Whether signs can be chosen for the rotations so the pointer returns to zero."""
    return any(
        sum(sign * angle for sign, angle in zip(signs, rotations)) % 360 == 0
        for signs in product((-1, 1), repeat=len(rotations))
    )


def _small_divisors(n: int) -> Iterator[int]:
    """Divisors d of n with 2 <= d and d * d <= n, in increasing order."""
    return (d for d in range(2, math.isqrt(n) + 1) if n % d == 0)


def product_of_three(n: int) -> tuple[int, int, int] | None:
    """Three distinct factors, each at least 2, whose product is ``n``, or None."""
    for a in _small_divisors(n):
        rest = n // a
        for b in _small_divisors(rest):
            c = rest // b
            if len({a, b, c}) == 3:
                return a, b, c
    return None


def inverse_permutation(permutation: Sequence[int]) -> list[int]:
    """The inverse of a permutation of 1..n, written one-based."""
    inverse = [0] * len(permutation)
    for position, value in enumerate(permutation, start=1):
        inverse[value - 1] = position
    return inverse


def segment_weights(text: str, queries: Sequence[tuple[int, int]]) -> list[int]:
    """Sum of alphabet positions of letters in each one-based inclusive segment."""
    prefix = list(accumulate((ord(char) - 96 for char in text), initial=0))
    answers = []
    for left, right in queries:
        if not 1 <= left <= right <= len(text):
            raise ValueError(f"segment ({left}, {right}) is out of range")
        answers.append(prefix[right] - prefix[left - 1])
    return answers


def _liked_numbers() -> Iterator[int]:
    return (k for k in count(1) if k % 3 != 0 and k % 10 != 3)


def dislike_of_threes(k: int) -> int:
    """The k-th positive integer neither divisible by 3 nor ending in 3."""
    if k < 1:
        raise ValueError("k must be a positive integer")
    return next(islice(_liked_numbers(), k - 1, None))


def infinity_table(k: int) -> tuple[int, int]:
    """Row and column of the number ``k`` in the infinite filling table."""
    if k < 1:
        raise ValueError("k must be a positive integer")
    p = math.isqrt(k)
    if p * p == k:
        return p, 1
    t = k - p * p - p - 1
    if t > 0:
        return p + 1, p + 1 - t
    return t + p + 1, p + 1


def computer_game(top: str, bottom: str) -> bool:
    """Whether the two-row level can be crossed from the first to the last column."""
    if len(top) != len(bottom):
        raise ValueError("rows must have the same length")
    return all(a == "0" or b == "0" for a, b in zip(top[1:], bottom[1:]))


def divide_into_groups(schedules: Sequence[Sequence[int]]) -> bool:
    """Whether students can be split into two equal groups on two different weekdays."""
    half = len(schedules) // 2
    for i, j in combinations(range(5), 2):
        both = sum(1 for row in schedules if row[i] == 1 and row[j] == 1)
        only_i = sum(row[i] for row in schedules if not (row[i] == 1 and row[j] == 1))
        only_j = sum(row[j] for row in schedules if not (row[i] == 1 and row[j] == 1))
        if only_i < half and both >= half - only_i:
            both -= half - only_i
            only_i = half
        if only_j < half and both >= half - only_j:
            only_j = half
        if only_i >= half and only_j >= half:
            return True
    return False


def beautiful_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Moves needed to bring the single 1 of a 5x5 grid to its centre."""
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if value == 1:
                return abs(i - 2) + abs(j - 2)
    raise ValueError("grid holds no 1")


def count_home_uniform_games(uniforms: Sequence[tuple[int, int]]) -> int:
    """Number of games in which the host wears its away uniform."""
    return sum(
        1
        for (home, _), (_, away) in permutations(uniforms, 2)
        if home == away
    )


def game_with_sticks(a: int, b: int) -> str:
    """The winner of the grid-of-sticks game with ``a`` and ``b`` sticks."""
    # Each move removes one horizontal and one vertical stick, so the game
    # lasts exactly as many moves as the smaller count; the first player
    # wins when that number is odd.
    moves = min(a, b)
    if moves % 2 == 1:
        return "Akshat"
    return "Malvika"
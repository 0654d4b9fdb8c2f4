"""Array puzzles: water containers, triple sums, colour sorting and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import combinations

_COLOURS = (0, 1, 2)


def max_area(heights: Sequence[int]) -> int:
    """Largest amount of water held between two of the vertical lines."""
    if len(heights) < 2:
        raise ValueError("at least two lines are needed")
    i, j = 0, len(heights) - 1
    best = -1
    while i < j:
        best = max(best, min(heights[i], heights[j]) * (j - i))
        if heights[i] < heights[j]:
            i += 1
        else:
            j -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sorted triples of elements that sum to zero, in sorted order."""
    ordered = sorted(nums)
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(ordered):
        j, k = i + 1, len(ordered) - 1
        while j < k:
            total = first + ordered[j] + ordered[k]
            if total > 0:
                k -= 1
            elif total < 0:
                j += 1
            else:
                found.add((first, ordered[j], ordered[k]))
                j += 1
                k -= 1
    return [list(triple) for triple in sorted(found)]


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """The sum of three elements closest to ``target``; the first such in index order."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are needed")
    return min(
        (sum(triple) for triple in combinations(nums, 3)),
        key=lambda total: abs(total - target),
    )


def trap(heights: Sequence[int]) -> int:
    """Units of rain water trapped by an elevation map."""
    water = 0
    low, high = 0, len(heights) - 1
    left = right = 0
    while low < high:
        if heights[low] <= heights[high]:
            if heights[low] >= left:
                left = heights[low]
            else:
                water += left - heights[low]
            low += 1
        else:
            if heights[high] >= right:
                right = heights[high]
            else:
                water += right - heights[high]
            high -= 1
    return water


def sort_colors(nums: list[int]) -> None:
    """Sort a list of the colours 0, 1 and 2 in place."""
    counts = Counter(nums)
    unknown = set(counts) - set(_COLOURS)
    if unknown:
        raise ValueError(f"unknown colours: {sorted(unknown)}")
    nums[:] = [colour for colour in _COLOURS for _ in range(counts[colour])]


def min_taps(n: int, ranges: Sequence[int]) -> int | None:
    """Fewest taps that water the garden [0, n], or None if it cannot be watered."""
    if len(ranges) != n + 1:
        raise ValueError("there must be one range for each of the n + 1 taps")
    reach = [(i - r, i + r) for i, r in enumerate(ranges)]
    covered = farthest = 0
    taps = 0
    while farthest < n:
        farthest = max([farthest, *(right for left, right in reach if left <= covered)])
        if covered == farthest:
            return None
        taps += 1
        covered = farthest
    return taps


def restore_matrix(row_sum: Sequence[int], col_sum: Sequence[int]) -> list[list[int]]:
    """A non-negative matrix with the given row and column sums."""
    remaining_cols = list(col_sum)
    matrix = []
    for remaining in row_sum:
        row = []
        for j, available in enumerate(remaining_cols):
            cell = min(remaining, available)
            row.append(cell)
            remaining -= cell
            remaining_cols[j] -= cell
        matrix.append(row)
    return matrix


def max_increase_keeping_skyline(grid: Sequence[Sequence[int]]) -> int:
    """Total height that can be added to buildings without changing either skyline."""
    row_max = [max([0, *row]) for row in grid]
    col_max = [max([0, *column]) for column in zip(*grid)]
    return sum(
        max(0, min(top, side) - height)
        for top, row in zip(row_max, grid)
        for side, height in zip(col_max, row)
    )
"""Binary searches over mountain arrays, sorted matrices and rotated arrays."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class MountainArray:
    """Read-only access to an array that strictly rises, then strictly falls."""

    values: Sequence[int]

    def get(self, index: int) -> int:
        """The value at ``index``."""
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)


def _search_slope(
    mountain: MountainArray, target: int, lo: int, hi: int, descending: bool
) -> int:
    while lo <= hi:
        mid = (lo + hi) // 2
        value = mountain.get(mid)
        if value == target:
            return mid
        if (value > target) != descending:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


def find_in_mountain_array(target: int, mountain: MountainArray) -> int:
    """The smallest index holding ``target`` in a mountain array, or -1."""
    size = len(mountain)
    if size == 0:
        return -1
    lo, hi = 0, size - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if mountain.get(mid) > mountain.get(mid + 1):
            hi = mid
        else:
            lo = mid + 1
    peak = lo
    index = _search_slope(mountain, target, 0, peak, descending=False)
    if index == -1:
        index = _search_slope(mountain, target, peak, size - 1, descending=True)
    return index


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` is in a matrix whose rows and columns are sorted."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def _contains(nums: Sequence[int], lo: int, hi: int, target: int) -> bool:
    """Whether the sorted slice ``nums[lo:hi + 1]`` holds ``target``."""
    if hi < lo:
        return False
    index = bisect_left(nums, target, lo, hi + 1)
    return index <= hi and nums[index] == target


def _find_pivot(nums: Sequence[int]) -> int | None:
    """Index of the element just before the rotation point, if there is one."""
    s, e = 0, len(nums) - 1
    while s <= e:
        mid = (s + e) // 2
        if mid < e and nums[mid] > nums[mid + 1]:
            return mid
        if mid > s and nums[mid - 1] > nums[mid]:
            return mid - 1
        if nums[mid] == nums[s] and nums[mid] == nums[e]:
            if s < e and nums[s] > nums[s + 1]:
                return s
            s += 1
            if e > s and nums[e - 1] > nums[e]:
                return e - 1
            e -= 1
        elif nums[s] < nums[mid] or (nums[s] == nums[mid] and nums[mid] > nums[e]):
            s = mid + 1
        else:
            e = mid - 1
    return None


def search_rotated(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` is in a rotated non-decreasing array, duplicates allowed."""
    if not nums:
        return False
    if len(nums) == 1:
        return nums[0] == target
    last = len(nums) - 1
    pivot = _find_pivot(nums)
    if pivot is None:
        return _contains(nums, 0, last, target)
    if nums[pivot] == target:
        return True
    if target >= nums[0]:
        return _contains(nums, 0, pivot - 1, target)
    return _contains(nums, pivot + 1, last, target)


def range_bitwise_and(left: int, right: int) -> int:
    """Bitwise AND of every integer from ``left`` to ``right`` inclusive."""
    if left == 0:
        return 0
    shift = 0
    while left != right:
        left >>= 1
        right >>= 1
        shift += 1
    return left << shift
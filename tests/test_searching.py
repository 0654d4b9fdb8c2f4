from functools import reduce
from operator import and_

import pytest

from puzzlekit.searching import (
    MountainArray,
    find_in_mountain_array,
    range_bitwise_and,
    search_matrix,
    search_rotated,
)

MOUNTAIN = [1, 2, 3, 4, 5, 3, 1]
MATRIX = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]


def test_mountain_array_access():
    mountain = MountainArray(MOUNTAIN)
    assert len(mountain) == len(MOUNTAIN)
    assert [mountain.get(i) for i in range(len(mountain))] == MOUNTAIN


@pytest.mark.parametrize("target", sorted(set(MOUNTAIN)))
def test_find_in_mountain_returns_first_index(target):
    assert find_in_mountain_array(target, MountainArray(MOUNTAIN)) == MOUNTAIN.index(target)


@pytest.mark.parametrize("target", [0, 6, 100])
def test_find_in_mountain_missing(target):
    assert find_in_mountain_array(target, MountainArray(MOUNTAIN)) == -1


def test_find_in_mountain_on_descending_side_only():
    values = [0, 5, 9, 8, 7, 2]
    for target in values:
        assert find_in_mountain_array(target, MountainArray(values)) == values.index(target)


def test_search_matrix_finds_every_element():
    assert all(search_matrix(MATRIX, value) for row in MATRIX for value in row)


def test_search_matrix_rejects_absent_values():
    present = {value for row in MATRIX for value in row}
    absent = [value for value in range(-1, 62) if value not in present]
    assert not any(search_matrix(MATRIX, value) for value in absent)


def test_search_matrix_empty():
    assert search_matrix([], 1) is False
    assert search_matrix([[]], 1) is False


def _rotations(values):
    return [values[k:] + values[:k] for k in range(len(values))]


BASES = [
    [0, 1, 2, 4, 5, 6, 7],
    [1, 1, 1, 1, 2],
    [1, 2, 2, 2, 2],
    [1, 1, 2, 2, 3, 3],
    [1, 1, 1, 1, 1, 1, 2],
    [3, 3, 3],
    [1, 3],
    [4],
]


@pytest.mark.parametrize("nums", [r for base in BASES for r in _rotations(base)])
def test_search_rotated_matches_membership(nums):
    for target in range(-1, 9):
        assert search_rotated(nums, target) == (target in nums), (nums, target)


def test_search_rotated_example():
    nums = [2, 5, 6, 0, 0, 1, 2]
    assert search_rotated(nums, 0) is True
    assert search_rotated(nums, 3) is False


def test_search_rotated_empty():
    assert search_rotated([], 1) is False


def test_range_bitwise_and_example():
    assert range_bitwise_and(5, 7) == 4


def test_range_bitwise_and_with_zero():
    assert range_bitwise_and(0, 2**31 - 1) == 0


@pytest.mark.parametrize("left", range(0, 40))
def test_range_bitwise_and_matches_fold(left):
    for right in range(left, 70):
        assert range_bitwise_and(left, right) == reduce(and_, range(left, right + 1))


def test_range_bitwise_and_single_value():
    assert range_bitwise_and(12345, 12345) == 12345
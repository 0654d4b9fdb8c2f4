# puzzlekit

A collection of solved algorithm puzzles: short problems from competitive
programming sites and interview question banks. Each one is a plain Python
function that takes ordinary Python values and returns a result.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `puzzlekit.cses` | `bit_strings`, `coin_piles`, `gray_code`, `increasing_array`, `missing_number`, `number_spiral`, `palindrome_reorder`, `beautiful_permutation`, `longest_repetition`, `trailing_zeros`, `two_knights`, `two_sets`, `weird_algorithm` |
| `puzzlekit.codeforces` | `combination_lock`, `product_of_three`, `inverse_permutation`, `segment_weights`, `dislike_of_threes`, `infinity_table`, `computer_game`, `divide_into_groups`, `beautiful_matrix`, `count_home_uniform_games`, `game_with_sticks` |
| `puzzlekit.codechef` | `is_consistent`: checks a log of arrivals and departures against a capacity |
| `puzzlekit.structures` | `TreeNode` and `ListNode`, with `level_order`, `has_cycle` and `remove_nth_from_end` |
| `puzzlekit.searching` | `MountainArray`, `find_in_mountain_array`, `search_matrix`, `search_rotated`, `range_bitwise_and` |
| `puzzlekit.arrays` | `max_area`, `three_sum`, `three_sum_closest`, `trap`, `sort_colors`, `min_taps`, `restore_matrix`, `max_increase_keeping_skyline` |
| `puzzlekit.strings` | `is_valid_parentheses`, `find_substring`, `length_of_longest_substring`, `zigzag_convert`, `reverse_integer` |
| `puzzlekit.grids` | `solve_sudoku`, `solve_n_queens`, `spiral_order`, `matrix_reshape` |

## Examples

```python
from puzzlekit.cses import gray_code, two_knights
from puzzlekit.arrays import trap, three_sum
from puzzlekit.strings import is_valid_parentheses
from puzzlekit.grids import solve_n_queens

gray_code(2)            # ['00', '01', '11', '10']
two_knights(3)          # [0, 6, 28]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
three_sum([-1, 0, 1, 2, -1, -4])             # [[-1, -1, 2], [-1, 0, 1]]
is_valid_parentheses("([]{})")               # True
len(solve_n_queens(8))                       # 92
```

Linked structures come from the `structures` module:

```python
from puzzlekit.structures import TreeNode, level_order

root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
level_order(root)       # [[3], [9, 20], [15, 7]]
```

A mountain array is read through `MountainArray`, which gives access to its
values with `get` and `len`:

```python
from puzzlekit.searching import MountainArray, find_in_mountain_array

find_in_mountain_array(3, MountainArray([1, 2, 3, 4, 5, 3, 1]))  # 2
```

## Results and errors

- Problems that may have no answer return `None` in that case:
  `palindrome_reorder("ABC")`, `beautiful_permutation(3)`, `two_sets(2)`,
  `product_of_three(8)` and `min_taps` for a garden that cannot be watered.
- Searches that find nothing return `-1` (`find_in_mountain_array`) or
  `False` (`search_matrix`, `search_rotated`).
- Input that breaks a function's preconditions raises `ValueError`, for
  example a negative length for `bit_strings`, an empty text for
  `longest_repetition` or a range list of the wrong size for `min_taps`.
- `solve_sudoku` and `sort_colors` change the list they are given in place.

## What it does not do

The package is a library of functions only. It has no command-line program
and reads no input files or standard input; callers pass the problem data as
Python values and format the results themselves.
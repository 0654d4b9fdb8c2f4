"""Grid puzzles: sudoku, n queens, spiral reading and reshaping."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain

EMPTY = "."
DIGITS = "123456789"


def _is_safe(board: list[list[str]], digit: str, row: int, col: int) -> bool:
    box_row, box_col = row // 3 * 3, col // 3 * 3
    for x in range(9):
        if (
            board[row][x] == digit
            or board[x][col] == digit
            or board[box_row + x // 3][box_col + x % 3] == digit
        ):
            return False
    return True


def _first_empty(board: list[list[str]]) -> tuple[int, int] | None:
    for row, cells in enumerate(board):
        for col, cell in enumerate(cells):
            if cell == EMPTY:
                return row, col
    return None


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the ``.`` cells of a 9x9 board in place; return whether it was solved."""
    cell = _first_empty(board)
    if cell is None:
        return True
    row, col = cell
    for digit in DIGITS:
        if _is_safe(board, digit, row, col):
            board[row][col] = digit
            if solve_sudoku(board):
                return True
            board[row][col] = EMPTY
    return False


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of ``Q`` and ``.``.

    Queens are placed column by column, trying rows from the top.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    solutions: list[list[str]] = []
    rows_of_columns: list[int] = []
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()

    def place(col: int) -> None:
        if col == n:
            board = [["."] * n for _ in range(n)]
            for column, row in enumerate(rows_of_columns):
                board[row][column] = "Q"
            solutions.append(["".join(line) for line in board])
            return
        for row in range(n):
            if row in used_rows or row - col in used_diagonals or row + col in used_anti_diagonals:
                continue
            used_rows.add(row)
            used_diagonals.add(row - col)
            used_anti_diagonals.add(row + col)
            rows_of_columns.append(row)
            place(col + 1)
            rows_of_columns.pop()
            used_rows.remove(row)
            used_diagonals.remove(row - col)
            used_anti_diagonals.remove(row + col)

    place(0)
    return solutions


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """The elements of ``matrix`` read clockwise in a spiral from the top left."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    order: list[int] = []
    while left <= right and top <= bottom:
        order.extend(matrix[top][left:right + 1])
        order.extend(matrix[row][right] for row in range(top + 1, bottom + 1))
        if top != bottom:
            order.extend(matrix[bottom][col] for col in range(right - 1, left - 1, -1))
        if left != right:
            order.extend(matrix[row][left] for row in range(bottom - 1, top, -1))
        top += 1
        bottom -= 1
        left += 1
        right -= 1
    return order


def matrix_reshape(
    matrix: Sequence[Sequence[int]], rows: int, cols: int
) -> list[list[int]]:
    """``matrix`` refilled row by row into ``rows`` x ``cols``.

    A copy of the original is returned when the element counts differ.
    """
    width = len(matrix[0]) if matrix else 0
    if len(matrix) * width != rows * cols:
        return [list(row) for row in matrix]
    flat = list(chain.from_iterable(matrix))
    return [flat[i * cols:(i + 1) * cols] for i in range(rows)]
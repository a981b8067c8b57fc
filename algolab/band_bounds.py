"""Permutation moves and band-width bounds for sparse square matrices.

A matrix is a square sequence of rows.  A cell counts as a non-zero entry
when it is the string ``"X"`` or, for any other type, when it is truthy.
"""

from __future__ import annotations

from typing import Any, Sequence

NONZERO_MARK = "X"


def _is_set(cell: Any) -> bool:
    if isinstance(cell, str):
        return cell == NONZERO_MARK
    return bool(cell)


def _move(seq: Sequence[Any], source: int, target: int) -> list[Any]:
    items = list(seq)
    if not (0 <= source < len(items) and 0 <= target < len(items)):
        raise IndexError(f"positions {source} and {target} out of range for length {len(items)}")
    items.insert(target, items.pop(source))
    return items


def float_left(seq: Sequence[Any], source: int, target: int) -> list[Any]:
    """Return a copy with the item at source moved left to target, shifting the rest right."""
    if target > source:
        raise ValueError(f"cannot float left from {source} to {target}")
    return _move(seq, source, target)


def float_right(seq: Sequence[Any], source: int, target: int) -> list[Any]:
    """Return a copy with the item at source moved right to target, shifting the rest left."""
    if target < source:
        raise ValueError(f"cannot float right from {source} to {target}")
    return _move(seq, source, target)


def _grid(
    matrix: Sequence[Sequence[Any]], row_perm: Sequence[int], col_perm: Sequence[int]
) -> list[list[bool]]:
    """The permuted matrix as booleans, after checking shapes."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    if len(row_perm) != n or len(col_perm) != n:
        raise ValueError("permutations must have one entry per row and column")
    if sorted(row_perm) != list(range(n)) or sorted(col_perm) != list(range(n)):
        raise ValueError("row and column orders must be permutations of 0..n-1")
    return [[_is_set(matrix[r][c]) for c in col_perm] for r in row_perm]


def _fixed_rows_bound(grid: list[list[bool]], n_fixed_rows: int, n_fixed_cols: int) -> int:
    n = len(grid)
    best = 0
    for i in range(n_fixed_rows):
        row = grid[i]
        upper = next((i - j + 1 for j in range(i + 1) if row[j]), 0)
        lower = next((j - i + 1 for j in range(n_fixed_cols - 1, i - 1, -1) if row[j]), 0)
        base = n_fixed_cols - i
        spill = base + sum(row[j] for j in range(n_fixed_cols, n))
        if spill > base:
            best = max(best, spill)
        best = max(best, upper, lower)
    return best


def _fixed_cols_bound(grid: list[list[bool]], n_fixed_rows: int, n_fixed_cols: int) -> int:
    n = len(grid)
    best = 0
    for i in range(n_fixed_cols):
        left = next((i - j + 1 for j in range(n_fixed_rows) if grid[j][i]), 0)
        right = next((j - i + 1 for j in range(n_fixed_rows - 1, i - 1, -1) if grid[j][i]), 0)
        base = n_fixed_rows - i
        spill = base + sum(grid[j][i] for j in range(n_fixed_rows, n))
        if spill > base:
            best = max(best, spill)
        best = max(best, left, right)
    return best


def _unfixed_bound(grid: list[list[bool]], n_fixed_rows: int, n_fixed_cols: int) -> int:
    n = len(grid)
    row_counts = (sum(grid[i]) for i in range(n_fixed_rows, n))
    col_counts = (sum(grid[j][i] for j in range(n)) for i in range(n_fixed_cols, n))
    rows = max(row_counts, default=0)
    cols = max(col_counts, default=0)
    return max((rows + 1) // 2, (cols + 1) // 2)


def lower_bound(
    matrix: Sequence[Sequence[Any]],
    row_perm: Sequence[int],
    col_perm: Sequence[int],
    n_fixed_rows: int,
    n_fixed_cols: int,
) -> int:
    """Lower bound on the band width reachable once the leading rows and columns are fixed."""
    grid = _grid(matrix, row_perm, col_perm)
    n = len(grid)
    if not (0 <= n_fixed_rows <= n and 0 <= n_fixed_cols <= n):
        raise ValueError("fixed row and column counts must lie between 0 and the matrix size")
    return max(
        _fixed_rows_bound(grid, n_fixed_rows, n_fixed_cols),
        _fixed_cols_bound(grid, n_fixed_rows, n_fixed_cols),
        _unfixed_bound(grid, n_fixed_rows, n_fixed_cols),
    )


def band_width(
    matrix: Sequence[Sequence[Any]], row_perm: Sequence[int], col_perm: Sequence[int]
) -> int:
    """Band width of the permuted matrix: 1 + the largest |j - i| of a non-zero entry, 0 if none."""
    grid = _grid(matrix, row_perm, col_perm)
    return max(
        (1 + abs(j - i) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell),
        default=0,
    )
"""Searches for row and column orders that give a sparse matrix its narrowest band."""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .band_bounds import band_width, float_left, lower_bound

NONZERO_MARK = "X"


@dataclass(frozen=True)
class BandSolution:
    """A band width together with the row and column orders that reach it."""

    band: int
    row_perm: tuple[int, ...]
    col_perm: tuple[int, ...]


def _validate(matrix: Sequence[Sequence[Any]]) -> int:
    n = len(matrix)
    if n == 0:
        raise ValueError("matrix must not be empty")
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return n


def _marked(cell: Any) -> bool:
    if isinstance(cell, str):
        return cell == NONZERO_MARK
    return bool(cell)


def parse_matrix(text: str) -> list[list[str]]:
    """Read a size n followed by n*n single-character cells, whitespace optional."""
    tokens = text.split()
    if not tokens:
        raise ValueError("missing matrix size")
    try:
        n = int(tokens[0])
    except ValueError:
        raise ValueError(f"invalid matrix size {tokens[0]!r}") from None
    if n < 1:
        raise ValueError(f"matrix size must be positive, got {n}")
    cells = "".join(tokens[1:])
    if len(cells) < n * n:
        raise ValueError(f"expected {n * n} cells, got {len(cells)}")
    return [list(cells[r * n : (r + 1) * n]) for r in range(n)]


def minimize_band(matrix: Sequence[Sequence[Any]]) -> BandSolution:
    """Depth-first branch and bound, fixing a column and then a row at each level.

    Candidates are tried by increasing lower bound, the rightmost index first on ties,
    and a branch is dropped once its bound cannot beat the best band found.
    """
    n = _validate(matrix)
    best: Optional[BandSolution] = None

    def search(rows: list[int], cols: list[int], fixed_rows: int, fixed_cols: int) -> None:
        nonlocal best
        if fixed_rows == n - 1 and fixed_cols == n - 1:
            band = band_width(matrix, rows, cols)
            if best is None or band < best.band:
                best = BandSolution(band, tuple(rows), tuple(cols))
            return

        fix_column = fixed_rows == fixed_cols
        candidates = []
        if fix_column:
            for i in range(fixed_cols, n):
                trial = float_left(cols, i, fixed_cols)
                lb = lower_bound(matrix, rows, trial, fixed_rows, fixed_cols + 1)
                candidates.append((lb, i, trial))
        else:
            for i in range(fixed_rows, n):
                trial = float_left(rows, i, fixed_rows)
                lb = lower_bound(matrix, trial, cols, fixed_rows + 1, fixed_cols)
                candidates.append((lb, i, trial))
        candidates.sort(key=lambda c: (c[0], -c[1]))

        for lb, _, trial in candidates:
            if best is not None and lb >= best.band:
                break
            if fix_column:
                search(rows, trial, fixed_rows, fixed_cols + 1)
            else:
                search(trial, cols, fixed_rows + 1, fixed_cols)

    identity = list(range(n))
    search(identity, list(identity), 0, 0)
    assert best is not None
    return best


def minimize_band_best_first(matrix: Sequence[Sequence[Any]]) -> BandSolution:
    """Best-first search: always expand the open node with the smallest bound.

    Ties go to the deeper node, then to the one built from the larger index.
    The first complete node taken from the queue is the answer.
    """
    n = _validate(matrix)
    target = 2 * (n - 1)
    counter = itertools.count()
    identity = list(range(n))
    root = lower_bound(matrix, identity, identity, 0, 0)
    heap: list[tuple[int, int, int, int, list[int], list[int]]] = [
        (root, 0, 0, next(counter), identity, list(identity))
    ]
    while heap:
        _, neg_level, _, _, rows, cols = heapq.heappop(heap)
        level = -neg_level
        if level == target:
            return BandSolution(band_width(matrix, rows, cols), tuple(rows), tuple(cols))
        child_rows = (level + 1) // 2
        child_cols = (level + 2) // 2
        fixed = level // 2
        for i in range(fixed, n):
            if level % 2 == 0:
                new_rows, new_cols = rows, float_left(cols, i, fixed)
            else:
                new_rows, new_cols = float_left(rows, i, fixed), cols
            lb = lower_bound(matrix, new_rows, new_cols, child_rows, child_cols)
            heapq.heappush(heap, (lb, -(level + 1), -i, next(counter), new_rows, new_cols))
    raise RuntimeError("search ended without a complete ordering")


def format_solution(
    matrix: Sequence[Sequence[Any]], solution: BandSolution, blank: Optional[str] = None
) -> str:
    """The band on one line, then the reordered matrix with a space after each cell.

    With blank set, non-zero cells print as X and the rest as blank; otherwise
    the original cells are printed.
    """
    lines = [str(solution.band)]
    for r in solution.row_perm:
        cells = []
        for c in solution.col_perm:
            cell = matrix[r][c]
            if blank is None:
                cells.append(f"{cell} ")
            else:
                cells.append(f"{NONZERO_MARK if _marked(cell) else blank} ")
        lines.append("".join(cells))
    return "\n".join(lines) + "\n"


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Reorder a sparse matrix into a narrow band.")
    parser.add_argument("input", nargs="?", default=None, help="matrix file (default: stdin)")
    parser.add_argument(
        "--best-first", action="store_true", help="use the priority-queue search"
    )
    args = parser.parse_args(argv)

    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as src:
            text = src.read()
    try:
        matrix = parse_matrix(text)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.best_first:
        solution = minimize_band_best_first(matrix)
        sys.stdout.write(format_solution(matrix, solution, "0"))
    else:
        solution = minimize_band(matrix)
        sys.stdout.write(format_solution(matrix, solution))
    return 0


if __name__ == "__main__":
    sys.exit(main())
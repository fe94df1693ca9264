"""A sudoku solver using singles, hidden singles and shallow backtracking."""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence

Grid = list[list[int]]

MAX_DEPTH = 3

_DIGITS = frozenset(range(1, 10))
_CELLS = tuple((y, x) for y in range(9) for x in range(9))
_ROWS = tuple(tuple((y, x) for x in range(9)) for y in range(9))
_COLUMNS = tuple(tuple((y, x) for y in range(9)) for x in range(9))
_BOXES = tuple(
    tuple((by + i, bx + j) for i in range(3) for j in range(3))
    for by in (0, 3, 6)
    for bx in (0, 3, 6)
)
_UNITS = _ROWS + _COLUMNS + _BOXES


def _box_of(y: int, x: int) -> tuple[tuple[int, int], ...]:
    return _BOXES[(y // 3) * 3 + x // 3]


_PEERS = {
    (y, x): frozenset(_ROWS[y] + _COLUMNS[x] + _box_of(y, x)) - {(y, x)}
    for y, x in _CELLS
}


def parse_sudokus(text: str) -> list[Grid]:
    """Parse puzzles given as a title line followed by nine lines of digits, 0 for blank."""
    lines = text.splitlines()
    grids = []
    for start in range(0, len(lines), 10):
        rows = lines[start + 1:start + 10]
        if len(rows) != 9:
            raise ValueError(f"puzzle starting at line {start + 1} has {len(rows)} rows")
        grid = []
        for row in rows:
            row = row.strip()
            if len(row) != 9 or not row.isdigit():
                raise ValueError(f"invalid sudoku row {row!r}")
            grid.append([int(c) for c in row])
        grids.append(grid)
    return grids


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid with blanks as dots and box separators."""
    lines = []
    for band in range(0, 9, 3):
        for row in grid[band:band + 3]:
            chunks = (
                "".join(f" {cell}" if cell else " ." for cell in row[start:start + 3]) + " |"
                for start in range(0, 9, 3)
            )
            lines.append("".join(chunks))
        lines.append("-" * 24)
    return "\n".join(lines)


def compute_possibilities(grid: Sequence[Sequence[int]], y: int, x: int) -> list[int]:
    """Values that may go in an empty cell; empty for a filled cell."""
    if grid[y][x]:
        return []
    seen = {grid[py][px] for py, px in _PEERS[(y, x)]}
    return sorted(_DIGITS - seen)


def is_valid_grid(grid: Sequence[Sequence[int]]) -> bool:
    """Whether every blank has a candidate and every unit can still hold every digit."""
    possibilities = {cell: compute_possibilities(grid, *cell) for cell in _CELLS}
    if any(grid[y][x] == 0 and not possibilities[(y, x)] for y, x in _CELLS):
        return False
    for unit in _UNITS:
        covered: set[int] = set()
        for y, x in unit:
            if grid[y][x]:
                covered.add(grid[y][x])
            else:
                covered.update(possibilities[(y, x)])
        if not _DIGITS <= covered:
            return False
    return True


def _solve(grid: Grid, depth: int) -> bool:
    if depth == MAX_DEPTH:
        return False

    candidates = {cell: set(compute_possibilities(grid, *cell)) for cell in _CELLS}

    def place(cell: tuple[int, int], value: int) -> None:
        y, x = cell
        grid[y][x] = value
        candidates[cell].clear()
        for peer in _PEERS[cell]:
            candidates[peer].discard(value)

    while any(0 in row for row in grid):
        if not is_valid_grid(grid):
            return False

        progress = False

        for cell in _CELLS:
            options = candidates[cell]
            if len(options) == 1:
                place(cell, next(iter(options)))
                progress = True

        for unit in _UNITS:
            spots: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
            for cell in unit:
                for value in candidates[cell]:
                    spots[value].append(cell)
            for value in sorted(spots):
                cells = spots[value]
                if len(cells) == 1 and value in candidates[cells[0]]:
                    place(cells[0], value)
                    progress = True

        if progress:
            continue

        for y, x in _CELLS:
            for value in sorted(candidates[(y, x)]):
                trial = [list(row) for row in grid]
                trial[y][x] = value
                if _solve(trial, depth + 1):
                    grid[:] = trial
                    return True
        return False

    return True


def solve_sudoku(grid: Sequence[Sequence[int]], depth: int = 0) -> Grid | None:
    """Solved copy of ``grid``, or None when the solver cannot finish it."""
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("a sudoku grid must be 9 by 9")
    work = [list(row) for row in grid]
    return work if _solve(work, depth) else None


def sudoku_top_left_sum(text: str) -> int:
    """Sum of the three-digit numbers in the top-left corners of the solved puzzles.

    Puzzles the solver cannot finish are left out.
    """
    total = 0
    for grid in parse_sudokus(text):
        solved = solve_sudoku(grid)
        if solved is not None:
            total += solved[0][0] * 100 + solved[0][1] * 10 + solved[0][2]
    return total
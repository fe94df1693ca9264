import pytest

from eulerkit.sudoku import (
    compute_possibilities,
    format_grid,
    is_valid_grid,
    parse_sudokus,
    solve_sudoku,
    sudoku_top_left_sum,
)

PUZZLE_TEXT = """Grid 01
003020600
900305001
001806400
008102900
700000008
006708200
002609500
800203009
005010300
"""


def _puzzle():
    return parse_sudokus(PUZZLE_TEXT)[0]


def _is_complete_solution(grid):
    digits = set(range(1, 10))
    rows = [set(row) for row in grid]
    columns = [{grid[y][x] for y in range(9)} for x in range(9)]
    boxes = [
        {grid[by + i][bx + j] for i in range(3) for j in range(3)}
        for by in (0, 3, 6)
        for bx in (0, 3, 6)
    ]
    return all(unit == digits for unit in rows + columns + boxes)


def test_parse_sudokus_reads_rows():
    grids = parse_sudokus(PUZZLE_TEXT)
    assert len(grids) == 1
    assert grids[0][0] == [0, 0, 3, 0, 2, 0, 6, 0, 0]
    assert grids[0][8] == [0, 0, 5, 0, 1, 0, 3, 0, 0]


def test_parse_sudokus_rejects_bad_row():
    with pytest.raises(ValueError):
        parse_sudokus(PUZZLE_TEXT.replace("900305001", "9003x5001"))


def test_format_grid_layout():
    lines = format_grid(_puzzle()).splitlines()
    assert len(lines) == 12
    assert lines[0] == " . . 3 | . 2 . | 6 . . |"
    assert lines[3] == "-" * 24
    assert lines[-1] == "-" * 24


def test_compute_possibilities_filled_cell_is_empty():
    assert compute_possibilities(_puzzle(), 0, 2) == []


def test_compute_possibilities_excludes_peers():
    grid = _puzzle()
    options = compute_possibilities(grid, 0, 0)
    assert options
    assert not set(options) & set(grid[0])
    assert not set(options) & {grid[y][0] for y in range(9)}
    solved = solve_sudoku(grid)
    assert solved[0][0] in options


def test_empty_grid_is_valid():
    assert is_valid_grid([[0] * 9 for _ in range(9)]) is True


def test_contradiction_is_invalid_and_unsolvable():
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    grid[1][8] = 9
    assert is_valid_grid(grid) is False
    assert solve_sudoku(grid) is None


def test_solve_keeps_clues_and_completes():
    grid = _puzzle()
    solved = solve_sudoku(grid)
    assert _is_complete_solution(solved)
    assert all(
        solved[y][x] == grid[y][x] for y in range(9) for x in range(9) if grid[y][x]
    )
    assert grid == _puzzle()


def test_depth_limit_stops_solver():
    solved = solve_sudoku(_puzzle())
    assert solve_sudoku(solved, 3) is None


def test_solve_rejects_wrong_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])


def test_top_left_sum():
    assert sudoku_top_left_sum(PUZZLE_TEXT) == 483


def test_top_left_sum_matches_solution():
    solved = solve_sudoku(_puzzle())
    expected = solved[0][0] * 100 + solved[0][1] * 10 + solved[0][2]
    assert sudoku_top_left_sum(PUZZLE_TEXT + PUZZLE_TEXT) == 2 * expected
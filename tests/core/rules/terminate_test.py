import pytest

from tictactoe.core.game_config import Coordinate, Piece
from tictactoe.core.grid import Grid
from tictactoe.core.rules.terminate import (
    candidate_lines,
    check_local_win,
    find_winning_line,
    line_owner,
    lines_through,
)


def _grid_from(code: str, size: int) -> Grid:
    grid = Grid(size)
    for idx, symbol in enumerate(code):
        grid.set(divmod(idx, size), Piece.coerce(symbol))
    return grid


@pytest.mark.parametrize("size", [1, 2, 3, 4, 7])
def test_candidate_lines_count_and_length(size):
    lines = candidate_lines(size)
    assert len(lines) == 2 * size + 2
    assert all(len(line) == size for line in lines)


def test_candidate_lines_order_for_3x3():
    lines = candidate_lines(3)
    assert lines[0] == ((0, 0), (0, 1), (0, 2))
    assert lines[2] == ((2, 0), (2, 1), (2, 2))
    assert lines[3] == ((0, 0), (1, 0), (2, 0))
    assert lines[5] == ((0, 2), (1, 2), (2, 2))
    assert lines[6] == ((0, 0), (1, 1), (2, 2))
    assert lines[7] == ((0, 2), (1, 1), (2, 0))


def test_candidate_lines_are_memoized():
    assert candidate_lines(5) is candidate_lines(5)


def test_candidate_lines_reject_empty_boards():
    with pytest.raises(ValueError):
        candidate_lines(0)


def test_line_owner():
    grid = _grid_from("xxxoo_o__", 3)
    rows = candidate_lines(3)[:3]

    assert line_owner(grid, rows[0]) is Piece.X
    assert line_owner(grid, rows[1]) is None
    assert line_owner(grid, rows[2]) is None


def test_blank_line_has_no_owner():
    grid = Grid(3)
    assert all(line_owner(grid, line) is None for line in candidate_lines(3))


def test_find_winning_line_returns_line_and_owner():
    grid = _grid_from("o___o___o", 3)
    line, owner = find_winning_line(grid)

    assert owner is Piece.O
    assert line == (Coordinate(0, 0), Coordinate(1, 1), Coordinate(2, 2))


def test_find_winning_line_none_without_a_full_line():
    grid = _grid_from("xoxxxooxo", 3)
    assert find_winning_line(grid, 3) is None


def test_lines_through_center_and_edge():
    assert len(lines_through(3, Coordinate(1, 1))) == 4
    assert len(lines_through(3, Coordinate(0, 1))) == 2
    assert len(lines_through(3, Coordinate(0, 0))) == 3


def test_check_local_win_after_completing_a_column():
    grid = _grid_from("_x__x____", 3)
    assert check_local_win(grid, (1, 1)) is False

    grid.set((2, 1), Piece.X)

    assert check_local_win(grid, (2, 1)) is True
    assert check_local_win(grid, (0, 0)) is False

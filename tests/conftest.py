import pytest

from tictactoe.core.board import Board
from tictactoe.core.grid import Grid


@pytest.fixture
def board() -> Board:
    """Empty 3x3 board with 'x' holding the board."""
    return Board(3, "x", "o")


@pytest.fixture
def large_board() -> Board:
    """Empty 4x4 board."""
    return Board(4, "x", "o")


@pytest.fixture
def grid() -> Grid:
    return Grid(3)

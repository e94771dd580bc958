from functools import lru_cache

from tictactoe.core.game_config import Coordinate, Piece
from tictactoe.core.grid import Grid

Line = tuple[Coordinate, ...]


@lru_cache(maxsize=None)
def candidate_lines(size: int) -> tuple[Line, ...]:
    """Enumerate every winning line of an ``size x size`` board.

    Parameters
    ----------
    size : int
        Board dimension ``N``. A line always spans ``N`` cells.

    Returns
    -------
    tuple[Line, ...]
        ``2N + 2`` lines: rows top to bottom, columns left to right, the main
        diagonal and finally the anti-diagonal. The order doubles as the
        tie-break when more than one line is owned.
    """
    if size < 1:
        raise ValueError(f"Board size must be at least 1, got {size}.")
    span = range(size)
    rows = [tuple(Coordinate(r, c) for c in span) for r in span]
    cols = [tuple(Coordinate(r, c) for r in span) for c in span]
    diagonal = tuple(Coordinate(i, i) for i in span)
    anti_diagonal = tuple(Coordinate(i, size - 1 - i) for i in span)
    return tuple(rows + cols + [diagonal, anti_diagonal])


@lru_cache(maxsize=None)
def lines_through(size: int, coord: Coordinate) -> tuple[Line, ...]:
    """Candidate lines containing ``coord``, in scan order."""
    return tuple(line for line in candidate_lines(size) if coord in line)


def line_owner(grid: Grid, line: Line) -> Piece | None:
    """Return the piece filling every cell of ``line``, or ``None``."""
    owner = grid.get(line[0])
    if owner is Piece.BLANK:
        return None
    for coord in line[1:]:
        if grid.get(coord) is not owner:
            return None
    return owner


def find_winning_line(grid: Grid, size: int | None = None) -> tuple[Line, Piece] | None:
    """Scan ``candidate_lines`` in order and return the first owned line.

    Returns
    -------
    tuple[Line, Piece] | None
        The winning coordinates with their owner, or ``None`` when no line is
        fully owned.
    """
    for line in candidate_lines(grid.size if size is None else size):
        owner = line_owner(grid, line)
        if owner is not None:
            return line, owner
    return None


def check_local_win(grid: Grid, coord: tuple[int, int]) -> bool:
    """Check whether the piece at ``coord`` completes a line through it."""
    coord = Coordinate(*coord)
    if grid.get(coord) is Piece.BLANK:
        return False
    return any(
        line_owner(grid, line) is not None for line in lines_through(grid.size, coord)
    )

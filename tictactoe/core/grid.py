from collections.abc import Iterator

import numpy as np

from tictactoe.core.game_config import Coordinate, Piece


class Grid:
    """Square cell storage backed by an ``(N, N)`` int8 array of piece codes."""

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"Grid size must be an int, got {type(size)}")
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}.")
        self.size = int(size)
        self._cells = np.full((self.size, self.size), Piece.BLANK, dtype=np.int8)

    @property
    def number_of_spaces(self) -> int:
        return self.size * self.size

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def is_on_grid(self, coord: tuple[int, int]) -> bool:
        row, col = coord
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, coord: tuple[int, int]) -> Coordinate:
        if not self.is_on_grid(coord):
            raise ValueError(
                f"Coordinate {tuple(coord)} is outside a {self.size}x{self.size} grid."
            )
        return Coordinate(*coord)

    def get(self, coord: tuple[int, int]) -> Piece:
        row, col = self._check(coord)
        return Piece(int(self._cells[row, col]))

    def set(self, coord: tuple[int, int], piece: Piece) -> None:
        """Write ``piece`` at ``coord`` unconditionally."""
        row, col = self._check(coord)
        self._cells[row, col] = Piece.coerce(piece)

    def all_coordinates(self) -> Iterator[Coordinate]:
        """Yield every coordinate in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield Coordinate(row, col)

    def blank_coordinates(self) -> list[Coordinate]:
        """Coordinates still holding ``Piece.BLANK``, row-major."""
        rows, cols = np.nonzero(self._cells == Piece.BLANK)
        return [Coordinate(int(r), int(c)) for r, c in zip(rows, cols, strict=True)]

    def count(self, piece: Piece) -> int:
        return int(np.count_nonzero(self._cells == Piece.coerce(piece)))

    def rows(self) -> list[tuple[Piece, ...]]:
        return [tuple(Piece(int(c)) for c in row) for row in self._cells]

    def deep_copy(self) -> "Grid":
        """Return a grid with identical cells and its own storage."""
        clone = Grid.__new__(Grid)
        clone.size = self.size
        clone._cells = self._cells.copy()
        return clone

    copy = deep_copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Grid(size={self.size})"

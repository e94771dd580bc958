import logging
import math

from tictactoe.core.game_config import DEFAULT_SIZE, Coordinate, Piece
from tictactoe.core.grid import Grid
from tictactoe.core.rules.terminate import Line, find_winning_line
from tictactoe.utils.config.loader import BoardConfig

logger = logging.getLogger(__name__)

PieceLike = Piece | int | str


class Board:
    """N x N tic-tac-toe board with N-in-a-row win detection."""

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        player_piece: PieceLike = Piece.X,
        opponent_piece: PieceLike = Piece.O,
    ):
        """
        Create an empty board.

        Parameters
        ----------
        size : int, optional
            Board dimension ``N``; a win needs ``N`` pieces in a line.
        player_piece : Piece | int | str, optional
            Piece of the side holding the board.
        opponent_piece : Piece | int | str, optional
            Piece of the other side. Must differ from ``player_piece``.

        """
        player_piece = Piece.coerce(player_piece)
        opponent_piece = Piece.coerce(opponent_piece)
        if Piece.BLANK in (player_piece, opponent_piece):
            raise ValueError("Player and opponent pieces must not be blank.")
        if player_piece is opponent_piece:
            raise ValueError(
                f"Player and opponent pieces must differ, both are '{player_piece.symbol}'."
            )
        self._grid = Grid(size)
        self.player_piece = player_piece
        self.opponent_piece = opponent_piece

    @classmethod
    def from_config(cls, cfg: BoardConfig) -> "Board":
        return cls(cfg.size, cfg.player_piece, cfg.opponent_piece)

    @classmethod
    def from_code(
        cls,
        code: str,
        size: int | None = None,
        player_piece: PieceLike = Piece.X,
        opponent_piece: PieceLike = Piece.O,
    ) -> "Board":
        """
        Build a board from a row-major string such as ``"xxxo_o___"``.

        ``size`` defaults to the square root of ``len(code)``. Cells are
        written straight to the grid, so ``code`` may describe any position.
        """
        if size is None:
            size = math.isqrt(len(code))
        if size < 1 or len(code) != size * size:
            raise ValueError(
                f"Board code of length {len(code)} does not describe a square board"
                + (f" of size {size}." if size else ".")
            )
        board = cls(size, player_piece, opponent_piece)
        for idx, symbol in enumerate(code):
            board._grid.set(divmod(idx, size), Piece.coerce(symbol))
        return board

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def number_of_spaces(self) -> int:
        return self._grid.number_of_spaces

    @property
    def grid(self) -> Grid:
        return self._grid

    def piece_at(self, coord: tuple[int, int]) -> Piece:
        return self._grid.get(coord)

    def place_piece(self, piece: PieceLike, coord: tuple[int, int]) -> "Board":
        """
        Write ``piece`` at ``coord`` and return this board.

        Blank placements are ignored. Placing on an occupied cell raises
        ``ValueError`` and leaves the grid unchanged. Either side may move at
        any time; turn order is not enforced.
        """
        piece = Piece.coerce(piece)
        if piece is Piece.BLANK:
            return self

        current = self._grid.get(coord)
        if current is not Piece.BLANK:
            logger.debug("Rejected %s at %s: occupied by %s", piece.name, coord, current.name)
            raise ValueError(
                f"Cannot place '{piece.symbol}' at {tuple(coord)}: "
                f"occupied by '{current.symbol}'."
            )

        self._grid.set(coord, piece)
        logger.debug("Placed %s at %s", piece.name, tuple(coord))
        return self

    def available_moves(self) -> list[Coordinate]:
        return self._grid.blank_coordinates()

    def corner_spaces(self) -> list[Coordinate]:
        last = self.size - 1
        return [
            Coordinate(0, 0),
            Coordinate(0, last),
            Coordinate(last, 0),
            Coordinate(last, last),
        ]

    def is_blank(self) -> bool:
        return len(self.available_moves()) == self.number_of_spaces

    def is_last_move(self) -> bool:
        return len(self.available_moves()) == 1

    def current_piece(self) -> Piece:
        """Piece expected to move next by count (X opens). Informational only."""
        if self._grid.count(Piece.O) < self._grid.count(Piece.X):
            return Piece.O
        return Piece.X

    def winning_line(self) -> Line | None:
        result = find_winning_line(self._grid, self.size)
        if result is None:
            return None
        line, owner = result
        logger.debug("%s owns line %s", owner.name, line)
        return line

    def winner(self) -> Piece | None:
        result = find_winning_line(self._grid, self.size)
        return None if result is None else result[1]

    def winner_exists(self) -> bool:
        return self.winner() is not None

    def won(self, piece: PieceLike) -> bool:
        return self.winner() is Piece.coerce(piece)

    def lost(self, piece: PieceLike) -> bool:
        winner = self.winner()
        return winner is not None and winner is not Piece.coerce(piece)

    def is_draw(self) -> bool:
        return not self.available_moves() and not self.winner_exists()

    def is_over(self) -> bool:
        return self.is_draw() or self.winner_exists()

    def hand_off(self) -> "Board":
        """
        Return an independent copy with the player roles swapped.

        Returns
        -------
        Board
            New board whose grid is a deep copy, ``player_piece`` set to this
            board's ``opponent_piece`` and vice versa.

        """
        successor = Board.__new__(Board)
        successor._grid = self._grid.deep_copy()
        successor.player_piece = self.opponent_piece
        successor.opponent_piece = self.player_piece
        logger.debug(
            "Handed off %dx%d board to %s", self.size, self.size, successor.player_piece.name
        )
        return successor

    def to_code(self) -> str:
        return "".join(cell.symbol for row in self._grid.rows() for cell in row)

    def format_board(self) -> str:
        """
        Render the board as human-readable text.

        Returns
        -------
        str
            Multiline string with column letters, row numbers and the roles.

        """
        column_labels = " ".join(chr(ord("A") + i) for i in range(self.size))
        lines = ["   " + column_labels]
        for i, row in enumerate(self._grid.rows()):
            lines.append(f"{i + 1:>2} " + " ".join(cell.symbol for cell in row))
        lines.append(
            f"Player: {self.player_piece.symbol}  Opponent: {self.opponent_piece.symbol}"
        )
        return "\n".join(lines) + "\n"

    def print_board(self) -> None:
        print(self.format_board(), end="")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.player_piece is other.player_piece
            and self.opponent_piece is other.opponent_piece
            and self._grid == other._grid
        )

    def __repr__(self) -> str:
        return (
            f"Board(size={self.size}, player_piece={self.player_piece.symbol!r}, "
            f"opponent_piece={self.opponent_piece.symbol!r}, code={self.to_code()!r})"
        )

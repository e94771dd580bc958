from tictactoe.core.board import Board
from tictactoe.core.game_config import Piece


def log_section(title: str) -> None:
    """Print a separated test section title."""
    print(f"\n\n{'=' * 20} [TEST: {title}] {'=' * 20}")


def log_state(board: Board, description: str) -> None:
    """Print the current board with a short description."""
    print(f"\n>>> {description}")
    print("-" * 30)
    board.print_board()
    print("-" * 30)


def make_board(
    code: str,
    size: int | None = None,
    player_piece: Piece | str = "x",
    opponent_piece: Piece | str = "o",
) -> Board:
    """Build a board from a row-major code where ``_`` marks a blank cell."""
    return Board.from_code(code, size, player_piece, opponent_piece)

from tictactoe.core.board import Board
from tictactoe.core.game_config import Coordinate, Piece
from tictactoe.core.grid import Grid
from tictactoe.utils.config.loader import BoardConfig, RootConfig, load_and_parse_config

__all__ = [
    "Board",
    "BoardConfig",
    "Coordinate",
    "Grid",
    "Piece",
    "RootConfig",
    "load_and_parse_config",
]

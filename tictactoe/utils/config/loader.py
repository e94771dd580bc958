from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
import yaml

from tictactoe.core.game_config import DEFAULT_SIZE, Piece


class BaseConfig(BaseModel):
    """Common base for config models (strict & frozen)."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class BoardConfig(BaseConfig):
    size: int = DEFAULT_SIZE
    player_piece: str = Piece.X.symbol
    opponent_piece: str = Piece.O.symbol

    @field_validator("size")
    @classmethod
    def _check_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"board.size must be at least 1, got {value}.")
        return value

    @field_validator("player_piece", "opponent_piece")
    @classmethod
    def _check_piece(cls, value: str) -> str:
        piece = Piece.coerce(value)
        if piece is Piece.BLANK:
            raise ValueError("board pieces must not be blank.")
        return piece.symbol

    @model_validator(mode="after")
    def _check_distinct(self) -> "BoardConfig":
        if self.player_piece == self.opponent_piece:
            raise ValueError(
                f"board.player_piece and board.opponent_piece must differ, "
                f"both are '{self.player_piece}'."
            )
        return self


class RootConfig(BaseConfig):
    board: BoardConfig = BoardConfig()


def load_yaml(path: str | Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def parse_config(raw: dict[str, Any]) -> RootConfig:
    return RootConfig.model_validate(raw)


def load_and_parse_config(path: str | Path) -> RootConfig:
    raw = load_yaml(path)
    return parse_config(raw)

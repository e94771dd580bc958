import enum
from typing import NamedTuple

DEFAULT_SIZE = 3
BLANK_SYMBOLS = ("", "_", ".")


class Piece(enum.IntEnum):
    """Cell value stored in the grid."""

    BLANK = 0
    X = 1
    O = 2  # noqa: E741

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def is_blank(self) -> bool:
        return self is Piece.BLANK

    @property
    def other(self) -> "Piece":
        """Return the opposing piece; BLANK has no opponent."""
        if self is Piece.BLANK:
            raise ValueError("BLANK has no opposing piece.")
        return Piece.O if self is Piece.X else Piece.X

    @classmethod
    def coerce(cls, value: "Piece | int | str") -> "Piece":
        """Convert a piece, cell code or symbol (``"x"``, ``"o"``, ``"_"``) to ``Piece``."""
        if isinstance(value, Piece):
            return value
        if isinstance(value, str):
            token = value.strip().lower()
            if token in BLANK_SYMBOLS:
                return cls.BLANK
            for piece, symbol in _SYMBOLS.items():
                if token == symbol:
                    return piece
            raise ValueError(f"Unknown piece symbol: {value!r}")
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Unknown piece code: {value}") from None
        raise TypeError(f"Piece must be Piece, int or str, got {type(value)}")


_SYMBOLS = {Piece.BLANK: "_", Piece.X: "x", Piece.O: "o"}


class Coordinate(NamedTuple):
    row: int
    col: int


def coordinate_to_index(coord: tuple[int, int], size: int = DEFAULT_SIZE) -> int:
    """Convert (row, col) to a flat row-major index."""
    row, col = coord
    return row * size + col


def index_to_coordinate(idx: int, size: int = DEFAULT_SIZE) -> Coordinate:
    """Convert a flat row-major index to (row, col)."""
    return Coordinate(idx // size, idx % size)


def convert_coordinate_to_label(coord: tuple[int, int], size: int = DEFAULT_SIZE) -> str:
    """Convert (row, col) to an 'A1' style string (column letter, 1-based row)."""
    row, col = coord
    if not (0 <= col < size):
        raise ValueError(f"Column index must be between 0 and {size - 1}.")
    if not (0 <= row < size):
        raise ValueError(f"Row index must be between 0 and {size - 1}.")
    return f"{chr(ord('A') + col)}{row + 1}"


def convert_label_to_coordinate(label: str, size: int = DEFAULT_SIZE) -> Coordinate | None:
    """Convert 'A1' style text to (row, col); return None if invalid."""
    if label is None:
        return None
    if not (2 <= len(label) <= 3):
        return None

    col_letter = label[0]
    row_number = label[1:]

    if not col_letter.isalpha() or not row_number.isdigit():
        return None

    col = ord(col_letter.upper()) - ord("A")
    row = int(row_number) - 1

    if not (0 <= col < size and 0 <= row < size):
        return None

    return Coordinate(row, col)

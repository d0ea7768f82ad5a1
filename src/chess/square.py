"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidMoveTokenError

# Chess board is always 8x8: (rows, columns)
BOARD_DIMENSIONS = (8, 8)

FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True)
class Square:
    """
    Grid coordinates of a square.

    * row 0 is black's back rank (the 8th rank), row 7 is white's back rank (the 1st rank)
    * col 0 is the a-file, col 7 the h-file
    """

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' - 'h1' get converted to (0,0) - (7,7)"""
        if len(sq) != 2 or sq[0] not in FILES or sq[1] not in RANKS:
            raise InvalidMoveTokenError(f"Cannot interpret {sq!r} as a square.")
        col = ord(sq[0]) - ord("a")
        row = BOARD_DIMENSIONS[0] - int(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{BOARD_DIMENSIONS[0] - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, dr: int, dc: int) -> Square:
        return Square(self.row + dr, self.col + dc)

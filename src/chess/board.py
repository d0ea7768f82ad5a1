"""The board holds the `position` (in chess: the configuration of pieces on the 8x8 grid) and nothing else"""

from dataclasses import dataclass
from typing import Self

from src.chess.pieces import EMPTY_SQUARE, Color, Piece
from src.chess.square import BOARD_DIMENSIONS, Square

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_FEN = "/".join(["8"] * BOARD_DIMENSIONS[0])


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass
class Board:
    position: dict[Square, Piece]

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_POSITION_FEN)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * the first group is row 0 (black's back rank, the 8th rank), read from the a-file to the h-file
        * black pawns cover row 1 entirely
        * rows 2 through 5 have 8 consecutive empty squares
        * row 6 are the white pawns (capital letters)
        * row 7 are the white pieces.
        """
        position: dict[Square, Piece] = {}
        for row, fen_one_row in enumerate(fen_str.split("/")):
            col = 0
            for character in fen_one_row:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece that should be created
                    position[Square(row, col)] = Piece.from_fen(character)
                    col += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    for _ in range(int(character)):
                        position[Square(row, col)] = EMPTY_SQUARE
                        col += 1
        return cls(position)

    def to_fen(self) -> str:
        """Rows are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_fen(self, row: int) -> str:
        """FEN string of a single row"""
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            piece = self.piece(Square(row, col))

            if not piece.is_empty:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Piece:
        return self.position[square]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square).is_empty

    def place(self, square: Square, piece: Piece) -> None:
        self.position[square] = piece

    def clear(self, square: Square) -> None:
        self.position[square] = EMPTY_SQUARE

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square for square, piece in self.position.items() if piece.color == color
        ]

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Relocate whatever stands on `from_square`. Whatever stood on `to_square` is simply overwritten (a capture)."""
        piece_that_moved = self.piece(from_square)
        self.position[from_square] = EMPTY_SQUARE
        self.position[to_square] = piece_that_moved

    def is_path_clear(self, from_square: Square, to_square: Square) -> bool:
        """
        Path clearance for the sliding pieces
        ----

        Step along (sign(d_row), sign(d_col)) from just after `from_square` up to just before `to_square`.
        Every square visited must be empty. The end points themselves are not inspected.

        NOTE: Only meaningful when both squares share a row, a column or a diagonal.
        """
        row_step = _sign(to_square.row - from_square.row)
        col_step = _sign(to_square.col - from_square.col)
        square = from_square.offset(row_step, col_step)
        while square != to_square:
            if not self.is_empty(square):
                return False
            square = square.offset(row_step, col_step)
        return True

"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the legal geometry for each piece type.


Turn order and self-captures are checked first by Game. The rules below only answer:
"can this kind of piece get from A to B on the current board?"
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Protocol, Self

from src.chess.pieces import PAWN_DIRECTION, PAWN_START_ROW, Piece, PieceType
from src.chess.square import Square
from src.core.exceptions import InvalidMoveTokenError

MOVE_TOKEN_LENGTH = 4


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Piece: ...
    def is_empty(self, square: Square) -> bool: ...
    def is_path_clear(self, from_square: Square, to_square: Square) -> bool: ...


class MoveCheck(Enum):
    """
    Outcome of validating a move.

    Only LEGAL is truthy, so code that just needs pass/fail can treat a MoveCheck as a bool.
    """

    LEGAL = auto()
    NO_PIECE = auto()
    WRONG_TURN = auto()
    SELF_CAPTURE = auto()
    BLOCKED_PATH = auto()
    ILLEGAL_GEOMETRY = auto()

    def __bool__(self) -> bool:
        return self is MoveCheck.LEGAL


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @property
    def d_row(self) -> int:
        return self.to_square.row - self.from_square.row

    @property
    def d_col(self) -> int:
        return self.to_square.col - self.from_square.col

    @classmethod
    def from_token(cls, token: str) -> Self:
        """
        Move token
        ---
        The 4 character encoding used to relay a move to the other player:
        <from-file><from-rank><to-file><to-rank>

        examples:
        * "e2e4": move the piece that was on e2 to e4
        * "g8f6": the black knight jumps out
        """
        if len(token) != MOVE_TOKEN_LENGTH:
            raise InvalidMoveTokenError(
                f"Move token must have {MOVE_TOKEN_LENGTH} characters, got {token!r}"
            )
        from_sq = Square.from_algebraic(token[:2])
        to_sq = Square.from_algebraic(token[2:])
        return cls(from_sq, to_sq)

    def to_token(self) -> str:
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


# --- MOVEMENT RULES ---
def _sliding_move(move: Move, board: Board, geometry_ok: bool) -> MoveCheck:
    """Shared tail of the sliding pieces: right geometry, then nothing may stand in between."""
    if not geometry_ok:
        return MoveCheck.ILLEGAL_GEOMETRY
    if not board.is_path_clear(move.from_square, move.to_square):
        return MoveCheck.BLOCKED_PATH
    return MoveCheck.LEGAL


def _is_straight(move: Move) -> bool:
    return move.d_row == 0 or move.d_col == 0


def _is_diagonal(move: Move) -> bool:
    return abs(move.d_row) == abs(move.d_col)


def rook_move(move: Move, board: Board) -> MoveCheck:
    """Rooks move either horizontally or vertically"""
    return _sliding_move(move, board, _is_straight(move))


def bishop_move(move: Move, board: Board) -> MoveCheck:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return _sliding_move(move, board, _is_diagonal(move))


def queen_move(move: Move, board: Board) -> MoveCheck:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return _sliding_move(move, board, _is_straight(move) or _is_diagonal(move))


def knight_move(move: Move, board: Board) -> MoveCheck:
    """Knights jump, so nothing in between matters: |delta_row|, |delta_col| is (2, 1) or (1, 2)"""
    if (abs(move.d_row), abs(move.d_col)) in [(2, 1), (1, 2)]:
        return MoveCheck.LEGAL
    return MoveCheck.ILLEGAL_GEOMETRY


def king_move(move: Move, board: Board) -> MoveCheck:
    """
    The king can move by a single square at the time, in any direction.

    NOTE: Nobody checks whether the king walks into an attack.
    """
    if abs(move.d_row) <= 1 and abs(move.d_col) <= 1:
        return MoveCheck.LEGAL
    return MoveCheck.ILLEGAL_GEOMETRY


def pawn_move(move: Move, board: Board) -> MoveCheck:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - It can move by two in their first move (so when on their starting row), when both squares are empty
    - takes diagonally (one square forward, one file over), only when something stands there

    No en passant, and a pawn on the last row stays a pawn.
    """
    color = board.piece(move.from_square).color
    forward = PAWN_DIRECTION[color]
    destination_empty = board.is_empty(move.to_square)

    if move.d_col == 0 and move.d_row == forward:
        return MoveCheck.LEGAL if destination_empty else MoveCheck.BLOCKED_PATH

    if (
        move.d_col == 0
        and move.d_row == 2 * forward
        and move.from_square.row == PAWN_START_ROW[color]
    ):
        square_in_between = move.from_square.offset(forward, 0)
        if destination_empty and board.is_empty(square_in_between):
            return MoveCheck.LEGAL
        return MoveCheck.BLOCKED_PATH

    # whatever sits on the destination is fair game: own pieces were already filtered out by Game
    if abs(move.d_col) == 1 and move.d_row == forward and not destination_empty:
        return MoveCheck.LEGAL

    return MoveCheck.ILLEGAL_GEOMETRY


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovementRuleFn = Callable[[Move, Board], MoveCheck]
MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.PAWN: pawn_move,
    PieceType.KNIGHT: knight_move,
    PieceType.BISHOP: bishop_move,
    PieceType.ROOK: rook_move,
    PieceType.QUEEN: queen_move,
    PieceType.KING: king_move,
}

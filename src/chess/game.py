"""
The Game class is the entrypoint into the rules engine for the session layer.
It owns the board and whose turn it is, validates moves and applies them.

Two ways to change the board:
* `attempt_move()`: full validation, used for the local player's input.
* `apply_unchecked()`: no validation at all, used to mirror a move the remote player already validated on their side.
"""

from dataclasses import dataclass, field
from typing import Self

from loguru import logger

from src.chess.board import Board
from src.chess.moves import MOVEMENT_RULES, Move, MoveCheck
from src.chess.pieces import Color, Piece
from src.chess.square import BOARD_DIMENSIONS, Square


@dataclass
class Game:
    # --- RULES ENGINE API CALLED BY THE SESSION ---

    board: Board = field(default_factory=Board.starting_position)
    color_to_move: Color = Color.WHITE

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, white to move."""
        return cls(Board.starting_position(), Color.WHITE)

    @classmethod
    def from_fen(cls, placement: str, color_to_move: Color = Color.WHITE) -> Self:
        """Start from an arbitrary placement (handy to set up positions)."""
        return cls(Board.from_fen(placement), color_to_move)

    def piece(self, square: Square) -> Piece:
        return self.board.piece(square)

    def validate_move(self, from_square: Square, to_square: Square) -> MoveCheck:
        """
        Validate a move without touching the board
        ----

        1. Is there a piece to move?
        2. Is it the turn of that piece's color?
        3. Is the destination free of pieces of the same color? (no capturing your own pieces)
        4. Does the piece's movement rule allow it?
        """
        piece = self.board.piece(from_square)
        if piece.is_empty:
            return MoveCheck.NO_PIECE

        if piece.color != self.color_to_move:
            return MoveCheck.WRONG_TURN

        if self.board.piece(to_square).color == piece.color:
            return MoveCheck.SELF_CAPTURE

        movement_rule = MOVEMENT_RULES[piece.type]
        return movement_rule(Move(from_square, to_square), self.board)

    def check_move(self, from_square: Square, to_square: Square) -> bool:
        """Same validation as `attempt_move()`, but never changes anything. Used for move highlighting."""
        return bool(self.validate_move(from_square, to_square))

    def attempt_move(self, from_square: Square, to_square: Square) -> bool:
        """
        Attempt to make a move
        -----

        Either the move is legal, the piece moves (whatever was on the destination is captured) and the turn passes,
        or the move is rejected and nothing changes at all.
        """
        result = self.validate_move(from_square, to_square)
        if not result:
            logger.debug(
                "Rejected move {}{}: {}",
                from_square.to_algebraic(),
                to_square.to_algebraic(),
                result.name,
            )
            return False

        self._apply(from_square, to_square)
        return True

    def apply_unchecked(self, from_square: Square, to_square: Square) -> None:
        """
        Mirror a move made by the remote player
        ----

        NOTE: Trust-on-receive. The peer validated the move before sending it, so there is no check of any kind here,
        not even whose turn it is.
        """
        self._apply(from_square, to_square)

    def reset(self) -> None:
        """Back to the starting position, white to move."""
        self.board = Board.starting_position()
        self.color_to_move = Color.WHITE

    def legal_destinations(self, from_square: Square) -> list[Square]:
        """All squares the piece on `from_square` could move to right now (for highlighting in a user interface)."""
        return [
            to_square
            for to_square in (
                Square(row, col)
                for row in range(BOARD_DIMENSIONS[0])
                for col in range(BOARD_DIMENSIONS[1])
            )
            if self.check_move(from_square, to_square)
        ]

    # -- PRIVATE HELPERS ---
    def _apply(self, from_square: Square, to_square: Square) -> None:
        self.board.move_piece(from_square, to_square)
        self._switch_turn()

    def _switch_turn(self) -> None:
        self.color_to_move = self.color_to_move.opponent

"""Orchestration of a single game: rules engine, clock and the relay to the other player."""

import threading
from typing import Optional

from loguru import logger

from src.api.models import (
    GameStateResponse,
    HighlightRequest,
    HighlightResponse,
    MoveRequest,
    MoveResponse,
)
from src.chess.game import Game
from src.chess.moves import MOVE_TOKEN_LENGTH, Move, MoveCheck
from src.chess.pieces import Color
from src.chess.square import Square
from src.core.config import GameSettings
from src.core.exceptions import GameStateError, InvalidMoveTokenError
from src.core.logging import configure_logging
from src.core.shared_types import Color as ColorName
from src.core.shared_types import Status
from src.services.clock import GameClock
from src.services.relay import MoveRelay


def to_color_name(color: Color) -> ColorName:
    return ColorName[color.name]


class GameSession:
    """
    Everything that happens around the rules engine while two people play.

    NOTE: The engine is not thread safe. Local moves (user interface thread) and remote moves (transport thread)
    both go through this class, so every call touching the game holds `self._lock`.
    Creating a session also (re)configures the stderr log handler at `settings.log_level`.
    """

    def __init__(
        self, settings: GameSettings, relay: Optional[MoveRelay] = None
    ) -> None:
        configure_logging(settings.log_level)
        self.settings = settings
        self.relay = relay
        self.game = Game.new_game()
        self.clock = GameClock(settings.seconds_per_player)
        self.status = Status.IN_PROGRESS
        self.result: Optional[str] = None
        self._lock = threading.Lock()
        self._start_clock()

    # -- Local player ---
    def make_local_move(self, request: MoveRequest) -> MoveResponse:
        """Validate and apply a move made on this side, then tell the other player about it."""
        move = Move(
            Square.from_algebraic(request.from_square),
            Square.from_algebraic(request.to_square),
        )
        with self._lock:
            self._assert_in_progress()
            accepted = self.game.attempt_move(move.from_square, move.to_square)
            if accepted:
                check = MoveCheck.LEGAL
                self._switch_clock()
            else:
                # nothing changed, so this gives the same answer attempt_move got
                check = self.game.validate_move(move.from_square, move.to_square)
            color_to_move = self.game.color_to_move

        token = move.to_token() if accepted else None
        if token is not None and self.relay is not None:
            logger.info("Sending move {}", token)
            self.relay.send_token(token)

        return MoveResponse(
            accepted=accepted,
            reason=check.name.lower(),
            token=token,
            color_to_move=to_color_name(color_to_move),
        )

    def highlights(self, request: HighlightRequest) -> HighlightResponse:
        """Where can the selected piece go? Destinations holding a piece are captures."""
        square = Square.from_algebraic(request.square)
        with self._lock:
            destinations = self.game.legal_destinations(square)
            captures = [
                destination
                for destination in destinations
                if not self.game.board.is_empty(destination)
            ]
        return HighlightResponse(
            square=request.square,
            destinations=[destination.to_algebraic() for destination in destinations],
            captures=[capture.to_algebraic() for capture in captures],
        )

    # -- Remote player ---
    def receive_token(self, token: str) -> bool:
        """
        Mirror a move relayed by the other player
        ----

        NOTE: No validation of the move itself: the other side already validated it before sending.
        Only tokens that cannot even be decoded are dropped.
        """
        token = token.strip()
        if len(token) != MOVE_TOKEN_LENGTH:
            logger.debug("Ignoring token of length {}: {!r}", len(token), token)
            return False

        try:
            move = Move.from_token(token)
        except InvalidMoveTokenError as error:
            logger.warning("Ignoring malformed move token {!r}: {}", token, error)
            return False

        with self._lock:
            if self.status != Status.IN_PROGRESS:
                logger.warning("Game is over ({}), ignoring move {}", self.status, token)
                return False
            self.game.apply_unchecked(move.from_square, move.to_square)
            self._switch_clock()
        logger.info("Applied remote move {}", token)
        return True

    # -- Clock ---
    def tick(self, seconds: float = 1.0) -> None:
        """Let time pass for the player to move. Running out of time ends the game."""
        if not self.settings.timer_enabled:
            return
        with self._lock:
            if self.status != Status.IN_PROGRESS:
                return
            self.clock.tick(seconds)
            color = self.game.color_to_move
            if self.clock.is_flag_fallen(color):
                winner = self.settings.player_name(to_color_name(color.opponent))
                self._end_game(f"{winner} wins - Time out!")

    # -- Lifecycle ---
    def new_game(self) -> None:
        with self._lock:
            self.game.reset()
            self.clock.reset()
            self.status = Status.IN_PROGRESS
            self.result = None
            self._start_clock()
        logger.info("New game started")

    def state(self) -> GameStateResponse:
        with self._lock:
            return GameStateResponse(
                placement=self.game.board.to_fen(),
                color_to_move=to_color_name(self.game.color_to_move),
                players={
                    ColorName.WHITE: self.settings.white_player_name,
                    ColorName.BLACK: self.settings.black_player_name,
                },
                status=self.status,
                timer_enabled=self.settings.timer_enabled,
                remaining_seconds={
                    to_color_name(color): self.clock.remaining(color)
                    for color in (Color.WHITE, Color.BLACK)
                },
                result=self.result,
            )

    # -- Internal helpers --
    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _start_clock(self) -> None:
        if self.settings.timer_enabled:
            self.clock.start(Color.WHITE)

    def _switch_clock(self) -> None:
        if self.settings.timer_enabled:
            self.clock.switch_to(self.game.color_to_move)

    def _end_game(self, message: str) -> None:
        self.clock.stop()
        self.status = Status.TIME_OUT
        self.result = message
        logger.info(message)

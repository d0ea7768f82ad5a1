"""Countdown clock for timed games: one budget per player, only the side to move loses time."""

from typing import Optional

from src.chess.pieces import Color

# Below this many seconds a user interface may want to show the time in red
LOW_TIME_SECONDS = 10


def format_time(seconds: float) -> str:
    """MM:SS, never negative"""
    whole_seconds = max(0, int(seconds))
    minutes, secs = divmod(whole_seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


class GameClock:
    """
    The clock does not run by itself: whoever owns it calls `tick()` (once per second in a typical user interface).
    That keeps it deterministic and easy to test.
    """

    def __init__(self, seconds_per_player: float) -> None:
        self.seconds_per_player = seconds_per_player
        self._remaining: dict[Color, float] = {}
        self._active_color: Optional[Color] = None
        self.reset()

    @property
    def active_color(self) -> Optional[Color]:
        return self._active_color

    @property
    def is_running(self) -> bool:
        return self._active_color is not None

    def remaining(self, color: Color) -> float:
        return self._remaining[color]

    def start(self, color: Color) -> None:
        self._active_color = color

    def switch_to(self, color: Color) -> None:
        """After a move: stop the mover's clock and start the opponent's."""
        self._active_color = color

    def stop(self) -> None:
        self._active_color = None

    def reset(self) -> None:
        """Full budget for both players, nobody's clock running."""
        self._remaining = {
            Color.WHITE: float(self.seconds_per_player),
            Color.BLACK: float(self.seconds_per_player),
        }
        self._active_color = None

    def tick(self, seconds: float = 1.0) -> None:
        if self._active_color is None:
            return
        self._remaining[self._active_color] = max(
            0.0, self._remaining[self._active_color] - seconds
        )

    def is_flag_fallen(self, color: Color) -> bool:
        return self._remaining[color] <= 0.0

    def is_low(self, color: Color) -> bool:
        return self._remaining[color] <= LOW_TIME_SECONDS

"""
Game settings, as collected by whatever menu sits in front of the game.

None of these influence the rules engine: they are used by the session (player names, clock) and by the transport
(online / host / port).
"""

from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from src.core.exceptions import InvalidSettingsError
from src.core.shared_types import Color

DEFAULT_PORT = 5555
MAX_MINUTES_PER_PLAYER = 180
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class GameSettings(BaseModel):
    white_player_name: str = "White Player"
    black_player_name: str = "Black Player"
    timer_enabled: bool = False
    minutes_per_player: int = 10
    online: bool = False
    is_host: bool = False
    host_address: Optional[str] = None
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @field_validator("white_player_name", "black_player_name")
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise InvalidSettingsError("Player name cannot be empty.")
        return name

    @field_validator("minutes_per_player")
    @classmethod
    def validate_minutes(cls, value: int) -> int:
        if not 1 <= value <= MAX_MINUTES_PER_PLAYER:
            raise InvalidSettingsError(
                f"Time per player must be between 1 and {MAX_MINUTES_PER_PLAYER} minutes, got {value}."
            )
        return value

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 2**16:
            raise InvalidSettingsError(f"Not a valid port number: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise InvalidSettingsError(
                f"Unknown log level {value!r}. Pick one from {','.join(LOG_LEVELS)}"
            )
        return level

    @model_validator(mode="after")
    def validate_online_role(self) -> "GameSettings":
        # joining a game means you need to know where the host is
        if self.online and not self.is_host and not self.host_address:
            raise InvalidSettingsError("Joining an online game requires a host address.")
        return self

    @property
    def seconds_per_player(self) -> int:
        return self.minutes_per_player * 60

    def player_name(self, color: Color) -> str:
        return (
            self.white_player_name if color == Color.WHITE else self.black_player_name
        )

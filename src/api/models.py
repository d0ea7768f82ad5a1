"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.chess.square import FILES, RANKS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status

PlayerName = str
SquareName = str


def _validate_square_name(value: str) -> str:
    def _is_algebraic_notation(value: str) -> bool:
        if len(value) != 2:
            return False

        return value[0] in FILES and value[1] in RANKS

    if not _is_algebraic_notation(value):
        raise InvalidRequestError(f"Cannot interpret {value!r} as a valid square name.")
    return value


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


class HighlightRequest(BaseModel):
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


# --- RESPONSE MODELS ---
class MoveResponse(BaseModel):
    accepted: bool
    reason: str
    token: Optional[str] = None
    color_to_move: Color


class HighlightResponse(BaseModel):
    square: SquareName
    destinations: list[SquareName]
    captures: list[SquareName]


class GameStateResponse(BaseModel):
    placement: str
    color_to_move: Color
    players: dict[Color, PlayerName]
    status: Status
    timer_enabled: bool
    remaining_seconds: dict[Color, float]
    result: Optional[str] = None

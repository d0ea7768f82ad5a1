"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    TIME_OUT = "time out"


# --- Color does NOT contain an option for empty squares. That one lives in src/chess/pieces.py
class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

"""
Custom errors raised at the boundaries of the application.

NOTE: The rules engine itself never raises for an illegal move (it answers with a bool / MoveCheck).
These errors are for malformed input arriving from outside (move tokens, requests, settings) and for
calls that make no sense in the current state of a session.
"""


class GameError(Exception):
    """Base class: catch this one if you do not care about the details."""


class GameStateError(GameError):
    """The requested action is not possible in the current state of the game (e.g. moving after a time out)."""


class InvalidRequestError(GameError):
    """Request data could not be interpreted."""


class InvalidMoveTokenError(InvalidRequestError):
    """A move token is not of the form <file><rank><file><rank>, e.g. 'e2e4'."""


class InvalidSettingsError(InvalidRequestError):
    """Game settings contain a value that cannot be used."""

"""Protocol for relaying move tokens to the other player (the actual socket transport can implement this later)"""

from typing import Callable, Optional, Protocol

TokenHandler = Callable[[str], object]


class MoveRelay(Protocol):
    """Transport layer orchestration"""

    def send_token(self, token: str) -> None:
        """Hand a 4 character move token (e.g. 'e2e4') to the other player."""
        ...


class InMemoryRelay:
    """Both players in the same process: a sent token is delivered straight to the peer's handler."""

    def __init__(self, deliver: Optional[TokenHandler] = None) -> None:
        self.deliver = deliver
        self.sent: list[str] = []

    def connect(self, deliver: TokenHandler) -> None:
        self.deliver = deliver

    def send_token(self, token: str) -> None:
        self.sent.append(token)
        if self.deliver is not None:
            self.deliver(token)

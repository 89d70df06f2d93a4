"""Error types shared across layers."""
from __future__ import annotations


class LobbyRevealError(Exception):
    """Base class for errors raised on purpose by this package."""


class TransportError(LobbyRevealError):
    """The event feed could not be opened or dropped mid-stream."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url

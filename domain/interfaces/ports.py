"""Ports to the outside world: event feed transport and overlay sink."""
from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional, Sequence


class EventTransport(ABC):
    """A persistent duplex channel delivering client events as text frames.

    Implementations raise ``core.errors.TransportError`` when the channel
    cannot be opened or breaks while frames are being read.
    """

    @abstractmethod
    async def connect(self) -> None:
        pass

    @abstractmethod
    async def send(self, message: str) -> None:
        pass

    @abstractmethod
    def frames(self) -> AsyncIterator[str]:
        """Yield inbound text frames until the channel closes."""
        pass

    @abstractmethod
    async def close(self) -> None:
        pass


class OverlayHandle(ABC):
    """An on-screen panel owned by whoever created it."""

    @property
    @abstractmethod
    def is_open(self) -> bool:
        pass

    @abstractmethod
    def close(self) -> None:
        """Remove the panel; closing twice is a no-op."""
        pass


class PresentationSink(ABC):
    """Draws finished report lines; holds no logic of its own."""

    @abstractmethod
    def render(self, lines: Sequence[str], link: Optional[str]) -> OverlayHandle:
        pass

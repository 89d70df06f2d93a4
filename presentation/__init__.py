"""Presentation layer - User interfaces."""
from .overlay import ConsoleOverlay, ConsoleOverlayHandle

__all__ = [
    "ConsoleOverlay",
    "ConsoleOverlayHandle",
]

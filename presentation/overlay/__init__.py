from .console_overlay import ConsoleOverlay, ConsoleOverlayHandle

__all__ = ["ConsoleOverlay", "ConsoleOverlayHandle"]

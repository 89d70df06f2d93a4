"""Terminal rendition of the lobby overlay."""
from __future__ import annotations

import shutil
import sys
import textwrap
from typing import Optional, Sequence, TextIO

from domain.interfaces import OverlayHandle, PresentationSink

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_RESET = "\033[0m"

_TITLE = "LOBBY REVEAL"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


class ConsoleOverlayHandle(OverlayHandle):
    """Open panel on the terminal. Closing it twice is harmless."""

    def __init__(self, stream: TextIO, colors: bool):
        self._stream = stream
        self._colors = colors
        self._open = True

    @property
    def is_open(self) -> bool:
        return self._open

    def close(self) -> None:
        if not self._open:
            return
        self._open = False
        note = "  overlay closed"
        print(f"{_DIM}{note}{_RESET}" if self._colors else note, file=self._stream, flush=True)


class ConsoleOverlay(PresentationSink):
    """Prints the report lines inside a framed panel, the lookup link below it.

    Lines wider than the terminal wrap inside the frame. The link is printed
    whole on its own line so terminals can still open it.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        *,
        colors: Optional[bool] = None,
        columns: Optional[int] = None,
    ):
        self.stream = stream or sys.stdout
        self.colors = self.stream.isatty() if colors is None else colors
        self.columns = columns

    def render(self, lines: Sequence[str], link: Optional[str]) -> ConsoleOverlayHandle:
        body = list(lines) or ["(no players)"]

        cols = self.columns or shutil.get_terminal_size(fallback=(96, 20)).columns
        width = min(max([len(_TITLE)] + [len(line) for line in body]) + 2, max(cols - 2, 20))

        top = "╔" + "═" * width + "╗"
        rule = "╟" + "─" * width + "╢"
        bottom = "╚" + "═" * width + "╝"

        out = [self._frame(top), self._row(_TITLE, width, title=True), self._frame(rule)]
        for line in body:
            for chunk in textwrap.wrap(line, width - 2) or [""]:
                out.append(self._row(chunk, width))
        out.append(self._frame(bottom))
        if link:
            out.append(_c(link) if self.colors else link)
        print("\n".join(out), file=self.stream, flush=True)
        return ConsoleOverlayHandle(self.stream, self.colors)

    def _frame(self, s: str) -> str:
        return _g(s) if self.colors else s

    def _row(self, text: str, width: int, title: bool = False) -> str:
        cell = f" {text}".ljust(width)
        if self.colors and title:
            cell = _c(cell)
        return f"{self._frame('║')}{cell}{self._frame('║')}"

"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import shutil
import sys

from core.logging import get_logger
from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_RESET = "\033[0m"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


_LOGO = r"""
  ██╗      ██████╗ ██████╗ ██████╗ ██╗   ██╗    ██████╗ ███████╗██╗   ██╗███████╗ █████╗ ██╗
  ██║     ██╔═══██╗██╔══██╗██╔══██╗╚██╗ ██╔╝    ██╔══██╗██╔════╝██║   ██║██╔════╝██╔══██╗██║
  ██║     ██║   ██║██████╔╝██████╔╝ ╚████╔╝     ██████╔╝█████╗  ██║   ██║█████╗  ███████║██║
  ██║     ██║   ██║██╔══██╗██╔══██╗  ╚██╔╝      ██╔══██╗██╔══╝  ╚██╗ ██╔╝██╔══╝  ██╔══██║██║
  ███████╗╚██████╔╝██████╔╝██████╔╝   ██║       ██║  ██║███████╗ ╚████╔╝ ███████╗██║  ██║███████╗
  ╚══════╝ ╚═════╝ ╚═════╝ ╚═════╝    ╚═╝       ╚═╝  ╚═╝╚══════╝  ╚═══╝  ╚══════╝╚═╝  ╚═╝╚══════╝
"""


def _print_logo() -> None:
    cols = shutil.get_terminal_size(fallback=(100, 20)).columns
    div = "═" * min(cols, 96)
    print(_g(div))
    for line in _LOGO.splitlines():
        print(_g(line))
    print(_c("  Champion select lobby stats for the local game client"))
    print(_g(div))


async def _watch() -> None:
    # Lazy imports: the client stack loads only after settings validated
    from application import AggregateLobbyUseCase, LobbyObserver
    from application.services import load_display_options
    from infrastructure import LCUClient, WampEventFeed
    from presentation import ConsoleOverlay

    options = load_display_options(settings.OPTIONS_FILE)
    async with LCUClient() as lcu, WampEventFeed() as feed:
        pipeline = AggregateLobbyUseCase(lcu, overlay=ConsoleOverlay(), options=options)
        observer = LobbyObserver(feed, pipeline, api_client=lcu)
        try:
            await observer.run()
        finally:
            await observer.drain()


def main(argv: list[str]) -> int:
    bootstrap_logging(
        service="overlay",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="overlay.jsonl",
    )
    log = get_logger(__name__, service="overlay")
    try:
        settings.validate()
        settings.create_directories()
        _print_logo()
        log.info(lambda: f"watching {settings.LCU_WS_URL}")
        asyncio.run(_watch())
        return 0
    except KeyboardInterrupt:
        print(f"\n  {_g('Goodbye!')}\n")
        return 0
    except ValueError as e:
        log.error(lambda: f"invalid configuration: {e}")
        return 2
    finally:
        shutdown_logging()


def run() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

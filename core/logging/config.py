from __future__ import annotations

import logging
import os
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import get_context
from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


class _ContextFilter(logging.Filter):
    """Stamp the caller's log context and service onto each record."""

    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "log_context", None) is None:
            record.log_context = get_context()
        if getattr(record, "service", None) is None:
            record.service = self.service
        return True


def bootstrap_logging(
    *,
    service: str = "overlay",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "overlay.jsonl",
    max_bytes: int = 2_000_000,
    backup_count: int = 3,
) -> None:
    """Configure the root logger.

    Console output is on unless ``LOG_CONSOLE=false``; the JSON-lines file is
    written through a queue so slow disks never stall the event loop.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)
    ctx_filter = _ContextFilter(service)

    if os.getenv("LOG_CONSOLE", "true").strip().lower() == "true":
        console = logging.StreamHandler(sys.stderr)
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level) if console_level else lvl)
        console.setFormatter(ConsoleFormatter(colors=sys.stderr.isatty()))
        console.addFilter(ctx_filter)
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        qh.addFilter(ctx_filter)
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()


def shutdown_logging() -> None:
    """Flush and stop the background file writer, if one is running."""
    global _listener
    if _listener is not None:
        _listener.stop()
        _listener = None

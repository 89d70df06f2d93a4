"""Structured logging: bootstrap, context binding and lazy-message loggers."""
from .config import bootstrap_logging, shutdown_logging
from .context import context, get_context
from .logger import StructuredLogger, get_logger, timed

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "context",
    "get_context",
    "StructuredLogger",
    "get_logger",
    "timed",
]

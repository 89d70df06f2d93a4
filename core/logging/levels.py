from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


_CUSTOM = {LogLevel.TRACE: "TRACE", LogLevel.SUCCESS: "SUCCESS"}


def register_levels() -> None:
    for value, name in _CUSTOM.items():
        if logging.getLevelName(int(value)) != name:
            logging.addLevelName(int(value), name)


def to_level(value: int | str | None) -> int:
    """Map a level name or number to a logging level, INFO when unknown."""
    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name in LogLevel.__members__:
        return int(LogLevel[name])
    return logging.INFO

"""Display options: which sinks receive the lobby report."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from config import settings
from core.logging import get_logger

_log = get_logger(__name__, service="options")


@dataclass(frozen=True)
class DisplayOptions:
    """``textchat`` posts to champion-select chat, ``popup`` draws the overlay."""

    textchat: bool = True
    popup: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DisplayOptions":
        return cls(
            textchat=_flag(data, "textchat"),
            popup=_flag(data, "popup"),
        )


def _flag(data: Mapping[str, Any], key: str, default: bool = True) -> bool:
    """JSON booleans as-is, ``"true"``/``"false"`` strings parsed, anything else ignored."""
    value = data.get(key, default)
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    _log.warning(lambda: f"option {key}={value!r} is not a boolean, using {default}")
    return default


def load_display_options(path: Optional[Path] = None) -> DisplayOptions:
    """Read the two-flag options file; both flags default to enabled."""
    path = path or settings.OPTIONS_FILE
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        _log.debug(lambda: f"no options file at {path}, using defaults")
        return DisplayOptions()
    except OSError as e:
        _log.warning(lambda: f"cannot read options file {path}: {e}")
        return DisplayOptions()

    try:
        data = json.loads(raw)
    except ValueError as e:
        _log.warning(lambda: f"options file {path} is not valid JSON: {e}")
        return DisplayOptions()
    if not isinstance(data, dict):
        _log.warning(lambda: f"options file {path} must hold a JSON object")
        return DisplayOptions()

    options = DisplayOptions.from_mapping(data)
    _log.info(lambda: f"display options textchat={options.textchat} popup={options.popup}")
    return options

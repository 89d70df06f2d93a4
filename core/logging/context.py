from __future__ import annotations

import contextvars
from typing import Any, Dict, Optional

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def _merged(values: Dict[str, Any]) -> Dict[str, Any]:
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    return current


class context(object):
    """Scope log context to a block.

    Each asyncio task copies the context on creation, so values bound inside
    one pipeline run or one per-player lookup never leak into siblings.
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: Optional[contextvars.Token] = None

    def __enter__(self) -> Dict[str, Any]:
        merged = _merged(self._values)
        self._token = _context.set(merged)
        return merged

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False

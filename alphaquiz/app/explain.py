from __future__ import annotations

"""Explain mode: one-line JSON traces at quiz milestones.

Enabled with ``--explain``; silent otherwise.
"""

import json
from typing import Any, Callable, Dict

_ENABLED = False
_SINK: Callable[[str], None] = print


def enable(flag: bool = True, sink: Callable[[str], None] | None = None) -> None:
    global _ENABLED, _SINK
    _ENABLED = bool(flag)
    if sink is not None:
        _SINK = sink


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    try:
        data = json.dumps(payload or {}, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError):
        _SINK(f"[EXPLAIN] {event}")
        return
    _SINK(f"[EXPLAIN] {event} :: {data}")

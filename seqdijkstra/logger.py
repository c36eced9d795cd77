"""Event sinks for solver progress and CLI diagnostics.

The engine reports what it does as named events (``select``,
``early_exit``, ``unreachable_rest``, ``solve_done``) with keyword fields.
Whatever receives them only needs ``debug``, ``info`` and ``warning``.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol, TextIO


class Logger(Protocol):
    """Anything the solver can report events to."""

    def debug(self, event: str, **fields: Any) -> None:
        """Per-step detail, such as each vertex selection."""
        ...

    def info(self, event: str, **fields: Any) -> None:
        """Once-per-run summaries, such as the loaded graph size."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Conditions worth surfacing even when nothing else is shown."""
        ...


class NoopLogger:
    """Default sink for library use: events are discarded."""

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


class StdLogger:
    """Line-per-event sink used by the command-line tools.

    Text mode renders ``select`` at step 2 as
    ``debug select step=2 vertex=1 distance=3``; JSON mode writes the same
    data as ``{"level": "debug", "event": "select", "step": 2, ...}``.

    Args:
        level: Threshold; events below it are dropped.
        json_fmt: Write JSON objects instead of text.
        stream: Where lines go. Standard error keeps standard output free for
            the distances.
    """

    LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        if level not in self.LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def enabled(self, level: str) -> bool:
        return self.LEVELS[level] >= self.LEVELS[self.level]

    def _render(self, level: str, event: str, fields: Dict[str, Any]) -> str:
        if self.json_fmt:
            return json.dumps({"level": level, "event": event, **fields}, default=str)
        return " ".join([level, event] + [f"{k}={v}" for k, v in fields.items()])

    def log(self, level: str, event: str, **fields: Any) -> None:
        if self.enabled(level):
            self.stream.write(self._render(level, event, fields) + "\n")

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

SEVERITIES = ("success", "error")


@dataclass(frozen=True)
class Message:
    text: str
    severity: str
    shown_at: float


class Messenger:
    """Holds at most one user-facing message; a new one replaces the old."""

    def __init__(self, dismiss_after: float = 5.0, clock: Callable[[], float] = time.monotonic):
        self.dismiss_after = dismiss_after
        self._clock = clock
        self._message: Optional[Message] = None

    def show(self, text: str, severity: str) -> Message:
        if severity not in SEVERITIES:
            raise ValueError(f"Unknown message severity: {severity!r}")
        self._message = Message(text, severity, self._clock())
        return self._message

    def success(self, text: str) -> Message:
        return self.show(text, "success")

    def error(self, text: str) -> Message:
        return self.show(text, "error")

    def current(self) -> Optional[Message]:
        m = self._message
        if m is not None and self._clock() - m.shown_at >= self.dismiss_after:
            self._message = None
        return self._message

    def clear(self) -> None:
        self._message = None

from __future__ import annotations

import time
from typing import Callable, Iterable


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class IdGenerator:
    """Millisecond timestamps that never repeat within a session.

    When the clock has not moved past the last id handed out (two campaigns
    in the same millisecond, or a clock step backwards) the last id plus one
    is used instead.
    """

    def __init__(self, clock: Callable[[], int] = _now_ms):
        self._clock = clock
        self._last = 0

    def observe(self, ids: Iterable[int]) -> None:
        for i in ids:
            if i > self._last:
                self._last = i

    def next_id(self) -> int:
        self._last = max(int(self._clock()), self._last + 1)
        return self._last

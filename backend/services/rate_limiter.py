"""Fixed-window admission control per client key.

The window for a key opens on its first request and lasts
``window_seconds``; up to ``limit`` requests are admitted inside it. A client
can therefore send up to 2x ``limit`` across a window edge, which is accepted.
"""

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Protocol

from models.quota import QuotaDecision

logger = logging.getLogger(__name__)


class QuotaStore(Protocol):
    """Anything that can make admission decisions and evict stale state."""

    def check(self, key: str) -> QuotaDecision: ...

    def sweep(self) -> int: ...


@dataclass
class QuotaWindow:
    count: int
    reset_at: float  # epoch seconds


class InMemoryQuotaStore:
    """Process-local quota store.

    Each ``check`` reads and updates one window under the lock, so concurrent
    requests from the same key can neither under- nor over-count.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.limit = max(1, int(limit))
        self.window_seconds = float(window_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._windows: dict[str, QuotaWindow] = {}

    def __len__(self) -> int:
        return len(self._windows)

    def check(self, key: str) -> QuotaDecision:
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)

            if window is None or now > window.reset_at:
                window = QuotaWindow(count=1, reset_at=now + self.window_seconds)
                self._windows[key] = window
                return self._decision(True, self.limit - 1, window.reset_at)

            if window.count >= self.limit:
                return self._decision(False, 0, window.reset_at)

            window.count += 1
            return self._decision(True, self.limit - window.count, window.reset_at)

    def sweep(self) -> int:
        """Drop windows that have expired. Returns the number removed."""
        now = self._clock()
        with self._lock:
            snapshot = list(self._windows.items())

        expired = [key for key, window in snapshot if now > window.reset_at]

        removed = 0
        for key in expired:
            with self._lock:
                # check() may have reopened the window since the snapshot
                window = self._windows.get(key)
                if window is not None and now > window.reset_at:
                    del self._windows[key]
                    removed += 1
        return removed

    def _decision(self, allowed: bool, remaining: int, reset_at: float) -> QuotaDecision:
        return QuotaDecision(
            allowed=allowed,
            limit=self.limit,
            remaining=remaining,
            reset_at=reset_at,
        )


async def run_sweeper(store: QuotaStore, interval_seconds: float) -> None:
    """Evict expired windows every ``interval_seconds`` until cancelled."""
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            removed = store.sweep()
        except Exception:
            logger.exception("Quota sweep failed")
            continue
        if removed:
            logger.debug("Quota sweep removed %d expired windows", removed)

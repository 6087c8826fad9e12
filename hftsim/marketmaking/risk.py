"""Pre-trade checks for the market maker."""

from __future__ import annotations

import time
from collections.abc import Callable

from .config import MmConfig
from .models import Order


class RiskGate:
    """Rejects orders that breach the inventory limit or the per-second order rate."""

    def __init__(self, config: MmConfig, max_orders_per_sec: int = 20,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self.config = config
        self.max_orders_per_sec = max_orders_per_sec
        self._clock = clock
        self._sent_this_window = 0
        self._window_start = clock()

    def allow(self, order: Order, inv_after: float) -> bool:
        """Return True and count the order if it may be sent."""
        if abs(inv_after) > self.config.inv_limit:
            return False

        now = self._clock()
        if now - self._window_start >= 1.0:
            self._sent_this_window = 0
            self._window_start = now
        if self._sent_this_window >= self.max_orders_per_sec:
            return False
        self._sent_this_window += 1
        return True
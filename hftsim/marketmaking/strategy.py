"""Inventory-skewed passive quoting."""

from __future__ import annotations

import math

from .config import MmConfig
from .models import Fill, Tick


class InventoryMarketMaker:
    """Quotes around the mid, widening the spread as inventory grows."""

    def __init__(self, config: MmConfig) -> None:
        self.config = config
        self.inv = 0.0
        self.pnl = 0.0

    def _skew(self) -> float:
        limit = self.config.inv_limit
        if limit == 0.0:
            return math.nan if self.inv == 0.0 or math.isnan(self.inv) else math.copysign(1.0, self.inv)
        ratio = self.inv / limit
        if math.isnan(ratio):
            return ratio
        return max(-1.0, min(1.0, ratio))

    def quote(self, tick: Tick) -> tuple[float, float]:
        """Return the (bid, ask) prices to quote for *tick*."""
        mid = (tick.bid + tick.ask) / 2.0
        half = self.config.half_spread * (1.0 + abs(self._skew()) * self.config.inv_spread_mult)
        return mid - half, mid + half

    def on_fill(self, fill: Fill) -> None:
        """Update inventory and cash PnL after an execution."""
        direction = fill.side.sign()
        self.inv += direction * fill.qty
        self.pnl -= direction * fill.qty * fill.px
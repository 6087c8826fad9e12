"""Rolling-window z-score pair trading."""

from __future__ import annotations

import math
import statistics
from collections import deque

from .config import StratConfig
from .models import Fill, Order, Side

MIN_STD = 1e-8


class PairTrader:
    """Trades the log-price spread ``log A - beta * log B`` against its rolling mean."""

    def __init__(self, config: StratConfig) -> None:
        if config.lookback < 1:
            raise ValueError("lookback must be at least 1")
        self.config = config
        self.log_a: deque[float] = deque(maxlen=config.lookback)
        self.log_b: deque[float] = deque(maxlen=config.lookback)
        self.pos_a = 0.0
        self.pos_b = 0.0

    def _zscore(self) -> float:
        beta = self.config.beta
        spread = [a - beta * b for a, b in zip(self.log_a, self.log_b)]
        mean = statistics.fmean(spread)
        variance = statistics.fmean((s - mean) ** 2 for s in spread)
        std = max(math.sqrt(variance), MIN_STD)
        return (spread[-1] - mean) / std

    def _pair(self, a_px: float, b_px: float, side_a: Side, side_b: Side) -> list[Order]:
        cfg = self.config
        return [
            Order(symbol=cfg.sym_a, px=a_px, qty=cfg.size, side=side_a),
            Order(symbol=cfg.sym_b, px=b_px, qty=cfg.size * cfg.beta, side=side_b),
        ]

    def on_ticks(self, a_px: float, b_px: float) -> list[Order]:
        """Record the latest prices and return the orders to send, if any.

        Raises ValueError for prices that are not positive.
        """
        cfg = self.config
        self.log_a.append(math.log(a_px))
        self.log_b.append(math.log(b_px))
        if len(self.log_a) < cfg.lookback:
            return []

        z = self._zscore()
        orders: list[Order] = []

        if z > cfg.entry_z and self.pos_a - cfg.size >= -cfg.pos_limit:
            orders += self._pair(a_px, b_px, Side.SELL, Side.BUY)
        elif z < -cfg.entry_z and self.pos_a + cfg.size <= cfg.pos_limit:
            orders += self._pair(a_px, b_px, Side.BUY, Side.SELL)

        if abs(z) < cfg.exit_z and (self.pos_a != 0.0 or self.pos_b != 0.0):
            orders.append(Order(symbol=cfg.sym_a, px=a_px, qty=abs(self.pos_a),
                                side=Side.SELL if self.pos_a > 0.0 else Side.BUY))
            orders.append(Order(symbol=cfg.sym_b, px=b_px, qty=abs(self.pos_b),
                                side=Side.SELL if self.pos_b > 0.0 else Side.BUY))
        return orders

    def on_fill(self, fill: Fill) -> None:
        """Update the position of the leg that was filled."""
        delta = fill.side.sign() * fill.qty
        if fill.symbol == self.config.sym_a:
            self.pos_a += delta
        elif fill.symbol == self.config.sym_b:
            self.pos_b += delta
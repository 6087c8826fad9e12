"""A tiny in-process exchange quoting two correlated symbols."""

from __future__ import annotations

import asyncio
import math
import random

from .models import Fill, Order, Tick

RHO = 0.9
SHOCK_SCALE = 0.002
B_START_RATIO = 0.98


class Exchange:
    """Publishes correlated price ticks and fills every order at the last price."""

    def __init__(self, ticks: asyncio.Queue[Tick], fills: asyncio.Queue[Fill],
                 symbol_a: str, symbol_b: str, start_px: float,
                 rng: random.Random | None = None) -> None:
        self.ticks = ticks
        self.fills = fills
        self.symbol_a = symbol_a
        self.symbol_b = symbol_b
        self.px_a = start_px
        self.px_b = start_px * B_START_RATIO
        self._rng = rng if rng is not None else random.Random()

    def next_ticks(self) -> tuple[Tick, Tick]:
        """Apply one pair of correlated returns and return the new ticks for A and B."""
        n1 = self._rng.random()
        n2 = self._rng.random()
        z1 = (n1 - 0.5) * SHOCK_SCALE
        z2 = RHO * z1 + math.sqrt(1.0 - RHO ** 2) * ((n2 - 0.5) * SHOCK_SCALE)
        self.px_a *= 1.0 + z1
        self.px_b *= 1.0 + z2
        tick_a = Tick(symbol=self.symbol_a, px=self.px_a)
        tick_b = Tick(symbol=self.symbol_b, px=self.px_b, ts=tick_a.ts)
        return tick_a, tick_b

    def match(self, order: Order) -> Fill:
        """Fill *order* immediately at the current price of its symbol."""
        book_px = self.px_a if order.symbol == self.symbol_a else self.px_b
        return Fill(symbol=order.symbol, px=book_px, qty=order.qty, side=order.side)

    async def run(self, tick_ms: int, orders: asyncio.Queue[Order | None]) -> None:
        """Tick every *tick_ms* milliseconds and fill orders until ``None`` arrives."""
        if tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        loop = asyncio.get_running_loop()
        period = tick_ms / 1000.0
        next_at = loop.time()
        getter: asyncio.Future | None = None
        try:
            while True:
                if getter is None:
                    getter = asyncio.ensure_future(orders.get())
                timeout = max(0.0, next_at - loop.time())
                done, _ = await asyncio.wait({getter}, timeout=timeout)
                if getter in done:
                    order = getter.result()
                    getter = None
                    if order is None:
                        return
                    await self.fills.put(self.match(order))
                else:
                    for tick in self.next_ticks():
                        await self.ticks.put(tick)
                    next_at += period
        finally:
            if getter is not None:
                getter.cancel()
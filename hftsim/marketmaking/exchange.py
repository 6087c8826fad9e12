"""A tiny in-process exchange that random-walks a mid price."""

from __future__ import annotations

import asyncio
import random

from .models import Fill, Order, Side, Tick

DEFAULT_SPREAD = 0.5
MAX_STEP = 0.05


class Exchange:
    """Publishes ticks and fills orders that cross the simulated book."""

    def __init__(self, ticks: asyncio.Queue[Tick], fills: asyncio.Queue[Fill],
                 start_mid: float, rng: random.Random | None = None) -> None:
        self.ticks = ticks
        self.fills = fills
        self.mid = start_mid
        self.spread = DEFAULT_SPREAD
        self._rng = rng if rng is not None else random.Random()

    def next_tick(self) -> Tick:
        """Move the mid by a small random step and return the new top of book."""
        self.mid += self._rng.uniform(-MAX_STEP, MAX_STEP)
        return Tick(bid=self.mid - self.spread, ask=self.mid + self.spread)

    def match(self, order: Order) -> Fill | None:
        """Fill *order* at the mid if it crosses the book, else return None."""
        if order.side is Side.BUY:
            crosses = order.px >= self.mid + self.spread
        else:
            crosses = order.px <= self.mid - self.spread
        if not crosses:
            return None
        return Fill(px=self.mid, qty=order.qty, side=order.side)

    async def run(self, tick_ms: int, orders: asyncio.Queue[Order | None]) -> None:
        """Tick every *tick_ms* milliseconds and match orders until ``None`` arrives."""
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
                    fill = self.match(order)
                    if fill is not None:
                        await self.fills.put(fill)
                else:
                    await self.ticks.put(self.next_tick())
                    next_at += period
        finally:
            if getter is not None:
                getter.cancel()
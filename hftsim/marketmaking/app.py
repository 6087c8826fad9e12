"""Event loop wiring the simulated exchange to the market maker."""

import argparse
import asyncio
import logging
import sys

from .config import DEFAULT_PATH, ConfigError, MmConfig, load_config
from .exchange import Exchange
from .models import Order, Side
from .risk import RiskGate
from .strategy import InventoryMarketMaker

log = logging.getLogger(__name__)

QUEUE_SIZE = 1024
START_MID = 100.0


async def _next(queue: asyncio.Queue, exchange_task: asyncio.Task):
    """Next queued item, or None once the exchange has stopped."""
    getter = asyncio.ensure_future(queue.get())
    done, _ = await asyncio.wait({getter, exchange_task}, return_when=asyncio.FIRST_COMPLETED)
    if getter in done:
        return getter.result()
    getter.cancel()
    exchange_task.result()
    return None


def _apply_fills(mm: InventoryMarketMaker, fills: asyncio.Queue) -> None:
    while not fills.empty():
        fill = fills.get_nowait()
        mm.on_fill(fill)
        log.info("FILL %s qty=%.0f px=%.2f inv=%.1f pnl=%.2f",
                 fill.side.value, fill.qty, fill.px, mm.inv, mm.pnl)


async def run(config: MmConfig, max_ticks: int | None = None) -> InventoryMarketMaker:
    """Trade against the simulator; stop after *max_ticks* ticks if given."""
    ticks, fills, orders = (asyncio.Queue(QUEUE_SIZE) for _ in range(3))
    exchange_task = asyncio.create_task(
        Exchange(ticks, fills, START_MID).run(config.tick_ms, orders))
    mm = InventoryMarketMaker(config)
    risk = RiskGate(config)

    processed = 0
    try:
        while max_ticks is None or processed < max_ticks:
            tick = await _next(ticks, exchange_task)
            if tick is None:
                break
            _apply_fills(mm, fills)
            bid, ask = mm.quote(tick)
            for px, side in ((bid, Side.BUY), (ask, Side.SELL)):
                order = Order(px=px, qty=config.size, side=side)
                if risk.allow(order, mm.inv + side.sign() * config.size):
                    await orders.put(order)
            processed += 1

        await orders.put(None)
        while not exchange_task.done():
            await asyncio.wait({exchange_task}, timeout=0.01)
            while not ticks.empty():
                ticks.get_nowait()
            _apply_fills(mm, fills)
        exchange_task.result()
    except BaseException:
        exchange_task.cancel()
        raise
    _apply_fills(mm, fills)
    return mm


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Run the passive market-making simulator.")
    parser.add_argument("--config", default=DEFAULT_PATH, help="path of the TOML configuration")
    parser.add_argument("--ticks", type=int, default=None, help="stop after this many ticks")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    try:
        asyncio.run(run(config, args.ticks))
    except KeyboardInterrupt:
        pass
    return 0
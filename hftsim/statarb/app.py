"""Event loop wiring the simulated exchange to the pair trader."""

import argparse
import asyncio
import logging
import sys

from ..marketmaking.app import _next
from .config import DEFAULT_PATH, ConfigError, StratConfig, load_config
from .exchange import Exchange
from .risk import RiskGate
from .strategy import PairTrader

log = logging.getLogger(__name__)

QUEUE_SIZE = 2048
START_PX = 100.0
START_PX_B = 98.0


def _apply_fills(trader: PairTrader, fills: asyncio.Queue) -> None:
    while not fills.empty():
        fill = fills.get_nowait()
        trader.on_fill(fill)
        log.info("FILL %s %.2f %s @ %.2f", fill.side.value, fill.qty, fill.symbol, fill.px)


async def run(config: StratConfig, max_ticks: int | None = None) -> PairTrader:
    """Trade against the simulator; stop after *max_ticks* price intervals if given."""
    ticks, fills, orders = (asyncio.Queue(QUEUE_SIZE) for _ in range(3))
    exchange_task = asyncio.create_task(
        Exchange(ticks, fills, config.sym_a, config.sym_b, START_PX).run(config.tick_ms, orders))
    trader = PairTrader(config)
    risk = RiskGate(config)

    last_a, last_b = START_PX, START_PX_B
    intervals = 0
    try:
        while max_ticks is None or intervals < max_ticks:
            tick = await _next(ticks, exchange_task)
            if tick is None:
                break
            _apply_fills(trader, fills)
            if tick.symbol == config.sym_a:
                last_a = tick.px
            else:
                last_b = tick.px
            # B is published last, so both legs are fresh here.
            if tick.symbol != config.sym_b:
                continue
            for order in trader.on_ticks(last_a, last_b):
                current = trader.pos_a if order.symbol == config.sym_a else trader.pos_b
                if risk.allow(order, current + order.side.sign() * order.qty):
                    await orders.put(order)
            intervals += 1

        await orders.put(None)
        while not exchange_task.done():
            await asyncio.wait({exchange_task}, timeout=0.01)
            while not ticks.empty():
                ticks.get_nowait()
            _apply_fills(trader, fills)
        exchange_task.result()
    except BaseException:
        exchange_task.cancel()
        raise
    _apply_fills(trader, fills)
    return trader


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Run the statistical-arbitrage simulator.")
    parser.add_argument("--config", default=DEFAULT_PATH, help="path of the TOML configuration")
    parser.add_argument("--ticks", type=int, default=None,
                        help="stop after this many price intervals")
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
"""Market-data and order types used by the market-making simulator."""

import enum
import time
from dataclasses import dataclass, field


class Side(enum.Enum):
    BUY = "Buy"
    SELL = "Sell"

    def sign(self) -> float:
        """+1.0 for a buy, -1.0 for a sell."""
        return 1.0 if self is Side.BUY else -1.0


@dataclass(frozen=True, slots=True)
class Tick:
    bid: float
    ask: float
    ts: float = field(default_factory=time.monotonic)


@dataclass(frozen=True, slots=True)
class Order:
    px: float
    qty: float
    side: Side


@dataclass(frozen=True, slots=True)
class Fill:
    px: float
    qty: float
    side: Side
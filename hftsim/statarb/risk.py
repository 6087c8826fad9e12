"""Position-limit check for the pair trader."""

from __future__ import annotations

from .config import StratConfig
from .models import Order


class RiskGate:
    """Rejects orders that would leave a leg beyond the position limit."""

    def __init__(self, config: StratConfig) -> None:
        self.config = config

    def allow(self, order: Order, pos_after: float) -> bool:
        """Return True if *pos_after* stays within plus or minus ``pos_limit``."""
        return abs(pos_after) <= self.config.pos_limit
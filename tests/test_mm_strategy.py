import pytest

from hftsim.marketmaking.config import MmConfig
from hftsim.marketmaking.models import Fill, Side, Tick
from hftsim.marketmaking.strategy import InventoryMarketMaker


@pytest.fixture
def cfg():
    return MmConfig(symbol="SIM", half_spread=0.25, size=1.0, inv_limit=10.0,
                    inv_spread_mult=1.0, tick_ms=10)


def width(mm):
    bid, ask = mm.quote(Tick(bid=99.5, ask=100.5))
    return ask - bid


def test_starts_flat(cfg):
    mm = InventoryMarketMaker(cfg)
    assert (mm.inv, mm.pnl) == (0.0, 0.0)


def test_flat_quote_is_symmetric_half_spread(cfg):
    mm = InventoryMarketMaker(cfg)
    bid, ask = mm.quote(Tick(bid=99.5, ask=100.5))
    assert (bid + ask) / 2 == pytest.approx(100.0)
    assert ask - bid == pytest.approx(2 * cfg.half_spread)


def test_inventory_widens_spread(cfg):
    mm = InventoryMarketMaker(cfg)
    flat = width(mm)
    mm.on_fill(Fill(px=100.0, qty=5.0, side=Side.BUY))
    assert width(mm) > flat


def test_spread_at_limit_uses_full_multiplier(cfg):
    mm = InventoryMarketMaker(cfg)
    mm.on_fill(Fill(px=100.0, qty=cfg.inv_limit, side=Side.SELL))
    assert width(mm) == pytest.approx(2 * cfg.half_spread * (1 + cfg.inv_spread_mult))


def test_skew_is_clamped_beyond_limit(cfg):
    mm = InventoryMarketMaker(cfg)
    mm.on_fill(Fill(px=100.0, qty=cfg.inv_limit, side=Side.BUY))
    at_limit = width(mm)
    mm.on_fill(Fill(px=100.0, qty=cfg.inv_limit, side=Side.BUY))
    assert width(mm) == pytest.approx(at_limit)


def test_buy_fill_adds_inventory_and_spends_cash(cfg):
    mm = InventoryMarketMaker(cfg)
    mm.on_fill(Fill(px=100.0, qty=2.0, side=Side.BUY))
    assert mm.inv == 2.0
    assert mm.pnl == -200.0


def test_round_trip_realises_price_difference(cfg):
    mm = InventoryMarketMaker(cfg)
    mm.on_fill(Fill(px=100.0, qty=2.0, side=Side.BUY))
    mm.on_fill(Fill(px=101.0, qty=2.0, side=Side.SELL))
    assert mm.inv == 0.0
    assert mm.pnl == pytest.approx(2.0)
import dataclasses

import pytest

from hftsim.statarb.models import Fill, Order, Side, Tick


def test_side_signs_are_opposite_units():
    assert Side.BUY.sign() == 1.0
    assert Side.SELL.sign() == -Side.BUY.sign()


def test_side_sign_scales_quantity():
    assert Side.SELL.sign() * 3.0 == -3.0


def test_tick_keeps_fields_and_is_frozen():
    tick = Tick(symbol="AAA", px=101.5)
    assert tick.symbol == "AAA"
    assert tick.px == 101.5
    with pytest.raises(dataclasses.FrozenInstanceError):
        tick.px = 1.0


def test_tick_timestamps_are_monotonic():
    first = Tick(symbol="AAA", px=1.0)
    second = Tick(symbol="AAA", px=1.0)
    assert first.ts <= second.ts


def test_fill_built_from_order_fields_matches():
    order = Order(symbol="BBB", px=98.0, qty=2.0, side=Side.SELL)
    fill = Fill(symbol=order.symbol, px=order.px, qty=order.qty, side=order.side)
    assert dataclasses.astuple(fill) == dataclasses.astuple(order)


def test_orders_compare_by_value():
    assert Order("AAA", 1.0, 2.0, Side.BUY) == Order("AAA", 1.0, 2.0, Side.BUY)
    assert Order("AAA", 1.0, 2.0, Side.BUY) != Order("AAA", 1.0, 2.0, Side.SELL)
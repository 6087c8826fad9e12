import dataclasses
import time

import pytest

from hftsim.marketmaking.models import Fill, Order, Side, Tick


def test_buy_sign_is_positive():
    assert Side.BUY.sign() == 1.0


def test_sell_sign_is_negative():
    assert Side.SELL.sign() == -1.0


def test_signs_are_opposite_for_every_side():
    buy = Side.BUY.sign()
    sell = Side.SELL.sign()
    assert buy + sell == 0.0
    assert buy == -sell


def test_tick_gets_monotonic_timestamp_by_default():
    before = time.monotonic()
    tick = Tick(bid=99.5, ask=100.5)
    after = time.monotonic()
    assert before <= tick.ts <= after


def test_order_is_immutable():
    order = Order(px=100.0, qty=1.0, side=Side.BUY)
    with pytest.raises(dataclasses.FrozenInstanceError):
        order.px = 1.0  # type: ignore[misc]
    assert order.px == 100.0
    assert order.side is Side.BUY


def test_fill_equality_uses_fields():
    assert Fill(px=1.0, qty=2.0, side=Side.SELL) == Fill(px=1.0, qty=2.0, side=Side.SELL)
    assert Fill(px=1.0, qty=2.0, side=Side.SELL) != Fill(px=1.0, qty=2.0, side=Side.BUY)
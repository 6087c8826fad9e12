import pytest

from hftsim.marketmaking.app import main, run
from hftsim.marketmaking.config import MmConfig


def make_config(half_spread):
    return MmConfig(symbol="SIM", half_spread=half_spread, size=1.0, inv_limit=5.0,
                    inv_spread_mult=1.0, tick_ms=1)


@pytest.mark.asyncio
async def test_wide_quotes_never_fill():
    mm = await run(make_config(10.0), 5)
    assert (mm.inv, mm.pnl) == (0.0, 0.0)


@pytest.mark.asyncio
async def test_run_returns_strategy_with_given_config():
    cfg = make_config(10.0)
    mm = await run(cfg, 1)
    assert mm.config is cfg


def test_main_runs_from_config_file(tmp_path, monkeypatch):
    for key in ("MM_SYMBOL", "MM_HALF_SPREAD", "MM_SIZE", "MM_INV_LIMIT",
                "MM_INV_SPREAD_MULT", "MM_TICK_MS"):
        monkeypatch.delenv(key, raising=False)
    path = tmp_path / "Config.toml"
    path.write_text(
        'symbol = "SIM"\nhalf_spread = 0.25\nsize = 1.0\n'
        "inv_limit = 5.0\ninv_spread_mult = 1.0\ntick_ms = 1\n"
    )
    assert main(["--config", str(path), "--ticks", "3"]) == 0


def test_main_reports_bad_config(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("MM_HALF_SPREAD", raising=False)
    path = tmp_path / "Config.toml"
    path.write_text('symbol = "SIM"\n')
    assert main(["--config", str(path), "--ticks", "1"]) == 1
    assert "half_spread" in capsys.readouterr().err
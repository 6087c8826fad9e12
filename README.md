# hftsim

Two small, self-contained trading simulators built on `asyncio`. Each one
runs an in-process exchange that makes up prices and a strategy that trades
against it. A risk gate sits between the strategy and the exchange.

- **Passive market making** (`hftsim.marketmaking`): the mid price follows a
  random walk, moving by a uniform step in [-0.05, 0.05] each tick, and the
  book is quoted 0.5 either side of it. An inventory-aware quoter,
  `InventoryMarketMaker`, widens its spread as its position grows. A
  `RiskGate` enforces the inventory limit and lets through at most 20 orders
  in each one-second window.
- **Statistical arbitrage** (`hftsim.statarb`): two price series with
  correlated returns (rho = 0.9). B starts at 98% of A's price. A
  rolling-window z-score `PairTrader` opens a spread trade when the z-score
  leaves the entry band and flattens both legs when it comes back inside the
  exit band. A `RiskGate` caps the absolute position on each leg.

The package needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the simulators

Each command reads its parameters from a TOML file, `Config.toml` in the
current directory by default. Environment variables with the simulator's
prefix override values from the file. The prefix is followed by the field
name, and the field name is matched case-insensitively. A missing file
counts as empty. Every field must still be supplied, from the file or from
the environment. If a field is missing, has the wrong type, or an integer
field is negative, the command prints `error: ...` to stderr and exits with
status 1.

Both commands accept:

- `--config PATH`: the TOML file to read (default `Config.toml`).
- `--ticks N`: stop after `N` ticks (market maker) or `N` price intervals
  (pair trader). Without it the simulator runs until interrupted with Ctrl-C.

Fills are logged at INFO level.

### Market maker: `hftsim-mm`

Environment prefix: `MM_`, for example `MM_HALF_SPREAD=0.3`.

```toml
symbol = "SIM"
half_spread = 0.25      # half-spread when flat
size = 1.0              # contracts per quote side
inv_limit = 10.0        # inventory hard limit
inv_spread_mult = 1.0   # extra spread at maximum inventory (multiplier)
tick_ms = 100           # simulator tick interval in milliseconds
```

```
hftsim-mm --ticks 200
```

On every tick the quoter places a buy at its bid and a sell at its ask. The
exchange fills an order at the mid only when it crosses the book: a buy at or
above the ask, or a sell at or below the bid. Each fill is logged with the
resulting inventory and cash P&L. The cash P&L is the running sum of money
paid and received, and open inventory is not marked to market.

### Pair trader: `hftsim-statarb`

Environment prefix: `STB_`, for example `STB_ENTRY_Z=2.5`.

```toml
sym_a = "AAA"
sym_b = "BBB"
lookback = 100     # rolling window length in ticks (at least 1)
beta = 1.0         # spread = log(P_A) - beta * log(P_B)
entry_z = 2.0      # z-score at which a spread trade is opened
exit_z = 0.5       # z-score band inside which positions are flattened
size = 1.0         # contract size per leg
pos_limit = 5.0    # cap on absolute position per leg
tick_ms = 100      # simulator tick interval in milliseconds
```

```
hftsim-statarb --ticks 500
```

The exchange fills every order immediately at the current price of its
symbol. Each fill is logged with its side, quantity, symbol and price.

## Using the library

- `load_config(path="Config.toml", environ=None)` in
  `hftsim.marketmaking.config` returns an `MmConfig`. The one in
  `hftsim.statarb.config` returns a `StratConfig`. Pass a mapping as
  `environ` to use it in place of `os.environ`. Both raise `ConfigError`, a
  subclass of `ValueError`.
- `run(config, max_ticks=None)` in `hftsim.marketmaking.app` and
  `hftsim.statarb.app` is a coroutine. It drives a simulation, shuts the
  exchange down, applies any remaining fills, and returns the strategy
  object, so its final inventory, P&L or positions can be inspected.
- `InventoryMarketMaker.quote(tick)` returns a `(bid, ask)` pair around the
  tick's mid. The half-spread is
  `half_spread * (1 + |clamp(inv / inv_limit, -1, 1)| * inv_spread_mult)`.
  `on_fill(fill)` updates `inv` and `pnl`.
- `PairTrader.on_ticks(a_px, b_px)` returns a list of `Order`s, which is
  empty until the lookback window has filled. Prices must be positive,
  otherwise it raises `ValueError`. `on_fill(fill)` updates `pos_a` or
  `pos_b`.
- `RiskGate.allow(order, position_after)` returns whether an order may be
  sent. The market-making gate takes `max_orders_per_sec` (default 20) and
  a `clock` callable.
- `Exchange` takes its tick and fill queues and an optional
  `random.Random` for reproducible prices. `next_tick()` /
  `next_ticks()` and `match(order)` can be called directly. The async
  `run(tick_ms, orders)` loop stops when `None` is put on the order queue.
- `Side`, `Tick`, `Order` and `Fill` are in each simulator's `models`
  module. `Side.sign()` gives +1.0 for a buy and -1.0 for a sell.

## What it does not do

Both exchanges are random price generators inside the same process. The
package does not connect to a real venue or market-data feed, has no order
book depth, queue position, partial fills, fees or latency, and does not
store or replay results beyond the log lines it writes.
"""Configuration for the pair-trading simulator."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from ..marketmaking.config import ConfigError, _load

DEFAULT_PATH = "Config.toml"
ENV_PREFIX = "STB_"

__all__ = ["ConfigError", "StratConfig", "load_config"]


@dataclass(frozen=True, slots=True)
class StratConfig:
    sym_a: str
    sym_b: str
    lookback: int
    beta: float
    entry_z: float
    exit_z: float
    size: float
    pos_limit: float
    tick_ms: int


def load_config(path: str | os.PathLike[str] = DEFAULT_PATH,
                environ: Mapping[str, str] | None = None) -> StratConfig:
    """Read the TOML file at *path*, then apply ``STB_*`` environment overrides."""
    return _load(StratConfig, path, environ, ENV_PREFIX)
"""Configuration for the market-making simulator."""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

DEFAULT_PATH = "Config.toml"
ENV_PREFIX = "MM_"


class ConfigError(ValueError):
    """Raised when the configuration cannot be read or is incomplete."""


@dataclass(frozen=True, slots=True)
class MmConfig:
    symbol: str
    half_spread: float
    size: float
    inv_limit: float
    inv_spread_mult: float
    tick_ms: int


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def _coerce(name: str, kind: type, value: Any) -> Any:
    try:
        if isinstance(value, bool):
            raise TypeError
        if kind is str:
            if not isinstance(value, str):
                raise TypeError
        elif kind is float:
            value = float(value)
        else:
            if isinstance(value, float):
                raise TypeError
            value = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"field `{name}`: expected {kind.__name__}, got {value!r}") from exc
    if kind is int and value < 0:
        raise ConfigError(f"field `{name}`: must not be negative, got {value}")
    return value


def _load(cls: type, path: str | os.PathLike[str], environ: Mapping[str, str] | None,
          prefix: str) -> Any:
    env = os.environ if environ is None else environ
    raw = _read_toml(Path(path))
    raw.update({key[len(prefix):].lower(): value for key, value in env.items()
                if key.upper().startswith(prefix) and len(key) > len(prefix)})
    values = {}
    for spec in fields(cls):
        if spec.name not in raw:
            raise ConfigError(f"missing field `{spec.name}`")
        values[spec.name] = _coerce(spec.name, spec.type, raw[spec.name])
    return cls(**values)


def load_config(path: str | os.PathLike[str] = DEFAULT_PATH,
                environ: Mapping[str, str] | None = None) -> MmConfig:
    """Read the TOML file at *path*, then apply ``MM_*`` environment overrides."""
    return _load(MmConfig, path, environ, ENV_PREFIX)
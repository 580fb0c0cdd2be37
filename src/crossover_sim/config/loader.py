"""Load configuration files."""

from __future__ import annotations

import hashlib
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import yaml

from crossover_sim.config.models import (
    AppConfig,
    BacktestConfig,
    MonteCarloConfig,
    StrategyConfig,
)
from crossover_sim.errors import ConfigError


def load_config(path: str | Path) -> AppConfig:
    path = Path(path)
    data = _load_yaml(path)

    name = str(data.get("name", "ma_crossover"))
    strategy = _parse_strategy(_require(data, "strategy"))
    backtest = _parse_backtest(data.get("backtest") or {})
    monte_carlo = _parse_monte_carlo(data.get("monte_carlo") or {})

    return AppConfig(
        name=name,
        strategy=strategy,
        backtest=backtest,
        monte_carlo=monte_carlo,
    )


def compute_config_hash(path: str | Path) -> str:
    path = Path(path)
    content = path.read_bytes()
    return hashlib.sha256(content).hexdigest()


def serialize_config(config: AppConfig) -> dict[str, Any]:
    return asdict(config)


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config {path} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping")
    return data


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ConfigError(f"Missing required config key: {key}")
    return data[key]


def _section(data: Any, key: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ConfigError(f"Config section '{key}' must be a mapping")
    return data


def _as_int(value: Any, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {key}: {value!r}") from exc


def _as_float(value: Any, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {key}: {value!r}") from exc


def _optional_int(value: Any, key: str) -> Optional[int]:
    if value is None:
        return None
    return _as_int(value, key)


def _parse_strategy(data: Any) -> StrategyConfig:
    data = _section(data, "strategy")
    return StrategyConfig(
        short_period=_as_int(data.get("short_period", 5), "short_period"),
        long_period=_as_int(data.get("long_period", 20), "long_period"),
    )


def _parse_backtest(data: Any) -> BacktestConfig:
    data = _section(data, "backtest")
    data_path = data.get("data_path")
    return BacktestConfig(
        initial_balance=_as_float(data.get("initial_balance", 10000.0), "initial_balance"),
        data_path=str(data_path) if data_path is not None else None,
        header_lines=_as_int(data.get("header_lines", 3), "header_lines"),
    )


def _parse_monte_carlo(data: Any) -> MonteCarloConfig:
    data = _section(data, "monte_carlo")
    return MonteCarloConfig(
        simulations=_as_int(data.get("simulations", 100), "simulations"),
        path_length=_as_int(data.get("path_length", 252), "path_length"),
        initial_price=_as_float(data.get("initial_price", 100.0), "initial_price"),
        daily_volatility_pct=_as_float(data.get("daily_volatility_pct", 2.0), "daily_volatility_pct"),
        seed=_optional_int(data.get("seed"), "seed"),
        max_workers=_as_int(data.get("max_workers", 1), "max_workers"),
        progress_every=_as_int(data.get("progress_every", 10), "progress_every"),
    )

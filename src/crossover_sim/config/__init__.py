"""Config loading."""

from crossover_sim.config.loader import compute_config_hash, load_config, serialize_config
from crossover_sim.config.models import (
    DEFAULT_INITIAL_BALANCE,
    AppConfig,
    BacktestConfig,
    MonteCarloConfig,
    StrategyConfig,
)

__all__ = [
    "AppConfig",
    "BacktestConfig",
    "DEFAULT_INITIAL_BALANCE",
    "MonteCarloConfig",
    "StrategyConfig",
    "compute_config_hash",
    "load_config",
    "serialize_config",
]

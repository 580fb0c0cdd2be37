"""Configuration models for reproducible runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from crossover_sim.errors import ConfigError
from crossover_sim.strategy.signals import first_signal_index

DEFAULT_INITIAL_BALANCE = 10000.0


@dataclass(frozen=True)
class StrategyConfig:
    short_period: int = 5
    long_period: int = 20

    def __post_init__(self) -> None:
        for name in ("short_period", "long_period"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")

    @property
    def warmup(self) -> int:
        """First index at which crossover signals are evaluated."""
        return first_signal_index(self.short_period, self.long_period)


@dataclass(frozen=True)
class BacktestConfig:
    initial_balance: float = DEFAULT_INITIAL_BALANCE
    data_path: Optional[str] = None
    header_lines: int = 3

    def __post_init__(self) -> None:
        if self.initial_balance <= 0:
            raise ConfigError(f"initial_balance must be positive, got {self.initial_balance}")
        if self.header_lines < 0:
            raise ConfigError(f"header_lines must be non-negative, got {self.header_lines}")


@dataclass(frozen=True)
class MonteCarloConfig:
    simulations: int = 100
    path_length: int = 252
    initial_price: float = 100.0
    daily_volatility_pct: float = 2.0
    seed: Optional[int] = None
    max_workers: int = 1
    progress_every: int = 10

    def __post_init__(self) -> None:
        if self.simulations <= 0:
            raise ConfigError(f"simulations must be positive, got {self.simulations}")
        if self.path_length <= 0:
            raise ConfigError(f"path_length must be positive, got {self.path_length}")
        if self.initial_price <= 0:
            raise ConfigError(f"initial_price must be positive, got {self.initial_price}")
        if self.daily_volatility_pct < 0:
            raise ConfigError(
                f"daily_volatility_pct must be non-negative, got {self.daily_volatility_pct}"
            )
        if self.max_workers < 1:
            raise ConfigError(f"max_workers must be at least 1, got {self.max_workers}")
        if self.progress_every < 0:
            raise ConfigError(f"progress_every must be non-negative, got {self.progress_every}")


@dataclass(frozen=True)
class AppConfig:
    name: str = "ma_crossover"
    strategy: StrategyConfig = StrategyConfig()
    backtest: BacktestConfig = BacktestConfig()
    monte_carlo: MonteCarloConfig = MonteCarloConfig()

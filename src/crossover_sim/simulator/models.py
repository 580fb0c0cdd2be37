"""Simulation data structures."""

from __future__ import annotations

from dataclasses import dataclass

from crossover_sim.strategy.models import PositionState, Trade


@dataclass(frozen=True)
class SimulationResult:
    initial_balance: float
    trajectory: list[float]
    trades: list[Trade]
    start_index: int
    final_position: PositionState
    buy_and_hold_final_balance: float

    @property
    def final_balance(self) -> float:
        if not self.trajectory:
            return self.initial_balance
        return self.trajectory[-1]

    @property
    def trade_count(self) -> int:
        return len(self.trades)

    @property
    def total_return_pct(self) -> float:
        return (self.final_balance - self.initial_balance) / self.initial_balance * 100.0


@dataclass(frozen=True)
class RunSummary:
    initial_balance: float
    final_balance: float
    total_return_pct: float
    trade_count: int
    avg_daily_return_pct: float
    annualized_volatility_pct: float
    sharpe_ratio: float
    buy_and_hold_final_balance: float
    buy_and_hold_return_pct: float

    @property
    def excess_return_pct(self) -> float:
        return self.total_return_pct - self.buy_and_hold_return_pct


@dataclass(frozen=True)
class MonteCarloSummary:
    simulation_count: int
    avg_return_pct: float
    median_return_pct: float
    best_return_pct: float
    worst_return_pct: float
    p95_return_pct: float
    p5_return_pct: float
    returns: tuple[float, ...] = ()

"""Simulation helpers."""

from crossover_sim.simulator.metrics import (
    TRADING_DAYS_PER_YEAR,
    annualized_volatility,
    compute_run_summary,
    period_returns,
    sharpe_ratio,
    summarize_trajectory,
)
from crossover_sim.simulator.models import MonteCarloSummary, RunSummary, SimulationResult
from crossover_sim.simulator.monte_carlo import MonteCarloRunner, simulate_trial, summarize_returns
from crossover_sim.simulator.portfolio import PortfolioSimulator, buy_and_hold_balance

__all__ = [
    "MonteCarloRunner",
    "MonteCarloSummary",
    "PortfolioSimulator",
    "RunSummary",
    "SimulationResult",
    "TRADING_DAYS_PER_YEAR",
    "annualized_volatility",
    "buy_and_hold_balance",
    "compute_run_summary",
    "period_returns",
    "sharpe_ratio",
    "simulate_trial",
    "summarize_returns",
    "summarize_trajectory",
]

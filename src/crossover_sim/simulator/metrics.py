"""Performance statistics derived from a balance trajectory."""

from __future__ import annotations

import math
from typing import Sequence

from crossover_sim.errors import ConfigError, DataError, InsufficientDataError
from crossover_sim.simulator.models import RunSummary, SimulationResult

TRADING_DAYS_PER_YEAR = 252


def period_returns(trajectory: Sequence[float]) -> list[float]:
    returns: list[float] = []
    for index in range(1, len(trajectory)):
        previous = trajectory[index - 1]
        if previous <= 0:
            raise DataError(f"Non-positive balance {previous} at trajectory position {index - 1}")
        returns.append(trajectory[index] / previous - 1.0)
    return returns


def annualized_volatility(returns: Sequence[float]) -> float:
    if not returns:
        raise InsufficientDataError("Volatility needs at least one period return")
    mean = sum(returns) / len(returns)
    variance = sum((value - mean) ** 2 for value in returns) / len(returns)
    return math.sqrt(variance) * math.sqrt(TRADING_DAYS_PER_YEAR)


def sharpe_ratio(avg_return: float, volatility: float) -> float:
    """Annualized mean return over annualized volatility.

    A zero volatility yields the IEEE-754 result (+/-inf, or nan for 0/0)
    instead of raising.
    """
    annual_return = avg_return * TRADING_DAYS_PER_YEAR
    if volatility == 0:
        if annual_return == 0 or math.isnan(annual_return):
            return math.nan
        return math.copysign(math.inf, annual_return)
    return annual_return / volatility


def summarize_trajectory(
    trajectory: Sequence[float],
    initial_balance: float,
    trade_count: int,
    buy_and_hold_final_balance: float,
) -> RunSummary:
    if initial_balance <= 0:
        raise ConfigError(f"initial_balance must be positive, got {initial_balance}")
    returns = period_returns(trajectory)
    if not returns:
        raise InsufficientDataError(
            f"Need at least two evaluated periods to derive returns, got {len(trajectory)}"
        )

    final_balance = trajectory[-1]
    avg_return = sum(returns) / len(returns)
    volatility = annualized_volatility(returns)

    return RunSummary(
        initial_balance=initial_balance,
        final_balance=final_balance,
        total_return_pct=(final_balance - initial_balance) / initial_balance * 100.0,
        trade_count=trade_count,
        avg_daily_return_pct=avg_return * 100.0,
        annualized_volatility_pct=volatility * 100.0,
        sharpe_ratio=sharpe_ratio(avg_return, volatility),
        buy_and_hold_final_balance=buy_and_hold_final_balance,
        buy_and_hold_return_pct=(buy_and_hold_final_balance - initial_balance) / initial_balance * 100.0,
    )


def compute_run_summary(result: SimulationResult) -> RunSummary:
    return summarize_trajectory(
        result.trajectory,
        result.initial_balance,
        result.trade_count,
        result.buy_and_hold_final_balance,
    )

"""Plain-text reports for backtest and Monte Carlo runs."""

from __future__ import annotations

from crossover_sim.data.models import PriceSeries
from crossover_sim.simulator.models import MonteCarloSummary, RunSummary
from crossover_sim.strategy.indicators import MovingAverageSeries
from crossover_sim.strategy.models import Trade

RULE = "--------------------------------"


def format_trade(trade: Trade) -> str:
    return f"{trade.label}: {trade.action.value} at {trade.price:.2f}"


def format_run_summary(summary: RunSummary) -> str:
    lines = [
        "Backtest Results:",
        RULE,
        f"Initial Balance: ${summary.initial_balance:.2f}",
        f"Final Balance: ${summary.final_balance:.2f}",
        f"Total Return: {summary.total_return_pct:.2f}%",
        f"Number of Trades: {summary.trade_count}",
        f"Average Daily Return: {summary.avg_daily_return_pct:.4f}%",
        f"Annualized Volatility: {summary.annualized_volatility_pct:.2f}%",
        f"Sharpe Ratio: {summary.sharpe_ratio:.2f}",
        "",
        "Buy and Hold Comparison:",
        RULE,
        f"Buy and Hold Final Balance: ${summary.buy_and_hold_final_balance:.2f}",
        f"Buy and Hold Return: {summary.buy_and_hold_return_pct:.2f}%",
        f"Strategy vs Buy and Hold: {summary.excess_return_pct:.2f}%",
    ]
    return "\n".join(lines)


def format_monte_carlo_summary(summary: MonteCarloSummary) -> str:
    lines = [
        "Monte Carlo Simulation Results:",
        RULE,
        f"Number of Simulations: {summary.simulation_count}",
        f"Average Return: {summary.avg_return_pct:.2f}%",
        f"Median Return: {summary.median_return_pct:.2f}%",
        f"Best Return: {summary.best_return_pct:.2f}%",
        f"Worst Return: {summary.worst_return_pct:.2f}%",
        f"95th Percentile: {summary.p95_return_pct:.2f}%",
        f"5th Percentile: {summary.p5_return_pct:.2f}%",
    ]
    return "\n".join(lines)


def format_price_table(
    series: PriceSeries,
    short_ma: MovingAverageSeries,
    long_ma: MovingAverageSeries,
) -> str:
    lines = [f"{'Day':>10}{'Price':>15}{'Short MA':>15}{'Long MA':>15}"]
    for index, observation in enumerate(series):
        lines.append(
            f"{index:>10}{observation.close:>15.2f}"
            f"{_ma_cell(short_ma, index)}{_ma_cell(long_ma, index)}"
        )
    return "\n".join(lines)


def _ma_cell(series: MovingAverageSeries, index: int) -> str:
    value = series.get(index)
    if value is None:
        return f"{'N/A':>15}"
    return f"{value:>15.2f}"

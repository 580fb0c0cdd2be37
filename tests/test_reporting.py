import math

from crossover_sim.data import PriceSeries
from crossover_sim.reporting import (
    format_monte_carlo_summary,
    format_price_table,
    format_run_summary,
    format_trade,
)
from crossover_sim.simulator import MonteCarloSummary, RunSummary
from crossover_sim.strategy import SignalAction, Trade, moving_average_series


def test_trade_line():
    trade = Trade(index=20, label="2024-01-05", action=SignalAction.BUY, price=120.456)
    assert format_trade(trade) == "2024-01-05: BUY at 120.46"


def test_run_summary_block():
    summary = RunSummary(
        initial_balance=10000.0,
        final_balance=10333.3333,
        total_return_pct=3.333333,
        trade_count=1,
        avg_daily_return_pct=0.123456,
        annualized_volatility_pct=12.3456,
        sharpe_ratio=1.5,
        buy_and_hold_final_balance=12400.0,
        buy_and_hold_return_pct=24.0,
    )

    text = format_run_summary(summary)

    assert "Initial Balance: $10000.00" in text
    assert "Final Balance: $10333.33" in text
    assert "Total Return: 3.33%" in text
    assert "Number of Trades: 1" in text
    assert "Average Daily Return: 0.1235%" in text
    assert "Annualized Volatility: 12.35%" in text
    assert "Sharpe Ratio: 1.50" in text
    assert "Buy and Hold Final Balance: $12400.00" in text
    assert "Buy and Hold Return: 24.00%" in text
    assert "Strategy vs Buy and Hold: -20.67%" in text


def test_run_summary_shows_non_finite_sharpe():
    summary = RunSummary(10000.0, 10000.0, 0.0, 0, 0.0, 0.0, math.nan, 10000.0, 0.0)
    assert "Sharpe Ratio: nan" in format_run_summary(summary)


def test_monte_carlo_block():
    summary = MonteCarloSummary(
        simulation_count=100,
        avg_return_pct=1.234,
        median_return_pct=0.5,
        best_return_pct=40.0,
        worst_return_pct=-30.126,
        p95_return_pct=20.0,
        p5_return_pct=-15.0,
    )

    text = format_monte_carlo_summary(summary)

    assert "Number of Simulations: 100" in text
    assert "Average Return: 1.23%" in text
    assert "Median Return: 0.50%" in text
    assert "Best Return: 40.00%" in text
    assert "Worst Return: -30.13%" in text
    assert "95th Percentile: 20.00%" in text
    assert "5th Percentile: -15.00%" in text


def test_price_table_marks_unready_averages():
    series = PriceSeries.from_closes([10.0, 20.0, 30.0])
    closes = series.closes

    lines = format_price_table(series, moving_average_series(closes, 2), moving_average_series(closes, 3)).splitlines()

    assert lines[0].split() == ["Day", "Price", "Short", "MA", "Long", "MA"]
    assert lines[1].split() == ["0", "10.00", "N/A", "N/A"]
    assert lines[2].split() == ["1", "20.00", "15.00", "N/A"]
    assert lines[3].split() == ["2", "30.00", "25.00", "20.00"]

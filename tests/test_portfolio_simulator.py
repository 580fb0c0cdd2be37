import random

import pytest

from crossover_sim.config import StrategyConfig
from crossover_sim.data import PriceSeries, SyntheticPathGenerator
from crossover_sim.errors import ConfigError, DataError
from crossover_sim.simulator import PortfolioSimulator, buy_and_hold_balance, compute_run_summary
from crossover_sim.strategy import PositionState, SignalAction, first_signal_index


def _simulator(short_period=5, long_period=20):
    return PortfolioSimulator(StrategyConfig(short_period=short_period, long_period=long_period))


def test_rising_series_buys_once_and_holds():
    series = PriceSeries.from_closes([100.0 + day for day in range(25)])

    result = _simulator().run(series, initial_balance=10000.0)

    assert [trade.action for trade in result.trades] == [SignalAction.BUY]
    assert result.trades[0].index == 20
    assert result.trades[0].price == 120.0
    assert result.final_position == PositionState.LONG
    assert result.start_index == 20
    assert len(result.trajectory) == 5
    assert result.final_balance > 10000.0
    assert result.final_balance == pytest.approx(10000.0 * 124.0 / 120.0)


def test_entry_period_earns_nothing():
    series = PriceSeries.from_closes([100.0 + day for day in range(25)])

    result = _simulator().run(series, initial_balance=10000.0)

    # Signal fires at index 20, so the balance at index 20 is still flat.
    assert result.trajectory[0] == 10000.0
    assert result.trajectory[1] == pytest.approx(10000.0 * 121.0 / 120.0)


def test_constant_series_never_trades():
    series = PriceSeries.from_closes([100.0] * 25)

    result = _simulator().run(series, initial_balance=10000.0)
    summary = compute_run_summary(result)

    assert result.trades == []
    assert result.final_balance == 10000.0
    assert summary.buy_and_hold_return_pct == 0.0
    assert summary.buy_and_hold_final_balance == 10000.0


def test_equal_windows_never_trade():
    for seed in range(5):
        series = SyntheticPathGenerator(rng=random.Random(seed)).generate(252)
        result = _simulator(10, 10).run(series, initial_balance=10000.0)
        assert result.trades == []
        assert result.final_balance == 10000.0


def test_buy_and_hold_ignores_strategy_trades():
    series = SyntheticPathGenerator(rng=random.Random(21)).generate(252)

    result = _simulator().run(series, initial_balance=2500.0)

    expected = 2500.0 * series.last_close / series.first_close
    assert result.buy_and_hold_final_balance == pytest.approx(expected)
    assert buy_and_hold_balance(series, 2500.0) == pytest.approx(expected)


def test_falling_after_rise_sells():
    closes = [100.0 + day for day in range(25)] + [124.0 - 3 * day for day in range(1, 15)]
    series = PriceSeries.from_closes(closes)

    result = _simulator().run(series, initial_balance=10000.0)

    assert [trade.action for trade in result.trades] == [SignalAction.BUY, SignalAction.SELL]
    assert result.final_position == PositionState.FLAT
    sell_index = result.trades[1].index
    # Flat after the exit: balance no longer moves.
    flat_values = result.trajectory[sell_index - result.start_index + 1 :]
    assert all(value == flat_values[0] for value in flat_values)


def test_zero_close_raises_data_error():
    closes = [100.0] * 21 + [0.0, 100.0, 100.0]
    series = PriceSeries.from_closes(closes)

    with pytest.raises(DataError, match="index 22"):
        _simulator().run(series, initial_balance=10000.0)


def test_series_shorter_than_window_is_config_error():
    series = PriceSeries.from_closes([100.0] * 10)
    with pytest.raises(ConfigError, match="long_period=20"):
        _simulator().run(series, initial_balance=10000.0)


def test_non_positive_balance_rejected():
    series = PriceSeries.from_closes([100.0] * 30)
    with pytest.raises(ConfigError):
        _simulator().run(series, initial_balance=0.0)


@pytest.mark.parametrize("short_period,long_period", [(5, 20), (12, 4), (7, 7)])
def test_start_index_matches_signal_warmup(short_period, long_period):
    strategy = StrategyConfig(short_period=short_period, long_period=long_period)
    series = PriceSeries.from_closes([100.0 + (day % 9) for day in range(40)])

    result = PortfolioSimulator(strategy).run(series, initial_balance=10000.0)

    assert result.start_index == first_signal_index(short_period, long_period)
    assert result.start_index == strategy.warmup
    assert len(result.trajectory) == 40 - strategy.warmup

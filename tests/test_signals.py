import random

from crossover_sim.data import PriceSeries, SyntheticPathGenerator
from crossover_sim.strategy import (
    CrossoverSignalEngine,
    MovingAverageSeries,
    PositionState,
    SignalAction,
    first_signal_index,
    generate_signals,
    moving_average_series,
)


def test_engine_transitions_and_ties():
    engine = CrossoverSignalEngine()
    assert engine.state == PositionState.FLAT

    assert engine.step(0, 1.0, 1.0, 100.0, "d0") is None
    assert engine.step(1, 0.5, 1.0, 100.0, "d1") is None

    buy = engine.step(2, 2.0, 1.0, 101.5, "d2")
    assert buy is not None
    assert buy.action == SignalAction.BUY
    assert buy.price == 101.5
    assert engine.state == PositionState.LONG

    assert engine.step(3, 3.0, 1.0, 102.0, "d3") is None
    assert engine.step(4, 1.0, 1.0, 102.0, "d4") is None

    sell = engine.step(5, 0.9, 1.0, 99.0, "d5")
    assert sell is not None
    assert sell.action == SignalAction.SELL
    assert sell.label == "d5"
    assert engine.state == PositionState.FLAT


def test_generate_signals_skips_warmup():
    series = PriceSeries.from_closes([10.0, 11.0, 12.0, 13.0, 14.0, 15.0])
    short_ma = MovingAverageSeries(period=1, values=(9.0, 9.0, 5.0, 5.0, 1.0, 1.0))
    long_ma = MovingAverageSeries(period=2, values=(0.0, 0.0, 3.0, 5.0, 3.0, 3.0))

    trades = generate_signals(series, short_ma, long_ma)

    assert [(trade.index, trade.action) for trade in trades] == [
        (2, SignalAction.BUY),
        (4, SignalAction.SELL),
    ]
    assert trades[0].price == 12.0


def test_first_signal_index_uses_longest_window():
    assert first_signal_index(5, 20) == 20
    assert first_signal_index(30, 10) == 30


def test_buy_and_sell_alternate():
    for seed in range(10):
        series = SyntheticPathGenerator(rng=random.Random(seed)).generate(400)
        closes = series.closes
        trades = generate_signals(series, moving_average_series(closes, 5), moving_average_series(closes, 20))
        expected = SignalAction.BUY
        for trade in trades:
            assert trade.action == expected
            expected = SignalAction.SELL if expected == SignalAction.BUY else SignalAction.BUY

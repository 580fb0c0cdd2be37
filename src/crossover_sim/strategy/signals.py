"""Dual moving-average crossover signals."""

from __future__ import annotations

from typing import Optional

from crossover_sim.data.models import PriceSeries
from crossover_sim.strategy.indicators import MovingAverageSeries
from crossover_sim.strategy.models import PositionState, SignalAction, Trade


def first_signal_index(short_period: int, long_period: int) -> int:
    return max(short_period, long_period)


class CrossoverSignalEngine:
    """Long-only state machine: enter when short > long, exit when short < long."""

    def __init__(self) -> None:
        self.state = PositionState.FLAT

    def step(
        self,
        index: int,
        short_value: float,
        long_value: float,
        price: float,
        label: str,
    ) -> Optional[Trade]:
        if self.state == PositionState.FLAT and short_value > long_value:
            self.state = PositionState.LONG
            return Trade(index=index, label=label, action=SignalAction.BUY, price=price)
        if self.state == PositionState.LONG and short_value < long_value:
            self.state = PositionState.FLAT
            return Trade(index=index, label=label, action=SignalAction.SELL, price=price)
        return None


def generate_signals(
    series: PriceSeries,
    short_ma: MovingAverageSeries,
    long_ma: MovingAverageSeries,
) -> list[Trade]:
    if len(short_ma) != len(series) or len(long_ma) != len(series):
        raise ValueError("moving averages must match the price series length")
    engine = CrossoverSignalEngine()
    trades: list[Trade] = []
    for index in range(first_signal_index(short_ma.period, long_ma.period), len(series)):
        observation = series[index]
        trade = engine.step(index, short_ma[index], long_ma[index], observation.close, observation.label)
        if trade is not None:
            trades.append(trade)
    return trades

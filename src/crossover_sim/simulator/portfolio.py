"""Single-path portfolio simulation for the crossover strategy."""

from __future__ import annotations

import logging

from crossover_sim.config.models import StrategyConfig
from crossover_sim.data.models import PriceSeries
from crossover_sim.errors import ConfigError, DataError
from crossover_sim.simulator.models import SimulationResult
from crossover_sim.strategy.indicators import moving_average_series
from crossover_sim.strategy.models import PositionState, Trade
from crossover_sim.strategy.signals import CrossoverSignalEngine, first_signal_index

logger = logging.getLogger(__name__)


def buy_and_hold_balance(series: PriceSeries, initial_balance: float) -> float:
    if len(series) == 0:
        raise DataError("Cannot compute buy-and-hold on an empty series")
    first = series.first_close
    if first <= 0:
        raise DataError(f"Buy-and-hold needs a positive first close, got {first} at index 0")
    return initial_balance * (series.last_close / first)


class PortfolioSimulator:
    def __init__(self, strategy: StrategyConfig) -> None:
        self.strategy = strategy

    def run(self, series: PriceSeries, initial_balance: float) -> SimulationResult:
        """Replay crossover signals over ``series``.

        Each evaluated period first applies the return earned by the position
        held coming into it, records the marked balance, and only then lets
        the signal engine act on that period's averages. A trade decided at
        index ``i`` therefore affects the balance from ``i + 1`` onward.
        """
        start = first_signal_index(self.strategy.short_period, self.strategy.long_period)
        if initial_balance <= 0:
            raise ConfigError(f"initial_balance must be positive, got {initial_balance}")
        if len(series) < start:
            raise ConfigError(
                f"Series has {len(series)} observations but the strategy needs at least {start} "
                f"(short_period={self.strategy.short_period}, long_period={self.strategy.long_period})"
            )

        closes = series.closes
        short_ma = moving_average_series(closes, self.strategy.short_period)
        long_ma = moving_average_series(closes, self.strategy.long_period)
        engine = CrossoverSignalEngine()

        balance = float(initial_balance)
        trajectory: list[float] = []
        trades: list[Trade] = []

        for index in range(start, len(series)):
            prior_close = closes[index - 1]
            if prior_close <= 0:
                raise DataError(
                    f"Non-positive close {prior_close} at index {index - 1} "
                    f"({series[index - 1].label}); cannot compute return for index {index}"
                )
            if engine.state == PositionState.LONG:
                balance = balance * (closes[index] / prior_close)
            trajectory.append(balance)

            observation = series[index]
            trade = engine.step(index, short_ma[index], long_ma[index], observation.close, observation.label)
            if trade is not None:
                logger.debug("%s: %s at %.2f", trade.label, trade.action.value, trade.price)
                trades.append(trade)

        return SimulationResult(
            initial_balance=float(initial_balance),
            trajectory=trajectory,
            trades=trades,
            start_index=start,
            final_position=engine.state,
            buy_and_hold_final_balance=buy_and_hold_balance(series, initial_balance),
        )

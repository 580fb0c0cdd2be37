"""Moving averages and crossover signal generation."""

from crossover_sim.strategy.indicators import (
    UNDEFINED_AVERAGE,
    MovingAverageSeries,
    moving_average,
    moving_average_series,
)
from crossover_sim.strategy.models import PositionState, SignalAction, Trade
from crossover_sim.strategy.signals import CrossoverSignalEngine, first_signal_index, generate_signals

__all__ = [
    "CrossoverSignalEngine",
    "MovingAverageSeries",
    "PositionState",
    "SignalAction",
    "Trade",
    "UNDEFINED_AVERAGE",
    "first_signal_index",
    "generate_signals",
    "moving_average",
    "moving_average_series",
]

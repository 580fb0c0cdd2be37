"""Simple moving averages over close prices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from crossover_sim.errors import ConfigError

# Returned for indices without a full window of history.
UNDEFINED_AVERAGE = 0.0


@dataclass(frozen=True)
class MovingAverageSeries:
    period: int
    values: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def is_valid(self, index: int) -> bool:
        return 0 <= index < len(self.values) and index >= self.period - 1

    def get(self, index: int) -> Optional[float]:
        """Average at ``index``, or None while the window is still filling."""
        if not self.is_valid(index):
            return None
        return self.values[index]


def moving_average(values: Sequence[float], period: int, index: int) -> float:
    _check_period(period)
    if index < 0 or index >= len(values):
        raise IndexError(f"index {index} out of range for series of length {len(values)}")
    if index < period - 1:
        return UNDEFINED_AVERAGE
    window = values[index - period + 1 : index + 1]
    return sum(window) / period


def moving_average_series(values: Sequence[float], period: int) -> MovingAverageSeries:
    _check_period(period)
    averages = tuple(moving_average(values, period, index) for index in range(len(values)))
    return MovingAverageSeries(period=period, values=averages)


def _check_period(period: int) -> None:
    if period < 1:
        raise ConfigError(f"Moving average period must be at least 1, got {period}")

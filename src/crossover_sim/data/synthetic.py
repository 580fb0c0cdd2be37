"""Random-walk price paths for Monte Carlo trials."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from crossover_sim.data.models import PriceObservation, PriceSeries
from crossover_sim.errors import ConfigError


@dataclass
class SyntheticPathGenerator:
    """Geometric random walk with normally distributed daily % changes.

    ``rng`` is drawn from on every call; pass a seeded ``random.Random`` for
    reproducible paths. Without one, each generator gets its own unseeded
    instance.
    """

    rng: Optional[random.Random] = None
    initial_price: float = 100.0
    daily_volatility_pct: float = 2.0
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.initial_price <= 0:
            raise ConfigError(f"initial_price must be positive, got {self.initial_price}")
        if self.daily_volatility_pct < 0:
            raise ConfigError(
                f"daily_volatility_pct must be non-negative, got {self.daily_volatility_pct}"
            )
        self._rng = self.rng if self.rng is not None else random.Random()

    def generate(self, num_days: int, initial_price: Optional[float] = None) -> PriceSeries:
        if num_days < 1:
            raise ConfigError(f"num_days must be at least 1, got {num_days}")
        price = self.initial_price if initial_price is None else float(initial_price)
        if price <= 0:
            raise ConfigError(f"initial_price must be positive, got {price}")

        observations = [_observation(0, price)]
        for day in range(1, num_days):
            change = self._rng.normalvariate(0.0, 1.0) * self.daily_volatility_pct
            price = price * (1.0 + change / 100.0)
            observations.append(_observation(day, price))
        return PriceSeries(tuple(observations))


def _observation(day: int, price: float) -> PriceObservation:
    return PriceObservation(label=f"Day {day}", open=price, high=price, low=price, close=price)

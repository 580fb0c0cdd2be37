"""Monte Carlo evaluation of the crossover strategy on synthetic paths."""

from __future__ import annotations

import logging
import math
import random
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from typing import Iterable, Optional

from crossover_sim.config.models import DEFAULT_INITIAL_BALANCE, MonteCarloConfig, StrategyConfig
from crossover_sim.data.synthetic import SyntheticPathGenerator
from crossover_sim.errors import ConfigError, InsufficientDataError
from crossover_sim.monitoring.notifier import Notifier
from crossover_sim.simulator.models import MonteCarloSummary
from crossover_sim.simulator.portfolio import PortfolioSimulator

logger = logging.getLogger(__name__)


def simulate_trial(
    strategy: StrategyConfig,
    config: MonteCarloConfig,
    seed: int,
    path_length: int,
) -> float:
    """Total return (percent) of one synthetic path generated from ``seed``.

    Module level so worker processes can unpickle it.
    """
    generator = SyntheticPathGenerator(
        rng=random.Random(seed),
        initial_price=config.initial_price,
        daily_volatility_pct=config.daily_volatility_pct,
    )
    series = generator.generate(path_length)
    result = PortfolioSimulator(strategy).run(series, DEFAULT_INITIAL_BALANCE)
    return result.total_return_pct


def summarize_returns(returns: Iterable[float]) -> MonteCarloSummary:
    """Distribution statistics over per-trial returns.

    Percentiles are index based on the ascending sort (no interpolation) and
    the median of an even-length sample is the upper-middle element.
    """
    ordered = sorted(returns)
    count = len(ordered)
    if count == 0:
        raise InsufficientDataError("Cannot summarize an empty set of simulation returns")

    return MonteCarloSummary(
        simulation_count=count,
        avg_return_pct=sum(ordered) / count,
        median_return_pct=ordered[count // 2],
        best_return_pct=ordered[-1],
        worst_return_pct=ordered[0],
        p95_return_pct=ordered[math.floor(count * 0.95)],
        p5_return_pct=ordered[math.floor(count * 0.05)],
        returns=tuple(ordered),
    )


class MonteCarloRunner:
    def __init__(
        self,
        strategy: StrategyConfig,
        config: Optional[MonteCarloConfig] = None,
        notifier: Optional[Notifier] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.strategy = strategy
        self.config = config or MonteCarloConfig()
        self.notifier = notifier
        self._rng = rng if rng is not None else random.Random(self.config.seed)

    def run(
        self,
        num_simulations: Optional[int] = None,
        path_length: Optional[int] = None,
    ) -> MonteCarloSummary:
        count = self.config.simulations if num_simulations is None else num_simulations
        length = self.config.path_length if path_length is None else path_length
        if count <= 0:
            raise ConfigError(f"Number of simulations must be positive, got {count}")
        if length < self.strategy.warmup:
            raise ConfigError(
                f"path_length {length} is shorter than the strategy warmup of {self.strategy.warmup}"
            )

        # Seeds are drawn up front; each trial owns its generator.
        seeds = [self._rng.getrandbits(64) for _ in range(count)]
        logger.info(
            "Running %d Monte Carlo simulations (path_length=%d, workers=%d)",
            count,
            length,
            self.config.max_workers,
        )

        if self.config.max_workers > 1 and count > 1:
            returns = self._run_parallel(seeds, length)
        else:
            returns = []
            for seed in seeds:
                returns.append(self.run_trial(seed, length))
                self._report_progress(len(returns))

        return summarize_returns(returns)

    def run_trial(self, seed: int, path_length: int) -> float:
        return simulate_trial(self.strategy, self.config, seed, path_length)

    def _run_parallel(self, seeds: list[int], path_length: int) -> list[float]:
        returns: list[Optional[float]] = [None] * len(seeds)
        with ProcessPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures: dict[Future, int] = {
                executor.submit(simulate_trial, self.strategy, self.config, seed, path_length): slot
                for slot, seed in enumerate(seeds)
            }
            completed = 0
            try:
                for future in as_completed(futures):
                    returns[futures[future]] = future.result()
                    completed += 1
                    self._report_progress(completed)
            except Exception:
                for future in futures:
                    future.cancel()
                raise
        return [value for value in returns if value is not None]

    def _report_progress(self, completed: int) -> None:
        every = self.config.progress_every
        if self.notifier is None or every <= 0 or completed % every != 0:
            return
        self.notifier.notify("progress", f"Completed {completed} simulations...")

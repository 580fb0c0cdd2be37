from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from crossover_sim.config import AppConfig, load_config
from crossover_sim.errors import CrossoverSimError
from crossover_sim.monitoring import LogNotifier
from crossover_sim.reporting import format_monte_carlo_summary
from crossover_sim.simulator import MonteCarloRunner


def _resolve_config(args: argparse.Namespace) -> AppConfig:
    config = load_config(args.config) if args.config else AppConfig()
    strategy = config.strategy
    if args.short is not None:
        strategy = replace(strategy, short_period=args.short)
    if args.long is not None:
        strategy = replace(strategy, long_period=args.long)

    overrides = {
        "simulations": args.simulations,
        "path_length": args.path_length,
        "initial_price": args.initial_price,
        "seed": args.seed,
        "max_workers": args.workers,
    }
    monte_carlo = replace(
        config.monte_carlo,
        **{key: value for key, value in overrides.items() if value is not None},
    )
    return replace(config, strategy=strategy, monte_carlo=monte_carlo)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Monte Carlo evaluation on synthetic random walks.")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--short", type=int)
    parser.add_argument("--long", type=int)
    parser.add_argument("--simulations", type=int)
    parser.add_argument("--path-length", type=int)
    parser.add_argument("--initial-price", type=float)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--workers", type=int)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = _resolve_config(args)
        print(f"Running Monte Carlo Simulation ({config.monte_carlo.simulations} simulations)...")
        runner = MonteCarloRunner(config.strategy, config.monte_carlo, notifier=LogNotifier())
        summary = runner.run()
    except CrossoverSimError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print()
    print(format_monte_carlo_summary(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())

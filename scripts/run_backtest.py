from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from crossover_sim.config import AppConfig, compute_config_hash, load_config
from crossover_sim.data import load_price_file
from crossover_sim.errors import CrossoverSimError
from crossover_sim.reporting import format_price_table, format_run_summary, format_trade
from crossover_sim.simulator import PortfolioSimulator, compute_run_summary
from crossover_sim.strategy import moving_average_series


def _resolve_config(args: argparse.Namespace) -> AppConfig:
    config = load_config(args.config) if args.config else AppConfig()
    strategy = config.strategy
    if args.short is not None:
        strategy = replace(strategy, short_period=args.short)
    if args.long is not None:
        strategy = replace(strategy, long_period=args.long)
    backtest = config.backtest
    if args.data is not None:
        backtest = replace(backtest, data_path=args.data)
    if args.initial_balance is not None:
        backtest = replace(backtest, initial_balance=args.initial_balance)
    if args.header_lines is not None:
        backtest = replace(backtest, header_lines=args.header_lines)
    return replace(config, strategy=strategy, backtest=backtest)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Backtest the moving-average crossover on a price file.")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--data", help="Price CSV (overrides backtest.data_path)")
    parser.add_argument("--short", type=int, help="Short moving-average window")
    parser.add_argument("--long", type=int, help="Long moving-average window")
    parser.add_argument("--initial-balance", type=float)
    parser.add_argument("--header-lines", type=int)
    parser.add_argument("--show-data", action="store_true", help="Print prices and moving averages")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = _resolve_config(args)
        if not config.backtest.data_path:
            print("Error: no price file given (use --data or backtest.data_path)", file=sys.stderr)
            return 1
        if args.config:
            print(f"Config {args.config} (sha256 {compute_config_hash(args.config)[:12]})")

        report = load_price_file(Path(config.backtest.data_path), header_lines=config.backtest.header_lines)
        series = report.series
        print(f"Successfully loaded {len(series)} data points.")

        if args.show_data:
            closes = series.closes
            print()
            print("Price Data and Moving Averages:")
            print(
                format_price_table(
                    series,
                    moving_average_series(closes, config.strategy.short_period),
                    moving_average_series(closes, config.strategy.long_period),
                )
            )
            print()

        result = PortfolioSimulator(config.strategy).run(series, config.backtest.initial_balance)
        for trade in result.trades:
            print(format_trade(trade))
        summary = compute_run_summary(result)
    except CrossoverSimError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print()
    print(format_run_summary(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())

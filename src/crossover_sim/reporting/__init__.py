"""Console report formatting."""

from crossover_sim.reporting.console import (
    format_monte_carlo_summary,
    format_price_table,
    format_run_summary,
    format_trade,
)

__all__ = [
    "format_monte_carlo_summary",
    "format_price_table",
    "format_run_summary",
    "format_trade",
]

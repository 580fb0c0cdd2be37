"""Moving-average crossover backtesting and Monte Carlo evaluation."""

__version__ = "0.1.0"

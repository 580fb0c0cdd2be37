"""Error taxonomy shared by the engine, loaders and scripts."""

from __future__ import annotations


class CrossoverSimError(Exception):
    """Base class for every failure raised by crossover_sim."""


class ConfigError(CrossoverSimError, ValueError):
    """Invalid parameters, rejected before any computation starts."""


class DataError(CrossoverSimError):
    """A structural precondition on price or balance data was violated."""


class InsufficientDataError(DataError):
    """Not enough observations to derive a statistic."""


class DataLoadError(DataError):
    """A price file could not be read or produced no usable records."""

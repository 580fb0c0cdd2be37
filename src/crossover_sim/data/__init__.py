"""Price data models, file loading and synthetic paths."""

from crossover_sim.data.loader import LoadReport, load_price_file, load_price_series
from crossover_sim.data.models import PriceObservation, PriceSeries
from crossover_sim.data.synthetic import SyntheticPathGenerator

__all__ = [
    "LoadReport",
    "PriceObservation",
    "PriceSeries",
    "SyntheticPathGenerator",
    "load_price_file",
    "load_price_series",
]

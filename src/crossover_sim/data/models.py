"""Price data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass(frozen=True)
class PriceObservation:
    label: str
    open: float
    high: float
    low: float
    close: float
    volume: int = 0


@dataclass(frozen=True)
class PriceSeries:
    observations: tuple[PriceObservation, ...]

    def __post_init__(self) -> None:
        # Stored as a tuple; callers may pass any sequence.
        object.__setattr__(self, "observations", tuple(self.observations))

    @staticmethod
    def from_closes(closes: Sequence[float], labels: Optional[Sequence[str]] = None) -> "PriceSeries":
        if labels is not None and len(labels) != len(closes):
            raise ValueError("labels and closes must have the same length")
        observations = []
        for index, close in enumerate(closes):
            label = labels[index] if labels is not None else str(index)
            price = float(close)
            observations.append(
                PriceObservation(label=label, open=price, high=price, low=price, close=price)
            )
        return PriceSeries(tuple(observations))

    def __len__(self) -> int:
        return len(self.observations)

    def __iter__(self) -> Iterator[PriceObservation]:
        return iter(self.observations)

    def __getitem__(self, index: int) -> PriceObservation:
        return self.observations[index]

    @property
    def closes(self) -> list[float]:
        return [observation.close for observation in self.observations]

    @property
    def labels(self) -> list[str]:
        return [observation.label for observation in self.observations]

    @property
    def first_close(self) -> float:
        return self.observations[0].close

    @property
    def last_close(self) -> float:
        return self.observations[-1].close

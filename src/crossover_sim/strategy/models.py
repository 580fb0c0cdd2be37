"""Strategy position and trade models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PositionState(str, Enum):
    FLAT = "flat"
    LONG = "long"


class SignalAction(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class Trade:
    index: int
    label: str
    action: SignalAction
    price: float

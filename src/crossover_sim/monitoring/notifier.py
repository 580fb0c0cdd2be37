"""Notification backends for long-running simulations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class Notifier:
    def notify(self, event: str, message: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass
class LogNotifier(Notifier):
    prefix: str = ""

    def notify(self, event: str, message: str) -> None:
        logger.debug("%s: %s", event, message)
        if self.prefix:
            print(f"{self.prefix} {message}")
        else:
            print(message)


@dataclass
class RecordingNotifier(Notifier):
    events: list[tuple[str, str]] = field(default_factory=list)

    def notify(self, event: str, message: str) -> None:
        self.events.append((event, message))

"""Monitoring exports."""

from crossover_sim.monitoring.notifier import LogNotifier, Notifier, RecordingNotifier

__all__ = [
    "LogNotifier",
    "Notifier",
    "RecordingNotifier",
]

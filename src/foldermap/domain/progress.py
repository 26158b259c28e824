from __future__ import annotations

"""
Progress Tracking Contract.

Defines the handle passed through every traversal call so that file visits
can be reported without shared global state.
"""

from typing import Protocol


class ProgressTracker(Protocol):
    """Receives one advance() per visited file between start() and stop()."""

    def start(self, total: int) -> None:
        ...

    def advance(self, step: int = 1) -> None:
        ...

    def stop(self) -> None:
        ...


class NullProgress:
    """
    Silent tracker used when no rendering is requested.

    Still counts advances so callers can report how many files were visited.
    """

    def __init__(self) -> None:
        self.total = 0
        self.completed = 0

    def start(self, total: int) -> None:
        self.total = total
        self.completed = 0

    def advance(self, step: int = 1) -> None:
        self.completed += step

    def stop(self) -> None:
        pass

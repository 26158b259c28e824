from __future__ import annotations

"""
Terminal Progress Rendering.

Renders scan progress as 'Progress |bar| NN% (value/total)' using rich,
on stderr so that stdout stays reserved for results.
"""

from typing import Optional

from rich.console import Console
from rich.progress import BarColumn, Progress, TaskID, TextColumn


class RichProgressBar:
    """ProgressTracker backed by a rich Progress display."""

    def __init__(self, console: Optional[Console] = None, description: str = "Progress") -> None:
        self.console = console or Console(stderr=True)
        self.description = description
        self._progress: Optional[Progress] = None
        self._task: Optional[TaskID] = None

    def start(self, total: int) -> None:
        self._progress = Progress(
            TextColumn("{task.description} |"),
            BarColumn(complete_style="white", finished_style="green"),
            TextColumn("| {task.percentage:>3.0f}% ({task.completed:.0f}/{task.total:.0f})"),
            console=self.console,
        )
        self._progress.start()
        self._task = self._progress.add_task(self.description, total=total)

    def advance(self, step: int = 1) -> None:
        if self._progress is not None and self._task is not None:
            self._progress.advance(self._task, step)

    def stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task = None

    @property
    def completed(self) -> float:
        """Completion of the running bar, 0 when none is running."""
        if self._progress is None or self._task is None:
            return 0
        return self._progress.tasks[0].completed

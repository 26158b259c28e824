from __future__ import annotations

"""
Unit tests for the rich-backed progress bar.
"""

import io

from rich.console import Console

from foldermap.interface.cli.progress import RichProgressBar


def _console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, force_terminal=False, width=100)


def test_bar_tracks_advances():
    bar = RichProgressBar(console=_console(io.StringIO()))

    bar.start(4)
    bar.advance()
    bar.advance(2)

    assert bar.completed == 3
    bar.stop()


def test_bar_renders_percentage_and_counts():
    buffer = io.StringIO()
    bar = RichProgressBar(console=_console(buffer))

    bar.start(4)
    for _ in range(4):
        bar.advance()
    bar.stop()

    output = buffer.getvalue()
    assert "Progress |" in output
    assert "100% (4/4)" in output


def test_advance_without_start_is_noop():
    bar = RichProgressBar(console=_console(io.StringIO()))

    bar.advance()
    bar.stop()

    assert bar.completed == 0

"""
Pytest configuration and fixtures for checkout tests.
"""

import io

import pytest
from rich.console import Console

from checkout.logger import setup_logging


class RecordingConsole(Console):
    """Rich console writing plain text into a buffer."""

    def __init__(self):
        self.captured = io.StringIO()
        super().__init__(
            file=self.captured,
            width=120,
            color_system=None,
            force_terminal=False,
            highlight=False,
        )

    @property
    def text(self) -> str:
        return self.captured.getvalue()

    @property
    def lines(self) -> list:
        return self.text.splitlines()


@pytest.fixture
def console():
    """Console whose output can be inspected through .text and .lines."""
    return RecordingConsole()


@pytest.fixture(autouse=True)
def quiet_logging():
    """Reset logging after tests that reconfigure it (e.g. the CLI)."""
    yield
    setup_logging(level="WARNING", json_format=False, force=True)


def feed(*lines: str) -> io.StringIO:
    """Helper to build an input stream from typed lines."""
    return io.StringIO("".join(f"{line}\n" for line in lines))

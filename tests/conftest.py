"""
Pytest configuration for the lightspeed tests.

This file ensures the src package is importable from tests and provides a
controllable time source for the clock simulator.
"""

import sys
from pathlib import Path

import pytest

# Add src to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))


class FakeTime:
    """Manually advanced time source; sleep() moves time forward."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds

    def sleep(self, seconds: float):
        self.advance(seconds)


@pytest.fixture
def fake_time():
    """Time source starting at t = 0 s."""
    return FakeTime()


@pytest.fixture
def config_dir():
    """Directory holding the shipped YAML configurations."""
    return project_root / 'configs'

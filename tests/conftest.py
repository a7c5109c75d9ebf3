"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pong_core.simulation import SimulationEngine  # noqa: E402


@pytest.fixture
def rng():
    """Seeded random source so bursts and serves are reproducible."""
    return random.Random(1234)


@pytest.fixture
def engine(rng):
    return SimulationEngine(rng=rng)


@pytest.fixture
def state(engine):
    """Fresh game with the ball held at center court."""
    return engine.new_game()


@pytest.fixture
def no_keys():
    return {}

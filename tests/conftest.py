"""
conftest.py
-----------
Shared pytest configuration and fixtures for Catfish Dash tests.

Contains:
- Headless SDL setup so pygame never opens a window
- Logger silencing
- Common config, store and simulation fixtures
- Field clearing for hand-placed scenarios (see tests/helpers.py)
"""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from catfish.core.debug.debug_logger import LoggerConfig
from catfish.core.runtime.game_settings import TuningConfig
from catfish.core.services.event_manager import EventManager
from catfish.systems.progression import MetaProgress, ProgressionStore
from catfish.systems.simulation import Simulation

from tests.helpers import clear_field


# ===========================================================
# Global Setup
# ===========================================================

@pytest.fixture(autouse=True)
def silence_logger(monkeypatch):
    """Keep test output clean."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def config():
    """Default tuning with random pickup drops switched off."""
    return TuningConfig(pickup_drop_chance=0.0)


@pytest.fixture
def events():
    return EventManager()


@pytest.fixture
def recorder(events):
    """Subscribe to any event types and collect what gets dispatched."""
    received = []

    def listen(*event_types):
        for event_type in event_types:
            events.subscribe(event_type, received.append)
        return received

    return listen


@pytest.fixture
def store(events):
    return ProgressionStore(MetaProgress(), events)


@pytest.fixture
def sim(config, store, events):
    """Simulation with an empty field so tests place entities themselves."""
    simulation = Simulation(config, store, random.Random(1234), events)
    clear_field(simulation)
    return simulation

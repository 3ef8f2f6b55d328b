"""
Simulation system exports.

Provides the per-tick systems and the Simulation that orchestrates them.
"""

from catfish.systems.combo_engine import ComboEngine
from catfish.systems.collision_manager import CollisionManager, CollisionReport
from catfish.systems.economy import Economy
from catfish.systems.progression import MetaProgress, ProgressionStore
from catfish.systems.run_state import RunState, RunStateMachine
from catfish.systems.simulation import HudState, Simulation
from catfish.systems.spawn_manager import SpawnManager

__all__ = [
    'ComboEngine',
    'CollisionManager',
    'CollisionReport',
    'Economy',
    'MetaProgress',
    'ProgressionStore',
    'RunState',
    'RunStateMachine',
    'HudState',
    'Simulation',
    'SpawnManager',
]

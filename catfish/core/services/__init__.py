"""
Core services exports.

Provides the event system, configuration loading, input mapping and saves.
"""

from catfish.core.services.config_manager import load_config, load_tuning
from catfish.core.services.event_manager import (
    EventManager,
    BaseEvent,
    CollectiblePickedEvent,
    PickupCollectedEvent,
    PlayerHitEvent,
    ShieldAbsorbedEvent,
    RunStateChangedEvent,
    RunEndedEvent,
    UpgradePurchasedEvent,
    ProgressChangedEvent,
)
from catfish.core.services.input_manager import Actions, InputManager, InputSnapshot

__all__ = [
    # Config
    'load_config',
    'load_tuning',
    # Events
    'EventManager',
    'BaseEvent',
    'CollectiblePickedEvent',
    'PickupCollectedEvent',
    'PlayerHitEvent',
    'ShieldAbsorbedEvent',
    'RunStateChangedEvent',
    'RunEndedEvent',
    'UpgradePurchasedEvent',
    'ProgressChangedEvent',
    # Input
    'Actions',
    'InputManager',
    'InputSnapshot',
]

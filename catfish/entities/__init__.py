"""
catfish/entities/__init__.py
----------------------------
Entity module exports.

Exports:
    EntityCategory - Logical entity groupings (PLAYER, COLLECTIBLE, ...)
    PickupKind     - Power-up variants (MAGNET, SHIELD)
    Player         - The controllable cat
    Collectible    - Fish (standard or golden)
    Threat         - Homing dogs
    Pickup         - Dropped power-ups
    FieldEntity    - Union of everything except the player
"""

from typing import Union

from catfish.entities.entity_types import EntityCategory, PickupKind
from catfish.entities.player import Player, PlayerTimers
from catfish.entities.collectible import Collectible
from catfish.entities.threat import Threat
from catfish.entities.pickup import Pickup

FieldEntity = Union[Collectible, Threat, Pickup]

__all__ = [
    'EntityCategory',
    'PickupKind',
    'Player',
    'PlayerTimers',
    'Collectible',
    'Threat',
    'Pickup',
    'FieldEntity',
]

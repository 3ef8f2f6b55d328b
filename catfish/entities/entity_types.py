"""Entity types."""

from enum import Enum


class EntityCategory:
    """
    High-level logical grouping for entities.
    Every entity class carries one as its `category` tag.
    """
    PLAYER = "player"
    COLLECTIBLE = "collectible"
    THREAT = "threat"
    PICKUP = "pickup"


class PickupKind(Enum):
    """Power-ups dropped by eaten fish."""
    MAGNET = "magnet"
    SHIELD = "shield"

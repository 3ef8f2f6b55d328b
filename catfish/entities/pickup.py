"""
pickup.py
---------
Power-ups dropped where a fish was eaten.
"""

from catfish.entities.base_entity import BaseEntity
from catfish.entities.entity_types import EntityCategory, PickupKind


class Pickup(BaseEntity):
    """A magnet or shield waiting to be grabbed."""

    category = EntityCategory.PICKUP

    def __init__(self, x, y, size, kind: PickupKind):
        super().__init__(x, y, size, size)
        self.kind = kind
        self.age = 0.0

    def update(self, dt: float):
        self.age += dt

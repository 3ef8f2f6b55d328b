"""
threat.py
---------
Dogs that chase the player. A threat keeps no heading: every tick it
re-aims at the player's current center.
"""

from catfish.entities.base_entity import BaseEntity
from catfish.entities.entity_types import EntityCategory


class Threat(BaseEntity):
    """A homing enemy with a fixed base speed."""

    category = EntityCategory.THREAT

    def __init__(self, x, y, size, speed):
        super().__init__(x, y, size, size)
        self.speed = speed

    def home_towards(self, target, dt: float, speed_scale: float = 1.0):
        """Step toward `target` (a Vector2) at speed * speed_scale."""
        offset = target - self.center
        if offset.length_squared() == 0:
            return
        self.pos += offset.normalize() * self.speed * speed_scale * dt

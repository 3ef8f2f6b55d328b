"""
player.py
---------
The controllable cat: position, velocity and its status timers.

Timers
------
Every timer below is "active iff > 0" and is decremented once per tick by
PlayerTimers.tick() before anything reads it:
- invulnerable:   i-frames after a hit or shield absorb
- dash_cooldown:  time until the next dash is allowed
- dash_active:    remaining dash boost
- magnet_active:  remaining magnet attraction
The shield is a charge (0 or 1), not a timer, and never decays.
"""

import pygame

from catfish.entities.base_entity import BaseEntity
from catfish.entities.entity_types import EntityCategory


class PlayerTimers:
    """Named countdowns on the player."""

    __slots__ = ("invulnerable", "dash_cooldown", "dash_active", "magnet_active", "shield")

    TIMED = ("invulnerable", "dash_cooldown", "dash_active", "magnet_active")

    def __init__(self):
        self.invulnerable = 0.0
        self.dash_cooldown = 0.0
        self.dash_active = 0.0
        self.magnet_active = 0.0
        self.shield = 0

    def tick(self, dt: float):
        for name in self.TIMED:
            value = getattr(self, name)
            if value > 0:
                setattr(self, name, max(0.0, value - dt))


class Player(BaseEntity):
    """Represents the controllable player entity."""

    category = EntityCategory.PLAYER

    def __init__(self, x: float, y: float, size: float, base_speed: float, start_lives: int):
        super().__init__(x, y, size, size)
        self.velocity = pygame.Vector2(0, 0)
        self.base_speed = base_speed
        self.start_lives = start_lives
        self.timers = PlayerTimers()

    # ===========================================================
    # Status Queries
    # ===========================================================

    @property
    def invulnerable(self) -> bool:
        return self.timers.invulnerable > 0

    @property
    def has_shield(self) -> bool:
        return self.timers.shield > 0

    @property
    def magnet_on(self) -> bool:
        return self.timers.magnet_active > 0

    @property
    def dashing(self) -> bool:
        return self.timers.dash_active > 0

    def can_dash(self) -> bool:
        return self.timers.dash_cooldown <= 0 and self.timers.dash_active <= 0

    # ===========================================================
    # Movement
    # ===========================================================

    def start_dash(self, duration: float, cooldown: float):
        self.timers.dash_active = duration
        self.timers.dash_cooldown = cooldown

    def steer(self, direction: pygame.Vector2, dash_boost: float):
        """Set velocity from a unit (or zero) direction."""
        speed = self.base_speed * (dash_boost if self.dashing else 1.0)
        self.velocity = direction * speed

    def integrate(self, dt: float, bounds):
        """Move by velocity*dt and clamp into (left, top, right, bottom)."""
        self.pos += self.velocity * dt
        self.clamp_to(*bounds)

    def knock_back(self, source_center: pygame.Vector2, distance: float, bounds):
        """Push away from source_center; no push when the centers coincide."""
        away = self.center - source_center
        if away.length_squared() > 0:
            self.pos += away.normalize() * distance
        self.clamp_to(*bounds)

"""
base_entity.py
--------------
Minimal positioned box shared by every simulated entity.

Positions are top-left corners in play-field pixels; sizes are full
width/height. All collision math is axis-aligned.
"""

import pygame


def clamp(value, low, high):
    return max(low, min(high, value))


def rects_overlap(a, b) -> bool:
    """Strict AABB overlap; touching edges do not count."""
    return (
        a.x < b.x + b.w and
        a.x + a.w > b.x and
        a.y < b.y + b.h and
        a.y + a.h > b.y
    )


class BaseEntity:
    """Axis-aligned box with a float position."""

    category = None

    def __init__(self, x: float, y: float, w: float, h: float):
        self.pos = pygame.Vector2(x, y)
        self.w = w
        self.h = h

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value: float):
        self.pos.x = value

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value: float):
        self.pos.y = value

    @property
    def center(self) -> pygame.Vector2:
        return pygame.Vector2(self.pos.x + self.w / 2, self.pos.y + self.h / 2)

    def overlaps(self, other) -> bool:
        return rects_overlap(self, other)

    def clamp_to(self, left: float, top: float, right: float, bottom: float):
        """Keep the box inside [left, right - w] x [top, bottom - h]."""
        self.pos.x = clamp(self.pos.x, left, right - self.w)
        self.pos.y = clamp(self.pos.y, top, bottom - self.h)

    def __repr__(self):
        return f"{type(self).__name__}(x={self.pos.x:.1f}, y={self.pos.y:.1f})"

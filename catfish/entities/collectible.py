"""
collectible.py
--------------
Fish the player eats for score and coins. Golden fish are bigger and worth
more; the flag is rolled once at creation and never changes.
"""

from catfish.entities.base_entity import BaseEntity
from catfish.entities.entity_types import EntityCategory


class Collectible(BaseEntity):
    """A fish lying on the play field."""

    category = EntityCategory.COLLECTIBLE

    def __init__(self, x, y, w, h, golden, score_value, coin_value, bob=0.0):
        super().__init__(x, y, w, h)
        self.golden = golden
        self.score_value = score_value
        self.coin_value = coin_value
        # Animation phase; only the renderer interprets it.
        self.bob = bob

    def animate(self, dt: float, rate: float):
        self.bob += dt * rate

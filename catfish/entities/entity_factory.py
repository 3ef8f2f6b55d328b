"""
entity_factory.py
-----------------
Builds every entity the simulation needs, with randomized attributes drawn
from an injected random source so runs can be replayed from a seed.
"""

import math
import random

from catfish.core.debug.debug_logger import DebugLogger
from catfish.core.runtime.game_settings import TuningConfig, UpgradeKeys
from catfish.entities.base_entity import clamp
from catfish.entities.collectible import Collectible
from catfish.entities.entity_types import PickupKind
from catfish.entities.pickup import Pickup
from catfish.entities.player import Player
from catfish.entities.threat import Threat


# Collectible sizes (w, h)
STANDARD_FISH_SIZE = (26, 18)
GOLDEN_FISH_SIZE = (32, 22)

# Pickup placement insets from the field edges
PICKUP_NEAR_INSET = 16
PICKUP_FAR_INSET = 30


class EntityFactory:
    """Constructs player, collectibles, threats and pickups."""

    def __init__(self, config: TuningConfig, rng: random.Random = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    # ===========================================================
    # Player
    # ===========================================================

    def make_player(self, meta) -> Player:
        """Fresh player for a run; speed and lives come from upgrades."""
        cfg = self.config
        size = cfg.player_size
        speed = cfg.base_speed + meta.level(UpgradeKeys.SPEED) * cfg.speed_per_level
        lives = cfg.base_lives + meta.level(UpgradeKeys.LIVES)

        player = Player(
            x=cfg.field_width * 0.5 - size / 2,
            y=cfg.field_height * 0.5 - size / 2,
            size=size,
            base_speed=speed,
            start_lives=lives,
        )
        DebugLogger.state(f"Player ready: speed={speed:.0f}, lives={lives}", category="spawn")
        return player

    # ===========================================================
    # Field Entities
    # ===========================================================

    def make_collectible(self) -> Collectible:
        cfg = self.config
        rng = self.rng
        golden = rng.random() < cfg.golden_chance
        w, h = GOLDEN_FISH_SIZE if golden else STANDARD_FISH_SIZE

        return Collectible(
            x=rng.uniform(cfg.collectible_spawn_inset, cfg.field_width - cfg.collectible_spawn_far_inset),
            y=rng.uniform(cfg.collectible_spawn_inset, cfg.field_height - cfg.collectible_spawn_far_inset),
            w=w,
            h=h,
            golden=golden,
            score_value=cfg.golden_score if golden else cfg.collectible_score,
            coin_value=cfg.golden_coins if golden else cfg.collectible_coins,
            bob=rng.uniform(0, math.pi * 2),
        )

    def make_threat(self) -> Threat:
        """Spawn just outside a random field edge (left, right, top, bottom)."""
        cfg = self.config
        rng = self.rng
        size = cfg.threat_size
        width, height = cfg.field_width, cfg.field_height

        edge = rng.randrange(4)
        if edge == 0:
            x, y = -size, rng.uniform(0, height - size)
        elif edge == 1:
            x, y = width + size, rng.uniform(0, height - size)
        elif edge == 2:
            x, y = rng.uniform(0, width - size), -size
        else:
            x, y = rng.uniform(0, width - size), height + size

        speed = rng.uniform(cfg.threat_speed_min, cfg.threat_speed_max)
        return Threat(x, y, size, speed)

    def make_pickup(self, x: float, y: float, kind: PickupKind) -> Pickup:
        cfg = self.config
        return Pickup(
            x=clamp(x, PICKUP_NEAR_INSET, cfg.field_width - PICKUP_FAR_INSET),
            y=clamp(y, PICKUP_NEAR_INSET, cfg.field_height - PICKUP_FAR_INSET),
            size=cfg.pickup_size,
            kind=kind,
        )

    def pick_pickup_kind(self) -> PickupKind:
        """Magnets are slightly more common than shields."""
        if self.rng.random() < self.config.magnet_pickup_bias:
            return PickupKind.MAGNET
        return PickupKind.SHIELD

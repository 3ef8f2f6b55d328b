"""
spawn_manager.py
----------------
Timed spawning of fish and dogs plus the pickup-drop gate.

Responsibilities
----------------
- Advance one accumulator per kind and attempt a spawn when it reaches the
  current interval (timer resets whether or not the spawn happens).
- Shrink intervals with the difficulty ramp, clamped to a floor/ceiling.
- Enforce per-kind population caps on every attempt.
- Gate pickup drops behind a cooldown and a drop chance.
"""

from catfish.core.debug.debug_logger import DebugLogger
from catfish.core.runtime.game_settings import TuningConfig
from catfish.entities.base_entity import clamp


def difficulty_boost(run_time: float, ramp_seconds: float) -> float:
    """Difficulty ramp in [0, 1]."""
    if ramp_seconds <= 0:
        return 1.0
    return min(1.0, max(0.0, run_time / ramp_seconds))


class SpawnManager:
    """Owns spawn timers, caps and the pickup-drop cooldown."""

    def __init__(self, config: TuningConfig, factory):
        """
        Args:
            config: Tuning values
            factory: EntityFactory used to build new entities
        """
        self.config = config
        self.factory = factory
        self.collectible_timer = 0.0
        self.threat_timer = 0.0
        self.drop_cooldown = 0.0

    def reset(self):
        self.collectible_timer = 0.0
        self.threat_timer = 0.0
        self.drop_cooldown = 0.0

    # ===========================================================
    # Intervals
    # ===========================================================

    def collectible_interval(self, boost: float) -> float:
        cfg = self.config
        return clamp(cfg.collectible_spawn_every - boost * cfg.collectible_interval_drop,
                     cfg.collectible_interval_min, cfg.collectible_interval_max)

    def threat_interval(self, boost: float) -> float:
        cfg = self.config
        return clamp(cfg.threat_spawn_every - boost * cfg.threat_interval_drop,
                     cfg.threat_interval_min, cfg.threat_interval_max)

    # ===========================================================
    # Update Loop
    # ===========================================================

    def update(self, dt: float, boost: float, collectibles: list, threats: list):
        """
        Advance spawn timers and append new entities in place.

        Args:
            dt: Clamped tick delta
            boost: Difficulty ramp in [0, 1]
            collectibles: Live fish list (mutated)
            threats: Live dog list (mutated)
        """
        cfg = self.config

        self.collectible_timer += dt
        if self.collectible_timer >= self.collectible_interval(boost):
            self.collectible_timer = 0.0
            if len(collectibles) < cfg.max_collectibles:
                collectibles.append(self.factory.make_collectible())
                DebugLogger.trace(f"Fish spawned ({len(collectibles)}/{cfg.max_collectibles})",
                                  category="spawn")

        self.threat_timer += dt
        if self.threat_timer >= self.threat_interval(boost):
            self.threat_timer = 0.0
            if len(threats) < cfg.max_threats:
                threats.append(self.factory.make_threat())
                DebugLogger.trace(f"Dog spawned ({len(threats)}/{cfg.max_threats})",
                                  category="spawn")

    # ===========================================================
    # Pickup Drops
    # ===========================================================

    def tick_drop_cooldown(self, dt: float):
        self.drop_cooldown = max(0.0, self.drop_cooldown - dt)

    def try_drop(self) -> bool:
        """Roll for a pickup drop; success restarts the cooldown."""
        if self.drop_cooldown > 0:
            return False
        if self.factory.rng.random() >= self.config.pickup_drop_chance:
            return False
        self.drop_cooldown = self.config.pickup_drop_cooldown
        return True

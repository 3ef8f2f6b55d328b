"""
collision_manager.py
--------------------
Resolves player contacts with fish, pickups and dogs for one tick.

Responsibilities
----------------
- Pull nearby fish toward the player while the magnet is active.
- Eat overlapping fish: score through the combo, credit coins, re-ignite the
  combo and roll for a pickup drop.
- Apply overlapping pickups (magnet timer or shield charge).
- Resolve at most one dog contact per tick: shield absorb or life loss with
  i-frames, combo penalty and knockback.
"""

from dataclasses import dataclass

from catfish.core.debug.debug_logger import DebugLogger
from catfish.core.runtime.game_settings import TuningConfig, UpgradeKeys
from catfish.core.services.event_manager import (
    CollectiblePickedEvent,
    PickupCollectedEvent,
    PlayerHitEvent,
    ShieldAbsorbedEvent,
)
from catfish.entities.entity_types import PickupKind


MAGNET_FIELD_INSET = 12


@dataclass
class CollisionReport:
    """What happened during one resolve() pass."""
    collectibles: int = 0
    golden: int = 0
    pickups: int = 0
    shield_absorbed: bool = False
    hit: bool = False
    lives_depleted: bool = False


class CollisionManager:
    """Detects player overlaps and applies their effects."""

    def __init__(self, config: TuningConfig, combo, store, factory, spawner, events=None):
        """
        Args:
            config: Tuning values
            combo: ComboEngine receiving rewards and hits
            store: ProgressionStore credited with coins and best score
            factory: EntityFactory used for dropped pickups
            spawner: SpawnManager owning the pickup-drop gate
            events: Optional EventManager
        """
        self.config = config
        self.combo = combo
        self.store = store
        self.factory = factory
        self.spawner = spawner
        self.events = events

    def _dispatch(self, event):
        if self.events is not None:
            self.events.dispatch(event)

    def _player_bounds(self):
        cfg = self.config
        margin = cfg.player_margin
        return margin, margin, cfg.field_width - margin, cfg.field_height - margin

    # ===========================================================
    # Magnet
    # ===========================================================

    def apply_magnet(self, run, dt: float):
        """Drag fish within the magnet radius toward the player's center."""
        player = run.player
        if not player.magnet_on:
            return

        cfg = self.config
        level = self.store.level(UpgradeKeys.MAGNET)
        pull = cfg.magnet_pull * (1 + level * cfg.magnet_pull_per_level)
        target = player.center
        inset = MAGNET_FIELD_INSET

        for fish in run.collectibles:
            offset = target - fish.center
            dist = offset.length()
            if dist == 0 or dist > cfg.magnet_radius:
                continue
            fish.pos += offset / dist * pull * dt
            fish.clamp_to(inset, inset, cfg.field_width - inset, cfg.field_height - inset)

    # ===========================================================
    # Resolution
    # ===========================================================

    def resolve(self, run) -> CollisionReport:
        """Run all contact checks for this tick in fixed order."""
        report = CollisionReport()
        self._resolve_collectibles(run, report)
        self._resolve_pickups(run, report)
        self._resolve_threats(run, report)
        return report

    def _resolve_collectibles(self, run, report):
        cfg = self.config
        player = run.player

        for i in range(len(run.collectibles) - 1, -1, -1):
            fish = run.collectibles[i]
            if not player.overlaps(fish):
                continue

            del run.collectibles[i]

            gained = self.combo.score_for(fish.score_value)
            run.stats.add_score(gained)
            if self.store.record_score(run.stats.score):
                DebugLogger.trace(f"New best: {run.stats.score}", category="progress")

            self.store.award_coins(fish.coin_value)
            run.stats.add_coins(fish.coin_value)
            run.stats.add_collectible(fish.golden)

            if fish.golden:
                self.combo.on_reward(cfg.combo_per_collectible * cfg.golden_combo_factor)
                self.combo.extend_ignition(cfg.golden_ignition_bonus,
                                           cfg.combo_window + cfg.golden_ignition_overflow)
                report.golden += 1
            else:
                self.combo.on_reward(cfg.combo_per_collectible)
            report.collectibles += 1

            self._dispatch(CollectiblePickedEvent(golden=fish.golden, score_gained=gained,
                                                  coins_gained=fish.coin_value))

            if self.spawner.try_drop():
                kind = self.factory.pick_pickup_kind()
                run.pickups.append(self.factory.make_pickup(fish.x, fish.y, kind))
                DebugLogger.trace(f"Dropped {kind.value} pickup", category="collision")

    def _resolve_pickups(self, run, report):
        player = run.player

        for i in range(len(run.pickups) - 1, -1, -1):
            pickup = run.pickups[i]
            if not player.overlaps(pickup):
                continue

            self._apply_pickup(player, pickup.kind)
            del run.pickups[i]
            self.combo.on_reward(self.config.combo_pickup_bump)
            run.stats.add_pickup()
            report.pickups += 1
            self._dispatch(PickupCollectedEvent(kind=pickup.kind))

    def _apply_pickup(self, player, kind: PickupKind):
        cfg = self.config
        if kind is PickupKind.MAGNET:
            level = self.store.level(UpgradeKeys.MAGNET)
            player.timers.magnet_active = cfg.magnet_base_duration + level * cfg.magnet_duration_per_level
        elif kind is PickupKind.SHIELD:
            player.timers.shield = 1
        else:
            raise ValueError(f"Unhandled pickup kind: {kind!r}")

        DebugLogger.action(f"Picked up {kind.value}", category="collision")

    def _resolve_threats(self, run, report):
        cfg = self.config
        player = run.player
        if player.invulnerable:
            return

        for dog in run.threats:
            if not player.overlaps(dog):
                continue

            if player.has_shield:
                player.timers.shield = 0
                player.timers.invulnerable = cfg.shield_invulnerable_seconds
                self.combo.on_reward(cfg.combo_shield_bump)
                run.stats.add_shield_use()
                report.shield_absorbed = True
                DebugLogger.action("Shield absorbed a hit", category="collision")
                self._dispatch(ShieldAbsorbedEvent())
                break

            run.lives = max(0, run.lives - 1)
            player.timers.invulnerable = cfg.invulnerable_seconds
            self.combo.on_hit()
            player.knock_back(dog.center, cfg.knockback_distance, self._player_bounds())
            run.stats.add_hit()
            report.hit = True
            report.lives_depleted = run.lives == 0

            DebugLogger.state(f"Player hit, lives left: {run.lives}", category="collision")
            self._dispatch(PlayerHitEvent(lives_left=run.lives))
            break

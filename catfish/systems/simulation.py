"""
simulation.py
-------------
Per-tick orchestration of the chase.

The Simulation instance is the whole game context: it owns the run-local
state (RunContext), the systems that act on it, and a reference to the
ProgressionStore. Nothing lives at module level.

Active tick order
-----------------
1. Clamp dt, advance the difficulty clock
2. Player timers, then combo hold/decay
3. Movement and dash
4. Spawning
5. Threat homing, animation phase, pickup age
6. Pickup-drop cooldown
7. Magnet attraction, then collision resolution
8. Run state check (lives == 0 -> ENDED)
"""

import math
import random
from dataclasses import dataclass

import pygame

from catfish.core.debug.debug_logger import DebugLogger
from catfish.core.runtime.game_settings import Physics, TuningConfig, UpgradeKeys
from catfish.core.services.event_manager import EventManager, RunEndedEvent
from catfish.core.services.input_manager import Actions, InputSnapshot
from catfish.entities.entity_factory import EntityFactory
from catfish.systems.collision_manager import CollisionManager, CollisionReport
from catfish.systems.combo_engine import ComboEngine
from catfish.systems.economy import Economy
from catfish.systems.progression import ProgressionStore
from catfish.systems.run_context import RunContext
from catfish.systems.run_state import RunStateMachine
from catfish.systems.spawn_manager import SpawnManager, difficulty_boost


PURCHASE_ACTIONS = (
    (Actions.PURCHASE_SPEED, UpgradeKeys.SPEED),
    (Actions.PURCHASE_LIVES, UpgradeKeys.LIVES),
    (Actions.PURCHASE_MAGNET, UpgradeKeys.MAGNET),
)


@dataclass(frozen=True)
class HudState:
    """Read-only numbers the HUD shows after each step."""
    score: int
    lives: int
    coins: int
    best_score: int
    multiplier: float

    @property
    def multiplier_text(self) -> str:
        return f"{self.multiplier:.1f}"


def sanitize_dt(dt: float, max_step: float = Physics.MAX_STEP) -> float:
    """Clamp a frame delta to [0, max_step]; NaN becomes 0."""
    if dt is None or math.isnan(dt) or dt <= 0:
        return 0.0
    return min(dt, max_step)


class Simulation:
    """Owns one game session: systems, current run and meta progress."""

    def __init__(self, config: TuningConfig = None, store: ProgressionStore = None,
                 rng: random.Random = None, events: EventManager = None):
        """
        Args:
            config: Tuning values (defaults if None)
            store: Loaded progression (fresh record if None)
            rng: Seedable random source for every randomized attribute
            events: Event bus; persistence listens here for save requests
        """
        self.config = config if config is not None else TuningConfig()
        self.events = events if events is not None else EventManager()
        self.store = store if store is not None else ProgressionStore()
        if self.store.events is None:
            self.store.events = self.events
        self.rng = rng if rng is not None else random.Random()

        self.factory = EntityFactory(self.config, self.rng)
        self.spawner = SpawnManager(self.config, self.factory)
        self.combo = ComboEngine(self.config)
        self.economy = Economy(self.config, self.events)
        self.collisions = CollisionManager(self.config, self.combo, self.store,
                                           self.factory, self.spawner, self.events)
        self.run_state = RunStateMachine(self.events)
        self.run = None

        self.start_run()
        DebugLogger.init_entry("Simulation")

    # ===========================================================
    # Run Lifecycle
    # ===========================================================

    def start_run(self):
        """Discard run-local state and begin a fresh run."""
        player = self.factory.make_player(self.store.meta)
        self.run = RunContext(player=player, lives=player.start_lives)
        for _ in range(self.config.initial_collectibles):
            self.run.collectibles.append(self.factory.make_collectible())

        self.combo.reset()
        self.spawner.reset()
        DebugLogger.state(f"Run started with {self.run.lives} lives", category="run_state")

    def _end_run(self):
        if not self.run_state.end():
            return
        stats = self.run.stats
        DebugLogger.state(f"Run over: {stats.summary()}", category="run_state")
        self.events.dispatch(RunEndedEvent(score=stats.score, coins_earned=stats.coins_earned,
                                           run_time=stats.run_time))
        self.store.request_save()

    @property
    def field_bounds(self):
        cfg = self.config
        margin = cfg.player_margin
        return margin, margin, cfg.field_width - margin, cfg.field_height - margin

    # ===========================================================
    # Step
    # ===========================================================

    def step(self, dt: float, snapshot: InputSnapshot):
        """Advance one tick. Returns the CollisionReport when the world moved."""
        dt = sanitize_dt(dt)

        if self.run_state.ended:
            self._step_ended(snapshot)
            return None

        if self.run_state.paused:
            if snapshot.was_pressed(Actions.PAUSE):
                self.run_state.toggle_pause()
            return None

        if snapshot.was_pressed(Actions.HARD_RESET):
            self.run_state.hard_reset()
            self.start_run()
            return None

        if snapshot.was_pressed(Actions.PAUSE):
            self.run_state.toggle_pause()
            return None

        return self._step_active(dt, snapshot)

    def _step_ended(self, snapshot: InputSnapshot):
        for action, key in PURCHASE_ACTIONS:
            if snapshot.was_pressed(action):
                self.economy.purchase(self.store, key)

        if snapshot.was_pressed(Actions.RESTART) and self.run_state.restart():
            self.start_run()
        elif snapshot.was_pressed(Actions.HARD_RESET) and self.run_state.hard_reset():
            self.start_run()

    def _step_active(self, dt: float, snapshot: InputSnapshot) -> CollisionReport:
        cfg = self.config
        run = self.run
        player = run.player

        run.stats.add_time(dt)
        boost = difficulty_boost(run.stats.run_time, cfg.difficulty_ramp_seconds)

        player.timers.tick(dt)
        self.combo.update(dt)

        self._move_player(dt, snapshot)

        self.spawner.update(dt, boost, run.collectibles, run.threats)

        target = player.center
        speed_scale = 1 + boost * cfg.threat_difficulty_speedup
        for dog in run.threats:
            dog.home_towards(target, dt, speed_scale)
        for fish in run.collectibles:
            fish.animate(dt, cfg.collectible_bob_rate)
        for pickup in run.pickups:
            pickup.update(dt)

        self.spawner.tick_drop_cooldown(dt)

        self.collisions.apply_magnet(run, dt)
        report = self.collisions.resolve(run)

        if report.lives_depleted:
            self._end_run()

        return report

    def _move_player(self, dt: float, snapshot: InputSnapshot):
        cfg = self.config
        player = self.run.player

        direction = pygame.Vector2(snapshot.movement())
        if direction.length_squared() > 0:
            direction = direction.normalize()
            if snapshot.was_pressed(Actions.DASH) and player.can_dash():
                player.start_dash(cfg.dash_duration, cfg.dash_cooldown)
                DebugLogger.trace("Dash", category="input")

        player.steer(direction, cfg.dash_speed_boost)
        player.integrate(dt, self.field_bounds)

    # ===========================================================
    # Read-only Views
    # ===========================================================

    def hud(self) -> HudState:
        return HudState(
            score=self.run.stats.score,
            lives=self.run.lives,
            coins=self.store.coins,
            best_score=self.store.best_score,
            multiplier=self.combo.multiplier,
        )

    def shop(self):
        return self.economy.shop_entries(self.store.meta)

"""
combo_engine.py
---------------
Score multiplier with an ignition window.

Phases
------
holding:   ignition > 0, multiplier frozen
decaying:  ignition == 0, multiplier drops linearly toward 1.0

The multiplier is always kept in [1.0, max_multiplier].
"""

import math

from catfish.core.debug.debug_logger import DebugLogger
from catfish.core.runtime.game_settings import TuningConfig
from catfish.entities.base_entity import clamp


MIN_MULTIPLIER = 1.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ComboEngine:
    """Owns the multiplier and its ignition timer."""

    def __init__(self, config: TuningConfig):
        self.config = config
        self.multiplier = MIN_MULTIPLIER
        self.ignition = 0.0

    def reset(self):
        self.multiplier = MIN_MULTIPLIER
        self.ignition = 0.0

    @property
    def holding(self) -> bool:
        return self.ignition > 0

    def _clamp(self, value: float) -> float:
        return clamp(value, MIN_MULTIPLIER, self.config.combo_max_multiplier)

    # ===========================================================
    # Frame Cycle
    # ===========================================================

    def update(self, dt: float):
        """Hold or decay. Runs before this tick's rewards and hits."""
        self.ignition = max(0.0, self.ignition - dt)
        if self.ignition <= 0:
            self.multiplier = self._clamp(self.multiplier - self.config.combo_decay_per_second * dt)

    # ===========================================================
    # Events
    # ===========================================================

    def on_reward(self, amount: float):
        """Re-ignite the full window and raise the multiplier."""
        self.ignition = self.config.combo_window
        self.multiplier = self._clamp(self.multiplier + amount)
        DebugLogger.trace(f"Combo x{self.multiplier:.2f} (+{amount:.2f})", category="combo")

    def extend_ignition(self, bonus: float, ceiling: float):
        """Add bonus hold time, never past ceiling."""
        self.ignition = min(ceiling, self.ignition + bonus)

    def on_hit(self):
        """Penalize the multiplier and drop straight into decay."""
        self.multiplier = self._clamp(self.multiplier - self.config.combo_hit_penalty)
        self.ignition = 0.0
        DebugLogger.trace(f"Combo broken -> x{self.multiplier:.2f}", category="combo")

    def score_for(self, base_value: float) -> int:
        return round_half_up(base_value * self.multiplier)

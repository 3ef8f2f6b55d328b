"""
game_settings.py
----------------
Centralized constants and tunable values for all game systems.
"""

from dataclasses import dataclass, field
from typing import Dict


# ===========================================================
# Display & Timing
# ===========================================================

class Display:
    """Window configuration for the pygame front end."""
    FPS: int = 60
    CAPTION: str = "Catfish Dash"
    BACKGROUND_COLOR = (24, 28, 44)


class Physics:
    """Update timing."""
    MAX_STEP: float = 1 / 30


class UpgradeKeys:
    """Upgrade identifiers stored in the save record."""
    SPEED = "speed"
    LIVES = "lives"
    MAGNET = "magnet"

    ALL = (SPEED, LIVES, MAGNET)


# ===========================================================
# Tuning
# ===========================================================

def _default_upgrade_costs() -> Dict[str, int]:
    return {UpgradeKeys.SPEED: 30, UpgradeKeys.LIVES: 45, UpgradeKeys.MAGNET: 35}


@dataclass
class TuningConfig:
    """Every gameplay number that can be overridden from a config file."""

    # Play field
    field_width: int = 960
    field_height: int = 540
    player_margin: float = 10.0

    # Player
    base_speed: float = 310.0
    speed_per_level: float = 25.0
    base_lives: int = 3
    player_size: float = 44.0
    invulnerable_seconds: float = 1.0
    shield_invulnerable_seconds: float = 0.55
    knockback_distance: float = 50.0

    # Dash
    dash_cooldown: float = 1.2
    dash_duration: float = 0.12
    dash_speed_boost: float = 3.2

    # Spawning
    collectible_spawn_every: float = 0.85
    collectible_interval_drop: float = 0.18
    collectible_interval_min: float = 0.55
    collectible_interval_max: float = 0.95
    max_collectibles: int = 10
    initial_collectibles: int = 2

    threat_spawn_every: float = 2.2
    threat_interval_drop: float = 0.45
    threat_interval_min: float = 1.35
    threat_interval_max: float = 2.3
    max_threats: int = 7
    threat_speed_min: float = 98.0
    threat_speed_max: float = 155.0
    threat_size: float = 44.0
    threat_difficulty_speedup: float = 0.35

    difficulty_ramp_seconds: float = 120.0

    # Combo
    combo_window: float = 2.6
    combo_max_multiplier: float = 5.0
    combo_per_collectible: float = 0.32
    combo_decay_per_second: float = 0.55
    combo_hit_penalty: float = 0.8
    combo_pickup_bump: float = 0.25
    combo_shield_bump: float = 0.15

    # Collectibles
    golden_chance: float = 0.12
    golden_score: int = 6
    golden_coins: int = 5
    golden_combo_factor: float = 2.0
    golden_ignition_bonus: float = 0.8
    golden_ignition_overflow: float = 0.6
    collectible_score: int = 1
    collectible_coins: int = 1
    collectible_spawn_inset: float = 24.0
    collectible_spawn_far_inset: float = 50.0
    collectible_bob_rate: float = 3.2

    # Pickups
    pickup_drop_chance: float = 0.14
    pickup_drop_cooldown: float = 0.6
    magnet_pickup_bias: float = 0.55
    pickup_size: float = 28.0

    # Magnet
    magnet_base_duration: float = 3.0
    magnet_duration_per_level: float = 0.85
    magnet_pull: float = 175.0
    magnet_pull_per_level: float = 0.08
    magnet_radius: float = 220.0

    # Economy
    upgrade_base_costs: Dict[str, int] = field(default_factory=_default_upgrade_costs)
    upgrade_fallback_cost: int = 40
    upgrade_cost_growth: float = 0.65

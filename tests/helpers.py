"""
helpers.py
----------
Entity placement and input shortcuts shared by the test modules.
"""

from catfish.core.runtime.game_settings import TuningConfig
from catfish.core.services.input_manager import EMPTY_INPUT, InputSnapshot
from catfish.entities.collectible import Collectible
from catfish.entities.pickup import Pickup
from catfish.entities.threat import Threat



def clear_field(simulation):
    run = simulation.run
    run.collectibles.clear()
    run.threats.clear()
    run.pickups.clear()


def idle():
    return EMPTY_INPUT


def press(*actions):
    return InputSnapshot.of(pressed=actions)


def hold(*actions):
    return InputSnapshot.of(held=actions)


def fish_on(player, golden=False, config=None):
    """A fish overlapping the player's top-left corner area."""
    cfg = config or TuningConfig()
    return Collectible(
        player.x + 5, player.y + 5,
        32 if golden else 26, 22 if golden else 18,
        golden=golden,
        score_value=cfg.golden_score if golden else cfg.collectible_score,
        coin_value=cfg.golden_coins if golden else cfg.collectible_coins,
    )


def dog_on(player, dx=-20.0, dy=0.0, speed=100.0):
    return Threat(player.x + dx, player.y + dy, 44, speed)


def pickup_on(player, kind):
    return Pickup(player.x + 4, player.y + 4, 28, kind)

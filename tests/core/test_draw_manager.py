"""
test_draw_manager.py
--------------------
Smoke tests for the renderer on an off-screen surface.
"""

import pygame
import pytest

from catfish.entities.entity_types import PickupKind
from catfish.graphics.draw_manager import DrawManager

from tests.helpers import dog_on, fish_on, pickup_on


@pytest.fixture
def renderer(config):
    pygame.font.init()
    surface = pygame.Surface((config.field_width, config.field_height))
    yield DrawManager(surface, config)
    pygame.font.quit()


def populate(sim):
    player = sim.run.player
    sim.run.collectibles.append(fish_on(player, golden=True))
    sim.run.threats.append(dog_on(player, dx=-200))
    sim.run.pickups.append(pickup_on(player, PickupKind.MAGNET))
    player.timers.shield = 1
    player.timers.magnet_active = 1.0
    player.timers.invulnerable = 0.5


def test_draws_active_run(renderer, sim):
    populate(sim)
    renderer.draw(sim)
    assert renderer.surface.get_at((0, 0)) is not None


def test_draws_paused_and_shop_overlays(renderer, sim):
    populate(sim)
    sim.run_state.toggle_pause()
    renderer.draw(sim)

    sim.run_state.toggle_pause()
    sim.run_state.end()
    renderer.draw(sim)

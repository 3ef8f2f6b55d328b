"""
test_player.py
--------------
Unit tests for the player entity, its timers and the shared box helpers.
"""

import pygame
import pytest

from catfish.entities.base_entity import BaseEntity, rects_overlap
from catfish.entities.player import Player, PlayerTimers


BOUNDS = (10, 10, 950, 530)


@pytest.fixture
def player():
    return Player(100, 100, 44, base_speed=310, start_lives=3)


# ===========================================================
# Overlap
# ===========================================================

@pytest.mark.parametrize("other, expected", [
    (BaseEntity(10, 10, 10, 10), True),
    (BaseEntity(20, 0, 10, 10), False),   # touching right edge
    (BaseEntity(0, 20, 10, 10), False),   # touching bottom edge
    (BaseEntity(19.9, 19.9, 5, 5), True),
    (BaseEntity(-5, -5, 50, 50), True),
])
def test_rects_overlap_is_strict(other, expected):
    box = BaseEntity(0, 0, 20, 20)
    assert rects_overlap(box, other) is expected
    assert rects_overlap(other, box) is expected


# ===========================================================
# Timers
# ===========================================================

def test_timers_floor_at_zero():
    timers = PlayerTimers()
    timers.invulnerable = 0.3
    timers.magnet_active = 2.0

    timers.tick(0.5)

    assert timers.invulnerable == 0.0
    assert timers.magnet_active == pytest.approx(1.5)


def test_shield_is_not_a_timer():
    timers = PlayerTimers()
    timers.shield = 1
    timers.tick(100.0)
    assert timers.shield == 1


def test_status_flags(player):
    assert not player.invulnerable
    assert not player.has_shield
    assert not player.magnet_on
    assert player.can_dash()

    player.timers.shield = 1
    player.timers.magnet_active = 0.1
    assert player.has_shield
    assert player.magnet_on


# ===========================================================
# Movement
# ===========================================================

def test_dash_blocks_next_dash(player):
    player.start_dash(0.12, 1.2)
    assert player.dashing
    assert not player.can_dash()

    player.timers.tick(0.2)
    assert not player.dashing
    assert not player.can_dash()

    player.timers.tick(1.0)
    assert player.can_dash()


def test_steer_applies_dash_boost(player):
    player.steer(pygame.Vector2(1, 0), 3.2)
    assert player.velocity == pygame.Vector2(310, 0)

    player.start_dash(0.12, 1.2)
    player.steer(pygame.Vector2(0, -1), 3.2)
    assert player.velocity.y == pytest.approx(-992)


def test_integrate_clamps_to_bounds(player):
    player.steer(pygame.Vector2(-1, 0), 1.0)
    player.integrate(1.0, BOUNDS)

    assert player.x == 10
    assert player.y == 100


def test_integrate_clamps_far_edge(player):
    player.pos.update(940, 520)
    player.steer(pygame.Vector2(1, 1).normalize(), 1.0)
    player.integrate(0.1, BOUNDS)

    assert player.x == 950 - 44
    assert player.y == 530 - 44


def test_knock_back_pushes_away_from_source(player):
    source = player.center + pygame.Vector2(0, 10)
    player.knock_back(source, 50, BOUNDS)
    assert player.x == pytest.approx(100)
    assert player.y == pytest.approx(50)


def test_knock_back_from_same_center_does_not_move(player):
    player.knock_back(player.center, 50, BOUNDS)
    assert player.pos == pygame.Vector2(100, 100)

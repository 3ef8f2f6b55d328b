"""
test_collision_manager.py
-------------------------
Unit tests for contact resolution between the cat and fish, pickups and dogs.

Covers:
- Standard and golden fish scoring through the combo
- Pickup effects and drops
- Shield absorb vs. life loss, i-frames and knockback
- Magnet attraction
"""

import random

import pytest

from catfish.core.runtime.game_settings import TuningConfig
from catfish.core.services.event_manager import (
    CollectiblePickedEvent,
    PlayerHitEvent,
    ProgressChangedEvent,
    ShieldAbsorbedEvent,
)
from catfish.entities.collectible import Collectible
from catfish.entities.entity_types import PickupKind
from catfish.systems.collision_manager import CollisionReport
from catfish.systems.progression import MetaProgress, ProgressionStore
from catfish.systems.simulation import Simulation

from tests.helpers import clear_field, dog_on, fish_on, pickup_on

def resolve(sim):
    return sim.collisions.resolve(sim.run)

# ===========================================================
# Fish
# ===========================================================

def test_standard_fish_at_base_multiplier(sim, config):
    player = sim.run.player
    sim.run.collectibles.append(fish_on(player, config=config))

    report = resolve(sim)

    assert report.collectibles == 1
    assert sim.run.collectibles == []
    assert sim.run.score == 1
    assert sim.store.coins == 1
    assert sim.combo.multiplier == pytest.approx(1.32)
    assert sim.combo.ignition == pytest.approx(2.6)

def test_golden_fish_at_double_multiplier(sim, config):
    sim.combo.multiplier = 2.0
    sim.run.collectibles.append(fish_on(sim.run.player, golden=True, config=config))

    report = resolve(sim)

    assert report.golden == 1
    assert sim.run.score == 12
    assert sim.store.coins == 5
    assert sim.combo.multiplier == pytest.approx(2.64)
    assert sim.combo.ignition == pytest.approx(3.2)
    assert sim.run.stats.golden_collected == 1

def test_far_fish_is_left_alone(sim, config):
    player = sim.run.player
    fish = Collectible(player.x + 200, player.y, 26, 18, False, 1, 1)
    sim.run.collectibles.append(fish)

    report = resolve(sim)

    assert report.collectibles == 0
    assert sim.run.collectibles == [fish]

def test_touching_edges_do_not_count(sim):
    player = sim.run.player
    fish = Collectible(player.x + player.w, player.y, 26, 18, False, 1, 1)
    sim.run.collectibles.append(fish)

    assert resolve(sim).collectibles == 0

def test_several_fish_in_one_tick(sim, config):
    player = sim.run.player
    sim.run.collectibles.extend([fish_on(player, config=config) for _ in range(3)])

    report = resolve(sim)

    assert report.collectibles == 3
    assert sim.run.collectibles == []
    assert sim.combo.multiplier == pytest.approx(1.96)

def test_best_score_and_coins_saved_immediately(sim, config, recorder):
    received = recorder(ProgressChangedEvent, CollectiblePickedEvent)
    sim.run.collectibles.append(fish_on(sim.run.player, config=config))

    resolve(sim)

    assert sim.store.best_score == 1
    saves = [e for e in received if isinstance(e, ProgressChangedEvent)]
    assert saves and saves[-1].record["bestScore"] == 1
    assert saves[-1].record["coins"] == 1
    picked = [e for e in received if isinstance(e, CollectiblePickedEvent)]
    assert picked == [CollectiblePickedEvent(golden=False, score_gained=1, coins_gained=1)]

def drop_sim(events):
    config = TuningConfig(pickup_drop_chance=1.0)
    sim = Simulation(config, ProgressionStore(MetaProgress(), events), random.Random(3), events)
    clear_field(sim)
    return sim

def test_dropped_pickup_under_player_is_collected_same_tick(events):
    sim = drop_sim(events)
    player = sim.run.player
    sim.run.collectibles.append(fish_on(player, config=sim.config))

    report = resolve(sim)

    assert report.collectibles == 1
    assert report.pickups == 1
    assert sim.run.pickups == []
    assert sim.spawner.drop_cooldown == pytest.approx(0.6)
    assert player.magnet_on or player.has_shield
    assert sim.combo.multiplier == pytest.approx(1.0 + 0.32 + 0.25)

def test_drop_lands_where_the_fish_was(events):
    sim = drop_sim(events)
    fish = fish_on(sim.run.player, config=sim.config)
    sim.run.collectibles.append(fish)

    sim.collisions._resolve_collectibles(sim.run, CollisionReport())

    assert len(sim.run.pickups) == 1
    dropped = sim.run.pickups[0]
    assert dropped.kind in (PickupKind.MAGNET, PickupKind.SHIELD)
    assert (dropped.x, dropped.y) == (fish.x, fish.y)
    assert dropped.w == dropped.h == sim.config.pickup_size

def test_drop_waits_for_cooldown(events):
    sim = drop_sim(events)
    player = sim.run.player
    sim.run.collectibles.extend([fish_on(player, config=sim.config) for _ in range(2)])

    sim.collisions._resolve_collectibles(sim.run, CollisionReport())

    assert len(sim.run.pickups) == 1

# ===========================================================
# Pickups
# ===========================================================

def test_magnet_pickup_sets_timer_from_upgrade_level(sim):
    sim.store.meta.upgrades["magnet"] = 2
    sim.run.pickups.append(pickup_on(sim.run.player, PickupKind.MAGNET))

    report = resolve(sim)

    assert report.pickups == 1
    assert sim.run.pickups == []
    assert sim.run.player.timers.magnet_active == pytest.approx(4.7)
    assert sim.combo.multiplier == pytest.approx(1.25)

def test_shield_pickup_grants_single_charge(sim):
    player = sim.run.player
    sim.run.pickups.append(pickup_on(player, PickupKind.SHIELD))
    sim.run.pickups.append(pickup_on(player, PickupKind.SHIELD))

    resolve(sim)

    assert player.timers.shield == 1
    assert sim.run.stats.pickups_collected == 2

def test_unknown_pickup_kind_raises(sim):
    with pytest.raises(ValueError):
        sim.collisions._apply_pickup(sim.run.player, "banana")

# ===========================================================
# Dogs
# ===========================================================

def test_shield_absorbs_hit(sim, recorder):
    received = recorder(ShieldAbsorbedEvent, PlayerHitEvent)
    player = sim.run.player
    player.timers.shield = 1
    sim.combo.multiplier = 1.5
    sim.run.threats.append(dog_on(player))

    report = resolve(sim)

    assert report.shield_absorbed
    assert not report.hit
    assert sim.run.lives == 3
    assert player.timers.shield == 0
    assert player.timers.invulnerable == pytest.approx(0.55)
    assert sim.combo.multiplier == pytest.approx(1.65)
    assert received == [ShieldAbsorbedEvent()]

def test_hit_costs_life_and_knocks_back(sim, recorder):
    received = recorder(PlayerHitEvent)
    player = sim.run.player
    start_x = player.x
    sim.combo.multiplier = 3.0
    sim.combo.ignition = 1.0
    sim.run.threats.append(dog_on(player, dx=-20))

    report = resolve(sim)

    assert report.hit
    assert not report.lives_depleted
    assert sim.run.lives == 2
    assert player.timers.invulnerable == pytest.approx(1.0)
    assert sim.combo.multiplier == pytest.approx(2.2)
    assert sim.combo.ignition == 0.0
    assert player.x == pytest.approx(start_x + 50)
    assert received == [PlayerHitEvent(lives_left=2)]

def test_last_life_reports_depletion(sim):
    player = sim.run.player
    sim.run.lives = 1
    sim.run.threats.append(dog_on(player))

    report = resolve(sim)

    assert report.lives_depleted
    assert sim.run.lives == 0

def test_lives_never_go_negative(sim):
    player = sim.run.player
    sim.run.lives = 0
    sim.run.threats.append(dog_on(player))

    resolve(sim)

    assert sim.run.lives == 0

def test_invulnerable_player_ignores_dogs(sim):
    player = sim.run.player
    player.timers.invulnerable = 0.5
    sim.run.threats.append(dog_on(player))

    report = resolve(sim)

    assert not report.hit
    assert sim.run.lives == 3

def test_only_one_hit_per_tick(sim):
    player = sim.run.player
    sim.run.threats.extend([dog_on(player, dx=-20), dog_on(player, dx=20), dog_on(player, dy=15)])

    resolve(sim)

    assert sim.run.lives == 2
    assert sim.run.stats.hits_taken == 1

def test_knockback_stays_inside_field(sim):
    player = sim.run.player
    player.pos.update(sim.config.field_width - 10 - player.w, player.y)
    sim.run.threats.append(dog_on(player, dx=-20))

    resolve(sim)

    assert player.x == pytest.approx(sim.config.field_width - 10 - player.w)

# ===========================================================
# Magnet
# ===========================================================

def test_magnet_pulls_fish_in_radius(sim):
    player = sim.run.player
    player.timers.magnet_active = 2.0
    near = Collectible(player.x + 100, player.y, 26, 18, False, 1, 1)
    far = Collectible(player.x + 300, player.y, 26, 18, False, 1, 1)
    sim.run.collectibles.extend([near, far])
    near_before = (player.center - near.center).length()
    far_before = far.pos.copy()

    sim.collisions.apply_magnet(sim.run, 0.1)

    near_after = (player.center - near.center).length()
    assert near_after == pytest.approx(near_before - 17.5)
    assert far.pos == far_before

def test_magnet_idle_when_inactive(sim):
    player = sim.run.player
    fish = Collectible(player.x + 100, player.y, 26, 18, False, 1, 1)
    sim.run.collectibles.append(fish)
    before = fish.pos.copy()

    sim.collisions.apply_magnet(sim.run, 0.1)

    assert fish.pos == before

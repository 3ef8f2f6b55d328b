"""
test_run_stats.py
-----------------
Unit tests for per-run statistics.
"""

from catfish.core.runtime.run_stats import RunStats


def test_counters_accumulate():
    stats = RunStats()
    stats.add_score(5)
    stats.add_score(3)
    stats.add_coins(6)
    stats.add_time(0.5)
    stats.add_collectible(golden=False)
    stats.add_collectible(golden=True)
    stats.add_pickup()
    stats.add_hit()
    stats.add_shield_use()

    assert stats.summary() == {
        "score": 8,
        "coins_earned": 6,
        "run_time": 0.5,
        "collectibles": 2,
        "golden": 1,
        "pickups": 1,
        "hits": 1,
        "shields_used": 1,
    }


def test_reset():
    stats = RunStats()
    stats.add_score(10)
    stats.add_hit()
    stats.reset()

    assert stats.score == 0
    assert stats.hits_taken == 0
    assert stats.run_time == 0.0

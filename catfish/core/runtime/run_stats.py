"""
run_stats.py
------------
Tracks statistics for the current run.
Separated from the persisted meta-progression.
"""


class RunStats:
    """Container for run-specific statistics. Reset when starting a new run."""

    def __init__(self):
        self.reset()

    def add_score(self, amount: int):
        self.score += amount

    def add_coins(self, amount: int):
        self.coins_earned += amount

    def add_time(self, dt: float):
        self.run_time += dt

    def add_collectible(self, golden: bool):
        self.collectibles_collected += 1
        if golden:
            self.golden_collected += 1

    def add_pickup(self):
        self.pickups_collected += 1

    def add_hit(self):
        self.hits_taken += 1

    def add_shield_use(self):
        self.shields_used += 1

    def reset(self):
        """Reset all stats for a new run."""
        self.score = 0
        self.coins_earned = 0
        self.run_time = 0.0
        self.collectibles_collected = 0
        self.golden_collected = 0
        self.pickups_collected = 0
        self.hits_taken = 0
        self.shields_used = 0

    def summary(self) -> dict:
        return {
            "score": self.score,
            "coins_earned": self.coins_earned,
            "run_time": round(self.run_time, 2),
            "collectibles": self.collectibles_collected,
            "golden": self.golden_collected,
            "pickups": self.pickups_collected,
            "hits": self.hits_taken,
            "shields_used": self.shields_used,
        }

"""
run_context.py
--------------
Run-local state: everything that is thrown away when a new run starts.
"""

from dataclasses import dataclass, field
from typing import List

from catfish.core.runtime.run_stats import RunStats
from catfish.entities.collectible import Collectible
from catfish.entities.pickup import Pickup
from catfish.entities.player import Player
from catfish.entities.threat import Threat


@dataclass
class RunContext:
    player: Player
    lives: int
    collectibles: List[Collectible] = field(default_factory=list)
    threats: List[Threat] = field(default_factory=list)
    pickups: List[Pickup] = field(default_factory=list)
    stats: RunStats = field(default_factory=RunStats)

    @property
    def score(self) -> int:
        return self.stats.score

    @property
    def run_time(self) -> float:
        return self.stats.run_time

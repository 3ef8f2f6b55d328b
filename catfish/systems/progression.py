"""
progression.py
--------------
Meta-progression record (coins, best score, upgrade levels) and the store
that mutates it during play.

Responsibilities
----------------
- Convert between MetaProgress and the persisted save record.
- Fall back to a clean default for missing or corrupt records.
- Credit coins, track best score, bump upgrade levels.
- Request a persistence write (ProgressChangedEvent) after every change.
"""

import copy
from dataclasses import dataclass, field
from typing import Dict

from catfish.core.debug.debug_logger import DebugLogger
from catfish.core.runtime.game_settings import UpgradeKeys
from catfish.core.services.event_manager import ProgressChangedEvent


def _default_upgrades() -> Dict[str, int]:
    return {key: 0 for key in UpgradeKeys.ALL}


def _is_count(value) -> bool:
    """Non-negative integer, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


# ===========================================================
# Meta Progress
# ===========================================================

@dataclass
class MetaProgress:
    """Persisted progression that survives between runs."""
    coins: int = 0
    best_score: int = 0
    upgrades: Dict[str, int] = field(default_factory=_default_upgrades)

    def level(self, key: str) -> int:
        return self.upgrades.get(key, 0)

    def to_record(self) -> dict:
        """Save-record form: {coins, bestScore, upgrades: {...}}."""
        return {
            "coins": self.coins,
            "bestScore": self.best_score,
            "upgrades": dict(self.upgrades),
        }

    @classmethod
    def from_record(cls, record) -> "MetaProgress":
        """
        Build from a loaded save record.

        Anything that is not a mapping yields the default record. Invalid
        fields (negative, non-integer) are replaced by their defaults while
        valid ones are kept.
        """
        meta = cls()
        if not isinstance(record, dict):
            DebugLogger.warn("Save record is not a mapping - using defaults", category="progress")
            return meta

        coins = record.get("coins", 0)
        best = record.get("bestScore", 0)
        meta.coins = coins if _is_count(coins) else 0
        meta.best_score = best if _is_count(best) else 0

        upgrades = record.get("upgrades", {})
        if isinstance(upgrades, dict):
            for key, value in upgrades.items():
                if isinstance(key, str) and _is_count(value):
                    meta.upgrades[key] = value

        return meta


# ===========================================================
# Progression Store
# ===========================================================

class ProgressionStore:
    """Owns the live MetaProgress and announces every change."""

    def __init__(self, meta: MetaProgress = None, events=None):
        """
        Args:
            meta: Loaded progress (defaults to a fresh record)
            events: Optional EventManager that receives save requests
        """
        self.meta = meta if meta is not None else MetaProgress()
        self.events = events

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def coins(self) -> int:
        return self.meta.coins

    @property
    def best_score(self) -> int:
        return self.meta.best_score

    def level(self, key: str) -> int:
        return self.meta.level(key)

    def snapshot(self) -> dict:
        """Deep copy of the save record."""
        return copy.deepcopy(self.meta.to_record())

    # ===========================================================
    # Mutations
    # ===========================================================

    def award_coins(self, amount: int) -> None:
        """Credit coins. Non-positive amounts are ignored."""
        if amount <= 0:
            return
        self.meta.coins += amount
        self.request_save()

    def record_score(self, score: int) -> bool:
        """Raise best score if beaten. Returns True on a new best."""
        if score <= self.meta.best_score:
            return False
        self.meta.best_score = score
        self.request_save()
        return True

    def spend(self, key: str, cost: int) -> bool:
        """Deduct cost and raise the upgrade level by one."""
        if cost < 0 or self.meta.coins < cost:
            return False
        self.meta.coins -= cost
        self.meta.upgrades[key] = self.meta.level(key) + 1
        self.request_save()
        return True

    def request_save(self) -> None:
        """Fire-and-forget persistence request."""
        if self.events is None:
            return
        self.events.dispatch(ProgressChangedEvent(record=self.snapshot()))

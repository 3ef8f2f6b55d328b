"""
economy.py
----------
Upgrade cost curve and shop purchases.

cost(key, level) = floor(base_cost[key] * (1 + level * growth))
"""

import math
from typing import List, NamedTuple

from catfish.core.debug.debug_logger import DebugLogger
from catfish.core.runtime.game_settings import TuningConfig, UpgradeKeys
from catfish.core.services.event_manager import UpgradePurchasedEvent


class ShopEntry(NamedTuple):
    key: str
    level: int
    cost: int
    affordable: bool


class Economy:
    """Prices upgrades and applies purchases to a ProgressionStore."""

    def __init__(self, config: TuningConfig, events=None):
        self.config = config
        self.events = events

    def cost(self, key: str, level: int) -> int:
        """Price of buying the next level of `key` from `level`."""
        base = self.config.upgrade_base_costs.get(key, self.config.upgrade_fallback_cost)
        return math.floor(base * (1 + level * self.config.upgrade_cost_growth))

    def purchase(self, store, key: str) -> bool:
        """
        Buy one level of `key`.

        Returns:
            bool: False (and no state change) when coins are insufficient.
        """
        level = store.level(key)
        price = self.cost(key, level)

        if not store.spend(key, price):
            DebugLogger.warn(
                f"Cannot afford '{key}' lvl {level + 1}: {store.coins}/{price} coins",
                category="economy"
            )
            return False

        DebugLogger.action(f"Bought '{key}' lvl {level + 1} for {price}", category="economy")
        if self.events is not None:
            self.events.dispatch(UpgradePurchasedEvent(key=key, level=level + 1, cost=price))
        return True

    def shop_entries(self, meta) -> List[ShopEntry]:
        """Current level and next price of every upgrade."""
        entries = []
        for key in UpgradeKeys.ALL:
            level = meta.level(key)
            price = self.cost(key, level)
            entries.append(ShopEntry(key, level, price, meta.coins >= price))
        return entries

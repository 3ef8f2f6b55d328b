"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.
Lets the simulation announce what happened (pickups, hits, run end, save
requests) without knowing who listens.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Type

from catfish.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class CollectiblePickedEvent(BaseEvent):
    """Dispatched when the player eats a fish."""
    golden: bool
    score_gained: int
    coins_gained: int


@dataclass(frozen=True)
class PickupCollectedEvent(BaseEvent):
    """Dispatched when the player grabs a magnet or shield."""
    kind: object


@dataclass(frozen=True)
class PlayerHitEvent(BaseEvent):
    """Dispatched when an unshielded threat costs the player a life."""
    lives_left: int


@dataclass(frozen=True)
class ShieldAbsorbedEvent(BaseEvent):
    """Dispatched when a shield charge soaks up a threat contact."""
    pass


@dataclass(frozen=True)
class RunStateChangedEvent(BaseEvent):
    """Dispatched on every run state transition."""
    previous: object
    current: object


@dataclass(frozen=True)
class RunEndedEvent(BaseEvent):
    """Dispatched once when the last life is lost."""
    score: int
    coins_earned: int
    run_time: float


@dataclass(frozen=True)
class UpgradePurchasedEvent(BaseEvent):
    """Dispatched after a successful shop purchase."""
    key: str
    level: int
    cost: int


@dataclass(frozen=True)
class ProgressChangedEvent(BaseEvent):
    """Requests a persistence write of the given save record."""
    record: dict = field(default_factory=dict)


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}
        DebugLogger.init("EventManager initialized", category="event_manager")

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and skipped.

        Args:
            event: Event instance to dispatch
        """
        callbacks = self._subscribers.get(type(event))
        if not callbacks:
            return

        for callback in list(callbacks):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Count subscribers for one event type, or all of them."""
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())

"""
run_state.py
------------
Top-level run states and the transitions allowed between them.

    ACTIVE  --pause-->      PAUSED
    PAUSED  --pause-->      ACTIVE
    ACTIVE  --lives == 0--> ENDED
    ENDED   --restart-->    ACTIVE (new run)
    ACTIVE/ENDED --hard reset--> ACTIVE (new run)
"""

from enum import IntEnum

from catfish.core.debug.debug_logger import DebugLogger
from catfish.core.services.event_manager import RunStateChangedEvent


class RunState(IntEnum):
    ACTIVE = 0
    PAUSED = 1
    ENDED = 2


ALLOWED_TRANSITIONS = {
    RunState.ACTIVE: {RunState.PAUSED, RunState.ENDED, RunState.ACTIVE},
    RunState.PAUSED: {RunState.ACTIVE},
    RunState.ENDED: {RunState.ACTIVE},
}


class RunStateMachine:
    """Tracks the current run state; refuses illegal transitions."""

    def __init__(self, events=None):
        self.state = RunState.ACTIVE
        self.events = events

    @property
    def active(self) -> bool:
        return self.state == RunState.ACTIVE

    @property
    def paused(self) -> bool:
        return self.state == RunState.PAUSED

    @property
    def ended(self) -> bool:
        return self.state == RunState.ENDED

    def _transition(self, target: RunState) -> bool:
        if target not in ALLOWED_TRANSITIONS[self.state]:
            DebugLogger.warn(f"Refused transition {self.state.name} -> {target.name}",
                             category="run_state")
            return False

        previous = self.state
        self.state = target
        DebugLogger.state(f"{previous.name} -> {target.name}", category="run_state")
        if self.events is not None:
            self.events.dispatch(RunStateChangedEvent(previous=previous, current=target))
        return True

    # ===========================================================
    # Transitions
    # ===========================================================

    def toggle_pause(self) -> bool:
        if self.state == RunState.ACTIVE:
            return self._transition(RunState.PAUSED)
        if self.state == RunState.PAUSED:
            return self._transition(RunState.ACTIVE)
        return False

    def end(self) -> bool:
        return self._transition(RunState.ENDED)

    def restart(self) -> bool:
        """Begin a new run from ENDED."""
        if self.state != RunState.ENDED:
            return False
        return self._transition(RunState.ACTIVE)

    def hard_reset(self) -> bool:
        """Begin a new run from ACTIVE or ENDED."""
        if self.state == RunState.PAUSED:
            return False
        return self._transition(RunState.ACTIVE)

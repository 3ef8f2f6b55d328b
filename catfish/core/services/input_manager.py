"""
input_manager.py
----------------
Translates raw pygame keyboard state into a normalized InputSnapshot.

Provides:
- Action bindings (several keys per action)
- Edge detection (pressed vs. held)
- An immutable per-tick snapshot consumed by the simulation
"""

from dataclasses import dataclass, field
from typing import FrozenSet

import pygame

from catfish.core.debug.debug_logger import DebugLogger


# ===========================================================
# Action Names
# ===========================================================

class Actions:
    """Action identifiers understood by the simulation."""
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    DASH = "dash"
    PAUSE = "pause"
    RESTART = "restart"
    HARD_RESET = "hard_reset"
    PURCHASE_SPEED = "purchase_speed"
    PURCHASE_LIVES = "purchase_lives"
    PURCHASE_MAGNET = "purchase_magnet"


DEFAULT_KEY_BINDINGS = {
    Actions.MOVE_UP: [pygame.K_UP, pygame.K_w],
    Actions.MOVE_DOWN: [pygame.K_DOWN, pygame.K_s],
    Actions.MOVE_LEFT: [pygame.K_LEFT, pygame.K_a],
    Actions.MOVE_RIGHT: [pygame.K_RIGHT, pygame.K_d],
    Actions.DASH: [pygame.K_SPACE],
    Actions.PAUSE: [pygame.K_p],
    Actions.RESTART: [pygame.K_RETURN, pygame.K_KP_ENTER],
    Actions.HARD_RESET: [pygame.K_r],
    Actions.PURCHASE_SPEED: [pygame.K_1],
    Actions.PURCHASE_LIVES: [pygame.K_2],
    Actions.PURCHASE_MAGNET: [pygame.K_3],
}


# ===========================================================
# Snapshot
# ===========================================================

@dataclass(frozen=True)
class InputSnapshot:
    """
    Input state for a single tick.

    held:    actions whose keys are down right now (level-triggered)
    pressed: actions that went down this tick (rising edge)
    """
    held: FrozenSet[str] = field(default_factory=frozenset)
    pressed: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, held=(), pressed=()):
        """Build a snapshot from plain iterables. Pressed actions count as held."""
        pressed = frozenset(pressed)
        return cls(held=frozenset(held) | pressed, pressed=pressed)

    def is_held(self, action: str) -> bool:
        return action in self.held

    def was_pressed(self, action: str) -> bool:
        return action in self.pressed

    def movement(self):
        """Raw (dx, dy) axes in {-1, 0, 1}; y grows downward."""
        dx = int(self.is_held(Actions.MOVE_RIGHT)) - int(self.is_held(Actions.MOVE_LEFT))
        dy = int(self.is_held(Actions.MOVE_DOWN)) - int(self.is_held(Actions.MOVE_UP))
        return dx, dy


EMPTY_INPUT = InputSnapshot()


# ===========================================================
# Input Manager
# ===========================================================

class InputManager:
    """
    Keyboard-to-action mapper with rising-edge detection.

    Usage:
        snapshot = input_manager.update(pygame.key.get_pressed())
        if snapshot.was_pressed("pause"):
            ...
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: Custom {action: [key codes]} (DEFAULT_KEY_BINDINGS if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._prev_held = frozenset()
        DebugLogger.init_entry("InputManager")

    def update(self, key_state) -> InputSnapshot:
        """
        Sample the key state and produce this tick's snapshot.

        Args:
            key_state: Any object indexable by key code, e.g. the
                sequence returned by pygame.key.get_pressed()
        """
        held = frozenset(
            action for action, keys in self.key_bindings.items()
            if any(key_state[key] for key in keys)
        )
        pressed = held - self._prev_held
        self._prev_held = held

        if pressed:
            DebugLogger.trace(f"Pressed: {sorted(pressed)}", category="input")

        return InputSnapshot(held=held, pressed=pressed)

    def reset(self):
        """Forget held keys so the next sample reports fresh edges."""
        self._prev_held = frozenset()

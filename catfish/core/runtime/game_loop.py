"""
game_loop.py
------------
Defines the GameLoop class that drives the simulation from a pygame window.

Responsibilities
----------------
- Initialize pygame, the window and the foundational services
- Load tuning and saved progress, wire saves to progress events
- Maintain the main timing loop (events -> input -> step -> render)
"""

import random

import pygame

from catfish.core.debug.debug_logger import DebugLogger
from catfish.core.runtime.game_settings import Display, Physics
from catfish.core.services.config_manager import load_tuning
from catfish.core.services.event_manager import EventManager, ProgressChangedEvent
from catfish.core.services.input_manager import InputManager
from catfish.core.services.save_manager import SaveManager
from catfish.graphics.draw_manager import DrawManager
from catfish.systems.progression import ProgressionStore
from catfish.systems.simulation import Simulation, sanitize_dt


class GameLoop:
    """Core runtime controller that manages the game's main loop."""

    def __init__(self, config_path=None, save_path=None, seed=None):
        """
        Args:
            config_path: Optional YAML/JSON tuning override file
            save_path: Optional save file location
            seed: Optional seed for reproducible runs
        """
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.font.init()

        self.config = load_tuning(config_path)
        self.events = EventManager()

        self.save_manager = SaveManager(save_path)
        store = ProgressionStore(self.save_manager.load(), self.events)
        self.events.subscribe(ProgressChangedEvent, self.save_manager.on_progress_changed)

        self.simulation = Simulation(self.config, store, random.Random(seed), self.events)
        DebugLogger.init_entry("Session")
        DebugLogger.init_sub(f"Tuning: {config_path or 'built-in defaults'}")
        DebugLogger.init_sub(f"Save File: {self.save_manager.save_file}")
        DebugLogger.init_sub(f"Seed: {seed if seed is not None else 'random'}")

        self.screen = pygame.display.set_mode((self.config.field_width, self.config.field_height))
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

        self.input_manager = InputManager()
        self.draw_manager = DrawManager(self.screen, self.config)
        self.clock = pygame.time.Clock()
        self.running = True

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        DebugLogger.section("Game Loop")

        while self.running:
            dt = sanitize_dt(self.clock.tick(Display.FPS) / 1000.0, Physics.MAX_STEP)

            self._handle_events()
            if not self.running:
                break

            snapshot = self.input_manager.update(pygame.key.get_pressed())
            self.simulation.step(dt, snapshot)

            self.draw_manager.draw(self.simulation)
            pygame.display.flip()

        self.simulation.store.request_save()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

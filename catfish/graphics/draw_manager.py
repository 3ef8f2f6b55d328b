"""
draw_manager.py
---------------
Renders the simulation with plain pygame shapes and text.

Responsibilities:
- Background grid
- Fish (bobbing), pickups, dogs and the cat
- HUD line and combo bar
- Pause and shop overlays
"""

import math

import pygame

from catfish.core.debug.debug_logger import DebugLogger
from catfish.core.runtime.game_settings import Display
from catfish.entities.entity_types import PickupKind


# ===========================================================
# Palette
# ===========================================================

WHITE = (255, 255, 255)
DIM = (200, 200, 210)
FISH = (235, 235, 245)
GOLDEN_FISH = (255, 235, 140)
DOG = (205, 140, 90)
CAT = (250, 190, 80)
CAT_BLINK = (120, 95, 50)
MAGNET = (220, 70, 70)
SHIELD = (90, 170, 255)
GRID = (40, 46, 66)

UPGRADE_LABELS = {
    "speed": "Speed +25",
    "lives": "Start Lives +1",
    "magnet": "Magnet +0.85s",
}


class DrawManager:
    """Draws one frame of the game onto a pygame surface."""

    def __init__(self, surface, config):
        """
        Args:
            surface: Target pygame.Surface (usually the display)
            config: TuningConfig for field size and combo window
        """
        self.surface = surface
        self.config = config
        self.font = pygame.font.Font(None, 24)
        self.small_font = pygame.font.Font(None, 18)
        self.big_font = pygame.font.Font(None, 56)
        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Frame
    # ===========================================================

    def draw(self, simulation):
        self.surface.fill(Display.BACKGROUND_COLOR)
        self._draw_grid()

        run = simulation.run
        for fish in run.collectibles:
            self._draw_fish(fish)
        for pickup in run.pickups:
            self._draw_pickup(pickup)
        for dog in run.threats:
            pygame.draw.rect(self.surface, DOG, self._rect(dog), border_radius=12)
        self._draw_player(run.player)

        self._draw_hud(simulation.hud())
        self._draw_combo_bar(simulation.combo)

        if simulation.run_state.paused:
            self._draw_paused()
        if simulation.run_state.ended:
            self._draw_shop(simulation)

    # ===========================================================
    # Entities
    # ===========================================================

    @staticmethod
    def _rect(entity, dy=0.0):
        return pygame.Rect(round(entity.x), round(entity.y + dy), round(entity.w), round(entity.h))

    def _draw_grid(self):
        width, height = self.surface.get_size()
        for x in range(0, width + 1, 40):
            pygame.draw.line(self.surface, GRID, (x, 0), (x, height))
        for y in range(0, height + 1, 40):
            pygame.draw.line(self.surface, GRID, (0, y), (width, y))

    def _draw_fish(self, fish):
        rect = self._rect(fish, math.sin(fish.bob) * 3)
        color = GOLDEN_FISH if fish.golden else FISH
        pygame.draw.rect(self.surface, color, rect, border_radius=6)
        tail = [(rect.left, rect.centery), (rect.left - 10, rect.top + 2), (rect.left - 10, rect.bottom - 2)]
        pygame.draw.polygon(self.surface, color, tail)

    def _draw_pickup(self, pickup):
        rect = self._rect(pickup, math.sin(pickup.age * 5) * 2)
        color = MAGNET if pickup.kind is PickupKind.MAGNET else SHIELD
        pygame.draw.rect(self.surface, color, rect, width=3, border_radius=10)
        label = "M" if pickup.kind is PickupKind.MAGNET else "S"
        text = self.font.render(label, True, color)
        self.surface.blit(text, text.get_rect(center=rect.center))

    def _draw_player(self, player):
        timers = player.timers
        blink = timers.invulnerable > 0 and math.floor(timers.invulnerable * 16) % 2 == 0
        rect = self._rect(player)
        pygame.draw.rect(self.surface, CAT_BLINK if blink else CAT, rect, border_radius=14)
        if player.has_shield:
            pygame.draw.rect(self.surface, SHIELD, rect.inflate(8, 8), width=2, border_radius=16)
        if player.magnet_on:
            pygame.draw.circle(self.surface, MAGNET, (rect.left + 8, rect.top + 8), 5)

    # ===========================================================
    # HUD
    # ===========================================================

    def _draw_hud(self, hud):
        line = (f"Score {hud.score}   Lives {hud.lives}   Coins {hud.coins}   "
                f"Best {hud.best_score}   x{hud.multiplier_text}")
        text = self.font.render(line, True, WHITE)
        self.surface.blit(text, (self.surface.get_width() - text.get_width() - 16, 16))

    def _draw_combo_bar(self, combo):
        x, y, w, h = 16, 16, 220, 10
        fill = max(0.0, min(1.0, combo.ignition / self.config.combo_window))
        pygame.draw.rect(self.surface, DIM, (x, y, w, h), width=1, border_radius=6)
        if fill > 0:
            pygame.draw.rect(self.surface, WHITE, (x, y, round(w * fill), h), border_radius=6)
        label = self.small_font.render(f"Combo x{combo.multiplier:.1f}", True, DIM)
        self.surface.blit(label, (x, y + 16))

    # ===========================================================
    # Overlays
    # ===========================================================

    def _shade(self, alpha):
        overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        self.surface.blit(overlay, (0, 0))

    def _center_text(self, text, font, y, color=WHITE):
        rendered = font.render(text, True, color)
        self.surface.blit(rendered, rendered.get_rect(center=(self.surface.get_width() // 2, y)))

    def _draw_paused(self):
        self._shade(90)
        mid = self.surface.get_height() // 2
        self._center_text("Paused", self.big_font, mid - 10)
        self._center_text("Press P to resume", self.font, mid + 25, DIM)

    def _draw_shop(self, simulation):
        self._shade(140)
        hud = simulation.hud()
        stats = simulation.run.stats

        self._center_text("Game Over", self.big_font, 150)
        self._center_text(f"Score: {hud.score}  -  Best: {hud.best_score}", self.font, 190, DIM)
        self._center_text(f"Coins: {hud.coins} (earned this run: +{stats.coins_earned})",
                          self.font, 215, DIM)
        self._center_text("Upgrade Shop (press 1 / 2 / 3)", self.font, 270)

        y = 305
        for index, entry in enumerate(simulation.shop(), start=1):
            label = UPGRADE_LABELS.get(entry.key, entry.key)
            color = WHITE if entry.affordable else DIM
            self._center_text(f"{index}) {label}  (lvl {entry.level})  Cost: {entry.cost}",
                              self.font, y, color)
            y += 30

        self._center_text("Press ENTER to play again - R to hard reset run", self.font, y + 25, DIM)

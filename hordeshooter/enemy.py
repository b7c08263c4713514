"""Enemies that chase the player."""

from __future__ import annotations

import math

import pygame

from .constants import ENEMY_SPEED, PLAYER_HEIGHT, PLAYER_WIDTH
from .gameobject import GameObject
from .player import Player


class Enemy(GameObject):
    """A ship-sized enemy that moves straight at the player."""

    def __init__(self, texture: pygame.Surface | None, x: float, y: float) -> None:
        super().__init__(texture, x, y, PLAYER_WIDTH, PLAYER_HEIGHT)
        self.hp = 20

    def move_toward(self, player: Player) -> None:
        """Take one step of ENEMY_SPEED towards the player."""
        self._advance(player, ENEMY_SPEED)

    def _advance(self, player: Player, speed: float) -> None:
        dx = player.x - self.x
        dy = player.y - self.y
        length = math.hypot(dx, dy)
        if length == 0:
            return
        self.x += dx / length * speed
        self.y += dy / length * speed


class StrongEnemy(Enemy):
    """A faster enemy with three hit points and a health bar."""

    MAX_HP = 3
    BAR_HEIGHT = 4
    BAR_OFFSET = 6

    def __init__(self, texture: pygame.Surface | None, x: float, y: float) -> None:
        super().__init__(texture, x, y)
        self.hp = self.MAX_HP

    def move_toward(self, player: Player) -> None:
        """Take one step of ENEMY_SPEED + 1 towards the player."""
        self._advance(player, ENEMY_SPEED + 1)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the enemy and a red/green health bar above it."""
        super().render(surface)
        bar = pygame.Rect(int(self.x), int(self.y) - self.BAR_OFFSET,
                          self.width, self.BAR_HEIGHT)
        surface.fill((255, 0, 0), bar)
        bar.width = max(0, int(self.width * self.hp / self.MAX_HP))
        if bar.width:
            surface.fill((0, 255, 0), bar)
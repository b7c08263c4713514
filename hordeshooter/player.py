"""The player's ship, steered with WASD and aimed with the mouse."""

from __future__ import annotations

import math
from typing import Mapping

import pygame

from .constants import (
    PLAYER_HEIGHT,
    PLAYER_SPEED,
    PLAYER_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .gameobject import GameObject


class Player(GameObject):
    """The ship controlled by the user; starts centred with 100 HP."""

    def __init__(self, texture: pygame.Surface | None) -> None:
        super().__init__(texture, SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2,
                         PLAYER_WIDTH, PLAYER_HEIGHT)
        self.hp = 100

    def move(self, keys: Mapping[int, bool]) -> None:
        """Move by the pressed WASD keys and keep the ship on screen."""
        if keys[pygame.K_w]:
            self.y -= PLAYER_SPEED
        if keys[pygame.K_s]:
            self.y += PLAYER_SPEED
        if keys[pygame.K_a]:
            self.x -= PLAYER_SPEED
        if keys[pygame.K_d]:
            self.x += PLAYER_SPEED

        self.x = min(max(self.x, 0.0), float(SCREEN_WIDTH - PLAYER_WIDTH))
        self.y = min(max(self.y, 0.0), float(SCREEN_HEIGHT - PLAYER_HEIGHT))

    def aim_angle(self, mouse_x: float, mouse_y: float) -> float:
        """Angle in degrees from the ship's centre to the mouse, y pointing down."""
        centre_x = self.x + self.width // 2
        centre_y = self.y + self.height // 2
        return math.degrees(math.atan2(mouse_y - centre_y, mouse_x - centre_x))

    def render(self, surface: pygame.Surface, mouse_x: float = 0,
               mouse_y: float = 0) -> None:
        """Draw the ship turned towards the mouse."""
        self._render_rotated(surface, self.aim_angle(mouse_x, mouse_y))
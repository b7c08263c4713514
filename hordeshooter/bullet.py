"""Projectiles fired by the player."""

from __future__ import annotations

import math

import pygame

from .constants import BULLET_HEIGHT, BULLET_SPEED, BULLET_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH
from .gameobject import GameObject


class Bullet(GameObject):
    """A bullet flying in a straight line from a start point towards a target."""

    def __init__(self, texture: pygame.Surface | None, sx: float, sy: float,
                 tx: float, ty: float) -> None:
        super().__init__(texture, sx - BULLET_WIDTH // 2, sy - BULLET_HEIGHT // 2,
                         BULLET_WIDTH, BULLET_HEIGHT)
        length = math.hypot(tx - sx, ty - sy)
        if length == 0:
            raise ValueError("bullet target coincides with its start point")
        self.dx = (tx - sx) / length * BULLET_SPEED
        self.dy = (ty - sy) / length * BULLET_SPEED
        self.angle = math.degrees(math.atan2(ty - sy, tx - sx))

    def update(self) -> None:
        """Advance one frame."""
        self.x += self.dx
        self.y += self.dy

    def off_screen(self) -> bool:
        """True once the bullet is more than its own size beyond the screen."""
        return (self.x < -self.width or self.x > SCREEN_WIDTH + self.width
                or self.y < -self.height or self.y > SCREEN_HEIGHT + self.height)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the bullet turned along its flight direction."""
        self._render_rotated(surface, self.angle)
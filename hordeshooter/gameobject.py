"""Base class for everything drawn on the playfield."""

from __future__ import annotations

import pygame


class GameObject:
    """A textured rectangle with a floating-point position."""

    def __init__(self, texture: pygame.Surface | None, x: float, y: float,
                 width: int, height: int) -> None:
        self.texture = texture
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height

    def hitbox(self) -> pygame.Rect:
        """Return the integer rectangle used for collisions."""
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the texture at the object's position."""
        if self.texture is not None:
            surface.blit(self.texture, (int(self.x), int(self.y)))

    def _render_rotated(self, surface: pygame.Surface, angle: float) -> None:
        """Draw the texture turned clockwise by ``angle`` degrees about its centre."""
        if self.texture is None:
            return
        rotated = pygame.transform.rotate(self.texture, -angle)
        centre = (int(self.x) + self.width // 2, int(self.y) + self.height // 2)
        surface.blit(rotated, rotated.get_rect(center=centre))
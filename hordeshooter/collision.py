"""Rectangle overlap test between game objects."""

from __future__ import annotations

from .gameobject import GameObject


def check_collision(a: GameObject, b: GameObject) -> bool:
    """Return True when the hitboxes of ``a`` and ``b`` overlap."""
    return bool(a.hitbox().colliderect(b.hitbox()))
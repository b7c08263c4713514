import math

import pygame
import pytest

from hordeshooter.constants import ENEMY_SPEED, PLAYER_HEIGHT, PLAYER_WIDTH
from hordeshooter.enemy import Enemy, StrongEnemy
from hordeshooter.player import Player


def test_enemy_defaults():
    enemy = Enemy(None, 10, 20)
    assert enemy.hp == 20
    assert enemy.hitbox().size == (PLAYER_WIDTH, PLAYER_HEIGHT)
    assert (enemy.x, enemy.y) == (10, 20)


@pytest.mark.parametrize("start", [(0, 0), (799, 0), (0, 599), (123.5, 456.25)])
def test_enemy_steps_enemy_speed_towards_player(start):
    player = Player(None)
    enemy = Enemy(None, *start)
    before = math.hypot(player.x - enemy.x, player.y - enemy.y)
    x0, y0 = enemy.x, enemy.y
    enemy.move_toward(player)
    assert math.hypot(enemy.x - x0, enemy.y - y0) == pytest.approx(ENEMY_SPEED)
    after = math.hypot(player.x - enemy.x, player.y - enemy.y)
    assert after == pytest.approx(before - ENEMY_SPEED)


def test_enemy_on_player_stays_put():
    player = Player(None)
    enemy = Enemy(None, player.x, player.y)
    enemy.move_toward(player)
    assert (enemy.x, enemy.y) == (player.x, player.y)


def test_strong_enemy_defaults():
    enemy = StrongEnemy(None, 5, 6)
    assert enemy.hp == 3
    assert enemy.hitbox() == pygame.Rect(5, 6, PLAYER_WIDTH, PLAYER_HEIGHT)


def test_strong_enemy_is_faster():
    player = Player(None)
    enemy = StrongEnemy(None, 0, 0)
    enemy.move_toward(player)
    assert math.hypot(enemy.x, enemy.y) == pytest.approx(ENEMY_SPEED + 1)


def _render(hp):
    surface = pygame.Surface((200, 200))
    surface.fill((0, 0, 0))
    texture = pygame.Surface((PLAYER_WIDTH, PLAYER_HEIGHT))
    texture.fill((0, 0, 255))
    enemy = StrongEnemy(texture, 50, 50)
    enemy.hp = hp
    enemy.render(surface)
    return surface, enemy


def test_strong_enemy_full_health_bar_is_green():
    surface, enemy = _render(3)
    bar_y = int(enemy.y) - 6
    assert surface.get_at((50, bar_y))[:3] == (0, 255, 0)
    assert surface.get_at((50 + PLAYER_WIDTH - 1, bar_y))[:3] == (0, 255, 0)
    assert surface.get_at((60, 60))[:3] == (0, 0, 255)


def test_strong_enemy_empty_health_bar_is_red():
    surface, enemy = _render(0)
    bar_y = int(enemy.y) - 6
    assert surface.get_at((50, bar_y))[:3] == (255, 0, 0)
    assert surface.get_at((50 + PLAYER_WIDTH - 1, bar_y))[:3] == (255, 0, 0)


def test_strong_enemy_partial_health_bar():
    surface, enemy = _render(1)
    bar_y = int(enemy.y) - 6
    assert surface.get_at((50, bar_y))[:3] == (0, 255, 0)
    assert surface.get_at((50 + PLAYER_WIDTH - 1, bar_y))[:3] == (255, 0, 0)
"""Game session rules and the pygame main loop."""

from __future__ import annotations

import argparse
import math
import os
import random
import sys
from dataclasses import dataclass
from typing import Mapping, Sequence

import pygame

from .bullet import Bullet
from .collision import check_collision
from .constants import (
    BULLET_HEIGHT,
    BULLET_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .enemy import Enemy
from .highscore import DEFAULT_PATH, read_high_score, write_high_score
from .player import Player

MAX_AMMO = 10
RELOAD_TIME = 2000
SPAWN_INTERVAL = 1000
CONTACT_DAMAGE = 10
KILL_SCORE = 10

PLAYER_IMAGE = "player.png"
ENEMY_IMAGE = "enemy.png"
BULLET_IMAGE = "bullet.png"
BACKGROUND_IMAGE = "background.jpg"
SHOOT_SOUND = "shoot.mp3"
HIT_SOUND = "hit.mp3"
BACKGROUND_MUSIC = "music.mp3"
FONT_FILE = "arial.ttf"
FONT_SIZE = 24

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
FRAME_DELAY_MS = 16


@dataclass
class StepEvents:
    """What happened during one frame."""

    hits: int = 0
    game_over: bool = False


class GameSession:
    """One round of play: the player, enemies, bullets, ammo and score."""

    def __init__(self, player_texture: pygame.Surface | None,
                 enemy_texture: pygame.Surface | None,
                 bullet_texture: pygame.Surface | None,
                 now: int = 0, rng: random.Random | None = None) -> None:
        self.player = Player(player_texture)
        self.enemy_texture = enemy_texture
        self.bullet_texture = bullet_texture
        self.enemies: list[Enemy] = []
        self.bullets: list[Bullet] = []
        self.last_spawn = now
        self.score = 0
        self.ammo = MAX_AMMO
        self.can_shoot = True
        self.reloading = False
        self.reload_start = 0
        self.rng = rng if rng is not None else random.Random()

    def shoot(self, mouse_x: float, mouse_y: float) -> bool:
        """Fire a bullet from the ship's nose towards the mouse; True if one was fired."""
        if self.ammo <= 0 or not self.can_shoot:
            return False
        centre_x = self.player.x + PLAYER_WIDTH // 2
        centre_y = self.player.y + PLAYER_HEIGHT // 2
        angle = math.atan2(mouse_y - centre_y, mouse_x - centre_x)
        spawn_x = centre_x + math.cos(angle) * (PLAYER_HEIGHT // 2)
        spawn_y = centre_y + math.sin(angle) * (PLAYER_HEIGHT // 2)
        try:
            bullet = Bullet(self.bullet_texture, spawn_x, spawn_y, mouse_x, mouse_y)
        except ValueError:
            return False
        self.bullets.append(bullet)
        self.ammo -= 1
        if self.ammo == 0:
            self.can_shoot = False
        return True

    def start_reload(self, now: int) -> bool:
        """Begin reloading unless already reloading or full; True if it started."""
        if self.reloading or self.ammo >= MAX_AMMO:
            return False
        self.reloading = True
        self.reload_start = now
        self.can_shoot = False
        return True

    def step(self, keys: Mapping[int, bool], now: int) -> StepEvents:
        """Advance the world by one frame at time ``now`` in milliseconds."""
        events = StepEvents()
        self.player.move(keys)

        if self.reloading and now - self.reload_start >= RELOAD_TIME:
            self.ammo = MAX_AMMO
            self.can_shoot = True
            self.reloading = False

        for bullet in self.bullets:
            bullet.update()
        self.bullets = [b for b in self.bullets if not b.off_screen()]

        for enemy in self.enemies:
            enemy.move_toward(self.player)

        survivors = []
        for enemy in self.enemies:
            if not check_collision(self.player, enemy):
                survivors.append(enemy)
                continue
            self.player.hp -= CONTACT_DAMAGE
            events.hits += 1
            if self.player.hp <= 0:
                events.game_over = True
        self.enemies = survivors
        if events.game_over:
            return events

        remaining = []
        for bullet in self.bullets:
            target = next((e for e in self.enemies if check_collision(bullet, e)), None)
            if target is None:
                remaining.append(bullet)
                continue
            self.enemies.remove(target)
            self.score += KILL_SCORE
            events.hits += 1
        self.bullets = remaining

        if now - self.last_spawn > SPAWN_INTERVAL:
            self.enemies.append(Enemy(self.enemy_texture,
                                      self.rng.randrange(SCREEN_WIDTH),
                                      self.rng.randrange(SCREEN_HEIGHT)))
            self.last_spawn = now
        return events

    def status_text(self) -> str:
        """The HP and score line shown in the corner."""
        return f"HP: {self.player.hp}  Score: {self.score}"

    def ammo_text(self) -> str:
        """The ammo counter, or a reloading notice."""
        return "Reloading..." if self.reloading else f"Ammo: {self.ammo}"


def load_texture(path: str | os.PathLike[str]) -> pygame.Surface | None:
    """Load an image, or return None when it cannot be read."""
    try:
        surface = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError):
        return None
    if pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


def _scaled(texture: pygame.Surface | None, size: tuple[int, int]) -> pygame.Surface | None:
    return None if texture is None else pygame.transform.scale(texture, size)


def _load_sound(path: str) -> pygame.mixer.Sound | None:
    if not pygame.mixer.get_init():
        return None
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError):
        return None


def _play(sound: pygame.mixer.Sound | None, times: int = 1) -> None:
    if sound is not None:
        for _ in range(times):
            sound.play()


@dataclass
class _Assets:
    background: pygame.Surface | None
    player: pygame.Surface | None
    enemy: pygame.Surface | None
    bullet: pygame.Surface | None
    shoot: pygame.mixer.Sound | None
    hit: pygame.mixer.Sound | None
    music: str
    font: pygame.font.Font


def _draw_background(screen: pygame.Surface, assets: _Assets) -> None:
    screen.fill(BLACK)
    if assets.background is not None:
        screen.blit(assets.background, (0, 0))


def _text(assets: _Assets, text: str) -> pygame.Surface:
    return assets.font.render(text, False, WHITE)


def _start_screen(screen: pygame.Surface, assets: _Assets) -> bool:
    """Wait for Enter; False if the window was closed."""
    while True:
        _draw_background(screen, assets)
        label = _text(assets, "Press Enter to Start")
        screen.blit(label, ((SCREEN_WIDTH - label.get_width()) // 2,
                            (SCREEN_HEIGHT - label.get_height()) // 2))
        pygame.display.flip()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                return True
        pygame.time.delay(100)


def _draw_frame(screen: pygame.Surface, assets: _Assets, session: GameSession,
                mouse: tuple[int, int]) -> None:
    _draw_background(screen, assets)
    session.player.render(screen, *mouse)
    for enemy in session.enemies:
        enemy.render(screen)
    for bullet in session.bullets:
        bullet.render(screen)
    screen.blit(_text(assets, session.status_text()), (10, 10))
    ammo = _text(assets, session.ammo_text())
    screen.blit(ammo, (SCREEN_WIDTH - ammo.get_width() - 20,
                       SCREEN_HEIGHT - ammo.get_height() - 20))
    pygame.display.flip()


def _play_round(screen: pygame.Surface, assets: _Assets, session: GameSession) -> bool:
    """Run frames until game over (True) or the window is closed (False)."""
    while True:
        mouse = pygame.mouse.get_pos()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if session.shoot(*mouse):
                    _play(assets.shoot)
            if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                session.start_reload(pygame.time.get_ticks())

        events = session.step(pygame.key.get_pressed(), pygame.time.get_ticks())
        _play(assets.hit, events.hits)
        if events.game_over:
            return True
        _draw_frame(screen, assets, session, mouse)
        pygame.time.delay(FRAME_DELAY_MS)


def _game_over_screen(screen: pygame.Surface, assets: _Assets, high_score: int) -> bool:
    """Show the result; True to restart, False if the window was closed."""
    _draw_background(screen, assets)
    over = _text(assets, "GAME OVER")
    restart = _text(assets, "Restart")
    best = _text(assets, f"High Score: {high_score}")
    screen.blit(over, (SCREEN_WIDTH // 2 - over.get_width() // 2,
                       SCREEN_HEIGHT // 2 - over.get_height() // 2 - 30))
    screen.blit(restart, (SCREEN_WIDTH // 2 - restart.get_width() // 2,
                          SCREEN_HEIGHT // 2 + 10))
    screen.blit(best, (SCREEN_WIDTH // 2 - best.get_width() // 2,
                       SCREEN_HEIGHT // 2 + 50))
    pygame.display.flip()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                return True
        pygame.time.delay(FRAME_DELAY_MS)


def _start_music(path: str) -> None:
    if not pygame.mixer.get_init():
        return
    try:
        pygame.mixer.music.load(path)
        pygame.mixer.music.play(-1)
    except (pygame.error, OSError):
        pass


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hordeshooter",
                                     description="Shoot the oncoming horde.")
    parser.add_argument("--assets", default="assets",
                        help="directory holding images, sounds and the font")
    parser.add_argument("--highscore", default=DEFAULT_PATH,
                        help="file that stores the best score")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    args = _parse_args(argv)
    asset = lambda name: os.path.join(args.assets, name)  # noqa: E731

    pygame.init()
    try:
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error:
            pass
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Game")

        try:
            font = pygame.font.Font(asset(FONT_FILE), FONT_SIZE)
        except (pygame.error, OSError) as exc:
            print(f"Cannot open font: {exc}", file=sys.stderr)
            return 1

        assets = _Assets(
            background=_scaled(load_texture(asset(BACKGROUND_IMAGE)),
                               (SCREEN_WIDTH, SCREEN_HEIGHT)),
            player=_scaled(load_texture(asset(PLAYER_IMAGE)),
                           (PLAYER_WIDTH, PLAYER_HEIGHT)),
            enemy=_scaled(load_texture(asset(ENEMY_IMAGE)),
                          (PLAYER_WIDTH, PLAYER_HEIGHT)),
            bullet=_scaled(load_texture(asset(BULLET_IMAGE)),
                           (BULLET_WIDTH, BULLET_HEIGHT)),
            shoot=_load_sound(asset(SHOOT_SOUND)),
            hit=_load_sound(asset(HIT_SOUND)),
            music=asset(BACKGROUND_MUSIC),
            font=font,
        )

        rng = random.Random()
        while True:
            if not _start_screen(screen, assets):
                return 0
            high_score = read_high_score(args.highscore)
            session = GameSession(assets.player, assets.enemy, assets.bullet,
                                  pygame.time.get_ticks(), rng)
            _start_music(assets.music)
            if not _play_round(screen, assets, session):
                return 0
            if session.score > high_score:
                high_score = session.score
                write_high_score(high_score, args.highscore)
            if not _game_over_screen(screen, assets, high_score):
                return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
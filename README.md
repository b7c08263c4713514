# hordeshooter

A small top-down arcade shooter built on pygame. You control a ship that starts
in the middle of an 800x600 window while an enemy appears at a random spot every
second and heads straight for you. Aim with the mouse, shoot them down, and keep
your hit points above zero for as long as you can.

## Installing

```
pip install .
```

This installs the game along with its one dependency, `pygame`.

## Playing

```
hordeshooter
```

Options:

| Option              | Default          | Meaning                                      |
|---------------------|------------------|----------------------------------------------|
| `--assets DIR`      | `assets`         | Directory holding images, sounds and the font |
| `--highscore FILE`  | `highscore.txt`  | File that stores the best score              |

The game opens on a start screen. Press **Enter** to begin.

| Control            | Action                                  |
|--------------------|-----------------------------------------|
| `W` `A` `S` `D`    | Move the ship (it stays on screen)      |
| Mouse              | Aim (the ship turns toward the pointer) |
| Left mouse button  | Fire                                    |
| `R`                | Reload (takes two seconds)              |

You begin with 100 HP and a magazine of 10 rounds. When the magazine is empty you
cannot fire until you reload, and you cannot fire while reloading. An enemy that
touches you costs 10 HP and is destroyed. An enemy hit by a bullet is destroyed,
along with the bullet, and gives you 10 points.

When your HP reaches zero the round ends. If your score beats the stored one it is
written to the high-score file. The game-over screen shows the high score; a left
click returns to the start screen for a new round. Closing the window at any point
quits the game.

### Assets

The assets directory is expected to contain `player.png`, `enemy.png`,
`bullet.png`, `background.jpg`, `shoot.mp3`, `hit.mp3`, `music.mp3` and
`arial.ttf`. Images are scaled to their sprite sizes. The font is required: if it
cannot be opened the game prints an error and exits with status 1. Missing images
are simply not drawn, and missing sounds or music are not played.

## Using the pieces

The game rules do not need a window, so a round can be driven from code. `step`
reads the pressed keys through indexing by pygame key codes, so any mapping that
answers `False` for unpressed keys will do:

```python
import random
from collections import defaultdict

from hordeshooter.game import GameSession

session = GameSession(None, None, None, now=0, rng=random.Random(1))
session.shoot(600, 300)
events = session.step(keys=defaultdict(bool), now=16)
print(events.hits, events.game_over)  # 0 False
print(session.status_text())          # "HP: 100  Score: 0"
print(session.ammo_text())            # "Ammo: 9"
```

`GameSession` holds `player`, `enemies`, `bullets`, `score`, `ammo` and
`reloading`; `shoot` and `start_reload` return whether they took effect, and
`step` returns a `StepEvents` with the number of hits and whether the game is over.

Other modules:

- `hordeshooter.player.Player`: the ship; `move`, `aim_angle`, `render`
- `hordeshooter.enemy.Enemy`: an enemy that moves toward the player
- `hordeshooter.enemy.StrongEnemy`: a faster enemy with 3 HP and a health bar
  (available to code; the game itself spawns only `Enemy`)
- `hordeshooter.bullet.Bullet`: a straight-line projectile; `update`, `off_screen`,
  `render`
- `hordeshooter.gameobject.GameObject`: the base class; `hitbox`, `render`
- `hordeshooter.collision.check_collision`: a hitbox overlap test
- `hordeshooter.highscore`: `read_high_score`, `write_high_score`,
  `create_high_score_file_if_not_exist`
- `hordeshooter.constants`: screen size, speeds and sprite sizes
- `hordeshooter.game.load_texture`: load an image, or `None` if it cannot be read

## Running the tests

```
pip install ".[test]"
pytest
```
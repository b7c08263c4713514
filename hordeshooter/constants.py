"""Screen size, speeds and sprite sizes shared by the game objects."""

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
PLAYER_SPEED = 5
BULLET_SPEED = 6
ENEMY_SPEED = 5
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 50
BULLET_WIDTH = 22
BULLET_HEIGHT = 22
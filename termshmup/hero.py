"""The player's hero: walking, aiming and shooting."""

from enum import IntEnum

from termshmup.movement import move_entity
from termshmup.state import CAM_TRESH, MAX_PROJECTILES
from termshmup.tiles import Move


class Key(IntEnum):
    """Key codes as delivered by the terminal's getch."""

    DOWN = 258
    UP = 259
    LEFT = 260
    RIGHT = 261
    ESCAPE = 27
    SPACE = 32


_WALK = {"w": Move.UP, "s": Move.DOWN, "a": Move.LEFT, "d": Move.RIGHT}
_AIM = {Key.UP: Move.UP, Key.DOWN: Move.DOWN, Key.LEFT: Move.LEFT, Key.RIGHT: Move.RIGHT}
_SHOT = {Move.UP: (0, -1), Move.DOWN: (0, 1), Move.LEFT: (-1, 0), Move.RIGHT: (1, 0)}


def _as_char(key):
    if isinstance(key, int):
        return chr(key) if 0 <= key < 256 else None
    return key


def move_hero(game, key, max_y, max_x):
    """Walk the hero on w/a/s/d and scroll the camera near the screen edges."""
    move = _WALK.get(_as_char(key))
    if move is not None:
        move_entity(game, 0, move)

    hero, camera = game.entities[0], game.camera
    screen_x = hero.x - camera.x
    screen_y = hero.y - camera.y
    if screen_y <= CAM_TRESH and camera.y > 0:
        camera.y -= 1
    elif screen_y >= max_y - CAM_TRESH and camera.y < game.board_height - max_y:
        camera.y += 1
    if screen_x <= CAM_TRESH and camera.x > 0:
        camera.x -= 1
    elif screen_x >= max_x - CAM_TRESH and camera.x < game.board_width - max_x:
        camera.x += 1


def hero_attack_dir(hero, key):
    """Aim the hero with an arrow key; other keys leave the aim alone."""
    direction = _AIM.get(key)
    if direction is not None:
        hero.dir = direction


def hero_attack(hero):
    """Fire one projectile in the aimed direction if any are left."""
    if hero.active_proj_qty == MAX_PROJECTILES:
        return
    slot = next((p for p in hero.projectiles if not p.active), None)
    if slot is None:
        return
    x_dir, y_dir = _SHOT[Move(hero.dir)]
    slot.fire(hero.x, hero.y, x_dir, y_dir)
    hero.active_proj_qty += 1
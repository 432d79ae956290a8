"""Board tile characters and their classification."""

from enum import IntEnum

HERO = "+"
DEAD = "|"
COLLEC = "{"
ENEMY_PROJ = "Y"
HERO_PROJ = "Z"
ENEMY1 = "B"
ENEMY2 = "_"
ENEMY3 = "*"
BOSS_LEFT = "("
BOSS_RIGHT = "~"
WALLS = frozenset('!"#,-;<=')
EMPTY = ")"
GROUND = " "

MOBS = frozenset((ENEMY1, ENEMY2, ENEMY3))
ENEMIES = MOBS | {BOSS_LEFT, BOSS_RIGHT}


class Move(IntEnum):
    """A step direction on the board."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def is_enemy(tile):
    """True for any enemy tile, the boss's two halves included."""
    return tile in ENEMIES


def is_mob(tile):
    """True for the three ordinary enemy kinds."""
    return tile in MOBS


def is_wall(tile):
    """True for wall tiles."""
    return tile in WALLS


def is_projectile_blocker(tile):
    """True for tiles that stop a projectile without damaging anything."""
    return tile in WALLS or tile == DEAD or tile == COLLEC
"""The per-frame game update: enemies, projectiles, input and timers."""

import random

from termshmup.enemy import respawn_enemy, update_enemy_behaviour
from termshmup.hero import Key, hero_attack, hero_attack_dir, move_hero
from termshmup.projectile import update_projectiles
from termshmup.state import (
    HERO_MAX_HP,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    QuitReason,
    respawn_collectibles,
)
from termshmup.tiles import is_enemy

FRAMES_PER_SECOND = 60
HEAL_COST = 750

_WALK_KEYS = frozenset("wsad")
_AIM_KEYS = frozenset((Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT))


def _as_char(key):
    if isinstance(key, str):
        return key
    if isinstance(key, int) and 0 <= key < 256:
        return chr(key)
    return None


def check_enemies_damage(game, on_hero_hit=None):
    """Hurt the hero once if an enemy touches it on any side."""
    hero = game.entities[0]
    hx, hy = hero.x, hero.y
    neighbours = (
        (hx + 1, hy, hx + 1 < game.board_width),
        (hx - 1, hy, hx - 1 >= 0),
        (hx, hy + 1, hy + 1 < game.board_height),
        (hx, hy - 1, hy - 1 >= 0),
    )
    if not any(ok and is_enemy(game.tile(x, y)) for x, y, ok in neighbours):
        return
    if on_hero_hit is not None:
        on_hero_hit(game)
    hero.hp -= 1
    if hero.hp <= 0:
        hero.alive = False


class Engine:
    """Runs the game one frame at a time, counting frames and seconds."""

    def __init__(
        self,
        game,
        on_hero_hit=None,
        screen_size=(SCREEN_HEIGHT, SCREEN_WIDTH),
        rng=None,
    ):
        self.game = game
        self.on_hero_hit = on_hero_hit
        self.screen_size = screen_size
        self.rng = rng if rng is not None else random.Random()
        self.frame = 0
        self.seconds = 0

    def _screen(self):
        size = self.screen_size
        return size() if callable(size) else size

    def handle_input(self, key):
        """Act on a key press; return True when the player asks to quit."""
        hero = self.game.entities[0]
        char = _as_char(key)
        if hero.hp and char in _WALK_KEYS:
            max_y, max_x = self._screen()
            move_hero(self.game, char, max_y, max_x)
        elif hero.hp and key in _AIM_KEYS:
            hero_attack_dir(hero, key)
        elif hero.hp and char == " ":
            hero_attack(hero)
        elif char == chr(Key.ESCAPE):
            return True
        return False

    def update(self, key):
        """Advance one frame; return a QuitReason when the loop should stop."""
        game = self.game
        self.frame += 1
        update_enemy_behaviour(game, self.frame, self.rng)
        update_projectiles(game, self.frame, self.on_hero_hit)
        respawn_collectibles(game, self.seconds)
        respawn_enemy(game, self.seconds)

        hero = game.entities[0]
        if hero.hp == 0:
            return QuitReason.HERO_DEATH
        if self.handle_input(key):
            return QuitReason.USER_QUIT

        if self.frame == FRAMES_PER_SECOND:
            self.frame = 0
            self.seconds += 1
            while game.score_calc >= HEAL_COST:
                game.score_calc -= HEAL_COST
                if hero.hp < HERO_MAX_HP:
                    hero.hp += 1
            check_enemies_damage(game, self.on_hero_hit)
        return None
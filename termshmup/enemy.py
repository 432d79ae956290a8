"""Enemy behaviour: respawning, shooting patterns and chasing the hero."""

import random
from dataclasses import dataclass

from termshmup.movement import move_entity
from termshmup.state import (
    BOSS_HP,
    ENEMY_SHOOT_RANGE,
    MAX_ENTITY,
    MOB_HP,
)
from termshmup.tiles import (
    BOSS_LEFT,
    BOSS_RIGHT,
    ENEMY1,
    ENEMY2,
    ENEMY3,
    Move,
    is_enemy,
)

BOSS_RESPAWN = 60
MOB_RESPAWN = 20
CHASE_RANGE = 15

# Order in which the turret enemy fills its projectile slots.
_SPREAD = ((-1, 0), (1, 0), (0, -1), (0, 1), (-1, -1), (1, -1), (-1, 1), (1, 1))
# Directions of the boss's rotating radial volley.
_RADIAL = ((0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1), (1, 0), (1, 1))
_LINE_OFFSETS = (-3, -2, -1, 1, 2, 3)

_default_rng = random.Random()


@dataclass
class _BossVolley:
    """Which volley the boss fires next."""

    step: int = 0
    radial: bool = True


_volley = _BossVolley()


def _sign(value):
    return (value > 0) - (value < 0)


def _next_slot(enemy):
    """First idle projectile, or the last slot when every one is in flight."""
    return next((p for p in enemy.projectiles if not p.active), enemy.projectiles[-1])


def _out_of_range(dx, dy):
    return dx * dx + dy * dy > ENEMY_SHOOT_RANGE * ENEMY_SHOOT_RANGE


def respawn_enemy(game, seconds):
    """Revive the boss every minute and ordinary enemies every 20 seconds."""
    for index, entity in enumerate(game.entities[1:MAX_ENTITY], start=1):
        if entity.alive:
            continue
        if index == 1:
            if seconds % BOSS_RESPAWN:
                continue
            game.set_tile(entity.x - 1, entity.y, BOSS_LEFT)
            game.set_tile(entity.x, entity.y, BOSS_RIGHT)
            entity.alive = True
            entity.hp = BOSS_HP
        elif is_enemy(entity.type) and entity.type != BOSS_LEFT:
            if seconds % MOB_RESPAWN:
                continue
            entity.alive = True
            entity.hp = MOB_HP
            game.set_tile(entity.x, entity.y, entity.type)


def update_enemy1(enemy, frame):
    """Turret: fire in all eight directions once the previous burst is gone."""
    if frame == 40:
        return
    if any(p.active for p in enemy.projectiles):
        return
    for projectile, (x_dir, y_dir) in zip(enemy.projectiles, _SPREAD):
        projectile.fire(enemy.x, enemy.y, x_dir, y_dir)


def _approach(enemy, hero, frame, rng):
    """Set the enemy's step towards the hero for this frame."""
    dx, dy = hero.x - enemy.x, hero.y - enemy.y
    enemy.x_dir = enemy.y_dir = 0
    if frame % 20 or _out_of_range(dx, dy):
        return

    max2 = CHASE_RANGE * CHASE_RANGE
    if dx * dx + dy * dy > max2:
        if abs(dx) >= abs(dy):
            enemy.x_dir = _sign(dx)
        else:
            enemy.y_dir = _sign(dy)
    elif abs(dx) > abs(dy):
        enemy.x_dir = _sign(dx)
    elif abs(dy) > abs(dx):
        enemy.y_dir = _sign(dy)
    else:
        for _ in range(6):
            x_dir = rng.randrange(3) - 1
            y_dir = rng.randrange(3) - 1
            if not x_dir and not y_dir:
                continue
            ndx = hero.x - (enemy.x + x_dir)
            ndy = hero.y - (enemy.y + y_dir)
            if ndx * ndx + ndy * ndy <= max2:
                enemy.x_dir, enemy.y_dir = x_dir, y_dir
                break


def update_chaser(enemy, hero, frame, rng=None):
    """Diagonal shooter that closes in on the hero."""
    rng = rng if rng is not None else _default_rng
    dx, dy = hero.x - enemy.x, hero.y - enemy.y
    slot = _next_slot(enemy)
    if frame == 10:
        if dx > dy and hero.y < enemy.y:
            if hero.x > enemy.x:
                slot.fire(enemy.x, enemy.y, 1, -1)
            elif hero.x < enemy.x:
                slot.fire(enemy.x, enemy.y, -1, -1)
        elif dx < dy and hero.y > enemy.y:
            if hero.x > enemy.x:
                slot.fire(enemy.x, enemy.y, 1, 1)
            elif hero.x < enemy.x:
                slot.fire(enemy.x, enemy.y, -1, 1)
    _approach(enemy, hero, frame, rng)


def update_gunner(enemy, hero, frame, rng=None):
    """Straight shooter that fires along the hero's main axis and closes in."""
    rng = rng if rng is not None else _default_rng
    dx, dy = hero.x - enemy.x, hero.y - enemy.y
    slot = _next_slot(enemy)
    if frame == 50:
        if abs(dx) >= abs(dy):
            if dx:
                slot.fire(enemy.x, enemy.y, _sign(dx), 0)
        elif dy:
            slot.fire(enemy.x, enemy.y, 0, _sign(dy))
    _approach(enemy, hero, frame, rng)


def update_boss(game, frame):
    """Alternate a rotating radial volley with a six-wide line at the hero."""
    boss, hero = game.entities[1], game.entities[0]
    if any(p.active for p in boss.projectiles):
        return

    if _volley.radial:
        for k, projectile in enumerate(boss.projectiles):
            x_dir, y_dir = _RADIAL[(_volley.step + k) & 7]
            projectile.fire(boss.x + x_dir, boss.y + y_dir, x_dir, y_dir)
        _volley.step = (_volley.step + 1) & 7
        _volley.radial = False
        return

    dx, dy = hero.x - boss.x, hero.y - boss.y
    if dx * dx >= dy * dy:
        dir_x = 1 if dx >= 0 else -1
        for projectile, offset in zip(boss.projectiles, _LINE_OFFSETS):
            projectile.fire(boss.x, boss.y + offset, dir_x, 0)
    else:
        dir_y = 1 if dy >= 0 else -1
        for projectile, offset in zip(boss.projectiles, _LINE_OFFSETS):
            projectile.fire(boss.x + offset, boss.y, 0, dir_y)
    _volley.radial = True


def update_enemy_behaviour(game, frame, rng=None):
    """Run every enemy's behaviour for this frame, then move or mark it."""
    rng = rng if rng is not None else _default_rng
    hero = game.entities[0]
    for which, entity in enumerate(game.entities[1 : game.ent_qty], start=1):
        if entity.alive:
            if entity.type == BOSS_LEFT:
                update_boss(game, frame)
            elif entity.type == ENEMY1:
                update_enemy1(entity, frame)
            elif entity.type == ENEMY2:
                update_chaser(entity, hero, frame, rng)
            elif entity.type == ENEMY3:
                update_gunner(entity, hero, frame, rng)
        dead = not entity.alive
        if entity.y_dir < 0 or dead:
            move_entity(game, which, Move.UP)
        elif entity.y_dir > 0:
            move_entity(game, which, Move.DOWN)
        if entity.x_dir > 0 or dead:
            move_entity(game, which, Move.RIGHT)
        elif entity.x_dir < 0:
            move_entity(game, which, Move.LEFT)
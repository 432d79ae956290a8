"""Projectile flight, collisions and the damage they deal."""

from termshmup.state import Hit
from termshmup.tiles import (
    BOSS_LEFT,
    BOSS_RIGHT,
    ENEMY_PROJ,
    GROUND,
    HERO,
    HERO_PROJ,
    is_enemy,
    is_projectile_blocker,
)

BOSS_KILL_REWARD = 500
ENEMY_KILL_REWARD = 250


def _leave(game, proj):
    """Clear the projectile's current cell unless a character stands there."""
    tile = game.tile(proj.x, proj.y)
    if tile != HERO and not is_enemy(tile):
        game.set_tile(proj.x, proj.y, GROUND)


def _retire(game, owner, proj):
    _leave(game, proj)
    proj.active = False
    game.entities[owner].active_proj_qty -= 1


def update_projectile(game, owner, proj, frame):
    """Advance one projectile of entity slot `owner` and report what it met."""
    if owner != 0 and frame % 2:
        return Hit.TIME_NO_SHOOT

    nx, ny = proj.x + proj.x_dir, proj.y + proj.y_dir
    if not (0 <= ny < game.board_height and 0 <= nx < game.board_width):
        _retire(game, owner, proj)
        return Hit.OUTOFBOUND

    target = game.tile(nx, ny)
    if target in (HERO_PROJ, ENEMY_PROJ):
        for entity in game.entities[: game.ent_qty]:
            for other in entity.projectiles:
                if other.active and other.x == nx and other.y == ny:
                    other.active = False
                    entity.active_proj_qty -= 1
        game.set_tile(nx, ny, GROUND)
        _retire(game, owner, proj)
        return Hit.NO_HIT

    if is_enemy(target):
        _retire(game, owner, proj)
        if owner != 0:
            return Hit.NO_HIT
        proj.x, proj.y = nx, ny
        if target in (BOSS_LEFT, BOSS_RIGHT):
            return Hit.BOSS_HIT
        return Hit.ENEMY_HIT

    if is_projectile_blocker(target):
        _retire(game, owner, proj)
        return Hit.WALL_HIT

    if target == HERO:
        _retire(game, owner, proj)
        return Hit.HERO_HIT if owner != 0 else Hit.NO_HIT

    _leave(game, proj)
    proj.x, proj.y = nx, ny
    return Hit.NO_HIT


def handle_hit(game, hit, proj, on_hero_hit=None):
    """Apply the damage and rewards of a projectile hit."""
    if hit == Hit.HERO_HIT:
        if on_hero_hit is not None:
            on_hero_hit(game)
        hero = game.entities[0]
        hero.hp -= 1
        if hero.hp <= 0:
            hero.alive = False
    elif hit == Hit.BOSS_HIT:
        boss = game.entities[1]
        boss.hp -= 1
        if boss.hp == 0:
            boss.alive = False
            game.add_score(BOSS_KILL_REWARD)
    elif hit == Hit.ENEMY_HIT:
        target = game.find_entity(proj.x, proj.y)
        if target is None:
            return
        target.hp -= 1
        if target.hp <= 0:
            target.alive = False
            game.add_score(ENEMY_KILL_REWARD)


def update_projectiles(game, frame, on_hero_hit=None):
    """On even frames move every active projectile and redraw them all."""
    if frame % 2:
        return
    for owner, entity in enumerate(game.entities[: game.ent_qty]):
        for proj in entity.projectiles:
            if not proj.active:
                continue
            hit = update_projectile(game, owner, proj, frame)
            if hit not in (Hit.NO_HIT, Hit.TIME_NO_SHOOT):
                handle_hit(game, hit, proj, on_hero_hit)

    for row in game.board:
        row[:] = [GROUND if t in (HERO_PROJ, ENEMY_PROJ) else t for t in row]

    for owner, entity in enumerate(game.entities[: game.ent_qty]):
        tile = HERO_PROJ if owner == 0 else ENEMY_PROJ
        for proj in entity.projectiles:
            if proj.active:
                game.set_tile(proj.x, proj.y, tile)
"""Moving entities one tile on the board."""

from termshmup.state import COLLEC_REWARD
from termshmup.tiles import (
    BOSS_LEFT,
    COLLEC,
    DEAD,
    GROUND,
    Move,
    is_enemy,
    is_mob,
)

_STEPS = {
    Move.UP: (0, -1),
    Move.DOWN: (0, 1),
    Move.LEFT: (-1, 0),
    Move.RIGHT: (1, 0),
}


def move_entity(game, which, move):
    """Move entity slot `which` one step; dead enemies are marked instead."""
    entity = game.entities[which]
    x, y = entity.x, entity.y

    if is_mob(entity.type) and not entity.alive:
        game.set_tile(x, y, DEAD)
        return
    if entity.type == BOSS_LEFT and not entity.alive:
        game.set_tile(x - 1, y, DEAD)
        game.set_tile(x, y, DEAD)
        return
    if is_mob(entity.type) and is_enemy(game.tile(x + entity.x_dir, y + entity.y_dir)):
        return

    dx, dy = _STEPS[Move(move)]
    nx, ny = x + dx, y + dy
    target = game.tile(nx, ny)
    if target == COLLEC and which == 0:
        collectible = game.find_collectible(nx, ny)
        if collectible is not None:
            collectible.active = False
        game.add_score(COLLEC_REWARD)
    elif target != GROUND:
        return

    game.set_tile(x, y, GROUND)
    game.set_tile(nx, ny, entity.type)
    entity.x, entity.y = nx, ny
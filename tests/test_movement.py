from termshmup.movement import move_entity
from termshmup.state import COLLEC_REWARD, Collectible, Game
from termshmup.tiles import BOSS_LEFT, BOSS_RIGHT, COLLEC, DEAD, ENEMY1, GROUND, HERO, Move

ROWS = [
    "))))))))",
    ")      )",
    ")      )",
    ")      )",
    "))))))))",
]


def make_game():
    return Game(board=[list(r) for r in ROWS])


def place(game, slot, tile, x, y, alive=True):
    entity = game.entities[slot]
    entity.type, entity.x, entity.y, entity.alive = tile, x, y, alive
    game.set_tile(x, y, tile)
    return entity


def test_hero_moves_up():
    game = make_game()
    hero = place(game, 0, HERO, 3, 2)
    move_entity(game, 0, Move.UP)
    assert (hero.x, hero.y) == (3, 2 - 1)
    assert game.tile(3, 2 - 1) == HERO
    assert game.tile(3, 2) == GROUND


def test_hero_moves_right_and_left():
    game = make_game()
    hero = place(game, 0, HERO, 3, 2)
    move_entity(game, 0, Move.RIGHT)
    move_entity(game, 0, Move.LEFT)
    assert (hero.x, hero.y) == (3, 2)
    assert game.tile(3, 2) == HERO
    assert game.tile(3 + 1, 2) == GROUND


def test_hero_blocked_by_border():
    game = make_game()
    hero = place(game, 0, HERO, 1, 1)
    before = [row[:] for row in game.board]
    move_entity(game, 0, Move.UP)
    move_entity(game, 0, Move.LEFT)
    assert (hero.x, hero.y) == (1, 1)
    assert game.board == before


def test_hero_picks_collectible():
    game = make_game()
    hero = place(game, 0, HERO, 3, 2)
    game.collectibles[0] = Collectible(3, 3, True)
    game.collec_qty = 1
    game.set_tile(3, 3, COLLEC)
    move_entity(game, 0, Move.DOWN)
    assert (hero.x, hero.y) == (3, 3)
    assert game.collectibles[0].active is False
    assert game.score == COLLEC_REWARD
    assert game.score_calc == COLLEC_REWARD


def test_mob_cannot_take_collectible():
    game = make_game()
    mob = place(game, 2, ENEMY1, 3, 2)
    mob.y_dir = 1
    game.set_tile(3, 3, COLLEC)
    move_entity(game, 2, Move.DOWN)
    assert (mob.x, mob.y) == (3, 2)
    assert game.tile(3, 3) == COLLEC
    assert game.score == 0


def test_mob_moves_in_its_direction():
    game = make_game()
    mob = place(game, 2, ENEMY1, 3, 2)
    mob.x_dir = 1
    move_entity(game, 2, Move.RIGHT)
    assert (mob.x, mob.y) == (3 + 1, 2)
    assert game.tile(3, 2) == GROUND


def test_mob_blocked_by_enemy_ahead():
    game = make_game()
    mob = place(game, 2, ENEMY1, 3, 2)
    place(game, 3, ENEMY1, 4, 2)
    mob.x_dir = 1
    move_entity(game, 2, Move.RIGHT)
    assert (mob.x, mob.y) == (3, 2)


def test_mob_without_direction_does_not_move():
    game = make_game()
    mob = place(game, 2, ENEMY1, 3, 2)
    move_entity(game, 2, Move.UP)
    assert (mob.x, mob.y) == (3, 2)
    assert game.tile(3, 2) == ENEMY1


def test_dead_mob_leaves_corpse():
    game = make_game()
    mob = place(game, 2, ENEMY1, 3, 2, alive=False)
    move_entity(game, 2, Move.UP)
    assert game.tile(3, 2) == DEAD
    assert (mob.x, mob.y) == (3, 2)


def test_dead_boss_leaves_two_corpses():
    game = make_game()
    game.set_tile(3, 2, BOSS_LEFT)
    place(game, 1, BOSS_RIGHT, 4, 2, alive=False)
    game.entities[1].type = BOSS_LEFT
    move_entity(game, 1, Move.DOWN)
    assert game.tile(3, 2) == DEAD
    assert game.tile(4, 2) == DEAD
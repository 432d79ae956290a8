from unittest import mock

import pytest

from termshmup.clock import PlayClock
from termshmup.rendering import (
    Palette,
    ammo_bar,
    attack_dir_label,
    bar_color,
    blink,
    display_board,
    display_fps,
    display_gui,
    hp_bar,
    move_camera,
    render,
    resize,
    tile_color,
)
from termshmup.state import Camera, Game, MAX_PROJECTILES, HERO_MAX_HP
from termshmup.tiles import (
    BOSS_LEFT,
    BOSS_RIGHT,
    COLLEC,
    EMPTY,
    ENEMY1,
    GROUND,
    HERO,
    HERO_PROJ,
    Move,
)


class FakeScreen:
    def __init__(self, height=42, width=100):
        self.height, self.width = height, width
        self.cells = {}
        self.writes = []
        self.cleared = 0
        self.refreshed = 0

    def getmaxyx(self):
        return (self.height, self.width)

    def addstr(self, y, x, text, attr=0):
        self.writes.append((y, x, text))
        for k, ch in enumerate(text):
            self.cells[(y, x + k)] = ch

    def clear(self):
        self.cells.clear()
        self.cleared += 1

    def refresh(self):
        self.refreshed += 1

    def row(self, y):
        return "".join(self.cells.get((y, x), " ") for x in range(self.width))


def make_game():
    rows = [
        ")))))))))",
        ")  +   B)",
        ")!  {  ()",
        ")   ~  ;)",
        ")))))))))",
    ]
    rows = [row + ")" for row in rows]
    game = Game(board=[list(row) for row in rows])
    hero = game.entities[0]
    hero.type, hero.x, hero.y, hero.hp = HERO, 3, 1, 3
    return game


@pytest.mark.parametrize(
    "tile,color",
    [
        ("!", Palette.RED),
        (EMPTY, Palette.RED),
        (BOSS_LEFT, Palette.RED),
        (BOSS_RIGHT, Palette.RED),
        (HERO, Palette.MAGENTA),
        (HERO_PROJ, Palette.MAGENTA),
        (COLLEC, Palette.YELLOW),
        (GROUND, None),
        (ENEMY1, None),
    ],
)
def test_tile_color(tile, color):
    assert tile_color(tile) is color


def test_tile_color_pair_numbers():
    assert tile_color(COLLEC) == 3
    assert tile_color(HERO) == 6


@pytest.mark.parametrize("hp", range(HERO_MAX_HP + 1))
def test_hp_bar_shape(hp):
    bar = hp_bar(hp)
    assert len(bar) == HERO_MAX_HP
    assert bar.count(HERO) == hp
    assert bar.startswith(HERO * hp)


@pytest.mark.parametrize("ammo", range(MAX_PROJECTILES + 1))
def test_ammo_bar_shape(ammo):
    bar = ammo_bar(ammo)
    assert len(bar) == MAX_PROJECTILES
    assert bar.count("Z") == ammo
    assert bar.rstrip() == "Z" * ammo


@pytest.mark.parametrize(
    "direction,label",
    [(Move.UP, "U"), (Move.DOWN, "B"), (Move.LEFT, "L"), (Move.RIGHT, "R")],
)
def test_attack_dir_label(direction, label):
    assert attack_dir_label(direction) == label


def test_bar_color_thresholds():
    assert bar_color(MAX_PROJECTILES, MAX_PROJECTILES) is Palette.GREEN
    assert bar_color(MAX_PROJECTILES - 1, MAX_PROJECTILES) is Palette.YELLOW
    assert bar_color(MAX_PROJECTILES // 2, MAX_PROJECTILES) is Palette.RED
    assert bar_color(0, MAX_PROJECTILES) is Palette.RED


def test_move_camera_keys():
    game = make_game()
    game.camera = Camera(3, 3)
    move_camera("k", game)
    assert game.camera.y == 2
    move_camera(ord("j"), game)
    assert game.camera.y == 3
    move_camera("h", game)
    assert game.camera.x == 2
    move_camera("l", game)
    assert game.camera.x == 3


def test_move_camera_limits():
    game = make_game()
    game.camera = Camera(1, 1)
    move_camera("k", game)
    move_camera("h", game)
    assert (game.camera.x, game.camera.y) == (1, 1)
    game.camera = Camera(game.board_width, game.board_height)
    move_camera("l", game)
    move_camera("j", game)
    assert (game.camera.x, game.camera.y) == (game.board_width, game.board_height)


def test_move_camera_ignores_other_keys():
    game = make_game()
    game.camera = Camera(2, 2)
    move_camera("w", game)
    move_camera(-1, game)
    assert (game.camera.x, game.camera.y) == (2, 2)


def test_display_board_maps_cells_through_camera():
    game = make_game()
    screen = FakeScreen(height=4, width=6)
    game.camera = Camera(2, 1)
    display_board(screen, game)
    for j in range(1, 4):
        for i in range(1, 6):
            assert screen.cells[(j, i)] == game.board[j + 1][i + 2]


def test_display_board_skips_row_and_column_zero():
    game = make_game()
    screen = FakeScreen(height=5, width=10)
    display_board(screen, game)
    assert all(y >= 1 and x >= 1 for y, x in screen.cells)
    assert screen.cells[(1, 3)] == HERO


def test_display_board_stops_at_board_edge():
    game = make_game()
    screen = FakeScreen(height=5, width=6)
    game.camera = Camera(game.board_width - 2, 0)
    display_board(screen, game)
    assert (1, 1) in screen.cells
    assert (1, 2) not in screen.cells


def test_display_gui_layout():
    game = make_game()
    game.score = 1234
    hero = game.entities[0]
    hero.dir = Move.LEFT
    hero.active_proj_qty = 3
    screen = FakeScreen()
    display_gui(screen, game)
    row = screen.row(0)
    assert "1234 {" in row
    assert hp_bar(3) in row
    assert ammo_bar(MAX_PROJECTILES - 3) in row
    assert row.index("L") < row.index(hp_bar(3)) < row.index("1234") < row.index("Z")


def test_display_fps_corners():
    screen = FakeScreen()
    clock = PlayClock(fps=60.0, seconds=5, minutes=2)
    display_fps(screen, clock)
    row = screen.row(0)
    assert row.startswith(clock.fps_text())
    assert row.endswith(clock.elapsed_text())


def test_render_draws_gui_and_board():
    game = make_game()
    game.score = 77
    screen = FakeScreen()
    render(screen, game)
    assert "77 {" in screen.row(0)
    assert screen.cells[(1, 3)] == HERO


def test_blink_flashes_three_times():
    game = make_game()
    screen = FakeScreen()
    with mock.patch("time.sleep") as sleep:
        blink(screen, game)
    assert sleep.call_count == 6
    assert screen.cleared == 3
    assert "HIT!" in screen.row(0)


def test_resize_accepts_playing_size():
    screen = FakeScreen(height=42, width=100)
    assert resize(screen) is True
    assert screen.writes == []


def test_resize_rejects_other_sizes():
    screen = FakeScreen(height=30, width=80)
    assert resize(screen) is False
    assert "Please resize the window to 100x42." in [w[2] for w in screen.writes]
    assert screen.cleared == 1
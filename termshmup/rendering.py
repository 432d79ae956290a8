"""Drawing the board, the status bar and the frame counter with curses."""

import curses
import time
from enum import IntEnum
from itertools import groupby

from termshmup.state import (
    HERO_HP,
    HERO_MAX_HP,
    MAX_PROJECTILES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from termshmup.tiles import (
    BOSS_LEFT,
    BOSS_RIGHT,
    COLLEC,
    EMPTY,
    HERO,
    HERO_PROJ,
    Move,
    is_wall,
)

BLINK_TIMES = 3
BLINK_DELAY = 0.1
AMMO_CHAR = "Z"
RESIZE_MESSAGE = f"Please resize the window to {SCREEN_WIDTH}x{SCREEN_HEIGHT}."


class Palette(IntEnum):
    """Colour pair numbers used on screen."""

    GREEN = 1
    RED = 2
    YELLOW = 3
    BLUE = 4
    CYAN = 5
    MAGENTA = 6
    INVERSE = 7


_PAIRS = {
    Palette.GREEN: (curses.COLOR_GREEN, curses.COLOR_BLACK),
    Palette.RED: (curses.COLOR_RED, curses.COLOR_BLACK),
    Palette.YELLOW: (curses.COLOR_YELLOW, curses.COLOR_BLACK),
    Palette.BLUE: (curses.COLOR_BLUE, curses.COLOR_BLACK),
    Palette.CYAN: (curses.COLOR_CYAN, curses.COLOR_BLACK),
    Palette.MAGENTA: (curses.COLOR_MAGENTA, curses.COLOR_BLACK),
    Palette.INVERSE: (curses.COLOR_BLACK, curses.COLOR_WHITE),
}

_DIR_LABELS = {Move.UP: "U", Move.DOWN: "B", Move.LEFT: "L", Move.RIGHT: "R"}
_CAMERA_KEYS = ("k", "j", "h", "l")


def _attr(palette, extra=0):
    """Curses attribute for a palette entry; plain when colours are unavailable."""
    if palette is None:
        return extra
    try:
        return curses.color_pair(palette) | extra
    except curses.error:
        return extra


def _put(screen, y, x, text, attr=0):
    """Write text, ignoring writes that fall off the window."""
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        pass


def _as_char(key):
    if isinstance(key, str):
        return key
    if isinstance(key, int) and 0 <= key < 256:
        return chr(key)
    return None


def move_camera(key, game):
    """Scroll the camera one cell with h/j/k/l."""
    char = _as_char(key)
    camera = game.camera
    if char == "k" and camera.y > 1:
        camera.y -= 1
    elif char == "j" and camera.y < game.board_height:
        camera.y += 1
    elif char == "h" and camera.x > 1:
        camera.x -= 1
    elif char == "l" and camera.x < game.board_width:
        camera.x += 1


def tile_color(tile):
    """Colour a board tile is drawn in, or None for the default colour."""
    if is_wall(tile) or tile in (EMPTY, BOSS_LEFT, BOSS_RIGHT):
        return Palette.RED
    if tile in (HERO, HERO_PROJ):
        return Palette.MAGENTA
    if tile == COLLEC:
        return Palette.YELLOW
    return None


def hp_bar(hp):
    """The hero's health as a bar of HERO_MAX_HP cells."""
    return "".join(HERO if i < hp else " " for i in range(HERO_MAX_HP))


def ammo_bar(ammo):
    """Remaining shots as a bar of MAX_PROJECTILES cells."""
    return "".join(AMMO_CHAR if i < ammo else " " for i in range(MAX_PROJECTILES))


def attack_dir_label(direction):
    """One-letter label of the hero's aim; empty for an unknown direction."""
    return _DIR_LABELS.get(direction, "")


def bar_color(value, full):
    """Green when full, yellow above half, red otherwise."""
    if value == full:
        return Palette.GREEN
    if value > full >> 1:
        return Palette.YELLOW
    return Palette.RED


def _hp_color(hp):
    if hp == HERO_HP:
        return Palette.GREEN
    if hp > HERO_MAX_HP >> 1:
        return Palette.YELLOW
    return Palette.RED


def init_colors():
    """Start colour support and register the palette's pairs."""
    curses.start_color()
    for pair, (foreground, background) in _PAIRS.items():
        curses.init_pair(pair, foreground, background)


def display_board(screen, game):
    """Draw the part of the board seen by the camera, leaving row and column 0."""
    height, width = screen.getmaxyx()
    camera = game.camera
    first = max(1, -camera.x)
    last = min(width, game.board_width - camera.x)
    if first >= last:
        return
    for j in range(1, height):
        board_y = j + camera.y
        if not 0 <= board_y < game.board_height:
            continue
        visible = game.board[board_y][first + camera.x : last + camera.x]
        column = first
        for color, run in groupby(visible, key=tile_color):
            text = "".join(run)
            _put(screen, j, column, text, _attr(color))
            column += len(text)


def display_gui(screen, game):
    """Draw the status bar: aim, health, score and ammunition."""
    _, width = screen.getmaxyx()
    hero = game.entities[0]

    _put(screen, 0, (width >> 2) + HERO_MAX_HP, hp_bar(hero.hp), _attr(_hp_color(hero.hp)))
    _put(
        screen,
        0,
        (width >> 1) - 1,
        f"{game.score} {COLLEC}",
        _attr(Palette.CYAN, curses.A_BOLD),
    )
    ammo = MAX_PROJECTILES - hero.active_proj_qty
    _put(
        screen,
        0,
        (width >> 1) + (width >> 2) - MAX_PROJECTILES,
        ammo_bar(ammo),
        _attr(bar_color(ammo, MAX_PROJECTILES)),
    )
    label = attack_dir_label(hero.dir)
    if label:
        _put(screen, 0, (width >> 2) - 6, label, _attr(Palette.MAGENTA, curses.A_BOLD))


def display_fps(screen, clock):
    """Draw the frame rate at the top left and the time played at the top right."""
    _, width = screen.getmaxyx()
    color = Palette.GREEN if clock.fps > 50.0 else Palette.RED
    _put(screen, 0, 0, clock.fps_text(), _attr(color))
    _put(screen, 0, width - 9, clock.elapsed_text())


def render(screen, game):
    """Draw one frame of the game."""
    display_gui(screen, game)
    display_board(screen, game)


def blink(screen, game):
    """Flash the screen with a HIT! banner when the hero is hurt."""
    for _ in range(BLINK_TIMES):
        screen.clear()
        screen.refresh()
        time.sleep(BLINK_DELAY)
        display_board(screen, game)
        _put(screen, 0, 2, "HIT!", _attr(Palette.RED))
        display_gui(screen, game)
        screen.refresh()
        time.sleep(BLINK_DELAY)


def resize(screen):
    """Re-read the terminal size; True when it is exactly the playing size."""
    try:
        curses.endwin()
    except curses.error:
        pass
    screen.refresh()
    screen.clear()
    height, width = screen.getmaxyx()
    if (height, width) == (SCREEN_HEIGHT, SCREEN_WIDTH):
        return True
    column = (width >> 1) - (len(RESIZE_MESSAGE) >> 1)
    _put(screen, height >> 1, column, RESIZE_MESSAGE)
    return False
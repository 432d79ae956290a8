"""The terminal front end: start-up checks, the main loop and its menus."""

import curses
import signal
import sys
import time

from termshmup.clock import (
    TARGET_FRAME_TIME,
    PlayClock,
    get_time,
    sleep_remaining,
)
from termshmup.engine import Engine
from termshmup.parser import MapError, parse_file
from termshmup.rendering import blink, display_fps, init_colors, render, resize
from termshmup.state import QuitReason

RED = "\001\033[31m\002"
RST = "\001\033[0m\002"

WELCOME = "Welcome dear player !"
COUNTDOWN = 3
RESIZE_PAUSE = 0.005

_EXIT_PROMPT = "press any key to exit."
_QUIT_PROMPT = "do you want to quit ?"
_QUIT_KEYS = "press 'o' to quit, 'p' to keep playing."
_WRONG_INPUT = "wrong input. do you want to quit ?"


def centered_column(width, text):
    """Column at which text starts when centred in a window of this width."""
    return (width >> 1) - (len(text) >> 1)


def _print(screen, y, x, text):
    try:
        screen.addstr(y, x, text)
    except curses.error:
        pass


def welcome(screen):
    """Show the greeting with a short countdown."""
    height, width = screen.getmaxyx()
    column = centered_column(width, WELCOME)
    for remaining in range(COUNTDOWN, -1, -1):
        _print(screen, (height >> 1) - 1, column, WELCOME)
        _print(screen, (height >> 1) + 1, column, f"start in: {remaining}")
        time.sleep(1)
        screen.refresh()
        screen.clear()


def _setup_terminal(screen):
    for step in (curses.cbreak, curses.noecho, lambda: curses.curs_set(0), init_colors):
        try:
            step()
        except curses.error:
            pass
    screen.nodelay(True)
    screen.keypad(True)


def _play(screen, engine, clock):
    """Run frames until the engine asks to stop; return its QuitReason."""
    to_resize = True
    correct_size = False
    reason = None
    while reason is None:
        start = get_time()
        if to_resize:
            correct_size = resize(screen)
            if correct_size:
                to_resize = False
            sleep_remaining(RESIZE_PAUSE)
        if correct_size:
            key = screen.getch()
            if key == curses.KEY_RESIZE:
                to_resize = True
            reason = engine.update(key)
            render(screen, engine.game)
        elapsed = get_time() - start
        if elapsed < TARGET_FRAME_TIME:
            sleep_remaining(TARGET_FRAME_TIME - elapsed)
        clock.tick(get_time() - start, engine.game, correct_size)
        display_fps(screen, clock)
        screen.refresh()
    return reason


def _death_screen(screen, game):
    height, width = screen.getmaxyx()
    column = centered_column(width, _EXIT_PROMPT)
    _print(screen, (height >> 1) + 1, column, f"Score: {game.score}")
    _print(screen, (height >> 1) - 1, column, _EXIT_PROMPT)
    screen.refresh()
    time.sleep(1)
    screen.getch()


def _confirm_quit(screen, game):
    """Ask whether to quit; True to quit, False to keep playing."""
    height, width = screen.getmaxyx()
    column = centered_column(width, _QUIT_KEYS)
    prompt = _QUIT_PROMPT
    while True:
        _print(screen, (height >> 1) + 1, column, prompt)
        _print(screen, height >> 1, column, f"Current score: {game.score}")
        _print(screen, (height >> 1) - 1, column, _QUIT_KEYS)
        screen.refresh()
        key = screen.getch()
        if key == ord("o"):
            return True
        if key == ord("p"):
            return False
        screen.clear()
        prompt = _WRONG_INPUT


def run(screen, game):
    """Play the game on a curses screen until the player leaves; return 0."""
    _setup_terminal(screen)
    engine = Engine(
        game,
        on_hero_hit=lambda hurt: blink(screen, hurt),
        screen_size=screen.getmaxyx,
    )
    clock = PlayClock()
    welcome(screen)
    while True:
        reason = _play(screen, engine, clock)
        screen.nodelay(False)
        screen.clear()
        screen.refresh()
        if reason == QuitReason.HERO_DEATH:
            _death_screen(screen, game)
            return 0
        if _confirm_quit(screen, game):
            return 0
        screen.nodelay(True)


def _panic(signum, frame):
    raise SystemExit(1)


def _install_signal_handlers():
    for name in ("SIGTERM", "SIGQUIT"):
        signum = getattr(signal, name, None)
        if signum is not None:
            signal.signal(signum, _panic)


def _usage_error(message):
    sys.stderr.write(f"{RED}{message}\n")
    sys.stderr.write(f"example: termshmup map/00{RST}\n")


def main(argv=None):
    """Load the map named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        _usage_error("Please give a path to a map as second argument.")
        return 2
    try:
        game = parse_file(args[0])
    except MapError as error:
        sys.stderr.write(f"{RED}Map is invalid.\n{error}\n{RST}")
        return 4
    except OSError:
        _usage_error("Path to map is invalid or it cannot be opened.")
        return 3

    _install_signal_handlers()
    try:
        return curses.wrapper(run, game)
    except KeyboardInterrupt:
        return 1


if __name__ == "__main__":
    sys.exit(main())
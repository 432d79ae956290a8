from unittest.mock import patch

from termshmup.clock import PlayClock, get_time, sleep_remaining
from termshmup.state import Game


def test_get_time_is_monotonic():
    first = get_time()
    second = get_time()
    assert second >= first


def test_sleep_remaining_sleeps_positive_duration():
    start = get_time()
    sleep_remaining(0.02)
    elapsed = get_time() - start
    assert elapsed >= 0.015


def test_sleep_remaining_ignores_non_positive():
    with patch("time.sleep") as sleep:
        start = get_time()
        sleep_remaining(0.0)
        sleep_remaining(-1.0)
        elapsed = get_time() - start
    assert sleep.call_count == 0
    assert elapsed < 0.5


def test_initial_texts():
    clock = PlayClock()
    assert clock.elapsed_text() == "00h00m00s"
    assert clock.fps_text() == "   0.0 fps"


def test_fps_measured_after_a_second():
    clock = PlayClock()
    game = Game()
    clock.tick(0.5, game)
    assert clock.fps == 0.0
    clock.tick(0.5, game)
    assert clock.fps == 2.0
    assert clock.seconds == 1
    assert clock.added_frames == 0


def test_seconds_not_counted_when_paused():
    clock = PlayClock()
    game = Game()
    clock.tick(1.0, game, counting=False)
    assert clock.seconds == 0
    assert clock.fps > 0


def test_bonus_during_thirtieth_second():
    clock = PlayClock(seconds=29)
    game = Game()
    clock.tick(1.0, game)
    assert clock.seconds == 30
    assert game.score == 2
    assert game.score_calc == 2
    clock.tick(0.1, game)
    assert game.score == 4


def test_minute_rolls_over_with_bonus():
    clock = PlayClock(seconds=59)
    game = Game()
    clock.tick(1.0, game)
    assert (clock.minutes, clock.seconds) == (1, 0)
    assert game.score == 5


def test_hour_rolls_over():
    clock = PlayClock(seconds=59, minutes=59)
    clock.tick(1.0, Game())
    assert (clock.hours, clock.minutes, clock.seconds) == (1, 0, 0)
    assert clock.elapsed_text() == "01h00m00s"


def test_no_bonus_on_ordinary_seconds():
    clock = PlayClock(seconds=10)
    game = Game()
    clock.tick(1.0, game)
    assert clock.seconds == 11
    assert game.score == 0
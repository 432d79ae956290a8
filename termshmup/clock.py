"""Frame timing, the FPS counter and the play-time clock."""

import time
from dataclasses import dataclass

TARGET_FRAME_TIME = 1.0 / 60.0

_TIME_BONUSES = {30: 2, 60: 5, 240: 7, 3600: 10}


def get_time():
    """Monotonic time in seconds."""
    return time.monotonic()


def sleep_remaining(duration):
    """Sleep for the given number of seconds; nothing if it is not positive."""
    if duration <= 0.0:
        return
    time.sleep(duration)


@dataclass
class PlayClock:
    """Measures frames per second and the time played, awarding time bonuses."""

    fps: float = 0.0
    seconds: int = 0
    minutes: int = 0
    hours: int = 0
    added_time: float = 0.0
    added_frames: int = 0

    def tick(self, frame_time, game, counting=True):
        """Account for one frame that took frame_time seconds."""
        self.added_frames += 1
        self.added_time += frame_time
        if self.added_time >= 1.0:
            self.fps = self.added_frames / self.added_time
            self.added_time = 0.0
            self.added_frames = 0
            if counting:
                self.seconds += 1

        bonus = _TIME_BONUSES.get(self.seconds)
        if bonus:
            game.add_score(bonus)

        if self.seconds == 60:
            self.seconds = 0
            self.minutes += 1
        if self.minutes == 60:
            self.hours += 1
            self.minutes = 0

    def elapsed_text(self):
        """Time played as HHhMMmSSs."""
        return f"{self.hours:02d}h{self.minutes:02d}m{self.seconds:02d}s"

    def fps_text(self):
        """The last measured frame rate."""
        return f"{self.fps:6.1f} fps"
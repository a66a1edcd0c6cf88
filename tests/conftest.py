import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np  # noqa: E402
import pygame  # noqa: E402
import pytest  # noqa: E402

from gridsnake.audio import SoundBoard  # noqa: E402
from gridsnake.game import Game  # noqa: E402
from gridsnake.grid import GridSize  # noqa: E402
from gridsnake.ticker import COOLDOWN_EVENT, TICK_EVENT, Ticker  # noqa: E402


class TimerRecorder:
    """Stands in for pygame.time.set_timer; records instead of scheduling."""

    def __init__(self):
        self.calls = []

    def __call__(self, event, millis, loops=0):
        self.calls.append((event, millis, loops))


class FakeSound:
    def __init__(self, name, played, fail=False):
        self.name = name
        self.played = played
        self.fail = fail

    def play(self):
        if self.fail:
            raise pygame.error("no audio device")
        self.played.append(self.name)


@pytest.fixture(scope="session", autouse=True)
def pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def grid():
    return GridSize(cells_x=10, cells_y=10, cell_size=30)


@pytest.fixture
def timers():
    return TimerRecorder()


@pytest.fixture
def played():
    return []


@pytest.fixture
def sounds(played):
    return SoundBoard({
        "eat": FakeSound("eat", played),
        "game_over": FakeSound("game_over", played),
    })


@pytest.fixture
def make_game(timers, sounds, rng):
    def _make(grid, cooldown_ms=500):
        return Game(
            grid,
            ticker=Ticker(200, TICK_EVENT, set_timer=timers),
            cooldown=Ticker(cooldown_ms, COOLDOWN_EVENT, set_timer=timers),
            sounds=sounds,
            rng=rng,
        )
    return _make


@pytest.fixture
def fire():
    """Build the event a ticker would post for its current generation."""
    def _fire(ticker):
        return pygame.event.Event(ticker.event_type, generation=ticker.generation)
    return _fire


@pytest.fixture
def fake_sound():
    return FakeSound

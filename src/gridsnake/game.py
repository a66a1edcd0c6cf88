# game.py
import logging
from typing import Optional

import numpy as np  # type: ignore
import pygame  # type: ignore

from . import audio
from .audio import SoundBoard
from .config import Direction
from .engine import Outcome, latch_direction, new_game_state, reset_game, step_game
from .grid import GridSize
from .state import GameState, Phase, Snapshot
from .ticker import Ticker

logger = logging.getLogger(__name__)


class Game:
    """
    idle -> running -> lost | won -> running ...

    Owns the state, the tick timer and the post-game cooldown timer. All
    mutation happens here, from the main loop, one event at a time.
    """

    def __init__(
        self,
        grid: GridSize,
        ticker: Ticker,
        cooldown: Ticker,
        sounds: Optional[SoundBoard] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.state: GameState = new_game_state(grid)
        self.ticker = ticker
        self.cooldown = cooldown
        self.sounds = sounds or SoundBoard()
        self.rng = rng if rng is not None else np.random.default_rng()

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()

    # --- input ---
    def start(self) -> bool:
        if self.state.phase is Phase.RUNNING or self.state.blocked:
            return False
        reset_game(self.state, self.rng)
        self.ticker.restart()
        logger.info("game started on a %dx%d grid",
                    self.state.grid.cells_x, self.state.grid.cells_y)
        return True

    def request_direction(self, direction: Direction) -> bool:
        accepted = latch_direction(self.state, direction)
        if not accepted:
            logger.debug("ignored turn %s (heading %s, blocked=%s)",
                         direction.name, self.state.direction.name, self.state.blocked)
        return accepted

    # --- timers ---
    def handle_timer(self, event: pygame.event.Event) -> bool:
        """Run a tick or end the cooldown. Stale timer events return False."""
        if self.ticker.accepts(event):
            self.tick()
            return True
        if self.cooldown.accepts(event):
            self.release()
            return True
        return False

    def tick(self) -> Outcome:
        outcome = step_game(self.state, self.rng)

        if outcome in (Outcome.ATE, Outcome.WON):
            self.sounds.play(audio.EAT)
        if outcome in (Outcome.MOVED, Outcome.ATE):
            self.ticker.arm()
            return outcome

        self.ticker.cancel()
        if outcome is Outcome.LOST:
            self.sounds.play(audio.GAME_OVER)
            logger.info("snake died, score %d", self.state.score)
        else:
            logger.info("board filled, score %d", self.state.score)
        # set_timer(..., 0) would cancel instead of firing
        if self.cooldown.interval_ms > 0:
            self.cooldown.restart()
        else:
            self.release()
        return outcome

    def release(self) -> None:
        self.state.blocked = False

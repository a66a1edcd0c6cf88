# controls.py
import logging

import pygame  # type: ignore

from .config import Direction
from .game import Game
from .grid import Layout
from .state import Phase

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_w: Direction.UP,
    pygame.K_d: Direction.RIGHT,
    pygame.K_s: Direction.DOWN,
}
START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)


class InputSubscription:
    """
    Routes pygame input events to a Game while it is open.

    Use as a context manager around the main loop; once closed every event
    is left alone. dispatch() returns True when it consumed the event, which
    includes direction keys that the game ignored.
    """

    def __init__(self, game: Game, layout: Layout):
        self.game = game
        self.layout = layout
        self.active = True
        self.quit_requested = False

    def __enter__(self) -> "InputSubscription":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.active = False

    def dispatch(self, event: pygame.event.Event) -> bool:
        if not self.active:
            return False

        if event.type == pygame.QUIT:
            self.quit_requested = True
            return True

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.quit_requested = True
                return True
            direction = KEYMAP.get(event.key)
            if direction is not None:
                if self.game.phase is Phase.RUNNING:
                    self.game.request_direction(direction)
                return True
            if event.key in START_KEYS:
                self._start()
                return True
            return False

        # touch arrives as a left click too
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.game.phase is not Phase.RUNNING:
                self._start()
                return True
            direction = self.layout.button_at(event.pos)
            if direction is not None:
                self.game.request_direction(direction)
                return True
        return False

    def _start(self) -> None:
        if not self.game.start():
            logger.debug("start ignored (phase=%s, blocked=%s)",
                         self.game.phase.value, self.game.state.blocked)

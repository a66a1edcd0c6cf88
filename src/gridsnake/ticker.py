# ticker.py
from typing import Callable

import pygame  # type: ignore

TICK_EVENT = pygame.USEREVENT + 1
COOLDOWN_EVENT = pygame.USEREVENT + 2


class Ticker:
    """
    One-shot pygame timer that can be re-armed, restarted and cancelled.

    Every event it posts carries the generation that armed it. restart() and
    cancel() bump the generation, so an event already queued by an earlier
    game is recognised by accepts() and dropped.
    """

    def __init__(
        self,
        interval_ms: int,
        event_type: int = TICK_EVENT,
        set_timer: Callable = pygame.time.set_timer,
    ):
        self.interval_ms = interval_ms
        self.event_type = event_type
        self.generation = 0
        self.armed = False
        self._set_timer = set_timer

    def arm(self) -> None:
        """Fire once, interval_ms from now, tagged with the current generation."""
        event = pygame.event.Event(self.event_type, generation=self.generation)
        self._set_timer(event, self.interval_ms, 1)
        self.armed = True

    def restart(self) -> None:
        self.generation += 1
        self.arm()

    def cancel(self) -> None:
        self.generation += 1
        self.armed = False
        self._set_timer(self.event_type, 0)

    def accepts(self, event: pygame.event.Event) -> bool:
        """True for an event this timer posted since the last restart/cancel."""
        if event.type != self.event_type:
            return False
        if not self.armed or getattr(event, "generation", None) != self.generation:
            return False
        self.armed = False
        return True

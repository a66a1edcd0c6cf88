import pygame

from gridsnake.ticker import COOLDOWN_EVENT, TICK_EVENT, Ticker


def event_for(ticker, generation=None):
    gen = ticker.generation if generation is None else generation
    return pygame.event.Event(ticker.event_type, generation=gen)


class TestTicker:
    """One-shot generation-tagged timer."""

    def test_arm_posts_tagged_one_shot(self, timers):
        ticker = Ticker(200, TICK_EVENT, set_timer=timers)
        ticker.arm()
        event, millis, loops = timers.calls[0]
        assert event.type == TICK_EVENT
        assert event.generation == 0
        assert (millis, loops) == (200, 1)
        assert ticker.armed

    def test_accept_disarms(self, timers):
        ticker = Ticker(200, set_timer=timers)
        ticker.arm()
        assert ticker.accepts(event_for(ticker)) is True
        assert ticker.armed is False
        assert ticker.accepts(event_for(ticker)) is False

    def test_restart_invalidates_old_events(self, timers):
        ticker = Ticker(200, set_timer=timers)
        ticker.arm()
        old = event_for(ticker)
        ticker.restart()
        assert ticker.generation == 1
        assert ticker.accepts(old) is False
        assert ticker.accepts(event_for(ticker)) is True

    def test_cancel_clears_pygame_timer(self, timers):
        ticker = Ticker(200, set_timer=timers)
        ticker.arm()
        pending = event_for(ticker)
        ticker.cancel()
        assert timers.calls[-1] == (TICK_EVENT, 0, 0)
        assert ticker.accepts(pending) is False

    def test_other_event_types_are_ignored(self, timers):
        ticker = Ticker(200, TICK_EVENT, set_timer=timers)
        ticker.arm()
        other = pygame.event.Event(COOLDOWN_EVENT, generation=ticker.generation)
        assert ticker.accepts(other) is False
        assert ticker.accepts(pygame.event.Event(TICK_EVENT)) is False
        assert ticker.armed

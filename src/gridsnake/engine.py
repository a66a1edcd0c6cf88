# engine.py
"""
Step engine: pure functions over GameState.

Nothing in here knows about pygame, timers or sound; the Game controller
decides when to call these and what to do with the outcome.
"""
import logging
from enum import Enum
from typing import Iterable, List, Optional

import numpy as np  # type: ignore

from .config import START_CELL, START_DIRECTION, Direction, is_opposite
from .grid import GridSize
from .state import Cell, GameState, Phase

logger = logging.getLogger(__name__)


class Outcome(Enum):
    MOVED = "moved"
    ATE = "ate"
    LOST = "lost"
    WON = "won"


# ---------- Apple placement ----------
def free_cells(snake: Iterable[Cell], grid: GridSize, exclude: Optional[Cell] = None) -> np.ndarray:
    """(n, 2) array of (x, y) cells not covered by the snake or `exclude`."""
    occupied = np.zeros((grid.cells_y, grid.cells_x), dtype=bool)
    for x, y in snake:
        if grid.contains((x, y)):
            occupied[y, x] = True
    if exclude is not None and grid.contains(exclude):
        occupied[exclude[1], exclude[0]] = True
    ys, xs = np.nonzero(~occupied)
    return np.column_stack((xs, ys))


def spawn_apple(
    snake: List[Cell],
    grid: GridSize,
    rng: np.random.Generator,
    exclude: Optional[Cell] = None,
) -> Optional[Cell]:
    """
    Pick a cell uniformly among the free ones.
    Returns None when the snake (plus `exclude`) covers the whole board.
    """
    free = free_cells(snake, grid, exclude)
    if len(free) == 0:
        return None
    x, y = free[rng.integers(len(free))]
    return (int(x), int(y))


# ---------- Rules ----------
def next_head(head: Cell, direction: Direction) -> Cell:
    dx, dy = direction.delta
    return (head[0] + dx, head[1] + dy)


def check_rules(snake: List[Cell], grid: GridSize) -> bool:
    """True if the head is on the board and not on any other segment."""
    head = snake[0]
    if not grid.contains(head):
        return False
    return head not in snake[1:]


# ---------- State transitions ----------
def new_game_state(grid: GridSize) -> GameState:
    return GameState(grid=grid)


def reset_game(state: GameState, rng: np.random.Generator) -> None:
    """(Re)start: one segment at START_CELL heading START_DIRECTION, score 0."""
    state.phase = Phase.RUNNING
    state.score = 0
    state.snake = [START_CELL]
    state.direction = START_DIRECTION
    state.pending = START_DIRECTION
    state.blocked = False
    state.ticks = 0

    # keep the first apple off the cell straight ahead
    ahead = next_head(START_CELL, START_DIRECTION)
    state.apple = spawn_apple(state.snake, state.grid, rng, exclude=ahead)
    if state.apple is None:
        state.apple = spawn_apple(state.snake, state.grid, rng)


def latch_direction(state: GameState, direction: Direction) -> bool:
    """
    Buffer a turn for the next tick. Accepts at most one turn per tick;
    repeats of the current heading and 180° reversals are ignored.
    """
    if state.phase is not Phase.RUNNING or state.blocked:
        return False
    if direction == state.direction or is_opposite(direction, state.direction):
        return False
    state.pending = direction
    state.blocked = True
    return True


def step_game(state: GameState, rng: np.random.Generator) -> Outcome:
    """Advance the snake one cell and apply the eat and collision rules."""
    if state.phase is not Phase.RUNNING:
        raise RuntimeError(f"cannot step a game in phase {state.phase.value}")

    before = list(state.snake)

    # Commit direction once per tick
    state.direction = state.pending
    head = next_head(before[0], state.direction)

    # Every segment moves into the cell its predecessor held before this tick
    state.snake = [head] + before[:-1]
    state.ticks += 1
    outcome = Outcome.MOVED

    if head == state.apple:
        state.snake.append(before[-1])
        state.score += 1
        state.apple = spawn_apple(state.snake, state.grid, rng, exclude=before[0])
        outcome = Outcome.ATE

    if not check_rules(state.snake, state.grid):
        state.phase = Phase.LOST
        state.blocked = True
        logger.debug("fatal move to %s after %d ticks", head, state.ticks)
        return Outcome.LOST

    if outcome is Outcome.ATE and state.apple is None:
        # ate the last free cell
        state.phase = Phase.WON
        state.blocked = True
        return Outcome.WON

    state.blocked = False
    return outcome

# state.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .config import START_DIRECTION, Direction
from .grid import GridSize

Cell = Tuple[int, int]


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    LOST = "lost"
    WON = "won"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a game, everything the renderer is allowed to see."""
    phase: Phase
    score: int
    snake: Tuple[Cell, ...]
    apple: Optional[Cell]
    cells_x: int
    cells_y: int

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING


@dataclass
class GameState:
    grid: GridSize

    # --- display: a change here means the frame has to be redrawn ---
    phase: Phase = Phase.IDLE
    score: int = 0
    snake: List[Cell] = field(default_factory=list)   # head at index 0
    apple: Optional[Cell] = None

    # --- simulation internals ---
    direction: Direction = START_DIRECTION
    pending: Direction = START_DIRECTION
    blocked: bool = False    # latch: one accepted turn per tick, restart debounce
    ticks: int = 0

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def snapshot(self) -> Snapshot:
        return Snapshot(
            phase=self.phase,
            score=self.score,
            snake=tuple(self.snake),
            apple=self.apple,
            cells_x=self.grid.cells_x,
            cells_y=self.grid.cells_y,
        )

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

# ----- Window & grid -----
WIDTH, HEIGHT = 720, 600
CELL_SIZE = 30
MOBILE_WIDTH = 660     # narrower windows get the on-screen control pad
HUD_HEIGHT = 40
CONTROLS_HEIGHT = 180
MARGIN = 10

# ----- Timing -----
TICK_MS = 200
COOLDOWN_MS = 500
FPS = 60

# ----- Colors -----
BG      = (24, 24, 28)
CANVAS  = (236, 236, 228)
SNAKE   = (0, 149, 0)      # #009500
APPLE   = (255, 0, 0)      # #f00
TEXT    = (220, 220, 230)
LOST    = (235, 90, 90)
OVERLAY = (0, 0, 0, 160)
BUTTON  = (60, 60, 72)

# ----- Directions -----
class Direction(IntEnum):
    # same order as the arrow key codes 37..40
    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite == b


# ----- Starting position -----
START_CELL = (1, 1)
START_DIRECTION = Direction.RIGHT

# ----- Audio -----
SAMPLE_RATE = 22050


# ----- Tunables (what the CLI can override) -----
@dataclass
class Config:
    width: int = WIDTH
    height: int = HEIGHT
    cell_size: int = CELL_SIZE
    tick_ms: int = TICK_MS
    cooldown_ms: int = COOLDOWN_MS
    fps: int = FPS
    mobile_width: int = MOBILE_WIDTH
    seed: Optional[int] = None
    sound: bool = True

    def validate(self) -> "Config":
        """Raise ValueError on settings the game cannot run with."""
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.cooldown_ms < 0:
            raise ValueError(f"cooldown_ms must not be negative, got {self.cooldown_ms}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"window size must be positive, got {self.width}x{self.height}")
        return self


CFG = Config()

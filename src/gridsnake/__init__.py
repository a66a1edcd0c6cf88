"""Snake on a grid, played in a pygame window."""

from .config import Config, Direction
from .engine import Outcome
from .game import Game
from .grid import GridSize, Layout, fit_grid
from .state import GameState, Phase, Snapshot

__all__ = [
    "Config", "Direction", "Outcome", "Game",
    "GridSize", "Layout", "fit_grid",
    "GameState", "Phase", "Snapshot",
]

# grid.py
from dataclasses import dataclass, field
from typing import Dict, Tuple

import pygame  # type: ignore

from .config import CONTROLS_HEIGHT, HUD_HEIGHT, MARGIN, Direction


@dataclass(frozen=True)
class GridSize:
    cells_x: int
    cells_y: int
    cell_size: int

    @property
    def canvas_width(self) -> int:
        return self.cells_x * self.cell_size

    @property
    def canvas_height(self) -> int:
        return self.cells_y * self.cell_size

    @property
    def cell_count(self) -> int:
        return self.cells_x * self.cells_y

    def contains(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.cells_x and 0 <= y < self.cells_y


def fit_grid(width: int, height: int, cell_size: int) -> GridSize:
    """
    Largest grid of whole cells that fits a width x height container.
    A container smaller than one cell gives a 0-sized grid, which is legal.
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    return GridSize(
        cells_x=max(width, 0) // cell_size,
        cells_y=max(height, 0) // cell_size,
        cell_size=cell_size,
    )


@dataclass
class Layout:
    """Where things go in the window: score bar, canvas, optional control pad."""
    grid: GridSize
    hud: pygame.Rect
    canvas: pygame.Rect
    controls: Dict[Direction, pygame.Rect] = field(default_factory=dict)

    @classmethod
    def for_window(cls, width: int, height: int, cell_size: int, mobile_width: int) -> "Layout":
        hud = pygame.Rect(0, 0, width, HUD_HEIGHT)
        has_pad = width < mobile_width
        pad_h = CONTROLS_HEIGHT if has_pad else 0

        container = pygame.Rect(
            MARGIN,
            HUD_HEIGHT,
            max(width - 2 * MARGIN, 0),
            max(height - HUD_HEIGHT - pad_h - MARGIN, 0),
        )
        grid = fit_grid(container.width, container.height, cell_size)
        canvas = pygame.Rect(0, 0, grid.canvas_width, grid.canvas_height)
        canvas.center = container.center

        controls: Dict[Direction, pygame.Rect] = {}
        if has_pad:
            pad = pygame.Rect(0, height - pad_h, width, pad_h)
            controls = control_pad(pad)
        return cls(grid=grid, hud=hud, canvas=canvas, controls=controls)

    def button_at(self, pos: Tuple[int, int]):
        for direction, rect in self.controls.items():
            if rect.collidepoint(pos):
                return direction
        return None


def control_pad(area: pygame.Rect) -> Dict[Direction, pygame.Rect]:
    """Up on top, left and right in the middle row, down at the bottom."""
    size = area.height // 3
    cx, top = area.centerx, area.top
    return {
        Direction.UP:    pygame.Rect(cx - size // 2, top, size, size),
        Direction.LEFT:  pygame.Rect(cx - size // 2 - size, top + size, size, size),
        Direction.RIGHT: pygame.Rect(cx + size // 2, top + size, size, size),
        Direction.DOWN:  pygame.Rect(cx - size // 2, top + 2 * size, size, size),
    }

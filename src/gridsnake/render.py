# render.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import APPLE, BG, BUTTON, CANVAS, LOST, OVERLAY, SNAKE, TEXT, Direction
from .grid import Layout
from .state import Phase, Snapshot

ARROWS = {
    Direction.UP: ((0.5, 0.25), (0.25, 0.7), (0.75, 0.7)),
    Direction.DOWN: ((0.5, 0.75), (0.25, 0.3), (0.75, 0.3)),
    Direction.LEFT: ((0.25, 0.5), (0.7, 0.25), (0.7, 0.75)),
    Direction.RIGHT: ((0.75, 0.5), (0.3, 0.25), (0.3, 0.75)),
}


# ---------- Cells ----------
def draw_cell(surface: pygame.Surface, gx: int, gy: int, size: int, color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(surface, color, pygame.Rect(gx * size, gy * size, size, size))


def draw_apple(surface: pygame.Surface, gx: int, gy: int, size: int) -> None:
    # circle inscribed in the cell
    center = (gx * size + size // 2, gy * size + size // 2)
    pygame.draw.circle(surface, APPLE, center, size // 2)


class Renderer:
    """Paints a Snapshot. Holds no game state of its own."""

    def __init__(self, layout: Layout, font: Optional[pygame.font.Font] = None,
                 title_font: Optional[pygame.font.Font] = None):
        self.layout = layout
        self.canvas = pygame.Surface(layout.canvas.size)
        self.font = font or pygame.font.Font(None, 30)
        self.title_font = title_font or pygame.font.Font(None, 44)

    def draw_board(self, snap: Snapshot) -> pygame.Surface:
        size = self.layout.grid.cell_size
        self.canvas.fill(CANVAS)
        for x, y in snap.snake:
            draw_cell(self.canvas, x, y, size, SNAKE)
        if snap.apple is not None:
            draw_apple(self.canvas, snap.apple[0], snap.apple[1], size)
        return self.canvas

    def draw(self, screen: pygame.Surface, snap: Snapshot) -> None:
        screen.fill(BG)
        screen.blit(self.draw_board(snap), self.layout.canvas.topleft)

        score = self.font.render(f"Score: {snap.score}", True, TEXT)
        screen.blit(score, score.get_rect(center=self.layout.hud.center))

        self.draw_controls(screen)
        if not snap.running:
            self.draw_overlay(screen, snap)

    def draw_controls(self, screen: pygame.Surface) -> None:
        for direction, rect in self.layout.controls.items():
            pygame.draw.rect(screen, BUTTON, rect, border_radius=8)
            points = [(rect.x + fx * rect.w, rect.y + fy * rect.h) for fx, fy in ARROWS[direction]]
            pygame.draw.polygon(screen, TEXT, points)

    def draw_overlay(self, screen: pygame.Surface, snap: Snapshot) -> None:
        width, height = screen.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill(OVERLAY)
        screen.blit(overlay, (0, 0))

        if snap.phase is Phase.LOST:
            lines = [
                (self.title_font, "Your snake has died :(", LOST),
                (self.font, f"Your score: {snap.score}", TEXT),
                (self.font, "Press to restart", TEXT),
            ]
        elif snap.phase is Phase.WON:
            lines = [
                (self.title_font, "Your snake filled the board!", SNAKE),
                (self.font, f"Your score: {snap.score}", TEXT),
                (self.font, "Press to restart", TEXT),
            ]
        else:
            lines = [(self.title_font, "Press to start :)", TEXT)]

        y = height // 2 - 20 * (len(lines) - 1)
        for font, text, color in lines:
            surf = font.render(text, True, color)
            screen.blit(surf, surf.get_rect(center=(width // 2, y)))
            y += 40

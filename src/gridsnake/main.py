# main.py
import argparse
import logging
from typing import List, Optional

import numpy as np  # type: ignore
import pygame  # type: ignore

from .audio import SoundBoard
from .config import CFG, Config
from .controls import InputSubscription
from .game import Game
from .grid import Layout
from .render import Renderer
from .ticker import COOLDOWN_EVENT, TICK_EVENT, Ticker

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Snake on a grid.")
    parser.add_argument("--width", type=int, default=CFG.width, help="window width in pixels")
    parser.add_argument("--height", type=int, default=CFG.height, help="window height in pixels")
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size, help="pixels per grid cell")
    parser.add_argument("--tick-ms", type=int, default=CFG.tick_ms, help="milliseconds per snake step")
    parser.add_argument(
        "--cooldown-ms",
        type=int,
        default=CFG.cooldown_ms,
        help="input is ignored this long after the game ends",
    )
    parser.add_argument("--fps", type=int, default=CFG.fps)
    parser.add_argument("--seed", type=int, default=None, help="seed apple placement")
    parser.add_argument("--mute", action="store_true", help="no sound")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = Config(
        width=args.width,
        height=args.height,
        cell_size=args.cell_size,
        tick_ms=args.tick_ms,
        cooldown_ms=args.cooldown_ms,
        fps=args.fps,
        seed=args.seed,
        sound=not args.mute,
    )
    try:
        return cfg.validate()
    except ValueError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    cfg = parse_args(argv)

    pygame.init()
    screen = pygame.display.set_mode((cfg.width, cfg.height))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    layout = Layout.for_window(cfg.width, cfg.height, cfg.cell_size, cfg.mobile_width)
    game = Game(
        layout.grid,
        ticker=Ticker(cfg.tick_ms, TICK_EVENT),
        cooldown=Ticker(cfg.cooldown_ms, COOLDOWN_EVENT),
        sounds=SoundBoard.load(cfg.sound),
        rng=np.random.default_rng(cfg.seed),
    )
    renderer = Renderer(layout)
    logger.info("grid %dx%d, canvas %dx%d px",
                layout.grid.cells_x, layout.grid.cells_y,
                layout.grid.canvas_width, layout.grid.canvas_height)

    with InputSubscription(game, layout) as inputs:
        while not inputs.quit_requested:
            # 1) input and timers
            for event in pygame.event.get():
                if not inputs.dispatch(event):
                    game.handle_timer(event)

            # 2) render
            renderer.draw(screen, game.snapshot())
            pygame.display.flip()
            clock.tick(cfg.fps)

    game.ticker.cancel()
    game.cooldown.cancel()
    pygame.quit()


if __name__ == "__main__":
    main()

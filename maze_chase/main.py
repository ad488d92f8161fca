#!/usr/bin/env python3
"""
Maze Chase - Main Entry Point

A robber flees a cop through a freshly carved maze. The robber can
teleport itself and the cop once each; the cop fires bullets that fly
straight through walls, or missiles that ricochet along open passages.

Usage:
    maze-chase [--rows N] [--cols N] [--seed N]

Controls:
    Robber: W/A/S/D move, Q teleport self, E teleport cop
    Cop: Arrow keys move, / shoot, . shoot missile
    Escape: Quit

Every setting can also come from MAZE_CHASE_* environment variables or .env.
"""
import argparse
import asyncio
import logging
import random

import pygame

from maze_chase.config import Settings
from maze_chase.gameplay.loop import GameLoop, GameEvent
from maze_chase.gameplay.state import new_game
from maze_chase.tick_engine import TickEngine
from maze_chase.ui.renderer import Renderer, status_line
from maze_chase.ui.input_handler import InputHandler

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Maze Chase")
    parser.add_argument("--rows", type=int, help="Maze height in cells")
    parser.add_argument("--cols", type=int, help="Maze width in cells")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible maze")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command line overrides applied."""
    overrides = {k: v for k, v in vars(args).items() if v is not None}
    return Settings(**overrides)


def _pump_quit() -> bool:
    """Drain window events, reporting whether the window was closed."""
    should_quit = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            should_quit = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            should_quit = True
    return should_quit


def _log_events(events: list[GameEvent]) -> None:
    for event in events:
        logger.debug(f"Tick event: {event}")


async def run(settings: Settings) -> None:
    """Run one game until the window is closed."""
    rng = random.Random(settings.seed)
    state = new_game(
        rows=settings.rows,
        cols=settings.cols,
        bullet_lifetime=settings.bullet_lifetime,
        missile_lifetime=settings.missile_lifetime,
        rng=rng,
    )
    logger.info(f"Generated {state.maze!r} (seed: {settings.seed})")

    pygame.init()
    renderer = Renderer(settings.rows, settings.cols, settings.cell_size)
    renderer.init_window()

    game_loop = GameLoop(state, sink=renderer)
    input_handler = InputHandler(game_loop)

    # Animate wall removal in traversal order
    if settings.carve_delay_ms > 0:
        for _ in game_loop.carve():
            renderer.draw("Carving maze...")
            if _pump_quit():
                pygame.quit()
                return
            await asyncio.sleep(settings.carve_delay_ms / 1000)
    else:
        game_loop.render_all()

    engine = TickEngine(settings.tick_rate_ms, game_loop, on_events=_log_events)
    await engine.start()

    frame_time = 1 / settings.frame_rate
    should_quit = False
    try:
        while not should_quit:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    should_quit = True
                elif event.type == pygame.KEYDOWN:
                    should_quit = input_handler.handle_key(event.key) or should_quit

            renderer.draw(status_line(game_loop))
            await asyncio.sleep(frame_time)
    finally:
        await engine.stop()
        pygame.quit()


def main(argv=None) -> None:
    """Main entry point."""
    settings = load_settings(parse_args(argv))

    # Configure logging
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    asyncio.run(run(settings))


if __name__ == "__main__":
    main()

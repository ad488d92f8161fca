"""
Pytest fixtures for Maze Chase tests.
"""

import random

import pytest

from maze_chase.gameplay.grid import GridGraph
from maze_chase.gameplay.maze import MazeGenerator
from maze_chase.gameplay.entities import make_robber, make_cop
from maze_chase.gameplay.protocol import CellVisual
from maze_chase.gameplay.state import GameState


class RecordingSink:
    """Render sink that remembers every notification."""

    def __init__(self):
        self.calls: list[tuple[int, CellVisual]] = []

    def render(self, vertex: int, visual: CellVisual) -> None:
        self.calls.append((vertex, visual))

    def latest(self, vertex: int) -> CellVisual | None:
        for called_vertex, visual in reversed(self.calls):
            if called_vertex == vertex:
                return visual
        return None

    def vertices(self) -> set[int]:
        return {vertex for vertex, _ in self.calls}


@pytest.fixture
def make_state():
    """
    Factory for a GameState over a hand-built maze.

    edges: the open connections as (from, to) pairs.
    """

    def _make_state(
        rows: int,
        cols: int,
        edges: list[tuple[int, int]],
        robber: int | None = 0,
        cop: int | None = None,
        bullet_lifetime: int = 10,
        missile_lifetime: int = 20,
        seed: int = 0,
    ) -> GameState:
        grid = GridGraph.build(rows, cols)
        maze = MazeGenerator.reduce(grid, edges)
        cop_vertex = grid.vertex_count - 1 if cop is None else cop
        return GameState(
            grid=grid,
            maze=maze,
            robber=make_robber(robber),
            cop=make_cop(cop_vertex),
            rng=random.Random(seed),
            bullet_lifetime=bullet_lifetime,
            missile_lifetime=missile_lifetime,
        )

    return _make_state


@pytest.fixture
def corridor_edges():
    """Open edges for a single row corridor of the given length."""

    def _corridor(length: int) -> list[tuple[int, int]]:
        return [(v, v + 1) for v in range(length - 1)]

    return _corridor


@pytest.fixture
def sink():
    return RecordingSink()

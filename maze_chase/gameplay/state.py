"""
Explicit game state value.
NO UI DEPENDENCIES.
"""
import random
from dataclasses import dataclass, field
from typing import Optional, List

from .grid import GridGraph
from .maze import MazeGraph, MazeGenerator
from .entities import Agent, Projectile, Role, make_robber, make_cop
from .constants import MAZE_ROWS, MAZE_COLS, START_VERTEX, BULLET_LIFETIME, MISSILE_LIFETIME


@dataclass
class GameState:
    """
    Everything one simulation owns.

    The maze is read-only once generated; agents and projectiles are mutated
    by the game loop only.
    """
    grid: GridGraph
    maze: MazeGraph
    robber: Agent
    cop: Agent
    rng: random.Random
    bullet_lifetime: int = BULLET_LIFETIME
    missile_lifetime: int = MISSILE_LIFETIME
    projectiles: List[Projectile] = field(default_factory=list)

    @property
    def start_vertex(self) -> int:
        return START_VERTEX

    @property
    def goal_vertex(self) -> int:
        return self.grid.vertex_count - 1

    def agent(self, role: Role) -> Agent:
        return self.robber if role == Role.ROBBER else self.cop

    def opponent(self, role: Role) -> Agent:
        return self.cop if role == Role.ROBBER else self.robber

    def live_projectiles(self) -> List[Projectile]:
        return [p for p in self.projectiles if p.is_alive]

    def projectile_at(self, vertex: int) -> Optional[Projectile]:
        for projectile in self.projectiles:
            if projectile.position == vertex:
                return projectile
        return None


def new_game(
    rows: int = MAZE_ROWS,
    cols: int = MAZE_COLS,
    bullet_lifetime: int = BULLET_LIFETIME,
    missile_lifetime: int = MISSILE_LIFETIME,
    rng: Optional[random.Random] = None
) -> GameState:
    """
    Build the grid, carve a maze and place both agents.
    The robber starts on the start vertex, the cop on the goal vertex.
    """
    rng = rng if rng is not None else random.Random()
    grid = GridGraph.build(rows, cols)
    maze = MazeGenerator(grid, rng, start=START_VERTEX).generate()
    return GameState(
        grid=grid,
        maze=maze,
        robber=make_robber(START_VERTEX),
        cop=make_cop(grid.vertex_count - 1),
        rng=rng,
        bullet_lifetime=bullet_lifetime,
        missile_lifetime=missile_lifetime,
    )

"""
Agent movement against maze walls and the other agent.
NO UI DEPENDENCIES.
"""
import logging
import random
from typing import Optional

from .grid import Direction
from .maze import MazeGraph
from .entities import Agent

logger = logging.getLogger(__name__)


class MovementResolver:
    """
    Validates and applies agent moves.

    Every method returns True if the agent moved. Rejected moves change
    nothing.
    """

    def __init__(self, maze: MazeGraph, rng: Optional[random.Random] = None):
        self.maze = maze
        self.grid = maze.grid
        self.rng = rng if rng is not None else random.Random()

    def try_move(
        self,
        agent: Agent,
        other: Agent,
        target: Optional[int],
        direction: Optional[Direction],
        is_teleport: bool = False
    ) -> bool:
        """
        Move agent to target.

        A teleport ignores walls. Stepping onto the other agent's vertex
        pushes through: the agent lands one vertex beyond the other agent if
        that vertex is open from the other agent's side.
        """
        if not agent.is_alive or not self.grid.contains(target):
            return False

        if is_teleport:
            agent.place(target, direction)
            return True

        if target == other.position:
            beyond = self.grid.step(other.position, direction)
            if not self.maze.is_open(other.position, beyond):
                return False
            agent.place(beyond, direction)
            logger.debug(f"{agent.role.name} pushed through to {beyond}")
            return True

        if not self.maze.is_open(agent.position, target):
            return False

        agent.place(target, direction)
        return True

    def try_step(self, agent: Agent, other: Agent, direction: Direction) -> bool:
        """Move agent one vertex in direction."""
        if not agent.is_alive:
            return False
        target = self.grid.step(agent.position, direction)
        return self.try_move(agent, other, target, direction)

    def try_teleport_self(self, agent: Agent, other: Agent) -> bool:
        """Spend the agent's self-teleport on a random vertex."""
        if not agent.can_teleport_self or not agent.is_alive:
            return False

        agent.can_teleport_self = False
        target = self._random_vertex()
        return self.try_move(agent, other, target, agent.facing, is_teleport=True)

    def try_teleport_other(self, agent: Agent, other: Agent) -> bool:
        """Spend the agent's other-teleport to send the other agent to a random vertex."""
        if not agent.can_teleport_other or not agent.is_alive or not other.is_alive:
            return False

        agent.can_teleport_other = False
        target = self._random_vertex()
        return self.try_move(other, agent, target, other.facing, is_teleport=True)

    def _random_vertex(self) -> int:
        return self.rng.randrange(self.grid.vertex_count)


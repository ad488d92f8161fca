"""
Maze generation by randomized depth-first search.
NO UI DEPENDENCIES.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Set, Tuple, FrozenSet

from .grid import GridGraph, Direction

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]


def walls_of(grid: GridGraph, adjacency: Dict[int, Set[int]], vertex: int) -> FrozenSet[Direction]:
    """Walled sides of vertex under the given adjacency."""
    closed = set()
    for direction in Direction:
        if grid.step(vertex, direction) not in adjacency.get(vertex, ()):
            closed.add(direction)
    return frozenset(closed)


@dataclass
class MazeGraph:
    """
    Passable connections of a carved maze, a subgraph of the grid graph.

    `edges` keeps the (from, to) pairs in the order the traversal produced
    them, which is also the order walls were knocked down.
    """
    grid: GridGraph
    adjacency: Dict[int, Set[int]] = field(default_factory=dict)
    edges: List[Edge] = field(default_factory=list)

    def passages(self, vertex: int) -> FrozenSet[int]:
        """Vertices reachable from vertex in one step through an open wall."""
        return frozenset(self.adjacency.get(vertex, ()))

    def is_open(self, a: Optional[int], b: Optional[int]) -> bool:
        """Check if there is no wall between a and b."""
        if a is None or b is None:
            return False
        return b in self.adjacency.get(a, ())

    def walls(self, vertex: int) -> FrozenSet[Direction]:
        """Sides of vertex that are still walled (board edges included)."""
        return walls_of(self.grid, self.adjacency, vertex)

    def connection_count(self) -> int:
        """Number of undirected connections."""
        return sum(len(n) for n in self.adjacency.values()) // 2

    def reachable_from(self, start: int) -> Set[int]:
        """All vertices reachable from start through open walls."""
        seen = {start}
        stack = [start]
        while stack:
            vertex = stack.pop()
            for neighbour in self.adjacency.get(vertex, ()):
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
        return seen

    def __repr__(self) -> str:
        return f"MazeGraph({self.grid.rows}x{self.grid.cols}, connections={self.connection_count()})"


class MazeGenerator:
    """
    Carves a perfect maze (a spanning tree) out of a grid graph.

    The traversal uses an explicit stack of (from, to) pairs. `to` is always
    pushed as a literal grid neighbour of `from`, so each recorded pair is a
    wall that can be removed even when backtracking jumps across the board.

    Usage:
        maze = MazeGenerator(GridGraph.build(15, 15), random.Random(7)).generate()
    """

    def __init__(self, grid: GridGraph, rng: Optional[random.Random] = None, start: int = 0):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.start = start

    def traverse(self) -> List[Edge]:
        """
        Run the randomized DFS and return the (from, to) pairs in visit order.

        Neighbours are re-expanded on every pop, including stale pairs whose
        target was visited after being pushed; the visited check at pop time
        keeps each vertex recorded as a target at most once.
        """
        stack: List[Tuple[Optional[int], int]] = [(None, self.start)]
        visited: Set[int] = set()
        edges: List[Edge] = []

        while stack:
            from_vertex, to_vertex = stack.pop()

            if to_vertex not in visited:
                if from_vertex is not None:
                    edges.append((from_vertex, to_vertex))
                visited.add(to_vertex)

            unvisited = [n for n in self._shuffled_neighbours(to_vertex) if n not in visited]
            for neighbour in unvisited:
                stack.append((to_vertex, neighbour))

        return edges

    def _shuffled_neighbours(self, vertex: int) -> List[int]:
        neighbours = list(self.grid.neighbours(vertex))
        self.rng.shuffle(neighbours)
        return neighbours

    @staticmethod
    def reduce(grid: GridGraph, edges: List[Edge]) -> MazeGraph:
        """Rebuild the maze adjacency from an ordered traversal edge list."""
        maze = MazeGraph(grid=grid, adjacency={v: set() for v in grid})
        for from_vertex, to_vertex in edges:
            maze.adjacency[from_vertex].add(to_vertex)
            maze.adjacency[to_vertex].add(from_vertex)
            maze.edges.append((from_vertex, to_vertex))
        return maze

    def generate(self) -> MazeGraph:
        """Generate a new maze."""
        edges = self.traverse()
        maze = self.reduce(self.grid, edges)
        logger.debug(f"Carved {len(edges)} walls in {self.grid!r}")
        return maze

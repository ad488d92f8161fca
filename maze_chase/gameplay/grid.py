"""
Grid graph over a rectangular board of vertices.
NO UI DEPENDENCIES.

Vertices are integer ids in row-major order: id = row * cols + col.
"""
from typing import Optional, Dict, Tuple, Iterator
from enum import Enum, auto


class Direction(Enum):
    """Cardinal directions."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    def opposite(self) -> 'Direction':
        """Return the opposite direction."""
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]

    def perpendicular(self) -> Tuple['Direction', 'Direction']:
        """Return the two directions at right angles to this one."""
        if self in (Direction.UP, Direction.DOWN):
            return (Direction.LEFT, Direction.RIGHT)
        return (Direction.UP, Direction.DOWN)

    def delta(self) -> Tuple[int, int]:
        """Return (drow, dcol) for this direction."""
        deltas = {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }
        return deltas[self]


class GridGraph:
    """
    Full 4-neighbour adjacency for a rows x cols board, before any walls
    are carved.

    Neighbours of each vertex are stored in the order up, down, left, right,
    each present only if it is inside the board.
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self._neighbours: Dict[int, Tuple[int, ...]] = {}

        vertex = 0
        for row in range(rows):
            for col in range(cols):
                self._neighbours[vertex] = self._vertex_neighbours(row, col, vertex)
                vertex += 1

    @classmethod
    def build(cls, rows: int, cols: int) -> 'GridGraph':
        """Build the grid graph for the given dimensions."""
        return cls(rows, cols)

    def _vertex_neighbours(self, row: int, col: int, vertex: int) -> Tuple[int, ...]:
        neighbours = []
        if row > 0:
            neighbours.append(vertex - self.cols)
        if row < self.rows - 1:
            neighbours.append(vertex + self.cols)
        if col > 0:
            neighbours.append(vertex - 1)
        if col < self.cols - 1:
            neighbours.append(vertex + 1)
        return tuple(neighbours)

    @property
    def vertex_count(self) -> int:
        return self.rows * self.cols

    def contains(self, vertex: Optional[int]) -> bool:
        """Check if a vertex id is on the board."""
        return vertex is not None and 0 <= vertex < self.vertex_count

    def neighbours(self, vertex: int) -> Tuple[int, ...]:
        """Get the grid neighbours of a vertex (up, down, left, right order)."""
        return self._neighbours[vertex]

    def row_col(self, vertex: int) -> Tuple[int, int]:
        """Return (row, col) for a vertex id."""
        return divmod(vertex, self.cols)

    def vertex_at(self, row: int, col: int) -> int:
        """Return the vertex id at (row, col)."""
        return row * self.cols + col

    def offset(self, direction: Direction) -> int:
        """Vertex id offset of one step in the given direction."""
        drow, dcol = direction.delta()
        return drow * self.cols + dcol

    def is_out_of_bounds(self, vertex: int, direction: Direction) -> bool:
        """
        Check whether one step from vertex in direction leaves the board.

        Plain id arithmetic would silently wrap a horizontal step onto the
        neighbouring row, so row edges are checked by column.
        """
        row, col = self.row_col(vertex)
        if direction == Direction.UP:
            return row - 1 < 0
        if direction == Direction.DOWN:
            return row + 1 >= self.rows
        if direction == Direction.LEFT:
            return col == 0
        return col == self.cols - 1

    def step(self, vertex: int, direction: Direction) -> Optional[int]:
        """Get the neighbouring vertex in direction, or None off the board."""
        if not self.contains(vertex) or self.is_out_of_bounds(vertex, direction):
            return None
        return vertex + self.offset(direction)

    def direction_between(self, a: int, b: int) -> Optional[Direction]:
        """Direction of the single step from a to b, or None if not adjacent."""
        for direction in Direction:
            if self.step(a, direction) == b:
                return direction
        return None

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.vertex_count))

    def __repr__(self) -> str:
        return f"GridGraph({self.rows}x{self.cols})"

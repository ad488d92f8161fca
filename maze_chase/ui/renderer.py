"""
Renderer - Receives cell visuals from the game loop and draws them with pygame.
This is a THIN ADAPTER - no game logic here.
"""
import pygame

from maze_chase.gameplay.grid import Direction
from maze_chase.gameplay.loop import GameLoop, GamePhase
from maze_chase.gameplay.protocol import CellVisual, Occupant, Marker


# Layout
STATUS_HEIGHT = 28
WALL_WIDTH = 4

# Colors
COLOR_BG = (209, 213, 219)
COLOR_CELL = (31, 41, 55)
COLOR_WALL = (209, 213, 219)
COLOR_START = (74, 222, 128)
COLOR_GOAL = (248, 113, 113)
COLOR_STATUS = (17, 24, 39)

OCCUPANT_COLORS = {
    Occupant.ROBBER: (250, 204, 21),
    Occupant.COP: (96, 165, 250),
    Occupant.BULLET: (255, 255, 255),
    Occupant.MISSILE: (251, 146, 60),
}

MARKER_COLORS = {
    Marker.START: COLOR_START,
    Marker.GOAL: COLOR_GOAL,
}


class Renderer:
    """
    Render sink backed by a pygame window.

    render() only records the latest visual per vertex, so it is safe to
    call before a window exists. draw() paints the recorded board.
    """

    def __init__(self, rows: int, cols: int, cell_size: int):
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size
        self.cells: dict[int, CellVisual] = {}

        # Created in init_window()
        self.screen = None
        self.font = None

    @property
    def size(self) -> tuple[int, int]:
        return (self.cols * self.cell_size, self.rows * self.cell_size + STATUS_HEIGHT)

    def init_window(self) -> None:
        """Open the game window."""
        self.screen = pygame.display.set_mode(self.size)
        pygame.display.set_caption("Maze Chase")
        self.font = pygame.font.SysFont(None, 22)

    def render(self, vertex: int, visual: CellVisual) -> None:
        self.cells[vertex] = visual

    def cell_rect(self, vertex: int) -> pygame.Rect:
        row, col = divmod(vertex, self.cols)
        return pygame.Rect(col * self.cell_size, row * self.cell_size, self.cell_size, self.cell_size)

    def draw(self, status: str = "") -> None:
        """Paint every recorded cell and the status line."""
        if self.screen is None:
            return

        self.screen.fill(COLOR_BG)
        for vertex, visual in self.cells.items():
            self._draw_cell(vertex, visual)

        if status and self.font is not None:
            text = self.font.render(status, True, COLOR_STATUS)
            self.screen.blit(text, (6, self.rows * self.cell_size + 6))

        pygame.display.flip()

    def _draw_cell(self, vertex: int, visual: CellVisual) -> None:
        rect = self.cell_rect(vertex)
        pygame.draw.rect(self.screen, MARKER_COLORS.get(visual.marker, COLOR_CELL), rect)

        for direction in visual.walls:
            pygame.draw.rect(self.screen, COLOR_WALL, self._wall_rect(rect, direction))

        color = OCCUPANT_COLORS.get(visual.occupant)
        if color is None:
            return
        if visual.occupant in (Occupant.BULLET, Occupant.MISSILE):
            pygame.draw.circle(self.screen, color, rect.center, max(2, self.cell_size // 6))
        else:
            pygame.draw.circle(self.screen, color, rect.center, max(3, self.cell_size // 3))

    @staticmethod
    def _wall_rect(rect: pygame.Rect, direction: Direction) -> pygame.Rect:
        if direction == Direction.UP:
            return pygame.Rect(rect.left, rect.top, rect.width, WALL_WIDTH)
        if direction == Direction.DOWN:
            return pygame.Rect(rect.left, rect.bottom - WALL_WIDTH, rect.width, WALL_WIDTH)
        if direction == Direction.LEFT:
            return pygame.Rect(rect.left, rect.top, WALL_WIDTH, rect.height)
        return pygame.Rect(rect.right - WALL_WIDTH, rect.top, WALL_WIDTH, rect.height)


def status_line(game_loop: GameLoop) -> str:
    """One-line summary of abilities and phase for the bottom bar."""
    if game_loop.phase == GamePhase.ROBBER_ELIMINATED:
        return f"Robber caught on tick {game_loop.tick_number} - Esc to quit"

    robber = game_loop.state.robber
    cop = game_loop.state.cop
    flags = [
        f"teleport self {'ready' if robber.can_teleport_self else 'used'}",
        f"teleport cop {'ready' if robber.can_teleport_other else 'used'}",
        f"cop gun {'ready' if cop.can_shoot else 'reloading'}",
    ]
    return " | ".join(flags)

"""
Tests for the thin pygame adapters. No window is opened.
"""
import pygame

from maze_chase.gameplay.grid import Direction
from maze_chase.gameplay.entities import Role
from maze_chase.gameplay.loop import GameLoop, Action
from maze_chase.gameplay.protocol import RenderSink, Occupant
from maze_chase.ui.input_handler import InputHandler, ROBBER_KEYS, COP_KEYS
from maze_chase.ui.renderer import Renderer, status_line


class TestInputHandler:
    """Key presses become gameplay actions."""

    def test_robber_keys(self, make_state, corridor_edges):
        """D moves the robber right."""
        loop = GameLoop(make_state(1, 5, corridor_edges(5), robber=0, cop=4))
        handler = InputHandler(loop)

        assert handler.handle_key(pygame.K_d) is False
        assert loop.state.robber.position == 1

    def test_cop_keys(self, make_state, corridor_edges):
        """Arrows move the cop and / fires."""
        loop = GameLoop(make_state(1, 5, corridor_edges(5), robber=0, cop=4))
        handler = InputHandler(loop)

        handler.handle_key(pygame.K_LEFT)
        handler.handle_key(pygame.K_SLASH)

        assert loop.state.cop.position == 3
        assert len(loop.state.projectiles) == 1
        assert not loop.state.projectiles[0].is_missile

    def test_missile_key(self, make_state, corridor_edges):
        """Period fires a missile."""
        loop = GameLoop(make_state(1, 5, corridor_edges(5), robber=0, cop=4))
        handler = InputHandler(loop)

        handler.handle_key(pygame.K_LEFT)
        handler.handle_key(pygame.K_PERIOD)
        assert loop.state.projectiles[0].is_missile

    def test_escape_quits(self, make_state):
        """Escape asks to quit."""
        handler = InputHandler(GameLoop(make_state(2, 2, [])))
        assert handler.handle_key(pygame.K_ESCAPE) is True

    def test_unmapped_key_ignored(self, make_state, corridor_edges):
        """Keys without a binding change nothing."""
        loop = GameLoop(make_state(1, 5, corridor_edges(5), robber=0, cop=4))
        handler = InputHandler(loop)

        assert handler.handle_key(pygame.K_z) is False
        assert loop.state.robber.position == 0
        assert loop.state.cop.position == 4

    def test_bindings_do_not_overlap(self):
        """No key controls both agents."""
        assert not set(ROBBER_KEYS) & set(COP_KEYS)
        assert set(ROBBER_KEYS.values()) == {
            Action.MOVE_UP, Action.MOVE_DOWN, Action.MOVE_LEFT, Action.MOVE_RIGHT,
            Action.TELEPORT_SELF, Action.TELEPORT_OTHER,
        }


class TestRenderer:
    """Renderer as a render sink."""

    def test_is_render_sink(self):
        """Renderer satisfies the sink protocol."""
        assert isinstance(Renderer(3, 3, 20), RenderSink)

    def test_records_visuals(self, make_state, corridor_edges):
        """Notifications are stored per vertex without a window."""
        renderer = Renderer(1, 5, 20)
        loop = GameLoop(make_state(1, 5, corridor_edges(5), robber=0, cop=4), sink=renderer)

        loop.render_all()
        assert set(renderer.cells) == set(range(5))

        loop.apply(Role.ROBBER, Action.MOVE_RIGHT)
        assert renderer.cells[0].occupant == Occupant.NONE
        assert renderer.cells[1].occupant == Occupant.ROBBER

        # No window: drawing is a no-op
        renderer.draw("status")

    def test_geometry(self):
        """Cells are laid out row-major above the status bar."""
        renderer = Renderer(3, 4, 10)
        assert renderer.cell_rect(6) == pygame.Rect(20, 10, 10, 10)
        width, height = renderer.size
        assert width == 40
        assert height > 30


class TestStatusLine:
    """Bottom bar text."""

    def test_ready_flags(self, make_state):
        """Unused abilities read as ready."""
        loop = GameLoop(make_state(3, 3, []))
        assert status_line(loop) == "teleport self ready | teleport cop ready | cop gun ready"

    def test_used_flags(self, make_state):
        """Spent abilities are shown."""
        state = make_state(1, 10, [], robber=0, cop=5)
        state.cop.facing = Direction.RIGHT
        loop = GameLoop(state)

        loop.apply(Role.ROBBER, Action.TELEPORT_SELF)
        loop.apply(Role.COP, Action.SHOOT)

        line = status_line(loop)
        assert "teleport self used" in line
        assert "cop gun reloading" in line

    def test_caught(self, make_state):
        """Elimination replaces the flags."""
        state = make_state(1, 10, [], robber=6, cop=5)
        state.cop.facing = Direction.RIGHT
        loop = GameLoop(state)
        loop.apply(Role.COP, Action.SHOOT)
        loop.tick()

        assert status_line(loop).startswith("Robber caught on tick 1")
